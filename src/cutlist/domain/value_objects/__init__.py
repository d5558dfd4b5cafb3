"""Value objects for the cut list domain.

This module provides immutable data types used throughout the cut list
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Cabinet specifications
from ._cabinets import (
    BackFitting,
    CabinetKind,
    CabinetOptions,
    CabinetSpec,
    DrawerSystem,
    Placement,
)

# Materials
from ._materials import Material, MaterialSet

# Panels and joinery
from ._panels import (
    HINGE_LONG_SIDE,
    HINGE_SHORT_SIDE,
    Dado,
    Panel,
    Rabbet,
    hinge_code,
)

__all__ = [
    "BackFitting",
    "CabinetKind",
    "CabinetOptions",
    "CabinetSpec",
    "Dado",
    "DrawerSystem",
    "HINGE_LONG_SIDE",
    "HINGE_SHORT_SIDE",
    "Material",
    "MaterialSet",
    "Panel",
    "Placement",
    "Rabbet",
    "hinge_code",
]
