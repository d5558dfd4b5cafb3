"""Panel generators for each cabinet kind.

Each kind maps to a pair of functions: one producing the ordered panel
list, one reporting validation issues. Panel generation never consults
validation; callers gate on ``validate_cabinet`` themselves.

Example:
    >>> spec = CabinetSpec.door("B1", 600, 720, 560, doors=1)
    >>> panels = generate_panels(spec, ConstructionSettings(), MaterialSet())
    >>> panels[0].label
    'B1-> Side panel'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from ..settings import ConstructionSettings
from ..value_objects import CabinetKind, CabinetSpec, MaterialSet, Panel
from .corner import corner_issues, corner_panels
from .corpus import back_reduction, base_panels
from .door import door_issues, door_panels
from .drawer import drawer_issues, drawer_panels, round_half_up
from .oven import oven_issues, oven_panels

logger = logging.getLogger(__name__)

PanelBuilder = Callable[[CabinetSpec, ConstructionSettings, MaterialSet], list[Panel]]
IssueChecker = Callable[[CabinetSpec, ConstructionSettings], list[str]]


@dataclass(frozen=True)
class CabinetGenerator:
    """Panel builder and validation check for one cabinet kind."""

    build: PanelBuilder
    issues: IssueChecker


GENERATORS: dict[CabinetKind, CabinetGenerator] = {
    CabinetKind.DOOR: CabinetGenerator(door_panels, door_issues),
    CabinetKind.DRAWER: CabinetGenerator(drawer_panels, drawer_issues),
    CabinetKind.CORNER: CabinetGenerator(corner_panels, corner_issues),
    CabinetKind.OVEN: CabinetGenerator(oven_panels, oven_issues),
}


def generate_panels(
    spec: CabinetSpec,
    settings: ConstructionSettings,
    materials: MaterialSet,
) -> list[Panel]:
    """Generate the ordered cut list panels of one cabinet.

    Args:
        spec: Cabinet to build.
        settings: Construction settings.
        materials: Material set.

    Returns:
        Panels in a stable order: corpus panels first, then the panels
        specific to the cabinet kind.
    """
    panels = GENERATORS[spec.kind].build(spec, settings, materials)
    logger.debug(f"Generated {len(panels)} panels for {spec.kind.value} cabinet {spec.id}")
    return panels


def cabinet_issues(spec: CabinetSpec, settings: ConstructionSettings) -> list[str]:
    """Describe every validation failure of a cabinet, empty if valid."""
    return GENERATORS[spec.kind].issues(spec, settings)


def validate_cabinet(spec: CabinetSpec, settings: ConstructionSettings) -> bool:
    """Return True if the cabinet passes its kind's validation checks."""
    return not cabinet_issues(spec, settings)


__all__ = [
    "GENERATORS",
    "CabinetGenerator",
    "back_reduction",
    "base_panels",
    "cabinet_issues",
    "corner_panels",
    "door_panels",
    "drawer_panels",
    "generate_panels",
    "oven_panels",
    "round_half_up",
    "validate_cabinet",
]
