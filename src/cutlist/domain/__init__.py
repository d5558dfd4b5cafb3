"""Domain layer - cabinet panel generation and cost estimation."""

from .errors import ConstructionConflictError
from .generators import (
    back_reduction,
    base_panels,
    cabinet_issues,
    generate_panels,
    validate_cabinet,
)
from .services import (
    BoardConfig,
    CostSummary,
    DrawerBoxParams,
    GuillotineBoardPacker,
    HardwareBom,
    MaterialDetail,
    PackingResult,
    build_drawer_box,
    resolve_back_height,
    summarize,
)
from .settings import ConstructionSettings
from .value_objects import (
    BackFitting,
    CabinetKind,
    CabinetOptions,
    CabinetSpec,
    Dado,
    DrawerSystem,
    Material,
    MaterialSet,
    Panel,
    Placement,
    Rabbet,
)

__all__ = [
    "BackFitting",
    "BoardConfig",
    "CabinetKind",
    "CabinetOptions",
    "CabinetSpec",
    "ConstructionConflictError",
    "ConstructionSettings",
    "CostSummary",
    "Dado",
    "DrawerBoxParams",
    "DrawerSystem",
    "GuillotineBoardPacker",
    "HardwareBom",
    "Material",
    "MaterialDetail",
    "MaterialSet",
    "PackingResult",
    "Panel",
    "Placement",
    "Rabbet",
    "back_reduction",
    "base_panels",
    "build_drawer_box",
    "cabinet_issues",
    "generate_panels",
    "resolve_back_height",
    "summarize",
    "validate_cabinet",
]
