"""Domain services: drawer geometry, board packing and cost estimation."""

from __future__ import annotations

from .bin_packing import (
    BoardConfig,
    BoardLayout,
    GuillotineBoardPacker,
    PackingResult,
    PlacedRect,
    Rect,
)
from .drawer_system import (
    DrawerBoxParams,
    build_drawer_box,
    resolve_back_height,
    resolve_slider_length,
)
from .material_estimator import (
    CostSummary,
    HardwareBom,
    MaterialDetail,
    hardware_bom,
    summarize,
)

__all__ = [
    "BoardConfig",
    "BoardLayout",
    "CostSummary",
    "DrawerBoxParams",
    "GuillotineBoardPacker",
    "HardwareBom",
    "MaterialDetail",
    "PackingResult",
    "PlacedRect",
    "Rect",
    "build_drawer_box",
    "hardware_bom",
    "resolve_back_height",
    "resolve_slider_length",
    "summarize",
]
