"""Material yield and cost estimation.

Groups panels by material, packs each group onto stock boards and prices
the result together with edge banding and saw cutting. A hardware bill of
materials is derived from the cabinets and the door hinge codes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from ..value_objects import CabinetSpec, MaterialSet, Panel
from .bin_packing import BoardConfig, GuillotineBoardPacker, Rect

logger = logging.getLogger(__name__)

__all__ = ["CostSummary", "HardwareBom", "MaterialDetail", "hardware_bom", "summarize"]

# Fastening points per cabinet; a split top needs two more for its rails.
CONNECTIONS_PER_CABINET = 4
SPLIT_TOP_EXTRA_CONNECTIONS = 2


@dataclass(frozen=True)
class MaterialDetail:
    """Board usage and cost of one material.

    Attributes:
        material: Material name.
        boards: Number of stock boards consumed.
        cost: Board cost.
        waste_percentage: Share of the boards left unused.
    """

    material: str
    boards: int
    cost: float
    waste_percentage: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"material": self.material, "boards": self.boards, "cost": self.cost}


@dataclass(frozen=True)
class HardwareBom:
    """Hardware counts implied by a set of cabinets.

    Attributes:
        screws: Assembly screws.
        dowels: Assembly dowels.
        hinges: Door hinges.
        slides: Drawer runners (two per drawer).
    """

    screws: int = 0
    dowels: int = 0
    hinges: int = 0
    slides: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "screws": self.screws,
            "dowels": self.dowels,
            "hinges": self.hinges,
            "slides": self.slides,
        }


@dataclass(frozen=True)
class CostSummary:
    """Estimated cost of a cut list.

    Attributes:
        materials: Per-material board usage in first-seen panel order.
        edge_band_cost: Cost of edge banding.
        cut_cost: Cost of saw cutting.
        materials_cost: Sum of board costs.
        total: Grand total.
        bom: Hardware bill of materials.
        edge_band_length_m: Total banded edge length in meters.
        cut_length_m: Total cut length in meters.
    """

    materials: tuple[MaterialDetail, ...] = ()
    edge_band_cost: float = 0.0
    cut_cost: float = 0.0
    materials_cost: float = 0.0
    total: float = 0.0
    bom: HardwareBom = field(default_factory=HardwareBom)
    edge_band_length_m: float = 0.0
    cut_length_m: float = 0.0

    @property
    def board_count(self) -> int:
        return sum(detail.boards for detail in self.materials)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the cost summary wire format."""
        return {
            "materials": [detail.to_dict() for detail in self.materials],
            "edgeBandCost": self.edge_band_cost,
            "cutCost": self.cut_cost,
            "materialsCost": self.materials_cost,
            "total": self.total,
            "bom": self.bom.to_dict(),
        }


def _group_rects(panels: Iterable[Panel]) -> dict[str, list[Rect]]:
    """Expand panels into unit rectangles keyed by material name."""
    grouped: dict[str, list[Rect]] = {}
    for panel in panels:
        rects = grouped.setdefault(panel.material, [])
        rects.extend(
            Rect(width=panel.width, height=panel.length, label=panel.label)
            for _ in range(panel.quantity)
        )
    return grouped


def hardware_bom(panels: Iterable[Panel], cabinets: Iterable[CabinetSpec]) -> HardwareBom:
    """Count hardware for the cabinets and their door panels."""
    connections = 0
    drawers = 0
    for cabinet in cabinets:
        connections += CONNECTIONS_PER_CABINET
        if not cabinet.options.full:
            connections += SPLIT_TOP_EXTRA_CONNECTIONS
        drawers += cabinet.drawer_count
    hinges = sum(panel.hinge_count for panel in panels)
    return HardwareBom(
        screws=connections * 2,
        dowels=connections * 2,
        hinges=hinges,
        slides=drawers * 2,
    )


def summarize(
    panels: Sequence[Panel],
    materials: MaterialSet,
    cabinets: Sequence[CabinetSpec] = (),
    board: BoardConfig | None = None,
) -> CostSummary:
    """Estimate board usage, processing cost and hardware for a cut list.

    Args:
        panels: Panels of all cabinets.
        materials: Material set supplying prices. Materials whose name is
            not in the set cost nothing.
        cabinets: Cabinets the panels came from, for the hardware count.
        board: Stock board dimensions.

    Returns:
        CostSummary with materials in first-seen panel order.
    """
    board = board or BoardConfig()
    packer = GuillotineBoardPacker(board)
    prices = materials.cost_by_name()

    details = []
    for material, rects in _group_rects(panels).items():
        result = packer.pack(rects)
        cost = result.board_count * board.area_m2 * prices.get(material, 0.0)
        details.append(
            MaterialDetail(
                material=material,
                boards=result.board_count,
                cost=cost,
                waste_percentage=result.waste_percentage,
            )
        )

    edge_band_length = sum(panel.edge_banding_length for panel in panels) / 1000
    cut_length = sum(panel.cut_length for panel in panels) / 1000
    edge_band_cost = edge_band_length * materials.edge_banding_cost_per_meter
    cut_cost = cut_length * materials.cut_cost_per_meter
    materials_cost = sum(detail.cost for detail in details)

    logger.debug(
        f"Estimated {len(details)} materials, {sum(d.boards for d in details)} boards"
    )
    return CostSummary(
        materials=tuple(details),
        edge_band_cost=edge_band_cost,
        cut_cost=cut_cost,
        materials_cost=materials_cost,
        total=materials_cost + edge_band_cost + cut_cost,
        bom=hardware_bom(panels, cabinets),
        edge_band_length_m=edge_band_length,
        cut_length_m=cut_length,
    )
