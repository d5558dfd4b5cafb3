"""Sheet materials used by the generators and the cost estimator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Material:
    """Board material.

    Attributes:
        name: Material name, also the grouping key for board packing.
        thickness: Thickness in mm.
        cost_per_m2: Price of raw board per square meter.
    """

    name: str
    thickness: float
    cost_per_m2: float = 0.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Material name must not be empty")
        if self.thickness <= 0:
            raise ValueError("Material thickness must be positive")
        if self.cost_per_m2 < 0:
            raise ValueError("Material cost must be non-negative")


@dataclass(frozen=True)
class MaterialSet:
    """The four materials a cabinet is built from, plus processing rates.

    Attributes:
        corpus: Carcass material (sides, bottom, top, shelves).
        front: Door and drawer face material.
        back: Back panel material.
        drawer: Drawer box material.
        edge_banding_cost_per_meter: Price of applied edge banding per meter.
        cut_cost_per_meter: Price of saw cutting per meter.
    """

    corpus: Material = field(default_factory=lambda: Material("Corpus", 18))
    front: Material = field(default_factory=lambda: Material("Front", 19))
    back: Material = field(default_factory=lambda: Material("Back", 3))
    drawer: Material = field(default_factory=lambda: Material("Drawer", 16))
    edge_banding_cost_per_meter: float = 0.0
    cut_cost_per_meter: float = 0.0

    def __post_init__(self) -> None:
        if self.edge_banding_cost_per_meter < 0:
            raise ValueError("Edge banding cost must be non-negative")
        if self.cut_cost_per_meter < 0:
            raise ValueError("Cut cost must be non-negative")

    def cost_by_name(self) -> dict[str, float]:
        """Map material name to cost per square meter.

        When two roles share a name the later role wins, matching the order
        corpus, front, back, drawer.
        """
        return {
            material.name: material.cost_per_m2
            for material in (self.corpus, self.front, self.back, self.drawer)
        }
