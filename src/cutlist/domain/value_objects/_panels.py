"""Panel records and joinery specifications."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Literal

# Hinge codes: the leading integer is the hinge count per door.
HINGE_LONG_SIDE = "2xDUZ"
HINGE_SHORT_SIDE = "2xSIR"

_HINGE_COUNT_PATTERN = re.compile(r"^(\d+)x")


@dataclass(frozen=True)
class Dado:
    """Groove cut into a panel face to seat an inset back.

    Attributes:
        offset: Distance of the groove from the rear edge in mm.
        depth: Groove depth into the panel in mm.
        width: Groove width in mm (back thickness plus clearance).
    """

    offset: float
    depth: float
    width: float

    def __post_init__(self) -> None:
        if self.depth <= 0 or self.width <= 0:
            raise ValueError("Dado depth and width must be positive")
        if self.offset < 0:
            raise ValueError("Dado offset must be non-negative")

    def to_dict(self) -> dict[str, float]:
        return {"offset": self.offset, "depth": self.depth, "width": self.width}


@dataclass(frozen=True)
class Rabbet:
    """Edge relief along a panel's rear edge that receives the back.

    Attributes:
        depth: Relief depth in mm.
        width: Relief width in mm.
        edge: Edge carrying the rabbet.
    """

    depth: float
    width: float
    edge: Literal["back"] = "back"

    def __post_init__(self) -> None:
        if self.depth <= 0 or self.width <= 0:
            raise ValueError("Rabbet depth and width must be positive")

    def to_dict(self) -> dict[str, Any]:
        return {"edge": self.edge, "depth": self.depth, "width": self.width}


@dataclass(frozen=True)
class Panel:
    """A rectangular part of the cut list.

    Length runs along the edges flagged by ``band_length_*``; width runs
    along the edges flagged by ``band_width_*``. Each banding flag is 0 or 1
    and the four are independent.

    Dimensions are not checked for positivity. A cabinet that fails
    validation may still yield degenerate geometry; callers gate on
    validation themselves.

    Attributes:
        length: Panel length in mm.
        width: Panel width in mm.
        quantity: Number of identical pieces.
        band_length_right: Banding on the right length edge.
        band_length_left: Banding on the left length edge.
        band_width_top: Banding on the top width edge.
        band_width_bottom: Banding on the bottom width edge.
        label: Source cabinet id and panel role, e.g. ``"B1-> Side panel"``.
        hinge_location: Hinge code for door panels, empty otherwise.
        material: Material name.
        material_thickness: Material thickness in mm.
        dados: Dado specifications (inset back construction).
        rabbets: Rabbet specifications (rabbeted back construction).
    """

    length: float
    width: float
    quantity: int
    band_length_right: int
    band_length_left: int
    band_width_top: int
    band_width_bottom: int
    label: str
    material: str
    material_thickness: float
    hinge_location: str = ""
    dados: tuple[Dado, ...] = field(default_factory=tuple)
    rabbets: tuple[Rabbet, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        for flag in self.banding:
            if flag not in (0, 1):
                raise ValueError("Edge banding flags must be 0 or 1")
        if self.dados and self.rabbets:
            raise ValueError("A panel cannot carry both dados and rabbets")

    @property
    def banding(self) -> tuple[int, int, int, int]:
        """Banding flags as (right, left, top, bottom)."""
        return (
            self.band_length_right,
            self.band_length_left,
            self.band_width_top,
            self.band_width_bottom,
        )

    @property
    def area(self) -> float:
        """Total area for all pieces in square mm."""
        return self.length * self.width * self.quantity

    @property
    def edge_banding_length(self) -> float:
        """Total banded edge length in mm across all pieces."""
        along_length = (self.band_length_right + self.band_length_left) * self.length
        along_width = (self.band_width_top + self.band_width_bottom) * self.width
        return (along_length + along_width) * self.quantity

    @property
    def cut_length(self) -> float:
        """Total saw cut length (perimeter) in mm across all pieces."""
        return 2 * (self.length + self.width) * self.quantity

    @property
    def hinge_count(self) -> int:
        """Hinges implied by the hinge code, 0 if none."""
        match = _HINGE_COUNT_PATTERN.match(self.hinge_location)
        return int(match.group(1)) if match else 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the cut list wire format consumed by exporters."""
        data: dict[str, Any] = {
            "label": self.label,
            "length": self.length,
            "width": self.width,
            "quantity": self.quantity,
            "edgeBandingLengthRight": self.band_length_right,
            "edgeBandingLengthLeft": self.band_length_left,
            "edgeBandingWidthBottom": self.band_width_bottom,
            "edgeBandingWidthTop": self.band_width_top,
            "hingeLocation": self.hinge_location,
            "material": self.material,
            "materialThickness": self.material_thickness,
        }
        if self.dados:
            data["dados"] = [d.to_dict() for d in self.dados]
        if self.rabbets:
            data["rabbets"] = [r.to_dict() for r in self.rabbets]
        return data


def hinge_code(height: float, width: float) -> str:
    """Pick the hinge code for a door of the given size.

    Hinges go on the long side of tall doors and the short side of wide ones.
    """
    return HINGE_LONG_SIDE if height > width else HINGE_SHORT_SIDE
