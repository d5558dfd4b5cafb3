"""Construction settings.

This module provides ConstructionSettings, the read-only parameter tables
that drive panel generation: front reveals, back fitting offsets, drawer
runner clearances and oven housing constraints. All values are in mm.

Settings are passed explicitly into every generator and into the
estimator; generators never mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RevealSettings:
    """Gaps around doors and drawer faces.

    Attributes:
        side_gap: Gap on each side of a door or drawer face.
        vertical_gap: Gap above and below faces, also between stacked drawers.
        center_gap: Gap between doors meeting in the center. None means
            twice the vertical gap.
        hidden_handle_reveal: Finger pull reveal of handleless base fronts.
        upper_handleless_overhang_extra: Extra overhang beyond the corpus
            thickness for handleless upper fronts.
        gola_profile_height: Height of a gola rail above an oven drawer.
    """

    side_gap: float = 2.0
    vertical_gap: float = 2.0
    center_gap: float | None = 4.0
    hidden_handle_reveal: float = 30.0
    upper_handleless_overhang_extra: float = 2.0
    gola_profile_height: float = 48.2

    def __post_init__(self) -> None:
        if self.side_gap < 0 or self.vertical_gap < 0:
            raise ValueError("Reveal gaps must be non-negative")
        if self.center_gap is not None and self.center_gap < 0:
            raise ValueError("center_gap must be non-negative")

    @property
    def effective_center_gap(self) -> float:
        """Center gap between paired doors."""
        if self.center_gap is None:
            return self.vertical_gap * 2
        return self.center_gap


@dataclass(frozen=True)
class BackSettings:
    """Back panel fitting dimensions.

    Attributes:
        inset_offset: Distance of the back dado from the rear edge.
        inset_dado_depth: Depth of the back dado.
        inset_dado_clearance: Dado width beyond the back thickness.
        inset_oversize_full: Back oversize seated in dados on both ends.
        inset_oversize_partial: Back height oversize under split top rails.
        rabbet_width: Width of the rear rabbet.
        rabbet_depth: Depth of the rear rabbet.
        rabbet_clearance: Play left between back edge and rabbet shoulder.
    """

    inset_offset: float = 15.0
    inset_dado_depth: float = 7.0
    inset_dado_clearance: float = 1.0
    inset_oversize_full: float = 12.0
    inset_oversize_partial: float = 5.0
    rabbet_width: float = 9.0
    rabbet_depth: float = 4.0
    rabbet_clearance: float = 1.0

    def __post_init__(self) -> None:
        if self.inset_dado_depth <= 0:
            raise ValueError("inset_dado_depth must be positive")
        if self.rabbet_width <= 0 or self.rabbet_depth <= 0:
            raise ValueError("Rabbet width and depth must be positive")
        if self.rabbet_clearance > self.rabbet_width:
            raise ValueError("rabbet_clearance cannot exceed rabbet_width")


@dataclass(frozen=True)
class CarcassSettings:
    """Corpus construction dimensions.

    Attributes:
        split_top_rail_depth: Depth of each top rail replacing a full top.
    """

    split_top_rail_depth: float = 100.0

    def __post_init__(self) -> None:
        if self.split_top_rail_depth <= 0:
            raise ValueError("split_top_rail_depth must be positive")


@dataclass(frozen=True)
class ShelfSettings:
    """Loose shelf dimensions.

    Attributes:
        depth_setback: Shelf depth reduction from the cabinet depth.
    """

    depth_setback: float = 20.0


@dataclass(frozen=True)
class RailHeight:
    """Runner rail height and the drawer back height it requires."""

    rail: float
    back_height: float

    def __post_init__(self) -> None:
        if self.rail <= 0 or self.back_height <= 0:
            raise ValueError("Rail and back heights must be positive")


@dataclass(frozen=True)
class StandardDrawerSettings:
    """Clearances of wooden drawer boxes on generic slides."""

    side_clearance_total: float = 24.0
    bottom_depth_clearance: float = 20.0
    side_height_reduction: float = 30.0


@dataclass(frozen=True)
class MetaboxSettings:
    """Clearances of metabox runners."""

    width_clearance: float = 31.0
    depth_clearance: float = 42.0
    default_front_setback: float = 30.0


@dataclass(frozen=True)
class VertexSettings:
    """Clearances of vertex runners."""

    width_clearance: float = 19.0
    back_width_clearance: float = 42.0
    depth_shorten: float = 10.0


def _default_rail_heights() -> tuple[RailHeight, ...]:
    return (
        RailHeight(rail=93, back_height=63),
        RailHeight(rail=131, back_height=101),
        RailHeight(rail=178, back_height=148),
    )


@dataclass(frozen=True)
class DrawerSettings:
    """Drawer runner catalogue and per-system clearances.

    Attributes:
        slider_lengths: Runner lengths available for selection.
        rail_heights: Rail height to drawer back height table.
        default_slider_length: Runner length when a cabinet names none.
        default_rail_height: Rail height when a cabinet names none.
        standard: Standard system clearances.
        metabox: Metabox system clearances.
        vertex: Vertex system clearances.
    """

    slider_lengths: tuple[float, ...] = (270, 320, 350, 400, 450, 500, 550)
    rail_heights: tuple[RailHeight, ...] = field(default_factory=_default_rail_heights)
    default_slider_length: float = 400.0
    default_rail_height: float = 131.0
    standard: StandardDrawerSettings = field(default_factory=StandardDrawerSettings)
    metabox: MetaboxSettings = field(default_factory=MetaboxSettings)
    vertex: VertexSettings = field(default_factory=VertexSettings)

    def __post_init__(self) -> None:
        if self.default_slider_length <= 0:
            raise ValueError("default_slider_length must be positive")
        if self.default_rail_height <= 0:
            raise ValueError("default_rail_height must be positive")

    def back_height_for(self, rail: float) -> float | None:
        """Look up the drawer back height for an exact rail height match."""
        for entry in self.rail_heights:
            if entry.rail == rail:
                return entry.back_height
        return None


@dataclass(frozen=True)
class OvenSettings:
    """Built-in oven housing constraints.

    Attributes:
        cavity_height: Height taken by the oven appliance.
        required_width: The only cabinet width an oven fits.
        min_depth: Minimum cabinet depth.
        min_drawer_height: Minimum height left for the drawer below.
        face_height_clearance: Drawer face reduction below the oven.
    """

    cavity_height: float = 600.0
    required_width: float = 600.0
    min_depth: float = 560.0
    min_drawer_height: float = 140.0
    face_height_clearance: float = 2.0


@dataclass(frozen=True)
class ConstructionSettings:
    """All construction parameter tables.

    Example:
        >>> settings = ConstructionSettings()
        >>> settings.backs.rabbet_width
        9.0
    """

    reveals: RevealSettings = field(default_factory=RevealSettings)
    backs: BackSettings = field(default_factory=BackSettings)
    construction: CarcassSettings = field(default_factory=CarcassSettings)
    shelves: ShelfSettings = field(default_factory=ShelfSettings)
    drawers: DrawerSettings = field(default_factory=DrawerSettings)
    oven: OvenSettings = field(default_factory=OvenSettings)


__all__ = [
    "BackSettings",
    "CarcassSettings",
    "ConstructionSettings",
    "DrawerSettings",
    "MetaboxSettings",
    "OvenSettings",
    "RailHeight",
    "RevealSettings",
    "ShelfSettings",
    "StandardDrawerSettings",
    "VertexSettings",
]
