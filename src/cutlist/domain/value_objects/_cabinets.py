"""Cabinet specification value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Sequence

from ..errors import ConstructionConflictError


class CabinetKind(str, Enum):
    """Cabinet variants with their own panel generator."""

    DOOR = "door"
    DRAWER = "drawer"
    CORNER = "corner"
    OVEN = "oven"


class DrawerSystem(str, Enum):
    """Drawer runner systems with distinct clearance rules.

    Attributes:
        STANDARD: Wooden drawer box on generic slides.
        METABOX: Steel side metabox runners.
        VERTEX: Double-wall vertex runners.
    """

    STANDARD = "standard"
    METABOX = "metabox"
    VERTEX = "vertex"


class BackFitting(str, Enum):
    """How the back panel is fitted to the corpus."""

    FLUSH = "flush"
    INSET = "inset"
    RABBET = "rabbet"


@dataclass(frozen=True)
class CabinetOptions:
    """Construction options.

    ``inset_back`` and ``rabbet_back`` are meant to be exclusive; when both
    are set the inset back wins.

    Attributes:
        full: Full top panel instead of two top rails.
        inset_back: Back seated in dados cut into the corpus.
        rabbet_back: Back seated in rabbets along the rear edges.
        hidden_handles: Handleless fronts (gola / finger pull reveal).
    """

    full: bool = False
    inset_back: bool = False
    rabbet_back: bool = False
    hidden_handles: bool = False

    @property
    def back_fitting(self) -> BackFitting:
        if self.inset_back:
            return BackFitting.INSET
        if self.rabbet_back:
            return BackFitting.RABBET
        return BackFitting.FLUSH


@dataclass(frozen=True)
class Placement:
    """Layout position of a cabinet. Never read by panel generation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: float = 0.0
    wall: Literal["north", "south", "east", "west"] | None = None


@dataclass(frozen=True)
class CabinetSpec:
    """Abstract description of one cabinet placement.

    Dimensions are nominal outside dimensions in mm. Variant fields that do
    not apply to ``kind`` are ignored by the generators.

    Attributes:
        id: Identifier, unique within a layout; prefixes every panel label.
        kind: Cabinet variant.
        width: Outside width in mm.
        height: Outside height in mm.
        depth: Outside depth in mm.
        options: Construction options.
        upper: Wall-hung cabinet (changes handleless front overhang).
        doors: Door count (door cabinets).
        shelves: Loose shelf count (door cabinets).
        drawers: Drawer count (drawer cabinets).
        drawer_heights: Face height share of each drawer in percent.
        drawer_system: Runner system for drawer and oven cabinets.
        slider_length: Runner length in mm, None for the configured default.
        rail_height: Runner rail height in mm, None for the configured default.
        fixed_side: Width of the fixed leg of a corner cabinet in mm.
        placement: Layout position, carried through untouched.

    Raises:
        ValueError: If a dimension is not positive.
        ConstructionConflictError: If an oven cabinet asks for a fitted back.
    """

    id: str
    kind: CabinetKind
    width: float
    height: float
    depth: float
    options: CabinetOptions = field(default_factory=CabinetOptions)
    upper: bool = False
    doors: int = 0
    shelves: int = 0
    drawers: int = 0
    drawer_heights: tuple[float, ...] = field(default_factory=tuple)
    drawer_system: DrawerSystem = DrawerSystem.STANDARD
    slider_length: float | None = None
    rail_height: float | None = None
    fixed_side: float = 0.0
    placement: Placement = field(default_factory=Placement)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")
        if self.kind == CabinetKind.OVEN and (
            self.options.inset_back or self.options.rabbet_back
        ):
            raise ConstructionConflictError(
                "Oven cabinet cannot be inset or rabbet back",
                cabinet_id=self.id,
                options=tuple(
                    name
                    for name in ("inset_back", "rabbet_back")
                    if getattr(self.options, name)
                ),
            )

    @property
    def drawer_count(self) -> int:
        """Drawers needing a pair of runners; an oven contributes one."""
        if self.kind == CabinetKind.DRAWER:
            return self.drawers
        if self.kind == CabinetKind.OVEN:
            return 1
        return 0

    @classmethod
    def door(
        cls,
        id: str,
        width: float,
        height: float,
        depth: float,
        doors: int,
        shelves: int = 0,
        options: CabinetOptions | None = None,
        upper: bool = False,
    ) -> CabinetSpec:
        """Base or wall cabinet closed by one or more doors."""
        return cls(
            id=id,
            kind=CabinetKind.DOOR,
            width=width,
            height=height,
            depth=depth,
            options=options or CabinetOptions(),
            upper=upper,
            doors=doors,
            shelves=shelves,
        )

    @classmethod
    def upper_door(
        cls,
        id: str,
        width: float,
        height: float,
        depth: float,
        doors: int,
        shelves: int = 0,
        options: CabinetOptions | None = None,
    ) -> CabinetSpec:
        """Wall-hung door cabinet."""
        return cls.door(id, width, height, depth, doors, shelves, options, upper=True)

    @classmethod
    def drawer(
        cls,
        id: str,
        width: float,
        height: float,
        depth: float,
        drawers: int,
        heights: Sequence[float],
        system: DrawerSystem = DrawerSystem.STANDARD,
        slider_length: float | None = None,
        rail_height: float | None = None,
        options: CabinetOptions | None = None,
        upper: bool = False,
    ) -> CabinetSpec:
        """Cabinet with stacked drawers sharing the face height by percentage."""
        return cls(
            id=id,
            kind=CabinetKind.DRAWER,
            width=width,
            height=height,
            depth=depth,
            options=options or CabinetOptions(),
            upper=upper,
            drawers=drawers,
            drawer_heights=tuple(heights),
            drawer_system=system,
            slider_length=slider_length,
            rail_height=rail_height,
        )

    @classmethod
    def corner(
        cls,
        id: str,
        width: float,
        height: float,
        depth: float,
        fixed_side: float,
        options: CabinetOptions | None = None,
        upper: bool = False,
    ) -> CabinetSpec:
        """Corner cabinet with a fixed leg and one door."""
        return cls(
            id=id,
            kind=CabinetKind.CORNER,
            width=width,
            height=height,
            depth=depth,
            options=options or CabinetOptions(),
            upper=upper,
            fixed_side=fixed_side,
        )

    @classmethod
    def oven(
        cls,
        id: str,
        width: float,
        height: float,
        depth: float,
        system: DrawerSystem = DrawerSystem.METABOX,
        slider_length: float | None = None,
        rail_height: float | None = None,
        options: CabinetOptions | None = None,
    ) -> CabinetSpec:
        """Built-in oven housing with a drawer below the cavity."""
        return cls(
            id=id,
            kind=CabinetKind.OVEN,
            width=width,
            height=height,
            depth=depth,
            options=options or CabinetOptions(),
            drawer_system=system,
            slider_length=slider_length,
            rail_height=rail_height,
        )
