"""Pydantic configuration schema models for cut list projects.

This module defines the schema of JSON project files. It uses Pydantic v2
for validation and serialization. Every section except ``cabinets`` is
optional; omitted values take the construction defaults of the domain
layer, applied by the adapter functions.

Enums are reused from the domain layer to avoid duplication.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from cutlist.domain.value_objects import CabinetKind, DrawerSystem

# Supported schema versions for project files
# Version 1.0: Initial schema with materials, settings, board and cabinets
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


# =============================================================================
# Materials
# =============================================================================


class MaterialConfig(BaseModel):
    """Board material.

    Attributes:
        name: Material name, also the board packing group.
        thickness: Thickness in mm.
        cost_per_m2: Board price per square meter.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    thickness: float = Field(..., gt=0)
    cost_per_m2: float = Field(default=0.0, ge=0)


class MaterialsConfig(BaseModel):
    """Materials by role plus processing rates.

    Roles that are omitted keep the default material for that role.
    """

    model_config = ConfigDict(extra="forbid")

    corpus: MaterialConfig | None = None
    front: MaterialConfig | None = None
    back: MaterialConfig | None = None
    drawer: MaterialConfig | None = None
    edge_banding_cost_per_meter: float = Field(default=0.0, ge=0)
    cut_cost_per_meter: float = Field(default=0.0, ge=0)


# =============================================================================
# Construction settings
# =============================================================================


class RevealsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    side_gap: float | None = Field(default=None, ge=0)
    vertical_gap: float | None = Field(default=None, ge=0)
    center_gap: float | None = Field(
        default=None, ge=0, description="null means twice the vertical gap"
    )
    hidden_handle_reveal: float | None = Field(default=None, ge=0)
    upper_handleless_overhang_extra: float | None = Field(default=None, ge=0)
    gola_profile_height: float | None = Field(default=None, ge=0)


class BacksConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inset_offset: float | None = Field(default=None, ge=0)
    inset_dado_depth: float | None = Field(default=None, gt=0)
    inset_dado_clearance: float | None = Field(default=None, ge=0)
    inset_oversize_full: float | None = Field(default=None, ge=0)
    inset_oversize_partial: float | None = Field(default=None, ge=0)
    rabbet_width: float | None = Field(default=None, gt=0)
    rabbet_depth: float | None = Field(default=None, gt=0)
    rabbet_clearance: float | None = Field(default=None, ge=0)


class ConstructionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    split_top_rail_depth: float | None = Field(default=None, gt=0)


class ShelvesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    depth_setback: float | None = Field(default=None, ge=0)


class RailHeightConfig(BaseModel):
    """One row of the rail height to drawer back height table."""

    model_config = ConfigDict(extra="forbid")

    rail: float = Field(..., gt=0)
    back_height: float = Field(..., gt=0)


class StandardDrawerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    side_clearance_total: float | None = Field(default=None, ge=0)
    bottom_depth_clearance: float | None = Field(default=None, ge=0)
    side_height_reduction: float | None = Field(default=None, ge=0)


class MetaboxConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width_clearance: float | None = Field(default=None, ge=0)
    depth_clearance: float | None = Field(default=None, ge=0)
    default_front_setback: float | None = Field(default=None, ge=0)


class VertexConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width_clearance: float | None = Field(default=None, ge=0)
    back_width_clearance: float | None = Field(default=None, ge=0)
    depth_shorten: float | None = Field(default=None, ge=0)


class DrawersConfig(BaseModel):
    """Drawer runner catalogue and per-system clearances."""

    model_config = ConfigDict(extra="forbid")

    slider_lengths: list[float] | None = None
    rail_heights: list[RailHeightConfig] | None = None
    default_slider_length: float | None = Field(default=None, gt=0)
    default_rail_height: float | None = Field(default=None, gt=0)
    standard: StandardDrawerConfig | None = None
    metabox: MetaboxConfig | None = None
    vertex: VertexConfig | None = None

    @field_validator("slider_lengths")
    @classmethod
    def validate_slider_lengths(cls, v: list[float] | None) -> list[float] | None:
        """Slider lengths must be positive."""
        if v is not None and any(length <= 0 for length in v):
            raise ValueError("slider lengths must be positive")
        return v


class OvenConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cavity_height: float | None = Field(default=None, gt=0)
    required_width: float | None = Field(default=None, gt=0)
    min_depth: float | None = Field(default=None, gt=0)
    min_drawer_height: float | None = Field(default=None, ge=0)
    face_height_clearance: float | None = Field(default=None, ge=0)


class SettingsConfig(BaseModel):
    """Overrides of the construction settings tables.

    Only the values present in the file are overridden.
    """

    model_config = ConfigDict(extra="forbid")

    reveals: RevealsConfig | None = None
    backs: BacksConfig | None = None
    construction: ConstructionConfig | None = None
    shelves: ShelvesConfig | None = None
    drawers: DrawersConfig | None = None
    oven: OvenConfig | None = None


class BoardConfigSchema(BaseModel):
    """Stock board size used for yield estimation."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=2800.0, gt=0)
    height: float = Field(default=2070.0, gt=0)


# =============================================================================
# Cabinets
# =============================================================================


class CabinetOptionsConfig(BaseModel):
    """Construction options.

    ``inset_back`` and ``rabbet_back`` should not both be set; when they
    are, the inset back is used and the validator warns.
    """

    model_config = ConfigDict(extra="forbid")

    full: bool = False
    inset_back: bool = False
    rabbet_back: bool = False
    hidden_handles: bool = False


class PlacementConfig(BaseModel):
    """Layout position, carried through untouched."""

    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: float = 0.0
    wall: Literal["north", "south", "east", "west"] | None = None


class CabinetConfig(BaseModel):
    """One cabinet of the project.

    Attributes:
        id: Identifier, unique within the project.
        kind: Cabinet variant (door, drawer, corner, oven).
        width: Outside width in mm.
        height: Outside height in mm.
        depth: Outside depth in mm.
        options: Construction options.
        upper: Wall-hung cabinet.
        doors: Door count (door cabinets).
        shelves: Shelf count (door cabinets).
        drawers: Drawer count (drawer cabinets). Defaults to the number of
            drawer heights given.
        drawer_heights: Face height share of each drawer in percent.
        drawer_system: Runner system (drawer and oven cabinets).
        slider_length: Runner length in mm.
        rail_height: Runner rail height in mm.
        fixed_side: Fixed leg width of corner cabinets in mm.
        placement: Layout position.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    kind: CabinetKind
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)
    options: CabinetOptionsConfig = Field(default_factory=CabinetOptionsConfig)
    upper: bool = False
    doors: int = Field(default=0, ge=0)
    shelves: int = Field(default=0, ge=0)
    drawers: int | None = Field(default=None, ge=0)
    drawer_heights: list[float] = Field(default_factory=list)
    drawer_system: DrawerSystem | None = None
    slider_length: float | None = Field(default=None, gt=0)
    rail_height: float | None = Field(default=None, gt=0)
    fixed_side: float = Field(default=0.0, ge=0)
    placement: PlacementConfig = Field(default_factory=PlacementConfig)

    @field_validator("drawer_heights")
    @classmethod
    def validate_drawer_heights(cls, v: list[float]) -> list[float]:
        """Drawer height percentages must be positive."""
        if any(pct <= 0 for pct in v):
            raise ValueError("drawer height percentages must be positive")
        return v


class ProjectConfiguration(BaseModel):
    """Root model of a cut list project file.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     cabinets=[CabinetConfig(id="B1", kind="door", width=600,
        ...                             height=720, depth=560, doors=1)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    materials: MaterialsConfig = Field(default_factory=MaterialsConfig)
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    board: BoardConfigSchema = Field(default_factory=BoardConfigSchema)
    cabinets: list[CabinetConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v
        major = v.split(".")[0]
        if any(s.split(".")[0] == major for s in SUPPORTED_VERSIONS):
            return v
        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "ProjectConfiguration":
        """Cabinet ids prefix panel labels and must be unique."""
        seen: set[str] = set()
        for cabinet in self.cabinets:
            if cabinet.id in seen:
                raise ValueError(f"duplicate cabinet id '{cabinet.id}'")
            seen.add(cabinet.id)
        return self
