"""Adapters converting a ProjectConfiguration to domain objects.

Effective values are resolved here, once, at the boundary: every setting
the project file leaves out takes the domain default, and the generators
only ever see complete, immutable settings and material tables.
"""

from dataclasses import replace
from typing import Any

from pydantic import BaseModel

from cutlist.application.config.loader import ConfigError
from cutlist.application.config.schemas import (
    CabinetConfig,
    DrawersConfig,
    MaterialConfig,
    ProjectConfiguration,
)
from cutlist.domain.errors import ConstructionConflictError
from cutlist.domain.services import BoardConfig
from cutlist.domain.settings import ConstructionSettings, DrawerSettings, RailHeight
from cutlist.domain.value_objects import (
    CabinetKind,
    CabinetOptions,
    CabinetSpec,
    DrawerSystem,
    Material,
    MaterialSet,
    Placement,
)


def _overrides(model: BaseModel | None, nullable: tuple[str, ...] = ()) -> dict[str, Any]:
    """Values explicitly present in a settings section.

    Explicit nulls are dropped unless the field gives null a meaning.
    """
    if model is None:
        return {}
    return {
        name: value
        for name, value in model.model_dump(exclude_unset=True).items()
        if value is not None or name in nullable
    }


def _drawer_settings(config: DrawersConfig | None, defaults: DrawerSettings) -> DrawerSettings:
    if config is None:
        return defaults
    values: dict[str, Any] = {}
    if config.slider_lengths is not None:
        values["slider_lengths"] = tuple(config.slider_lengths)
    if config.rail_heights is not None:
        values["rail_heights"] = tuple(
            RailHeight(rail=row.rail, back_height=row.back_height)
            for row in config.rail_heights
        )
    if config.default_slider_length is not None:
        values["default_slider_length"] = config.default_slider_length
    if config.default_rail_height is not None:
        values["default_rail_height"] = config.default_rail_height
    for system in ("standard", "metabox", "vertex"):
        overrides = _overrides(getattr(config, system))
        if overrides:
            values[system] = replace(getattr(defaults, system), **overrides)
    return replace(defaults, **values)


def config_to_settings(config: ProjectConfiguration) -> ConstructionSettings:
    """Build the effective construction settings for a project.

    Args:
        config: A validated ProjectConfiguration instance

    Returns:
        ConstructionSettings with the file's overrides applied to the defaults.
    """
    defaults = ConstructionSettings()
    section = config.settings
    try:
        return ConstructionSettings(
            reveals=replace(
                defaults.reveals, **_overrides(section.reveals, nullable=("center_gap",))
            ),
            backs=replace(defaults.backs, **_overrides(section.backs)),
            construction=replace(defaults.construction, **_overrides(section.construction)),
            shelves=replace(defaults.shelves, **_overrides(section.shelves)),
            drawers=_drawer_settings(section.drawers, defaults.drawers),
            oven=replace(defaults.oven, **_overrides(section.oven)),
        )
    except ValueError as e:
        raise ConfigError(
            message=f"Invalid construction settings: {e}",
            error_type="validation",
            details=[{"path": "settings", "message": str(e)}],
        )


def _material(config: MaterialConfig | None, default: Material) -> Material:
    if config is None:
        return default
    return Material(name=config.name, thickness=config.thickness, cost_per_m2=config.cost_per_m2)


def config_to_materials(config: ProjectConfiguration) -> MaterialSet:
    """Build the material set, keeping the default material of each omitted role."""
    section = config.materials
    defaults = MaterialSet()
    return MaterialSet(
        corpus=_material(section.corpus, defaults.corpus),
        front=_material(section.front, defaults.front),
        back=_material(section.back, defaults.back),
        drawer=_material(section.drawer, defaults.drawer),
        edge_banding_cost_per_meter=section.edge_banding_cost_per_meter,
        cut_cost_per_meter=section.cut_cost_per_meter,
    )


def config_to_board(config: ProjectConfiguration) -> BoardConfig:
    return BoardConfig(width=config.board.width, height=config.board.height)


def config_to_cabinet(cabinet: CabinetConfig) -> CabinetSpec:
    """Convert one cabinet entry, defaulting its drawer system by kind."""
    if cabinet.drawer_system is not None:
        system = cabinet.drawer_system
    elif cabinet.kind == CabinetKind.OVEN:
        system = DrawerSystem.METABOX
    else:
        system = DrawerSystem.STANDARD
    drawers = cabinet.drawers
    if drawers is None:
        drawers = len(cabinet.drawer_heights)
    placement = cabinet.placement
    return CabinetSpec(
        id=cabinet.id,
        kind=cabinet.kind,
        width=cabinet.width,
        height=cabinet.height,
        depth=cabinet.depth,
        options=CabinetOptions(
            full=cabinet.options.full,
            inset_back=cabinet.options.inset_back,
            rabbet_back=cabinet.options.rabbet_back,
            hidden_handles=cabinet.options.hidden_handles,
        ),
        upper=cabinet.upper,
        doors=cabinet.doors,
        shelves=cabinet.shelves,
        drawers=drawers,
        drawer_heights=tuple(cabinet.drawer_heights),
        drawer_system=system,
        slider_length=cabinet.slider_length,
        rail_height=cabinet.rail_height,
        fixed_side=cabinet.fixed_side,
        placement=Placement(
            x=placement.x,
            y=placement.y,
            z=placement.z,
            rotation=placement.rotation,
            wall=placement.wall,
        ),
    )


def config_to_cabinets(config: ProjectConfiguration) -> list[CabinetSpec]:
    """Convert every cabinet of a project to a CabinetSpec.

    Raises:
        ConfigError: With error_type "construction" if a cabinet asks for
            a physically impossible option combination.
    """
    specs = []
    for index, cabinet in enumerate(config.cabinets):
        try:
            specs.append(config_to_cabinet(cabinet))
        except ConstructionConflictError as e:
            raise ConfigError(
                message=f"Cabinet {cabinet.id}: {e}",
                error_type="construction",
                details=[
                    {
                        "path": f"cabinets[{index}].options",
                        "message": str(e),
                        "value": list(e.options),
                    }
                ],
            )
    return specs
