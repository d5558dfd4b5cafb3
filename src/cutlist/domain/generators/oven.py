"""Built-in oven housing panels."""

from __future__ import annotations

from ..services.drawer_system import DrawerBoxParams, build_drawer_box
from ..settings import ConstructionSettings
from ..value_objects import CabinetSpec, MaterialSet, Panel
from .corpus import base_panels

__all__ = ["oven_drawer_height", "oven_issues", "oven_panels"]


def oven_drawer_height(spec: CabinetSpec, settings: ConstructionSettings) -> float:
    """Height left below the oven cavity (and gola rail, if handleless)."""
    height = spec.height - settings.oven.cavity_height
    if spec.options.hidden_handles:
        height -= settings.reveals.gola_profile_height
    return height


def oven_panels(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> list[Panel]:
    """Corpus panels, one drawer below the oven and the oven shelf."""
    panels = base_panels(spec, settings, materials)
    corpus = materials.corpus
    internal_width = spec.width - 2 * corpus.thickness

    params = DrawerBoxParams(
        cabinet_id=spec.id,
        index=1,
        face_height=oven_drawer_height(spec, settings) - settings.oven.face_height_clearance,
        face_width=spec.width - 2 * settings.reveals.side_gap,
        system=spec.drawer_system,
        internal_width=internal_width,
        internal_depth=spec.depth - materials.back.thickness,
        slider_length=spec.slider_length,
        rail_height=spec.rail_height,
    )
    panels.extend(build_drawer_box(params, settings, materials))

    # The shelf carries the appliance and runs the full corpus depth.
    panels.append(
        Panel(
            length=internal_width,
            width=spec.depth,
            quantity=1,
            band_length_right=1,
            band_length_left=0,
            band_width_top=0,
            band_width_bottom=0,
            label=f"{spec.id}-> Oven Shelf",
            material=corpus.name,
            material_thickness=corpus.thickness,
        )
    )
    return panels


def oven_issues(spec: CabinetSpec, settings: ConstructionSettings) -> list[str]:
    oven = settings.oven
    issues = []
    if spec.width != oven.required_width:
        issues.append(f"{spec.id}: oven cabinet must be {oven.required_width:g} mm wide")
    if spec.depth < oven.min_depth:
        issues.append(f"{spec.id}: oven cabinet must be at least {oven.min_depth:g} mm deep")
    drawer_height = oven_drawer_height(spec, settings)
    if drawer_height < oven.min_drawer_height:
        issues.append(
            f"{spec.id}: drawer below the oven is {drawer_height:g} mm, "
            f"minimum is {oven.min_drawer_height:g} mm"
        )
    return issues
