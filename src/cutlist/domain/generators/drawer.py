"""Drawer cabinet panels."""

from __future__ import annotations

import logging
import math

from ..services.drawer_system import DrawerBoxParams, build_drawer_box
from ..settings import ConstructionSettings
from ..value_objects import CabinetSpec, MaterialSet, Panel
from .corpus import back_reduction, base_panels

logger = logging.getLogger(__name__)

__all__ = ["drawer_issues", "drawer_panels", "round_half_up"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def drawer_panels(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> list[Panel]:
    """Corpus panels followed by the panels of each drawer.

    The usable front height is shared between drawers by the percentages
    in ``spec.drawer_heights``. Reveals between faces are deducted first
    unless the cabinet is handleless, in which case each face loses the
    hidden handle reveal instead.
    """
    panels = base_panels(spec, settings, materials)
    reveals = settings.reveals
    hidden = spec.options.hidden_handles

    usable_height = spec.height
    if not hidden:
        usable_height -= (spec.drawers + 1) * reveals.vertical_gap

    internal_width = spec.width - 2 * materials.corpus.thickness
    internal_depth = spec.depth - back_reduction(spec, settings, materials)
    slider_length = spec.slider_length
    if slider_length is None:
        slider_length = settings.drawers.default_slider_length
    rail_height = spec.rail_height
    if rail_height is None:
        rail_height = settings.drawers.default_rail_height

    for index, percent in enumerate(spec.drawer_heights[: spec.drawers], start=1):
        face_height = round_half_up(percent / 100 * usable_height)
        if hidden:
            face_height -= reveals.hidden_handle_reveal
        params = DrawerBoxParams(
            cabinet_id=spec.id,
            index=index,
            face_height=face_height,
            face_width=spec.width - 2 * reveals.side_gap,
            system=spec.drawer_system,
            internal_width=internal_width,
            internal_depth=internal_depth,
            slider_length=slider_length,
            rail_height=rail_height,
        )
        panels.extend(build_drawer_box(params, settings, materials))

    logger.debug(f"Cabinet {spec.id}: {len(panels)} panels for {spec.drawers} drawers")
    return panels


def drawer_issues(spec: CabinetSpec, settings: ConstructionSettings) -> list[str]:
    issues = []
    if len(spec.drawer_heights) != spec.drawers:
        issues.append(
            f"{spec.id}: {len(spec.drawer_heights)} drawer heights given "
            f"for {spec.drawers} drawers"
        )
    total = sum(spec.drawer_heights)
    if total != 100:
        issues.append(f"{spec.id}: drawer heights sum to {total:g}%, expected 100%")
    return issues
