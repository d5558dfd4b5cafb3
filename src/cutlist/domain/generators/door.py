"""Door cabinet panels (base and wall-hung)."""

from __future__ import annotations

from ..settings import ConstructionSettings
from ..value_objects import CabinetSpec, MaterialSet, Panel, hinge_code
from .corpus import base_panels

__all__ = ["door_height", "door_issues", "door_panels"]


def door_height(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> float:
    """Front height of a door cabinet.

    Handleless uppers overhang the corpus bottom to give a finger pull;
    handleless base units drop below the top by the hidden handle reveal.
    """
    reveals = settings.reveals
    height = spec.height - 2 * reveals.vertical_gap
    if spec.options.hidden_handles:
        if spec.upper:
            height += materials.corpus.thickness + reveals.upper_handleless_overhang_extra
        else:
            height -= reveals.hidden_handle_reveal - 2 * reveals.vertical_gap
    return height


def door_panels(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> list[Panel]:
    """Corpus panels followed by one entry per door and a shelf entry."""
    panels = base_panels(spec, settings, materials)
    reveals = settings.reveals
    front = materials.front
    t = materials.corpus.thickness

    if spec.doors > 0:
        total_reveal = 2 * reveals.side_gap
        if spec.doors > 1:
            total_reveal += reveals.effective_center_gap
        width = (spec.width - total_reveal) / spec.doors
        height = door_height(spec, settings, materials)
        hinge = hinge_code(height, width)
        for _ in range(spec.doors):
            panels.append(
                Panel(
                    length=height,
                    width=width,
                    quantity=1,
                    band_length_right=1,
                    band_length_left=1,
                    band_width_top=1,
                    band_width_bottom=1,
                    label=f"{spec.id}-> Door",
                    material=front.name,
                    material_thickness=front.thickness,
                    hinge_location=hinge,
                )
            )

    if spec.shelves > 0:
        panels.append(
            Panel(
                length=spec.width - 2 * t,
                width=spec.depth - settings.shelves.depth_setback,
                quantity=spec.shelves,
                band_length_right=1,
                band_length_left=0,
                band_width_top=0,
                band_width_bottom=0,
                label=f"{spec.id}-> Shelf",
                material=materials.corpus.name,
                material_thickness=t,
            )
        )
    return panels


def door_issues(spec: CabinetSpec, settings: ConstructionSettings) -> list[str]:
    issues = []
    if spec.doors <= 0:
        issues.append(f"{spec.id}: door cabinet needs at least one door")
    if spec.shelves < 0:
        issues.append(f"{spec.id}: shelf count cannot be negative")
    return issues
