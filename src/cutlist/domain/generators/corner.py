"""Corner cabinet panels."""

from __future__ import annotations

from ..settings import ConstructionSettings
from ..value_objects import CabinetSpec, MaterialSet, Panel, hinge_code
from .corpus import base_panels

__all__ = ["corner_issues", "corner_panels"]


def corner_panels(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> list[Panel]:
    """Corpus panels, the door over the open leg and the fixed side panel.

    The door is left out when the fixed side leaves no positive width for
    it. The fixed side panel is always emitted.
    """
    panels = base_panels(spec, settings, materials)
    reveals = settings.reveals
    front = materials.front

    door_width = spec.width - spec.fixed_side - 2 * reveals.side_gap
    door_height = spec.height - 2 * reveals.vertical_gap
    if spec.options.hidden_handles:
        if spec.upper:
            door_height += materials.corpus.thickness + reveals.upper_handleless_overhang_extra
        else:
            door_height = spec.height - reveals.hidden_handle_reveal

    if door_width > 0:
        panels.append(
            Panel(
                length=door_height,
                width=door_width,
                quantity=1,
                band_length_right=1,
                band_length_left=1,
                band_width_top=1,
                band_width_bottom=1,
                label=f"{spec.id}-> Door",
                material=front.name,
                material_thickness=front.thickness,
                hinge_location=hinge_code(door_height, door_width),
            )
        )

    panels.append(
        Panel(
            length=door_height,
            width=spec.fixed_side,
            quantity=1,
            band_length_right=1,
            band_length_left=1,
            band_width_top=1,
            band_width_bottom=1,
            label=f"{spec.id}-> Fixed side",
            material=front.name,
            material_thickness=front.thickness,
        )
    )
    return panels


def corner_issues(spec: CabinetSpec, settings: ConstructionSettings) -> list[str]:
    if 0 < spec.fixed_side < spec.width:
        return []
    return [
        f"{spec.id}: fixed side {spec.fixed_side:g} must be between 0 "
        f"and the cabinet width {spec.width:g}"
    ]
