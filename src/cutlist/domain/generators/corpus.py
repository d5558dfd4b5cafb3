"""Corpus (base box) panel generation.

Every cabinet variant starts from the panels produced here: two sides, a
full top/bottom pair or a bottom with two top rails, and a back panel
sized for the selected back fitting.
"""

from __future__ import annotations

from ..settings import ConstructionSettings
from ..value_objects import (
    BackFitting,
    CabinetSpec,
    Dado,
    MaterialSet,
    Panel,
    Rabbet,
)

__all__ = ["back_reduction", "base_panels"]


def _joinery(
    fitting: BackFitting, settings: ConstructionSettings, materials: MaterialSet
) -> dict[str, tuple]:
    """Dado or rabbet keyword arguments for panels joined to the back."""
    backs = settings.backs
    if fitting == BackFitting.INSET:
        dado = Dado(
            offset=backs.inset_offset,
            depth=backs.inset_dado_depth,
            width=materials.back.thickness + backs.inset_dado_clearance,
        )
        return {"dados": (dado,)}
    if fitting == BackFitting.RABBET:
        return {"rabbets": (Rabbet(depth=backs.rabbet_depth, width=backs.rabbet_width),)}
    return {}


def _back_size(
    spec: CabinetSpec,
    fitting: BackFitting,
    settings: ConstructionSettings,
    materials: MaterialSet,
) -> tuple[float, float]:
    t = materials.corpus.thickness
    backs = settings.backs
    if fitting == BackFitting.INSET:
        # Width always seats in both side dados; height only does with a full top.
        length = spec.width - 2 * t + backs.inset_oversize_full
        if spec.options.full:
            width = spec.height - 2 * t + backs.inset_oversize_full
        else:
            width = spec.height - t + backs.inset_oversize_partial
        return length, width
    if fitting == BackFitting.RABBET:
        engage = backs.rabbet_width - backs.rabbet_clearance
        return spec.width - 2 * t + 2 * engage, spec.height - 2 * t + 2 * engage
    return spec.width - 2 * t, spec.height - 2 * t


def base_panels(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> list[Panel]:
    """Generate the corpus panels shared by every cabinet kind.

    Inset backs take precedence over rabbeted backs when both options are
    set; rabbet joinery is then ignored entirely.

    Args:
        spec: Cabinet to build.
        settings: Construction settings.
        materials: Material set; corpus and back materials are used.

    Returns:
        Side, top/bottom and back panels in that order.
    """
    corpus = materials.corpus
    back = materials.back
    t = corpus.thickness
    fitting = spec.options.back_fitting
    joinery = _joinery(fitting, settings, materials)
    inner_width = spec.width - 2 * t

    panels = [
        Panel(
            length=spec.height,
            width=spec.depth,
            quantity=2,
            band_length_right=1,
            band_length_left=0,
            band_width_top=1,
            band_width_bottom=1,
            label=f"{spec.id}-> Side panel",
            material=corpus.name,
            material_thickness=t,
            **joinery,
        )
    ]

    if spec.options.full:
        panels.append(
            Panel(
                length=inner_width,
                width=spec.depth,
                quantity=2,
                band_length_right=1,
                band_length_left=0,
                band_width_top=0,
                band_width_bottom=0,
                label=f"{spec.id}-> Top/Bottom panel",
                material=corpus.name,
                material_thickness=t,
                **joinery,
            )
        )
    else:
        rail_depth = settings.construction.split_top_rail_depth
        # The rear rail meets a rabbet but sits above the back dado.
        rear_joinery = joinery if fitting == BackFitting.RABBET else {}
        panels.extend(
            [
                Panel(
                    length=inner_width,
                    width=spec.depth,
                    quantity=1,
                    band_length_right=1,
                    band_length_left=0,
                    band_width_top=0,
                    band_width_bottom=0,
                    label=f"{spec.id}-> Bottom panel",
                    material=corpus.name,
                    material_thickness=t,
                    **joinery,
                ),
                Panel(
                    length=inner_width,
                    width=rail_depth,
                    quantity=1,
                    band_length_right=1,
                    band_length_left=0,
                    band_width_top=0,
                    band_width_bottom=0,
                    label=f"{spec.id}-> Top panel plank rear",
                    material=corpus.name,
                    material_thickness=t,
                    **rear_joinery,
                ),
                Panel(
                    length=inner_width,
                    width=rail_depth,
                    quantity=1,
                    band_length_right=1,
                    band_length_left=1,
                    band_width_top=0,
                    band_width_bottom=0,
                    label=f"{spec.id}-> Top panel plank front",
                    material=corpus.name,
                    material_thickness=t,
                ),
            ]
        )

    back_length, back_width = _back_size(spec, fitting, settings, materials)
    panels.append(
        Panel(
            length=back_length,
            width=back_width,
            quantity=1,
            band_length_right=0,
            band_length_left=0,
            band_width_top=0,
            band_width_bottom=0,
            label=f"{spec.id}-> Back panel",
            material=back.name,
            material_thickness=back.thickness,
        )
    )
    return panels


def back_reduction(
    spec: CabinetSpec, settings: ConstructionSettings, materials: MaterialSet
) -> float:
    """Depth lost to the back panel, measured from the rear of the corpus."""
    fitting = spec.options.back_fitting
    if fitting == BackFitting.INSET:
        return settings.backs.inset_offset + materials.back.thickness
    if fitting == BackFitting.RABBET:
        return settings.backs.rabbet_depth
    return materials.back.thickness
