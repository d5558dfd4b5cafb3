"""Drawer box geometry for the supported runner systems.

The resolver turns a drawer face size and the internal corpus envelope
into the panels of one drawer: the face, then bottom, sides and back as
the runner system requires.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..settings import ConstructionSettings
from ..value_objects import DrawerSystem, MaterialSet, Panel

__all__ = [
    "DrawerBoxParams",
    "build_drawer_box",
    "resolve_back_height",
    "resolve_slider_length",
]


@dataclass(frozen=True)
class DrawerBoxParams:
    """Resolved inputs for a single drawer box.

    Attributes:
        cabinet_id: Id of the owning cabinet, used in labels.
        index: 1-based drawer position within the cabinet.
        face_height: Drawer face height in mm.
        face_width: Drawer face width in mm.
        system: Runner system.
        internal_width: Clear width between the corpus sides in mm.
        internal_depth: Clear depth in front of the back panel in mm.
        slider_length: Runner length in mm. None derives it from the depth.
        rail_height: Runner rail height in mm. None uses the configured default.
    """

    cabinet_id: str
    index: int
    face_height: float
    face_width: float
    system: DrawerSystem
    internal_width: float
    internal_depth: float
    slider_length: float | None = None
    rail_height: float | None = None

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("Drawer index is 1-based")


def resolve_back_height(rail: float | None, settings: ConstructionSettings) -> float:
    """Drawer back height for a runner rail height.

    Exact table lookup only. An unknown rail height is used as the back
    height itself.
    """
    drawers = settings.drawers
    if rail is None:
        rail = drawers.default_rail_height
    back_height = drawers.back_height_for(rail)
    return rail if back_height is None else back_height


def resolve_slider_length(params: DrawerBoxParams, settings: ConstructionSettings) -> float:
    if params.slider_length is not None:
        return params.slider_length
    return params.internal_depth - settings.drawers.metabox.default_front_setback


def _panel(
    params: DrawerBoxParams,
    role: str,
    length: float,
    width: float,
    banding: tuple[int, int, int, int],
    material_name: str,
    thickness: float,
    quantity: int = 1,
) -> Panel:
    right, left, top, bottom = banding
    return Panel(
        length=length,
        width=width,
        quantity=quantity,
        band_length_right=right,
        band_length_left=left,
        band_width_top=top,
        band_width_bottom=bottom,
        label=f"{params.cabinet_id}-> Drawer {params.index} {role}",
        material=material_name,
        material_thickness=thickness,
    )


def build_drawer_box(
    params: DrawerBoxParams,
    settings: ConstructionSettings,
    materials: MaterialSet,
) -> list[Panel]:
    """Build the panels of one drawer.

    The face always comes first, fully banded, in the front material. The
    box parts follow in the drawer material:

    - standard: bottom, a pair of sides and a back.
    - metabox: bottom and back; the steel runners form the sides.
    - vertex: bottom and back, with a narrower back between the walls.

    Args:
        params: Resolved drawer inputs.
        settings: Construction settings.
        materials: Material set; front and drawer materials are used.

    Returns:
        Drawer panels in face, bottom, side, back order.
    """
    front = materials.front
    box = materials.drawer
    panels = [
        _panel(
            params,
            "Face",
            params.face_height,
            params.face_width,
            (1, 1, 1, 1),
            front.name,
            front.thickness,
        )
    ]

    drawers = settings.drawers
    if params.system == DrawerSystem.STANDARD:
        standard = drawers.standard
        box_width = params.internal_width - standard.side_clearance_total
        box_depth = params.internal_depth - standard.bottom_depth_clearance
        side_height = params.face_height - standard.side_height_reduction
        panels.extend(
            [
                _panel(params, "Bottom", box_width, box_depth, (0, 0, 0, 0), box.name, box.thickness),
                _panel(
                    params,
                    "Side",
                    side_height,
                    box_depth,
                    (1, 0, 1, 0),
                    box.name,
                    box.thickness,
                    quantity=2,
                ),
                _panel(
                    params,
                    "Back",
                    box_width - 2 * box.thickness,
                    side_height,
                    (0, 0, 1, 0),
                    box.name,
                    box.thickness,
                ),
            ]
        )
        return panels

    slider_length = resolve_slider_length(params, settings)
    back_height = resolve_back_height(params.rail_height, settings)
    if params.system == DrawerSystem.METABOX:
        metabox = drawers.metabox
        box_width = params.internal_width - metabox.width_clearance
        bottom_depth = slider_length - metabox.depth_clearance
        back_width = box_width
    else:
        vertex = drawers.vertex
        box_width = params.internal_width - vertex.width_clearance
        bottom_depth = slider_length - vertex.depth_shorten
        back_width = params.internal_width - vertex.back_width_clearance

    panels.extend(
        [
            _panel(params, "Bottom", box_width, bottom_depth, (0, 0, 0, 0), box.name, box.thickness),
            _panel(params, "Back", back_width, back_height, (0, 0, 1, 0), box.name, box.thickness),
        ]
    )
    return panels
