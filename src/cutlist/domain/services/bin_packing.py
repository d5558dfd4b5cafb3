"""Guillotine board packing for material yield estimation.

This module provides data structures for stock boards, placed pieces and
packing results, plus the first-fit guillotine packer used to count the
boards a group of panels consumes.

The packer is an estimate: pieces larger than a board are truncated to
the board size so the area still counts, which is not a physical
guarantee that the piece can be cut.

All dataclasses are frozen (immutable).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

__all__ = [
    "BoardConfig",
    "BoardLayout",
    "GuillotineBoardPacker",
    "PackingResult",
    "PlacedRect",
    "Rect",
]

# Slack for float error when pieces divide a board into non-representable
# fractions (2800 / 3 and the like).
_FIT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class BoardConfig:
    """Stock board dimensions in mm.

    Attributes:
        width: Board width (default 2800 mm).
        height: Board height (default 2070 mm).
    """

    width: float = 2800.0
    height: float = 2070.0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Board width must be positive")
        if self.height <= 0:
            raise ValueError("Board height must be positive")

    @property
    def area(self) -> float:
        """Board area in square mm."""
        return self.width * self.height

    @property
    def area_m2(self) -> float:
        """Board area in square meters."""
        return self.area / 1_000_000


@dataclass(frozen=True)
class Rect:
    """A unit rectangle to pack.

    Attributes:
        width: Extent along the board width.
        height: Extent along the board height.
        label: Source panel label, for reporting only.
    """

    width: float
    height: float
    label: str = ""

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class PlacedRect:
    """A rectangle placed on a board.

    Attributes:
        rect: The rectangle as requested.
        x: Distance from the board's left edge.
        y: Distance from the board's top edge.
        rotated: True if placed turned by 90 degrees.
        truncated: True if clipped to the board size.
        placed_width: Width occupied on the board.
        placed_height: Height occupied on the board.
    """

    rect: Rect
    x: float
    y: float
    placed_width: float
    placed_height: float
    rotated: bool = False
    truncated: bool = False

    @property
    def area(self) -> float:
        """Area occupied on the board."""
        return self.placed_width * self.placed_height


@dataclass(frozen=True)
class BoardLayout:
    """Pieces placed on a single board.

    Attributes:
        index: Zero-based board index within the packing result.
        board: Board dimensions.
        placements: Placed pieces in placement order.
    """

    index: int
    board: BoardConfig
    placements: tuple[PlacedRect, ...]

    @property
    def used_area(self) -> float:
        """Total area used by placed pieces in square mm."""
        return sum(p.area for p in self.placements)

    @property
    def waste_percentage(self) -> float:
        """Percentage of the board left unused."""
        return (1 - self.used_area / self.board.area) * 100

    @property
    def piece_count(self) -> int:
        return len(self.placements)


@dataclass(frozen=True)
class PackingResult:
    """Result of packing one material group.

    Attributes:
        board: Board dimensions used.
        layouts: One layout per board opened.
    """

    board: BoardConfig
    layouts: tuple[BoardLayout, ...] = ()

    @property
    def board_count(self) -> int:
        return len(self.layouts)

    @property
    def used_area(self) -> float:
        return sum(layout.used_area for layout in self.layouts)

    @property
    def waste_percentage(self) -> float:
        """Waste across all boards, 0 when nothing was packed."""
        if not self.layouts:
            return 0.0
        return (1 - self.used_area / (self.board.area * self.board_count)) * 100

    @property
    def truncated_count(self) -> int:
        """Number of pieces clipped to the board size."""
        return sum(
            1 for layout in self.layouts for p in layout.placements if p.truncated
        )


@dataclass
class _Space:
    """Free rectangular region of a board."""

    x: float
    y: float
    width: float
    height: float


@dataclass
class _BoardState:
    """Mutable board state while packing."""

    spaces: list[_Space]
    placements: list[PlacedRect] = field(default_factory=list)


class GuillotineBoardPacker:
    """First-fit guillotine packer.

    Each board keeps a list of free spaces, starting with the whole board.
    A rectangle goes into the first space, scanning boards and spaces in
    order, that holds it in either orientation. The space is then split in
    two: the strip right of the piece (as tall as the piece) and the strip
    below it (the full space width). Residuals thinner than the fit
    tolerance are dropped. When nothing fits, a new board is opened.

    Packing runs twice, once trying each rectangle as given before rotating
    it and once the other way round, and the run using fewer boards wins.
    The given orientation wins ties.

    Attributes:
        board: Stock board dimensions.
    """

    def __init__(self, board: BoardConfig | None = None) -> None:
        self.board = board or BoardConfig()

    def pack(self, rects: Sequence[Rect]) -> PackingResult:
        """Pack rectangles onto boards.

        Args:
            rects: Unit rectangles in placement order.

        Returns:
            PackingResult with one layout per board used.
        """
        if not rects:
            return PackingResult(board=self.board)

        best = self._pack_pass(rects, prefer_rotated=False)
        rotated = self._pack_pass(rects, prefer_rotated=True)
        if rotated.board_count < best.board_count:
            logger.info(
                f"Rotated-first packing saves {best.board_count - rotated.board_count} "
                f"board(s) for {len(rects)} pieces"
            )
            best = rotated

        logger.debug(
            f"Packed {len(rects)} pieces onto {best.board_count} boards "
            f"({best.waste_percentage:.1f}% waste)"
        )
        return best

    def _pack_pass(self, rects: Sequence[Rect], prefer_rotated: bool) -> PackingResult:
        boards: list[_BoardState] = []
        for rect in rects:
            if not any(self._place(board, rect, prefer_rotated) for board in boards):
                board = self._new_board()
                boards.append(board)
                if not self._place(board, rect, prefer_rotated):
                    self._place_truncated(board, rect)

        layouts = tuple(
            BoardLayout(index=i, board=self.board, placements=tuple(state.placements))
            for i, state in enumerate(boards)
        )
        return PackingResult(board=self.board, layouts=layouts)

    def _new_board(self) -> _BoardState:
        return _BoardState(spaces=[_Space(0, 0, self.board.width, self.board.height)])

    def _orientations(
        self, rect: Rect, prefer_rotated: bool
    ) -> list[tuple[float, float, bool]]:
        given = (rect.width, rect.height, False)
        turned = (rect.height, rect.width, True)
        return [turned, given] if prefer_rotated else [given, turned]

    def _place(self, board: _BoardState, rect: Rect, prefer_rotated: bool) -> bool:
        """Place ``rect`` in the first fitting space of ``board``."""
        for i, space in enumerate(board.spaces):
            for width, height, rotated in self._orientations(rect, prefer_rotated):
                if (
                    width <= space.width + _FIT_TOLERANCE
                    and height <= space.height + _FIT_TOLERANCE
                ):
                    del board.spaces[i]
                    self._occupy(board, space, rect, width, height, rotated, False)
                    return True
        return False

    def _place_truncated(self, board: _BoardState, rect: Rect) -> None:
        width = min(rect.width, self.board.width)
        height = min(rect.height, self.board.height)
        logger.warning(
            f"Piece {rect.label or '(unlabelled)'} {rect.width:g}x{rect.height:g} "
            f"exceeds the {self.board.width:g}x{self.board.height:g} board; "
            f"counted as {width:g}x{height:g}"
        )
        space = board.spaces.pop(0)
        self._occupy(board, space, rect, width, height, False, True)

    def _occupy(
        self,
        board: _BoardState,
        space: _Space,
        rect: Rect,
        width: float,
        height: float,
        rotated: bool,
        truncated: bool,
    ) -> None:
        board.placements.append(
            PlacedRect(
                rect=rect,
                x=space.x,
                y=space.y,
                placed_width=width,
                placed_height=height,
                rotated=rotated,
                truncated=truncated,
            )
        )
        right = _Space(space.x + width, space.y, space.width - width, height)
        below = _Space(space.x, space.y + height, space.width, space.height - height)
        for residual in (right, below):
            if residual.width > _FIT_TOLERANCE and residual.height > _FIT_TOLERANCE:
                board.spaces.append(residual)
