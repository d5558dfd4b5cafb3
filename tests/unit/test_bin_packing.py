"""Tests for guillotine board packing.

Tests cover:
- BoardConfig, Rect and result dataclasses
- First-fit placement and guillotine splitting
- Rotation and the two-pass orientation choice
- Truncation of oversized pieces
"""

from __future__ import annotations

import math

import pytest

from cutlist.domain.services.bin_packing import (
    BoardConfig,
    BoardLayout,
    GuillotineBoardPacker,
    PackingResult,
    PlacedRect,
    Rect,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def packer() -> GuillotineBoardPacker:
    return GuillotineBoardPacker()


@pytest.fixture
def small_packer() -> GuillotineBoardPacker:
    return GuillotineBoardPacker(BoardConfig(width=10, height=10))


# =============================================================================
# Dataclasses
# =============================================================================


class TestBoardConfig:
    def test_defaults(self) -> None:
        board = BoardConfig()
        assert (board.width, board.height) == (2800, 2070)
        assert board.area_m2 == pytest.approx(5.796)

    @pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (-1, 100)])
    def test_invalid(self, width: float, height: float) -> None:
        with pytest.raises(ValueError):
            BoardConfig(width=width, height=height)


class TestResults:
    def test_layout_waste(self) -> None:
        board = BoardConfig(width=10, height=10)
        placed = PlacedRect(rect=Rect(5, 10), x=0, y=0, placed_width=5, placed_height=10)
        layout = BoardLayout(index=0, board=board, placements=(placed,))
        assert layout.used_area == 50
        assert layout.waste_percentage == pytest.approx(50.0)
        assert layout.piece_count == 1

    def test_empty_result(self) -> None:
        result = PackingResult(board=BoardConfig())
        assert result.board_count == 0
        assert result.waste_percentage == 0.0
        assert result.truncated_count == 0


# =============================================================================
# Packing
# =============================================================================


class TestPacking:
    def test_no_rects(self, packer: GuillotineBoardPacker) -> None:
        assert packer.pack([]).board_count == 0

    def test_exact_tiling_fills_one_board(self, packer: GuillotineBoardPacker) -> None:
        result = packer.pack([Rect(1400, 1035)] * 4)
        assert result.board_count == 1
        assert result.waste_percentage == pytest.approx(0.0)
        positions = {(p.x, p.y) for p in result.layouts[0].placements}
        assert positions == {(0, 0), (1400, 0), (0, 1035), (1400, 1035)}

    def test_rotated_tiles_also_fill_one_board(self, packer: GuillotineBoardPacker) -> None:
        assert packer.pack([Rect(1035, 1400)] * 4).board_count == 1

    def test_overflow_opens_new_board(self, packer: GuillotineBoardPacker) -> None:
        result = packer.pack([Rect(1400, 1035)] * 5)
        assert result.board_count == 2
        assert [layout.piece_count for layout in result.layouts] == [4, 1]

    def test_first_fit_reuses_earlier_board(self, small_packer: GuillotineBoardPacker) -> None:
        result = small_packer.pack([Rect(10, 6), Rect(10, 6), Rect(10, 4)])
        assert result.board_count == 2
        assert [layout.piece_count for layout in result.layouts] == [2, 1]

    def test_rotation_when_only_turned_fits(self, packer: GuillotineBoardPacker) -> None:
        (placed,) = packer.pack([Rect(100, 2500)]).layouts[0].placements
        assert placed.rotated
        assert (placed.placed_width, placed.placed_height) == (2500, 100)

    def test_given_orientation_wins_ties(self, small_packer: GuillotineBoardPacker) -> None:
        result = small_packer.pack([Rect(6, 4, "A"), Rect(10, 6, "B")])
        assert result.board_count == 1
        assert not result.layouts[0].placements[0].rotated

    def test_rotated_pass_used_when_it_saves_boards(
        self, small_packer: GuillotineBoardPacker
    ) -> None:
        result = small_packer.pack([Rect(4, 6, "A"), Rect(10, 6, "B")])
        assert result.board_count == 1
        first = result.layouts[0].placements[0]
        assert first.rect.label == "A"
        assert first.rotated

    def test_area_is_conserved(self, packer: GuillotineBoardPacker) -> None:
        rects = [Rect(720, 560)] * 6 + [Rect(764, 100)] * 4 + [Rect(764, 684)] * 2
        result = packer.pack(rects)
        assert result.used_area == pytest.approx(sum(r.area for r in rects))
        assert sum(layout.piece_count for layout in result.layouts) == len(rects)

    def test_placements_stay_on_board(self, packer: GuillotineBoardPacker) -> None:
        rects = [Rect(600, 400)] * 30
        result = packer.pack(rects)
        for layout in result.layouts:
            for p in layout.placements:
                assert p.x + p.placed_width <= 2800
                assert p.y + p.placed_height <= 2070


class TestFractionalTilings:
    """Pieces that split the board into fractions a float cannot hold exactly."""

    @pytest.mark.parametrize(
        "across, down",
        [(3, 1), (6, 1), (3, 3), (7, 3), (1, 3), (6, 7)],
    )
    @pytest.mark.parametrize("multiple", [1, 2, 3])
    @pytest.mark.parametrize("turned", [False, True])
    def test_board_count_never_exceeds_tiling_bound(
        self,
        packer: GuillotineBoardPacker,
        across: int,
        down: int,
        multiple: int,
        turned: bool,
    ) -> None:
        board = packer.board
        width, height = board.width / across, board.height / down
        if turned:
            width, height = height, width
        per_board = across * down
        count = per_board * multiple

        result = packer.pack([Rect(width, height)] * count)

        assert result.board_count <= math.ceil(count / per_board)
        assert result.truncated_count == 0

    def test_thirds_of_a_board(self, packer: GuillotineBoardPacker) -> None:
        result = packer.pack([Rect(2800 / 3, 2070)] * 6)
        assert result.board_count == 2
        assert [layout.piece_count for layout in result.layouts] == [3, 3]

    def test_half_door_widths_share_a_board(self, packer: GuillotineBoardPacker) -> None:
        # Door width (900 - 7) / 2 is not a whole millimetre.
        doors = [Rect(446.5, 796)] * 10
        assert packer.pack(doors).board_count == 1


class TestTruncation:
    def test_oversized_piece_is_clipped(
        self, packer: GuillotineBoardPacker, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            result = packer.pack([Rect(3000, 1000, "B1-> Side panel")])

        assert result.board_count == 1
        (placed,) = result.layouts[0].placements
        assert placed.truncated
        assert (placed.placed_width, placed.placed_height) == (2800, 1000)
        assert result.truncated_count == 1
        assert "B1-> Side panel" in caplog.text

    def test_truncated_piece_takes_its_own_board(self, packer: GuillotineBoardPacker) -> None:
        result = packer.pack([Rect(100, 100), Rect(3000, 3000)])
        assert result.board_count == 2
        assert result.layouts[1].placements[0].truncated
