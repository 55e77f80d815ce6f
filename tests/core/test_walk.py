"""Tests for the ray-walk primitive."""

from chesscore.core.board import Board
from chesscore.core.movegen.walk import (
    Diagonal,
    Horizontal,
    Vertical,
    diagonal,
    horizontal,
    vertical,
)
from chesscore.core.types import A1, D4, E4, Square


def _names(squares: list[Square]) -> list[str]:
    return [str(sq) for sq in squares]


LONE_ROOK = "4k3/8/8/8/3R4/8/8/4K3 w - - 0 1"


class TestOpenRays:
    def test_vertical_up_to_edge(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        assert _names(vertical(board, D4, Vertical.UP, 7)) == ["d5", "d6", "d7", "d8"]

    def test_horizontal_left_to_edge(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        assert _names(horizontal(board, D4, Horizontal.LEFT, 7)) == ["c4", "b4", "a4"]

    def test_diagonal_down_right(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        assert _names(diagonal(board, D4, Diagonal.DOWN_RIGHT, 7)) == ["e3", "f2", "g1"]

    def test_ordered_from_origin(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        squares = vertical(board, D4, Vertical.DOWN, 7)
        assert _names(squares) == ["d3", "d2", "d1"]


class TestBlocking:
    def test_enemy_square_included(self) -> None:
        board = Board.from_fen("4k3/3p4/8/8/3R4/8/8/4K3 w - - 0 1")
        assert _names(vertical(board, D4, Vertical.UP, 7)) == ["d5", "d6", "d7"]

    def test_friendly_square_excluded(self) -> None:
        board = Board.from_fen("4k3/8/3P4/8/3R4/8/8/4K3 w - - 0 1")
        assert _names(vertical(board, D4, Vertical.UP, 7)) == ["d5"]

    def test_start_position_rook_is_boxed_in(self) -> None:
        board = Board()
        assert vertical(board, A1, Vertical.UP, 7) == []
        assert horizontal(board, A1, Horizontal.RIGHT, 7) == []

    def test_empty_origin_walks_nowhere(self) -> None:
        board = Board()
        assert vertical(board, E4, Vertical.UP, 7) == []


class TestOffsetClamp:
    def test_offset_limits_length(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        assert _names(vertical(board, D4, Vertical.UP, 2)) == ["d5", "d6"]

    def test_zero_offset_clamped_to_one(self) -> None:
        board = Board.from_fen(LONE_ROOK)
        assert _names(horizontal(board, D4, Horizontal.RIGHT, 0)) == ["e4"]

    def test_large_offset_clamped_to_seven(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert len(vertical(board, A1, Vertical.UP, 99)) == 7
