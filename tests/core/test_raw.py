"""Tests for pseudo-legal move generation."""

from chesscore.core.board import Board
from chesscore.core.enums import CastleSide, Color, PieceType
from chesscore.core.move import CastleMove, SingleMove
from chesscore.core.movegen.raw import (
    gen_all_raw_moves,
    gen_bishop_raw_moves,
    gen_king_raw_moves,
    gen_knight_raw_moves,
    gen_pawn_raw_moves,
    gen_queen_raw_moves,
    gen_rook_raw_moves,
)
from chesscore.core.types import A1, D4, E1, E2, E4, E5, E7, H4, Square


def _targets(moves: list) -> set[str]:
    return {str(mv.to_sq) for mv in moves if isinstance(mv, SingleMove)}


class TestGenAll:
    def test_start_position_both_colors(self) -> None:
        moves = gen_all_raw_moves(Board())
        assert len(moves) == 40
        assert sum(1 for mv in moves if mv.color == Color.WHITE) == 20
        assert sum(1 for mv in moves if mv.color == Color.BLACK) == 20

    def test_no_castles_at_start(self) -> None:
        moves = gen_all_raw_moves(Board())
        assert not any(isinstance(mv, CastleMove) for mv in moves)

    def test_empty_square_yields_nothing(self) -> None:
        board = Board()
        assert gen_pawn_raw_moves(board, E4) == []
        assert gen_knight_raw_moves(board, E4) == []
        assert gen_king_raw_moves(board, E4) == []


class TestPawn:
    def test_unmoved_pawn_single_and_double(self) -> None:
        moves = gen_pawn_raw_moves(Board(), E2)
        assert _targets(moves) == {"e3", "e4"}

    def test_double_push_carries_en_passant_square(self) -> None:
        moves = gen_pawn_raw_moves(Board(), E2)
        by_target = {str(mv.to_sq): mv for mv in moves}
        assert by_target["e4"].en_passant_square == Square.parse("e3")
        assert by_target["e3"].en_passant_square is None

    def test_black_pawn_moves_down(self) -> None:
        moves = gen_pawn_raw_moves(Board(), E7)
        assert _targets(moves) == {"e6", "e5"}
        double = next(mv for mv in moves if str(mv.to_sq) == "e5")
        assert double.en_passant_square == Square.parse("e6")

    def test_moved_pawn_single_step(self) -> None:
        board = Board.from_fen("4k3/8/8/8/4P3/8/8/4K3 w - - 0 1")
        assert _targets(gen_pawn_raw_moves(board, E4)) == {"e5"}

    def test_blocked_by_enemy_no_capture_forward(self) -> None:
        board = Board.from_fen("4k3/8/8/4p3/4P3/8/8/4K3 w - - 0 1")
        assert gen_pawn_raw_moves(board, E4) == []

    def test_double_push_blocked_on_second_square(self) -> None:
        board = Board.from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        assert _targets(gen_pawn_raw_moves(board, E2)) == {"e3"}

    def test_diagonal_capture(self) -> None:
        board = Board.from_fen("4k3/8/8/3p1N2/4P3/8/8/4K3 w - - 0 1")
        moves = gen_pawn_raw_moves(board, E4)
        captures = [mv for mv in moves if mv.capture is not None]
        assert [str(mv.to_sq) for mv in captures] == ["d5"]
        assert captures[0].capture.piece.piece == PieceType.PAWN

    def test_en_passant_capture_square_behind_target(self) -> None:
        board = Board.from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
        moves = gen_pawn_raw_moves(board, E5)
        ep = [mv for mv in moves if mv.en_passant]
        assert len(ep) == 1
        assert ep[0].to_sq == Square.parse("d6")
        assert ep[0].capture is not None
        assert ep[0].capture.square == Square.parse("d5")

    def test_black_en_passant(self) -> None:
        board = Board.from_fen("4k3/8/8/8/3Pp3/8/8/4K3 b - d3 0 1")
        moves = gen_pawn_raw_moves(board, Square.parse("e4"))
        ep = [mv for mv in moves if mv.en_passant]
        assert len(ep) == 1
        assert ep[0].capture.square == Square.parse("d4")

    def test_promotion_flag_on_far_rank(self) -> None:
        board = Board.from_fen("8/4P3/8/8/8/8/8/k6K w - - 0 1")
        moves = gen_pawn_raw_moves(board, Square.parse("e7"))
        assert len(moves) == 1
        assert moves[0].promotion

    def test_no_promotion_flag_before_far_rank(self) -> None:
        moves = gen_pawn_raw_moves(Board(), E2)
        assert not any(mv.promotion for mv in moves)


class TestKnight:
    def test_corner_knight(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/8/N3K3 w - - 0 1")
        assert _targets(gen_knight_raw_moves(board, A1)) == {"b3", "c2"}

    def test_edge_clipping(self) -> None:
        board = Board.from_fen("4k3/8/8/8/7N/8/8/4K3 w - - 0 1")
        assert _targets(gen_knight_raw_moves(board, H4)) == {"g6", "f5", "f3", "g2"}

    def test_friendly_blocked_enemy_captured(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/5p2/4P3/4K1N1 w - - 0 1")
        moves = gen_knight_raw_moves(board, Square.parse("g1"))
        assert _targets(moves) == {"f3", "h3"}
        capture = next(mv for mv in moves if str(mv.to_sq) == "f3")
        assert capture.capture is not None


class TestSliders:
    def test_rook_in_open_board(self) -> None:
        board = Board.from_fen("4k3/8/8/8/3R4/8/8/4K3 w - - 0 1")
        assert len(gen_rook_raw_moves(board, D4)) == 14

    def test_bishop_in_open_board(self) -> None:
        board = Board.from_fen("4k3/8/8/8/3B4/8/8/4K3 w - - 0 1")
        assert len(gen_bishop_raw_moves(board, D4)) == 13

    def test_queen_is_rook_plus_bishop(self) -> None:
        board = Board.from_fen("4k3/8/8/8/3Q4/8/8/4K3 w - - 0 1")
        assert len(gen_queen_raw_moves(board, D4)) == 27

    def test_raw_moves_ignore_pins(self) -> None:
        board = Board.from_fen("4k3/4r3/8/8/8/8/4B3/4K3 w - - 0 1")
        assert len(gen_bishop_raw_moves(board, E2)) > 0


class TestKing:
    def test_king_single_steps(self) -> None:
        board = Board.from_fen("4k3/8/8/8/4K3/8/8/8 w - - 0 1")
        assert len(gen_king_raw_moves(board, E4)) == 8

    def test_both_castles_offered(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        castles = [mv for mv in gen_king_raw_moves(board, E1) if isinstance(mv, CastleMove)]
        assert {mv.side for mv in castles} == {CastleSide.KING_SIDE, CastleSide.QUEEN_SIDE}

    def test_castle_legs(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
        castle = next(
            mv
            for mv in gen_king_raw_moves(board, E1)
            if isinstance(mv, CastleMove) and mv.side == CastleSide.QUEEN_SIDE
        )
        assert (str(castle.king.from_sq), str(castle.king.to_sq)) == ("e1", "c1")
        assert (str(castle.rook.from_sq), str(castle.rook.to_sq)) == ("a1", "d1")
        assert castle.rook.kind == PieceType.ROOK

    def test_castle_blocked_by_piece_between(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1")
        castles = [mv for mv in gen_king_raw_moves(board, E1) if isinstance(mv, CastleMove)]
        assert [mv.side for mv in castles] == [CastleSide.KING_SIDE]

    def test_no_castle_without_rights(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R w - - 0 1")
        assert not any(isinstance(mv, CastleMove) for mv in gen_king_raw_moves(board, E1))

    def test_castle_offered_even_in_check(self) -> None:
        board = Board.from_fen("4k3/8/8/8/8/8/4r3/R3K2R w KQ - 0 1")
        assert any(isinstance(mv, CastleMove) for mv in gen_king_raw_moves(board, E1))

    def test_black_castles(self) -> None:
        board = Board.from_fen("r3k2r/8/8/8/8/8/8/R3K2R b kq - 0 1")
        castles = [
            mv
            for mv in gen_king_raw_moves(board, Square.parse("e8"))
            if isinstance(mv, CastleMove)
        ]
        assert len(castles) == 2
        assert all(mv.color == Color.BLACK for mv in castles)
