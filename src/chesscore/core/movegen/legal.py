"""Legality filter over pseudo-legal moves.

Each candidate is force-applied to a copy of the board and the opponent's
raw replies are regenerated there; the candidate survives if none of those
replies lands on the mover's king. Only raw replies are consulted, so the
filter never calls back into itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import Color, PieceType
from chesscore.core.move import CastleMove, RawMove, SingleMove
from chesscore.core.movegen.raw import gen_all_raw_moves

if TYPE_CHECKING:
    from chesscore.core.board import Board


def gen_all_legal_moves(board: Board) -> list[RawMove]:
    """All legal moves for the side to move."""
    own = [mv for mv in gen_all_raw_moves(board) if mv.color == board.turn]
    return filter_moves(board, own)


def is_being_checked(board: Board, color: Color, raw_moves: list[RawMove]) -> bool:
    """Whether any opposing single move in *raw_moves* lands on *color*'s king.

    Castle legs are skipped: neither leg can capture.
    """
    for mv in raw_moves:
        if not isinstance(mv, SingleMove) or mv.color == color:
            continue
        target = board[mv.to_sq]
        if target.is_kind(PieceType.KING) and target.color == color:
            return True
    return False


def _leaves_king_capturable(board: Board, move: RawMove) -> bool:
    probe = board.copy(history=False)
    probe.force_execute_raw_move(move)
    return is_being_checked(probe, move.color, gen_all_raw_moves(probe))


def filter_moves(board: Board, raw_moves: list[RawMove]) -> list[RawMove]:
    """Keep the moves that do not leave the mover's king capturable.

    A castle is also dropped when the king starts in check or crosses a
    threatened square; the crossing square is probed with a king-only step.
    """
    legal: list[RawMove] = []
    in_check: dict[Color, bool] = {}
    for mv in raw_moves:
        if isinstance(mv, CastleMove):
            color = mv.color
            if color not in in_check:
                in_check[color] = is_being_checked(board, color, gen_all_raw_moves(board))
            if in_check[color]:
                continue
            crossing = SingleMove(mv.king.piece, mv.king.from_sq, mv.rook.to_sq)
            if _leaves_king_capturable(board, crossing):
                continue
        if not _leaves_king_capturable(board, mv):
            legal.append(mv)
    return legal
