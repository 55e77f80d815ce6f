"""Perft: leaf-node counts of the legal-move tree."""

from __future__ import annotations

from chesscore.core.board import Board
from chesscore.core.enums import PROMOTION_PIECES, PieceType
from chesscore.core.move import RawMove, SingleMove


def _expand(move: RawMove) -> list[tuple[RawMove, PieceType | None]]:
    if isinstance(move, SingleMove) and move.promotion:
        return [(move, piece) for piece in PROMOTION_PIECES]
    return [(move, None)]


def perft(board: Board, depth: int) -> int:
    """Count leaf positions *depth* plies below *board*.

    Promotion-eligible moves count once per promotion piece. *board* is not
    modified.
    """
    if depth <= 0:
        return 1
    nodes = 0
    for move in board.legal_moves():
        for mv, piece in _expand(move):
            if depth == 1:
                nodes += 1
                continue
            child = board.copy(history=False)
            child.play(mv, piece)
            nodes += perft(child, depth - 1)
    return nodes


def perft_divide(board: Board, depth: int) -> dict[str, int]:
    """Per-root-move node counts, keyed by long-algebraic move text."""
    out: dict[str, int] = {}
    for move in board.legal_moves():
        for mv, piece in _expand(move):
            child = board.copy(history=False)
            info = child.play(mv, piece)
            out[info.uci] = perft(child, depth - 1)
    return out
