"""Notation package: FEN and short algebraic move text."""

from chesscore.core.notation.fen import STARTING_FEN, board_from_fen, board_to_fen
from chesscore.core.notation.san import (
    MoveQuery,
    filter_candidates,
    parse_castle,
    parse_move_text,
    resolve_candidates,
    select_castle,
)

__all__ = [
    "STARTING_FEN",
    "MoveQuery",
    "board_from_fen",
    "board_to_fen",
    "filter_candidates",
    "parse_castle",
    "parse_move_text",
    "resolve_candidates",
    "select_castle",
]
