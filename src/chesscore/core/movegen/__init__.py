"""Move generation: ray walks, pseudo-legal moves, legality filter."""

from chesscore.core.movegen.legal import filter_moves, gen_all_legal_moves, is_being_checked
from chesscore.core.movegen.raw import gen_all_raw_moves

__all__ = [
    "filter_moves",
    "gen_all_legal_moves",
    "gen_all_raw_moves",
    "is_being_checked",
]
