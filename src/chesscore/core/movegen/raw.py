"""Pseudo-legal move generation.

Moves produced here obey each piece's movement rule but are never checked
for leaving the mover's own king capturable. That check needs the opponent's
replies, which come from this same generator, so consulting legality here
would recurse without end. Filtering happens in :mod:`.legal`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesscore.core.enums import CastleSide, Color, PieceType
from chesscore.core.move import Capture, CastleMove, RawMove, SingleMove
from chesscore.core.movegen.walk import (
    DIAGONALS,
    MAX_OFFSET,
    ORTHOGONALS,
    Diagonal,
    Horizontal,
    Vertical,
    diagonal,
    ray,
    vertical,
)
from chesscore.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chesscore.core.board import Board

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = ((2, 1), (1, 2))

# file index of the king's home square and of each side's rook corner
KING_FILE = 4
_ROOK_FILE: dict[CastleSide, int] = {CastleSide.KING_SIDE: 7, CastleSide.QUEEN_SIDE: 0}
_KING_TARGET_FILE: dict[CastleSide, int] = {CastleSide.KING_SIDE: 6, CastleSide.QUEEN_SIDE: 2}
_ROOK_TARGET_FILE: dict[CastleSide, int] = {CastleSide.KING_SIDE: 5, CastleSide.QUEEN_SIDE: 3}


def gen_all_raw_moves(board: Board) -> list[RawMove]:
    """Pseudo-legal moves for every occupied square, both colors."""
    moves: list[RawMove] = []
    for sq in ALL_SQUARES:
        piece = board[sq]
        if not piece.is_blank():
            moves.extend(_GENERATORS[piece.piece](board, sq))
    return moves


def _single(board: Board, origin: Square, to_sq: Square) -> SingleMove:
    """Plain relocation onto an empty or enemy-occupied square."""
    target = board[to_sq]
    capture = None if target.is_blank() else Capture(target, to_sq)
    return SingleMove(board[origin], origin, to_sq, capture)


def _far_rank(color: Color) -> int:
    return 8 if color == Color.WHITE else 1


# ── Piece generators ─────────────────────────────────────────────────────────


def gen_pawn_raw_moves(board: Board, square: Square) -> list[RawMove]:
    moves: list[RawMove] = []
    piece = board[square]
    if piece.is_blank():
        return moves
    color = piece.color
    far_rank = _far_rank(color)

    # Forward pushes never capture.
    forward = Vertical.UP if color == Color.WHITE else Vertical.DOWN
    max_offset = 1 if piece.has_moved else 2
    for to_sq in vertical(board, square, forward, max_offset):
        if not board[to_sq].is_blank():
            continue
        double_push = abs(to_sq.rank() - square.rank()) == 2
        skipped = (square.up() if color == Color.WHITE else square.down()) if double_push else None
        moves.append(
            SingleMove(
                piece,
                square,
                to_sq,
                promotion=to_sq.rank() == far_rank,
                en_passant_square=skipped,
            )
        )

    # Diagonal captures, including en passant.
    if color == Color.WHITE:
        dirs = (Diagonal.UP_LEFT, Diagonal.UP_RIGHT)
    else:
        dirs = (Diagonal.DOWN_LEFT, Diagonal.DOWN_RIGHT)
    for direction in dirs:
        for to_sq in diagonal(board, square, direction, 1):
            target = board[to_sq]
            if target.is_enemy_of(color):
                moves.append(
                    SingleMove(
                        piece,
                        square,
                        to_sq,
                        Capture(target, to_sq),
                        promotion=to_sq.rank() == far_rank,
                    )
                )
            elif to_sq == board.en_passant:
                # the double-pushed pawn sits one rank behind the target
                victim_sq = to_sq.down() if color == Color.WHITE else to_sq.up()
                if victim_sq is None:
                    continue
                victim = board[victim_sq]
                if not victim.is_enemy_of(color):
                    continue
                moves.append(
                    SingleMove(
                        piece,
                        square,
                        to_sq,
                        Capture(victim, victim_sq),
                        en_passant=True,
                    )
                )
    return moves


def gen_knight_raw_moves(board: Board, square: Square) -> list[RawMove]:
    moves: list[RawMove] = []
    piece = board[square]
    if piece.is_blank():
        return moves
    for rows, cols in KNIGHT_OFFSETS:
        for vert in (square.up(rows), square.down(rows)):
            if vert is None:
                continue
            for to_sq in (vert.left(cols), vert.right(cols)):
                if to_sq is None:
                    continue
                target = board[to_sq]
                if target.is_blank() or target.is_enemy_of(piece.color):
                    moves.append(_single(board, square, to_sq))
    return moves


def _gen_rays(
    board: Board,
    square: Square,
    directions: tuple[Vertical | Horizontal | Diagonal, ...],
    max_offset: int,
) -> list[RawMove]:
    moves: list[RawMove] = []
    if board[square].is_blank():
        return moves
    for direction in directions:
        for to_sq in ray(board, square, direction, max_offset):
            moves.append(_single(board, square, to_sq))
    return moves


def gen_bishop_raw_moves(board: Board, square: Square) -> list[RawMove]:
    return _gen_rays(board, square, DIAGONALS, MAX_OFFSET)


def gen_rook_raw_moves(board: Board, square: Square) -> list[RawMove]:
    return _gen_rays(board, square, ORTHOGONALS, MAX_OFFSET)


def gen_queen_raw_moves(board: Board, square: Square) -> list[RawMove]:
    return gen_bishop_raw_moves(board, square) + gen_rook_raw_moves(board, square)


def gen_king_raw_moves(board: Board, square: Square) -> list[RawMove]:
    moves = _gen_rays(board, square, ORTHOGONALS + DIAGONALS, 1)
    piece = board[square]
    if piece.is_blank() or piece.has_moved:
        return moves
    for side in (CastleSide.KING_SIDE, CastleSide.QUEEN_SIDE):
        castle = _gen_castle(board, square, side)
        if castle is not None:
            moves.append(castle)
    return moves


def _gen_castle(board: Board, king_sq: Square, side: CastleSide) -> CastleMove | None:
    """Castle with the never-moved rook on *side*, if the path is clear.

    Check safety is not considered here.
    """
    king = board[king_sq]
    rank_idx = king_sq.rank_index
    rook_sq = Square.from_coords(_ROOK_FILE[side], rank_idx)
    rook = board[rook_sq]
    if not rook.is_kind(PieceType.ROOK) or rook.color != king.color or rook.has_moved:
        return None

    low, high = sorted((king_sq.file_index, rook_sq.file_index))
    for file_idx in range(low + 1, high):
        if not board[Square.from_coords(file_idx, rank_idx)].is_blank():
            return None

    king_leg = SingleMove(king, king_sq, Square.from_coords(_KING_TARGET_FILE[side], rank_idx))
    rook_leg = SingleMove(rook, rook_sq, Square.from_coords(_ROOK_TARGET_FILE[side], rank_idx))
    return CastleMove(side, king_leg, rook_leg)


_GENERATORS: dict[PieceType, Callable[[Board, Square], list[RawMove]]] = {
    PieceType.PAWN: gen_pawn_raw_moves,
    PieceType.KNIGHT: gen_knight_raw_moves,
    PieceType.BISHOP: gen_bishop_raw_moves,
    PieceType.ROOK: gen_rook_raw_moves,
    PieceType.QUEEN: gen_queen_raw_moves,
    PieceType.KING: gen_king_raw_moves,
}
