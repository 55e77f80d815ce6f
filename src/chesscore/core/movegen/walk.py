"""Ray walking: step from a piece until blocked, capturing, or out of range."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from chesscore.core.types import Square

if TYPE_CHECKING:
    from chesscore.core.board import Board

MAX_OFFSET = 7

Step = Callable[[Square], "Square | None"]


class Vertical(Enum):
    UP = "up"
    DOWN = "down"


class Horizontal(Enum):
    LEFT = "left"
    RIGHT = "right"


class Diagonal(Enum):
    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    DOWN_LEFT = "down_left"
    DOWN_RIGHT = "down_right"


ORTHOGONALS: tuple[Vertical | Horizontal, ...] = (
    Vertical.UP,
    Vertical.DOWN,
    Horizontal.LEFT,
    Horizontal.RIGHT,
)
DIAGONALS: tuple[Diagonal, ...] = tuple(Diagonal)


def _then(first: Step, second: Step) -> Step:
    def step(sq: Square) -> Square | None:
        mid = first(sq)
        return second(mid) if mid is not None else None

    return step


_STEPS: dict[Enum, Step] = {
    Vertical.UP: Square.up,
    Vertical.DOWN: Square.down,
    Horizontal.LEFT: Square.left,
    Horizontal.RIGHT: Square.right,
    Diagonal.UP_LEFT: _then(Square.up, Square.left),
    Diagonal.UP_RIGHT: _then(Square.up, Square.right),
    Diagonal.DOWN_LEFT: _then(Square.down, Square.left),
    Diagonal.DOWN_RIGHT: _then(Square.down, Square.right),
}


def _walk(board: Board, origin: Square, step: Step, max_offset: int) -> list[Square]:
    squares: list[Square] = []
    piece = board[origin]
    if piece.is_blank():
        return squares
    color = piece.color
    remaining = max(min(max_offset, MAX_OFFSET), 1)
    sq: Square | None = origin
    while remaining:
        sq = step(sq)
        if sq is None:
            break
        target = board[sq]
        if not target.is_blank():
            if target.color != color:
                squares.append(sq)
            break
        squares.append(sq)
        remaining -= 1
    return squares


def vertical(board: Board, origin: Square, direction: Vertical, max_offset: int) -> list[Square]:
    return _walk(board, origin, _STEPS[direction], max_offset)


def horizontal(
    board: Board, origin: Square, direction: Horizontal, max_offset: int
) -> list[Square]:
    return _walk(board, origin, _STEPS[direction], max_offset)


def diagonal(board: Board, origin: Square, direction: Diagonal, max_offset: int) -> list[Square]:
    return _walk(board, origin, _STEPS[direction], max_offset)


def ray(
    board: Board,
    origin: Square,
    direction: Vertical | Horizontal | Diagonal,
    max_offset: int = MAX_OFFSET,
) -> list[Square]:
    """Dispatch to the walk matching *direction*'s axis."""
    return _walk(board, origin, _STEPS[direction], max_offset)
