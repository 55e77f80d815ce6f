"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto

from chesscore.core.errors import (
    InvalidColorCharError,
    InvalidColorValueError,
    InvalidPieceCharError,
    InvalidPieceValueError,
)


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def fen_char(self) -> str:
        """Side-to-move letter: 'w' or 'b'."""
        return "w" if self == Color.WHITE else "b"

    @classmethod
    def from_value(cls, value: int) -> Color:
        if value not in (0, 1):
            raise InvalidColorValueError(value)
        return cls(value)

    @classmethod
    def from_char(cls, char: str) -> Color:
        if char == "w":
            return cls.WHITE
        if char == "b":
            return cls.BLACK
        raise InvalidColorCharError(char)

    def __str__(self) -> str:
        return self.name.lower()


_PIECE_LETTERS = "PNBRQK"


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Upper-case letter, e.g. KNIGHT → 'N'."""
        return _PIECE_LETTERS[self.value - 1]

    @classmethod
    def from_value(cls, value: int) -> PieceType:
        if not 1 <= value <= 6:
            raise InvalidPieceValueError(value)
        return cls(value)

    @classmethod
    def from_char(cls, char: str) -> PieceType:
        """Parse a piece letter in either case."""
        idx = _PIECE_LETTERS.find(char.upper()) if len(char) == 1 else -1
        if idx < 0:
            raise InvalidPieceCharError(char)
        return cls(idx + 1)


PROMOTION_PIECES: tuple[PieceType, ...] = (
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.ROOK,
    PieceType.QUEEN,
)


class CastleSide(IntEnum):
    """Which rook takes part in a castle."""

    KING_SIDE = 0
    QUEEN_SIDE = 1

    @property
    def notation(self) -> str:
        return "O-O" if self == CastleSide.KING_SIDE else "O-O-O"


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @classmethod
    def for_side(cls, color: Color, side: CastleSide) -> CastlingRights:
        if color == Color.WHITE:
            return cls.WHITE_KINGSIDE if side == CastleSide.KING_SIDE else cls.WHITE_QUEENSIDE
        return cls.BLACK_KINGSIDE if side == CastleSide.KING_SIDE else cls.BLACK_QUEENSIDE

    @classmethod
    def for_color(cls, color: Color) -> CastlingRights:
        return cls.WHITE_BOTH if color == Color.WHITE else cls.BLACK_BOTH


class StatusKind(IntEnum):
    """Game status after the last committed move."""

    ONGOING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
