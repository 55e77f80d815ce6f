"""BitPiece — the packed occupant of one board cell."""

from __future__ import annotations

from dataclasses import dataclass

from chesscore.core.enums import Color, PieceType
from chesscore.core.errors import InvalidPieceCharError, InvalidPieceValueError

# bit 0: color, bits 1-3: piece type, bit 4: moved flag
_COLOR_MASK = 0b0_0001
_PIECE_MASK = 0b0_1110
_MOVED_MASK = 0b1_0000
_VALUE_MASK = 0b1_1111

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class BitPiece:
    """Immutable packed cell value: empty, or color + piece type + moved flag.

    ``bits == 0`` is the empty sentinel. A non-empty value always carries a
    piece type in 1..6; :meth:`from_bits` is the only way to build one from
    an arbitrary integer and it validates that range.
    """

    bits: int = 0

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def new(cls, piece: PieceType, color: Color, moved: bool = False) -> BitPiece:
        return cls(int(color) | (int(piece) << 1) | (_MOVED_MASK if moved else 0))

    @classmethod
    def blank(cls) -> BitPiece:
        return EMPTY

    @classmethod
    def from_bits(cls, bits: int) -> BitPiece:
        """Decode a raw integer, rejecting out-of-range piece bits."""
        if bits == 0:
            return EMPTY
        if bits & ~_VALUE_MASK:
            raise InvalidPieceValueError(bits)
        PieceType.from_value((bits & _PIECE_MASK) >> 1)
        return cls(bits)

    @classmethod
    def from_char(cls, char: str) -> BitPiece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or not char.isalpha():
            raise InvalidPieceCharError(char)
        piece = PieceType.from_char(char)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls.new(piece, color)

    # ── Accessors ────────────────────────────────────────────────────────

    def is_blank(self) -> bool:
        return self.bits == 0

    @property
    def piece(self) -> PieceType:
        return PieceType.from_value((self.bits & _PIECE_MASK) >> 1)

    @property
    def color(self) -> Color:
        return Color.BLACK if self.bits & _COLOR_MASK else Color.WHITE

    @property
    def has_moved(self) -> bool:
        return bool(self.bits & _MOVED_MASK)

    def set_moved(self) -> BitPiece:
        """Return this occupant with the moved flag set. The flag is never cleared."""
        return BitPiece(self.bits | _MOVED_MASK)

    def is_kind(self, piece: PieceType) -> bool:
        return not self.is_blank() and self.piece == piece

    def is_enemy_of(self, color: Color) -> bool:
        return not self.is_blank() and self.color != color

    def same_occupant(self, other: BitPiece) -> bool:
        """Equal color and type, ignoring the moved flag."""
        return (self.bits & ~_MOVED_MASK) == (other.bits & ~_MOVED_MASK)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black), '.' when empty."""
        if self.is_blank():
            return "."
        letter = self.piece.letter
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        if self.is_blank():
            return "·"
        return _UNICODE[(self.color, self.piece)]

    def __repr__(self) -> str:
        if self.is_blank():
            return "BitPiece(empty)"
        moved = ", moved" if self.has_moved else ""
        return f"BitPiece({self.color.name} {self.piece.name}{moved})"


EMPTY = BitPiece(0)
