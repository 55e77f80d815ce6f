"""Move value objects: pseudo-legal raw moves and resolved history records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chesscore.core.enums import CastleSide, Color, PieceType
from chesscore.core.piece import BitPiece
from chesscore.core.types import Square


@dataclass(frozen=True, slots=True)
class Capture:
    """A captured occupant and the square it is taken from.

    For en passant ``square`` differs from the mover's destination.
    """

    piece: BitPiece
    square: Square


@dataclass(frozen=True, slots=True)
class SingleMove:
    """One piece relocating, possibly capturing. Not yet checked for legality."""

    piece: BitPiece
    from_sq: Square
    to_sq: Square
    capture: Capture | None = None
    # destination is the far rank for a pawn
    promotion: bool = False
    en_passant: bool = False
    # set by a pawn double push: the skipped square
    en_passant_square: Square | None = None

    @property
    def color(self) -> Color:
        return self.piece.color

    @property
    def kind(self) -> PieceType:
        return self.piece.piece

    def __str__(self) -> str:
        return f"{self.piece}{self.from_sq}{'x' if self.capture else '-'}{self.to_sq}"


@dataclass(frozen=True, slots=True)
class CastleMove:
    """King and rook legs applied together."""

    side: CastleSide
    king: SingleMove
    rook: SingleMove

    @property
    def color(self) -> Color:
        return self.king.color

    @property
    def kind(self) -> PieceType:
        return PieceType.KING

    def __str__(self) -> str:
        return self.side.notation


RawMove: TypeAlias = SingleMove | CastleMove


@dataclass(frozen=True, slots=True)
class MoveInfo:
    """A committed move as stored in the game history."""

    piece: BitPiece
    from_sq: Square
    to_sq: Square
    capture: BitPiece | None = None
    promotion: BitPiece | None = None
    castle: CastleSide | None = None
    en_passant: bool = False
    en_passant_square: Square | None = None
    check: bool = False
    checkmate: bool = False
    notation: str = ""

    @property
    def color(self) -> Color:
        return self.piece.color

    @property
    def uci(self) -> str:
        """Long-algebraic form, e.g. 'e7e8q'."""
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += self.promotion.piece.letter.lower()
        return base

    def __str__(self) -> str:
        if self.castle is not None:
            text = self.castle.notation
        else:
            text = self.uci
        if self.checkmate:
            text += "#"
        elif self.check:
            text += "+"
        return text
