"""Square type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from chesscore.core.errors import (
    InvalidFileError,
    InvalidRankError,
    InvalidSquareError,
    InvalidSquareIndexError,
)


class Square(int):
    """Immutable board coordinate 0–63.

    Being an ``int`` it indexes the cell array directly. The directional
    helpers return ``None`` instead of wrapping around an edge; a
    negative offset steps the opposite way.
    """

    __slots__ = ()

    def __new__(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise InvalidSquareIndexError(index)
        return super().__new__(cls, index)

    @classmethod
    def from_index(cls, index: int) -> Square:
        return cls(index)

    @classmethod
    def from_coords(cls, file_idx: int, rank_idx: int) -> Square:
        """Create square from file (0–7) and rank (0–7)."""
        return cls(rank_idx * 8 + file_idx)

    @classmethod
    def parse(cls, text: str) -> Square:
        """Parse square name, e.g. 'e4' → 28."""
        if len(text) != 2:
            raise InvalidSquareError(text)
        file_ch, rank_ch = text[0], text[1]
        if not "a" <= file_ch <= "h":
            raise InvalidFileError(file_ch)
        if not "1" <= rank_ch <= "8":
            raise InvalidRankError(rank_ch)
        return cls.from_coords(ord(file_ch) - ord("a"), ord(rank_ch) - ord("1"))

    # ── Coordinates ──────────────────────────────────────────────────────

    def rank(self) -> int:
        """Rank number 1–8."""
        return (self >> 3) + 1

    def file(self) -> str:
        """File letter 'a'–'h'."""
        return chr(ord("a") + (self & 7))

    @property
    def file_index(self) -> int:
        return self & 7

    @property
    def rank_index(self) -> int:
        return self >> 3

    # ── Navigation ───────────────────────────────────────────────────────

    def _shift(self, files: int, ranks: int) -> Square | None:
        file_idx = (self & 7) + files
        rank_idx = (self >> 3) + ranks
        if not (0 <= file_idx < 8 and 0 <= rank_idx < 8):
            return None
        return Square(rank_idx * 8 + file_idx)

    def up(self, offset: int = 1) -> Square | None:
        return self._shift(0, offset)

    def down(self, offset: int = 1) -> Square | None:
        return self._shift(0, -offset)

    def left(self, offset: int = 1) -> Square | None:
        return self._shift(-offset, 0)

    def right(self, offset: int = 1) -> Square | None:
        return self._shift(offset, 0)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.file()}{self.rank()}"

    def __repr__(self) -> str:
        return f"Square({self})"


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = map(Square, range(0, 8))
A2, B2, C2, D2, E2, F2, G2, H2 = map(Square, range(8, 16))
A3, B3, C3, D3, E3, F3, G3, H3 = map(Square, range(16, 24))
A4, B4, C4, D4, E4, F4, G4, H4 = map(Square, range(24, 32))
A5, B5, C5, D5, E5, F5, G5, H5 = map(Square, range(32, 40))
A6, B6, C6, D6, E6, F6, G6, H6 = map(Square, range(40, 48))
A7, B7, C7, D7, E7, F7, G7, H7 = map(Square, range(48, 56))
A8, B8, C8, D8, E8, F8, G8, H8 = map(Square, range(56, 64))

ALL_SQUARES: tuple[Square, ...] = tuple(Square(i) for i in range(64))
