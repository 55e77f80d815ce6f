"""Error taxonomy for the rules engine.

Every error derives from :class:`ChessError`, which is a ``ValueError`` so
callers that treat bad input as a value problem keep working.
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for all rules-engine errors."""


# ── Pieces and colors ────────────────────────────────────────────────────────


class PieceError(ChessError):
    pass


class InvalidPieceValueError(PieceError):
    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid piece value: {value}")
        self.value = value


class InvalidPieceCharError(PieceError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid piece character: {char!r}")
        self.char = char


class ColorError(ChessError):
    pass


class InvalidColorValueError(ColorError):
    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid color value: {value}")
        self.value = value


class InvalidColorCharError(ColorError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid color character: {char!r}")
        self.char = char


# ── Squares ──────────────────────────────────────────────────────────────────


class SquareError(ChessError):
    pass


class InvalidRankError(SquareError):
    def __init__(self, rank: str) -> None:
        super().__init__(f"Invalid rank: {rank!r}")
        self.rank = rank


class InvalidFileError(SquareError):
    def __init__(self, file: str) -> None:
        super().__init__(f"Invalid file: {file!r}")
        self.file = file


class InvalidSquareError(SquareError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid square: {text!r}")
        self.text = text


class InvalidSquareIndexError(SquareError):
    def __init__(self, index: int) -> None:
        super().__init__(f"Invalid square index: {index}")
        self.index = index


# ── Board ────────────────────────────────────────────────────────────────────


class BoardError(ChessError):
    pass


class IllegalMoveError(BoardError):
    def __init__(self, notation: str, reason: str = "") -> None:
        message = f"Illegal move: {notation}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.notation = notation


class InvalidFenError(BoardError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid FEN: {detail}")
        self.detail = detail


class InvalidPatternError(BoardError):
    def __init__(self, notation: str) -> None:
        super().__init__(f"Invalid move pattern: {notation!r}")
        self.notation = notation


class AmbiguousMoveError(BoardError):
    def __init__(self, notation: str, candidates: list[str]) -> None:
        super().__init__(f"Ambiguous move: {notation} → {', '.join(candidates)}")
        self.notation = notation
        self.candidates = candidates
