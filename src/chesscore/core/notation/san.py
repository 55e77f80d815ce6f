"""Short algebraic move text: parsing and candidate resolution.

Grammar::

    O-O | O-O-O
    [origin]? [piece]? [origin]? [x]? <dest> [=promotion]? [+|#]?

``origin`` is a file or a rank and may sit on either side of the piece
letter, but only once. The piece letter's case names its side: upper case
for White, lower case for Black.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from chesscore.core.enums import CastleSide, Color, PieceType
from chesscore.core.errors import IllegalMoveError, InvalidPatternError
from chesscore.core.move import CastleMove, RawMove, SingleMove
from chesscore.core.types import Square

_MOVE_RE = re.compile(
    r"^(?P<origin>[a-h1-8])?"
    r"(?P<piece>[PNBRQKpnbrqk])?"
    r"(?P<origin2>[a-h1-8])?"
    r"(?P<capture>x)?"
    r"(?P<dest>[a-h][1-8])"
    r"(?:=(?P<promotion>[NBRQnbrq]))?"
    r"[+#]?$"
)

_CASTLE_TEXT: dict[str, CastleSide] = {
    "O-O": CastleSide.KING_SIDE,
    "0-0": CastleSide.KING_SIDE,
    "O-O-O": CastleSide.QUEEN_SIDE,
    "0-0-0": CastleSide.QUEEN_SIDE,
}

_CASTLE_ROOK_FILE: dict[CastleSide, str] = {
    CastleSide.KING_SIDE: "h",
    CastleSide.QUEEN_SIDE: "a",
}


@dataclass(frozen=True, slots=True)
class MoveQuery:
    """Constraints parsed from one piece of move text."""

    text: str
    dest: Square
    origin_file: str | None = None
    origin_rank: int | None = None
    piece: PieceType | None = None
    # side named by the piece letter's case
    piece_color: Color | None = None
    capture: bool = False
    promotion: PieceType | None = None


def parse_castle(text: str) -> CastleSide | None:
    """Castle side for 'O-O' / 'O-O-O' (check suffix allowed), else ``None``."""
    return _CASTLE_TEXT.get(text.rstrip("+#"))


def parse_move_text(text: str) -> MoveQuery:
    """Parse non-castle move text; malformed text raises :class:`InvalidPatternError`."""
    match = _MOVE_RE.match(text)
    if match is None:
        raise InvalidPatternError(text)
    origin = match["origin"]
    if origin is not None and match["origin2"] is not None:
        raise InvalidPatternError(text)
    origin = origin or match["origin2"]

    piece: PieceType | None = None
    piece_color: Color | None = None
    if match["piece"] is not None:
        letter = match["piece"]
        piece = PieceType.from_char(letter)
        piece_color = Color.WHITE if letter.isupper() else Color.BLACK

    promotion = PieceType.from_char(match["promotion"]) if match["promotion"] else None

    return MoveQuery(
        text=text,
        dest=Square.parse(match["dest"]),
        origin_file=origin if origin is not None and origin.isalpha() else None,
        origin_rank=int(origin) if origin is not None and origin.isdigit() else None,
        piece=piece,
        piece_color=piece_color,
        capture=match["capture"] is not None,
        promotion=promotion,
    )


def select_castle(legal: list[RawMove], side: CastleSide, text: str) -> CastleMove:
    """Pick the legal castle whose rook starts on *side*'s file."""
    rook_file = _CASTLE_ROOK_FILE[side]
    for mv in legal:
        if isinstance(mv, CastleMove) and mv.rook.from_sq.file() == rook_file:
            return mv
    raise IllegalMoveError(text)


def filter_candidates(legal: list[RawMove], query: MoveQuery, turn: Color) -> list[SingleMove]:
    """Narrow *legal* step by step to the moves matching *query*."""
    if query.piece_color is not None and query.piece_color != turn:
        raise IllegalMoveError(query.text, f"piece letter is not {turn}'s")

    candidates = [mv for mv in legal if isinstance(mv, SingleMove)]
    candidates = [mv for mv in candidates if mv.to_sq == query.dest]
    if query.origin_file is not None:
        candidates = [mv for mv in candidates if mv.from_sq.file() == query.origin_file]
    if query.origin_rank is not None:
        candidates = [mv for mv in candidates if mv.from_sq.rank() == query.origin_rank]
    kind = query.piece or PieceType.PAWN
    candidates = [mv for mv in candidates if mv.kind == kind]
    if query.capture:
        candidates = [mv for mv in candidates if mv.capture is not None]
    if query.promotion is not None:
        candidates = [mv for mv in candidates if mv.promotion]
    return candidates


def resolve_candidates(legal: list[RawMove], query: MoveQuery, turn: Color) -> list[SingleMove]:
    """Like :func:`filter_candidates`, reading Black's ``b`` as a bishop if no pawn fits.

    A lower-case ``b`` is both a file and Black's bishop letter; the pawn
    reading wins whenever it names at least one move.
    """
    candidates = filter_candidates(legal, query, turn)
    if (
        candidates
        or turn != Color.BLACK
        or query.piece is not None
        or query.origin_file != "b"
        or query.promotion is not None
    ):
        return candidates
    as_bishop = replace(
        query, origin_file=None, piece=PieceType.BISHOP, piece_color=Color.BLACK
    )
    return filter_candidates(legal, as_bishop, turn)
