"""FEN parsing and serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesscore.core.enums import CastlingRights, Color, PieceType
from chesscore.core.errors import ColorError, InvalidFenError, PieceError, SquareError
from chesscore.core.piece import EMPTY, BitPiece
from chesscore.core.types import A1, A8, E1, E8, H1, H8, Square

if TYPE_CHECKING:
    from chesscore.core.board import Board

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

MAX_HALFMOVE_CLOCK = 100

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

# Squares whose occupant only counts as unmoved while a castling right survives.
_CASTLING_HOMES: dict[Square, tuple[PieceType, Color, CastlingRights]] = {
    E1: (PieceType.KING, Color.WHITE, CastlingRights.WHITE_BOTH),
    E8: (PieceType.KING, Color.BLACK, CastlingRights.BLACK_BOTH),
    A1: (PieceType.ROOK, Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    H1: (PieceType.ROOK, Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    A8: (PieceType.ROOK, Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    H8: (PieceType.ROOK, Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}


def _parse_placement(placement: str) -> list[BitPiece]:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidFenError(f"board must contain 8 ranks: {placement!r}")
    cells = [EMPTY] * 64
    for rank_pos, rank_text in enumerate(ranks):
        rank_idx = 7 - rank_pos
        file_idx = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not 1 <= step <= 8:
                    raise InvalidFenError(f"digit {ch!r} in rank {rank_idx + 1}")
                file_idx += step
            else:
                if file_idx >= 8:
                    raise InvalidFenError(f"rank {rank_idx + 1} is wider than 8 squares")
                try:
                    cells[rank_idx * 8 + file_idx] = BitPiece.from_char(ch)
                except PieceError as exc:
                    raise InvalidFenError(str(exc)) from exc
                file_idx += 1
            if file_idx > 8:
                raise InvalidFenError(f"rank {rank_idx + 1} is wider than 8 squares")
        if file_idx != 8:
            raise InvalidFenError(f"rank {rank_idx + 1} does not cover 8 squares")
    return cells


def _parse_castling(field: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if field == "-":
        return castling
    seen: set[str] = set()
    for ch in field:
        right = _CASTLING_CHARS.get(ch)
        if right is None or ch in seen:
            raise InvalidFenError(f"{field!r} is not a valid castling field")
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(field: str, turn: Color) -> Square | None:
    if field == "-":
        return None
    try:
        sq = Square.parse(field)
    except SquareError as exc:
        raise InvalidFenError(f"en-passant square: {exc}") from exc
    expected_rank = 6 if turn == Color.WHITE else 3
    if sq.rank() != expected_rank:
        raise InvalidFenError(f"en-passant square {field!r} does not fit side to move")
    return sq


def _parse_counter(field: str, name: str, low: int, high: int | None = None) -> int:
    # plain ASCII digits only
    if not (field.isascii() and field.isdigit()):
        raise InvalidFenError(f"{field!r} is not a valid {name}")
    value = int(field)
    if value < low or (high is not None and value > high):
        raise InvalidFenError(f"{field!r} is not a valid {name}")
    return value


def _mark_moved(cells: list[BitPiece], castling: CastlingRights) -> None:
    """Derive moved flags the FEN cannot carry.

    Pawns off their start rank have moved. Kings and rooks on their home
    squares count as unmoved only while the matching castling right exists.
    """
    for idx, cell in enumerate(cells):
        if cell.is_blank():
            continue
        sq = Square(idx)
        kind, color = cell.piece, cell.color
        if kind == PieceType.PAWN:
            moved = sq.rank() != _PAWN_START_RANK[color]
        elif kind in (PieceType.KING, PieceType.ROOK):
            home = _CASTLING_HOMES.get(sq)
            moved = not (
                home is not None
                and home[0] == kind
                and home[1] == color
                and bool(castling & home[2])
            )
        else:
            continue
        if moved:
            cells[idx] = cell.set_moved()


def board_from_fen(fen: str) -> Board:
    """Parse a 6-field FEN string into a :class:`Board`."""
    from chesscore.core.board import Board

    parts = fen.split()
    if len(parts) != 6:
        raise InvalidFenError(f"need 6 fields, got {len(parts)}: {fen!r}")
    placement, turn_part, castling_part, ep_part, halfmove_part, fullmove_part = parts

    cells = _parse_placement(placement)
    try:
        turn = Color.from_char(turn_part)
    except ColorError as exc:
        raise InvalidFenError(f"{turn_part!r} is not a valid turn") from exc
    castling = _parse_castling(castling_part)
    en_passant = _parse_en_passant(ep_part, turn)
    halfmove = _parse_counter(halfmove_part, "halfmove clock", 0, MAX_HALFMOVE_CLOCK)
    fullmove = _parse_counter(fullmove_part, "fullmove number", 1)

    _mark_moved(cells, castling)
    return Board(cells, turn, castling, en_passant, halfmove, fullmove)


def board_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN (upper-case letters for White)."""
    # 1. Board
    rows: list[str] = []
    for rank_idx in range(7, -1, -1):
        empty = 0
        row = ""
        for file_idx in range(8):
            cell = board[rank_idx * 8 + file_idx]
            if cell.is_blank():
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(cell)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS.items() if board.castling & right)
    if not castling_str:
        castling_str = "-"

    # 3. En passant
    ep_str = str(board.en_passant) if board.en_passant is not None else "-"

    return (
        f"{board_str} {board.turn.fen_char} {castling_str} {ep_str} "
        f"{board.halfmove_clock} {board.fullmove_number}"
    )
