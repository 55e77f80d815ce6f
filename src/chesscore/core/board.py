"""Board — the authoritative position: cells, game state and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from chesscore.core.enums import CastlingRights, Color, PieceType, StatusKind
from chesscore.core.errors import AmbiguousMoveError, ChessError, IllegalMoveError
from chesscore.core.move import CastleMove, MoveInfo, RawMove, SingleMove
from chesscore.core.movegen import gen_all_legal_moves, gen_all_raw_moves, is_being_checked
from chesscore.core.notation.san import (
    parse_castle,
    parse_move_text,
    resolve_candidates,
    select_castle,
)
from chesscore.core.piece import EMPTY, BitPiece
from chesscore.core.types import A1, A8, ALL_SQUARES, H1, H8, Square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# A move from or onto a rook corner ends castling on that side.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


@dataclass(frozen=True, slots=True)
class BoardStatus:
    """Ongoing, Check(color), Checkmate(color) or Stalemate."""

    kind: StatusKind
    # the side in check or mated
    color: Color | None = None

    @classmethod
    def ongoing(cls) -> BoardStatus:
        return cls(StatusKind.ONGOING)

    @classmethod
    def check(cls, color: Color) -> BoardStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, color: Color) -> BoardStatus:
        return cls(StatusKind.CHECKMATE, color)

    @classmethod
    def stalemate(cls) -> BoardStatus:
        return cls(StatusKind.STALEMATE)

    @property
    def is_over(self) -> bool:
        return self.kind in (StatusKind.CHECKMATE, StatusKind.STALEMATE)

    def __str__(self) -> str:
        name = self.kind.name.lower()
        return f"{name}({self.color})" if self.color is not None else name


def _initial_cells() -> list[BitPiece]:
    cells = [EMPTY] * 64
    for file_idx, piece in enumerate(_BACK_RANK):
        cells[file_idx] = BitPiece.new(piece, Color.WHITE)
        cells[8 + file_idx] = BitPiece.new(PieceType.PAWN, Color.WHITE)
        cells[48 + file_idx] = BitPiece.new(PieceType.PAWN, Color.BLACK)
        cells[56 + file_idx] = BitPiece.new(piece, Color.BLACK)
    return cells


class Board:
    """Mutable 64-cell board plus side to move, rights, clocks and history.

    ``Board()`` is the standard starting position. Moves enter through
    :meth:`make_move` (text) or :meth:`play` (a move from :meth:`legal_moves`);
    both update castling rights, clocks, status and history together.
    """

    __slots__ = (
        "_cells",
        "turn",
        "status",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "_history",
    )

    def __init__(
        self,
        cells: list[BitPiece] | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self._cells = list(cells) if cells is not None else _initial_cells()
        if len(self._cells) != 64:
            raise ValueError(f"Board needs 64 cells, got {len(self._cells)}")
        self.turn = turn
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self._history: list[MoveInfo] = []
        self.status = BoardStatus.ongoing()
        if cells is not None:
            self.status = self._compute_status(gen_all_legal_moves(self))

    # ── Construction / serialisation ─────────────────────────────────────

    @classmethod
    def from_fen(cls, fen: str) -> Board:
        """Parse a 6-field FEN string."""
        from chesscore.core.notation.fen import board_from_fen

        return board_from_fen(fen)

    def to_fen(self) -> str:
        from chesscore.core.notation.fen import board_to_fen

        return board_to_fen(self)

    def copy(self, history: bool = True) -> Board:
        """Independent copy; mutating it never touches this board.

        With ``history=False`` the copy starts with an empty move history.
        """
        b = Board.__new__(Board)
        b._cells = self._cells.copy()
        b.turn = self.turn
        b.status = self.status
        b.castling = self.castling
        b.en_passant = self.en_passant
        b.halfmove_clock = self.halfmove_clock
        b.fullmove_number = self.fullmove_number
        b._history = self._history.copy() if history else []
        return b

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: int) -> BitPiece:
        return self._cells[sq]

    @property
    def history(self) -> tuple[MoveInfo, ...]:
        return tuple(self._history)

    def king_square(self, color: Color) -> Square | None:
        for sq in ALL_SQUARES:
            cell = self._cells[sq]
            if cell.is_kind(PieceType.KING) and cell.color == color:
                return sq
        return None

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self) -> list[RawMove]:
        """Legal moves for the side to move."""
        return gen_all_legal_moves(self)

    def is_checked(self, color: Color | None = None) -> bool:
        """Whether *color* (default: side to move) could lose its king to a raw reply."""
        color = self.turn if color is None else color
        return is_being_checked(self, color, gen_all_raw_moves(self))

    def _compute_status(self, legal: list[RawMove]) -> BoardStatus:
        if self.is_checked(self.turn):
            if legal:
                return BoardStatus.check(self.turn)
            return BoardStatus.checkmate(self.turn)
        if not legal:
            return BoardStatus.stalemate()
        return BoardStatus.ongoing()

    # ── Execution ────────────────────────────────────────────────────────

    def force_execute_raw_move(self, move: RawMove) -> None:
        """Relocate pieces for *move* with no legality check or bookkeeping."""
        cells = self._cells
        if isinstance(move, CastleMove):
            for leg in (move.king, move.rook):
                cells[leg.from_sq] = EMPTY
                cells[leg.to_sq] = leg.piece
            self.en_passant = None
            return
        cells[move.from_sq] = EMPTY
        if move.capture is not None:
            cells[move.capture.square] = EMPTY
        cells[move.to_sq] = move.piece
        self.en_passant = move.en_passant_square

    def execute_move(self, info: MoveInfo, move: RawMove) -> None:
        """Relocate pieces for a committed move, promoting and marking movers."""
        cells = self._cells
        if isinstance(move, CastleMove):
            for leg in (move.king, move.rook):
                cells[leg.from_sq] = EMPTY
                cells[leg.to_sq] = leg.piece.set_moved()
            self.en_passant = None
            return
        placed = info.promotion if info.promotion is not None else move.piece
        cells[move.from_sq] = EMPTY
        if move.capture is not None:
            cells[move.capture.square] = EMPTY
        cells[move.to_sq] = placed.set_moved()
        self.en_passant = move.en_passant_square

    def make_move(self, notation: str) -> MoveInfo:
        """Resolve *notation* to exactly one legal move and commit it.

        Raises:
            InvalidPatternError: the text does not fit the move grammar.
            IllegalMoveError: no legal move matches.
            AmbiguousMoveError: more than one legal move matches.
        """
        text = notation.strip()
        try:
            move, promotion = self._resolve(text)
        except ChessError as exc:
            _LOGGER.info("Rejected move %r: %s", text, exc)
            raise
        return self.play(move, promotion, notation=text)

    def _resolve(self, text: str) -> tuple[RawMove, PieceType | None]:
        legal = self.legal_moves()

        side = parse_castle(text)
        if side is not None:
            return select_castle(legal, side, text), None

        query = parse_move_text(text)
        candidates = resolve_candidates(legal, query, self.turn)
        if not candidates:
            raise IllegalMoveError(text)
        if len(candidates) > 1:
            raise AmbiguousMoveError(text, [str(mv) for mv in candidates])
        return candidates[0], query.promotion

    def play(
        self,
        move: RawMove,
        promotion: PieceType | None = None,
        notation: str = "",
    ) -> MoveInfo:
        """Commit *move*, which must come from :meth:`legal_moves`.

        *promotion* is required exactly when the move is promotion-eligible.
        """
        label = notation or str(move)
        mover = self.turn
        if isinstance(move, CastleMove):
            if promotion is not None:
                raise IllegalMoveError(label, "castling cannot promote")
            info = MoveInfo(
                piece=move.king.piece,
                from_sq=move.king.from_sq,
                to_sq=move.king.to_sq,
                castle=move.side,
                notation=notation,
            )
            resets_clock = False
        else:
            if move.promotion and promotion is None:
                raise IllegalMoveError(label, "promotion piece required")
            if not move.promotion and promotion is not None:
                raise IllegalMoveError(label, "move does not promote")
            if promotion in (PieceType.PAWN, PieceType.KING):
                raise IllegalMoveError(label, f"cannot promote to {promotion.name.lower()}")
            info = MoveInfo(
                piece=move.piece,
                from_sq=move.from_sq,
                to_sq=move.to_sq,
                capture=move.capture.piece if move.capture is not None else None,
                promotion=(
                    BitPiece.new(promotion, mover, moved=True) if promotion is not None else None
                ),
                en_passant=move.en_passant,
                en_passant_square=move.en_passant_square,
                notation=notation,
            )
            resets_clock = move.kind == PieceType.PAWN or move.capture is not None

        self._update_castling(move)
        self.halfmove_clock = 0 if resets_clock else self.halfmove_clock + 1
        self.execute_move(info, move)

        self.turn = mover.opposite
        self.status = self._compute_status(gen_all_legal_moves(self))
        info = replace(
            info,
            check=self.status.kind in (StatusKind.CHECK, StatusKind.CHECKMATE),
            checkmate=self.status.kind == StatusKind.CHECKMATE,
        )

        if mover == Color.BLACK:
            self.fullmove_number += 1
        self._history.append(info)
        _LOGGER.debug("Played %s (%s); status %s", label, info, self.status)
        return info

    def _update_castling(self, move: RawMove) -> None:
        rights = self.castling
        if isinstance(move, CastleMove):
            rights &= ~CastlingRights.for_color(move.color)
        else:
            if move.kind == PieceType.KING:
                rights &= ~CastlingRights.for_color(move.color)
            for sq in (move.from_sq, move.to_sq):
                corner = _ROOK_CORNERS.get(sq)
                if corner is not None:
                    rights &= ~corner
        self.castling = rights

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            all(a.same_occupant(b) for a, b in zip(self._cells, other._cells))
            and self.turn == other.turn
            and self.status == other.status
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        rows: list[str] = []
        for rank_idx in range(7, -1, -1):
            row = [str(self._cells[rank_idx * 8 + file_idx]) for file_idx in range(8)]
            rows.append(f"{rank_idx + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board({self.to_fen()!r})"
