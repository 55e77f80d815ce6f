"""Tests for BitPiece, PieceType and Color."""

import pytest

from chesscore.core.enums import CastleSide, CastlingRights, Color, PieceType
from chesscore.core.errors import (
    InvalidColorCharError,
    InvalidColorValueError,
    InvalidPieceCharError,
    InvalidPieceValueError,
)
from chesscore.core.piece import EMPTY, BitPiece


class TestBitPiecePacking:
    def test_new_unpacks(self) -> None:
        piece = BitPiece.new(PieceType.KNIGHT, Color.BLACK)
        assert piece.piece == PieceType.KNIGHT
        assert piece.color == Color.BLACK
        assert not piece.has_moved
        assert not piece.is_blank()

    def test_bit_layout(self) -> None:
        # bit 0 color, bits 1-3 kind, bit 4 moved
        assert BitPiece.new(PieceType.PAWN, Color.WHITE).bits == 0b0_0010
        assert BitPiece.new(PieceType.KING, Color.BLACK, moved=True).bits == 0b1_1101

    def test_blank(self) -> None:
        assert BitPiece.blank().is_blank()
        assert EMPTY.is_blank()
        assert BitPiece.blank() == EMPTY

    def test_set_moved_is_one_way(self) -> None:
        rook = BitPiece.new(PieceType.ROOK, Color.WHITE)
        moved = rook.set_moved()
        assert moved.has_moved
        assert moved.set_moved() == moved
        assert not rook.has_moved  # value object: original untouched

    def test_same_occupant_ignores_moved_flag(self) -> None:
        rook = BitPiece.new(PieceType.ROOK, Color.WHITE)
        assert rook.same_occupant(rook.set_moved())
        assert not rook.same_occupant(BitPiece.new(PieceType.ROOK, Color.BLACK))


class TestBitPieceDecoding:
    def test_from_bits_valid(self) -> None:
        piece = BitPiece.from_bits(0b0_1001)
        assert piece.piece == PieceType.ROOK
        assert piece.color == Color.BLACK

    def test_from_bits_zero_is_blank(self) -> None:
        assert BitPiece.from_bits(0).is_blank()

    @pytest.mark.parametrize("bits", [0b0_0001, 0b0_1110, 0b1_1111, 0b10_0010])
    def test_from_bits_invalid_kind(self, bits: int) -> None:
        with pytest.raises(InvalidPieceValueError):
            BitPiece.from_bits(bits)

    def test_corrupt_value_fails_on_decode(self) -> None:
        corrupt = BitPiece(0b0_1110)
        with pytest.raises(InvalidPieceValueError, match="Invalid piece value: 7"):
            _ = corrupt.piece

    def test_from_char(self) -> None:
        assert BitPiece.from_char("N") == BitPiece.new(PieceType.KNIGHT, Color.WHITE)
        assert BitPiece.from_char("q") == BitPiece.new(PieceType.QUEEN, Color.BLACK)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(InvalidPieceCharError):
            BitPiece.from_char("x")
        with pytest.raises(InvalidPieceCharError):
            BitPiece.from_char("1")

    def test_str_uses_upper_case_for_white(self) -> None:
        assert str(BitPiece.new(PieceType.KING, Color.WHITE)) == "K"
        assert str(BitPiece.new(PieceType.KING, Color.BLACK)) == "k"
        assert str(EMPTY) == "."

    def test_symbol(self) -> None:
        assert BitPiece.new(PieceType.KNIGHT, Color.BLACK).symbol == "♞"


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_color_parsing(self) -> None:
        assert Color.from_char("w") == Color.WHITE
        assert Color.from_char("b") == Color.BLACK
        assert Color.from_value(1) == Color.BLACK
        with pytest.raises(InvalidColorCharError):
            Color.from_char("x")
        with pytest.raises(InvalidColorValueError):
            Color.from_value(2)

    def test_piece_type_parsing(self) -> None:
        assert PieceType.from_char("n") == PieceType.KNIGHT
        assert PieceType.from_char("K") == PieceType.KING
        assert PieceType.from_value(1) == PieceType.PAWN
        with pytest.raises(InvalidPieceCharError):
            PieceType.from_char("z")
        with pytest.raises(InvalidPieceValueError):
            PieceType.from_value(0)

    def test_piece_letter(self) -> None:
        assert PieceType.BISHOP.letter == "B"

    def test_castling_rights_lookup(self) -> None:
        assert (
            CastlingRights.for_side(Color.BLACK, CastleSide.QUEEN_SIDE)
            == CastlingRights.BLACK_QUEENSIDE
        )
        assert CastlingRights.for_color(Color.WHITE) == CastlingRights.WHITE_BOTH
