"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chesscore.core import Board

    board = Board()
    board.make_move("e4")
    board.make_move("c5")
    board.make_move("Nf3")
    print(board.to_fen())
"""

from chesscore.core.board import Board, BoardStatus
from chesscore.core.enums import (
    PROMOTION_PIECES,
    CastleSide,
    CastlingRights,
    Color,
    PieceType,
    StatusKind,
)
from chesscore.core.errors import (
    AmbiguousMoveError,
    BoardError,
    ChessError,
    ColorError,
    IllegalMoveError,
    InvalidColorCharError,
    InvalidColorValueError,
    InvalidFenError,
    InvalidFileError,
    InvalidPatternError,
    InvalidPieceCharError,
    InvalidPieceValueError,
    InvalidRankError,
    InvalidSquareError,
    InvalidSquareIndexError,
    PieceError,
    SquareError,
)
from chesscore.core.move import Capture, CastleMove, MoveInfo, RawMove, SingleMove
from chesscore.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from chesscore.core.perft import perft, perft_divide
from chesscore.core.piece import EMPTY, BitPiece
from chesscore.core.types import Square

__all__ = [
    # Enums / flags
    "CastleSide",
    "CastlingRights",
    "Color",
    "PROMOTION_PIECES",
    "PieceType",
    "StatusKind",
    # Types
    "BitPiece",
    "EMPTY",
    "Square",
    # Domain objects
    "Board",
    "BoardStatus",
    "Capture",
    "CastleMove",
    "MoveInfo",
    "RawMove",
    "SingleMove",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    # Perft
    "perft",
    "perft_divide",
    # Errors
    "AmbiguousMoveError",
    "BoardError",
    "ChessError",
    "ColorError",
    "IllegalMoveError",
    "InvalidColorCharError",
    "InvalidColorValueError",
    "InvalidFenError",
    "InvalidFileError",
    "InvalidPatternError",
    "InvalidPieceCharError",
    "InvalidPieceValueError",
    "InvalidRankError",
    "InvalidSquareError",
    "InvalidSquareIndexError",
    "PieceError",
    "SquareError",
]
