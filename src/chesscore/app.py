"""Command-line entry point: interactive play, board display and perft."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chesscore.core import Board, ChessError, perft, perft_divide
from chesscore.core.move import CastleMove, RawMove

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"quit", "exit"})

_HELP_TEXT = """\
Enter moves like e4, Nf3, Rxd4, e8=Q, O-O (Black uses lower-case piece letters: nf6).
Commands: fen, moves, history, board, help, quit"""


def _load_board(fen: str | None) -> Board:
    return Board.from_fen(fen) if fen else Board()


def _describe_move(move: RawMove) -> str:
    if isinstance(move, CastleMove):
        return move.side.notation
    suffix = "=?" if move.promotion else ""
    return f"{move.from_sq}{move.to_sq}{suffix}"


def run_loop(board: Board, lines: TextIO, out: TextIO) -> int:
    """Feed each input line to ``board.make_move`` until quit, EOF or game over."""
    print(board, file=out)
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        if line in _QUIT_WORDS:
            return 0
        if line == "help":
            print(_HELP_TEXT, file=out)
            continue
        if line == "fen":
            print(board.to_fen(), file=out)
            continue
        if line == "board":
            print(board, file=out)
            continue
        if line == "moves":
            print(" ".join(_describe_move(mv) for mv in board.legal_moves()), file=out)
            continue
        if line == "history":
            print(" ".join(str(info) for info in board.history), file=out)
            continue

        try:
            board.make_move(line)
        except ChessError as exc:
            print(f"error: {exc}", file=out)
            continue

        print(board, file=out)
        print(f"status: {board.status}", file=out)
        if board.status.is_over:
            return 0
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    board = _load_board(args.fen)
    return run_loop(board, sys.stdin, sys.stdout)


def cmd_show(args: argparse.Namespace) -> int:
    board = _load_board(args.fen)
    print(board)
    print()
    print(board.to_fen())
    return 0


def cmd_perft(args: argparse.Namespace) -> int:
    board = _load_board(args.fen)
    if args.divide:
        out = perft_divide(board, args.depth)
        for key in sorted(out):
            print(f"{key}: {out[key]}")
        print(f"Total: {sum(out.values())}")
    else:
        print(perft(board, args.depth))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="chesscore")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("play", help="Read moves from stdin and apply them")
    pl.add_argument("--fen", type=str, default=None)
    pl.set_defaults(fn=cmd_play)

    ss = sub.add_parser("show", help="Show the board and its FEN")
    ss.add_argument("--fen", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    sp = sub.add_parser("perft", help="Count leaf positions of the move tree")
    sp.add_argument("--depth", type=int, default=3)
    sp.add_argument("--fen", type=str, default=None)
    sp.add_argument("--divide", action="store_true")
    sp.set_defaults(fn=cmd_perft)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.fn(args))
    except ChessError as exc:
        _LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
