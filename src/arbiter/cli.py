"""Command-line entry point: list moves, run perft, play out a line."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Sequence

from arbiter.core.errors import ArbiterError
from arbiter.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from arbiter.core.perft import divide, perft
from arbiter.core.position import Position, parse_move
from arbiter.game.record import GameRecord

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arbiter", description="Standard chess rules engine"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="List legal moves of a position")
    moves.add_argument("--fen", default=STARTING_FEN, help="FEN (default: startpos)")

    perft_cmd = sub.add_parser("perft", help="Count leaf nodes to a given depth")
    perft_cmd.add_argument("--fen", default=STARTING_FEN, help="FEN (default: startpos)")
    perft_cmd.add_argument("--depth", type=int, default=3, help="Depth (default: 3)")
    perft_cmd.add_argument(
        "--divide", action="store_true", help="Print per-root-move counts"
    )

    play = sub.add_parser("play", help="Apply moves such as e2e4 and show the result")
    play.add_argument("moves", nargs="*", help="Long-algebraic moves")
    play.add_argument("--fen", default=STARTING_FEN, help="FEN (default: startpos)")

    return parser


def _print_status(position: Position) -> None:
    print(repr(position.board))
    print(f"fen: {position_to_fen(position)}")
    status = position.result.value
    if position.end_reason is not None:
        status += f" ({position.end_reason.value})"
    print(f"status: {status}")
    if position.in_check:
        print("check")


def _cmd_moves(args: argparse.Namespace) -> int:
    position = position_from_fen(args.fen)
    for move in position.legal_moves:
        print(move)
    print(f"total={len(position.legal_moves)}")
    return 0


def _cmd_perft(args: argparse.Namespace) -> int:
    position = position_from_fen(args.fen)
    start = time.perf_counter()
    if args.divide:
        counts = divide(position, args.depth)
        for text, nodes in counts.items():
            print(f"{text}: {nodes}")
        total = sum(counts.values())
    else:
        total = perft(position, args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={total} depth={args.depth} time_ms={int(dt * 1000)}")
    return 0


def _cmd_play(args: argparse.Namespace) -> int:
    record = GameRecord(start=position_from_fen(args.fen))
    for text in args.moves:
        record.play(parse_move(record.current, text))
    _print_status(record.current)
    return 0


_COMMANDS = {
    "moves": _cmd_moves,
    "perft": _cmd_perft,
    "play": _cmd_play,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI; returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return _COMMANDS[args.command](args)
    except (ArbiterError, ValueError) as exc:
        _LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
