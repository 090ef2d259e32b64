"""
Command-line entry point.

Usage:
    sweeper [--width N] [--height N] [--mines N] [--seed HEX] [--cartesian]
"""
import argparse
from typing import List, Optional

from .console import ConsoleSession, CoordinateOrder
from .game.board import BoardConfig, GameEngine


def _hex_seed(value: str) -> int:
    """Parse a seed written in hexadecimal, as printed on the board."""
    try:
        return int(value, 16)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hex seed: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sweeper",
        description="Play a game of minesweeper in the terminal",
    )
    parser.add_argument(
        "--width", type=int, default=20, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=20, help="Number of rows"
    )
    parser.add_argument(
        "--mines", type=int, default=70, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=_hex_seed, default=None,
        help="Seed for the first game, in hex (default: random)",
    )
    parser.add_argument(
        "--cartesian", action="store_true",
        help="Type coordinates as 'x y' instead of 'row column'",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and play until the game ends."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = BoardConfig(
            width=args.width,
            height=args.height,
            num_mines=args.mines,
            seed=args.seed,
        )
    except ValueError as error:
        parser.error(str(error))

    order = (
        CoordinateOrder.COLUMN_FIRST if args.cartesian
        else CoordinateOrder.ROW_FIRST
    )
    session = ConsoleSession(GameEngine(config), order)
    session.play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
