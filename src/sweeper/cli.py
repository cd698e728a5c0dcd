"""
Command-line entry point: build a board from process arguments and play.
"""
import argparse
import logging
import random
from typing import List, Optional

from .board import Board, BoardConfig
from .play import play
from .variants import Variant


def _variant(text: str) -> Variant:
    try:
        return Variant.from_name(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper with pluggable neighbor rules",
        epilog="variants: " + ", ".join(Variant.names()),
    )
    parser.add_argument("board_width", type=int, help="Number of columns")
    parser.add_argument("board_height", type=int, help="Number of rows")
    parser.add_argument("num_mines", type=int, help="Number of mines")
    parser.add_argument(
        "variant", type=_variant, help="Neighbor rule, e.g. normal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed for mine placement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug diagnostics"
    )
    return parser


def load_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> BoardConfig:
    """Validate parsed arguments, exiting with a usage error if invalid."""
    try:
        return BoardConfig(
            width=args.board_width,
            height=args.board_height,
            num_mines=args.num_mines,
            variant=args.variant,
        )
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run an interactive game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    config = load_config(parser, args)
    board = Board(config, rng=random.Random(args.seed))
    play(board, input_fn=input, output_fn=print)
    return 0
