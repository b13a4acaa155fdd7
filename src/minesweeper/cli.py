"""
Command line entry point.

Usage:
    minesweeper [-b | -i | -e]
"""
import argparse
from typing import List, Optional

from .game.board import Board, BoardConfig, PRESETS
from .terminal.app import play


PRESET_HELP = """\

presets:
  -b  Beginner       8 x 8  grid with 10 mines
  -i  Intermediate  16 x 16 grid with 40 mines
  -e  Expert        16 x 30 grid with 99 mines
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one flag per preset."""
    parser = argparse.ArgumentParser(
        prog="minesweeper",
        description="Minesweeper in the terminal",
        usage="%(prog)s [-b | -i | -e]\n" + PRESET_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-b", "--beginner",
        dest="preset", action="store_const", const="beginner",
        help="8x8 grid with 10 mines (default)",
    )
    group.add_argument(
        "-i", "--intermediate",
        dest="preset", action="store_const", const="intermediate",
        help="16x16 grid with 40 mines",
    )
    group.add_argument(
        "-e", "--expert",
        dest="preset", action="store_const", const="expert",
        help="16x30 grid with 99 mines",
    )
    parser.set_defaults(preset="beginner")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> BoardConfig:
    """
    Parse arguments into a board configuration.

    Raises:
        SystemExit: On usage errors (status 2, usage printed to stderr).
    """
    args = build_parser().parse_args(argv)
    return PRESETS[args.preset]


def summarize(board: Board) -> str:
    """One-line result shown after the terminal is restored."""
    return (
        f"Status: {board.status} | "
        f"Time: {board.elapsed_ms} ms | "
        f"Flags: {board.flagged_count} / {board.num_mines}"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, play a game and print the result."""
    config = parse_config(argv)
    board = play(config)
    print(summarize(board))


if __name__ == "__main__":
    main()
