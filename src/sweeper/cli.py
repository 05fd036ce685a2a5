"""
Command line entry point.

Usage:
    sweeper [-w WIDTH] [-h HEIGHT] [-m MINES] [--seed N] [--show-mines]
            [--log-file PATH] [--log-level LEVEL]
"""
import argparse
import curses
import logging
from typing import List, Optional

from . import __version__
from .engine import BoardConfig, InvalidDimensions, MINE_RATIO
from .terminal import GameSession, Theme, run

DESCRIPTION = (
    "A simple in-terminal minesweeper game. "
    "Uncover all the tiles that don't have a mine under them! "
    "Uncovering a safe square reveals the number of adjacent mines."
)

EPILOG = f"""\
controls:
  arrow keys or h/j/k/l  move the cursor
  space or z             uncover a tile (on a number: uncover its neighbors
                         once enough flags surround it)
  f or x                 flag a tile
  n                      new game
  q                      quit

If you do not give a number of mines, one in {MINE_RATIO} tiles holds a mine.
The first tile you uncover is never a mine.
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. ``-h`` is the board height, not help."""
    parser = argparse.ArgumentParser(
        prog="sweeper",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-w", "--width", type=int, default=20, help="width of the board in tiles"
    )
    parser.add_argument(
        "-h", "--height", type=int, default=20, help="height of the board in tiles"
    )
    parser.add_argument(
        "-m", "--mines", type=int, default=None,
        help="number of mines on the board (default: one tile in %d)" % MINE_RATIO,
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="random seed for the first board"
    )
    parser.add_argument(
        "--show-mines", action="store_true", help="show every mine after a loss"
    )
    parser.add_argument(
        "--log-file", default=None, help="write a game log to this file"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="log level for --log-file",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--help", action="help", help="show this help message and exit"
    )
    return parser


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Send logs to a file. Curses owns the terminal, so nothing else is set up."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = BoardConfig(args.width, args.height, args.mines)
    except InvalidDimensions as exc:
        parser.error(str(exc))

    configure_logging(args.log_file, args.log_level)
    session = GameSession(config, seed=args.seed)
    theme = Theme(show_mines=args.show_mines)
    curses.wrapper(run, session, theme)
    return 0
