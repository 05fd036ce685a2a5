"""
Sweeper - Minesweeper in the terminal.

The ``engine`` package holds the board logic; ``terminal`` drives it from
a curses screen.
"""
__version__ = "1.1.0"
