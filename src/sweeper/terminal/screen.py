"""
Curses rendering for the terminal front end.

Cells are drawn two columns apart with the cursor cell highlighted. Numbers
get their classic colours, and a status line sits under the board.
"""
import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Tuple

from ..engine.cell import SNAPSHOT_COVERED, SNAPSHOT_EXPLODED, SNAPSHOT_FLAGGED
from .controls import Action, action_for_key
from .session import GameSession


# ============================================================================
# Constants
# ============================================================================

class Style(Enum):
    """How a drawn cell should be coloured."""

    PLAIN = auto()
    NUMBER = auto()
    FLAGGED = auto()
    EXPLODED = auto()


# Colour pair ids. Pairs 1-8 are the numbers and 9-16 the same numbers on
# a selected cell, so a number's pair is found by offset.
SELECTED_OFFSET = 8
PAIR_UNSELECTED = 17
PAIR_SELECTED = 18
PAIR_EXPLODED = 19
PAIR_FLAGGED = 20
PAIR_FLAGGED_SELECTED = 21

NUMBER_COLORS = (
    curses.COLOR_BLUE,
    curses.COLOR_GREEN,
    curses.COLOR_RED,
    curses.COLOR_BLUE,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
    curses.COLOR_YELLOW,
    curses.COLOR_RED,
)


@dataclass
class Theme:
    """
    Glyphs used to draw the board.

    Attributes:
        covered: Covered cell.
        flagged: Flagged cell.
        exploded: The mine that went off.
        mine: Other mines, drawn after a loss when ``show_mines`` is set.
        empty: Uncovered cell with no neighboring mines.
        show_mines: Reveal every mine once the game is lost.
    """

    covered: str = "#"
    flagged: str = "F"
    exploded: str = "*"
    mine: str = "*"
    empty: str = " "
    show_mines: bool = False


# ============================================================================
# Cell Appearance (pure)
# ============================================================================

def glyph_for(value: int, theme: Theme) -> Tuple[str, Style]:
    """
    Turn a snapshot value into a character and a style.

    Args:
        value: Entry from ``Board.snapshot()``.
        theme: Glyph set.
    """
    if value == SNAPSHOT_COVERED:
        return theme.covered, Style.PLAIN
    if value == SNAPSHOT_FLAGGED:
        return theme.flagged, Style.FLAGGED
    if value == SNAPSHOT_EXPLODED:
        return theme.exploded, Style.EXPLODED
    if value == 0:
        return theme.empty, Style.PLAIN
    return str(value), Style.NUMBER


def pair_for(style: Style, selected: bool, number: int = 0) -> int:
    """Pick the colour pair for a cell."""
    if style == Style.EXPLODED:
        return PAIR_EXPLODED
    if style == Style.FLAGGED:
        return PAIR_FLAGGED_SELECTED if selected else PAIR_FLAGGED
    if style == Style.NUMBER:
        return number + SELECTED_OFFSET if selected else number
    return PAIR_SELECTED if selected else PAIR_UNSELECTED


def init_colors() -> None:
    """Register the colour pairs. Needs an initialised curses screen."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_UNSELECTED, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(PAIR_SELECTED, curses.COLOR_GREEN, curses.COLOR_WHITE)
    curses.init_pair(PAIR_EXPLODED, curses.COLOR_WHITE, curses.COLOR_RED)
    curses.init_pair(PAIR_FLAGGED, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(PAIR_FLAGGED_SELECTED, curses.COLOR_RED, curses.COLOR_WHITE)
    for number, color in enumerate(NUMBER_COLORS, start=1):
        curses.init_pair(number, color, curses.COLOR_BLACK)
        curses.init_pair(number + SELECTED_OFFSET, color, curses.COLOR_WHITE)


# ============================================================================
# Drawing
# ============================================================================

def _put(stdscr, row: int, col: int, text: str, attr: int) -> None:
    """addstr that ignores writes past the edge of a small terminal."""
    try:
        stdscr.addstr(row, col, text, attr)
    except curses.error:
        pass


def draw(
    stdscr,
    session: GameSession,
    theme: Theme,
    attr: Callable[[int], int] = curses.color_pair,
) -> None:
    """
    Draw the board and status line.

    Args:
        stdscr: Curses window.
        session: Game to draw.
        theme: Glyph set.
        attr: Turns a colour pair id into a curses attribute.
    """
    board = session.board
    view = board.snapshot()
    show_mines = theme.show_mines and not session.is_playing

    for y in range(board.height):
        for x in range(board.width):
            selected = x == session.cursor_x and y == session.cursor_y
            value = int(view[y, x])
            char, style = glyph_for(value, theme)
            if show_mines and value == SNAPSHOT_COVERED and board.get_cell(x, y).is_mine:
                char = theme.mine
            _put(stdscr, y, 2 * x + 1, char, attr(pair_for(style, selected, value)))
            # Colour the gap between cells too
            _put(stdscr, y, 2 * x, " ", attr(PAIR_UNSELECTED))

    status_row = board.height + 1
    try:
        stdscr.move(status_row, 0)
        stdscr.clrtoeol()
    except curses.error:
        pass
    _put(stdscr, status_row, 0, session.status_line(), attr(PAIR_UNSELECTED))


def run(stdscr, session: GameSession, theme: Theme) -> None:
    """
    Curses main loop. Blocks on key presses and redraws after each one.

    Meant to be passed to ``curses.wrapper``.
    """
    init_colors()
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.timeout(-1)
    stdscr.leaveok(True)
    stdscr.scrollok(False)

    draw(stdscr, session, theme)
    stdscr.refresh()
    while True:
        action = action_for_key(stdscr.getch())
        if action is None:
            continue
        if not session.apply(action):
            break
        if action == Action.NEW_GAME:
            stdscr.erase()
        draw(stdscr, session, theme)
        stdscr.refresh()
