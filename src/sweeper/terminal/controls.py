"""
Key bindings for the terminal front end.

Arrow keys or vim directions move the cursor, space or Z uncovers,
F or X flags, N starts a new game and Q quits.
"""
import curses
from enum import Enum, auto
from typing import Dict, Optional


class Action(Enum):
    """Things a key press can ask the session to do."""

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    REVEAL = auto()
    FLAG = auto()
    NEW_GAME = auto()
    QUIT = auto()


# Cursor deltas as (dx, dy)
MOVES: Dict[Action, tuple] = {
    Action.MOVE_LEFT: (-1, 0),
    Action.MOVE_RIGHT: (1, 0),
    Action.MOVE_UP: (0, -1),
    Action.MOVE_DOWN: (0, 1),
}

_LETTERS = {
    "h": Action.MOVE_LEFT,
    "l": Action.MOVE_RIGHT,
    "k": Action.MOVE_UP,
    "j": Action.MOVE_DOWN,
    " ": Action.REVEAL,
    "z": Action.REVEAL,
    "f": Action.FLAG,
    "x": Action.FLAG,
    "n": Action.NEW_GAME,
    "q": Action.QUIT,
}


def _build_keymap() -> Dict[int, Action]:
    keymap = {
        curses.KEY_LEFT: Action.MOVE_LEFT,
        curses.KEY_RIGHT: Action.MOVE_RIGHT,
        curses.KEY_UP: Action.MOVE_UP,
        curses.KEY_DOWN: Action.MOVE_DOWN,
    }
    for letter, action in _LETTERS.items():
        keymap[ord(letter)] = action
        keymap[ord(letter.upper())] = action
    return keymap


KEYMAP = _build_keymap()


def action_for_key(key: int) -> Optional[Action]:
    """Map a ``getch`` key code to an action, or None if unbound."""
    return KEYMAP.get(key)
