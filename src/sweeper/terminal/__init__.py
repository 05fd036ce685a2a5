"""
Terminal front end for the Minesweeper engine.

Provides the game session, key bindings and curses rendering.
"""
from .controls import Action, KEYMAP, action_for_key
from .session import GameSession
from .screen import Theme, draw, run

__all__ = [
    "Action",
    "KEYMAP",
    "action_for_key",
    "GameSession",
    "Theme",
    "draw",
    "run",
]
