"""
Minesweeper board engine.

Provides the core game logic: cell state, mine placement, the
reveal/cascade/chord algorithm and game status. No terminal code lives here.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameStatus, MINE_RATIO, new_board
from .errors import (
    SweeperError,
    InvalidDimensions,
    ContractViolation,
    MinesAlreadyPlaced,
    MinesNotPlaced,
    OutOfBounds,
)

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameStatus",
    "MINE_RATIO",
    "new_board",
    "SweeperError",
    "InvalidDimensions",
    "ContractViolation",
    "MinesAlreadyPlaced",
    "MinesNotPlaced",
    "OutOfBounds",
]
