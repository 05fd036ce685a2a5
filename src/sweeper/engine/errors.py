"""
Exceptions raised by the board engine.

Losing a game is not an error: an exploded mine is reported through
``GameStatus.LOST``. Everything here is either a bad board configuration
or a caller breaking the engine's contract.
"""


class SweeperError(Exception):
    """Base class for all engine errors."""


class InvalidDimensions(SweeperError, ValueError):
    """Board width, height or mine count is out of range."""


class ContractViolation(SweeperError, RuntimeError):
    """An engine operation was called in a state that forbids it."""


class MinesAlreadyPlaced(ContractViolation):
    """Mines may only be laid once per board."""


class MinesNotPlaced(ContractViolation):
    """The board has no mines yet, so cells cannot be revealed."""


class OutOfBounds(ContractViolation, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} board")
        self.x = x
        self.y = y
