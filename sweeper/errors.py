# sweeper/errors.py


class MinesweeperError(Exception):
    """Base class for errors raised by the grid engine."""


class InvalidDimensions(MinesweeperError, ValueError):
    """Raised when a board is smaller than 3x3."""


class InvalidMineCount(MinesweeperError, ValueError):
    """Raised when the mine count does not fit the board."""


class OutOfBounds(MinesweeperError, IndexError):
    """Raised when a coordinate handed to mine placement is not on the grid."""
