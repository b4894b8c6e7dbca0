from .board import Board, new_board, validate_board_parameters
from .cell import CellView
from .config import GameConfig, Difficulty, load_config
from .errors import InvalidDimensions, InvalidMineCount, MinesweeperError, OutOfBounds
from .game import GameSession
from .outcomes import BoardStatus, FlagOutcome, RevealOutcome

__all__ = [
    'Board', 'new_board', 'validate_board_parameters', 'CellView',
    'GameConfig', 'Difficulty', 'load_config',
    'InvalidDimensions', 'InvalidMineCount', 'MinesweeperError', 'OutOfBounds',
    'GameSession', 'BoardStatus', 'FlagOutcome', 'RevealOutcome',
]
