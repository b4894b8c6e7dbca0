# sweeper/game.py

import logging
import time
from typing import Optional

from .board import Board
from .outcomes import FlagOutcome, RevealOutcome

logger = logging.getLogger(__name__)

ACTIONS = ("reveal", "flag")


class GameSession:
    """
    A wrapper around Board that manages turn flow, the move counter and the
    game clock. This is the object a presentation layer talks to.
    """

    def __init__(self, width: int, height: int, num_mines: int, seed: Optional[int] = None, running_bomb: bool = False):
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.seed = seed
        self.running_bomb = running_bomb

        self.reset()

    @classmethod
    def from_difficulty(cls, config, name: str, seed: Optional[int] = None, running_bomb: bool = False):
        difficulty = config.preset(name)
        return cls(difficulty.width, difficulty.height, difficulty.num_mines, seed=seed, running_bomb=running_bomb)

    def reset(self):
        """
        Reset the game session to a fresh board with the same parameters.
        """
        self.board = Board(self.width, self.height, self.num_mines, seed=self.seed, running_bomb=self.running_bomb)
        self.moves_made = 0
        self.last_outcome = None
        self.started_at = None
        self.finished_at = None

    def step(self, action: str, x: int, y: int) -> dict:
        """
        Apply an action ("reveal" or "flag") at (x, y).
        Returns a dict describing the game state after the action.
        """
        if action not in ACTIONS:
            raise ValueError(f"Unknown action {action!r}, expected one of {ACTIONS}")
        if self.board.ended:
            return self.get_state()

        if action == "reveal":
            outcome = self.board.reveal((x, y))
            accepted = outcome is not RevealOutcome.REJECTED
        else:
            outcome = self.board.toggle_flag((x, y))
            accepted = outcome is not FlagOutcome.REJECTED

        self.last_outcome = outcome
        if accepted:
            self.moves_made += 1
            if self.started_at is None:
                self.started_at = time.monotonic()
            if self.board.ended:
                self.finished_at = time.monotonic()
                logger.info("Game over after %d moves (won=%s)", self.moves_made, self.board.victorious)

        return self.get_state()

    def tick(self) -> dict:
        """
        Advance the running bomb one step. Called by the host's timer.
        """
        if self.running_bomb and self.started_at is not None:
            self.board.move_running_bomb()
        return self.get_state()

    def get_state(self) -> dict:
        """
        Return the current visible board and game status.
        """
        return {
            "board": self.board.get_visible_state(),
            "game_over": self.board.ended,
            "won": self.board.victorious,
            "moves_made": self.moves_made,
            "dimensions": (self.height, self.width),
            "num_mines": self.num_mines,
            "flags": self.board.flag_count,
            "mines_left": self.num_mines - self.board.flag_count,
            "status": self.board.status.value,
            "elapsed": self.elapsed_time(),
            "running_bomb": self.running_bomb,
            "last_outcome": self.last_outcome.value if self.last_outcome is not None else None,
        }

    def is_game_over(self) -> bool:
        return self.board.ended

    def is_win(self) -> bool:
        return self.board.victorious

    def elapsed_time(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.finished_at if self.finished_at is not None else time.monotonic()
        return end - self.started_at

    def get_score(self) -> float:
        """
        Fraction of the safe cells that have been revealed.
        """
        safe_cells = self.width * self.height - self.num_mines
        return self.board.revealed_count() / safe_cells
