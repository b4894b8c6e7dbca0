# sweeper/outcomes.py

from enum import Enum


class RevealOutcome(Enum):
    REJECTED = "rejected"
    CONTINUED = "continued"
    VICTORY = "victory"
    DEFEAT = "defeat"

    @property
    def is_terminal(self) -> bool:
        return self in (RevealOutcome.VICTORY, RevealOutcome.DEFEAT)

    @property
    def is_victory(self) -> bool:
        return self is RevealOutcome.VICTORY


class FlagOutcome(Enum):
    REJECTED = "rejected"
    FLAGGED = "flagged"
    UNFLAGGED = "unflagged"


class BoardStatus(Enum):
    """
    Lifecycle of a board:
        MINES_PENDING -> IN_PROGRESS -> VICTORIOUS | DEFEATED
    The first reveal or flag moves a board out of MINES_PENDING.
    """
    MINES_PENDING = "mines_pending"
    IN_PROGRESS = "in_progress"
    VICTORIOUS = "victorious"
    DEFEATED = "defeated"
