# sweeper/cell.py

from dataclasses import dataclass
from typing import Tuple

Coordinate = Tuple[int, int]

# Codes used by Board.encoded_state()
HIDDEN = -3
FLAG = -2
MINE = -1
CROSSED_FLAG = -4


@dataclass
class Cell:
    """
    State of a single tile. Cells are owned by a Board and only mutated by it;
    adjacent_mine_count is filled in when the cell is first revealed.
    """
    coord: Coordinate
    is_mine: bool = False
    is_flagged: bool = False
    is_revealed: bool = False
    adjacent_mine_count: int = 0

    @property
    def x(self) -> int:
        return self.coord[0]

    @property
    def y(self) -> int:
        return self.coord[1]

    def view(self) -> "CellView":
        return CellView(
            coord=self.coord,
            is_mine=self.is_mine,
            is_flagged=self.is_flagged,
            is_revealed=self.is_revealed,
            adjacent_mine_count=self.adjacent_mine_count,
        )


@dataclass(frozen=True)
class CellView:
    """Read-only copy of a Cell handed out to the presentation layer."""
    coord: Coordinate
    is_mine: bool
    is_flagged: bool
    is_revealed: bool
    adjacent_mine_count: int
