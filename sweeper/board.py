# sweeper/board.py

import logging
import numbers
import random
from typing import Iterable, List, Optional, Set

import numpy as np

from .cell import CROSSED_FLAG, FLAG, HIDDEN, MINE, Cell, CellView, Coordinate
from .errors import InvalidDimensions, InvalidMineCount, OutOfBounds
from .outcomes import BoardStatus, FlagOutcome, RevealOutcome
from .utils import get_neighbors, safe_zone

logger = logging.getLogger(__name__)

MIN_SIZE = 3
SAFE_ZONE_SIZE = 9


def validate_board_parameters(width: int, height: int, mine_count: int):
    """
    Raise InvalidDimensions / InvalidMineCount for parameters no board can hold.
    Room is kept for the 3x3 safe zone around the first click.
    """
    if width < MIN_SIZE or height < MIN_SIZE:
        raise InvalidDimensions(
            f"Board must be at least {MIN_SIZE}x{MIN_SIZE}, got {width}x{height}."
        )
    max_mines = width * height - SAFE_ZONE_SIZE
    if mine_count < 1 or mine_count > max_mines:
        raise InvalidMineCount(
            f"Cannot place {mine_count} mines on a {width}x{height} board: "
            f"mine count must be between 1 and {max_mines}."
        )


class Board:
    """
    Grid engine: owns every Cell and implements mine placement, reveal
    (flood fill and chord), flagging, victory detection and the running
    bomb variant.

    Coordinates are (x, y) pairs with 0 <= x < width and 0 <= y < height.
    Cells are stored row-major, so cells[y][x] is the cell at (x, y).

    running_bomb:
        If True, the first placed mine becomes the "running bomb" that
        move_running_bomb() relocates to a neighbouring hidden cell.
    """

    def __init__(self, width: int, height: int, mine_count: int, seed=None, running_bomb: bool = False):
        validate_board_parameters(width, height, mine_count)

        self.width = width
        self.height = height
        self.mine_count = mine_count
        self.rng = random.Random(seed)
        self.running_bomb_enabled = running_bomb

        self.cells: List[List[Cell]] = [
            [Cell((x, y)) for x in range(width)] for y in range(height)
        ]
        self.mines_placed = False
        self.ended = False
        self.victorious = False
        self.flag_count = 0
        self.running_bomb: Optional[Coordinate] = None

    @classmethod
    def from_mines(cls, width: int, height: int, mines: Iterable, running_bomb: Optional[Coordinate] = None):
        """
        Build a board with a fixed mine layout instead of random placement.
        Useful for tests and for replaying a recorded game.
        """
        coords = [(int(x), int(y)) for x, y in mines]
        if len(set(coords)) != len(coords):
            raise InvalidMineCount("Mine coordinates must be distinct.")

        board = cls(width, height, len(coords), running_bomb=running_bomb is not None)
        for coord in coords:
            if not board.is_in_bounds(coord):
                raise OutOfBounds(f"Mine at {coord} is outside a {width}x{height} board.")
            board._cell(coord).is_mine = True

        if running_bomb is not None:
            running_bomb = (int(running_bomb[0]), int(running_bomb[1]))
            if running_bomb not in coords:
                raise OutOfBounds(f"Running bomb {running_bomb} is not one of the mines.")
            board.running_bomb = running_bomb
        board.mines_placed = True
        return board

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _cell(self, coord: Coordinate) -> Cell:
        x, y = coord
        return self.cells[y][x]

    def _normalize(self, coord) -> Optional[Coordinate]:
        if isinstance(coord, (str, bytes)):
            return None
        try:
            x, y = coord
        except (ValueError, TypeError):
            return None
        if not all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in (x, y)):
            return None
        return int(x), int(y)

    def _neighbors(self, coord: Coordinate) -> List[Coordinate]:
        return get_neighbors(coord[0], coord[1], self.width, self.height)

    def _iter_cells(self):
        for row in self.cells:
            yield from row

    def is_in_bounds(self, coord) -> bool:
        coord = self._normalize(coord)
        if coord is None:
            return False
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def count_adjacent_mines(self, coord: Coordinate) -> int:
        return sum(1 for n in self._neighbors(coord) if self._cell(n).is_mine)

    # ------------------------------------------------------------------
    # Mine placement
    # ------------------------------------------------------------------

    def place_mines(self, safe_coord: Optional[Coordinate]):
        """
        Place mine_count mines at random, never inside the 3x3 safe zone
        around safe_coord. Must only be called once per game.
        """
        coord = self._normalize(safe_coord) if safe_coord is not None else None
        if coord is None or not self.is_in_bounds(coord):
            raise OutOfBounds(f"Safe coordinate {safe_coord!r} is not in the grid.")
        self._place_mines(safe_zone(coord, self.width, self.height))

    def _place_mines(self, exclude: Set[Coordinate]):
        placed = 0
        while placed < self.mine_count:
            coord = (self.rng.randrange(self.width), self.rng.randrange(self.height))
            cell = self._cell(coord)
            if cell.is_mine or coord in exclude:
                continue
            cell.is_mine = True
            placed += 1
            if self.running_bomb_enabled and self.running_bomb is None:
                self.running_bomb = coord

        self.mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board (%d cells reserved)",
            self.mine_count, self.width, self.height, len(exclude)
        )

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------

    def reveal(self, coord) -> RevealOutcome:
        """
        Reveal behavior:
        - The first reveal of the game places the mines, keeping the clicked
          cell and its neighbours clear.
        - Hidden cell: a mine ends the game; a 0 floods its neighbours;
          a number reveals only this cell.
        - Revealed number: when the flagged neighbours match the number,
          every other hidden neighbour is revealed ("chord").
        Flagged cells are never revealed.
        """
        coord = self._normalize(coord)
        if coord is None or not self.is_in_bounds(coord) or self.ended:
            return RevealOutcome.REJECTED

        if not self.mines_placed:
            self.place_mines(coord)

        target = self._cell(coord)
        if target.is_flagged:
            return RevealOutcome.REJECTED

        if target.is_revealed:
            pending = self._chord_targets(coord)
            if not pending:
                return RevealOutcome.CONTINUED
        else:
            pending = [coord]

        worklist = set(pending)
        seen = set(pending)
        while worklist:
            current = worklist.pop()
            cell = self._cell(current)
            if cell.is_revealed or cell.is_flagged:
                continue

            cell.is_revealed = True
            if cell.is_mine:
                self._end(victorious=False)
                return RevealOutcome.DEFEAT

            cell.adjacent_mine_count = self.count_adjacent_mines(current)
            if cell.adjacent_mine_count == 0:
                for n in self._neighbors(current):
                    neighbor = self._cell(n)
                    if n not in seen and not neighbor.is_revealed and not neighbor.is_flagged:
                        seen.add(n)
                        worklist.add(n)

        if self.check_victory():
            self._end(victorious=True)
            return RevealOutcome.VICTORY
        return RevealOutcome.CONTINUED

    def _chord_targets(self, coord: Coordinate) -> List[Coordinate]:
        cell = self._cell(coord)
        if cell.adjacent_mine_count <= 0:
            return []

        flagged = 0
        hidden = []
        for n in self._neighbors(coord):
            neighbor = self._cell(n)
            if neighbor.is_flagged:
                flagged += 1
            elif not neighbor.is_revealed:
                hidden.append(n)

        if flagged != cell.adjacent_mine_count:
            return []
        return hidden

    def toggle_flag(self, coord) -> FlagOutcome:
        coord = self._normalize(coord)
        if coord is None or not self.is_in_bounds(coord) or self.ended:
            return FlagOutcome.REJECTED

        if not self.mines_placed:
            # Flagging before the first reveal: there is no click to protect.
            self._place_mines(set())

        cell = self._cell(coord)
        if cell.is_revealed:
            return FlagOutcome.REJECTED

        cell.is_flagged = not cell.is_flagged
        if cell.is_flagged:
            self.flag_count += 1
            return FlagOutcome.FLAGGED
        self.flag_count -= 1
        return FlagOutcome.UNFLAGGED

    def check_victory(self) -> bool:
        return all(cell.is_revealed for cell in self._iter_cells() if not cell.is_mine)

    def _end(self, victorious: bool):
        self.ended = True
        self.victorious = victorious
        for cell in self._iter_cells():
            if cell.is_mine:
                if victorious:
                    cell.is_flagged = True
            elif cell.is_flagged:
                # Wrong flag: kept on the cell, shown crossed, no longer counted.
                self.flag_count -= 1
        logger.info(
            "Game ended (%s) on %dx%d board with %d mines",
            "victory" if victorious else "defeat", self.width, self.height, self.mine_count
        )

    # ------------------------------------------------------------------
    # Running bomb
    # ------------------------------------------------------------------

    def move_running_bomb(self) -> Optional[Coordinate]:
        """
        Move the running bomb to a random hidden, mine-free neighbour and fix
        the cached numbers of revealed cells around both positions.
        Returns the new position, or None if the bomb did not move.
        """
        if self.running_bomb is None or self.ended:
            return None

        old = self.running_bomb
        old_neighbors = self._neighbors(old)
        candidates = [
            n for n in old_neighbors
            if not self._cell(n).is_revealed and not self._cell(n).is_mine
        ]
        if not candidates:
            return None

        new = self.rng.choice(candidates)
        self._cell(old).is_mine = False
        self._cell(new).is_mine = True
        self.running_bomb = new

        for n in old_neighbors:
            neighbor = self._cell(n)
            if neighbor.is_revealed:
                neighbor.adjacent_mine_count -= 1
        for n in self._neighbors(new):
            neighbor = self._cell(n)
            if neighbor.is_revealed:
                neighbor.adjacent_mine_count += 1

        logger.debug("Running bomb moved from %s to %s", old, new)
        return new

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def status(self) -> BoardStatus:
        if self.ended:
            return BoardStatus.VICTORIOUS if self.victorious else BoardStatus.DEFEATED
        if not self.mines_placed:
            return BoardStatus.MINES_PENDING
        return BoardStatus.IN_PROGRESS

    board_status = status

    def cell(self, coord) -> Optional[CellView]:
        coord = self._normalize(coord)
        if coord is None or not self.is_in_bounds(coord):
            return None
        return self._cell(coord).view()

    def is_mine(self, coord) -> bool:
        return self.is_in_bounds(coord) and self._cell(self._normalize(coord)).is_mine

    def is_revealed(self, coord) -> bool:
        return self.is_in_bounds(coord) and self._cell(self._normalize(coord)).is_revealed

    def is_flagged(self, coord) -> bool:
        return self.is_in_bounds(coord) and self._cell(self._normalize(coord)).is_flagged

    def adjacent_mine_count(self, coord) -> int:
        if not self.is_in_bounds(coord):
            return 0
        return self._cell(self._normalize(coord)).adjacent_mine_count

    def revealed_count(self) -> int:
        return sum(1 for cell in self._iter_cells() if cell.is_revealed and not cell.is_mine)

    def get_visible_state(self) -> List[List[object]]:
        """
        Per-cell view for the presentation layer, indexed [y][x]:
            None  hidden
            "F"   flag (on a won board, every mine)
            "X"   flag on a safe cell once the game is over
            "*"   the mine that was clicked
            "M"   other mines once the game is lost
            0-8   revealed count
        """
        state = []
        for row in self.cells:
            row_cells = []
            for cell in row:
                if cell.is_revealed:
                    row_cells.append("*" if cell.is_mine else cell.adjacent_mine_count)
                elif cell.is_flagged:
                    row_cells.append("X" if self.ended and not cell.is_mine else "F")
                elif self.ended and cell.is_mine:
                    row_cells.append("M")
                else:
                    row_cells.append(None)
            state.append(row_cells)
        return state

    def encoded_state(self) -> np.ndarray:
        """
        Encode the visible state as a read-only int array of shape (height, width).
        """
        encoded = np.full((self.height, self.width), HIDDEN, dtype=int)
        for y, row in enumerate(self.get_visible_state()):
            for x, value in enumerate(row):
                if value is None:
                    continue
                if value == "F":
                    encoded[y, x] = FLAG
                elif value == "X":
                    encoded[y, x] = CROSSED_FLAG
                elif value in ("*", "M"):
                    encoded[y, x] = MINE
                else:
                    encoded[y, x] = value
        encoded.setflags(write=False)
        return encoded


def new_board(width: int, height: int, mine_count: int, seed=None, running_bomb: bool = False) -> Board:
    return Board(width, height, mine_count, seed=seed, running_bomb=running_bomb)
