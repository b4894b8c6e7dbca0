# sweeper/utils.py

from typing import List, Optional, Set, Tuple

MOORE_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1), (0, 1), (1, 1)
]


def in_bounds(x: int, y: int, width: int, height: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def get_neighbors(x: int, y: int, width: int, height: int) -> List[Tuple[int, int]]:
    """
    Return the in-bounds Moore neighbours (8-way) of (x, y).
    Corner cells have 3 neighbours, edge cells 5, interior cells 8.
    """
    neighbors = []
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny, width, height):
            neighbors.append((nx, ny))
    return neighbors


def safe_zone(coord: Optional[Tuple[int, int]], width: int, height: int) -> Set[Tuple[int, int]]:
    """
    The coordinates that must stay mine-free around the first click:
    the clicked cell and its neighbours, clipped to the board.
    """
    if coord is None:
        return set()
    x, y = coord
    zone = set(get_neighbors(x, y, width, height))
    zone.add((x, y))
    return zone
