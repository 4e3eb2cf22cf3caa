"""Fixed "flower" layout: seven clusters of seven hexagonal cells."""

from __future__ import annotations
from typing import Dict, List

from .cell import CellState
from .coordinates import ALL_HEX_DIRECTIONS, HexCoordinate

# Cluster centres, indexed by group id. The order decides which group wins
# a shared coordinate, so it must not change.
FLOWER_CENTERS: List[HexCoordinate] = [
    HexCoordinate(4, 2),
    HexCoordinate(3, 0),
    HexCoordinate(6, -1),
    HexCoordinate(7, 1),
    HexCoordinate(5, 4),
    HexCoordinate(2, 5),
    HexCoordinate(1, 3),
]


def generate_flower_grid_cells() -> Dict[HexCoordinate, CellState]:
    """
    Build the 49 empty cells of the flower board.

    Each cluster emits its centre followed by its six neighbours in
    direction order. A coordinate already claimed by an earlier cluster
    keeps its first group.

    Returns:
        Ordered mapping of coordinate to cell, in generation order.
    """
    cells: Dict[HexCoordinate, CellState] = {}

    for group, center in enumerate(FLOWER_CENTERS):
        _add_cluster(cells, center, group)

    return cells


def _add_cluster(cells: Dict[HexCoordinate, CellState], center: HexCoordinate, group: int) -> None:
    coordinates = [center] + [center.next(direction) for direction in ALL_HEX_DIRECTIONS]
    for coordinate in coordinates:
        if coordinate not in cells:
            cells[coordinate] = CellState(coordinate=coordinate, group=group)
