"""Game board state and constraint-unit lookup."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from .cell import CellState
from .coordinates import HexCoordinate
from .errors import ContractViolation
from .topology import generate_flower_grid_cells


@dataclass(frozen=True)
class GameMetadata:
    """Board information that does not change during a game."""
    width: int = 9
    height: int = 9


class UnitType(Enum):
    """The four kinds of constraint unit a cell belongs to."""
    GROUP = "group"
    Q_RANK = "q"
    R_RANK = "r"
    S_RANK = "s"


ALL_UNIT_TYPES: List[UnitType] = [
    UnitType.GROUP, UnitType.Q_RANK, UnitType.R_RANK, UnitType.S_RANK
]


@dataclass
class GameBoardState:
    """
    All cells of a board keyed by coordinate.

    The mapping is the single source of truth for the board. Its insertion
    order is the topology generation order, which the generator relies on.
    ``is_complete`` is only meaningful after a validity pass.
    """
    cells: Dict[HexCoordinate, CellState] = field(default_factory=dict)
    is_complete: bool = False

    @classmethod
    def flower(cls) -> GameBoardState:
        """Create an empty flower board (49 editable cells)."""
        return cls(cells=generate_flower_grid_cells())

    def copy(self) -> GameBoardState:
        """Create a deep copy of the board."""
        return GameBoardState(
            cells={coordinate: cell.copy() for coordinate, cell in self.cells.items()},
            is_complete=self.is_complete,
        )

    def get(self, coordinate: HexCoordinate) -> Optional[CellState]:
        return self.cells.get(coordinate)

    def __getitem__(self, coordinate: HexCoordinate) -> CellState:
        return self.cells[coordinate]

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[CellState]:
        return iter(self.cells.values())

    def group_cells(self, group: int) -> List[CellState]:
        """Get the cells of one cluster, in generation order."""
        return [cell for cell in self.cells.values() if cell.group == group]

    def count_filled(self) -> int:
        return sum(1 for cell in self.cells.values() if cell.value is not None)

    def count_empty(self) -> int:
        return len(self.cells) - self.count_filled()

    def to_string(self) -> str:
        """
        Compact form: one character per cell in board order, ``0`` for empty.
        """
        return ''.join(
            '0' if cell.value is None else str(cell.value)
            for cell in self.cells.values()
        )

    @classmethod
    def from_string(cls, s: str) -> GameBoardState:
        """
        Create a flower board from its compact form.

        Args:
            s: One character per cell in generation order.
               ``0`` or ``.`` for an empty cell, 1-7 for a clue.
        """
        board = cls.flower()
        if len(s) != len(board):
            raise ValueError(f"String length must be {len(board)}, got {len(s)}")

        for cell, c in zip(board.cells.values(), s):
            if c in '0.':
                continue
            if not c.isdigit():
                raise ValueError(f"Unexpected character {c!r}")
            cell.set_value(int(c))
            cell.is_editable = False

        return board

    def __str__(self) -> str:
        """Draw the board as staggered flat-top hex columns."""
        if not self.cells:
            return ''

        # Each column is shifted half a row per step in q.
        def line_of(coordinate: HexCoordinate) -> int:
            return 2 * coordinate.r + coordinate.q

        min_q = min(c.q for c in self.cells)
        max_q = max(c.q for c in self.cells)
        min_line = min(line_of(c) for c in self.cells)
        max_line = max(line_of(c) for c in self.cells)

        rows = [[' '] * ((max_q - min_q + 1) * 3) for _ in range(max_line - min_line + 1)]
        for coordinate, cell in self.cells.items():
            row = rows[line_of(coordinate) - min_line]
            row[(coordinate.q - min_q) * 3 + 1] = '.' if cell.value is None else str(cell.value)

        return '\n'.join(''.join(row).rstrip() for row in rows)

    def __repr__(self) -> str:
        return f"GameBoardState(cells={len(self.cells)}, filled={self.count_filled()}, complete={self.is_complete})"


def get_unit(board: GameBoardState, start: HexCoordinate, unit_type: UnitType) -> List[CellState]:
    """
    Get every cell sharing a unit with the starting cell.

    Args:
        board: The game board.
        start: Coordinate of the reference cell. Must be on the board.
        unit_type: Which relation to use (group, or one of the three ranks).

    Returns:
        The matching cells in board order, including the starting cell.
    """
    starting_cell = board.cells.get(start)
    if starting_cell is None:
        raise ContractViolation(f"Expected starting coordinate {start} to be on the board")

    unit = []
    for cell in board.cells.values():
        if cell is starting_cell:
            unit.append(cell)
        elif unit_type is UnitType.GROUP:
            if cell.group == starting_cell.group:
                unit.append(cell)
        elif unit_type is UnitType.Q_RANK:
            if cell.coordinate.q == start.q:
                unit.append(cell)
        elif unit_type is UnitType.R_RANK:
            if cell.coordinate.r == start.r:
                unit.append(cell)
        elif cell.coordinate.s == start.s:
            unit.append(cell)

    return unit
