"""Validation utilities for hex boards."""

from __future__ import annotations
from enum import Enum
from typing import List

from .board import ALL_UNIT_TYPES, GameBoardState, get_unit
from .cell import CellState
from .errors import ContractViolation


class CellValidity(Enum):
    """Outcome of checking one cell."""
    BLANK = "blank"
    VALID = "valid"
    INVALID = "invalid"


def is_cell_unique_in_unit(cell: CellState, unit: List[CellState]) -> CellValidity:
    """
    Check that a cell's digit appears nowhere else in the unit.

    Args:
        cell: The cell to check. Must be one of the unit's cells.
        unit: The cells of a group or rank.

    Returns:
        BLANK for an empty cell, INVALID on a duplicate, otherwise VALID.
    """
    if not any(other is cell for other in unit):
        raise ContractViolation("Cell must be contained within the unit")

    if cell.value is None:
        return CellValidity.BLANK

    seen_digits = set()
    for other in unit:
        if other is cell:
            continue
        if other.value is not None:
            seen_digits.add(other.value)

    if cell.value in seen_digits:
        return CellValidity.INVALID

    return CellValidity.VALID


def check_cell_validity(cell: CellState, board: GameBoardState) -> CellValidity:
    """
    Check a cell against every unit it belongs to.

    Stops at the first unit with a duplicate.
    """
    if cell.value is None:
        return CellValidity.BLANK

    for unit_type in ALL_UNIT_TYPES:
        unit = get_unit(board, cell.coordinate, unit_type)
        if is_cell_unique_in_unit(cell, unit) is CellValidity.INVALID:
            return CellValidity.INVALID

    return CellValidity.VALID


def update_board_validity(board: GameBoardState) -> GameBoardState:
    """
    Recompute the validity of every cell.

    The input board is left untouched; a new board holding copies of the
    cells is returned, so a reader never sees ``is_valid`` flags and
    ``is_complete`` out of step with each other.

    Returns:
        A new board with ``is_valid`` refreshed on every cell and
        ``is_complete`` set only if every cell is filled and valid.
    """
    checked_cells = {}
    is_complete = True

    for coordinate, cell in board.cells.items():
        validity = check_cell_validity(cell, board)
        if validity is not CellValidity.VALID:
            is_complete = False

        checked = cell.copy()
        checked.is_valid = validity is not CellValidity.INVALID
        checked_cells[coordinate] = checked

    return GameBoardState(cells=checked_cells, is_complete=is_complete)


def find_invalid_cells(board: GameBoardState) -> List[CellState]:
    """Get every filled cell that clashes with another cell in one of its units."""
    return [
        cell for cell in board.cells.values()
        if check_cell_validity(cell, board) is CellValidity.INVALID
    ]
