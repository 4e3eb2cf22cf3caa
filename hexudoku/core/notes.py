"""Candidate-note housekeeping after a digit is placed."""

from __future__ import annotations

from .board import GameBoardState
from .coordinates import ALL_HEX_DIRECTIONS, HexCoordinate


def clear_notes_in_appropriate_cells(board: GameBoardState, value: int, from_coordinate: HexCoordinate) -> None:
    """
    Remove a just-placed digit from the notes of every cell that can no longer hold it.

    The three ranks through ``from_coordinate`` are covered by walking each of
    the six directions until the edge of the board; the cluster is covered by
    a group sweep. Only editable cells are touched.
    """
    # Ranks
    for direction in ALL_HEX_DIRECTIONS:
        coordinate = from_coordinate.next(direction)
        while coordinate in board.cells:
            cell = board.cells[coordinate]
            coordinate = coordinate.next(direction)

            if not cell.is_editable:
                continue

            cell.outer_notes.discard(value)
            cell.center_notes.discard(value)

    # Group
    original_cell = board.cells.get(from_coordinate)
    if original_cell is None:
        return

    for cell in board.cells.values():
        if not cell.is_editable or cell.group != original_cell.group:
            continue

        cell.outer_notes.discard(value)
        cell.center_notes.discard(value)
