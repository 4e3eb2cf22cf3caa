"""Randomized backtracking fill of an empty flower board."""

from __future__ import annotations
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..core.board import ALL_UNIT_TYPES, GameBoardState, get_unit
from ..core.cell import DIGITS, CellState
from ..core.errors import ContractViolation, GenerationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILL_ATTEMPTS = 4

ALL_VALID_DIGITS = list(range(1, DIGITS + 1))


@dataclass
class FillStats:
    """Statistics from one call to the random fill."""
    attempts: int = 0
    placements: int = 0
    backtracks: int = 0
    repeats_rejected: int = 0
    time_seconds: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "attempts": self.attempts,
            "placements": self.placements,
            "backtracks": self.backtracks,
            "repeats_rejected": self.repeats_rejected,
            "time_seconds": self.time_seconds,
        }


def fill_board_with_random_numbers(
    board: GameBoardState,
    rng: Optional[random.Random] = None,
    max_attempts: int = DEFAULT_MAX_FILL_ATTEMPTS,
) -> FillStats:
    """
    Fill every cell of the board with a valid digit.

    Algorithm:
    1. Clear the board.
    2. Depth-first backtracking over the cells in board order, trying the
       digits of each cell in a random order.
    3. Reject the fill if clusters 0 and 1 hold the same digit sequence,
       which makes a dull puzzle, and start again.

    Args:
        board: A freshly generated flower board. Mutated in place.
        rng: Random source; reuse a seeded instance for reproducible boards.
        max_attempts: How many complete fills to try before giving up.

    Returns:
        Statistics for the run.

    Raises:
        ContractViolation: If cluster 0 does not have exactly seven cells.
        GenerationError: If a fill cannot complete, or every attempt repeats.
    """
    if rng is None:
        rng = random.Random()

    # Index order is the board order; everything below works on indices.
    cells = list(board.cells.values())

    first_group = board.group_cells(0)
    second_group = board.group_cells(1)
    if len(first_group) != DIGITS:
        raise ContractViolation(
            f"Expected group 0 to have exactly {DIGITS} cells, got {len(first_group)}"
        )

    units = _build_unit_indices(board, cells)
    stats = FillStats()
    start_time = time.perf_counter()

    while stats.attempts < max_attempts:
        stats.attempts += 1

        _clear_board(cells)
        values: List[Optional[int]] = [None] * len(cells)

        if not _try_fill(cells, values, units, 0, rng, stats):
            stats.time_seconds = time.perf_counter() - start_time
            raise GenerationError("Expected random fill to have succeeded", stats)

        if not _is_repeating(first_group, second_group):
            stats.time_seconds = time.perf_counter() - start_time
            logger.debug(
                "Filled board in %d attempt(s), %d placements, %d backtracks",
                stats.attempts, stats.placements, stats.backtracks
            )
            return stats

        stats.repeats_rejected += 1
        logger.info("Found repeating pattern, retrying fill (attempt %d of %d)",
                    stats.attempts, max_attempts)

    stats.time_seconds = time.perf_counter() - start_time
    raise GenerationError(
        f"Could not produce a non-repeating fill in {max_attempts} attempts",
        stats,
    )


def _build_unit_indices(board: GameBoardState, cells: List[CellState]) -> List[List[Tuple[int, ...]]]:
    """
    For each cell, the indices of the other cells in each of its units.

    Computed once per fill so the search never rescans the board.
    """
    index_of = {id(cell): i for i, cell in enumerate(cells)}

    units = []
    for i, cell in enumerate(cells):
        cell_units = []
        for unit_type in ALL_UNIT_TYPES:
            members = get_unit(board, cell.coordinate, unit_type)
            cell_units.append(tuple(index_of[id(other)] for other in members if other is not cell))
        units.append(cell_units)

    return units


def _clear_board(cells: List[CellState]) -> None:
    for cell in cells:
        cell.clear()


def _conflicts(values: List[Optional[int]], cell_units: List[Tuple[int, ...]], digit: int) -> bool:
    """True if the digit already appears in one of the cell's units."""
    for unit in cell_units:
        for j in unit:
            if values[j] == digit:
                return True
    return False


def _try_fill(
    cells: List[CellState],
    values: List[Optional[int]],
    units: List[List[Tuple[int, ...]]],
    index: int,
    rng: random.Random,
    stats: FillStats,
) -> bool:
    """
    Recursive backtracking step for the cell at ``index``.

    Returns True once every cell from ``index`` onwards holds a digit.
    """
    if index >= len(cells):
        return True

    # Skip cells that are already filled
    if values[index] is not None:
        return _try_fill(cells, values, units, index + 1, rng, stats)

    cell = cells[index]
    digits = list(ALL_VALID_DIGITS)
    rng.shuffle(digits)

    for digit in digits:
        if _conflicts(values, units[index], digit):
            continue

        values[index] = digit
        cell.value = digit
        cell.is_editable = False
        stats.placements += 1

        if _try_fill(cells, values, units, index + 1, rng, stats):
            return True

        values[index] = None
        cell.clear()

    # Nothing worked; let the previous cell try its next digit
    stats.backtracks += 1
    return False


def _is_repeating(first_group: Sequence[CellState], second_group: Sequence[CellState]) -> bool:
    """True if both clusters hold the same digits in the same generation order."""
    return all(a.value == b.value for a, b in zip(first_group, second_group))
