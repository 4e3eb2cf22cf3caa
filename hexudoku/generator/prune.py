"""Turn a solved board into a puzzle by clearing cells."""

from __future__ import annotations
import logging
import random
from typing import Optional

from ..core.board import GameBoardState

logger = logging.getLogger(__name__)

DEFAULT_TARGET_CLUES = 15


def prune_board(
    board: GameBoardState,
    target_filled_count: int = DEFAULT_TARGET_CLUES,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Clear random filled cells until ``target_filled_count`` clues remain.

    Cleared cells become editable. Removing digits cannot introduce a
    conflict, so no validity pass is needed afterwards.

    Args:
        board: A solved board. Mutated in place.
        target_filled_count: Number of clue cells to keep.
        rng: Random source used to pick the cells.

    Returns:
        The number of cells cleared.
    """
    if target_filled_count < 0 or target_filled_count > len(board):
        raise ValueError(
            f"Target clue count must be 0-{len(board)}, got {target_filled_count}"
        )
    if rng is None:
        rng = random.Random()

    filled_cells = [cell for cell in board.cells.values() if cell.value is not None]
    rng.shuffle(filled_cells)

    cells_to_prune = max(0, len(filled_cells) - target_filled_count)
    for cell in filled_cells[:cells_to_prune]:
        cell.clear()

    logger.debug("Pruned %d cells, %d clues remain", cells_to_prune, len(filled_cells) - cells_to_prune)
    return cells_to_prune
