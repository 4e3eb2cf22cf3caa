"""Generator module for creating Hexudoku puzzles."""

from .fill import DEFAULT_MAX_FILL_ATTEMPTS, FillStats, fill_board_with_random_numbers
from .generator import HexudokuGenerator, generate_board, generate_board_async
from .prune import DEFAULT_TARGET_CLUES, prune_board

__all__ = [
    "DEFAULT_MAX_FILL_ATTEMPTS",
    "DEFAULT_TARGET_CLUES",
    "FillStats",
    "HexudokuGenerator",
    "fill_board_with_random_numbers",
    "generate_board",
    "generate_board_async",
    "prune_board",
]
