"""Hexudoku: a hexagonal Sudoku variant on a seven-flower board."""

from .core import (
    CellState,
    CellValidity,
    GameBoardState,
    HexCoordinate,
    HexDirection,
    UnitType,
    check_cell_validity,
    clear_notes_in_appropriate_cells,
    get_unit,
    update_board_validity,
)
from .generator import HexudokuGenerator, generate_board, generate_board_async
from .serialiser import SCHEMA_VERSION, deserialise_game_state, restore_or_generate_board, serialise_game_state

__version__ = "1.0.0"
