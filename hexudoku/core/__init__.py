"""Core module for hex board representation and validation."""

from .board import ALL_UNIT_TYPES, GameBoardState, GameMetadata, UnitType, get_unit
from .cell import CellState
from .coordinates import ALL_HEX_DIRECTIONS, HexCoordinate, HexDirection
from .errors import ContractViolation, DeserialisationError, GenerationError, HexudokuError
from .notes import clear_notes_in_appropriate_cells
from .validator import CellValidity, check_cell_validity, update_board_validity

__all__ = [
    "ALL_HEX_DIRECTIONS",
    "ALL_UNIT_TYPES",
    "CellState",
    "CellValidity",
    "ContractViolation",
    "DeserialisationError",
    "GameBoardState",
    "GameMetadata",
    "GenerationError",
    "HexCoordinate",
    "HexDirection",
    "HexudokuError",
    "UnitType",
    "check_cell_validity",
    "clear_notes_in_appropriate_cells",
    "get_unit",
    "update_board_validity",
]
