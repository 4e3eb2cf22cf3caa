"""Versioned JSON record format for game boards."""

from __future__ import annotations
import logging
import random
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .core.board import GameBoardState, GameMetadata
from .core.cell import DIGITS, CellState
from .core.coordinates import HexCoordinate
from .core.errors import DeserialisationError
from .generator import generate_board

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

Digit = Annotated[int, Field(ge=1, le=DIGITS)]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", strict=True)


class SerialisedCoordinate(_Record):
    """Axial position of a cell."""

    q: int
    r: int


class SerialisedCell(_Record):
    """One cell as stored on disk or passed between threads."""

    coordinate: SerialisedCoordinate
    value: Optional[Digit]
    is_selected: bool = Field(..., alias="isSelected")
    is_editable: bool = Field(..., alias="isEditable")
    center_notes: List[Digit] = Field(..., alias="centerNotes")
    outer_notes: List[Digit] = Field(..., alias="outerNotes")
    group: int = Field(..., ge=0, le=DIGITS - 1)
    is_valid: bool = Field(..., alias="isValid")


class SerialisedBoard(_Record):
    """Top-level record; ``version`` must match ``SCHEMA_VERSION`` exactly."""

    version: int
    cells: List[SerialisedCell]
    is_complete: bool = Field(..., alias="isComplete")

    @field_validator("version")
    @classmethod
    def _check_version(cls, version: int) -> int:
        if version != SCHEMA_VERSION:
            raise ValueError(f"Unsupported schema version {version}, expected {SCHEMA_VERSION}")
        return version

    @model_validator(mode="after")
    def _check_unique_coordinates(self) -> SerialisedBoard:
        seen = set()
        for cell in self.cells:
            key = (cell.coordinate.q, cell.coordinate.r)
            if key in seen:
                raise ValueError(f"Duplicate cell at {key}")
            seen.add(key)
        return self


def serialise_game_state(board: GameBoardState) -> str:
    """Encode a board as a JSON record string."""
    record = SerialisedBoard(
        version=SCHEMA_VERSION,
        is_complete=board.is_complete,
        cells=[
            SerialisedCell(
                coordinate=SerialisedCoordinate(q=cell.coordinate.q, r=cell.coordinate.r),
                value=cell.value,
                is_selected=cell.is_selected,
                is_editable=cell.is_editable,
                center_notes=sorted(cell.center_notes),
                outer_notes=sorted(cell.outer_notes),
                group=cell.group,
                is_valid=cell.is_valid,
            )
            for cell in board.cells.values()
        ],
    )
    return record.model_dump_json(by_alias=True)


def deserialise_game_state(serialised: str) -> GameBoardState:
    """
    Decode a JSON record string produced by ``serialise_game_state``.

    Raises:
        DeserialisationError: On malformed JSON, a schema violation or a
            version mismatch.
    """
    try:
        record = SerialisedBoard.model_validate_json(serialised)
    except ValidationError as e:
        raise DeserialisationError(f"Invalid saved board: {e}") from e

    cells = {}
    for data in record.cells:
        coordinate = HexCoordinate.of(data.coordinate.q, data.coordinate.r)
        cells[coordinate] = CellState(
            coordinate=coordinate,
            group=data.group,
            value=data.value,
            center_notes=set(data.center_notes),
            outer_notes=set(data.outer_notes),
            is_selected=data.is_selected,
            is_editable=data.is_editable,
            is_valid=data.is_valid,
        )

    return GameBoardState(cells=cells, is_complete=record.is_complete)


def restore_or_generate_board(
    serialised: Optional[str],
    metadata: Optional[GameMetadata] = None,
    rng: Optional[random.Random] = None,
) -> GameBoardState:
    """
    Restore a saved board, or generate a new one if there is none.

    A saved board that cannot be decoded is logged and treated as absent.
    """
    if serialised:
        try:
            return deserialise_game_state(serialised)
        except DeserialisationError as e:
            logger.error("Failed to parse persisted game state: %s", e)

    return generate_board(metadata, rng)
