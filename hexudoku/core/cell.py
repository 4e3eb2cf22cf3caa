"""State of a single hexagonal cell."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional, Set

from .coordinates import HexCoordinate

DIGITS = 7


@dataclass
class CellState:
    """
    One board cell.

    ``coordinate`` and ``group`` are fixed when the topology is generated;
    everything else is mutated by the generator and by player edits.
    ``is_valid`` is owned by the validity checker and ``is_selected`` is
    carried for the UI only.
    """
    coordinate: HexCoordinate
    group: int = 0
    value: Optional[int] = None
    center_notes: Set[int] = field(default_factory=set)
    outer_notes: Set[int] = field(default_factory=set)
    is_selected: bool = False
    is_editable: bool = True
    is_valid: bool = True

    def set_value(self, value: Optional[int]) -> None:
        """Set the digit (1 to 7). Use None to clear."""
        if value is not None and not 1 <= value <= DIGITS:
            raise ValueError(f"Value must be 1-{DIGITS} or None, got {value}")
        self.value = value

    def clear(self) -> None:
        """Empty the cell and make it player-fillable again."""
        self.value = None
        self.is_editable = True

    def is_empty(self) -> bool:
        return self.value is None

    def copy(self) -> CellState:
        """Copy the cell, including its own note sets."""
        return replace(
            self,
            center_notes=set(self.center_notes),
            outer_notes=set(self.outer_notes),
        )
