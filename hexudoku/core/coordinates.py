"""Axial hex coordinates and the six neighbour directions."""

from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


@dataclass(frozen=True)
class HexCoordinate:
    """
    An immutable axial coordinate on a flat-top hex grid.

    Only ``q`` and ``r`` are stored; the third cube axis ``s`` is derived so
    that ``q + r + s == 0`` always holds. Equal coordinates compare and hash
    equal, so they can be used directly as dict keys.
    """
    q: int
    r: int

    @classmethod
    def of(cls, q: float, r: float) -> HexCoordinate:
        """Create a coordinate, truncating non-integer input towards zero."""
        return cls(int(q), int(r))

    @classmethod
    def of_rounded(cls, q: float, r: float) -> HexCoordinate:
        """
        Snap fractional axial coordinates to the nearest hex.

        All three cube axes are rounded independently; the axis with the
        largest rounding error is then rebuilt from the other two.
        """
        s = -q - r

        # Halves round up, towards positive infinity.
        rq = math.floor(q + 0.5)
        rr = math.floor(r + 0.5)
        rs = math.floor(s + 0.5)

        q_diff = abs(rq - q)
        r_diff = abs(rr - r)
        s_diff = abs(rs - s)

        if q_diff > r_diff and q_diff > s_diff:
            rq = -rr - rs
        elif r_diff > s_diff:
            rr = -rq - rs

        return cls(int(rq), int(rr))

    @property
    def s(self) -> int:
        return -self.q - self.r

    def add(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q + other.q, self.r + other.r)

    def sub(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q - other.q, self.r - other.r)

    def next(self, direction: HexDirection) -> HexCoordinate:
        """Get the neighbouring coordinate in the given direction."""
        return self.add(direction.offset)

    def __add__(self, other: HexCoordinate) -> HexCoordinate:
        return self.add(other)

    def __sub__(self, other: HexCoordinate) -> HexCoordinate:
        return self.sub(other)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


class HexDirection(Enum):
    """The six neighbour directions, clockwise from Up."""
    UP = 0
    UP_RIGHT = 1
    DOWN_RIGHT = 2
    DOWN = 3
    DOWN_LEFT = 4
    UP_LEFT = 5

    @property
    def offset(self) -> HexCoordinate:
        """The (dq, dr) step for this direction."""
        return _DIRECTION_OFFSETS[self]


_OFFSET_TABLE: List[Tuple[HexDirection, Tuple[int, int]]] = [
    (HexDirection.UP, (0, -1)),
    (HexDirection.UP_RIGHT, (1, -1)),
    (HexDirection.DOWN_RIGHT, (1, 0)),
    (HexDirection.DOWN, (0, 1)),
    (HexDirection.DOWN_LEFT, (-1, 1)),
    (HexDirection.UP_LEFT, (-1, 0)),
]

_DIRECTION_OFFSETS = {
    direction: HexCoordinate(dq, dr) for direction, (dq, dr) in _OFFSET_TABLE
}

ALL_HEX_DIRECTIONS: List[HexDirection] = [direction for direction, _ in _OFFSET_TABLE]
