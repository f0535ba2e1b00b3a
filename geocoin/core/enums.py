"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Direction(str, Enum):
    """One-tile movement steps."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def offset(self) -> tuple[int, int]:
        """(d_i, d_j) tile offset; i grows northward, j grows eastward."""
        return _DIRECTION_OFFSETS[self]


_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.SOUTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@unique
class EventCategory(str, Enum):
    """Kinds of entries in the game event feed."""

    MOVE = "move"
    COLLECT = "collect"
    DEPOSIT = "deposit"
    RESET = "reset"
