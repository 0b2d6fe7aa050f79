"""Compass and vertical directions used to link rooms."""

from __future__ import annotations

from enum import Enum


class Direction(str, Enum):
    """A direction of travel between rooms."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    def __str__(self) -> str:
        return self.value


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}