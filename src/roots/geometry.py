"""Grid geometry: compass directions, turns, and bounded moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TurnDirection(str, Enum):
    LEFT = "Left"
    RIGHT = "Right"


class Direction(str, Enum):
    """Eight compass directions, listed clockwise from North."""

    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"

    @property
    def is_moving_north(self) -> bool:
        return self in _NORTHWARD

    @property
    def is_moving_west(self) -> bool:
        return self in _WESTWARD

    @property
    def is_moving_east(self) -> bool:
        return self in _EASTWARD

    @property
    def is_moving_horizontally(self) -> bool:
        return self in _HORIZONTAL

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    def turn(self, turning: TurnDirection) -> "Direction":
        """Rotate 45 degrees; LEFT is counter-clockwise, RIGHT is clockwise."""

        index = _CLOCKWISE.index(self)
        delta = -1 if turning is TurnDirection.LEFT else 1
        return _CLOCKWISE[(index + delta) % len(_CLOCKWISE)]


_CLOCKWISE: tuple[Direction, ...] = tuple(Direction)

_NORTHWARD = frozenset({Direction.NORTH, Direction.NORTH_EAST, Direction.NORTH_WEST})
_WESTWARD = frozenset({Direction.WEST, Direction.NORTH_WEST})
_EASTWARD = frozenset({Direction.EAST, Direction.NORTH_EAST})
_HORIZONTAL = frozenset({Direction.EAST, Direction.WEST})

# y grows northward: row 0 is the ground.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.NORTH_EAST: (1, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH_EAST: (1, -1),
    Direction.SOUTH: (0, -1),
    Direction.SOUTH_WEST: (-1, -1),
    Direction.WEST: (-1, 0),
    Direction.NORTH_WEST: (-1, 1),
}


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height


def step_position(position: Position, direction: Direction, width: int, height: int) -> Optional[Position]:
    """Return the neighbouring cell in ``direction``, or None if it falls outside the grid."""

    dx, dy = direction.offset
    candidate = Position(position.x + dx, position.y + dy)
    if not candidate.in_bounds(width, height):
        return None
    return candidate
