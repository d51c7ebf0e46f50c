"""Compass headings and the turn/move arithmetic over them.

Headings form a closed four-member cycle. Turns and displacements are table
lookups keyed by the enum member, so no integer encoding leaks out.
"""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """One of the four compass headings a rover can face."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def delta(self) -> tuple[int, int]:
        """Unit displacement ``(dx, dy)`` for one move in this heading."""
        return _DELTAS[self]

    def turn_left(self) -> Direction:
        return _LEFT_OF[self]

    def turn_right(self) -> Direction:
        return _RIGHT_OF[self]


_CLOCKWISE: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

_RIGHT_OF: dict[Direction, Direction] = {
    d: _CLOCKWISE[(i + 1) % len(_CLOCKWISE)] for i, d in enumerate(_CLOCKWISE)
}
_LEFT_OF: dict[Direction, Direction] = {right: d for d, right in _RIGHT_OF.items()}

_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def turn_left(direction: Direction) -> Direction:
    """Return the heading 90 degrees counter-clockwise of *direction*."""
    return direction.turn_left()


def turn_right(direction: Direction) -> Direction:
    """Return the heading 90 degrees clockwise of *direction*."""
    return direction.turn_right()
