"""Typed domain model for rover missions.

All value types are frozen dataclasses. The parser builds ``Plateau`` and
``RoverInput`` once; the engine produces a fresh ``RoverState`` per step.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rover_sim.domain.direction import Direction
from rover_sim.domain.errors import InvalidCommandError, RangeError


class Command(Enum):
    """A single instruction consumed by the execution engine."""

    TURN_LEFT = "L"
    TURN_RIGHT = "R"
    MOVE_FORWARD = "M"

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_letter(cls, raw: str) -> Command:
        """Parse one command letter case-insensitively."""
        try:
            return cls(raw.upper())
        except ValueError as exc:
            valid = ", ".join(c.value for c in cls)
            raise InvalidCommandError(
                f"invalid command {raw!r}: must be one of {valid}"
            ) from exc


@dataclass(frozen=True)
class Position:
    """Grid coordinate ``(x, y)``."""

    x: int
    y: int

    def translate(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Plateau:
    """Rectangular grid with inclusive bounds ``[0, max_x] x [0, max_y]``."""

    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        if self.max_x < 0 or self.max_y < 0:
            raise RangeError(
                f"plateau bounds must be non-negative, got ({self.max_x}, {self.max_y})"
            )

    def contains(self, position: Position) -> bool:
        return 0 <= position.x <= self.max_x and 0 <= position.y <= self.max_y

    def describe_bounds(self) -> str:
        return f"(0-{self.max_x}, 0-{self.max_y})"


@dataclass(frozen=True)
class RoverState:
    """Complete instantaneous snapshot of one rover."""

    position: Position
    direction: Direction

    @classmethod
    def at(cls, x: int, y: int, direction: Direction) -> RoverState:
        return cls(Position(x, y), direction)


@dataclass(frozen=True)
class RoverInput:
    """One rover's program: where it starts and what it is told to do."""

    start: RoverState
    commands: tuple[Command, ...]

    @property
    def command_string(self) -> str:
        return "".join(c.letter for c in self.commands)


@dataclass(frozen=True)
class ParsedInput:
    """Parser output: the plateau and rover programs in input order."""

    plateau: Plateau
    rovers: tuple[RoverInput, ...]
