"""Domain layer: headings, value types, and the input error taxonomy."""

from rover_sim.domain.direction import Direction, turn_left, turn_right
from rover_sim.domain.errors import (
    EmptyInputError,
    FormatError,
    IntegerParseError,
    InvalidCommandError,
    InvalidDirectionError,
    RangeError,
    RoverInputError,
    StructuralError,
)
from rover_sim.domain.types import (
    Command,
    ParsedInput,
    Plateau,
    Position,
    RoverInput,
    RoverState,
)

__all__ = [
    "Command",
    "Direction",
    "EmptyInputError",
    "FormatError",
    "IntegerParseError",
    "InvalidCommandError",
    "InvalidDirectionError",
    "ParsedInput",
    "Plateau",
    "Position",
    "RangeError",
    "RoverInput",
    "RoverInputError",
    "RoverState",
    "StructuralError",
    "turn_left",
    "turn_right",
]
