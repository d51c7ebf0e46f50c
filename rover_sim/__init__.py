"""Rover mission simulation: parse a mission, drive each rover, report."""

from rover_sim.domain import (
    Command,
    Direction,
    ParsedInput,
    Plateau,
    Position,
    RoverInput,
    RoverInputError,
    RoverState,
)
from rover_sim.io import format_output, parse
from rover_sim.simulation import execute, run_mission

__all__ = [
    "Command",
    "Direction",
    "ParsedInput",
    "Plateau",
    "Position",
    "RoverInput",
    "RoverInputError",
    "RoverState",
    "execute",
    "format_output",
    "parse",
    "run_mission",
]
