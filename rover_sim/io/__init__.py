"""Text I/O: mission parsing and output formatting."""

from rover_sim.io.formatter import (
    format_input,
    format_output,
    format_state,
    state_to_dict,
)
from rover_sim.io.parser import (
    parse,
    parse_commands,
    parse_integer,
    parse_plateau,
    parse_position,
    significant_lines,
)

__all__ = [
    "format_input",
    "format_output",
    "format_state",
    "parse",
    "parse_commands",
    "parse_integer",
    "parse_plateau",
    "parse_position",
    "significant_lines",
    "state_to_dict",
]
