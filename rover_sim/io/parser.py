"""Mission text parser.

Input layout (blank lines and surrounding whitespace are ignored)::

    <max_x> <max_y>
    <x> <y> <DIR>
    <commands>
    ... one position/commands pair per rover

Parsing is a single fail-fast pass: the first violation raises a
:class:`~rover_sim.domain.errors.RoverInputError` subclass and no partial
result is returned. Each validation step is its own public function so it
can be exercised in isolation.
"""

from __future__ import annotations

import logging
import re

from rover_sim.config.constants import (
    COMMAND_LETTERS,
    DIRECTION_LETTERS,
    LINES_PER_ROVER,
    PLATEAU_FIELD_COUNT,
    POSITION_FIELD_COUNT,
)
from rover_sim.domain.direction import Direction
from rover_sim.domain.errors import (
    EmptyInputError,
    FormatError,
    IntegerParseError,
    InvalidCommandError,
    InvalidDirectionError,
    RangeError,
    StructuralError,
)
from rover_sim.domain.types import (
    Command,
    ParsedInput,
    Plateau,
    RoverInput,
    RoverState,
)

logger = logging.getLogger(__name__)

# Strict lexical form: optional sign then ASCII digits. "2.0", "1e3", "NaN" fail.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_COMMANDS_RE = re.compile(f"[{''.join(COMMAND_LETTERS)}]+")
_BOM = "\ufeff"

NumberedLine = tuple[int, str]
"""``(1-based source line number, stripped text)``."""


def significant_lines(raw_text: str) -> list[NumberedLine]:
    """Return stripped non-blank lines paired with their source line numbers.

    Only ``\\n`` ends a line. Other Unicode line breaks such as form feed or
    ``\\u2028`` are whitespace and separate fields within a line.
    """
    return [
        (lineno, stripped)
        for lineno, line in enumerate(raw_text.split("\n"), start=1)
        if (stripped := line.strip())
    ]


def parse_integer(raw: str, field: str, line: int | None = None) -> int:
    """Parse one integer field, rejecting fractional and non-finite text."""
    if not _INTEGER_RE.fullmatch(raw):
        raise IntegerParseError(f"invalid {field}: {raw!r} is not a valid integer", line=line)
    return int(raw)


def parse_plateau(text: str, line: int | None = None) -> Plateau:
    """Parse the ``<max_x> <max_y>`` plateau line."""
    fields = text.split()
    if len(fields) != PLATEAU_FIELD_COUNT:
        raise FormatError(
            f"invalid plateau line: expected 'max_x max_y', got {text!r}", line=line
        )
    max_x = parse_integer(fields[0], "plateau max_x", line)
    max_y = parse_integer(fields[1], "plateau max_y", line)
    for label, value in (("max_x", max_x), ("max_y", max_y)):
        if value < 0:
            raise RangeError(f"plateau {label} must be non-negative, got {value}", line=line)
    return Plateau(max_x, max_y)


def parse_position(text: str, plateau: Plateau, line: int | None = None) -> RoverState:
    """Parse an ``<x> <y> <DIR>`` line and check it lies on *plateau*."""
    fields = text.split()
    if len(fields) != POSITION_FIELD_COUNT:
        raise FormatError(f"invalid position line: expected 'x y D', got {text!r}", line=line)
    x = parse_integer(fields[0], "x coordinate", line)
    y = parse_integer(fields[1], "y coordinate", line)
    letter = fields[2].upper()
    if letter not in DIRECTION_LETTERS:
        valid = ", ".join(DIRECTION_LETTERS)
        raise InvalidDirectionError(
            f"invalid direction {fields[2]!r}: must be one of {valid}", line=line
        )
    direction = Direction(letter)
    start = RoverState.at(x, y, direction)
    if not plateau.contains(start.position):
        raise RangeError(
            f"starting position ({x}, {y}) is outside plateau bounds "
            f"{plateau.describe_bounds()}",
            line=line,
        )
    return start


def parse_commands(text: str, line: int | None = None) -> tuple[Command, ...]:
    """Parse a commands line: one or more of L, R, M with no separators."""
    normalized = text.upper()
    if not _COMMANDS_RE.fullmatch(normalized):
        raise InvalidCommandError(
            f"invalid commands {text!r}: must only contain L, R, or M", line=line
        )
    return tuple(Command(letter) for letter in normalized)


def parse(raw_text: str) -> ParsedInput:
    """Parse a complete mission into a :class:`ParsedInput`."""
    lines = significant_lines(raw_text.removeprefix(_BOM))
    if not lines:
        raise EmptyInputError("input is empty or contains no valid lines")
    if len(lines) < 1 + LINES_PER_ROVER:
        raise StructuralError(
            "missing rover data: expected a plateau line followed by at least one "
            f"position/commands pair, got {len(lines)} line(s)"
        )
    rover_line_count = len(lines) - 1
    if rover_line_count % LINES_PER_ROVER != 0:
        raise StructuralError(
            "rover lines must come in pairs (position + commands), "
            f"got {rover_line_count} rover line(s)"
        )

    plateau_lineno, plateau_text = lines[0]
    plateau = parse_plateau(plateau_text, plateau_lineno)

    rovers: list[RoverInput] = []
    for index in range(1, len(lines), LINES_PER_ROVER):
        position_lineno, position_text = lines[index]
        commands_lineno, commands_text = lines[index + 1]
        start = parse_position(position_text, plateau, position_lineno)
        commands = parse_commands(commands_text, commands_lineno)
        rovers.append(RoverInput(start=start, commands=commands))

    logger.debug(
        "Parsed plateau %dx%d with %d rover(s)", plateau.max_x, plateau.max_y, len(rovers)
    )
    return ParsedInput(plateau=plateau, rovers=tuple(rovers))
