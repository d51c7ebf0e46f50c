"""Error taxonomy for rover mission input.

Every error is raised at the parser boundary. Out-of-bounds moves during
execution are not errors and have no counterpart here.
"""

from __future__ import annotations


class RoverInputError(ValueError):
    """Base class for invalid mission input.

    ``line`` is the 1-based source line number of the offending line, with
    blank lines counted, when the failure can be pinned to a single line.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class EmptyInputError(RoverInputError):
    """Input has no non-blank lines."""


class StructuralError(RoverInputError):
    """Input has the wrong number of lines."""


class FormatError(RoverInputError):
    """A plateau or position line has the wrong number of fields."""


class IntegerParseError(RoverInputError):
    """A numeric field is not a valid integer."""


class RangeError(RoverInputError):
    """A value is outside its permitted range."""


class InvalidDirectionError(RoverInputError):
    """A heading letter is not one of N, E, S, W."""


class InvalidCommandError(RoverInputError):
    """A commands line is empty or contains letters other than L, R, M."""
