"""Tests for rover_sim.domain.types and the error taxonomy."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from rover_sim.domain.direction import Direction
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
    Plateau,
    Position,
    RoverInput,
    RoverState,
)


class TestPlateau:
    def test_contains_is_inclusive(self) -> None:
        plateau = Plateau(5, 3)
        assert plateau.contains(Position(0, 0))
        assert plateau.contains(Position(5, 3))
        assert not plateau.contains(Position(6, 3))
        assert not plateau.contains(Position(5, 4))
        assert not plateau.contains(Position(-1, 0))
        assert not plateau.contains(Position(0, -1))

    def test_zero_plateau_has_one_cell(self) -> None:
        plateau = Plateau(0, 0)
        assert plateau.contains(Position(0, 0))
        assert not plateau.contains(Position(1, 0))

    def test_negative_bound_rejected(self) -> None:
        with pytest.raises(RangeError, match="non-negative"):
            Plateau(-1, 2)

    def test_is_frozen(self) -> None:
        plateau = Plateau(1, 1)
        with pytest.raises(FrozenInstanceError):
            plateau.max_x = 3  # type: ignore[misc]


class TestValueTypes:
    def test_translate_returns_new_position(self) -> None:
        origin = Position(2, 2)
        moved = origin.translate(-1, 1)
        assert moved == Position(1, 3)
        assert origin == Position(2, 2)

    def test_rover_state_equality(self) -> None:
        assert RoverState.at(1, 2, Direction.NORTH) == RoverState(Position(1, 2), Direction.NORTH)
        assert RoverState.at(1, 2, Direction.NORTH) != RoverState.at(1, 2, Direction.EAST)

    def test_command_string(self) -> None:
        rover = RoverInput(
            start=RoverState.at(0, 0, Direction.NORTH),
            commands=(Command.TURN_LEFT, Command.MOVE_FORWARD, Command.TURN_RIGHT),
        )
        assert rover.command_string == "LMR"


class TestCommand:
    @pytest.mark.parametrize(
        ("letter", "expected"),
        [
            ("L", Command.TURN_LEFT),
            ("r", Command.TURN_RIGHT),
            ("m", Command.MOVE_FORWARD),
        ],
    )
    def test_from_letter_case_insensitive(self, letter: str, expected: Command) -> None:
        assert Command.from_letter(letter) is expected

    def test_from_letter_rejects_unknown(self) -> None:
        with pytest.raises(InvalidCommandError, match="invalid command 'X'"):
            Command.from_letter("X")


class TestErrors:
    @pytest.mark.parametrize(
        "error_type",
        [
            EmptyInputError,
            StructuralError,
            FormatError,
            IntegerParseError,
            RangeError,
            InvalidDirectionError,
            InvalidCommandError,
        ],
    )
    def test_taxonomy_shares_base(self, error_type: type[RoverInputError]) -> None:
        assert issubclass(error_type, RoverInputError)
        assert issubclass(error_type, ValueError)

    def test_line_prefix(self) -> None:
        exc = FormatError("invalid plateau line", line=3)
        assert exc.line == 3
        assert str(exc) == "line 3: invalid plateau line"

    def test_no_line(self) -> None:
        exc = EmptyInputError("input is empty")
        assert exc.line is None
        assert str(exc) == "input is empty"
