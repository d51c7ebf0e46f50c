"""Command-execution engine.

A rover is a state machine over ``(Position, Direction)`` constrained to a
plateau. Every transition is total: turns always succeed, and a move whose
destination lies off the plateau is a no-op rather than an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from rover_sim.domain.errors import InvalidCommandError
from rover_sim.domain.types import Command, Plateau, Position, RoverState

logger = logging.getLogger(__name__)

Commands = Iterable[Command] | str
"""Commands or command letters, given as an iterable or a string."""


def _as_command(item: object) -> Command:
    if isinstance(item, Command):
        return item
    if isinstance(item, str):
        return Command.from_letter(item)
    raise InvalidCommandError(f"invalid command {item!r}: expected a Command or a letter")


def _as_commands(commands: Commands) -> tuple[Command, ...]:
    return tuple(_as_command(item) for item in commands)


def step(state: RoverState, command: Command, plateau: Plateau) -> RoverState:
    """Apply one command and return the next state."""
    if command is Command.TURN_LEFT:
        return RoverState(state.position, state.direction.turn_left())
    if command is Command.TURN_RIGHT:
        return RoverState(state.position, state.direction.turn_right())
    if command is not Command.MOVE_FORWARD:
        raise InvalidCommandError(f"invalid command {command!r}: expected a Command")
    candidate = state.position.translate(*state.direction.delta)
    if plateau.contains(candidate):
        return RoverState(candidate, state.direction)
    return state


def execute(start: RoverState, commands: Commands, plateau: Plateau) -> RoverState:
    """Fold *commands* over *start* and return the final state.

    Keeps no history; use :func:`trace` for the intermediate states.
    """
    program = _as_commands(commands)
    x, y = start.position.x, start.position.y
    direction = start.direction
    rejected = 0
    for command in program:
        if command is Command.TURN_LEFT:
            direction = direction.turn_left()
        elif command is Command.TURN_RIGHT:
            direction = direction.turn_right()
        elif command is Command.MOVE_FORWARD:
            dx, dy = direction.delta
            nx, ny = x + dx, y + dy
            if 0 <= nx <= plateau.max_x and 0 <= ny <= plateau.max_y:
                x, y = nx, ny
            else:
                rejected += 1

    if rejected:
        logger.debug("Ignored %d out-of-bounds move(s) of %d command(s)", rejected, len(program))
    return RoverState(Position(x, y), direction)


def trace(start: RoverState, commands: Commands, plateau: Plateau) -> Iterator[RoverState]:
    """Yield *start* and then the state after each command."""
    state = start
    yield state
    for command in _as_commands(commands):
        state = step(state, command, plateau)
        yield state
