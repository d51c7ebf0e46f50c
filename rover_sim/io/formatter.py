"""Text rendering for rover states and missions."""

from __future__ import annotations

from collections.abc import Iterable

from rover_sim.domain.types import ParsedInput, RoverState


def format_state(state: RoverState) -> str:
    """Render one state as ``"<x> <y> <DIR>"``."""
    return f"{state.position.x} {state.position.y} {state.direction.letter}"


def format_output(states: Iterable[RoverState]) -> str:
    """Render final states one per line, in order, with no trailing newline."""
    return "\n".join(format_state(state) for state in states)


def format_input(parsed: ParsedInput) -> str:
    """Render *parsed* as canonical mission text accepted by the parser."""
    lines = [f"{parsed.plateau.max_x} {parsed.plateau.max_y}"]
    for rover in parsed.rovers:
        lines.append(format_state(rover.start))
        lines.append(rover.command_string)
    return "\n".join(lines)


def state_to_dict(state: RoverState) -> dict[str, object]:
    """JSON-ready mapping of one state."""
    return {
        "x": state.position.x,
        "y": state.position.y,
        "direction": state.direction.letter,
    }
