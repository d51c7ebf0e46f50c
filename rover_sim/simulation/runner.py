"""Mission runner: execute every rover of a parsed mission.

Rovers are independent, so execution is a plain map. With more than one
worker the map runs on a thread pool; ``Executor.map`` yields results in
submission order, so output order always equals input order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from rover_sim.config.constants import DEFAULT_MAX_WORKERS
from rover_sim.domain.types import ParsedInput, Plateau, RoverInput, RoverState
from rover_sim.simulation.engine import execute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoverResult:
    """One rover's program paired with where it ended up."""

    index: int
    rover: RoverInput
    final: RoverState


def _run_rover(rover: RoverInput, plateau: Plateau) -> RoverState:
    return execute(rover.start, rover.commands, plateau)


def run_mission(
    parsed: ParsedInput, max_workers: int = DEFAULT_MAX_WORKERS
) -> tuple[RoverState, ...]:
    """Return the final state of every rover, in input order."""
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    plateau = parsed.plateau
    if max_workers == 1 or len(parsed.rovers) < 2:
        finals = tuple(_run_rover(rover, plateau) for rover in parsed.rovers)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            finals = tuple(pool.map(_run_rover, parsed.rovers, [plateau] * len(parsed.rovers)))

    logger.info("Executed %d rover(s) with max_workers=%d", len(finals), max_workers)
    return finals


def run_mission_results(
    parsed: ParsedInput, max_workers: int = DEFAULT_MAX_WORKERS
) -> list[RoverResult]:
    """Like :func:`run_mission`, keeping each rover's input alongside its result."""
    finals = run_mission(parsed, max_workers=max_workers)
    return [
        RoverResult(index=i, rover=rover, final=final)
        for i, (rover, final) in enumerate(zip(parsed.rovers, finals, strict=True))
    ]
