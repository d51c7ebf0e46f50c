"""Simulation layer: the execution engine and the mission runner."""

from rover_sim.simulation.engine import execute, step, trace
from rover_sim.simulation.runner import RoverResult, run_mission, run_mission_results

__all__ = [
    "RoverResult",
    "execute",
    "run_mission",
    "run_mission_results",
    "step",
    "trace",
]
