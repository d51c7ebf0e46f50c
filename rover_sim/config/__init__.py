"""Configuration layer: constants and typed config dataclasses."""

from rover_sim.config.constants import (
    COMMAND_LETTERS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_THEME_NAME,
    DIRECTION_LETTERS,
    LINES_PER_ROVER,
    PLATEAU_FIELD_COUNT,
    PLOT_DPI,
    POSITION_FIELD_COUNT,
    SAMPLE_INPUT,
)
from rover_sim.config.types import RunConfig

__all__ = [
    "COMMAND_LETTERS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_THEME_NAME",
    "DIRECTION_LETTERS",
    "LINES_PER_ROVER",
    "PLATEAU_FIELD_COUNT",
    "PLOT_DPI",
    "POSITION_FIELD_COUNT",
    "RunConfig",
    "SAMPLE_INPUT",
]
