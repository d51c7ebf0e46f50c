"""Configuration dataclasses for rover simulation runs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rover_sim.config.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_THEME_NAME,
)

__all__ = [
    "RunConfig",
]

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for one CLI invocation.

    ``input_path`` of ``None`` means standard input; ``output_path`` of
    ``None`` means standard output. ``plot_path`` enables the path renderer.
    """

    input_path: Path | None = None
    output_path: Path | None = None
    plot_path: Path | None = None
    max_workers: int = DEFAULT_MAX_WORKERS
    theme: str = DEFAULT_THEME_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    json_summary: bool = False

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        if not self.theme:
            raise ValueError("theme must not be empty")
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            valid = ", ".join(_VALID_LOG_LEVELS)
            raise ValueError(f"log_level must be one of {valid}")

    @property
    def log_level_value(self) -> int:
        """Numeric :mod:`logging` level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())
