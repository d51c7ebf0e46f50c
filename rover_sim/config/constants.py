"""Centralized domain constants for rover simulations.

Letters, defaults and sample data shared across modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DIRECTION_LETTERS: tuple[str, ...] = ("N", "E", "S", "W")
"""Compass heading letters in clockwise order."""

COMMAND_LETTERS: tuple[str, ...] = ("L", "R", "M")
"""Command vocabulary: turn left, turn right, move forward."""

PLATEAU_FIELD_COUNT = 2
"""Whitespace-separated fields on the plateau line (max_x, max_y)."""

POSITION_FIELD_COUNT = 3
"""Whitespace-separated fields on a rover position line (x, y, heading)."""

LINES_PER_ROVER = 2
"""Each rover consumes one position line and one commands line."""

DEFAULT_MAX_WORKERS = 1
"""Rovers are executed sequentially unless more workers are requested."""

DEFAULT_THEME_NAME = "default"
"""Theme used by the path renderer when none is configured."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Log level applied by the CLI when none is configured."""

PLOT_DPI = 150
"""Resolution of saved path plots."""

SAMPLE_INPUT = "5 5\n1 2 N\nLMLMLMLMM\n3 3 E\nMMRMMRMRRM"
"""Two-rover sample mission."""
