"""Visualization layer: themes and the path renderer."""

from rover_sim.viz.render import path_array, render_paths
from rover_sim.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "path_array",
    "render_paths",
]
