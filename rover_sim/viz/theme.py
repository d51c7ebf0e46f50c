"""Visualization theme presets for the path renderer.

Themes are frozen dataclasses that group all styling constants together so
palettes can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # One color per rover, cycled when there are more rovers than colors
    rover_colors: tuple[str, ...] = ("#2196F3", "#FF5722", "#4CAF50", "#FFC107", "#9C27B0")
    background_color: str = "#F0F0F0"
    grid_line_color: str = "#CCCCCC"
    plateau_edge_color: str = "#333333"
    start_marker: str = "o"
    path_linewidth: float = 2.0

    def rover_color(self, index: int) -> str:
        return self.rover_colors[index % len(self.rover_colors)]


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    rover_colors=("#1f77b4", "#d62728", "#2ca02c", "#ff7f0e", "#9467bd"),
    background_color="#FFFFFF",
    grid_line_color="#E0E0E0",
    plateau_edge_color="#000000",
    path_linewidth=1.5,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
