"""Matplotlib rendering of rover paths across the plateau."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from rover_sim.config.constants import PLOT_DPI  # noqa: E402
from rover_sim.domain.types import ParsedInput, Plateau, RoverInput  # noqa: E402
from rover_sim.io.formatter import format_state  # noqa: E402
from rover_sim.simulation.engine import execute, trace  # noqa: E402
from rover_sim.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

logger = logging.getLogger(__name__)


def path_array(rover: RoverInput, plateau: Plateau) -> np.ndarray:
    """Return an (N, 2) int array of distinct consecutive positions visited.

    Turns and rejected moves leave the position unchanged, so repeated
    consecutive rows are collapsed.
    """
    points = np.array(
        [(s.position.x, s.position.y) for s in trace(rover.start, rover.commands, plateau)],
        dtype=int,
    )
    keep = np.ones(len(points), dtype=bool)
    keep[1:] = np.any(points[1:] != points[:-1], axis=1)
    return points[keep]


def _draw_plateau(ax: plt.Axes, plateau: Plateau, theme: Theme) -> None:
    """Cell grid with one cell per coordinate, centred on integer points."""
    ax.set_facecolor(theme.background_color)
    for x in range(plateau.max_x + 2):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(plateau.max_y + 2):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.plot(
        [-0.5, plateau.max_x + 0.5, plateau.max_x + 0.5, -0.5, -0.5],
        [-0.5, -0.5, plateau.max_y + 0.5, plateau.max_y + 0.5, -0.5],
        color=theme.plateau_edge_color,
        linewidth=1.5,
    )
    ax.set_xlim(-0.75, plateau.max_x + 0.75)
    ax.set_ylim(-0.75, plateau.max_y + 0.75)
    ax.set_aspect("equal")
    ax.set_xticks(range(plateau.max_x + 1))
    ax.set_yticks(range(plateau.max_y + 1))


def render_paths(
    parsed: ParsedInput,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot every rover's path and final heading, save to *output_path*."""
    output_path = Path(output_path)
    plateau = parsed.plateau
    size = max(4.0, min(12.0, 0.6 * (max(plateau.max_x, plateau.max_y) + 1)))
    fig, ax = plt.subplots(figsize=(size, size))
    _draw_plateau(ax, plateau, theme)

    for index, rover in enumerate(parsed.rovers):
        color = theme.rover_color(index)
        points = path_array(rover, plateau)
        final = execute(rover.start, rover.commands, plateau)
        ax.plot(
            points[:, 0],
            points[:, 1],
            color=color,
            linewidth=theme.path_linewidth,
            label=f"Rover {index + 1}: {format_state(final)}",
        )
        ax.scatter(
            [points[0, 0]], [points[0, 1]], color=color, marker=theme.start_marker, zorder=3
        )
        dx, dy = final.direction.delta
        ax.arrow(
            final.position.x,
            final.position.y,
            0.35 * dx,
            0.35 * dy,
            color=color,
            head_width=0.15,
            length_includes_head=True,
            zorder=4,
        )

    ax.set_title(f"Plateau {plateau.max_x}x{plateau.max_y}")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if parsed.rovers:
        ax.legend(loc="upper left", bbox_to_anchor=(1.02, 1.0), fontsize=8)
    fig.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=PLOT_DPI)
    plt.close(fig)
    logger.info("Wrote path plot to %s", output_path)
    return output_path
