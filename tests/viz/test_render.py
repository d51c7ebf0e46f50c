"""Tests for rover_sim.viz: themes and the path renderer."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from rover_sim.config.constants import SAMPLE_INPUT
from rover_sim.io.parser import parse
from rover_sim.viz.render import path_array, render_paths
from rover_sim.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme


class TestPathArray:
    def test_collapses_turns_and_rejected_moves(self) -> None:
        parsed = parse("2 2\n0 0 N\nMMMRMMM")
        points = path_array(parsed.rovers[0], parsed.plateau)
        expected = np.array([[0, 0], [0, 1], [0, 2], [1, 2], [2, 2]])
        np.testing.assert_array_equal(points, expected)

    def test_stationary_rover_has_single_point(self) -> None:
        parsed = parse("0 0\n0 0 N\nLRMM")
        points = path_array(parsed.rovers[0], parsed.plateau)
        assert points.shape == (1, 2)


class TestRenderPaths:
    def test_writes_png(self, tmp_path: Path) -> None:
        output = tmp_path / "plots" / "paths.png"
        written = render_paths(parse(SAMPLE_INPUT), output)
        assert written == output
        assert output.exists()
        assert output.stat().st_size > 0

    def test_many_rovers_cycle_colors(self, tmp_path: Path) -> None:
        lines = ["6 6"]
        for i in range(7):
            lines.extend([f"{i} 0 N", "MMRM"])
        output = tmp_path / "many.png"
        render_paths(parse("\n".join(lines)), output, theme=PAPER_THEME)
        assert output.exists()


class TestTheme:
    def test_get_theme_case_insensitive(self) -> None:
        assert get_theme("DEFAULT") is DEFAULT_THEME
        assert get_theme("paper") is PAPER_THEME

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme 'neon'"):
            get_theme("neon")

    def test_rover_color_cycles(self) -> None:
        theme = Theme(rover_colors=("red", "blue"))
        assert [theme.rover_color(i) for i in range(4)] == ["red", "blue", "red", "blue"]
