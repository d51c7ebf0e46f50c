from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rover_sim.config.constants import (
    COMMAND_LETTERS,
    DEFAULT_MAX_WORKERS,
    DIRECTION_LETTERS,
    LINES_PER_ROVER,
    PLOT_DPI,
    SAMPLE_INPUT,
)
from rover_sim.config.types import RunConfig
from rover_sim.domain.direction import Direction
from rover_sim.domain.types import Command


def test_direction_letters_match_enum() -> None:
    assert DIRECTION_LETTERS == tuple(d.value for d in Direction)


def test_command_letters_match_enum() -> None:
    assert COMMAND_LETTERS == tuple(c.value for c in Command)


def test_sample_input_has_whole_rover_pairs() -> None:
    rover_lines = len(SAMPLE_INPUT.splitlines()) - 1
    assert rover_lines > 0 and rover_lines % LINES_PER_ROVER == 0


def test_defaults_are_positive() -> None:
    assert isinstance(DEFAULT_MAX_WORKERS, int) and DEFAULT_MAX_WORKERS >= 1
    assert isinstance(PLOT_DPI, int) and PLOT_DPI > 0


class TestRunConfig:
    def test_defaults(self) -> None:
        config = RunConfig()
        assert config.input_path is None
        assert config.max_workers == DEFAULT_MAX_WORKERS
        assert config.log_level_value == logging.WARNING

    def test_log_level_case_insensitive(self) -> None:
        assert RunConfig(log_level="debug").log_level_value == logging.DEBUG

    def test_rejects_zero_workers(self) -> None:
        with pytest.raises(ValueError, match="max_workers must be >= 1"):
            RunConfig(max_workers=0)

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ValueError, match="log_level must be one of"):
            RunConfig(log_level="loud")

    def test_rejects_empty_theme(self) -> None:
        with pytest.raises(ValueError, match="theme must not be empty"):
            RunConfig(theme="")

    def test_paths_kept(self) -> None:
        config = RunConfig(input_path=Path("in.txt"), plot_path=Path("out.png"))
        assert config.input_path == Path("in.txt")
        assert config.plot_path == Path("out.png")
