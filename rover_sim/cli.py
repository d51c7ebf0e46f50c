"""CLI entrypoint for rover missions.

This module owns argument parsing, config resolution and output routing.
All domain logic lives in the extracted modules:

- ``rover_sim.io.parser``          – mission text parsing and validation
- ``rover_sim.simulation.runner``  – per-rover execution in input order
- ``rover_sim.io.formatter``       – ``"<x> <y> <DIR>"`` output rendering
- ``rover_sim.viz.render``         – optional path plot
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rover_sim.config.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_THEME_NAME,
    SAMPLE_INPUT,
)
from rover_sim.config.types import RunConfig
from rover_sim.domain.errors import RoverInputError
from rover_sim.domain.types import ParsedInput
from rover_sim.io.formatter import format_output, state_to_dict
from rover_sim.io.parser import parse
from rover_sim.simulation.runner import RoverResult, run_mission_results
from rover_sim.viz.render import render_paths
from rover_sim.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"
"""Input path that selects standard input."""

# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        try:
            value = int(raw)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
        if raw != value:
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return value
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; accepts strings and paths only."""
    if isinstance(raw, (str, Path)):
        return str(raw)
    raise ValueError(f"{key} must be a string")


def _coerce_optional_path(raw: object, key: str) -> Path | None:
    if raw is None:
        return None
    return Path(_coerce_str(raw, key))


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_path(cli_val: Path | None, key: str, file_cfg: dict[str, object]) -> Path | None:
    return _coerce_optional_path(_get_val(cli_val, key, file_cfg, None), key)


def _load_config_file(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except OSError as exc:
        parser.error(f"Cannot read config file: {path}: {exc}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    return loaded


def _resolve_run_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace, file_cfg: dict[str, object]
) -> RunConfig:
    try:
        input_path = _get_path(args.input, "input_path", file_cfg)
        if input_path is not None and str(input_path) == STDIN_MARKER:
            input_path = None
        return RunConfig(
            input_path=input_path,
            output_path=_get_path(args.output, "output_path", file_cfg),
            plot_path=_get_path(args.plot, "plot_path", file_cfg),
            max_workers=_get_int(args.workers, "max_workers", file_cfg, DEFAULT_MAX_WORKERS),
            theme=_get_str(args.theme, "theme", file_cfg, DEFAULT_THEME_NAME),
            log_level=_get_str(args.log_level, "log_level", file_cfg, DEFAULT_LOG_LEVEL),
            json_summary=_get_bool(args.json, "json_summary", file_cfg, False),
        )
    except ValueError as exc:
        parser.error(str(exc))


def _read_input(parser: argparse.ArgumentParser, input_path: Path | None) -> str:
    if input_path is None:
        return sys.stdin.read()
    try:
        return input_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        parser.error(f"Input file not found: {input_path}")
    except UnicodeDecodeError as exc:
        parser.error(f"Input file is not valid UTF-8: {input_path}: {exc}")
    except OSError as exc:
        parser.error(f"Cannot read input file: {input_path}: {exc}")


def _summary(parsed: ParsedInput, results: list[RoverResult]) -> dict[str, object]:
    return {
        "plateau": {"max_x": parsed.plateau.max_x, "max_y": parsed.plateau.max_y},
        "rovers": [
            {
                "index": result.index,
                "start": state_to_dict(result.rover.start),
                "commands": result.rover.command_string,
                "final": state_to_dict(result.final),
            }
            for result in results
        ],
    }


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rover-sim",
        description="Simulate rovers on a plateau and report their final positions",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="Mission file ('-' or omitted for stdin)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write output to this file")
    parser.add_argument("--plot", type=Path, default=None, help="Render rover paths to an image")
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    parser.add_argument(
        "--json",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print a JSON summary with start and final states",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Run the built-in two-rover sample mission",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for rover missions.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    Invalid mission input exits with status 2 and the parser's message.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    file_cfg = _load_config_file(parser, args.config)
    config = _resolve_run_config(parser, args, file_cfg)

    logging.basicConfig(
        level=config.log_level_value,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        theme = get_theme(config.theme)
    except ValueError as exc:
        parser.error(str(exc))

    raw_text = SAMPLE_INPUT if args.sample else _read_input(parser, config.input_path)
    try:
        parsed = parse(raw_text)
    except RoverInputError as exc:
        logger.debug("Rejected mission input", exc_info=True)
        parser.error(str(exc))

    results = run_mission_results(parsed, max_workers=config.max_workers)
    if config.json_summary:
        text = json.dumps(_summary(parsed, results), ensure_ascii=False, indent=2)
    else:
        text = format_output(result.final for result in results)

    if config.output_path is not None:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        config.output_path.write_text(text, encoding="utf-8")
        logger.info("Wrote %d result(s) to %s", len(results), config.output_path)
    else:
        print(text)

    if config.plot_path is not None:
        render_paths(parsed, config.plot_path, theme=theme)


if __name__ == "__main__":
    main()
