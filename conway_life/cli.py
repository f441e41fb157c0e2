"""CLI entrypoint: animate a starting pattern in the terminal.

Supports ``--config path/to/config.json``. CLI arguments override
config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import signal
import sys
from pathlib import Path

from conway_life.config.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_DELAY_SECONDS,
    DEFAULT_PATTERN,
)
from conway_life.config.types import BoardConfig, HistoryOverflowMode, RunnerConfig
from conway_life.domain.board import Board, Cell
from conway_life.domain.filters import HistoryCapacityExceededError, TerminationReason
from conway_life.domain.patterns import PATTERNS, parse_pattern
from conway_life.simulation.clock import SleepClock
from conway_life.simulation.runner import GameOfLife
from conway_life.viz.render import TerminalSink

logger = logging.getLogger(__name__)


def _parse_size(raw_size: str) -> tuple[int, int]:
    """Parse a board size formatted as ``WxH``."""
    tokens = raw_size.strip().lower().split("x")
    if len(tokens) != 2:
        raise ValueError("size must use WxH format")
    try:
        width = int(tokens[0])
        height = int(tokens[1])
    except ValueError as exc:
        raise ValueError("size must use integer WxH values") from exc
    if width < 1 or height < 1:
        raise ValueError("size must be >= 1x1")
    return width, height


def _parse_history_overflow(raw_mode: str) -> HistoryOverflowMode:
    try:
        return HistoryOverflowMode(raw_mode)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in HistoryOverflowMode)
        raise ValueError(f"history-overflow must be one of {valid}") from exc


def _parse_log_level(raw_level: str) -> int:
    level = logging.getLevelName(raw_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {raw_level}")
    return level


def _load_config_file(path: Path) -> dict[str, object]:
    """Read a JSON config file whose top level must be an object."""
    try:
        loaded = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError(f"config file {path} must contain a JSON object")
    return loaded


def _load_pattern_file(path: Path) -> frozenset[Cell]:
    """Read a pattern drawn with `#` (alive) and `.` (dead), one row per line."""
    lines = [line for line in path.read_text().splitlines() if line.strip()]
    return parse_pattern(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run Conway's Game of Life in the terminal")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default=None)
    parser.add_argument(
        "--pattern-file",
        type=Path,
        default=None,
        help="Text file of #/. rows; overrides --pattern",
    )
    parser.add_argument(
        "--size",
        type=str,
        default=None,
        metavar="WxH",
        help=f"Finite board size (default {DEFAULT_BOARD_WIDTH}x{DEFAULT_BOARD_HEIGHT})",
    )
    parser.add_argument(
        "--infinite",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use an unbounded board instead of a finite one",
    )
    parser.add_argument("--delay", type=float, default=None, help="Seconds between frames")
    parser.add_argument("--history-capacity", type=int, default=None)
    parser.add_argument(
        "--history-overflow",
        type=str,
        default=None,
        choices=[mode.value for mode in HistoryOverflowMode],
    )
    parser.add_argument("--max-generations", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a terminal run."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=_parse_log_level(args.log_level),
            stream=sys.stderr,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        file_cfg = _load_config_file(args.config) if args.config is not None else {}
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    def _get_bool(cli_val: bool | None, key: str, default: bool) -> bool:
        """CLI > file > default; file values must be JSON booleans."""
        value = _get(cli_val, key, default)
        if not isinstance(value, bool):
            raise ValueError(f"{key} must be true or false")
        return value

    def _get_optional_int(cli_val: int | None, key: str) -> int | None:
        value = _get(cli_val, key, None)
        return None if value is None else int(value)  # type: ignore[call-overload]

    try:
        pattern = str(_get(args.pattern, "pattern", DEFAULT_PATTERN))
        pattern_file_raw = _get(args.pattern_file, "pattern_file", None)
        infinite = _get_bool(args.infinite, "infinite", False)
        size_raw = str(_get(args.size, "size", f"{DEFAULT_BOARD_WIDTH}x{DEFAULT_BOARD_HEIGHT}"))
        width, height = _parse_size(size_raw)
        board_config = BoardConfig(
            pattern=pattern,
            width=None if infinite else width,
            height=None if infinite else height,
        )
        if pattern_file_raw is None:
            pattern_label = board_config.pattern
            initial_board = board_config.build_board()
        else:
            pattern_path = Path(str(pattern_file_raw))
            pattern_label = str(pattern_path)
            cells = _load_pattern_file(pattern_path)
            initial_board = (
                Board.infinite(cells) if infinite else Board.finite(width, height, cells)
            )
        delay = float(_get(args.delay, "delay", DEFAULT_DELAY_SECONDS))  # type: ignore[arg-type]
        runner_config = RunnerConfig(
            delay_seconds=delay,
            history_capacity=_get_optional_int(args.history_capacity, "history_capacity"),
            history_overflow=_parse_history_overflow(
                str(_get(args.history_overflow, "history_overflow", "evict"))
            ),
            max_generations=_get_optional_int(args.max_generations, "max_generations"),
        )
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    clock = SleepClock()
    previous_handler = signal.signal(signal.SIGINT, lambda signum, frame: clock.cancel())
    try:
        game = GameOfLife(
            initial_board,
            sink=TerminalSink(sys.stdout),
            config=runner_config,
            clock=clock,
        )
        result = game.run()
    except HistoryCapacityExceededError as exc:
        logger.error("run aborted: %s", exc)
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if result.termination_reason is TerminationReason.CANCELLED:
        logger.warning("run interrupted after %d generations", result.generations)

    summary = {
        "pattern": pattern_label,
        "board": f"{width}x{height}" if initial_board.is_finite else "infinite",
        "generations": result.generations,
        "frames_rendered": result.frames_rendered,
        "final_population": result.final_board.population,
        "termination_reason": result.termination_reason.value,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
