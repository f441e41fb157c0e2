"""Configuration layer: constants and typed config dataclasses."""

from conway_life.config.constants import (
    ALIVE_SYMBOL,
    DEAD_SYMBOL,
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_DELAY_SECONDS,
    DEFAULT_PATTERN,
)
from conway_life.config.types import BoardConfig, HistoryOverflowMode, RunnerConfig

__all__ = [
    "ALIVE_SYMBOL",
    "BoardConfig",
    "DEAD_SYMBOL",
    "DEFAULT_BOARD_HEIGHT",
    "DEFAULT_BOARD_WIDTH",
    "DEFAULT_DELAY_SECONDS",
    "DEFAULT_PATTERN",
    "HistoryOverflowMode",
    "RunnerConfig",
]
