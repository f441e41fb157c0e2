"""Configuration dataclasses for boards and simulation runs.

All frozen dataclasses that parameterise a run live here and validate
themselves in ``__post_init__``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from conway_life.config.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_DELAY_SECONDS,
    DEFAULT_PATTERN,
)

if TYPE_CHECKING:
    from conway_life.domain.board import Board

__all__ = [
    "BoardConfig",
    "HistoryOverflowMode",
    "RunnerConfig",
]


class HistoryOverflowMode(Enum):
    """Policy applied when a bounded board history reaches its capacity."""

    EVICT = "evict"
    RAISE = "raise"


@dataclass(frozen=True)
class RunnerConfig:
    """Runtime knobs for one simulation run.

    ``history_capacity=None`` keeps every board ever seen, so any repeat is
    detected. A capacity bounds memory; with ``EVICT`` a cycle longer than the
    retained window is no longer detected, with ``RAISE`` the run fails with
    ``HistoryCapacityExceededError`` instead.
    """

    delay_seconds: float = DEFAULT_DELAY_SECONDS
    history_capacity: int | None = None
    history_overflow: HistoryOverflowMode = HistoryOverflowMode.EVICT
    max_generations: int | None = None

    def __post_init__(self) -> None:
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        if self.history_capacity is not None and self.history_capacity < 1:
            raise ValueError("history_capacity must be >= 1")
        if self.max_generations is not None and self.max_generations < 1:
            raise ValueError("max_generations must be >= 1")


@dataclass(frozen=True)
class BoardConfig:
    """Starting board: a named pattern on a finite or infinite board.

    Leave ``width`` and ``height`` as ``None`` for an infinite board.
    """

    pattern: str = DEFAULT_PATTERN
    width: int | None = DEFAULT_BOARD_WIDTH
    height: int | None = DEFAULT_BOARD_HEIGHT

    def __post_init__(self) -> None:
        if (self.width is None) != (self.height is None):
            raise ValueError("width and height must both be set or both be None")
        if self.width is not None and self.height is not None:
            if self.width < 1 or self.height < 1:
                raise ValueError("board dimensions must be >= 1")
        from conway_life.domain.patterns import PATTERNS

        if self.pattern not in PATTERNS:
            valid = ", ".join(sorted(PATTERNS))
            raise ValueError(f"pattern must be one of {valid}")

    @property
    def is_finite(self) -> bool:
        return self.width is not None

    def build_board(self) -> Board:
        """Construct the initial board described by this config."""
        from conway_life.domain.board import Board
        from conway_life.domain.patterns import PATTERNS

        cells = PATTERNS[self.pattern]
        if self.width is None or self.height is None:
            return Board.infinite(cells)
        return Board.finite(self.width, self.height, cells)
