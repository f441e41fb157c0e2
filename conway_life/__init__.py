"""Conway's Game of Life on finite and infinite boards."""

from conway_life.config.types import BoardConfig, HistoryOverflowMode, RunnerConfig
from conway_life.domain.board import Board, Cell
from conway_life.domain.filters import HistoryCapacityExceededError, TerminationReason
from conway_life.simulation.runner import GameOfLife, RunResult

__all__ = [
    "Board",
    "BoardConfig",
    "Cell",
    "GameOfLife",
    "HistoryCapacityExceededError",
    "HistoryOverflowMode",
    "RunResult",
    "RunnerConfig",
    "TerminationReason",
]
