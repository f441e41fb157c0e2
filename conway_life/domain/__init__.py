"""Domain layer: boards, starting patterns, and termination detection."""

from conway_life.domain.board import MOORE_OFFSETS, Board, Cell, Rectangle, Unbounded
from conway_life.domain.filters import (
    HistoryCapacityExceededError,
    SeenBoards,
    TerminationReason,
)
from conway_life.domain.patterns import PATTERNS, parse_pattern

__all__ = [
    "Board",
    "Cell",
    "HistoryCapacityExceededError",
    "MOORE_OFFSETS",
    "PATTERNS",
    "Rectangle",
    "SeenBoards",
    "TerminationReason",
    "Unbounded",
    "parse_pattern",
]
