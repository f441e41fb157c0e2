"""Termination detection for simulation runs."""

from __future__ import annotations

import logging
from collections import OrderedDict
from enum import Enum

from conway_life.config.types import HistoryOverflowMode
from conway_life.domain.board import Board

logger = logging.getLogger(__name__)


class TerminationReason(str, Enum):
    """Why a run stopped."""

    EMPTY = "empty"
    REPEAT = "repeat"
    GENERATION_LIMIT = "generation_limit"
    CANCELLED = "cancelled"


class HistoryCapacityExceededError(RuntimeError):
    """Raised when a bounded history is full and its overflow mode is ``RAISE``."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"board history exceeded capacity of {capacity}")
        self.capacity = capacity


class SeenBoards:
    """Boards observed so far, in insertion order, for repeat detection.

    With ``capacity=None`` every board is kept and any repeat is detected.
    With a capacity the oldest board is evicted once full (``EVICT``), so only
    repeats within the retained window are detected, or the next insert raises
    ``HistoryCapacityExceededError`` (``RAISE``).
    """

    def __init__(
        self,
        capacity: int | None = None,
        overflow: HistoryOverflowMode = HistoryOverflowMode.EVICT,
    ) -> None:
        if capacity is not None and capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.overflow = overflow
        self._boards: OrderedDict[Board, None] = OrderedDict()
        self.evicted = 0

    def __contains__(self, board: object) -> bool:
        return board in self._boards

    def __len__(self) -> int:
        return len(self._boards)

    def add(self, board: Board) -> None:
        """Record ``board``; a board already present moves to the newest slot."""
        if board in self._boards:
            self._boards.move_to_end(board)
            return
        if self.capacity is not None and len(self._boards) >= self.capacity:
            if self.overflow is HistoryOverflowMode.RAISE:
                raise HistoryCapacityExceededError(self.capacity)
            self._boards.popitem(last=False)
            self.evicted += 1
            logger.debug("history full at %d boards, evicted oldest", self.capacity)
        self._boards[board] = None
