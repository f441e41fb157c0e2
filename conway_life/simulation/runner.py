"""Run loop: advance a board until it empties or repeats a seen state.

A run over an infinite board is not guaranteed to stop (a glider never
repeats exactly). Set ``RunnerConfig.max_generations`` or cancel the clock to
bound it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from conway_life.config.types import RunnerConfig
from conway_life.domain.board import Board
from conway_life.domain.filters import SeenBoards, TerminationReason
from conway_life.simulation.clock import Clock, SleepClock
from conway_life.viz.render import RenderSink, render_board

logger = logging.getLogger(__name__)


class RunState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run."""

    final_board: Board
    generations: int
    frames_rendered: int
    termination_reason: TerminationReason
    evicted_boards: int = 0


class GameOfLife:
    """Drive ``tick`` over a board, rendering every generation to a sink."""

    def __init__(
        self,
        initial_board: Board,
        sink: RenderSink,
        config: RunnerConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.initial_board = initial_board
        self.sink = sink
        self.config = config or RunnerConfig()
        self.clock = clock if clock is not None else SleepClock()
        self.state = RunState.RUNNING
        self._frames = 0

    def _show(self, board: Board) -> None:
        self.sink.show(render_board(board))
        self._frames += 1

    def run(self) -> RunResult:
        """Run until a termination condition holds.

        Per generation: render current, pause, record current in history,
        tick, then test the new board against the history recorded so far.
        The terminal board is rendered once more before returning.

        ``HistoryCapacityExceededError`` propagates when a bounded history in
        ``RAISE`` mode fills up; the runner is still left ``TERMINATED``.
        """
        history = SeenBoards(self.config.history_capacity, self.config.history_overflow)
        self.state = RunState.RUNNING
        self._frames = 0
        logger.info(
            "starting run: %s board, %d alive cells",
            "finite" if self.initial_board.is_finite else "infinite",
            self.initial_board.population,
        )
        try:
            final_board, generations, reason = self._advance(history)
        finally:
            self.state = RunState.TERMINATED

        logger.info("run terminated after %d generations: %s", generations, reason.value)
        return RunResult(
            final_board=final_board,
            generations=generations,
            frames_rendered=self._frames,
            termination_reason=reason,
            evicted_boards=history.evicted,
        )

    def _advance(self, history: SeenBoards) -> tuple[Board, int, TerminationReason]:
        config = self.config
        current = self.initial_board
        generations = 0
        if current.is_empty():
            self._show(current)
            return current, generations, TerminationReason.EMPTY

        while True:
            self._show(current)
            if not self.clock.pause(config.delay_seconds):
                return current, generations, TerminationReason.CANCELLED
            history.add(current)
            next_board = current.tick()
            generations += 1
            logger.debug("generation %d: %d alive cells", generations, next_board.population)

            if next_board.is_empty():
                reason = TerminationReason.EMPTY
            elif next_board in history:
                reason = TerminationReason.REPEAT
            elif config.max_generations is not None and generations >= config.max_generations:
                reason = TerminationReason.GENERATION_LIMIT
            else:
                current = next_board
                continue

            self._show(next_board)
            return next_board, generations, reason
