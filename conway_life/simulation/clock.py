"""Pacing clocks for the run loop.

The runner never sleeps directly; it asks a clock to pause and stops the run
when the pause reports cancellation.
"""

from __future__ import annotations

import threading
from typing import Protocol


class Clock(Protocol):
    def pause(self, seconds: float) -> bool:
        """Wait ``seconds``; return ``False`` if the wait was cancelled."""
        ...


class SleepClock:
    """Wall-clock pauses that another thread or a signal handler can cancel."""

    def __init__(self) -> None:
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def pause(self, seconds: float) -> bool:
        return not self._cancelled.wait(seconds)


class ManualClock:
    """Records requested pauses without waiting.

    ``cancel_after`` cancels the pause with that 1-based index and every pause
    after it.
    """

    def __init__(self, cancel_after: int | None = None) -> None:
        if cancel_after is not None and cancel_after < 1:
            raise ValueError("cancel_after must be >= 1")
        self.cancel_after = cancel_after
        self.pauses: list[float] = []

    @property
    def elapsed(self) -> float:
        return sum(self.pauses)

    def pause(self, seconds: float) -> bool:
        self.pauses.append(seconds)
        if self.cancel_after is None:
            return True
        return len(self.pauses) < self.cancel_after
