"""Simulation engine: the run loop and its pacing clocks."""

from conway_life.simulation.clock import Clock, ManualClock, SleepClock
from conway_life.simulation.runner import GameOfLife, RunResult, RunState

__all__ = [
    "Clock",
    "GameOfLife",
    "ManualClock",
    "RunResult",
    "RunState",
    "SleepClock",
]
