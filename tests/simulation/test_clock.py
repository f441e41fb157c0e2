"""Tests for conway_life.simulation.clock module."""

from __future__ import annotations

import threading

import pytest

from conway_life.simulation.clock import ManualClock, SleepClock


def test_sleep_clock_zero_pause_completes() -> None:
    assert SleepClock().pause(0.0) is True


def test_sleep_clock_cancel_interrupts_pause() -> None:
    clock = SleepClock()
    clock.cancel()
    assert clock.cancelled
    assert clock.pause(60.0) is False


def test_sleep_clock_cancel_from_other_thread() -> None:
    clock = SleepClock()
    timer = threading.Timer(0.01, clock.cancel)
    timer.start()
    try:
        assert clock.pause(30.0) is False
    finally:
        timer.cancel()


def test_manual_clock_records_without_waiting() -> None:
    clock = ManualClock()
    assert clock.pause(100.0) is True
    assert clock.pause(0.5) is True
    assert clock.pauses == [100.0, 0.5]
    assert clock.elapsed == pytest.approx(100.5)


def test_manual_clock_cancel_after() -> None:
    clock = ManualClock(cancel_after=2)
    assert clock.pause(0.1) is True
    assert clock.pause(0.1) is False
    assert clock.pause(0.1) is False


def test_manual_clock_rejects_non_positive_cancel_after() -> None:
    with pytest.raises(ValueError):
        ManualClock(cancel_after=0)
