"""Tests for conway_life.config.types module."""

from __future__ import annotations

import pytest

from conway_life.config.constants import DEFAULT_DELAY_SECONDS
from conway_life.config.types import BoardConfig, HistoryOverflowMode, RunnerConfig
from conway_life.domain.board import Board, Rectangle
from conway_life.domain.patterns import GLIDER, SQUARE


class TestRunnerConfig:
    def test_defaults(self) -> None:
        config = RunnerConfig()
        assert config.delay_seconds == DEFAULT_DELAY_SECONDS
        assert config.history_capacity is None
        assert config.history_overflow is HistoryOverflowMode.EVICT
        assert config.max_generations is None

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError, match="delay_seconds"):
            RunnerConfig(delay_seconds=-0.1)

    def test_zero_capacity_rejected(self) -> None:
        with pytest.raises(ValueError, match="history_capacity"):
            RunnerConfig(history_capacity=0)

    def test_zero_generation_limit_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_generations"):
            RunnerConfig(max_generations=0)


class TestBoardConfig:
    def test_default_is_glider_on_twenty_square(self) -> None:
        board = BoardConfig().build_board()
        assert board == Board.finite(20, 20, GLIDER)

    def test_infinite_board(self) -> None:
        config = BoardConfig(pattern="square", width=None, height=None)
        assert not config.is_finite
        assert config.build_board() == Board.infinite(SQUARE)

    def test_finite_board_dimensions(self) -> None:
        board = BoardConfig(pattern="square", width=8, height=6).build_board()
        assert board.boundary == Rectangle(8, 6)

    def test_unknown_pattern_rejected(self) -> None:
        with pytest.raises(ValueError, match="pattern must be one of"):
            BoardConfig(pattern="spaceship")

    def test_half_specified_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError, match="both"):
            BoardConfig(width=10, height=None)

    def test_non_positive_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError, match=">= 1"):
            BoardConfig(width=0, height=5)

    def test_pattern_must_fit_finite_board(self) -> None:
        with pytest.raises(ValueError, match="outside the board"):
            BoardConfig(pattern="square", width=4, height=4).build_board()
