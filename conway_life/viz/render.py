"""Textual rendering of boards and the sinks frames are written to."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

import numpy as np

from conway_life.config.constants import (
    ALIVE_SYMBOL,
    ANSI_CLEAR_SCREEN,
    ANSI_CURSOR_HOME,
    CELL_SEPARATOR,
    DEAD_SYMBOL,
)
from conway_life.domain.board import Board


def render_grid(grid: np.ndarray) -> str:
    """Render a boolean ``[y, x]`` grid as space-separated ``#``/``.`` rows."""
    glyphs = np.where(grid, ALIVE_SYMBOL, DEAD_SYMBOL)
    return "\n".join(CELL_SEPARATOR.join(row) for row in glyphs.tolist())


def render_board(board: Board) -> str:
    """Render the board's render window; an empty infinite board renders as ``""``."""
    return render_grid(board.to_array())


class RenderSink(Protocol):
    """Destination for rendered frames."""

    def show(self, frame: str) -> None: ...


class TerminalSink:
    """Clear the terminal and redraw each frame from the top-left corner."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def show(self, frame: str) -> None:
        self.stream.write(ANSI_CLEAR_SCREEN)
        self.stream.write(ANSI_CURSOR_HOME)
        self.stream.write(frame + "\n")
        self.stream.flush()


class FrameRecorder:
    """Keep every frame in memory, in order."""

    def __init__(self) -> None:
        self.frames: list[str] = []

    def show(self, frame: str) -> None:
        self.frames.append(frame)
