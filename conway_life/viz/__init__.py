"""Visualization layer: text rendering and frame sinks."""

from conway_life.viz.render import (
    FrameRecorder,
    RenderSink,
    TerminalSink,
    render_board,
    render_grid,
)

__all__ = [
    "FrameRecorder",
    "RenderSink",
    "TerminalSink",
    "render_board",
    "render_grid",
]
