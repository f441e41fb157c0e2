"""Centralized defaults for boards, runs, and rendering.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_BOARD_WIDTH = 20
"""Default finite-board width in cells."""

DEFAULT_BOARD_HEIGHT = 20
"""Default finite-board height in cells."""

DEFAULT_PATTERN = "glider"
"""Starting pattern used when none is requested."""

DEFAULT_DELAY_SECONDS = 0.075
"""Pause between rendered frames so the animation stays legible."""

SURVIVE_COUNTS: frozenset[int] = frozenset({2, 3})
"""Alive-neighbour counts that keep a live cell alive (S23)."""

BIRTH_COUNTS: frozenset[int] = frozenset({3})
"""Alive-neighbour counts that bring a dead cell to life (B3)."""

RENDER_MARGIN = 1
"""Ring of dead cells drawn around the live region of an unbounded board."""

ALIVE_SYMBOL = "#"
"""Text glyph for a live cell."""

DEAD_SYMBOL = "."
"""Text glyph for a dead cell."""

CELL_SEPARATOR = " "
"""Separator placed between cells of one rendered row."""

ANSI_CLEAR_SCREEN = "\x1b[2J"
"""Terminal control sequence that clears the screen."""

ANSI_CURSOR_HOME = "\x1b[;H"
"""Terminal control sequence that moves the cursor to the top-left corner."""
