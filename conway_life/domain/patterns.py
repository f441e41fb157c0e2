"""Named starting patterns and a plain-text pattern reader."""

from __future__ import annotations

from typing import Iterable

from conway_life.config.constants import ALIVE_SYMBOL, DEAD_SYMBOL
from conway_life.domain.board import Cell

SIMPLE: frozenset[Cell] = frozenset({(1, 1)})
"""A lone cell; dies of underpopulation after one tick."""

SQUARE: frozenset[Cell] = frozenset({(4, 4), (4, 5), (5, 4), (5, 5)})
"""2x2 block still life."""

GLIDER: frozenset[Cell] = frozenset({(2, 1), (3, 2), (1, 3), (2, 3), (3, 3)})
"""Moves one cell diagonally (+1, +1) every four ticks."""

BLINKER: frozenset[Cell] = frozenset({(1, 2), (2, 2), (3, 2)})
"""Period-2 oscillator."""

PATTERNS: dict[str, frozenset[Cell]] = {
    "simple": SIMPLE,
    "square": SQUARE,
    "glider": GLIDER,
    "blinker": BLINKER,
}


def parse_pattern(lines: Iterable[str], origin: Cell = (0, 0)) -> frozenset[Cell]:
    """Read rows of ``#``/``.`` glyphs into alive cells.

    Row ``i`` maps to ``y = origin_y + i`` and column ``j`` to
    ``x = origin_x + j``. Spaces between glyphs are ignored so rendered
    boards can be read back.
    """
    ox, oy = origin
    cells: set[Cell] = set()
    for y, line in enumerate(lines):
        glyphs = line.replace(" ", "")
        for x, glyph in enumerate(glyphs):
            if glyph == ALIVE_SYMBOL:
                cells.add((ox + x, oy + y))
            elif glyph != DEAD_SYMBOL:
                raise ValueError(f"unexpected glyph {glyph!r} at row {y}, column {x}")
    return frozenset(cells)
