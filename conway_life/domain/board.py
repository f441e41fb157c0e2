"""Immutable Game of Life boards under the fixed B3/S23 rule.

A single ``Board`` type covers both variants. The boundary strategy decides
which coordinates exist: ``Unbounded`` admits every cell, ``Rectangle`` admits
only ``[0, width) x [0, height)`` and so gives hard walls (no wrap-around).
Two boards are equal iff their boundaries and alive-cell sets are equal, so a
finite board never equals an infinite one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from conway_life.config.constants import BIRTH_COUNTS, RENDER_MARGIN, SURVIVE_COUNTS

Cell = tuple[int, int]
"""An ``(x, y)`` grid coordinate."""

MOORE_OFFSETS: tuple[Cell, ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)
"""Offsets of the eight cells at Chebyshev distance 1."""


@dataclass(frozen=True)
class Unbounded:
    """Boundary of an infinite board: every coordinate is in bounds."""

    def contains(self, cell: Cell) -> bool:
        return True

    def window(self, cells: frozenset[Cell]) -> tuple[range, range]:
        """Bounding box of ``cells`` grown by one dead cell on every side."""
        if not cells:
            raise ValueError("an empty infinite board has no render window")
        xs = [x for x, _ in cells]
        ys = [y for _, y in cells]
        return (
            range(min(xs) - RENDER_MARGIN, max(xs) + RENDER_MARGIN + 1),
            range(min(ys) - RENDER_MARGIN, max(ys) + RENDER_MARGIN + 1),
        )


@dataclass(frozen=True)
class Rectangle:
    """Boundary of a finite board: ``0 <= x < width`` and ``0 <= y < height``."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("board dimensions must be >= 1")

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def window(self, cells: frozenset[Cell]) -> tuple[range, range]:
        return range(self.width), range(self.height)


Boundary = Unbounded | Rectangle


@dataclass(frozen=True)
class Board:
    """One generation: the set of alive cells within a boundary."""

    cells: frozenset[Cell]
    boundary: Boundary = Unbounded()

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", frozenset(self.cells))
        outside = [cell for cell in self.cells if not self.boundary.contains(cell)]
        if outside:
            raise ValueError(f"cells outside the board: {sorted(outside)}")

    @classmethod
    def infinite(cls, cells: Iterable[Cell] = ()) -> Board:
        return cls(frozenset(cells), Unbounded())

    @classmethod
    def finite(cls, width: int, height: int, cells: Iterable[Cell] = ()) -> Board:
        return cls(frozenset(cells), Rectangle(width, height))

    @property
    def is_finite(self) -> bool:
        return isinstance(self.boundary, Rectangle)

    @property
    def population(self) -> int:
        return len(self.cells)

    def is_empty(self) -> bool:
        return not self.cells

    def is_alive(self, cell: Cell) -> bool:
        return cell in self.cells

    def is_dead(self, cell: Cell) -> bool:
        return not self.is_alive(cell)

    def neighbours(self, cell: Cell) -> frozenset[Cell]:
        """In-bounds Moore neighbourhood of ``cell`` (the cell itself excluded)."""
        x, y = cell
        return frozenset(
            neighbour
            for neighbour in ((x + dx, y + dy) for dx, dy in MOORE_OFFSETS)
            if self.boundary.contains(neighbour)
        )

    def alive_neighbour_count(self, cell: Cell) -> int:
        return len(self.neighbours(cell) & self.cells)

    def lives_next(self, cell: Cell) -> bool:
        """Apply B3/S23 to ``cell`` against the current generation."""
        count = self.alive_neighbour_count(cell)
        if self.is_alive(cell):
            return count in SURVIVE_COUNTS
        return count in BIRTH_COUNTS

    def tick(self) -> Board:
        """Return the next generation; the receiver is left untouched.

        Only cells that neighbour at least one alive cell can be alive next,
        so the candidates are the union of every alive cell's neighbourhood.
        """
        candidates: set[Cell] = set()
        for cell in self.cells:
            candidates |= self.neighbours(cell)
        survivors = frozenset(cell for cell in candidates if self.lives_next(cell))
        return Board(survivors, self.boundary)

    def bounds(self) -> tuple[range, range]:
        """Render window as ``(x_range, y_range)``.

        Raises ``ValueError`` for an empty infinite board.
        """
        return self.boundary.window(self.cells)

    def to_array(self) -> np.ndarray:
        """Boolean occupancy grid of the render window, indexed ``[y, x]``.

        An empty infinite board yields a ``(0, 0)`` array.
        """
        if self.is_empty() and not self.is_finite:
            return np.zeros((0, 0), dtype=bool)
        x_range, y_range = self.bounds()
        grid = np.zeros((len(y_range), len(x_range)), dtype=bool)
        for x, y in self.cells:
            grid[y - y_range.start, x - x_range.start] = True
        return grid

    def __str__(self) -> str:
        from conway_life.viz.render import render_board

        return render_board(self)
