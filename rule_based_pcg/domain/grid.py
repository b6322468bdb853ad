"""Immutable boolean occupancy grid shared by both generators.

Cells are addressed as ``(x, y)`` where ``x`` is the row index in
``[0, height)`` and ``y`` the column index in ``[0, width)``. A Grid never
changes after construction: generators copy the cells into a writable
buffer, edit the buffer, and wrap the result in a new Grid.
"""

from __future__ import annotations

from collections.abc import Sequence
from random import Random

import numpy as np


class Grid:
    """Fixed-size 2D field of occupied (True) / empty (False) cells."""

    __slots__ = ("_cells",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cells: np.ndarray) -> None:
        array = np.array(cells, dtype=bool, copy=True)
        if array.ndim != 2:
            raise ValueError("grid cells must be a 2D array")
        if array.shape[0] < 1 or array.shape[1] < 1:
            raise ValueError("grid dimensions must be >= 1")
        array.flags.writeable = False
        self._cells = array

    @classmethod
    def empty(cls, width: int, height: int) -> Grid:
        """Return an all-empty grid of ``height`` rows by ``width`` columns."""
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        return cls(np.zeros((height, width), dtype=bool))

    @classmethod
    def filled(cls, width: int, height: int) -> Grid:
        """Return an all-occupied grid."""
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        return cls(np.ones((height, width), dtype=bool))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | bool]]) -> Grid:
        """Build a grid from nested 0/1 rows; all rows must share one length."""
        if not rows or not rows[0]:
            raise ValueError("grid dimensions must be >= 1")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("every row must have exactly width cells")
        return cls(np.array([[bool(cell) for cell in row] for row in rows], dtype=bool))

    @classmethod
    def random_fill(
        cls, width: int, height: int, fill_probability: float, rng: Random
    ) -> Grid:
        """Occupy each cell independently with probability ``fill_probability``."""
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        rows = [[rng.random() < fill_probability for _ in range(width)] for _ in range(height)]
        return cls(np.array(rows, dtype=bool))

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        """``(height, width)``, matching the numpy layout of :attr:`cells`."""
        return self.height, self.width

    @property
    def cells(self) -> np.ndarray:
        """Read-only ``(height, width)`` bool array."""
        return self._cells

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.height and 0 <= y < self.width

    def is_occupied(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.height}x{self.width} grid")
        return bool(self._cells[x, y])

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def occupied_cells(self) -> list[tuple[int, int]]:
        """Return occupied ``(x, y)`` pairs in row-major order."""
        xs, ys = np.nonzero(self._cells)
        return [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)]

    def writable_cells(self) -> np.ndarray:
        """Return a mutable copy of the cells for use as an output buffer."""
        return self._cells.copy()

    def to_rows(self) -> list[list[int]]:
        return self._cells.astype(int).tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, occupied={self.occupied_count()})"
