"""Synchronous cellular-automata smoothing pass.

Each cell's new state depends only on the pre-step occupancy of the square
window of half-width ``radius`` around it. Window cells that fall outside
the grid count as occupied, which seals the map edges over repeated passes.
The pass reads from a padded copy of the input and writes a separate result
buffer, so no cell ever observes an already-updated neighbor.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from rule_based_pcg.config.types import CellularAutomataConfig
from rule_based_pcg.domain.grid import Grid

logger = logging.getLogger(__name__)


def neighborhood_counts(grid: Grid, radius: int) -> np.ndarray:
    """Return the occupied count of every cell's ``(2R+1)^2`` window.

    The window includes the cell itself; out-of-grid positions count as 1.
    """
    if radius < 0:
        raise ValueError("radius must be >= 0")
    window = 2 * radius + 1
    padded = np.pad(grid.cells, radius, mode="constant", constant_values=True)
    windows = sliding_window_view(padded, (window, window))
    return windows.sum(axis=(-2, -1), dtype=np.int64)


def cellular_automata_step(grid: Grid, radius: int, threshold: float) -> Grid:
    """Apply one CA pass and return the new grid.

    A cell becomes occupied iff ``count / (2R+1)^2 >= threshold``. The
    threshold is not range-checked: 0 fills the grid, anything above 1
    empties it.
    """
    counts = neighborhood_counts(grid, radius)
    total = (2 * radius + 1) ** 2
    ratio = counts / total
    return Grid(ratio >= threshold)


def apply_cellular_automata(grid: Grid, config: CellularAutomataConfig, passes: int = 1) -> Grid:
    """Run ``passes`` consecutive CA steps using ``config``."""
    if passes < 0:
        raise ValueError("passes must be >= 0")
    for _ in range(passes):
        before = grid.occupied_count()
        grid = cellular_automata_step(grid, config.radius, config.threshold)
        logger.debug(
            "CA pass (radius=%s, threshold=%s): occupied %s -> %s",
            config.radius,
            config.threshold,
            before,
            grid.occupied_count(),
        )
    return grid
