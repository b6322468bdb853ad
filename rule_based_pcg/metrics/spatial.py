"""Spatial map metrics: occupancy, 4-connected regions, cell churn."""

from __future__ import annotations

import networkx as nx
import numpy as np

from rule_based_pcg.domain.grid import Grid


def occupancy_ratio(grid: Grid) -> float:
    """Fraction of cells that are occupied, in [0, 1]."""
    return grid.occupied_count() / (grid.width * grid.height)


def _region_graph(grid: Grid, occupied: bool) -> nx.Graph:
    """4-neighborhood lattice restricted to cells whose state equals ``occupied``."""
    lattice = nx.grid_2d_graph(grid.height, grid.width)
    keep = [(x, y) for x, y in lattice.nodes if bool(grid.cells[x, y]) == occupied]
    return lattice.subgraph(keep)


def region_sizes(grid: Grid, occupied: bool = True) -> list[int]:
    """Sizes of the 4-connected regions of matching cells, largest first."""
    graph = _region_graph(grid, occupied)
    return sorted((len(component) for component in nx.connected_components(graph)), reverse=True)


def region_count(grid: Grid, occupied: bool = True) -> int:
    """Number of 4-connected regions of occupied (or empty) cells."""
    return len(region_sizes(grid, occupied))


def largest_region_fraction(grid: Grid, occupied: bool = True) -> float:
    """Share of matching cells that belong to the largest region.

    Returns 0.0 when no cell matches.
    """
    sizes = region_sizes(grid, occupied)
    if not sizes:
        return 0.0
    return sizes[0] / sum(sizes)


def changed_cell_count(before: Grid, after: Grid) -> int:
    """Number of cells whose state differs between two same-sized grids."""
    if before.shape != after.shape:
        raise ValueError(f"grid shapes differ: {before.shape} vs {after.shape}")
    return int(np.count_nonzero(before.cells != after.cells))


def compute_grid_metrics(grid: Grid, previous: Grid | None = None) -> dict[str, float | int]:
    """Compute the per-iteration metric values recorded by the simulation driver."""
    return {
        "occupied_cells": grid.occupied_count(),
        "occupancy_ratio": occupancy_ratio(grid),
        "region_count": region_count(grid),
        "largest_region_fraction": largest_region_fraction(grid),
        "changed_cells": 0 if previous is None else changed_cell_count(previous, grid),
    }
