"""Tests for rule_based_pcg.metrics.spatial module."""

from __future__ import annotations

import pytest

from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.metrics.spatial import (
    changed_cell_count,
    compute_grid_metrics,
    largest_region_fraction,
    occupancy_ratio,
    region_count,
    region_sizes,
)

TWO_ROOMS = Grid.from_rows(
    [
        [1, 1, 0, 0, 0],
        [1, 1, 0, 1, 0],
        [0, 0, 0, 1, 0],
        [0, 0, 0, 1, 1],
    ]
)


class TestOccupancyRatio:
    def test_empty(self) -> None:
        assert occupancy_ratio(Grid.empty(4, 3)) == 0.0

    def test_filled(self) -> None:
        assert occupancy_ratio(Grid.filled(4, 3)) == 1.0

    def test_partial(self) -> None:
        assert occupancy_ratio(TWO_ROOMS) == pytest.approx(8 / 20)


class TestRegions:
    def test_sizes_largest_first(self) -> None:
        assert region_sizes(TWO_ROOMS) == [4, 4]

    def test_diagonal_cells_are_separate_regions(self) -> None:
        grid = Grid.from_rows([[1, 0], [0, 1]])
        assert region_count(grid) == 2

    def test_empty_regions(self) -> None:
        assert region_sizes(TWO_ROOMS, occupied=False) == [12]

    def test_empty_grid_has_no_occupied_regions(self) -> None:
        grid = Grid.empty(3, 3)
        assert region_count(grid) == 0
        assert largest_region_fraction(grid) == 0.0

    def test_largest_region_fraction(self) -> None:
        grid = Grid.from_rows([[1, 1, 1, 0, 1]])
        assert largest_region_fraction(grid) == pytest.approx(0.75)


class TestChangedCellCount:
    def test_identical_grids(self) -> None:
        assert changed_cell_count(TWO_ROOMS, TWO_ROOMS) == 0

    def test_counts_both_directions(self) -> None:
        before = Grid.from_rows([[1, 0, 0]])
        after = Grid.from_rows([[0, 1, 0]])
        assert changed_cell_count(before, after) == 2

    def test_shape_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="grid shapes differ"):
            changed_cell_count(Grid.empty(3, 2), Grid.empty(2, 3))


class TestComputeGridMetrics:
    def test_keys_and_values(self) -> None:
        metrics = compute_grid_metrics(TWO_ROOMS)
        assert metrics == {
            "occupied_cells": 8,
            "occupancy_ratio": pytest.approx(0.4),
            "region_count": 2,
            "largest_region_fraction": pytest.approx(0.5),
            "changed_cells": 0,
        }

    def test_changed_cells_against_previous(self) -> None:
        metrics = compute_grid_metrics(TWO_ROOMS, previous=Grid.empty(5, 4))
        assert metrics["changed_cells"] == 8
