"""Map metrics computed per driver iteration."""

from rule_based_pcg.metrics.spatial import (
    changed_cell_count,
    compute_grid_metrics,
    largest_region_fraction,
    occupancy_ratio,
    region_count,
    region_sizes,
)

__all__ = [
    "changed_cell_count",
    "compute_grid_metrics",
    "largest_region_fraction",
    "occupancy_ratio",
    "region_count",
    "region_sizes",
]
