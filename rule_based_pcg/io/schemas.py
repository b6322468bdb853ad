"""Parquet schema definitions for simulation artifacts.

The Arrow schemas used for persisting per-iteration cell occupancy and
per-iteration map metrics are centralised here so that the writer and the
loaders work against the same column contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RUN_CONFIG_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Simulation log schemas
# ---------------------------------------------------------------------------

CELL_LOG_SCHEMA = pa.schema(
    [
        ("iteration", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
    ]
)

ITERATION_LOG_SCHEMA = pa.schema(
    [
        ("iteration", pa.int64()),
        ("stage", pa.string()),
        ("agent_x", pa.int64()),
        ("agent_y", pa.int64()),
        ("occupied_cells", pa.int64()),
        ("occupancy_ratio", pa.float64()),
        ("region_count", pa.int64()),
        ("largest_region_fraction", pa.float64()),
        ("changed_cells", pa.int64()),
        ("rooms_stamped", pa.int64()),
    ]
)

ITERATION_METRIC_NAMES = [
    "occupied_cells",
    "occupancy_ratio",
    "region_count",
    "largest_region_fraction",
    "changed_cells",
]
