"""Simulation driver and Parquet persistence."""

from rule_based_pcg.simulation.engine import run_simulation
from rule_based_pcg.simulation.persistence import (
    flush_cell_columns,
    load_grid_history,
    write_iteration_log,
    write_run_config,
)

__all__ = [
    "flush_cell_columns",
    "load_grid_history",
    "run_simulation",
    "write_iteration_log",
    "write_run_config",
]
