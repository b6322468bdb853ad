"""Parquet persistence helpers for the cell log and iteration metrics."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from rule_based_pcg.config.types import IterationRecord, SimulationConfig
from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.io.paths import cell_log_path, run_config_path
from rule_based_pcg.io.schemas import (
    CELL_LOG_SCHEMA,
    ITERATION_LOG_SCHEMA,
    ITERATION_METRIC_NAMES,
    RUN_CONFIG_SCHEMA_VERSION,
)


def new_cell_columns() -> dict[str, list[int]]:
    return {"iteration": [], "x": [], "y": []}


def append_grid_cells(cell_columns: dict[str, list[int]], iteration: int, grid: Grid) -> None:
    """Buffer one row per occupied cell of ``grid``."""
    for x, y in grid.occupied_cells():
        cell_columns["iteration"].append(iteration)
        cell_columns["x"].append(x)
        cell_columns["y"].append(y)


def flush_cell_columns(
    cell_columns: dict[str, list[int]],
    path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated cell rows to Parquet and clear in-memory buffers."""
    if not cell_columns["iteration"]:
        return writer
    table = pa.Table.from_pydict(cell_columns, schema=CELL_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(path, CELL_LOG_SCHEMA)
    writer.write_table(table)
    for values in cell_columns.values():
        values.clear()
    return writer


def write_iteration_log(records: list[IterationRecord], path: Path) -> None:
    """Persist one metrics row per recorded iteration."""
    columns: dict[str, list[object]] = {field.name: [] for field in ITERATION_LOG_SCHEMA}
    for record in records:
        columns["iteration"].append(record.iteration)
        columns["stage"].append(record.stage.value)
        columns["agent_x"].append(record.agent.x)
        columns["agent_y"].append(record.agent.y)
        columns["rooms_stamped"].append(record.rooms_stamped)
        for name in ITERATION_METRIC_NAMES:
            columns[name].append(record.metrics[name])
    pq.write_table(pa.Table.from_pydict(columns, schema=ITERATION_LOG_SCHEMA), path)


def write_run_config(config: SimulationConfig, seed: int | None, out_dir: Path) -> Path:
    """Write the resolved configuration next to the logs for reproducibility."""
    payload = {
        "schema_version": RUN_CONFIG_SCHEMA_VERSION,
        "seed": seed,
        "config": config.to_dict(),
    }
    path = run_config_path(out_dir)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return path


def load_grid_history(out_dir: Path, width: int, height: int) -> dict[int, Grid]:
    """Rebuild the grid of every recorded iteration from the cell log.

    Iterations whose grid had no occupied cells have no rows in the log and
    are therefore absent from the result.
    """
    table = pq.read_table(cell_log_path(out_dir))
    iterations = table.column("iteration").to_pylist()
    xs = table.column("x").to_pylist()
    ys = table.column("y").to_pylist()
    buffers: dict[int, np.ndarray] = {}
    for iteration, x, y in zip(iterations, xs, ys, strict=True):
        if not (0 <= x < height and 0 <= y < width):
            raise ValueError(f"cell ({x}, {y}) is outside a {height}x{width} grid")
        cells = buffers.get(iteration)
        if cells is None:
            cells = buffers[iteration] = np.zeros((height, width), dtype=bool)
        cells[x, y] = True
    return {iteration: Grid(cells) for iteration, cells in sorted(buffers.items())}
