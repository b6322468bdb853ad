"""Simulation driver: alternate the CA and drunk-agent generators over iterations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from rule_based_pcg.config.constants import FLUSH_THRESHOLD
from rule_based_pcg.config.types import (
    GenerationStage,
    IterationRecord,
    SimulationConfig,
    SimulationResult,
    StepOrder,
)
from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.generators.cellular_automata import apply_cellular_automata
from rule_based_pcg.generators.drunk_agent import apply_drunk_agent
from rule_based_pcg.generators.rng import get_rng
from rule_based_pcg.io.paths import cell_log_path, iteration_log_path, logs_dir
from rule_based_pcg.io.schemas import CELL_LOG_SCHEMA
from rule_based_pcg.metrics.spatial import compute_grid_metrics
from rule_based_pcg.simulation.persistence import (
    append_grid_cells,
    flush_cell_columns,
    new_cell_columns,
    write_iteration_log,
    write_run_config,
)

logger = logging.getLogger(__name__)

IterationCallback = Callable[[IterationRecord], None]


def _stage_sequence(config: SimulationConfig) -> list[tuple[GenerationStage, int]]:
    """Stages run in one iteration, in order, with their pass counts (zero passes dropped)."""
    ca = (GenerationStage.CELLULAR_AUTOMATA, config.ca_passes)
    agent = (GenerationStage.DRUNK_AGENT, config.agent_passes)
    ordered = [ca, agent] if config.order is StepOrder.CA_THEN_AGENT else [agent, ca]
    return [(stage, passes) for stage, passes in ordered if passes > 0]


def initial_grid_for(config: SimulationConfig, rng: Random) -> Grid:
    """Build the starting grid: random noise when a fill probability is set, else empty."""
    width, height = config.grid.width, config.grid.height
    if config.initial_fill_probability > 0.0:
        return Grid.random_fill(width, height, config.initial_fill_probability, rng)
    return Grid.empty(width, height)


def run_simulation(
    config: SimulationConfig | None = None,
    *,
    initial_grid: Grid | None = None,
    out_dir: Path | None = None,
    on_iteration: IterationCallback | None = None,
) -> SimulationResult:
    """Run ``config.iterations`` iterations and return every recorded state.

    Each iteration applies the generators in ``config.order``; every call
    receives the previous call's output grid, and the agent position is
    threaded from one drunk-agent call to the next. All randomness, including
    the optional initial noise, comes from one ``random.Random`` seeded with
    ``config.seed``.

    ``on_iteration`` is called with every record as it is produced,
    starting with the initial state (iteration 0).

    When ``out_dir`` is given, the occupied cells and metrics of every
    recorded iteration are written under ``out_dir/logs`` together with
    ``out_dir/run_config.json``.
    """
    config = config or SimulationConfig()
    rng = get_rng(config.seed)

    if initial_grid is not None:
        if (initial_grid.width, initial_grid.height) != (config.grid.width, config.grid.height):
            raise ValueError(
                f"initial_grid is {initial_grid.width}x{initial_grid.height}, "
                f"config expects {config.grid.width}x{config.grid.height}"
            )
        grid = initial_grid
    else:
        grid = initial_grid_for(config, rng)
    agent: AgentState = config.resolved_agent_start()
    stages = _stage_sequence(config)

    cell_writer: pq.ParquetWriter | None = None
    cell_columns = new_cell_columns()
    if out_dir is not None:
        out_dir = Path(out_dir)
        logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    logger.info(
        "Starting %sx%s simulation: %s iterations, order=%s, seed=%s",
        config.grid.width,
        config.grid.height,
        config.iterations,
        config.order.value,
        config.seed,
    )

    history: list[IterationRecord] = []
    try:
        record = IterationRecord(
            iteration=0,
            stage=GenerationStage.INITIAL,
            grid=grid,
            agent=agent,
            metrics=compute_grid_metrics(grid),
        )
        history.append(record)
        if on_iteration is not None:
            on_iteration(record)

        for iteration in range(1, config.iterations + 1):
            previous = grid
            rooms_stamped = 0
            for stage, passes in stages:
                if stage is GenerationStage.CELLULAR_AUTOMATA:
                    grid = apply_cellular_automata(grid, config.cellular_automata, passes)
                else:
                    walk = apply_drunk_agent(grid, config.drunk_agent, agent, rng, passes)
                    grid, agent = walk.grid, walk.agent
                    rooms_stamped += len(walk.rooms)

            record = IterationRecord(
                iteration=iteration,
                stage=stages[-1][0],
                grid=grid,
                agent=agent,
                metrics=compute_grid_metrics(grid, previous),
                rooms_stamped=rooms_stamped,
            )
            history.append(record)
            logger.info(
                "Iteration %s/%s: occupied=%s regions=%s rooms=%s agent=%s",
                iteration,
                config.iterations,
                record.metrics["occupied_cells"],
                record.metrics["region_count"],
                rooms_stamped,
                agent.position,
            )
            if on_iteration is not None:
                on_iteration(record)

        if out_dir is not None:
            for entry in history:
                append_grid_cells(cell_columns, entry.iteration, entry.grid)
                if len(cell_columns["iteration"]) >= FLUSH_THRESHOLD:
                    cell_writer = flush_cell_columns(
                        cell_columns, cell_log_path(out_dir), cell_writer
                    )
            cell_writer = flush_cell_columns(cell_columns, cell_log_path(out_dir), cell_writer)
            if cell_writer is None:
                # every recorded grid was empty
                pq.write_table(CELL_LOG_SCHEMA.empty_table(), cell_log_path(out_dir))
            write_iteration_log(history, iteration_log_path(out_dir))
            write_run_config(config, config.seed, out_dir)
            logger.info("Wrote simulation logs to %s", logs_dir(out_dir))
    finally:
        if cell_writer is not None:
            cell_writer.close()

    return SimulationResult(
        final_grid=grid,
        final_agent=agent,
        history=tuple(history),
        seed=config.seed,
    )
