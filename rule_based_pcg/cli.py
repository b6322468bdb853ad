"""CLI entrypoint for map generation runs.

This module owns CLI argument parsing, logging setup and output. All
generation logic lives in the extracted modules:

- ``rule_based_pcg.config``                – configuration dataclasses
- ``rule_based_pcg.generators``            – CA step and drunk-agent walk
- ``rule_based_pcg.simulation.engine``     – ``run_simulation`` driver
- ``rule_based_pcg.viz``                   – text and PNG rendering
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rule_based_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    BASE_ROOM_PROBABILITY,
    BASE_TURN_PROBABILITY,
    CA_RADIUS,
    CA_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_ITERATIONS,
    ROOM_HEIGHT,
    ROOM_PROBABILITY_INCREMENT,
    ROOM_WIDTH,
    TURN_PROBABILITY_INCREMENT,
)
from rule_based_pcg.config.types import (
    CellularAutomataConfig,
    DrunkAgentConfig,
    GridConfig,
    IterationRecord,
    SimulationConfig,
    StepOrder,
)
from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.simulation.engine import run_simulation
from rule_based_pcg.viz.render import render_filmstrip
from rule_based_pcg.viz.text import print_map
from rule_based_pcg.viz.theme import REGISTERED_THEMES, get_theme

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_order(raw_order: str) -> StepOrder:
    """Parse step order from CLI/config."""
    try:
        return StepOrder(raw_order)
    except ValueError as exc:
        valid = ", ".join(order.value for order in StepOrder)
        raise ValueError(f"order must be one of {valid}") from exc


def _parse_position(raw_position: str) -> AgentState:
    """Parse an agent position formatted as ``X,Y`` (row, column)."""
    tokens = [token.strip() for token in raw_position.split(",")]
    if len(tokens) != 2:
        raise ValueError("agent-start must use X,Y format")
    try:
        return AgentState(x=int(tokens[0]), y=int(tokens[1]))
    except ValueError as exc:
        raise ValueError("agent-start must use integer X,Y values") from exc


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(cli_val: int | None, key: str, file_cfg: dict[str, object]) -> int | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    """CLI > file > default resolution for float values."""
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(cli_val: object, key: str, file_cfg: dict[str, object]) -> str | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_str(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate a map with cellular automata and a drunk agent"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument(
        "--order",
        type=str,
        choices=[order.value for order in StepOrder],
        default=None,
    )
    parser.add_argument("--ca-passes", type=int, default=None)
    parser.add_argument("--agent-passes", type=int, default=None)
    parser.add_argument("--radius", type=int, default=None, help="CA neighbor-window radius")
    parser.add_argument("--threshold", type=float, default=None, help="CA occupancy threshold")
    parser.add_argument("--walks", type=int, default=None)
    parser.add_argument("--steps-per-walk", type=int, default=None)
    parser.add_argument("--room-width", type=int, default=None)
    parser.add_argument("--room-height", type=int, default=None)
    parser.add_argument("--room-probability", type=float, default=None)
    parser.add_argument("--room-probability-increment", type=float, default=None)
    parser.add_argument("--turn-probability", type=float, default=None)
    parser.add_argument("--turn-probability-increment", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--fill-probability",
        type=float,
        default=None,
        help="Probability that each initial cell starts occupied",
    )
    parser.add_argument("--agent-start", type=str, default=None, help="Agent start as X,Y")
    parser.add_argument("--out-dir", type=Path, default=None, help="Write Parquet logs here")
    parser.add_argument("--render", type=Path, default=None, help="Write a PNG filmstrip here")
    parser.add_argument("--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None)
    parser.add_argument("--print-maps", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--log-level", type=str, choices=LOG_LEVELS, default=None)
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve every setting (CLI > file > default) into a SimulationConfig."""
    agent_start_raw = _get_optional_str(args.agent_start, "agent_start", file_cfg)
    return SimulationConfig(
        grid=GridConfig(
            width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
            height=_get_int(args.height, "height", file_cfg, GRID_HEIGHT),
        ),
        cellular_automata=CellularAutomataConfig(
            radius=_get_int(args.radius, "radius", file_cfg, CA_RADIUS),
            threshold=_get_float(args.threshold, "threshold", file_cfg, CA_THRESHOLD),
        ),
        drunk_agent=DrunkAgentConfig(
            walks=_get_int(args.walks, "walks", file_cfg, AGENT_WALKS),
            steps_per_walk=_get_int(
                args.steps_per_walk, "steps_per_walk", file_cfg, AGENT_STEPS_PER_WALK
            ),
            room_width=_get_int(args.room_width, "room_width", file_cfg, ROOM_WIDTH),
            room_height=_get_int(args.room_height, "room_height", file_cfg, ROOM_HEIGHT),
            base_room_probability=_get_float(
                args.room_probability, "room_probability", file_cfg, BASE_ROOM_PROBABILITY
            ),
            room_probability_increment=_get_float(
                args.room_probability_increment,
                "room_probability_increment",
                file_cfg,
                ROOM_PROBABILITY_INCREMENT,
            ),
            base_turn_probability=_get_float(
                args.turn_probability, "turn_probability", file_cfg, BASE_TURN_PROBABILITY
            ),
            turn_probability_increment=_get_float(
                args.turn_probability_increment,
                "turn_probability_increment",
                file_cfg,
                TURN_PROBABILITY_INCREMENT,
            ),
        ),
        iterations=_get_int(args.iterations, "iterations", file_cfg, NUM_ITERATIONS),
        order=_parse_order(
            _get_str(args.order, "order", file_cfg, StepOrder.CA_THEN_AGENT.value)
        ),
        ca_passes=_get_int(args.ca_passes, "ca_passes", file_cfg, 1),
        agent_passes=_get_int(args.agent_passes, "agent_passes", file_cfg, 1),
        seed=_get_optional_int(args.seed, "seed", file_cfg),
        initial_fill_probability=_get_float(
            args.fill_probability, "fill_probability", file_cfg, 0.0
        ),
        agent_start=None if agent_start_raw is None else _parse_position(agent_start_raw),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for map generation.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        print_maps = _get_bool(args.print_maps, "print_maps", file_cfg, True)
        out_dir_raw = _get_optional_str(args.out_dir, "out_dir", file_cfg)
        render_raw = _get_optional_str(args.render, "render", file_cfg)
        theme = get_theme(_get_str(args.theme, "theme", file_cfg, "default"))
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if print_maps:
        print("--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---")

    def _on_iteration(record: IterationRecord) -> None:
        if not print_maps:
            return
        if record.iteration == 0:
            print("\nInitial map state:")
        else:
            print(f"\n--- Iteration {record.iteration} ---")
        print_map(record.grid)

    out_dir = None if out_dir_raw is None else Path(out_dir_raw)
    result = run_simulation(config, out_dir=out_dir, on_iteration=_on_iteration)

    if render_raw is not None:
        render_path = render_filmstrip(result.history, Path(render_raw), theme=theme)
        logger.info("Rendered filmstrip to %s", render_path)

    if print_maps:
        print("\n--- Simulation Finished ---")

    final_metrics = result.history[-1].metrics
    summary = {
        "width": config.grid.width,
        "height": config.grid.height,
        "iterations": config.iterations,
        "order": config.order.value,
        "seed": config.seed,
        "occupied_cells": final_metrics["occupied_cells"],
        "occupancy_ratio": final_metrics["occupancy_ratio"],
        "region_count": final_metrics["region_count"],
        "rooms_stamped": sum(record.rooms_stamped for record in result.history),
        "agent": list(result.final_agent.position),
        "out_dir": None if out_dir is None else str(out_dir),
        "render": render_raw,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
