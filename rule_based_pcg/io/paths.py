"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def cell_log_path(out_dir: Path) -> Path:
    """Return path to the per-iteration occupied-cell Parquet file."""
    return logs_dir(out_dir) / "cell_log.parquet"


def iteration_log_path(out_dir: Path) -> Path:
    """Return path to the per-iteration metrics Parquet file."""
    return logs_dir(out_dir) / "iteration_log.parquet"


def run_config_path(out_dir: Path) -> Path:
    """Return path to the resolved run configuration JSON file."""
    return out_dir / "run_config.json"
