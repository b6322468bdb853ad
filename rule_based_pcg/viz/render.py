"""Matplotlib-based rendering of occupancy grids and simulation filmstrips."""

from __future__ import annotations

import math
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402

from rule_based_pcg.config.types import IterationRecord  # noqa: E402
from rule_based_pcg.domain.agent import AgentState  # noqa: E402
from rule_based_pcg.domain.grid import Grid  # noqa: E402
from rule_based_pcg.io.paths import resolve_within_base  # noqa: E402
from rule_based_pcg.viz.theme import DEFAULT_THEME, Theme  # noqa: E402


def _occupancy_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap: empty (0) and occupied (1)."""
    cmap = ListedColormap([theme.empty_cell_color, theme.occupied_cell_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _draw_grid(
    ax: plt.Axes,
    grid: Grid,
    agent: AgentState | None = None,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines and an optional agent marker."""
    cmap, norm = _occupancy_cmap(theme)
    img = ax.imshow(grid.cells.astype(int), cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for col in range(w + 1):
        ax.axvline(col - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for row in range(h + 1):
        ax.axhline(row - 0.5, color=theme.grid_line_color, linewidth=0.5)
    if agent is not None and grid.in_bounds(agent.x, agent.y):
        # imshow puts columns on the horizontal axis
        ax.plot(agent.y, agent.x, marker="o", color=theme.agent_color, markersize=6)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def _check_output_path(output_path: Path, base_dir: Path | None) -> Path:
    if base_dir is not None:
        output_path = resolve_within_base(Path(output_path), Path(base_dir))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return output_path


def render_grid(
    grid: Grid,
    output_path: Path,
    agent: AgentState | None = None,
    title: str | None = None,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> Path:
    """Render a single grid to a PNG file and return the written path."""
    output_path = _check_output_path(output_path, base_dir)
    fig, ax = plt.subplots(figsize=(max(2.0, grid.width * 0.3), max(2.0, grid.height * 0.3)))
    try:
        _draw_grid(ax, grid, agent=agent, theme=theme)
        if title:
            ax.set_title(title, fontsize=theme.title_fontsize)
        fig.tight_layout()
        fig.savefig(output_path, dpi=dpi)
    finally:
        plt.close(fig)
    return output_path


def render_filmstrip(
    records: Sequence[IterationRecord],
    output_path: Path,
    columns: int = 3,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 100,
) -> Path:
    """Render every recorded iteration as one panel of a PNG grid of panels."""
    if not records:
        raise ValueError("records must not be empty")
    if columns < 1:
        raise ValueError("columns must be >= 1")
    output_path = _check_output_path(output_path, base_dir)

    n_cols = min(columns, len(records))
    n_rows = math.ceil(len(records) / n_cols)
    height, width = records[0].grid.shape
    panel_w = max(2.0, width * 0.25)
    panel_h = max(1.5, height * 0.25) + 0.4
    fig, axes = plt.subplots(
        n_rows, n_cols, figsize=(panel_w * n_cols, panel_h * n_rows), squeeze=False
    )
    try:
        flat_axes = np.asarray(axes).ravel()
        for ax, record in zip(flat_axes, records, strict=False):
            _draw_grid(ax, record.grid, agent=record.agent, theme=theme)
            ax.set_title(
                f"#{record.iteration} {record.stage.value} "
                f"({record.metrics['occupied_cells']} occ.)",
                fontsize=theme.title_fontsize,
            )
        for ax in flat_axes[len(records) :]:
            ax.axis("off")
        fig.tight_layout()
        fig.savefig(output_path, dpi=dpi)
    finally:
        plt.close(fig)
    return output_path
