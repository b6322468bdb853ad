"""Console rendering of occupancy grids."""

from __future__ import annotations

import sys
from typing import TextIO

from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.domain.grid import Grid

MAP_HEADER = "--- Current Map ---"
MAP_FOOTER = "-------------------"


def format_grid(
    grid: Grid,
    agent: AgentState | None = None,
    occupied: str = "1",
    empty: str = "0",
    agent_marker: str = "A",
) -> str:
    """Return the grid as space-separated cell symbols, one row per line.

    When ``agent`` is given and inside the grid, its cell shows ``agent_marker``.
    """
    lines: list[str] = []
    for x, row in enumerate(grid.to_rows()):
        symbols = [occupied if cell else empty for cell in row]
        if agent is not None and agent.x == x and 0 <= agent.y < grid.width:
            symbols[agent.y] = agent_marker
        lines.append(" ".join(symbols) + " ")
    return "\n".join(lines)


def print_map(
    grid: Grid,
    stream: TextIO | None = None,
    agent: AgentState | None = None,
) -> None:
    """Print the grid between the standard header and footer lines."""
    out = stream if stream is not None else sys.stdout
    print(MAP_HEADER, file=out)
    print(format_grid(grid, agent=agent), file=out)
    print(MAP_FOOTER, file=out)
