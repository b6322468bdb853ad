"""Stochastic "drunk agent" path and room carver.

One call performs ``walks`` walks of ``steps_per_walk`` steps each. The
agent marks every cell it stands on, keeps its heading until a random turn
fires, and bounces to a random heading when the next cell would leave the
grid. After each walk it may stamp a rectangular room around itself.

Both the turn and the room probability escalate by a fixed increment every
time the event does not fire and drop back to their base value when it
does, so long straight runs and long room-less stretches become
increasingly unlikely. A wall bounce neither consumes nor escalates the turn
probability.

Heading and both probabilities are reset at the start of every call; only
the agent position carries over, returned explicitly in :class:`WalkResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random

import numpy as np

from rule_based_pcg.config.types import DrunkAgentConfig
from rule_based_pcg.domain.agent import DEFAULT_HEADING, AgentState
from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.generators.rng import random_heading

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkResult:
    """Output of one drunk-agent call."""

    grid: Grid
    agent: AgentState
    rooms: tuple[tuple[int, int], ...] = field(default=())
    """Agent positions at which a room was stamped, in stamping order."""


def room_bounds(
    center: AgentState, room_width: int, room_height: int
) -> tuple[range, range]:
    """Return the unclipped row and column ranges of a room centred on ``center``.

    Odd sizes are exactly centred; for even sizes the extra row/column lies
    before the centre.
    """
    row_start = center.x - room_height // 2
    col_start = center.y - room_width // 2
    return range(row_start, row_start + room_height), range(col_start, col_start + room_width)


def stamp_room(cells: np.ndarray, center: AgentState, room_width: int, room_height: int) -> int:
    """Occupy the in-grid part of a room in ``cells``; return the cells marked."""
    height, width = cells.shape
    rows, cols = room_bounds(center, room_width, room_height)
    row_lo, row_hi = max(rows.start, 0), min(rows.stop, height)
    col_lo, col_hi = max(cols.start, 0), min(cols.stop, width)
    if row_lo >= row_hi or col_lo >= col_hi:
        return 0
    cells[row_lo:row_hi, col_lo:col_hi] = True
    return (row_hi - row_lo) * (col_hi - col_lo)


def drunk_agent_walk(
    grid: Grid, config: DrunkAgentConfig, agent: AgentState, rng: Random
) -> WalkResult:
    """Run one drunk-agent call over ``grid`` starting from ``agent``.

    The returned grid is ``grid`` plus every cell the agent marked or a room
    covered; no cell is ever cleared. Positions and room cells outside the
    grid are skipped silently.
    """
    cells = grid.writable_cells()
    height, width = cells.shape
    x, y = agent.x, agent.y
    dx, dy = DEFAULT_HEADING
    turn_probability = config.base_turn_probability
    room_probability = config.base_room_probability
    rooms: list[tuple[int, int]] = []

    for _ in range(config.walks):
        for _ in range(config.steps_per_walk):
            if 0 <= x < height and 0 <= y < width:
                cells[x, y] = True

            next_x, next_y = x + dx, y + dy
            if not (0 <= next_x < height and 0 <= next_y < width):
                dx, dy = random_heading(rng)
                continue
            x, y = next_x, next_y

            if rng.random() < turn_probability:
                dx, dy = random_heading(rng)
                turn_probability = config.base_turn_probability
            else:
                turn_probability += config.turn_probability_increment

        if rng.random() < room_probability:
            stamp_room(cells, AgentState(x, y), config.room_width, config.room_height)
            rooms.append((x, y))
            room_probability = config.base_room_probability
        else:
            room_probability += config.room_probability_increment

    result = WalkResult(grid=Grid(cells), agent=AgentState(x, y), rooms=tuple(rooms))
    logger.debug(
        "Drunk agent %s -> %s: %s rooms, occupied %s -> %s",
        agent.position,
        result.agent.position,
        len(rooms),
        grid.occupied_count(),
        result.grid.occupied_count(),
    )
    return result


def apply_drunk_agent(
    grid: Grid,
    config: DrunkAgentConfig,
    agent: AgentState,
    rng: Random,
    passes: int = 1,
) -> WalkResult:
    """Run ``passes`` consecutive calls, threading grid and agent through each."""
    if passes < 0:
        raise ValueError("passes must be >= 0")
    rooms: list[tuple[int, int]] = []
    for _ in range(passes):
        result = drunk_agent_walk(grid, config, agent, rng)
        grid, agent = result.grid, result.agent
        rooms.extend(result.rooms)
    return WalkResult(grid=grid, agent=agent, rooms=tuple(rooms))
