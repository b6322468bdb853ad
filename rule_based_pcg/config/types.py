"""Configuration dataclasses and result containers for map generation runs.

All frozen dataclasses that parameterise the two generators and the
simulation driver live here, together with the immutable records the driver
returns.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum

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
from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.domain.grid import Grid

__all__ = [
    "CellularAutomataConfig",
    "DrunkAgentConfig",
    "GenerationStage",
    "GridConfig",
    "IterationRecord",
    "SimulationConfig",
    "SimulationResult",
    "StepOrder",
]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class StepOrder(Enum):
    """Order in which the driver applies the generators within one iteration."""

    CA_THEN_AGENT = "ca_then_agent"
    AGENT_THEN_CA = "agent_then_ca"


class GenerationStage(Enum):
    """Generator that produced a recorded grid."""

    INITIAL = "initial"
    CELLULAR_AUTOMATA = "cellular_automata"
    DRUNK_AGENT = "drunk_agent"


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


def _check_probability(value: float, name: str) -> None:
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0.0, 1.0]")


@dataclass(frozen=True)
class GridConfig:
    """Fixed grid dimensions for one generation run."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("grid dimensions must be >= 1")


@dataclass(frozen=True)
class CellularAutomataConfig:
    """Neighbor-window radius and occupancy threshold for the CA pass."""

    radius: int = CA_RADIUS
    threshold: float = CA_THRESHOLD
    """Values above 1.0 are accepted and clear the grid."""

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("radius must be >= 0")
        if math.isnan(self.threshold) or self.threshold < 0.0:
            raise ValueError("threshold must be >= 0.0")

    @property
    def window_size(self) -> int:
        """Number of cells in the square neighbor window."""
        return (2 * self.radius + 1) ** 2


@dataclass(frozen=True)
class DrunkAgentConfig:
    """Walk counts, room size and adaptive probabilities for the drunk agent."""

    walks: int = AGENT_WALKS
    steps_per_walk: int = AGENT_STEPS_PER_WALK
    room_width: int = ROOM_WIDTH
    room_height: int = ROOM_HEIGHT
    base_room_probability: float = BASE_ROOM_PROBABILITY
    room_probability_increment: float = ROOM_PROBABILITY_INCREMENT
    base_turn_probability: float = BASE_TURN_PROBABILITY
    turn_probability_increment: float = TURN_PROBABILITY_INCREMENT

    def __post_init__(self) -> None:
        if self.walks < 0:
            raise ValueError("walks must be >= 0")
        if self.steps_per_walk < 0:
            raise ValueError("steps_per_walk must be >= 0")
        if self.room_width < 0 or self.room_height < 0:
            raise ValueError("room dimensions must be >= 0")
        _check_probability(self.base_room_probability, "base_room_probability")
        _check_probability(self.base_turn_probability, "base_turn_probability")
        if math.isnan(self.room_probability_increment) or self.room_probability_increment < 0.0:
            raise ValueError("room_probability_increment must be >= 0.0")
        if math.isnan(self.turn_probability_increment) or self.turn_probability_increment < 0.0:
            raise ValueError("turn_probability_increment must be >= 0.0")

    @property
    def max_cells_marked(self) -> int:
        """Upper bound on cells one call can occupy, ignoring overlap and clipping."""
        return self.walks * self.steps_per_walk + self.walks * self.room_width * self.room_height


@dataclass(frozen=True)
class SimulationConfig:
    """Driver settings: how the two generators are composed over iterations."""

    grid: GridConfig = GridConfig()
    cellular_automata: CellularAutomataConfig = CellularAutomataConfig()
    drunk_agent: DrunkAgentConfig = DrunkAgentConfig()
    iterations: int = NUM_ITERATIONS
    order: StepOrder = StepOrder.CA_THEN_AGENT
    ca_passes: int = 1
    agent_passes: int = 1
    seed: int | None = None
    initial_fill_probability: float = 0.0
    agent_start: AgentState | None = None
    """Initial agent position; ``None`` starts at the grid centre."""

    def __post_init__(self) -> None:
        if self.iterations < 1:
            raise ValueError("iterations must be >= 1")
        if self.ca_passes < 0:
            raise ValueError("ca_passes must be >= 0")
        if self.agent_passes < 0:
            raise ValueError("agent_passes must be >= 0")
        if self.ca_passes == 0 and self.agent_passes == 0:
            raise ValueError("at least one of ca_passes and agent_passes must be >= 1")
        _check_probability(self.initial_fill_probability, "initial_fill_probability")
        if self.agent_start is not None and not (
            0 <= self.agent_start.x < self.grid.height and 0 <= self.agent_start.y < self.grid.width
        ):
            raise ValueError("agent_start must lie inside the grid")

    def resolved_agent_start(self) -> AgentState:
        if self.agent_start is not None:
            return self.agent_start
        return AgentState.centered(self.grid.width, self.grid.height)

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly view of the configuration."""
        payload = asdict(self)
        payload["order"] = self.order.value
        payload["agent_start"] = list(self.resolved_agent_start().position)
        return payload


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IterationRecord:
    """Grid and agent state observed at the end of one driver iteration."""

    iteration: int
    stage: GenerationStage
    grid: Grid
    agent: AgentState
    metrics: dict[str, float | int]
    rooms_stamped: int = 0


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulation run."""

    final_grid: Grid
    final_agent: AgentState
    history: tuple[IterationRecord, ...]
    seed: int | None
