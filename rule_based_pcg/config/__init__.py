"""Configuration layer: default constants and typed config dataclasses."""

from rule_based_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    BASE_ROOM_PROBABILITY,
    BASE_TURN_PROBABILITY,
    CA_RADIUS,
    CA_THRESHOLD,
    FLUSH_THRESHOLD,
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
    GenerationStage,
    GridConfig,
    IterationRecord,
    SimulationConfig,
    SimulationResult,
    StepOrder,
)

__all__ = [
    "AGENT_STEPS_PER_WALK",
    "AGENT_WALKS",
    "BASE_ROOM_PROBABILITY",
    "BASE_TURN_PROBABILITY",
    "CA_RADIUS",
    "CA_THRESHOLD",
    "CellularAutomataConfig",
    "DrunkAgentConfig",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GenerationStage",
    "GridConfig",
    "IterationRecord",
    "NUM_ITERATIONS",
    "ROOM_HEIGHT",
    "ROOM_PROBABILITY_INCREMENT",
    "ROOM_WIDTH",
    "SimulationConfig",
    "SimulationResult",
    "StepOrder",
    "TURN_PROBABILITY_INCREMENT",
]
