"""Rule-based procedural map generation.

Two generators share one immutable occupancy :class:`~rule_based_pcg.domain.grid.Grid`:
a synchronous cellular-automata smoothing pass and a stochastic drunk-agent
carver. :func:`~rule_based_pcg.simulation.engine.run_simulation` alternates
them over a fixed number of iterations.
"""

from rule_based_pcg.config.types import (
    CellularAutomataConfig,
    DrunkAgentConfig,
    GridConfig,
    SimulationConfig,
    StepOrder,
)
from rule_based_pcg.domain.agent import AgentState
from rule_based_pcg.domain.grid import Grid
from rule_based_pcg.generators.cellular_automata import cellular_automata_step
from rule_based_pcg.generators.drunk_agent import WalkResult, drunk_agent_walk
from rule_based_pcg.generators.rng import get_rng
from rule_based_pcg.simulation.engine import run_simulation

__version__ = "0.1.0"

__all__ = [
    "AgentState",
    "CellularAutomataConfig",
    "DrunkAgentConfig",
    "Grid",
    "GridConfig",
    "SimulationConfig",
    "StepOrder",
    "WalkResult",
    "cellular_automata_step",
    "drunk_agent_walk",
    "get_rng",
    "run_simulation",
]
