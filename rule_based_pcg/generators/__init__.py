"""Map generators: cellular-automata smoothing and the drunk-agent carver."""

from rule_based_pcg.generators.cellular_automata import (
    apply_cellular_automata,
    cellular_automata_step,
    neighborhood_counts,
)
from rule_based_pcg.generators.drunk_agent import (
    WalkResult,
    apply_drunk_agent,
    drunk_agent_walk,
    room_bounds,
    stamp_room,
)
from rule_based_pcg.generators.rng import get_rng, random_heading

__all__ = [
    "WalkResult",
    "apply_cellular_automata",
    "apply_drunk_agent",
    "cellular_automata_step",
    "drunk_agent_walk",
    "get_rng",
    "neighborhood_counts",
    "random_heading",
    "room_bounds",
    "stamp_room",
]
