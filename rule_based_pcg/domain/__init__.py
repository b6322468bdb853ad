"""Domain layer: occupancy grid and drunk-agent state."""

from rule_based_pcg.domain.agent import CARDINAL_HEADINGS, DEFAULT_HEADING, AgentState, Heading
from rule_based_pcg.domain.grid import Grid

__all__ = [
    "AgentState",
    "CARDINAL_HEADINGS",
    "DEFAULT_HEADING",
    "Grid",
    "Heading",
]
