"""Drunk-agent position and heading vocabulary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

Heading: TypeAlias = tuple[int, int]
"""``(dx, dy)`` offset applied to the agent position on each move."""

CARDINAL_HEADINGS: tuple[Heading, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
"""Up, down, left, right; random turns draw uniformly from these."""

DEFAULT_HEADING: Heading = (0, 1)
"""Heading at the start of every walk call (+1 along the column axis)."""


@dataclass(frozen=True)
class AgentState:
    """Agent position: ``x`` is the row index, ``y`` the column index."""

    x: int
    y: int

    @classmethod
    def centered(cls, width: int, height: int) -> AgentState:
        """Return the centre cell of a ``height`` x ``width`` grid."""
        return cls(x=height // 2, y=width // 2)

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y
