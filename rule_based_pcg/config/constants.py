"""Centralized default parameters for map generation runs.

All defaults that appear across the config dataclasses, the simulation
driver and the CLI are defined here. Consuming modules should import from
this module rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 20
"""Default grid width in cells (number of columns)."""

GRID_HEIGHT = 10
"""Default grid height in cells (number of rows)."""

NUM_ITERATIONS = 5
"""Default number of driver iterations."""

CA_RADIUS = 1
"""Half-width of the cellular-automata neighbor window (1 -> 3x3)."""

CA_THRESHOLD = 0.5
"""Occupied-ratio threshold at or above which a cell becomes occupied."""

AGENT_WALKS = 5
"""Number of walks the drunk agent performs per call."""

AGENT_STEPS_PER_WALK = 10
"""Number of steps in each drunk-agent walk."""

ROOM_WIDTH = 5
"""Width (columns) of a stamped room."""

ROOM_HEIGHT = 3
"""Height (rows) of a stamped room."""

BASE_ROOM_PROBABILITY = 0.1
"""Room probability at the start of a call and after each stamped room."""

ROOM_PROBABILITY_INCREMENT = 0.05
"""Added to the room probability after each walk that stamps no room."""

BASE_TURN_PROBABILITY = 0.2
"""Turn probability at the start of a call and after each random turn."""

TURN_PROBABILITY_INCREMENT = 0.03
"""Added to the turn probability after each move without a turn."""

FLUSH_THRESHOLD = 8_192
"""Flush cell-log rows to Parquet once this in-memory row count is reached."""
