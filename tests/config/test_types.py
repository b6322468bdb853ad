"""Tests for rule_based_pcg.config.types validation and helpers."""

from __future__ import annotations

import dataclasses
import json

import pytest

from rule_based_pcg.config.types import (
    CellularAutomataConfig,
    DrunkAgentConfig,
    GridConfig,
    SimulationConfig,
    StepOrder,
)
from rule_based_pcg.domain.agent import AgentState


class TestGridConfig:
    def test_defaults_match_constants(self) -> None:
        config = GridConfig()
        assert (config.width, config.height) == (20, 10)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3)])
    def test_rejects_non_positive_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="grid dimensions"):
            GridConfig(width=width, height=height)

    def test_is_frozen(self) -> None:
        config = GridConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.width = 3  # type: ignore[misc]


class TestCellularAutomataConfig:
    def test_window_size(self) -> None:
        assert CellularAutomataConfig(radius=0).window_size == 1
        assert CellularAutomataConfig(radius=1).window_size == 9
        assert CellularAutomataConfig(radius=2).window_size == 25

    def test_rejects_negative_radius(self) -> None:
        with pytest.raises(ValueError, match="radius"):
            CellularAutomataConfig(radius=-1)

    def test_rejects_negative_threshold(self) -> None:
        with pytest.raises(ValueError, match="threshold"):
            CellularAutomataConfig(threshold=-0.1)

    def test_rejects_nan_threshold(self) -> None:
        with pytest.raises(ValueError, match="threshold"):
            CellularAutomataConfig(threshold=float("nan"))

    def test_accepts_threshold_above_one(self) -> None:
        assert CellularAutomataConfig(threshold=1.01).threshold == 1.01


class TestDrunkAgentConfig:
    def test_max_cells_marked(self) -> None:
        config = DrunkAgentConfig(walks=5, steps_per_walk=10, room_width=5, room_height=3)
        assert config.max_cells_marked == 5 * 10 + 5 * 5 * 3

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"walks": -1},
            {"steps_per_walk": -1},
            {"room_width": -1},
            {"room_height": -2},
        ],
    )
    def test_rejects_negative_counts(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            DrunkAgentConfig(**kwargs)

    @pytest.mark.parametrize("field", ["base_room_probability", "base_turn_probability"])
    @pytest.mark.parametrize("value", [-0.01, 1.5])
    def test_rejects_base_probability_out_of_range(self, field: str, value: float) -> None:
        with pytest.raises(ValueError, match=field):
            DrunkAgentConfig(**{field: value})

    @pytest.mark.parametrize(
        "field", ["room_probability_increment", "turn_probability_increment"]
    )
    def test_rejects_negative_increment(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            DrunkAgentConfig(**{field: -0.1})

    def test_zero_walks_allowed(self) -> None:
        assert DrunkAgentConfig(walks=0).max_cells_marked == 0


class TestSimulationConfig:
    def test_defaults(self) -> None:
        config = SimulationConfig()
        assert config.iterations == 5
        assert config.order is StepOrder.CA_THEN_AGENT
        assert config.seed is None

    def test_rejects_zero_iterations(self) -> None:
        with pytest.raises(ValueError, match="iterations"):
            SimulationConfig(iterations=0)

    def test_rejects_negative_passes(self) -> None:
        with pytest.raises(ValueError, match="ca_passes"):
            SimulationConfig(ca_passes=-1)
        with pytest.raises(ValueError, match="agent_passes"):
            SimulationConfig(agent_passes=-1)

    def test_rejects_all_generators_disabled(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            SimulationConfig(ca_passes=0, agent_passes=0)

    def test_rejects_fill_probability_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="initial_fill_probability"):
            SimulationConfig(initial_fill_probability=1.2)

    def test_rejects_agent_start_outside_grid(self) -> None:
        with pytest.raises(ValueError, match="agent_start"):
            SimulationConfig(grid=GridConfig(width=4, height=3), agent_start=AgentState(3, 0))

    def test_resolved_agent_start_defaults_to_centre(self) -> None:
        config = SimulationConfig(grid=GridConfig(width=20, height=10))
        assert config.resolved_agent_start() == AgentState(5, 10)

    def test_resolved_agent_start_uses_explicit_value(self) -> None:
        config = SimulationConfig(agent_start=AgentState(1, 2))
        assert config.resolved_agent_start() == AgentState(1, 2)

    def test_to_dict_is_json_serialisable(self) -> None:
        config = SimulationConfig(seed=3, order=StepOrder.AGENT_THEN_CA)
        payload = json.loads(json.dumps(config.to_dict()))
        assert payload["order"] == "agent_then_ca"
        assert payload["seed"] == 3
        assert payload["agent_start"] == [5, 10]
        assert payload["grid"] == {"width": 20, "height": 10}
        assert payload["cellular_automata"]["radius"] == 1
