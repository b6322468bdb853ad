"""Tests for rule_based_pcg.domain.agent module."""

from __future__ import annotations

import dataclasses

import pytest

from rule_based_pcg.domain.agent import CARDINAL_HEADINGS, DEFAULT_HEADING, AgentState


def test_centered_uses_floor_of_half_dimensions() -> None:
    assert AgentState.centered(width=20, height=10) == AgentState(5, 10)


def test_agent_state_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        AgentState(0, 0).x = 1  # type: ignore[misc]


def test_cardinal_headings_are_unit_steps() -> None:
    assert len(CARDINAL_HEADINGS) == 4
    assert len(set(CARDINAL_HEADINGS)) == 4
    for dx, dy in CARDINAL_HEADINGS:
        assert abs(dx) + abs(dy) == 1


def test_default_heading_points_along_columns() -> None:
    assert DEFAULT_HEADING == (0, 1)
