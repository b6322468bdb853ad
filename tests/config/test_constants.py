"""Tests for rule_based_pcg.config.constants module."""

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


def test_grid_dimensions_are_positive_ints() -> None:
    assert isinstance(GRID_WIDTH, int) and GRID_WIDTH > 0
    assert isinstance(GRID_HEIGHT, int) and GRID_HEIGHT > 0


def test_num_iterations_is_positive() -> None:
    assert isinstance(NUM_ITERATIONS, int) and NUM_ITERATIONS > 0


def test_ca_defaults_are_in_range() -> None:
    assert isinstance(CA_RADIUS, int) and CA_RADIUS >= 0
    assert 0.0 <= CA_THRESHOLD <= 1.0


def test_agent_counts_are_positive() -> None:
    assert isinstance(AGENT_WALKS, int) and AGENT_WALKS > 0
    assert isinstance(AGENT_STEPS_PER_WALK, int) and AGENT_STEPS_PER_WALK > 0


def test_room_fits_inside_default_grid() -> None:
    assert 0 < ROOM_WIDTH <= GRID_WIDTH
    assert 0 < ROOM_HEIGHT <= GRID_HEIGHT


def test_base_probabilities_are_probabilities() -> None:
    assert 0.0 <= BASE_ROOM_PROBABILITY <= 1.0
    assert 0.0 <= BASE_TURN_PROBABILITY <= 1.0


def test_increments_are_non_negative() -> None:
    assert ROOM_PROBABILITY_INCREMENT >= 0.0
    assert TURN_PROBABILITY_INCREMENT >= 0.0


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
