"""Seedable random source shared by the generators of one run."""

from __future__ import annotations

import random

from rule_based_pcg.domain.agent import CARDINAL_HEADINGS, Heading


def get_rng(seed: int | None = None) -> random.Random:
    """Return a :class:`random.Random` instance, seeded when ``seed`` is given.

    An unseeded instance draws its state from the OS, so consecutive runs
    differ; pass a seed for reproducible maps.
    """

    rng = random.Random()
    if seed is not None:
        rng.seed(seed)
    return rng


def random_heading(rng: random.Random) -> Heading:
    """Return one of the four cardinal headings with equal probability."""

    return CARDINAL_HEADINGS[rng.randrange(len(CARDINAL_HEADINGS))]
