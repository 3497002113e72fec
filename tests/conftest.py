"""Pytest configuration and fixtures for koi genetics tests."""

import random

import pytest

from koi.genetics import GeneId, Genotype, Spot, SpotShape


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def spotted_genotype(seeded_rng):
    """A black koi with a few spots and spot genes."""
    return Genotype(
        genome=(GeneId.BLACK, GeneId.BLACK, GeneId.RED),
        spots=(
            Spot(10.0, 20.0, 40.0, GeneId.RED, SpotShape.CIRCLE),
            Spot(50.0, 50.0, 60.0, GeneId.WHITE, SpotShape.HEXAGON),
            Spot(80.0, 30.0, 25.0, GeneId.BLACK, None),
        ),
        lightness=62.5,
        spot_genes=Genotype.random(seeded_rng).spot_genes,
    )
