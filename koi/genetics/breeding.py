"""Breeding of two koi genotypes.

Composes the gamete engine (color genome), the spot inheritor, lightness
inheritance, the polygenic spot loci and the generational tracker into one
offspring genotype. Parents are only read; the child owns all of its parts.
"""

import logging
import random as pyrandom
from dataclasses import dataclass, field
from typing import Optional, Tuple

from koi.config.genetics import LIGHTNESS_MAX, LIGHTNESS_MIN
from koi.genetics.catalog import GeneId
from koi.genetics.gamete import breed_genome
from koi.genetics.generational import derive_generational_data
from koi.genetics.genotype import Genotype
from koi.genetics.polygenic import breed_spot_genes
from koi.genetics.reproduction import BreedingParams
from koi.genetics.spots import breed_spots
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreedingResult:
    """Offspring genotype plus the color mutations that produced it."""

    genotype: Genotype
    mutations: Tuple[GeneId, ...] = field(default_factory=tuple)


def inherit_lightness(
    lightness_a: float,
    lightness_b: float,
    rng: Optional[pyrandom.Random] = None,
    params: Optional[BreedingParams] = None,
) -> float:
    """Average the parents' lightness, occasionally nudged by up to the mutation amount."""
    rng = require_rng_param(rng, "inherit_lightness")
    params = params or BreedingParams()
    lightness = (lightness_a + lightness_b) / 2
    if rng.random() < params.lightness_mutation_chance:
        lightness += (rng.random() - 0.5) * 2 * params.lightness_mutation_amount
    return max(LIGHTNESS_MIN, min(LIGHTNESS_MAX, lightness))


def breed(
    parent_a: Genotype,
    parent_b: Genotype,
    rng: Optional[pyrandom.Random] = None,
    params: Optional[BreedingParams] = None,
) -> BreedingResult:
    """Create one offspring genotype from two parents.

    Args:
        parent_a: First parent's genotype (treated as the mother for allele origins)
        parent_b: Second parent's genotype
        rng: Random number generator; the same seed reproduces the same child
        params: Mutation settings (defaults from koi.config.genetics)

    Returns:
        BreedingResult with the child genotype and every color mutation event
    """
    rng = require_rng_param(rng, "breed")
    params = params or BreedingParams()

    spot_genes = breed_spot_genes(
        parent_a.spot_genes, parent_b.spot_genes, rng, params.inheritance
    )
    genome, mutations = breed_genome(parent_a.genome, parent_b.genome, rng, params)
    lightness = inherit_lightness(parent_a.lightness, parent_b.lightness, rng, params)
    spots = breed_spots(parent_a.spots, parent_b.spots, rng, params)
    generational = derive_generational_data(
        parent_a.spot_genes,
        parent_b.spot_genes,
        parent_a.generational,
        parent_b.generational,
    )

    if mutations:
        logger.debug("Offspring carries %d color mutation(s): %s", len(mutations), mutations)

    child = Genotype(
        genome=genome,
        spots=spots,
        lightness=lightness,
        spot_genes=spot_genes,
        generational=generational,
    )
    return BreedingResult(genotype=child, mutations=tuple(mutations))


def breed_clutch(
    parent_a: Genotype,
    parent_b: Genotype,
    count: int,
    rng: Optional[pyrandom.Random] = None,
    params: Optional[BreedingParams] = None,
) -> Tuple[BreedingResult, ...]:
    """Breed ``count`` independent offspring from the same pair."""
    rng = require_rng_param(rng, "breed_clutch")
    if count < 0:
        raise ValueError(f"breed_clutch: count must be non-negative, got {count}")
    return tuple(breed(parent_a, parent_b, rng, params) for _ in range(count))
