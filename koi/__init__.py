"""Koi genetics engine.

Breeding, phenotype resolution and valuation for ornamental koi. The engine is
a pure library: callers own every genotype and pass an explicit RNG to each
random operation.
"""

from koi.genetics import (
    BreedingParams,
    BreedingResult,
    GeneId,
    Genotype,
    breed,
    resolve_phenotype,
)
from koi.valuation import GrowthStage, Individual, valuate

__all__ = [
    "BreedingParams",
    "BreedingResult",
    "GeneId",
    "Genotype",
    "GrowthStage",
    "Individual",
    "breed",
    "resolve_phenotype",
    "valuate",
]
