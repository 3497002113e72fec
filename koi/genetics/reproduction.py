"""Value objects for reproduction/inheritance APIs."""

from __future__ import annotations

from dataclasses import dataclass, field

from koi.config.genetics import (
    ALLELE_DRIFT_RATE,
    BASE_COLOR_MUTATION_CHANCE,
    GENE_DELETION_CHANCE,
    GENE_EXPANSION_CHANCE,
    GENOME_SIZE_CEILING,
    INBREEDING_THRESHOLD,
    LIGHTNESS_MUTATION_AMOUNT,
    LIGHTNESS_MUTATION_CHANCE,
    SPECIAL_MUTATION_BOTH_CHANCE,
    SPECIAL_MUTATION_CHANCE,
    SPOT_COLOR_MUTATION_CHANCE,
    SPOT_SIZE_JITTER,
)
from koi.genetics.catalog import RECESSIVE_COLORS, SPECIAL_COLORS, GeneId


@dataclass(frozen=True)
class InheritanceParams:
    """Switches for the meiosis features used when breeding the ten spot loci.

    The defaults reproduce the full model; tests can turn pieces off to
    observe plain Mendelian segregation.
    """

    linkage: bool = True
    mutation: bool = True
    drift_rate: float = ALLELE_DRIFT_RATE
    inbreeding_threshold: float = INBREEDING_THRESHOLD

    @classmethod
    def mendelian(cls) -> "InheritanceParams":
        """Independent segregation only: no linkage, mutation, drift or inbreeding."""
        return cls(linkage=False, mutation=False, drift_rate=0.0, inbreeding_threshold=1.0)


@dataclass(frozen=True)
class BreedingParams:
    """Inputs that control mutation for a breeding event."""

    substitution_chance: float = BASE_COLOR_MUTATION_CHANCE
    expansion_chance: float = GENE_EXPANSION_CHANCE
    deletion_chance: float = GENE_DELETION_CHANCE
    genome_ceiling: int = GENOME_SIZE_CEILING
    special_chance: float = SPECIAL_MUTATION_CHANCE
    special_both_chance: float = SPECIAL_MUTATION_BOTH_CHANCE
    substitution_genes: tuple[GeneId, ...] = RECESSIVE_COLORS
    special_genes: tuple[GeneId, ...] = SPECIAL_COLORS

    spot_color_mutation_chance: float = SPOT_COLOR_MUTATION_CHANCE
    spot_size_jitter: float = SPOT_SIZE_JITTER

    lightness_mutation_chance: float = LIGHTNESS_MUTATION_CHANCE
    lightness_mutation_amount: float = LIGHTNESS_MUTATION_AMOUNT

    inheritance: InheritanceParams = field(default_factory=InheritanceParams)
