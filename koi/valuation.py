"""Market value of an individual koi.

Value is a deterministic function of the genotype, the growth stage and the
fish's condition: rarer expressed colors, carried genes, extreme lightness
and many rare spots all add value, adults are worth more, and a weak or sick
fish loses most or all of it.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from koi.config.valuation import (
    CARRIER_RARITY_MULTIPLIER,
    LIGHTNESS_BONUS_FACTOR,
    LIGHTNESS_CENTER,
    PHENOTYPE_RARITY_MULTIPLIER,
    SPOT_BONUS_EXPONENT,
    SPOT_BONUS_FACTOR,
    SPOT_COLOR_RARITY_MULTIPLIER,
    SPOT_VALUE_PER_SPOT,
    STAMINA_HALF_MAX,
    STAMINA_QUARTER_MAX,
    STAMINA_WORTHLESS_MAX,
    VALUE_BASE,
)
from koi.genetics.catalog import DEFAULT_GENE, rarity_weight
from koi.genetics.genotype import Genotype


class GrowthStage(Enum):
    """Life stages of a koi."""

    FRY = "fry"
    JUVENILE = "juvenile"
    ADULT = "adult"


_GROWTH_MULTIPLIER: Dict[GrowthStage, float] = {
    GrowthStage.FRY: 1.0,
    GrowthStage.JUVENILE: 1.5,
    GrowthStage.ADULT: 2.0,
}


@dataclass(frozen=True)
class Individual:
    """The parts of a koi that valuation reads.

    Attributes:
        genotype: Genetic makeup
        growth_stage: Current life stage
        stamina: Condition, 0-100. Defaults to full health; pass 0 for a fish
            whose stamina is unknown to value it as unsellable
        sick: Whether the fish is currently ill
    """

    genotype: Genotype
    growth_stage: GrowthStage = GrowthStage.FRY
    stamina: float = 100.0
    sick: bool = False


def genetic_value(genotype: Genotype) -> float:
    """Value contributed by the genotype alone, before stage and condition."""
    value = VALUE_BASE
    value += rarity_weight(genotype.phenotype) * PHENOTYPE_RARITY_MULTIPLIER

    # Carried copies count even when not expressed; the base color does not.
    value += sum(
        rarity_weight(gene) * CARRIER_RARITY_MULTIPLIER
        for gene in genotype.genome
        if gene is not DEFAULT_GENE
    )

    value += abs(genotype.lightness - LIGHTNESS_CENTER) ** 2 * LIGHTNESS_BONUS_FACTOR

    spot_count = len(genotype.spots)
    value += spot_count * SPOT_VALUE_PER_SPOT + spot_count**SPOT_BONUS_EXPONENT * SPOT_BONUS_FACTOR
    value += sum(rarity_weight(spot.color) for spot in genotype.spots) * SPOT_COLOR_RARITY_MULTIPLIER
    return value


def condition_multiplier(stamina: float, sick: bool) -> float:
    """Price factor for the fish's condition; 0 means unsellable."""
    if sick or stamina <= STAMINA_WORTHLESS_MAX:
        return 0.0
    if stamina <= STAMINA_QUARTER_MAX:
        return 0.25
    if stamina <= STAMINA_HALF_MAX:
        return 0.5
    return 1.0


def valuate(individual: Individual) -> int:
    """Return the market value of an individual, floored to an integer."""
    multiplier = condition_multiplier(individual.stamina, individual.sick)
    if multiplier == 0.0:
        return 0
    value = genetic_value(individual.genotype) * _GROWTH_MULTIPLIER[individual.growth_stage]
    return math.floor(value * multiplier)


def rarity_score(genotype: Genotype) -> float:
    """Collector score: rarity of every carried gene plus every spot color."""
    return sum(rarity_weight(gene) for gene in genotype.genome) + sum(
        rarity_weight(spot.color) for spot in genotype.spots
    )
