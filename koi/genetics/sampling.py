"""Weighted trait sampling.

Candidates are drawn with probability proportional to the inverse of their
rarity weight, so rare traits are drawn rarely. Candidates with a rarity of
zero or less are disabled and never drawn.
"""

import random as pyrandom
from typing import Mapping, Optional, Sequence, TypeVar

from koi.genetics.catalog import GENE_RARITY
from koi.util.rng import require_rng_param

T = TypeVar("T")


def weighted_choice(
    candidates: Sequence[T],
    rng: Optional[pyrandom.Random] = None,
    rarity: Optional[Mapping[T, float]] = None,
) -> T:
    """Pick one candidate using inverse-rarity weights.

    Args:
        candidates: Traits to choose from
        rng: Random number generator
        rarity: Rarity weight per trait (defaults to the gene catalog)

    Returns:
        The chosen trait

    Raises:
        ValueError: If no candidate has a positive rarity weight
    """
    rng = require_rng_param(rng, "weighted_choice")
    if rarity is None:
        rarity = GENE_RARITY
    valid = [trait for trait in candidates if rarity.get(trait, 0) > 0]
    if not valid:
        raise ValueError("weighted_choice: no candidate has a positive rarity weight")
    weights = [1.0 / rarity[trait] for trait in valid]
    return rng.choices(valid, weights=weights, k=1)[0]
