"""Generation tracking and ancestor snapshots (atavism).

Every breeding event records the parents' own expressed spot phenotypes as
the child's grandparent slots, so a later generation can revert to an
ancestral look. Reversion is an explicit probability rule applied by the
caller; phenotype expression never triggers it on its own.
"""

import dataclasses
import logging
import random as pyrandom
from dataclasses import dataclass
from typing import Optional

from koi.config.genetics import ATAVISM_CHANCE
from koi.genetics.expression import SpotPhenotype, express_spot_phenotype
from koi.genetics.polygenic import SpotGenes
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationalData:
    """Generation counter plus the parents' phenotypes at breeding time."""

    generation: int = 0
    grandparent_a: Optional[SpotPhenotype] = None
    grandparent_b: Optional[SpotPhenotype] = None


def derive_generational_data(
    genes_a: Optional[SpotGenes],
    genes_b: Optional[SpotGenes],
    generational_a: Optional[GenerationalData] = None,
    generational_b: Optional[GenerationalData] = None,
) -> Optional[GenerationalData]:
    """Build the child's generational record.

    Returns None when neither parent carries spot genes.
    """
    if genes_a is None and genes_b is None:
        return None
    gen_a = generational_a.generation if generational_a is not None else 0
    gen_b = generational_b.generation if generational_b is not None else 0
    return GenerationalData(
        generation=max(gen_a, gen_b, 0) + 1,
        grandparent_a=express_spot_phenotype(genes_a) if genes_a is not None else None,
        grandparent_b=express_spot_phenotype(genes_b) if genes_b is not None else None,
    )


def revert_to_ancestor(
    phenotype: SpotPhenotype,
    generational: Optional[GenerationalData],
    rng: Optional[pyrandom.Random] = None,
    chance: float = ATAVISM_CHANCE,
) -> SpotPhenotype:
    """With probability ``chance``, take a recorded ancestor's look.

    The ancestor is chosen uniformly among the recorded grandparent slots.
    Threshold-trait labels stay those of the individual itself.
    """
    rng = require_rng_param(rng, "revert_to_ancestor")
    if generational is None:
        return phenotype
    ancestors = [
        snapshot
        for snapshot in (generational.grandparent_a, generational.grandparent_b)
        if snapshot is not None
    ]
    if not ancestors or rng.random() >= chance:
        return phenotype
    ancestor = rng.choice(ancestors)
    logger.debug("Atavism: reverting to ancestor phenotype (generation %d)", generational.generation)
    return dataclasses.replace(ancestor, active_traits=phenotype.active_traits)
