"""Gamete formation and color-genome mutation.

A parent passes on roughly half of its color genes: a shuffled sample of
``max(1, len // 2)`` copies. Gametes may then mutate before the two of them
are concatenated into the child's genome.

Mutation kinds:
- Expansion: the gamete picks up one extra copy from its source genome
- Substitution: a gamete entry is replaced by a weighted-random color
- Special: slot 0 of one (rarely both) gametes is force-overwritten
- Deletion: an oversized child genome drops its last entry
"""

import logging
import random as pyrandom
from typing import List, Optional, Sequence, Tuple

from koi.genetics.catalog import DEFAULT_GENE, GeneId
from koi.genetics.reproduction import BreedingParams
from koi.genetics.sampling import weighted_choice
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)

Genome = Tuple[GeneId, ...]

_DEFAULT_PARAMS = BreedingParams()


def gamete_size(genome_length: int) -> int:
    return max(1, genome_length // 2)


def make_gamete(
    genome: Sequence[GeneId],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Genome:
    """Sample a half-sized gamete from a parent genome.

    The result is never longer than ``gamete_size(len(genome)) + 1`` (the
    extra slot comes from expansion) and is never empty for a non-empty genome.
    """
    rng = require_rng_param(rng, "make_gamete")
    source = list(genome)
    if not source:
        return ()
    gamete = rng.sample(source, gamete_size(len(source)))
    if rng.random() < params.expansion_chance:
        gamete.append(rng.choice(source))
    return tuple(gamete)


def mutate_gamete(
    gamete: Sequence[GeneId],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Tuple[Genome, List[GeneId]]:
    """Apply substitution mutation to each entry.

    Returns:
        Tuple of (mutated gamete, substituted genes in order)
    """
    rng = require_rng_param(rng, "mutate_gamete")
    mutated: List[GeneId] = []
    events: List[GeneId] = []
    for gene in gamete:
        if rng.random() < params.substitution_chance:
            replacement = weighted_choice(params.substitution_genes, rng)
            logger.debug("Gene substitution: %s -> %s", gene, replacement)
            events.append(replacement)
            mutated.append(replacement)
        else:
            mutated.append(gene)
    return tuple(mutated), events


def apply_special_mutation(
    gamete1: Sequence[GeneId],
    gamete2: Sequence[GeneId],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Tuple[Genome, Genome, List[GeneId]]:
    """Possibly force a special gene into slot 0 of one or both gametes.

    A no-op when no special genes are configured.
    """
    rng = require_rng_param(rng, "apply_special_mutation")
    if not params.special_genes or rng.random() >= params.special_chance:
        return tuple(gamete1), tuple(gamete2), []

    special = weighted_choice(params.special_genes, rng)
    first = _overwrite_first(gamete1, special)
    both = rng.random() < params.special_both_chance
    second = _overwrite_first(gamete2, special) if both else tuple(gamete2)
    logger.debug("Special mutation: %s (both gametes: %s)", special, both)
    return first, second, [special]


def _overwrite_first(gamete: Sequence[GeneId], gene: GeneId) -> Genome:
    if not gamete:
        return (gene,)
    return (gene,) + tuple(gamete[1:])


def combine_gametes(
    gamete1: Sequence[Optional[GeneId]],
    gamete2: Sequence[Optional[GeneId]],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Genome:
    """Concatenate two gametes into a child genome.

    Empty slots are dropped, an oversized genome may lose its last entry, and
    the result always holds at least one gene.
    """
    rng = require_rng_param(rng, "combine_gametes")
    child = [gene for gene in (*gamete1, *gamete2) if gene]
    if len(child) > params.genome_ceiling and rng.random() < params.deletion_chance:
        pruned = child.pop()
        logger.debug("Pruned %s from oversized genome (len=%d)", pruned, len(child) + 1)
    if not child:
        child.append(DEFAULT_GENE)
    return tuple(child)


def breed_genome(
    genome1: Sequence[GeneId],
    genome2: Sequence[GeneId],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Tuple[Genome, List[GeneId]]:
    """Breed two color genomes.

    Returns:
        Tuple of (child genome, mutation events)
    """
    rng = require_rng_param(rng, "breed_genome")
    gamete1, events1 = mutate_gamete(make_gamete(genome1, rng, params), rng, params)
    gamete2, events2 = mutate_gamete(make_gamete(genome2, rng, params), rng, params)
    gamete1, gamete2, special = apply_special_mutation(gamete1, gamete2, rng, params)
    return combine_gametes(gamete1, gamete2, rng, params), events1 + events2 + special
