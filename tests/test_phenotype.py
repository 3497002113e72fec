"""Tests for recessive phenotype resolution."""

import itertools
import random

from koi.genetics import DOMINANCE_ORDER, GeneId, resolve_phenotype
from koi.genetics.phenotype import gene_counts


def test_empty_genome_resolves_to_default():
    assert resolve_phenotype([]) is GeneId.CREAM


def test_falsy_entries_are_ignored():
    assert resolve_phenotype([None, None]) is GeneId.CREAM
    assert resolve_phenotype([GeneId.RED, None, GeneId.RED, None]) is GeneId.RED


def test_single_copy_is_not_expressed():
    assert resolve_phenotype([GeneId.BLACK]) is GeneId.CREAM
    assert resolve_phenotype([GeneId.BLACK, GeneId.RED, GeneId.YELLOW]) is GeneId.CREAM


def test_two_copies_are_expressed():
    assert resolve_phenotype([GeneId.YELLOW, GeneId.CREAM, GeneId.YELLOW]) is GeneId.YELLOW


def test_dominance_beats_copy_count():
    genome = [GeneId.WHITE] * 5 + [GeneId.BLACK] * 2
    assert resolve_phenotype(genome) is GeneId.BLACK


def test_dominance_order_breaks_ties_for_every_pair():
    for stronger, weaker in itertools.combinations(DOMINANCE_ORDER, 2):
        assert resolve_phenotype([weaker, weaker, stronger, stronger]) is stronger


def test_permutation_invariance():
    rng = random.Random(11)
    genes = list(GeneId)
    for _ in range(100):
        genome = [rng.choice(genes) for _ in range(rng.randint(0, 9))]
        expected = resolve_phenotype(genome)
        for _ in range(5):
            shuffled = genome[:]
            rng.shuffle(shuffled)
            assert resolve_phenotype(shuffled) is expected
        assert expected in GeneId


def test_gene_counts_skips_empty_slots():
    counts = gene_counts([GeneId.RED, None, GeneId.RED, GeneId.BLACK])
    assert counts == {GeneId.RED: 2, GeneId.BLACK: 1}
