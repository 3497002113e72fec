"""Tests for gamete formation, color mutation and genome breeding."""

import random
from collections import Counter

import pytest

from koi.genetics import BreedingParams, GeneId
from koi.genetics.gamete import (
    apply_special_mutation,
    breed_genome,
    combine_gametes,
    gamete_size,
    make_gamete,
    mutate_gamete,
)
from koi.util.rng import MissingRNGError


def _is_sub_multiset(part, whole):
    whole_counts = Counter(whole)
    return all(whole_counts[gene] >= count for gene, count in Counter(part).items())


class TestMakeGamete:
    @pytest.mark.parametrize("length,expected", [(0, 1), (1, 1), (2, 1), (3, 1), (5, 2), (8, 4)])
    def test_gamete_size(self, length, expected):
        assert gamete_size(length) == expected

    def test_empty_genome_gives_empty_gamete(self, seeded_rng):
        assert make_gamete([], seeded_rng) == ()

    def test_gamete_is_half_of_parent(self, seeded_rng):
        genome = [GeneId.BLACK, GeneId.RED, GeneId.CREAM, GeneId.CREAM, GeneId.WHITE, GeneId.YELLOW]
        for _ in range(50):
            gamete = make_gamete(genome, seeded_rng)
            assert len(gamete) == 3
            assert _is_sub_multiset(gamete, genome)

    @pytest.mark.parametrize("gene", list(GeneId))
    def test_single_gene_genome_passes_its_only_copy(self, seeded_rng, gene):
        assert make_gamete([gene], seeded_rng) == (gene,)

    def test_expansion_adds_one_copy(self, seeded_rng):
        params = BreedingParams(expansion_chance=1.0)
        genome = [GeneId.RED, GeneId.RED, GeneId.BLACK, GeneId.WHITE]
        for _ in range(50):
            gamete = make_gamete(genome, seeded_rng, params)
            assert len(gamete) == gamete_size(len(genome)) + 1
            assert set(gamete) <= set(genome)

    def test_requires_rng(self):
        with pytest.raises(MissingRNGError):
            make_gamete([GeneId.RED])


class TestMutation:
    def test_no_substitution_by_default(self, seeded_rng):
        gamete = (GeneId.RED, GeneId.BLACK)
        assert mutate_gamete(gamete, seeded_rng) == (gamete, [])

    def test_substitution_replaces_every_entry(self, seeded_rng):
        params = BreedingParams(substitution_chance=1.0, substitution_genes=(GeneId.ORANGE,))
        mutated, events = mutate_gamete((GeneId.RED, GeneId.BLACK, GeneId.CREAM), seeded_rng, params)
        assert mutated == (GeneId.ORANGE,) * 3
        assert events == [GeneId.ORANGE] * 3

    def test_special_mutation_is_noop_without_special_genes(self, seeded_rng):
        params = BreedingParams(special_chance=1.0)
        first, second, events = apply_special_mutation((GeneId.RED,), (GeneId.BLACK,), seeded_rng, params)
        assert (first, second, events) == ((GeneId.RED,), (GeneId.BLACK,), [])

    def test_special_mutation_overwrites_first_slot(self, seeded_rng):
        params = BreedingParams(
            special_chance=1.0, special_both_chance=0.0, special_genes=(GeneId.YELLOW,)
        )
        first, second, events = apply_special_mutation(
            (GeneId.RED, GeneId.RED), (GeneId.BLACK, GeneId.BLACK), seeded_rng, params
        )
        assert first == (GeneId.YELLOW, GeneId.RED)
        assert second == (GeneId.BLACK, GeneId.BLACK)
        assert events == [GeneId.YELLOW]

    def test_special_mutation_can_hit_both_gametes(self, seeded_rng):
        params = BreedingParams(
            special_chance=1.0, special_both_chance=1.0, special_genes=(GeneId.YELLOW,)
        )
        first, second, _ = apply_special_mutation((GeneId.RED,), (), seeded_rng, params)
        assert first == (GeneId.YELLOW,)
        assert second == (GeneId.YELLOW,)


class TestCombineGametes:
    def test_empty_gametes_give_default_gene(self, seeded_rng):
        assert combine_gametes((), (), seeded_rng) == (GeneId.CREAM,)

    def test_empty_slots_are_dropped(self, seeded_rng):
        assert combine_gametes((None, GeneId.RED), (GeneId.BLACK, None), seeded_rng) == (
            GeneId.RED,
            GeneId.BLACK,
        )

    def test_oversized_genome_loses_last_entry(self, seeded_rng):
        params = BreedingParams(deletion_chance=1.0)
        child = combine_gametes((GeneId.RED,) * 4, (GeneId.BLACK,) * 4, seeded_rng, params)
        assert child == (GeneId.RED,) * 4 + (GeneId.BLACK,) * 3

    def test_genome_at_ceiling_is_not_pruned(self, seeded_rng):
        params = BreedingParams(deletion_chance=1.0)
        child = combine_gametes((GeneId.RED,) * 3, (GeneId.BLACK,) * 3, seeded_rng, params)
        assert len(child) == params.genome_ceiling


class TestBreedGenome:
    @pytest.mark.parametrize("gene", [GeneId.CREAM, GeneId.BLACK, GeneId.WHITE])
    def test_homozygous_pair_breeds_true(self, seeded_rng, gene):
        genome, events = breed_genome([gene, gene], [gene, gene], seeded_rng)
        assert genome == (gene, gene)
        assert events == []

    @pytest.mark.parametrize("gene", [GeneId.CREAM, GeneId.BLACK])
    def test_single_copy_parents_give_two_copies(self, seeded_rng, gene):
        for _ in range(20):
            genome, events = breed_genome([gene], [gene], seeded_rng)
            assert genome == (gene, gene)
            assert events == []

    def test_empty_parents_give_default_gene(self, seeded_rng):
        genome, _ = breed_genome([], [], seeded_rng)
        assert genome == (GeneId.CREAM,)

    def test_child_length_bounds(self):
        rng = random.Random(123)
        genes = list(GeneId)
        for _ in range(300):
            a = [rng.choice(genes) for _ in range(rng.randint(1, 10))]
            b = [rng.choice(genes) for _ in range(rng.randint(1, 10))]
            genome, _ = breed_genome(a, b, rng)
            expected = gamete_size(len(a)) + gamete_size(len(b))
            assert expected - 1 <= len(genome) <= expected
            assert _is_sub_multiset(genome, a + b)

    def test_same_seed_same_genome(self):
        a = [GeneId.BLACK, GeneId.RED, GeneId.CREAM, GeneId.WHITE]
        b = [GeneId.YELLOW, GeneId.ORANGE, GeneId.CREAM]
        assert breed_genome(a, b, random.Random(9)) == breed_genome(a, b, random.Random(9))
