"""Tests for spot phenotype expression and generational tracking."""

import dataclasses
import random

import pytest

from koi.genetics import (
    Allele,
    GenerationalData,
    Origin,
    PolygenicLocus,
    SpotGenes,
    derive_generational_data,
    express_spot_phenotype,
)
from koi.genetics.expression import THRESHOLD_TRAITS, SpotPhenotype, active_threshold_traits
from koi.genetics.generational import revert_to_ancestor
from koi.genetics.polygenic import LOCUS_SPECS
from koi.util.rng import MissingRNGError

FIELD_FOR_LOCUS = {spec.name: spec.name for spec in LOCUS_SPECS}
FIELD_FOR_LOCUS["size_base"] = "size_multiplier"


def uniform_genes(value, **overrides):
    loci = {}
    for spec in LOCUS_SPECS:
        v = overrides.get(spec.name, value)
        loci[spec.name] = PolygenicLocus(
            Allele(v, Origin.MATERNAL), Allele(v, Origin.PATERNAL), spec.dominance
        )
    return SpotGenes(**loci)


class TestSpotPhenotype:
    def test_lowest_alleles(self):
        phenotype = express_spot_phenotype(uniform_genes(0.0))
        assert phenotype.size_multiplier == pytest.approx(0.5)
        assert phenotype.density == pytest.approx(0.5)
        assert phenotype.position_bias_x == pytest.approx(-0.5)
        assert phenotype.opacity_base == pytest.approx(0.0)
        assert phenotype.active_traits == ()

    def test_highest_alleles(self):
        phenotype = express_spot_phenotype(uniform_genes(1.0))
        assert phenotype.size_multiplier == pytest.approx(2.0)
        assert phenotype.density == pytest.approx(1.0)
        assert phenotype.position_bias_y == pytest.approx(0.5)
        assert phenotype.color_hue == pytest.approx(1.0)

    def test_deterministic(self):
        genes = SpotGenes.random(random.Random(21))
        assert express_spot_phenotype(genes) == express_spot_phenotype(genes)

    @pytest.mark.parametrize("name", [spec.name for spec in LOCUS_SPECS])
    def test_raising_a_locus_never_lowers_its_field(self, name):
        field = FIELD_FOR_LOCUS[name]
        previous = None
        for value in (0.0, 0.25, 0.5, 0.75, 1.0):
            current = getattr(express_spot_phenotype(uniform_genes(0.4, **{name: value})), field)
            if previous is not None:
                assert current >= previous
            previous = current


class TestThresholdTraits:
    def test_all_traits_active_at_maximum(self):
        phenotype = express_spot_phenotype(uniform_genes(1.0))
        assert set(phenotype.active_traits) == {trait.id for trait in THRESHOLD_TRAITS}

    def test_trait_requires_every_locus(self):
        expressed = {spec.name: 0.0 for spec in LOCUS_SPECS}
        expressed.update(color_hue=0.9, color_saturation=0.9)
        assert "golden_sheen" not in active_threshold_traits(expressed)
        expressed["opacity_base"] = 0.6
        assert "golden_sheen" in active_threshold_traits(expressed)

    def test_traits_do_not_change_numeric_fields(self):
        genes = uniform_genes(1.0)
        phenotype = express_spot_phenotype(genes)
        expressed = genes.expressed()
        assert phenotype.opacity_base == pytest.approx(expressed["opacity_base"])
        assert phenotype.edge_blur == pytest.approx(expressed["edge_blur"])
        assert phenotype.color_saturation == pytest.approx(expressed["color_saturation"])


class TestGenerationalData:
    def test_no_spot_genes_no_record(self):
        assert derive_generational_data(None, None) is None

    def test_first_generation_snapshots_parents(self):
        a = uniform_genes(0.2)
        b = uniform_genes(0.8)
        data = derive_generational_data(a, b)
        assert data.generation == 1
        assert data.grandparent_a == express_spot_phenotype(a)
        assert data.grandparent_b == express_spot_phenotype(b)

    def test_generation_counts_from_older_parent(self):
        genes = uniform_genes(0.5)
        data = derive_generational_data(
            genes, None, GenerationalData(generation=3), GenerationalData(generation=1)
        )
        assert data.generation == 4
        assert data.grandparent_b is None


class TestRevertToAncestor:
    def _phenotype(self):
        return dataclasses.replace(express_spot_phenotype(uniform_genes(0.5)), active_traits=("own",))

    def test_disabled_by_default(self, seeded_rng):
        phenotype = self._phenotype()
        data = derive_generational_data(uniform_genes(0.1), uniform_genes(0.9))
        assert revert_to_ancestor(phenotype, data, seeded_rng) is phenotype

    def test_certain_reversion_takes_an_ancestor(self, seeded_rng):
        phenotype = self._phenotype()
        data = derive_generational_data(uniform_genes(0.1), uniform_genes(0.9))
        reverted = revert_to_ancestor(phenotype, data, seeded_rng, chance=1.0)
        assert isinstance(reverted, SpotPhenotype)
        assert reverted.active_traits == ("own",)
        ancestors = (data.grandparent_a, data.grandparent_b)
        assert any(
            dataclasses.replace(reverted, active_traits=ancestor.active_traits) == ancestor
            for ancestor in ancestors
        )

    def test_nothing_recorded(self, seeded_rng):
        phenotype = self._phenotype()
        assert revert_to_ancestor(phenotype, None, seeded_rng, chance=1.0) is phenotype
        assert revert_to_ancestor(phenotype, GenerationalData(), seeded_rng, chance=1.0) is phenotype

    def test_requires_rng(self):
        with pytest.raises(MissingRNGError):
            revert_to_ancestor(self._phenotype(), None)
