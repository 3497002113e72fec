"""Tests for the Genotype aggregate and its validation."""

import dataclasses
import random

import pytest

from koi.genetics import (
    Allele,
    DominanceMode,
    GeneId,
    Genotype,
    Origin,
    PolygenicLocus,
    Spot,
    SpotShape,
)
from koi.util.rng import MissingRNGError


class TestNormalization:
    def test_empty_genome_becomes_default(self):
        assert Genotype(genome=()).genome == (GeneId.CREAM,)

    def test_empty_slots_are_dropped(self):
        assert Genotype(genome=(None, GeneId.RED, None)).genome == (GeneId.RED,)

    def test_lists_become_tuples(self):
        genotype = Genotype(genome=[GeneId.RED], spots=[Spot(1.0, 2.0, 30.0, GeneId.RED)])
        assert isinstance(genotype.genome, tuple)
        assert isinstance(genotype.spots, tuple)

    @pytest.mark.parametrize("raw,expected", [(150, 100.0), (-3, 0.0), (float("nan"), 50.0), (73.5, 73.5)])
    def test_lightness_is_clamped(self, raw, expected):
        assert Genotype(genome=(GeneId.RED,), lightness=raw).lightness == expected

    def test_is_immutable(self):
        genotype = Genotype(genome=(GeneId.RED,))
        with pytest.raises(dataclasses.FrozenInstanceError):
            genotype.lightness = 10


class TestDerived:
    def test_phenotype(self):
        assert Genotype(genome=(GeneId.RED, GeneId.WHITE, GeneId.RED)).phenotype is GeneId.RED
        assert Genotype(genome=(GeneId.RED,)).phenotype is GeneId.CREAM

    def test_spot_phenotype_requires_spot_genes(self, spotted_genotype):
        assert Genotype(genome=(GeneId.RED,)).spot_phenotype is None
        assert spotted_genotype.spot_phenotype is not None

    def test_generation_defaults_to_zero(self):
        assert Genotype(genome=(GeneId.RED,)).generation == 0


class TestFactories:
    def test_random_genotype_shape(self, seeded_rng):
        for _ in range(50):
            genotype = Genotype.random(seeded_rng)
            assert len(genotype.genome) == 2
            assert genotype.genome[0] is genotype.genome[1]
            assert genotype.phenotype is genotype.genome[0]
            assert genotype.spots == ()
            assert genotype.lightness == 50
            assert genotype.spot_genes is not None
            assert genotype.validate()["ok"]

    def test_random_covers_every_gene(self):
        rng = random.Random(31)
        seen = {Genotype.random(rng).phenotype for _ in range(300)}
        assert seen == set(GeneId)

    def test_requested_gene(self, seeded_rng):
        assert Genotype.random(seeded_rng, gene=GeneId.ORANGE).genome == (GeneId.ORANGE, GeneId.ORANGE)

    def test_starter_is_white(self, seeded_rng):
        assert Genotype.starter(seeded_rng).phenotype is GeneId.WHITE

    def test_random_requires_rng(self):
        with pytest.raises(MissingRNGError):
            Genotype.random()


class TestValidation:
    def test_valid_genotype(self, spotted_genotype):
        assert spotted_genotype.validate() == {"ok": True, "issues": []}
        spotted_genotype.assert_valid()

    def test_large_new_spot_is_valid(self):
        genotype = Genotype(
            genome=(GeneId.RED,),
            spots=(Spot(50.0, 50.0, 230.0, GeneId.RED, SpotShape.OVAL_H),),
        )
        assert genotype.validate()["ok"]

    def test_out_of_range_spot(self):
        genotype = Genotype(
            genome=(GeneId.RED,),
            spots=(Spot(150.0, 50.0, 10.0, GeneId.RED, SpotShape.CIRCLE),),
        )
        issues = genotype.validate()["issues"]
        assert any("spots[0].x" in issue for issue in issues)
        assert any("spots[0].size" in issue for issue in issues)
        with pytest.raises(ValueError, match="Invalid genotype"):
            genotype.assert_valid()

    def test_wrong_dominance_for_locus(self, spotted_genotype):
        genes = spotted_genotype.spot_genes
        bad_density = PolygenicLocus(
            genes.density.allele1, genes.density.allele2, DominanceMode.COMPLETE
        )
        genotype = dataclasses.replace(
            spotted_genotype, spot_genes=dataclasses.replace(genes, density=bad_density)
        )
        issues = genotype.validate()["issues"]
        assert any("spot_genes.density.dominance" in issue for issue in issues)

    def test_swapped_allele_origin(self, spotted_genotype):
        genes = spotted_genotype.spot_genes
        swapped = PolygenicLocus(
            Allele(0.3, Origin.PATERNAL), Allele(0.4, Origin.MATERNAL), genes.edge_blur.dominance
        )
        genotype = dataclasses.replace(
            spotted_genotype, spot_genes=dataclasses.replace(genes, edge_blur=swapped)
        )
        issues = genotype.validate()["issues"]
        assert any("edge_blur.allele1.origin" in issue for issue in issues)
