"""Koi genetics package.

This package provides the breeding core for koi:

- A closed catalog of color genes with rarity, dominance and display color
- Recessive phenotype resolution over a variable-length color genome
- Gamete formation with substitution/expansion/special/deletion mutation
- Spot pattern inheritance with a self-stabilizing spot count
- Ten diploid polygenic loci controlling how spots are drawn
- Generation tracking with ancestor snapshots for atavism

Every random operation takes an explicit ``random.Random``; nothing here
keeps state between calls.
"""

# Re-export main classes for package convenience
from koi.genetics.breeding import BreedingResult, breed, breed_clutch, inherit_lightness
from koi.genetics.catalog import (
    DEFAULT_GENE,
    DOMINANCE_ORDER,
    GENE_COLOR_MAP,
    GENE_RARITY,
    GeneId,
    SpotShape,
    display_hex,
    dominance_rank,
    rarity_weight,
)
from koi.genetics.expression import SpotPhenotype, express_spot_phenotype
from koi.genetics.gamete import breed_genome, make_gamete
from koi.genetics.generational import GenerationalData, derive_generational_data
from koi.genetics.genotype import Genotype
from koi.genetics.phenotype import resolve_phenotype
from koi.genetics.polygenic import (
    Allele,
    DominanceMode,
    Origin,
    PolygenicLocus,
    SpotGenes,
    breed_locus,
    express,
    random_locus,
)
from koi.genetics.reproduction import BreedingParams, InheritanceParams
from koi.genetics.sampling import weighted_choice
from koi.genetics.spots import Spot, breed_spots

__all__ = [
    # Core classes
    "Genotype",
    "GeneId",
    "Spot",
    "SpotShape",
    "SpotGenes",
    "PolygenicLocus",
    "Allele",
    "Origin",
    "DominanceMode",
    "SpotPhenotype",
    "GenerationalData",
    # Catalog
    "DEFAULT_GENE",
    "DOMINANCE_ORDER",
    "GENE_COLOR_MAP",
    "GENE_RARITY",
    "display_hex",
    "dominance_rank",
    "rarity_weight",
    # Breeding API
    "BreedingParams",
    "InheritanceParams",
    "BreedingResult",
    "breed",
    "breed_clutch",
    "breed_genome",
    "breed_spots",
    "breed_locus",
    "make_gamete",
    "inherit_lightness",
    "derive_generational_data",
    # Expression
    "resolve_phenotype",
    "express",
    "express_spot_phenotype",
    "random_locus",
    "weighted_choice",
]
