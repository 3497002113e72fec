"""Polygenic spot genes.

Ten quantitative loci control how spots are drawn. Each locus is a diploid
pair of alleles in [0, 1], tagged with the parent they came from, plus a
dominance mode that decides how the pair is expressed.

This module provides:
- Allele / PolygenicLocus: the immutable diploid building blocks
- LocusSpec: declarative per-locus configuration (dominance, mutation)
- SpotGenes: the ten-locus container
- Breeding helpers: per-locus segregation and full meiosis with linkage,
  point/deletion mutation, drift and an inbreeding penalty
"""

import logging
import random as pyrandom
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from koi.config.genetics import INBREEDING_ALLELE_LOSS, INBREEDING_PENALTY_SCALE
from koi.errors import GenotypeError, UnsupportedDominanceError
from koi.genetics.reproduction import InheritanceParams
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class Origin(Enum):
    """Which parent an allele was inherited from."""

    MATERNAL = "maternal"
    PATERNAL = "paternal"


class DominanceMode(Enum):
    """How the two alleles of a locus combine into one expressed value.

    INCOMPLETE: mean of the two alleles
    COMPLETE: the larger allele
    RECESSIVE: the smaller allele (both must be high to show)
    CODOMINANCE: mean plus a fifth of their difference
    """

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    RECESSIVE = "recessive"
    CODOMINANCE = "codominance"


_DOMINANCE_RULES: Dict[DominanceMode, Callable[[float, float], float]] = {
    DominanceMode.COMPLETE: max,
    DominanceMode.INCOMPLETE: lambda a, b: (a + b) / 2,
    DominanceMode.RECESSIVE: min,
    DominanceMode.CODOMINANCE: lambda a, b: a * 0.5 + b * 0.5 + abs(a - b) * 0.2,
}


def parse_dominance(value: object) -> DominanceMode:
    """Coerce a serialized dominance mode, rejecting anything unknown."""
    if isinstance(value, DominanceMode):
        return value
    try:
        return DominanceMode(value)
    except ValueError:
        raise UnsupportedDominanceError(f"Unsupported dominance mode: {value!r}") from None


@dataclass(frozen=True)
class Allele:
    value: float
    origin: Origin


@dataclass(frozen=True)
class PolygenicLocus:
    """A diploid locus: exactly two alleles and a dominance mode."""

    allele1: Allele
    allele2: Allele
    dominance: DominanceMode = DominanceMode.INCOMPLETE

    def __post_init__(self) -> None:
        if not isinstance(self.allele1, Allele) or not isinstance(self.allele2, Allele):
            raise GenotypeError("PolygenicLocus requires two alleles")
        if not isinstance(self.dominance, DominanceMode):
            raise UnsupportedDominanceError(f"Unsupported dominance mode: {self.dominance!r}")

    @property
    def alleles(self) -> Tuple[Allele, Allele]:
        return (self.allele1, self.allele2)


def express(locus: PolygenicLocus) -> float:
    """Express a locus as a single value in [0, 1]."""
    rule = _DOMINANCE_RULES.get(locus.dominance)
    if rule is None:
        raise UnsupportedDominanceError(f"No expression rule for {locus.dominance!r}")
    return _clamp01(rule(locus.allele1.value, locus.allele2.value))


class MutationKind(Enum):
    POINT = "point"  # uniform +/- magnitude
    DELETION = "deletion"  # scale down by magnitude


@dataclass(frozen=True)
class LocusSpec:
    """Declarative specification for one spot locus.

    Attributes:
        name: Attribute name on SpotGenes
        dominance: Dominance mode every individual uses for this locus
        mutation_kind: Kind of allele mutation applied during breeding
        mutation_rate: Per-allele mutation probability
        mutation_magnitude: Size of a mutation
    """

    name: str
    dominance: DominanceMode
    mutation_kind: MutationKind = MutationKind.POINT
    mutation_rate: float = 0.02
    mutation_magnitude: float = 0.15

    def mutate(self, value: float, rng: pyrandom.Random) -> float:
        if rng.random() >= self.mutation_rate:
            return value
        if self.mutation_kind is MutationKind.DELETION:
            value *= 1 - self.mutation_magnitude
        else:
            value += (rng.random() - 0.5) * 2 * self.mutation_magnitude
        return _clamp01(value)


LOCUS_SPECS: List[LocusSpec] = [
    LocusSpec("opacity_base", DominanceMode.INCOMPLETE, mutation_rate=0.02, mutation_magnitude=0.15),
    LocusSpec("opacity_variance", DominanceMode.RECESSIVE, mutation_rate=0.03, mutation_magnitude=0.20),
    LocusSpec("color_hue", DominanceMode.CODOMINANCE, mutation_rate=0.05, mutation_magnitude=0.25),
    LocusSpec("color_saturation", DominanceMode.COMPLETE, mutation_rate=0.03, mutation_magnitude=0.15),
    LocusSpec("size_base", DominanceMode.INCOMPLETE, mutation_rate=0.02, mutation_magnitude=0.10),
    LocusSpec("size_variance", DominanceMode.RECESSIVE, mutation_rate=0.04, mutation_magnitude=0.20),
    LocusSpec("edge_blur", DominanceMode.COMPLETE, mutation_rate=0.02, mutation_magnitude=0.15),
    LocusSpec(
        "density",
        DominanceMode.INCOMPLETE,
        mutation_kind=MutationKind.DELETION,
        mutation_rate=0.01,
        mutation_magnitude=0.30,
    ),
    LocusSpec("position_bias_x", DominanceMode.CODOMINANCE, mutation_rate=0.03, mutation_magnitude=0.15),
    LocusSpec("position_bias_y", DominanceMode.CODOMINANCE, mutation_rate=0.03, mutation_magnitude=0.15),
]


# Loci that tend to travel together through meiosis, with the chance the
# second locus is drawn from the same parental slot as the first.
LINKAGE_GROUPS: List[Tuple[str, str, float]] = [
    ("opacity_base", "opacity_variance", 0.7),
    ("color_hue", "color_saturation", 0.8),
    ("size_base", "size_variance", 0.6),
    ("position_bias_x", "position_bias_y", 0.9),
]


def linkage_partner(name: str) -> Optional[Tuple[str, float]]:
    for first, second, strength in LINKAGE_GROUPS:
        if name == first:
            return second, strength
        if name == second:
            return first, strength
    return None


def random_locus(
    rng: Optional[pyrandom.Random] = None,
    dominance: DominanceMode = DominanceMode.INCOMPLETE,
) -> PolygenicLocus:
    """Create a locus with two uniformly random alleles."""
    rng = require_rng_param(rng, "random_locus")
    return PolygenicLocus(
        Allele(rng.random(), Origin.MATERNAL),
        Allele(rng.random(), Origin.PATERNAL),
        dominance,
    )


def breed_locus(
    mother: PolygenicLocus,
    father: PolygenicLocus,
    rng: Optional[pyrandom.Random] = None,
) -> PolygenicLocus:
    """Draw one allele from each parent, uniformly and independently."""
    rng = require_rng_param(rng, "breed_locus")
    maternal = rng.choice(mother.alleles)
    paternal = rng.choice(father.alleles)
    return PolygenicLocus(
        Allele(maternal.value, Origin.MATERNAL),
        Allele(paternal.value, Origin.PATERNAL),
        mother.dominance,
    )


@dataclass(frozen=True)
class SpotGenes:
    """The ten spot loci of one individual."""

    opacity_base: PolygenicLocus
    opacity_variance: PolygenicLocus
    color_hue: PolygenicLocus
    color_saturation: PolygenicLocus
    size_base: PolygenicLocus
    size_variance: PolygenicLocus
    edge_blur: PolygenicLocus
    density: PolygenicLocus
    position_bias_x: PolygenicLocus
    position_bias_y: PolygenicLocus

    def __post_init__(self) -> None:
        for f in fields(self):
            if not isinstance(getattr(self, f.name), PolygenicLocus):
                raise GenotypeError(f"SpotGenes.{f.name}: expected PolygenicLocus")

    def loci(self) -> Iterator[Tuple[LocusSpec, PolygenicLocus]]:
        for spec in LOCUS_SPECS:
            yield spec, getattr(self, spec.name)

    def expressed(self) -> Dict[str, float]:
        """Expressed value per locus name."""
        return {spec.name: express(locus) for spec, locus in self.loci()}

    @classmethod
    def random(cls, rng: pyrandom.Random) -> "SpotGenes":
        """Generate random spot genes using each locus's configured dominance."""
        return cls(**{spec.name: random_locus(rng, spec.dominance) for spec in LOCUS_SPECS})


def inbreeding_coefficient(genes_a: SpotGenes, genes_b: SpotGenes) -> float:
    """Similarity of two parents' expressed loci, 0.0 (unrelated) to 1.0 (identical)."""
    similarity = sum(
        1.0 - abs(express(locus) - express(getattr(genes_b, spec.name)))
        for spec, locus in genes_a.loci()
    )
    return similarity / len(LOCUS_SPECS)


def _meiosis(
    genes: SpotGenes, rng: pyrandom.Random, params: InheritanceParams
) -> Dict[str, float]:
    """Pick one allele value per locus, honoring linkage between paired loci."""
    slots: Dict[str, int] = {}
    gamete: Dict[str, float] = {}
    for spec, locus in genes.loci():
        slot = None
        partner = linkage_partner(spec.name) if params.linkage else None
        if partner is not None and partner[0] in slots and rng.random() < partner[1]:
            slot = slots[partner[0]]
        if slot is None:
            slot = 0 if rng.random() < 0.5 else 1
        slots[spec.name] = slot
        gamete[spec.name] = locus.alleles[slot].value
    return gamete


def _vary(value: float, spec: LocusSpec, rng: pyrandom.Random, params: InheritanceParams) -> float:
    if params.mutation:
        value = spec.mutate(value, rng)
    if params.drift_rate > 0:
        value = _clamp01(value + (rng.random() - 0.5) * 2 * params.drift_rate)
    return value


def breed_spot_genes(
    genes_a: Optional[SpotGenes],
    genes_b: Optional[SpotGenes],
    rng: Optional[pyrandom.Random] = None,
    params: Optional[InheritanceParams] = None,
) -> SpotGenes:
    """Breed two ten-locus sets into one.

    A parent without spot genes contributes nothing: the child takes the other
    parent's set as-is, or a fresh random set when neither parent has one.
    """
    rng = require_rng_param(rng, "breed_spot_genes")
    params = params or InheritanceParams()
    if genes_a is None and genes_b is None:
        return SpotGenes.random(rng)
    if genes_a is None or genes_b is None:
        return genes_a if genes_a is not None else genes_b

    gamete_a = _meiosis(genes_a, rng, params)
    gamete_b = _meiosis(genes_b, rng, params)

    coefficient = inbreeding_coefficient(genes_a, genes_b)
    penalty = 0.0
    if coefficient > params.inbreeding_threshold:
        penalty = (coefficient - params.inbreeding_threshold) * INBREEDING_PENALTY_SCALE
        logger.debug("Inbreeding coefficient %.3f, penalty %.3f", coefficient, penalty)

    child: Dict[str, PolygenicLocus] = {}
    for spec in LOCUS_SPECS:
        maternal = _vary(gamete_a[spec.name], spec, rng, params)
        paternal = _vary(gamete_b[spec.name], spec, rng, params)
        if penalty > 0 and rng.random() < penalty:
            maternal *= 1 - penalty * INBREEDING_ALLELE_LOSS
        child[spec.name] = PolygenicLocus(
            Allele(maternal, Origin.MATERNAL),
            Allele(paternal, Origin.PATERNAL),
            spec.dominance,
        )
    return SpotGenes(**child)
