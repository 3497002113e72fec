"""Genotype class for koi.

This module provides the Genotype aggregate that represents the complete
genetic makeup of one koi: the variable-length color genome, the spot list,
the lightness gene, the ten polygenic spot loci and the generational record.

Genotypes are immutable. Breeding builds a new one from two parents; an edit
(e.g. a debug tool changing genes) replaces the genotype wholesale.
"""

import logging
import math
import random as pyrandom
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from koi.config.genetics import LIGHTNESS_DEFAULT, LIGHTNESS_MAX, LIGHTNESS_MIN
from koi.genetics.catalog import DEFAULT_GENE, GeneId
from koi.genetics.expression import SpotPhenotype, express_spot_phenotype
from koi.genetics.generational import GenerationalData
from koi.genetics.phenotype import resolve_phenotype
from koi.genetics.polygenic import SpotGenes
from koi.genetics.spots import Spot
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)
GENOTYPE_SCHEMA_VERSION = 1

# Color given to every starter fish.
STARTER_GENE = GeneId.WHITE


@dataclass(frozen=True)
class Genotype:
    """Represents the complete genetic makeup of a koi.

    Attributes:
        genome: Color gene copies; any length of at least one
        spots: Spot patches (order carries no meaning)
        lightness: Lightness gene, 0-100 with 50 as the standard shade
        spot_genes: Ten polygenic spot loci; None for legacy fish
        generational: Generation counter and ancestor snapshots
    """

    genome: Tuple[GeneId, ...]
    spots: Tuple[Spot, ...] = ()
    lightness: float = LIGHTNESS_DEFAULT
    spot_genes: Optional[SpotGenes] = None
    generational: Optional[GenerationalData] = None

    def __post_init__(self) -> None:
        genome = tuple(gene for gene in self.genome if gene)
        object.__setattr__(self, "genome", genome or (DEFAULT_GENE,))
        object.__setattr__(self, "spots", tuple(self.spots))
        lightness = float(self.lightness)
        if math.isnan(lightness):
            lightness = LIGHTNESS_DEFAULT
        object.__setattr__(self, "lightness", max(LIGHTNESS_MIN, min(LIGHTNESS_MAX, lightness)))

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def phenotype(self) -> GeneId:
        """The expressed body color."""
        return resolve_phenotype(self.genome)

    @property
    def spot_phenotype(self) -> Optional[SpotPhenotype]:
        if self.spot_genes is None:
            return None
        return express_spot_phenotype(self.spot_genes)

    @property
    def generation(self) -> int:
        return self.generational.generation if self.generational is not None else 0

    # =========================================================================
    # Serialization & Validation
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize this genotype into JSON-compatible primitives.

        This is the stable boundary format for persistence and transfer.
        """
        from koi.genetics.genome_codec import genotype_to_dict

        return genotype_to_dict(self, schema_version=GENOTYPE_SCHEMA_VERSION)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Genotype":
        """Deserialize a genotype from JSON-compatible primitives."""
        from koi.genetics.genome_codec import genotype_from_dict

        return genotype_from_dict(data, schema_version_expected=GENOTYPE_SCHEMA_VERSION)

    def validate(self) -> Dict[str, Any]:
        """Validate genes, spots and loci; returns a dict with any issues found."""
        from koi.genetics.validation import validate_genotype

        issues = validate_genotype(self, path="genotype")
        return {"ok": not issues, "issues": issues}

    def assert_valid(self) -> None:
        """Raise ValueError if validation finds problems (debug aid)."""
        result = self.validate()
        if result["ok"]:
            return
        issues = "\n".join(result["issues"])
        raise ValueError(f"Invalid genotype:\n{issues}")

    # =========================================================================
    # Factory Methods
    # =========================================================================

    @classmethod
    def starter(cls, rng: Optional[pyrandom.Random] = None) -> "Genotype":
        """Create the genotype every new player starts with."""
        rng = require_rng_param(rng, "Genotype.starter")
        return cls.random(rng, gene=STARTER_GENE)

    @classmethod
    def random(
        cls,
        rng: Optional[pyrandom.Random] = None,
        *,
        gene: Optional[GeneId] = None,
    ) -> "Genotype":
        """Create a shop/seed genotype: two copies of one color, no spots.

        The color is chosen uniformly when not given.
        """
        rng = require_rng_param(rng, "Genotype.random")
        if gene is None:
            gene = rng.choice(list(GeneId))
        return cls(
            genome=(gene, gene),
            spots=(),
            lightness=LIGHTNESS_DEFAULT,
            spot_genes=SpotGenes.random(rng),
        )
