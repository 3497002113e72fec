"""Validation helpers for genetic data structures.

These functions are intended for debugging and safety checks, not hot-path logic.
They help catch subtle bugs (out-of-range traits, wrong types) close to the source.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List

from koi.config.genetics import (
    LIGHTNESS_MAX,
    LIGHTNESS_MIN,
    NEW_SPOT_SIZE_MAX,
    SPOT_POSITION_MAX,
    SPOT_POSITION_MIN,
    SPOT_SIZE_MIN,
)
from koi.genetics.catalog import GeneId, SpotShape
from koi.genetics.polygenic import LOCUS_SPECS, Allele, Origin, PolygenicLocus, SpotGenes
from koi.genetics.spots import Spot

if TYPE_CHECKING:
    from koi.genetics.genotype import Genotype


def _check_range(value: object, low: float, high: float, path: str, issues: List[str]) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        issues.append(f"{path}: expected number, got {type(value).__name__}")
        return
    if not math.isfinite(float(value)):
        issues.append(f"{path}: not finite ({value})")
        return
    if value < low or value > high:
        issues.append(f"{path}: {value} not in [{low}, {high}]")


def validate_spot(spot: Spot, *, path: str) -> List[str]:
    issues: List[str] = []
    if not isinstance(spot, Spot):
        return [f"{path}: expected Spot, got {type(spot).__name__}"]
    _check_range(spot.x, SPOT_POSITION_MIN, SPOT_POSITION_MAX, f"{path}.x", issues)
    _check_range(spot.y, SPOT_POSITION_MIN, SPOT_POSITION_MAX, f"{path}.y", issues)
    _check_range(spot.size, SPOT_SIZE_MIN, NEW_SPOT_SIZE_MAX, f"{path}.size", issues)
    if not isinstance(spot.color, GeneId):
        issues.append(f"{path}.color: expected GeneId, got {type(spot.color).__name__}")
    if spot.shape is not None and not isinstance(spot.shape, SpotShape):
        issues.append(f"{path}.shape: expected SpotShape, got {type(spot.shape).__name__}")
    return issues


def _validate_allele(allele: Allele, origin: Origin, *, path: str) -> List[str]:
    issues: List[str] = []
    _check_range(allele.value, 0.0, 1.0, f"{path}.value", issues)
    if allele.origin is not origin:
        issues.append(f"{path}.origin: expected {origin.value}, got {allele.origin}")
    return issues


def validate_spot_genes(genes: SpotGenes, *, path: str) -> List[str]:
    """Validate a SpotGenes container against LOCUS_SPECS.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []
    for spec in LOCUS_SPECS:
        locus = getattr(genes, spec.name, None)
        if not isinstance(locus, PolygenicLocus):
            issues.append(f"{path}.{spec.name}: missing locus")
            continue
        issues.extend(_validate_allele(locus.allele1, Origin.MATERNAL, path=f"{path}.{spec.name}.allele1"))
        issues.extend(_validate_allele(locus.allele2, Origin.PATERNAL, path=f"{path}.{spec.name}.allele2"))
        if locus.dominance is not spec.dominance:
            issues.append(
                f"{path}.{spec.name}.dominance: expected {spec.dominance.value}, got {locus.dominance.value}"
            )
    return issues


def validate_genotype(genotype: "Genotype", *, path: str) -> List[str]:
    issues: List[str] = []
    if not genotype.genome:
        issues.append(f"{path}.genome: empty")
    for i, gene in enumerate(genotype.genome):
        if not isinstance(gene, GeneId):
            issues.append(f"{path}.genome[{i}]: expected GeneId, got {type(gene).__name__}")
    for i, spot in enumerate(genotype.spots):
        issues.extend(validate_spot(spot, path=f"{path}.spots[{i}]"))
    _check_range(genotype.lightness, LIGHTNESS_MIN, LIGHTNESS_MAX, f"{path}.lightness", issues)
    if genotype.spot_genes is not None:
        issues.extend(validate_spot_genes(genotype.spot_genes, path=f"{path}.spot_genes"))
    if genotype.generational is not None and genotype.generational.generation < 0:
        issues.append(f"{path}.generational.generation: {genotype.generational.generation} < 0")
    return issues
