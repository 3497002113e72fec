"""Genotype serialization/deserialization helpers.

This module is the persistence/transfer boundary for
`koi.genetics.genotype.Genotype`. The surrounding game stores genotypes
verbatim, so the format is plain JSON-compatible primitives with no cycles.

Decoding clamps numeric fields into range but rejects structural damage
(unknown gene ids, a locus missing an allele, a negative spot count) with
`GenotypeError`, since those point to a caller bug rather than to variance.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any, Optional, Union

import orjson

from koi.config.genetics import (
    LIGHTNESS_DEFAULT,
    LIGHTNESS_MAX,
    LIGHTNESS_MIN,
    NEW_SPOT_SIZE_MAX,
    SPOT_POSITION_MAX,
    SPOT_POSITION_MIN,
    SPOT_SIZE_MIN,
)
from koi.errors import GenotypeError
from koi.genetics.catalog import GeneId, SpotShape
from koi.genetics.expression import SpotPhenotype
from koi.genetics.generational import GenerationalData
from koi.genetics.polygenic import (
    LOCUS_SPECS,
    Allele,
    Origin,
    PolygenicLocus,
    SpotGenes,
    parse_dominance,
)
from koi.genetics.spots import Spot

logger = logging.getLogger(__name__)

_PHENOTYPE_FIELDS = [f.name for f in dataclasses.fields(SpotPhenotype) if f.name != "active_traits"]


def _coerce_float(value: Any, default: float, min_val: float, max_val: float) -> float:
    """Coerce to a finite float clamped into range; non-numeric falls back to default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        f = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if math.isnan(f) or math.isinf(f):
        return default
    return max(min_val, min(max_val, f))


def _parse_enum(enum_cls: Any, value: Any, path: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        raise GenotypeError(f"{path}: unknown {enum_cls.__name__} {value!r}") from None


# =============================================================================
# Encoding
# =============================================================================


def spot_to_dict(spot: Spot) -> dict[str, Any]:
    return {
        "x": spot.x,
        "y": spot.y,
        "size": spot.size,
        "color": spot.color.value,
        "shape": spot.shape.value if spot.shape is not None else None,
    }


def spot_genes_to_dict(genes: SpotGenes) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for spec, locus in genes.loci():
        out[spec.name] = {
            "allele1": {"value": locus.allele1.value, "origin": locus.allele1.origin.value},
            "allele2": {"value": locus.allele2.value, "origin": locus.allele2.origin.value},
            "dominance": locus.dominance.value,
        }
    return out


def phenotype_to_dict(phenotype: SpotPhenotype) -> dict[str, Any]:
    out: dict[str, Any] = {name: getattr(phenotype, name) for name in _PHENOTYPE_FIELDS}
    out["active_traits"] = list(phenotype.active_traits)
    return out


def generational_to_dict(data: GenerationalData) -> dict[str, Any]:
    return {
        "generation": data.generation,
        "grandparent_a": phenotype_to_dict(data.grandparent_a) if data.grandparent_a else None,
        "grandparent_b": phenotype_to_dict(data.grandparent_b) if data.grandparent_b else None,
    }


def genotype_to_dict(genotype: Any, *, schema_version: int) -> dict[str, Any]:
    """Serialize a genotype into JSON-compatible primitives."""
    return {
        "schema_version": schema_version,
        "genome": [gene.value for gene in genotype.genome],
        "spots": [spot_to_dict(spot) for spot in genotype.spots],
        "spot_count": len(genotype.spots),
        "lightness": genotype.lightness,
        "spot_genes": (
            spot_genes_to_dict(genotype.spot_genes) if genotype.spot_genes is not None else None
        ),
        "generational": (
            generational_to_dict(genotype.generational)
            if genotype.generational is not None
            else None
        ),
    }


# =============================================================================
# Decoding
# =============================================================================


def spot_from_dict(data: Any, *, path: str) -> Spot:
    if not isinstance(data, dict):
        raise GenotypeError(f"{path}: expected object, got {type(data).__name__}")
    if "color" not in data:
        raise GenotypeError(f"{path}.color: missing")
    shape_raw = data.get("shape")
    return Spot(
        x=_coerce_float(data.get("x"), 50.0, SPOT_POSITION_MIN, SPOT_POSITION_MAX),
        y=_coerce_float(data.get("y"), 50.0, SPOT_POSITION_MIN, SPOT_POSITION_MAX),
        size=_coerce_float(data.get("size"), SPOT_SIZE_MIN, SPOT_SIZE_MIN, NEW_SPOT_SIZE_MAX),
        color=_parse_enum(GeneId, data["color"], f"{path}.color"),
        shape=_parse_enum(SpotShape, shape_raw, f"{path}.shape") if shape_raw is not None else None,
    )


def _allele_from_dict(data: Any, origin: Origin, *, path: str) -> Allele:
    if not isinstance(data, dict) or "value" not in data:
        raise GenotypeError(f"{path}: missing allele")
    value = _coerce_float(data["value"], 0.5, 0.0, 1.0)
    return Allele(value, origin)


def spot_genes_from_dict(data: Any, *, path: str) -> SpotGenes:
    if not isinstance(data, dict):
        raise GenotypeError(f"{path}: expected object, got {type(data).__name__}")
    loci: dict[str, PolygenicLocus] = {}
    for spec in LOCUS_SPECS:
        raw = data.get(spec.name)
        if not isinstance(raw, dict):
            raise GenotypeError(f"{path}.{spec.name}: missing locus")
        loci[spec.name] = PolygenicLocus(
            _allele_from_dict(raw.get("allele1"), Origin.MATERNAL, path=f"{path}.{spec.name}.allele1"),
            _allele_from_dict(raw.get("allele2"), Origin.PATERNAL, path=f"{path}.{spec.name}.allele2"),
            parse_dominance(raw.get("dominance", spec.dominance.value)),
        )
    return SpotGenes(**loci)


def phenotype_from_dict(data: Any, *, path: str) -> Optional[SpotPhenotype]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise GenotypeError(f"{path}: expected object, got {type(data).__name__}")
    values = {name: _coerce_float(data.get(name), 0.0, -1e6, 1e6) for name in _PHENOTYPE_FIELDS}
    traits = data.get("active_traits") or []
    return SpotPhenotype(**values, active_traits=tuple(str(t) for t in traits))


def generational_from_dict(data: Any, *, path: str) -> Optional[GenerationalData]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise GenotypeError(f"{path}: expected object, got {type(data).__name__}")
    generation = data.get("generation", 0)
    if isinstance(generation, bool) or not isinstance(generation, int) or generation < 0:
        raise GenotypeError(f"{path}.generation: expected non-negative int, got {generation!r}")
    return GenerationalData(
        generation=generation,
        grandparent_a=phenotype_from_dict(data.get("grandparent_a"), path=f"{path}.grandparent_a"),
        grandparent_b=phenotype_from_dict(data.get("grandparent_b"), path=f"{path}.grandparent_b"),
    )


def genotype_from_dict(data: Any, *, schema_version_expected: int) -> Any:
    """Deserialize a genotype from JSON-compatible primitives.

    Unknown fields are ignored. Raises GenotypeError on structural damage.
    """
    from koi.genetics.genotype import Genotype

    if not isinstance(data, dict):
        raise GenotypeError(f"genotype: expected object, got {type(data).__name__}")

    schema_version = data.get("schema_version")
    if schema_version is not None and schema_version != schema_version_expected:
        logger.debug(
            "Deserializing genotype schema_version=%s (expected %s)",
            schema_version,
            schema_version_expected,
        )

    genome_raw = data.get("genome") or []
    if not isinstance(genome_raw, list):
        raise GenotypeError("genotype.genome: expected list")
    genome = tuple(
        _parse_enum(GeneId, gene, f"genotype.genome[{i}]")
        for i, gene in enumerate(genome_raw)
        if gene
    )

    spots_raw = data.get("spots") or []
    if not isinstance(spots_raw, list):
        raise GenotypeError("genotype.spots: expected list")
    declared = data.get("spot_count")
    if declared is not None:
        if isinstance(declared, bool) or not isinstance(declared, int) or declared < 0:
            raise GenotypeError(f"genotype.spot_count: expected non-negative int, got {declared!r}")
        if declared != len(spots_raw):
            raise GenotypeError(
                f"genotype.spot_count: declares {declared} spots but {len(spots_raw)} present"
            )
    spots = tuple(spot_from_dict(raw, path=f"genotype.spots[{i}]") for i, raw in enumerate(spots_raw))

    spot_genes_raw = data.get("spot_genes")
    return Genotype(
        genome=genome,
        spots=spots,
        lightness=_coerce_float(data.get("lightness"), LIGHTNESS_DEFAULT, LIGHTNESS_MIN, LIGHTNESS_MAX),
        spot_genes=(
            spot_genes_from_dict(spot_genes_raw, path="genotype.spot_genes")
            if spot_genes_raw is not None
            else None
        ),
        generational=generational_from_dict(data.get("generational"), path="genotype.generational"),
    )


# =============================================================================
# JSON
# =============================================================================


def genotype_to_json(genotype: Any) -> str:
    return orjson.dumps(genotype.to_dict()).decode("utf-8")


def genotype_from_json(payload: Union[str, bytes]) -> Any:
    """Parse a JSON document produced by `genotype_to_json`."""
    from koi.genetics.genotype import Genotype

    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise GenotypeError(f"genotype: invalid JSON ({exc})") from exc
    return Genotype.from_dict(data)
