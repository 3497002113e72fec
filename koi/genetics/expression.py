"""Gene expression logic for translating spot genes to a spot phenotype.

Each phenotype field is an affine, non-decreasing function of one locus's
expressed value, so the same genes always render the same way and raising
an allele never lowers the trait it controls. Threshold traits are reported
as labels for the renderer and for achievements; they do not alter the
numeric fields.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from koi.genetics.polygenic import SpotGenes

# =============================================================================
# Tuning Constants
# =============================================================================

# locus name -> (offset, scale) of the phenotype field derived from it
_PHENOTYPE_MAPPING: Dict[str, Tuple[float, float]] = {
    "opacity_base": (0.0, 1.0),
    "opacity_variance": (0.0, 1.0),
    "color_hue": (0.0, 1.0),
    "color_saturation": (0.0, 1.0),
    "size_base": (0.5, 1.5),  # 0.5x - 2.0x
    "size_variance": (0.0, 1.0),
    "edge_blur": (0.0, 1.0),
    "density": (0.5, 0.5),  # 50% - 100%
    "position_bias_x": (-0.5, 1.0),
    "position_bias_y": (-0.5, 1.0),
}


@dataclass(frozen=True)
class SpotPhenotype:
    """Continuous spot-rendering parameters derived from SpotGenes."""

    opacity_base: float
    opacity_variance: float
    color_hue: float  # fraction of a full hue rotation
    color_saturation: float
    size_multiplier: float
    size_variance: float
    edge_blur: float
    density: float
    position_bias_x: float
    position_bias_y: float
    active_traits: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ThresholdTrait:
    """A named look that appears when every listed locus is expressed at or above its minimum."""

    id: str
    name: str
    requirements: Mapping[str, float]
    description: str = ""

    def is_active(self, expressed: Mapping[str, float]) -> bool:
        return all(expressed[name] >= minimum for name, minimum in self.requirements.items())


THRESHOLD_TRAITS: List[ThresholdTrait] = [
    ThresholdTrait(
        "golden_sheen",
        "Golden Sheen",
        {"color_hue": 0.75, "color_saturation": 0.7, "opacity_base": 0.6},
        "Spots glow with a golden luster",
    ),
    ThresholdTrait(
        "ghost_pattern",
        "Ghost Pattern",
        {"opacity_base": 0.3, "edge_blur": 0.75, "density": 0.4},
        "A faint, barely visible pattern",
    ),
    ThresholdTrait(
        "mega_spot",
        "Mega Spot",
        {"size_base": 0.85, "size_variance": 0.25, "density": 0.75},
        "Large, even spots",
    ),
    ThresholdTrait(
        "scattered_dots",
        "Scattered Dots",
        {"size_base": 0.25, "size_variance": 0.8, "density": 0.9},
        "Many small dots of varying size",
    ),
    ThresholdTrait(
        "symmetry_master",
        "Symmetry Master",
        {"position_bias_x": 0.5, "position_bias_y": 0.5, "size_variance": 0.2},
        "Perfectly balanced spot placement",
    ),
]


def active_threshold_traits(expressed: Mapping[str, float]) -> Tuple[str, ...]:
    return tuple(trait.id for trait in THRESHOLD_TRAITS if trait.is_active(expressed))


def _map(name: str, expressed: Mapping[str, float]) -> float:
    offset, scale = _PHENOTYPE_MAPPING[name]
    return offset + scale * expressed[name]


def express_spot_phenotype(genes: SpotGenes) -> SpotPhenotype:
    """Calculate the spot phenotype from spot genes."""
    expressed = genes.expressed()
    return SpotPhenotype(
        opacity_base=_map("opacity_base", expressed),
        opacity_variance=_map("opacity_variance", expressed),
        color_hue=_map("color_hue", expressed),
        color_saturation=_map("color_saturation", expressed),
        size_multiplier=_map("size_base", expressed),
        size_variance=_map("size_variance", expressed),
        edge_blur=_map("edge_blur", expressed),
        density=_map("density", expressed),
        position_bias_x=_map("position_bias_x", expressed),
        position_bias_y=_map("position_bias_y", expressed),
        active_traits=active_threshold_traits(expressed),
    )
