"""Static gene tables.

Color genes form a small closed set. Each id carries a rarity weight (smaller
means more common), a rank in the total dominance order (index 0 is the most
dominant) and a fixed display color consumed by the renderer.
"""

from enum import Enum
from typing import Dict, Tuple


class GeneId(Enum):
    """Color gene identifiers."""

    BLACK = "black"
    RED = "red"
    YELLOW = "yellow"
    WHITE = "white"
    ORANGE = "orange"
    CREAM = "cream"


class SpotShape(Enum):
    """Spot outlines known to the renderer."""

    CIRCLE = "circle"
    HEXAGON = "hexagon"
    POLYGON = "polygon"
    OVAL_H = "oval_h"
    OVAL_V = "oval_v"


# Base/neutral color expressed when no gene reaches the two-copy threshold.
DEFAULT_GENE = GeneId.CREAM

GENE_RARITY: Dict[GeneId, float] = {
    GeneId.BLACK: 3,
    GeneId.WHITE: 3,
    GeneId.YELLOW: 3,
    GeneId.ORANGE: 3,
    GeneId.RED: 3,
    GeneId.CREAM: 1,
}

# Dark colors dominate light ones.
DOMINANCE_ORDER: Tuple[GeneId, ...] = (
    GeneId.BLACK,
    GeneId.RED,
    GeneId.ORANGE,
    GeneId.YELLOW,
    GeneId.CREAM,
    GeneId.WHITE,
)

GENE_COLOR_MAP: Dict[GeneId, str] = {
    GeneId.BLACK: "#252525",
    GeneId.RED: "#E53E3E",
    GeneId.YELLOW: "#F6E05E",
    GeneId.WHITE: "#FFFFFF",
    GeneId.ORANGE: "#ED8936",
    GeneId.CREAM: "#FEFDE7",
}

# Colors a spot can take when it is created or mutates.
SPOT_COLORS: Tuple[GeneId, ...] = (
    GeneId.RED,
    GeneId.ORANGE,
    GeneId.YELLOW,
    GeneId.WHITE,
    GeneId.BLACK,
)

# Candidates for substitution mutation in a gamete.
RECESSIVE_COLORS: Tuple[GeneId, ...] = (
    GeneId.ORANGE,
    GeneId.YELLOW,
    GeneId.WHITE,
    GeneId.CREAM,
    GeneId.BLACK,
    GeneId.RED,
)

# No special morphs are enabled yet.
SPECIAL_COLORS: Tuple[GeneId, ...] = ()

# Shapes available to newly grown spots (vertical ovals are retired).
NEW_SPOT_SHAPES: Tuple[SpotShape, ...] = tuple(
    shape for shape in SpotShape if shape is not SpotShape.OVAL_V
)

# Fallback for inherited spots recorded without a shape.
LEGACY_SPOT_SHAPES: Tuple[SpotShape, ...] = (
    SpotShape.CIRCLE,
    SpotShape.HEXAGON,
    SpotShape.POLYGON,
)

_UNRANKED = len(DOMINANCE_ORDER)


def rarity_weight(gene: GeneId) -> float:
    """Return the configured rarity weight, 1 for unlisted genes."""
    return GENE_RARITY.get(gene, 1)


def dominance_rank(gene: GeneId) -> int:
    """Return the gene's position in the dominance order; unranked genes sort last."""
    try:
        return DOMINANCE_ORDER.index(gene)
    except ValueError:
        return _UNRANKED


def display_hex(gene: GeneId) -> str:
    return GENE_COLOR_MAP.get(gene, "#000000")
