"""Spot pattern inheritance.

A child's spot count starts from its parents' counts and then drifts by at
most one spot, with weights that favor growth on sparse fish and loss on
heavily spotted ones:

    add    = e^(-n/10)
    delete = 1 - e^(-n/10)
    keep   = e^(-n/20)

Only as many spots as a single parent carried can be inherited. Anything past
that is new growth and is synthesized fresh, mostly in colors the parents
already show.
"""

import logging
import math
import random as pyrandom
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from koi.config.genetics import (
    NEW_SPOT_SIZE_MAX,
    SPOT_ADD_DECAY,
    SPOT_KEEP_DECAY,
    SPOT_KEEP_MAX_CHANCE,
    SPOT_POSITION_MAX,
    SPOT_POSITION_MIN,
    SPOT_SIZE_MAX,
    SPOT_SIZE_MIN,
)
from koi.genetics.catalog import (
    LEGACY_SPOT_SHAPES,
    NEW_SPOT_SHAPES,
    SPOT_COLORS,
    GeneId,
    SpotShape,
)
from koi.genetics.reproduction import BreedingParams
from koi.genetics.sampling import weighted_choice
from koi.util.rng import require_rng_param

logger = logging.getLogger(__name__)

_DEFAULT_PARAMS = BreedingParams()


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


@dataclass(frozen=True)
class Spot:
    """A single spot patch.

    Attributes:
        x: Horizontal position as a percentage of body length (0-100)
        y: Vertical position as a percentage of body width (0-100)
        size: Size as a percentage of body width
        color: Color gene of the spot
        shape: Outline; None only for legacy records
    """

    x: float
    y: float
    size: float
    color: GeneId
    shape: Optional[SpotShape] = None


def random_position(rng: pyrandom.Random) -> Tuple[float, float]:
    return (
        rng.uniform(SPOT_POSITION_MIN, SPOT_POSITION_MAX),
        rng.uniform(SPOT_POSITION_MIN, SPOT_POSITION_MAX),
    )


def random_spot(
    rng: Optional[pyrandom.Random] = None,
    color: Optional[GeneId] = None,
) -> Spot:
    """Grow a new spot with a random position, size and shape.

    The color is drawn by rarity unless one is given.
    """
    rng = require_rng_param(rng, "random_spot")
    shape = rng.choice(NEW_SPOT_SHAPES)
    size = rng.uniform(SPOT_SIZE_MIN, NEW_SPOT_SIZE_MAX)
    if color is None:
        color = weighted_choice(SPOT_COLORS, rng)
    x, y = random_position(rng)
    return Spot(x=x, y=y, size=size, color=color, shape=shape)


def base_spot_count(
    count_a: int,
    count_b: int,
    rng: Optional[pyrandom.Random] = None,
) -> int:
    """Pick the larger parent's count or the floored mean, 50/50."""
    rng = require_rng_param(rng, "base_spot_count")
    max_n = max(count_a, count_b)
    blended = (max_n + min(count_a, count_b)) // 2
    return max_n if rng.random() < SPOT_KEEP_MAX_CHANCE else blended


def spot_count_weights(n: int) -> Tuple[float, float, float]:
    """Return the unnormalized (add, delete, keep) weights for a base count."""
    add = math.exp(-n / SPOT_ADD_DECAY)
    return add, 1.0 - add, math.exp(-n / SPOT_KEEP_DECAY)


def adjust_spot_count(n: int, rng: Optional[pyrandom.Random] = None) -> int:
    """Move the base count up or down by one spot, or keep it."""
    rng = require_rng_param(rng, "adjust_spot_count")
    add, delete, keep = spot_count_weights(n)
    roll = rng.random() * (add + delete + keep)
    if roll < add:
        return n + 1
    if roll < add + delete:
        return max(0, n - 1)
    return n


def inherit_spot(
    spot: Spot,
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Spot:
    """Copy a parent spot into the child with a new position and jittered size."""
    rng = require_rng_param(rng, "inherit_spot")
    color = spot.color
    if rng.random() < params.spot_color_mutation_chance:
        color = weighted_choice(SPOT_COLORS, rng)
    jitter = (rng.random() - 0.5) * params.spot_size_jitter * 2
    shape = spot.shape if spot.shape is not None else rng.choice(LEGACY_SPOT_SHAPES)
    x, y = random_position(rng)
    return Spot(
        x=x,
        y=y,
        size=_clamp(spot.size + jitter, SPOT_SIZE_MIN, SPOT_SIZE_MAX),
        color=color,
        shape=shape,
    )


def breed_spots(
    parent_a: Sequence[Spot],
    parent_b: Sequence[Spot],
    rng: Optional[pyrandom.Random] = None,
    params: BreedingParams = _DEFAULT_PARAMS,
) -> Tuple[Spot, ...]:
    """Derive the child's spot list from two parents' spots."""
    rng = require_rng_param(rng, "breed_spots")
    base = base_spot_count(len(parent_a), len(parent_b), rng)
    target = adjust_spot_count(base, rng)
    if target != base:
        logger.debug("Spot count adjusted %d -> %d", base, target)

    pool = [*parent_a, *parent_b]
    parent_colors = list(dict.fromkeys(spot.color for spot in pool))
    rng.shuffle(pool)
    inherit_count = min(target, max(len(parent_a), len(parent_b)))

    child: List[Spot] = [inherit_spot(spot, rng, params) for spot in pool[:inherit_count]]

    while len(child) < target:
        color = None
        if parent_colors and rng.random() > params.spot_color_mutation_chance:
            color = rng.choice(parent_colors)
        child.append(random_spot(rng, color))

    return tuple(child)
