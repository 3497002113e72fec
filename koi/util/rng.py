"""RNG utilities for deterministic breeding.

Every random operation in the engine takes an explicit ``random.Random``.
These helpers fail loudly when one is missing instead of silently creating
an unseeded fallback, so seeded callers always reproduce the same offspring.
"""

import random
from typing import Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but was not provided.

    This indicates a caller bug: breeding and sampling must be driven by the
    caller's (possibly seeded) generator.
    """

    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def make_gamete(genome, rng=None):
            rng = require_rng_param(rng, "make_gamete")
            return rng.sample(genome, 1)
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass a random.Random instance explicitly."
        )
    return rng
