"""Exceptions raised for caller-controlled structural violations.

Expected biological variance (empty genomes, out-of-range lightness) is
normalized silently; these errors are reserved for malformed input.
"""


class GenotypeError(ValueError):
    """A genotype or one of its parts violates a structural invariant."""


class UnsupportedDominanceError(GenotypeError):
    """A locus names a dominance mode outside the supported set."""
