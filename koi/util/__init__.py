"""Shared helpers for the koi genetics engine."""

from koi.util.rng import MissingRNGError, require_rng_param

__all__ = ["MissingRNGError", "require_rng_param"]
