"""Configuration package for the koi genetics engine.

Constants are grouped by concern; the genetics modules read their defaults
from here and expose them again through frozen parameter objects.
"""
