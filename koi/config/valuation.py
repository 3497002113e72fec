"""Valuation constants (ZP value of an individual)."""

VALUE_BASE = 100.0
PHENOTYPE_RARITY_MULTIPLIER = 50.0
CARRIER_RARITY_MULTIPLIER = 5.0
LIGHTNESS_CENTER = 50.0
LIGHTNESS_BONUS_FACTOR = 0.5
SPOT_VALUE_PER_SPOT = 5.0
SPOT_BONUS_EXPONENT = 1.5
SPOT_BONUS_FACTOR = 2.0
SPOT_COLOR_RARITY_MULTIPLIER = 3.0

# Condition thresholds (stamina 0-100)
STAMINA_WORTHLESS_MAX = 10.0
STAMINA_QUARTER_MAX = 40.0
STAMINA_HALF_MAX = 60.0
