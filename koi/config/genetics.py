"""Genetics tuning constants."""

# =============================================================================
# Color genome
# =============================================================================

# Per-gene substitution chance inside a gamete. Disabled: new colors enter
# the population through the shop rather than through mutation.
BASE_COLOR_MUTATION_CHANCE = 0.0

# Chance that a gamete picks up one extra copy from its source genome.
GENE_EXPANSION_CHANCE = 0.0

# Pruning only applies once the combined genome is longer than the ceiling.
GENE_DELETION_CHANCE = 0.02
GENOME_SIZE_CEILING = 6

# Special mutation force-overwrites slot 0 of the first gamete, and of the
# second one as well with SPECIAL_MUTATION_BOTH_CHANCE.
SPECIAL_MUTATION_CHANCE = 0.0
SPECIAL_MUTATION_BOTH_CHANCE = 0.1

# =============================================================================
# Spots
# =============================================================================

SPOT_COLOR_MUTATION_CHANCE = 0.05
SPOT_SIZE_JITTER = 4.0
SPOT_SIZE_MIN = 20.0
SPOT_SIZE_MAX = 120.0  # ceiling for inherited spots
NEW_SPOT_SIZE_MAX = 240.0  # freshly grown spots can start larger
SPOT_POSITION_MIN = 0.0
SPOT_POSITION_MAX = 100.0

# Probability the base spot count is the larger parent's count instead of
# the blended one.
SPOT_KEEP_MAX_CHANCE = 0.5

# Decay scales for the add/delete and keep weights: e^(-n/10), e^(-n/20)
SPOT_ADD_DECAY = 10.0
SPOT_KEEP_DECAY = 20.0

# =============================================================================
# Lightness
# =============================================================================

LIGHTNESS_DEFAULT = 50.0
LIGHTNESS_MIN = 0.0
LIGHTNESS_MAX = 100.0
LIGHTNESS_MUTATION_CHANCE = 0.2
LIGHTNESS_MUTATION_AMOUNT = 5.0

# =============================================================================
# Polygenic spot genes
# =============================================================================

ALLELE_DRIFT_RATE = 0.005

# Inbreeding coefficient above which offspring risk a weakened allele.
INBREEDING_THRESHOLD = 0.7
INBREEDING_PENALTY_SCALE = 2.0
INBREEDING_ALLELE_LOSS = 0.3

# Reversion to a recorded ancestor's look. Zero until the product decides
# on a rate.
ATAVISM_CHANCE = 0.0
