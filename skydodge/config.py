"""
Configuration constants.

Runtime defaults for the evasion AI. Pure tuning numbers (speeds, radii,
penalty weights) live in skydodge.constants.planning; this module holds the
values a host game is expected to change.
"""

# =============================================================================
# GENERAL
# =============================================================================

# Master seed for every rng stream. None draws from system entropy.
RANDOM_SEED = "meteor1"

# =============================================================================
# AI DEFAULTS
# =============================================================================

# Difficulty used when the host does not pass an explicit level.
DEFAULT_AI_LEVEL = 5

# Feature toggles. Each can be flipped at runtime on an EvasionAI instance.
HOLE_AVOIDANCE_ENABLED = True
THINKING_TIME_ENABLED = True
ENEMY_AVOIDANCE_ENABLED = True

# Distance (world units) the AI tries to keep between itself and the nearest
# enemy. Inside this radius fleeing is rewarded; outside it, widening the gap
# still earns a small bonus.
MIN_ENEMY_DISTANCE = 5.0

# =============================================================================
# DEBUG
# =============================================================================

# Fraction of new plans that PlanLogger writes to the log.
PLAN_LOG_SAMPLE_RATE = 0.1

# Number of recent plans kept by PlanningStats for percentile readouts.
PLAN_STATS_SAMPLES = 256
