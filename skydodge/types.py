from __future__ import annotations

from typing import NamedTuple, NewType, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

# Continuous world coordinate. The arena is centered on the origin; y is up.
WorldCoord: TypeAlias = float


class Vec3(NamedTuple):
    """A point or velocity in world space. Example: Vec3(0.0, 1.0, 0.0)."""

    x: WorldCoord
    y: WorldCoord
    z: WorldCoord


# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Host-supplied time in seconds. Only differences between two readings are
# meaningful, so any monotonic source (wall clock, simulation clock) works.
SimTime = NewType("SimTime", float)

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# AI difficulty level. Expected to be 1-10, but never clamped: values outside
# that range extrapolate the same formulas.
AILevel: TypeAlias = int

# Random seed for deterministic streams.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed: TypeAlias = int | str | None
