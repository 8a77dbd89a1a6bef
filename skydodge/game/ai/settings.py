"""Per-agent feature toggles consulted by the planner and scorer."""

from __future__ import annotations

from dataclasses import dataclass

from skydodge import config


@dataclass(slots=True)
class AvoidanceSettings:
    """Feature toggles plus the enemy safety floor.

    Attributes:
        hole_avoidance: Penalize paths that cross a hole.
        thinking_time: Pause between plans (longer at low levels).
        enemy_avoidance: Predict and score enemies at all.
        min_enemy_distance: Distance below which the nearest enemy counts
            as unsafe.
    """

    hole_avoidance: bool = config.HOLE_AVOIDANCE_ENABLED
    thinking_time: bool = config.THINKING_TIME_ENABLED
    enemy_avoidance: bool = config.ENEMY_AVOIDANCE_ENABLED
    min_enemy_distance: float = config.MIN_ENEMY_DISTANCE
