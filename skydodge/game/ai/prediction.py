"""Hazard prediction by constant-velocity extrapolation.

Each PredictedHazard carries a ``prediction_time``: the scorer extrapolates
the hazard up to that time and then holds it frozen at the last trusted
position. Weak AIs get a short horizon, so hazards appear to stall partway
through their path and late threats are misjudged rather than ignored.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from skydodge.constants.planning import PlannerConstants as Planner
from skydodge.game.hazards import Enemy, Meteor
from skydodge.types import Vec3

_ZERO = Vec3(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class PredictedHazard:
    """A hazard snapshot plus the horizon its extrapolation is trusted for."""

    current_x: float
    current_y: float
    current_z: float
    velocity: Vec3
    prediction_time: float

    def position_at(self, t: float) -> Vec3:
        """Extrapolated position at time ``t``, frozen past prediction_time."""
        effective_t = min(t, self.prediction_time)
        return Vec3(
            self.current_x + self.velocity.x * effective_t,
            self.current_y + self.velocity.y * effective_t,
            self.current_z + self.velocity.z * effective_t,
        )


@dataclass(frozen=True, slots=True)
class HazardArrays:
    """Column-stacked PredictedHazards for vectorized scoring."""

    positions: np.ndarray  # (n, 3)
    velocities: np.ndarray  # (n, 3)
    horizons: np.ndarray  # (n,)

    @classmethod
    def from_predictions(cls, hazards: Sequence[PredictedHazard]) -> HazardArrays:
        n = len(hazards)
        positions = np.empty((n, 3), dtype=np.float64)
        velocities = np.empty((n, 3), dtype=np.float64)
        horizons = np.empty(n, dtype=np.float64)
        for i, hazard in enumerate(hazards):
            positions[i] = (hazard.current_x, hazard.current_y, hazard.current_z)
            velocities[i] = hazard.velocity
            horizons[i] = hazard.prediction_time
        return cls(positions, velocities, horizons)

    def __len__(self) -> int:
        return len(self.horizons)

    def positions_at(self, t: float | np.ndarray) -> np.ndarray:
        """Positions at time ``t``, each hazard frozen at its own horizon.

        A scalar ``t`` gives an (n, 3) array; an (s,) array of sample times
        gives (s, n, 3).
        """
        times = np.asarray(t, dtype=np.float64)
        effective_t = np.minimum(times[..., np.newaxis], self.horizons)
        return self.positions + self.velocities * effective_t[..., np.newaxis]


def predict_meteor_positions(
    meteors: Sequence[Meteor], fall_speed: float, prediction_time: float
) -> list[PredictedHazard]:
    """Snapshot meteors, falling straight down at ``fall_speed`` when untracked."""
    default_velocity = Vec3(0.0, -fall_speed, 0.0)
    return [
        PredictedHazard(
            current_x=meteor.position.x,
            current_y=meteor.position.y,
            current_z=meteor.position.z,
            velocity=meteor.velocity or default_velocity,
            prediction_time=prediction_time,
        )
        for meteor in meteors
    ]


def predict_enemy_positions(
    enemies: Sequence[Enemy],
    agent_pos: Vec3,
    path_duration: float,
    enabled: bool = True,
) -> list[PredictedHazard]:
    """Assume every enemy heads straight for the agent at pursuit speed.

    The pursuit assumption is trusted for the whole path. An enemy standing
    on the agent gets zero velocity.
    """
    if not enabled or not enemies:
        return []

    predicted: list[PredictedHazard] = []
    for enemy in enemies:
        position = enemy.position
        to_x = agent_pos.x - position.x
        to_y = agent_pos.y - position.y
        to_z = agent_pos.z - position.z
        distance = math.sqrt(to_x * to_x + to_y * to_y + to_z * to_z)
        if distance < Planner.ENEMY_COINCIDENT_EPSILON:
            velocity = _ZERO
        else:
            scale = Planner.ENEMY_PURSUIT_SPEED / distance
            velocity = Vec3(to_x * scale, to_y * scale, to_z * scale)
        predicted.append(
            PredictedHazard(
                current_x=position.x,
                current_y=position.y,
                current_z=position.z,
                velocity=velocity,
                prediction_time=path_duration,
            )
        )
    return predicted
