"""Path scoring: how desirable is it to walk one direction for one path?

The agent is simulated moving at PLAYER_SPEED along the candidate direction
for the whole path duration. At each sample instant every hazard is placed
at its predicted position (frozen past its trusted horizon) and the terms
below are accumulated into a PathScore.

Terms:
    movement          Flat bonus for any non-zero direction.
    meteor_risk       Per sample, per meteor near player height. Collision,
                      danger and warning rings, scaled by a height factor.
    meteor_clearance  Per sample, reward for distance to the nearest meteor.
    enemy_risk        Per sample, per enemy. Contact/danger/warning/aware rings.
    enemy_spacing     Compares the nearest-enemy distance at the start and end
                      of the path against the safety floor.
    center            Mild pull toward the arena center.
    edge              Penalty for ending near a wall.
    stillness         "stay" only. Punishes idling next to meteors, and a
                      little even when nothing is near.
    hole              Once per path, if any sample lands in a hole.
    bounds            Steep penalty for paths that would leave the arena.

Scoring is pure: no logging, no state.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import astuple, dataclass
from typing import TypeAlias

import numpy as np

from skydodge.constants.planning import PlannerConstants as Planner
from skydodge.game.hazards import Hole
from skydodge.types import AILevel, Vec3

from .directions import CandidateDirection
from .prediction import HazardArrays, PredictedHazard
from .settings import AvoidanceSettings

HazardInput: TypeAlias = Sequence[PredictedHazard] | HazardArrays

_INNER_HALF = Planner.WORLD_HALF - Planner.BOUNDS_MARGIN


@dataclass(slots=True)
class PathScore:
    """Per-term breakdown of one direction's score."""

    movement: float = 0.0
    meteor_risk: float = 0.0
    meteor_clearance: float = 0.0
    enemy_risk: float = 0.0
    enemy_spacing: float = 0.0
    center: float = 0.0
    edge: float = 0.0
    stillness: float = 0.0
    hole: float = 0.0
    bounds: float = 0.0

    @property
    def total(self) -> float:
        return sum(astuple(self))


def _as_arrays(hazards: HazardInput) -> HazardArrays:
    if isinstance(hazards, HazardArrays):
        return hazards
    return HazardArrays.from_predictions(hazards)


def _sample_times(path_duration: float, samples: int) -> np.ndarray:
    return np.arange(samples + 1, dtype=np.float64) / samples * path_duration


def _horizontal_distances(
    hazards: HazardArrays, times: np.ndarray, xs: np.ndarray, zs: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """(samples, hazards) horizontal distances, plus the hazards' y values."""
    positions = hazards.positions_at(times)
    dist = np.hypot(
        positions[..., 0] - xs[:, np.newaxis],
        positions[..., 2] - zs[:, np.newaxis],
    )
    return dist, positions[..., 1]


def _meteor_terms(
    meteors: HazardArrays, times: np.ndarray, xs: np.ndarray, zs: np.ndarray
) -> tuple[float, float]:
    if len(meteors) == 0:
        return 0.0, 0.0

    dist, ys = _horizontal_distances(meteors, times, xs, zs)
    height_gap = np.abs(ys - Planner.PLAYER_HEIGHT)
    in_band = height_gap < Planner.METEOR_HEIGHT_BAND
    height_factor = np.maximum(0.0, 1.0 - height_gap / Planner.METEOR_HEIGHT_FADE)

    # The warning ring only applies at dist >= METEOR_DANGER_RADIUS, so the
    # clamp on its divisor never changes a selected value.
    penalty = np.select(
        [
            dist < Planner.METEOR_COLLISION_RADIUS,
            dist < Planner.METEOR_DANGER_RADIUS,
            dist < Planner.METEOR_WARNING_RADIUS,
        ],
        [
            Planner.METEOR_COLLISION_PENALTY * height_factor,
            Planner.METEOR_DANGER_PENALTY
            * height_factor
            / np.maximum(dist, Planner.METEOR_MIN_DANGER_DIST),
            Planner.METEOR_WARNING_PENALTY
            * height_factor
            / np.maximum(dist, Planner.METEOR_DANGER_RADIUS),
        ],
        default=0.0,
    )
    risk = -float(np.sum(penalty, where=in_band))

    nearest = np.min(np.where(in_band, dist, np.inf), axis=1)
    nearest = nearest[np.isfinite(nearest)]
    clearance = np.minimum(
        nearest * Planner.METEOR_CLEARANCE_WEIGHT, Planner.METEOR_CLEARANCE_CAP
    )
    return risk, float(np.sum(clearance))


def _enemy_spacing(start_min: float, end_min: float, floor: float) -> float:
    delta = end_min - start_min

    if start_min < floor:
        spacing = -Planner.ENEMY_UNSAFE_PENALTY * (floor - start_min)
        if delta > 0:
            spacing += Planner.ENEMY_FLEE_BONUS * delta
        elif delta < 0:
            spacing -= Planner.ENEMY_APPROACH_PENALTY * -delta
        return spacing

    excess = start_min - floor
    spacing = Planner.ENEMY_SAFE_BONUS * min(excess, Planner.ENEMY_SAFE_EXCESS_CAP)
    if excess > Planner.ENEMY_COMFORT_EXCESS:
        spacing += Planner.ENEMY_COMFORT_BONUS
    if delta > 0:
        spacing += Planner.ENEMY_WIDEN_BONUS * min(delta, Planner.ENEMY_WIDEN_CAP)
    return spacing


def _enemy_terms(
    enemies: HazardArrays,
    times: np.ndarray,
    xs: np.ndarray,
    zs: np.ndarray,
    min_enemy_distance: float,
) -> tuple[float, float]:
    dist, _ = _horizontal_distances(enemies, times, xs, zs)

    penalty = np.select(
        [
            dist < Planner.ENEMY_CONTACT_RADIUS,
            dist < Planner.ENEMY_DANGER_RADIUS,
            dist < Planner.ENEMY_WARNING_RADIUS,
            dist < Planner.ENEMY_AWARE_RADIUS,
        ],
        [
            np.full_like(dist, Planner.ENEMY_CONTACT_PENALTY),
            Planner.ENEMY_DANGER_PENALTY
            / np.maximum(dist, Planner.ENEMY_MIN_DANGER_DIST),
            Planner.ENEMY_WARNING_PENALTY
            / np.maximum(dist, Planner.ENEMY_DANGER_RADIUS),
            Planner.ENEMY_AWARE_PENALTY
            / np.maximum(dist, Planner.ENEMY_WARNING_RADIUS),
        ],
        default=0.0,
    )
    risk = -float(np.sum(penalty))

    # Sample 0 is the start position at t=0; the last sample is the unclamped
    # end of the path.
    start_min = float(dist[0].min())
    end_min = float(dist[-1].min())
    return risk, _enemy_spacing(start_min, end_min, min_enemy_distance)


def _stillness_penalty(meteors: HazardArrays, start_pos: Vec3) -> float:
    if len(meteors) == 0:
        return -Planner.STILL_IDLE_PENALTY

    current = meteors.positions
    dist = np.hypot(current[:, 0] - start_pos.x, current[:, 2] - start_pos.z)
    nearby = (dist < Planner.STILL_THREAT_RADIUS) & (
        np.abs(current[:, 1] - Planner.PLAYER_HEIGHT) < Planner.STILL_THREAT_HEIGHT
    )
    threats = int(np.count_nonzero(nearby))
    if threats > 0:
        return -Planner.STILL_THREAT_PENALTY * min(threats, Planner.STILL_THREAT_CAP)
    return -Planner.STILL_IDLE_PENALTY


def path_crosses_hole(
    direction: CandidateDirection,
    start_pos: Vec3,
    path_duration: float,
    holes: Sequence[Hole],
) -> bool:
    """True if any of the HOLE_SAMPLES + 1 points along the path is in a hole."""
    if not holes:
        return False
    step = Planner.PLAYER_SPEED * path_duration / Planner.HOLE_SAMPLES
    for i in range(Planner.HOLE_SAMPLES + 1):
        x = start_pos.x + direction.dx * step * i
        z = start_pos.z + direction.dz * step * i
        if any(hole.contains(x, z) for hole in holes):
            return True
    return False


def _bounds_penalty(end_x: float, end_z: float) -> float:
    penalty = 0.0
    for coord in (end_x, end_z):
        overshoot = abs(coord) - _INNER_HALF
        if overshoot > 0:
            penalty += Planner.BOUNDS_PENALTY * overshoot
    return penalty


def score_path(
    direction: CandidateDirection,
    start_pos: Vec3,
    predicted_meteors: HazardInput,
    path_duration: float,
    ai_level: AILevel,
    predicted_enemies: HazardInput = (),
    holes: Sequence[Hole] = (),
    settings: AvoidanceSettings | None = None,
) -> PathScore:
    """Score one candidate direction, term by term."""
    settings = settings or AvoidanceSettings()
    meteors = _as_arrays(predicted_meteors)
    enemies = _as_arrays(predicted_enemies)
    score = PathScore()

    if not direction.is_still:
        score.movement = Planner.MOVEMENT_BONUS

    times = _sample_times(path_duration, Planner.PATH_SAMPLES)
    xs = start_pos.x + direction.dx * Planner.PLAYER_SPEED * times
    zs = start_pos.z + direction.dz * Planner.PLAYER_SPEED * times

    score.meteor_risk, score.meteor_clearance = _meteor_terms(meteors, times, xs, zs)

    if settings.enemy_avoidance and len(enemies) > 0:
        score.enemy_risk, score.enemy_spacing = _enemy_terms(
            enemies, times, xs, zs, settings.min_enemy_distance
        )

    end_x = start_pos.x + direction.dx * Planner.PLAYER_SPEED * path_duration
    end_z = start_pos.z + direction.dz * Planner.PLAYER_SPEED * path_duration
    score.bounds = -_bounds_penalty(end_x, end_z)

    # The host clamps movement anyway; positional terms look at where the
    # agent would actually end up.
    clamped_x = max(-_INNER_HALF, min(_INNER_HALF, end_x))
    clamped_z = max(-_INNER_HALF, min(_INNER_HALF, end_z))
    score.center = -Planner.CENTER_WEIGHT * math.hypot(clamped_x, clamped_z)

    clearance = Planner.WORLD_HALF - max(abs(clamped_x), abs(clamped_z))
    if clearance < Planner.EDGE_CLEARANCE:
        score.edge = -Planner.EDGE_PENALTY * (Planner.EDGE_CLEARANCE - clearance)

    if direction.is_still:
        score.stillness = _stillness_penalty(meteors, start_pos)

    if settings.hole_avoidance and path_crosses_hole(
        direction, start_pos, path_duration, holes
    ):
        score.hole = -Planner.HOLE_PENALTY_PER_LEVEL * ai_level

    return score


def evaluate_path(
    direction: CandidateDirection,
    start_pos: Vec3,
    predicted_meteors: HazardInput,
    path_duration: float,
    ai_level: AILevel,
    predicted_enemies: HazardInput = (),
    holes: Sequence[Hole] = (),
    settings: AvoidanceSettings | None = None,
) -> float:
    """Total desirability of walking ``direction`` for ``path_duration``."""
    return score_path(
        direction,
        start_pos,
        predicted_meteors,
        path_duration,
        ai_level,
        predicted_enemies,
        holes,
        settings,
    ).total
