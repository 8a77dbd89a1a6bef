"""Pick the best-scoring candidate direction and turn it into a Path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from skydodge.game.hazards import Hole
from skydodge.types import AILevel, Vec3

from .directions import STAY, CandidateDirection
from .prediction import HazardArrays, PredictedHazard
from .scoring import score_path
from .settings import AvoidanceSettings


@dataclass(frozen=True, slots=True)
class Path:
    """A committed plan: walk (dx, dz) for ``duration`` seconds."""

    dx: float
    dz: float
    duration: float
    score: float
    name: str = STAY.name

    @property
    def is_still(self) -> bool:
        return self.dx == 0 and self.dz == 0


@dataclass(frozen=True, slots=True)
class ScoredDirection:
    """Debug snapshot of one direction's scoring result."""

    direction: CandidateDirection
    score: float


def select_best_path(
    directions: Sequence[CandidateDirection],
    start_pos: Vec3,
    predicted_meteors: Sequence[PredictedHazard],
    path_duration: float,
    ai_level: AILevel,
    predicted_enemies: Sequence[PredictedHazard] = (),
    holes: Sequence[Hole] = (),
    settings: AvoidanceSettings | None = None,
) -> tuple[Path, list[ScoredDirection]]:
    """Score every direction and return the best as a Path.

    Ties keep the earliest direction in ``directions`` (strict ``>``), so
    with the standard catalog "stay" wins an exact tie.

    Returns:
        A tuple of (best_path, scored) where scored is every direction's
        score in evaluation order, for debug display.
    """
    # Stack hazards once; every direction reuses the same arrays.
    meteor_arrays = HazardArrays.from_predictions(predicted_meteors)
    enemy_arrays = HazardArrays.from_predictions(predicted_enemies)

    best: CandidateDirection | None = None
    best_score = float("-inf")
    scored: list[ScoredDirection] = []

    for direction in directions:
        score = score_path(
            direction,
            start_pos,
            meteor_arrays,
            path_duration,
            ai_level,
            enemy_arrays,
            holes,
            settings,
        ).total
        scored.append(ScoredDirection(direction, score))
        if score > best_score:
            best_score = score
            best = direction

    if best is None:
        return Path(0.0, 0.0, path_duration, 0.0), scored

    return Path(best.dx, best.dz, path_duration, best_score, best.name), scored
