"""Tests for meteor and enemy position prediction."""

from __future__ import annotations

import numpy as np
import pytest

from skydodge.game.ai.prediction import (
    HazardArrays,
    PredictedHazard,
    predict_enemy_positions,
    predict_meteor_positions,
)
from skydodge.game.hazards import Enemy, Meteor
from skydodge.types import Vec3
from tests.helpers import ORIGIN

# ---------------------------------------------------------------------------
# Meteors
# ---------------------------------------------------------------------------


def test_untracked_meteor_falls_at_current_speed() -> None:
    meteors = [Meteor(position=Vec3(1.0, 10.0, 2.0))]

    (predicted,) = predict_meteor_positions(
        meteors, fall_speed=9.5, prediction_time=0.4
    )

    snapshot = (predicted.current_x, predicted.current_y, predicted.current_z)
    assert snapshot == (1.0, 10.0, 2.0)
    assert predicted.velocity == Vec3(0.0, -9.5, 0.0)
    assert predicted.prediction_time == 0.4


def test_tracked_meteor_keeps_its_velocity() -> None:
    meteors = [
        Meteor(position=Vec3(0.0, 5.0, 0.0), velocity=Vec3(1.0, -3.0, 0.5)),
        Meteor(position=Vec3(2.0, 6.0, 0.0)),
    ]

    predicted = predict_meteor_positions(meteors, fall_speed=8.0, prediction_time=0.2)

    assert predicted[0].velocity == Vec3(1.0, -3.0, 0.5)
    assert predicted[1].velocity == Vec3(0.0, -8.0, 0.0)
    assert {p.prediction_time for p in predicted} == {0.2}


def test_no_meteors_predicts_nothing() -> None:
    assert predict_meteor_positions([], fall_speed=8.0, prediction_time=0.5) == []


def test_prediction_freezes_past_horizon() -> None:
    hazard = PredictedHazard(0.0, 10.0, 0.0, Vec3(0.0, -10.0, 0.0), prediction_time=0.5)

    assert hazard.position_at(0.25) == Vec3(0.0, 7.5, 0.0)
    assert hazard.position_at(0.5) == Vec3(0.0, 5.0, 0.0)
    assert hazard.position_at(2.0) == Vec3(0.0, 5.0, 0.0)


def test_hazard_arrays_match_per_hazard_prediction() -> None:
    hazards = [
        PredictedHazard(0.0, 10.0, 0.0, Vec3(0.0, -10.0, 0.0), prediction_time=0.5),
        PredictedHazard(3.0, 1.0, -2.0, Vec3(1.0, 0.0, 2.0), prediction_time=0.1),
    ]
    arrays = HazardArrays.from_predictions(hazards)
    times = np.array([0.0, 0.3, 1.0])

    positions = arrays.positions_at(times)

    assert positions.shape == (3, 2, 3)
    for i, t in enumerate(times):
        for j, hazard in enumerate(hazards):
            assert tuple(positions[i, j]) == pytest.approx(tuple(hazard.position_at(t)))
    assert arrays.positions_at(0.3).shape == (2, 3)


def test_empty_hazard_arrays() -> None:
    arrays = HazardArrays.from_predictions([])

    assert len(arrays) == 0
    assert arrays.positions_at(np.array([0.0, 0.5])).shape == (2, 0, 3)


# ---------------------------------------------------------------------------
# Enemies
# ---------------------------------------------------------------------------


def test_enemy_pursues_agent_at_constant_speed() -> None:
    enemies = [Enemy(position=Vec3(3.0, 1.0, 4.0))]

    (predicted,) = predict_enemy_positions(enemies, ORIGIN, path_duration=0.55)

    assert tuple(predicted.velocity) == pytest.approx((-1.56, 0.0, -2.08))
    assert predicted.prediction_time == 0.55


def test_enemy_on_top_of_agent_does_not_move() -> None:
    enemies = [Enemy(position=Vec3(0.0, 1.0, 0.0005))]

    (predicted,) = predict_enemy_positions(enemies, ORIGIN, path_duration=0.55)

    assert predicted.velocity == Vec3(0.0, 0.0, 0.0)


@pytest.mark.parametrize("enabled", [True, False])
def test_no_enemies_predicts_nothing(enabled: bool) -> None:
    assert predict_enemy_positions([], ORIGIN, 0.5, enabled=enabled) == []


def test_disabled_enemy_avoidance_skips_prediction() -> None:
    enemies = [Enemy(position=Vec3(3.0, 1.0, 4.0))]

    assert predict_enemy_positions(enemies, ORIGIN, 0.5, enabled=False) == []
