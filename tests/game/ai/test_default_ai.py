"""Tests for the shared default-instance convenience wrapper."""

from __future__ import annotations

from skydodge.game.ai import default
from skydodge.game.ai.component import MoveSuggestion

CENTER = {"x": 0.0, "y": 1.0, "z": 0.0}


def test_default_instance_is_created_once() -> None:
    assert default.get_default_ai() is default.get_default_ai()


def test_suggest_move_uses_default_instance() -> None:
    move = default.suggest_move([], CENTER, 0, 10)

    assert isinstance(move, MoveSuggestion)
    assert move != MoveSuggestion(0.0, 0.0)
    assert default.get_default_ai().current_path is not None


def test_reset_ai_clears_the_default_instance() -> None:
    default.suggest_move([], CENTER, 0, 5)

    default.reset_ai()

    assert default.get_default_ai().current_path is None


def test_toggles_reach_the_default_instance() -> None:
    default.set_hole_avoidance(False)
    default.set_thinking_time(False)
    default.set_enemy_avoidance(False)

    settings = default.get_default_ai().settings
    assert not settings.hole_avoidance
    assert not settings.thinking_time
    assert not settings.enemy_avoidance
