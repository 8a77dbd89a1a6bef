"""Difficulty mapping: one integer AI level to every continuous planning knob.

Low levels commit to long, poorly-predicted paths and pause longer between
plans. High levels re-plan often and trust their hazard predictions further
into each path.

    Level 1:  path 0.75s, lookahead 36%, think 450ms
    Level 10: path 0.30s, lookahead 90%, think 0ms
"""

from __future__ import annotations

from dataclasses import dataclass

from skydodge.constants.planning import PlannerConstants as Planner
from skydodge.types import AILevel


@dataclass(frozen=True, slots=True)
class DifficultyProfile:
    """Every planning parameter derived from an AI level and the game score."""

    ai_level: AILevel
    skill: float
    path_duration: float
    lookahead_percent: float
    meteor_fall_speed: float
    wait_time_ms: float

    @property
    def prediction_time(self) -> float:
        """How far into the path (seconds) meteor predictions are trusted."""
        return self.path_duration * self.lookahead_percent

    @property
    def wait_time_sec(self) -> float:
        return self.wait_time_ms / 1000


def skill_for(ai_level: AILevel) -> float:
    return ai_level / 10


def path_duration_for(skill: float) -> float:
    return Planner.PATH_DURATION_MAX - skill * Planner.PATH_DURATION_RANGE


def lookahead_percent_for(skill: float) -> float:
    return Planner.LOOKAHEAD_MIN + skill * Planner.LOOKAHEAD_RANGE


def meteor_fall_speed_for(current_score: float) -> float:
    return Planner.METEOR_BASE_SPEED + current_score * Planner.METEOR_SPEED_PER_POINT


def wait_time_ms_for(ai_level: AILevel, thinking_time: bool = True) -> float:
    if not thinking_time:
        return 0
    return max(0, Planner.THINK_BASE_MS - ai_level * Planner.THINK_PER_LEVEL_MS)


def difficulty_for(
    ai_level: AILevel, current_score: float = 0, thinking_time: bool = True
) -> DifficultyProfile:
    """Map an AI level (expected 1-10, not clamped) to a DifficultyProfile."""
    skill = skill_for(ai_level)
    return DifficultyProfile(
        ai_level=ai_level,
        skill=skill,
        path_duration=path_duration_for(skill),
        lookahead_percent=lookahead_percent_for(skill),
        meteor_fall_speed=meteor_fall_speed_for(current_score),
        wait_time_ms=wait_time_ms_for(ai_level, thinking_time),
    )
