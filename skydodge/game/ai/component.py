"""
EvasionAI: the per-agent planning driver.

One EvasionAI owns the session state for one agent: the committed Path,
when it started, and when the thinking pause after it ends. The host calls
suggest_move() once per tick; most ticks just replay the committed direction,
so the expensive part (scoring nine directions against every hazard) runs
only at path boundaries.

    IDLE --plan--> FOLLOWING --duration elapsed--> WAITING --pause over--> READY
                       ^                                                 |
                       +----------------------plan-----------------------+

With thinking time disabled, WAITING lasts zero seconds and the AI re-plans
on the first tick after a path finishes. reset() returns to IDLE.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, NamedTuple, TypeAlias

from skydodge import config
from skydodge.game.hazards import (
    Enemy,
    Hole,
    Meteor,
    parse_enemies,
    parse_holes,
    parse_meteors,
    read_vec3,
)
from skydodge.types import AILevel, SimTime, Vec3

from .difficulty import DifficultyProfile, difficulty_for
from .directions import DIRECTION_CATALOG, CandidateDirection
from .prediction import predict_enemy_positions, predict_meteor_positions
from .selection import Path, ScoredDirection, select_best_path
from .settings import AvoidanceSettings


class MoveSuggestion(NamedTuple):
    """Direction for the host to apply its own speed and timestep to."""

    dx: float
    dz: float

    def as_dict(self) -> dict[str, float]:
        return {"dx": self.dx, "dz": self.dz}


NO_MOVE = MoveSuggestion(0.0, 0.0)


class PlannerState(Enum):
    IDLE = auto()  # No path committed (fresh or reset)
    FOLLOWING = auto()  # Replaying the committed path
    WAITING = auto()  # Path finished, thinking pause still running
    READY = auto()  # Path finished and pause over; the next call plans


@dataclass(frozen=True, slots=True)
class PlanningReport:
    """Everything known about one planning decision, for observers."""

    now: SimTime
    position: Vec3
    profile: DifficultyProfile
    meteor_count: int
    predicted_meteor_count: int
    enemy_count: int
    predicted_enemy_count: int
    hole_count: int
    scores: list[ScoredDirection]
    path: Path
    planning_seconds: float


PlanObserver: TypeAlias = Callable[[PlanningReport], None]


class EvasionAI:
    """Path-based evasion AI for a single agent.

    Lower levels commit to long paths with poor hazard prediction; higher
    levels re-plan often with good prediction. See difficulty.py for the
    exact mapping.

    Not thread-safe. Give every agent its own instance.
    """

    def __init__(
        self,
        settings: AvoidanceSettings | None = None,
        *,
        observer: PlanObserver | None = None,
        time_source: Callable[[], float] = time.monotonic,
        directions: Sequence[CandidateDirection] = DIRECTION_CATALOG,
    ) -> None:
        self.settings = settings or AvoidanceSettings()
        self.observer = observer
        self.time_source = time_source
        self.directions = tuple(directions)

        self.current_path: Path | None = None
        self.path_start_time = 0.0
        self.wait_end_time = 0.0

        # State of the most recent suggest_move() call, for debug display.
        self.last_state = PlannerState.IDLE

    # ------------------------------------------------------------------
    # Feature toggles
    # ------------------------------------------------------------------

    def set_hole_avoidance(self, enabled: bool) -> None:
        self.settings.hole_avoidance = enabled

    def set_thinking_time(self, enabled: bool) -> None:
        self.settings.thinking_time = enabled

    def set_enemy_avoidance(self, enabled: bool) -> None:
        self.settings.enemy_avoidance = enabled

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    @property
    def path_end_time(self) -> float:
        if self.current_path is None:
            return self.path_start_time
        return self.path_start_time + self.current_path.duration

    def state_at(self, now: float) -> PlannerState:
        """Which state a call at ``now`` would find the AI in. Does not mutate."""
        if self.current_path is None:
            return PlannerState.IDLE
        if now < self.path_end_time:
            return PlannerState.FOLLOWING
        if now < self.wait_end_time:
            return PlannerState.WAITING
        return PlannerState.READY

    def suggest_move(
        self,
        meteors: Iterable[Any],
        position: Any,
        current_score: float = 0,
        ai_level: AILevel = config.DEFAULT_AI_LEVEL,
        enemies: Iterable[Any] | None = None,
        holes: Iterable[Any] | None = None,
        *,
        now: float | None = None,
    ) -> MoveSuggestion:
        """Plan or follow a path and return the direction for this tick.

        Args:
            meteors: Meteor records, mappings or objects with ``position`` and
                optional ``velocity``. Unreadable entries are skipped.
            position: The agent's current (x, y, z). Required.
            current_score: Game score; meteors fall faster as it grows.
            ai_level: Difficulty, expected 1-10.
            enemies: Optional pursuing hostiles with a ``position``.
            holes: Optional ground holes with ``x``, ``z`` and half size.
            now: Time in seconds. Defaults to the instance's time source.

        Returns:
            MoveSuggestion with components in [-1, 1]. Zero during a
            thinking pause.
        """
        if now is None:
            now = self.time_source()

        state = self.state_at(now)
        if state is PlannerState.FOLLOWING:
            self.last_state = state
            assert self.current_path is not None
            return MoveSuggestion(self.current_path.dx, self.current_path.dz)
        if state is PlannerState.WAITING:
            self.last_state = state
            return NO_MOVE

        profile = difficulty_for(ai_level, current_score, self.settings.thinking_time)
        path = self.plan(
            parse_meteors(meteors),
            read_vec3(position),
            profile,
            parse_enemies(enemies),
            parse_holes(holes),
            now=SimTime(now),
        )
        self.current_path = path
        self.path_start_time = now
        # The pause comes after the new path runs its course, never before.
        self.wait_end_time = now + path.duration + profile.wait_time_sec
        self.last_state = PlannerState.FOLLOWING
        return MoveSuggestion(path.dx, path.dz)

    def plan(
        self,
        meteors: Sequence[Meteor],
        position: Vec3,
        profile: DifficultyProfile,
        enemies: Sequence[Enemy] = (),
        holes: Sequence[Hole] = (),
        *,
        now: SimTime = SimTime(0.0),
    ) -> Path:
        """Compute a fresh Path without touching the session state."""
        started = time.perf_counter()

        predicted_meteors = predict_meteor_positions(
            meteors, profile.meteor_fall_speed, profile.prediction_time
        )
        predicted_enemies = predict_enemy_positions(
            enemies, position, profile.path_duration, self.settings.enemy_avoidance
        )
        path, scores = select_best_path(
            self.directions,
            position,
            predicted_meteors,
            profile.path_duration,
            profile.ai_level,
            predicted_enemies,
            holes,
            self.settings,
        )

        if self.observer is not None:
            self.observer(
                PlanningReport(
                    now=now,
                    position=position,
                    profile=profile,
                    meteor_count=len(meteors),
                    predicted_meteor_count=len(predicted_meteors),
                    enemy_count=len(enemies),
                    predicted_enemy_count=len(predicted_enemies),
                    hole_count=len(holes),
                    scores=scores,
                    path=path,
                    planning_seconds=time.perf_counter() - started,
                )
            )
        return path

    def reset(self) -> None:
        """Forget the committed path (call when the game restarts)."""
        self.current_path = None
        self.path_start_time = 0.0
        self.wait_end_time = 0.0
        self.last_state = PlannerState.IDLE
