"""
Evasion AI for arena agents dodging meteors, enemies and holes.

Each planning tick the AI scores nine candidate directions against predicted
hazard positions and commits to the best one for a fixed duration. Between
plans it simply replays that direction.

Package structure:
    difficulty  - AI level -> DifficultyProfile (path length, lookahead, pause).
    directions  - The fixed catalog of nine candidate directions.
    prediction  - Constant-velocity hazard extrapolation with a trust horizon.
    scoring     - Multi-term path scoring (PathScore, evaluate_path).
    selection   - Arg-max over the catalog (select_best_path, Path).
    settings    - Per-agent feature toggles.
    component   - EvasionAI: the plan/follow/wait state machine.
    debug       - Planning observers (PlanLogger, PlanningStats).
    default     - Optional shared-instance convenience functions.
"""

from .component import (
    EvasionAI,
    MoveSuggestion,
    PlannerState,
    PlanningReport,
    PlanObserver,
)
from .debug import PlanLogger, PlanningStats, chain_observers
from .difficulty import DifficultyProfile, difficulty_for
from .directions import DIRECTION_CATALOG, CandidateDirection
from .prediction import (
    PredictedHazard,
    predict_enemy_positions,
    predict_meteor_positions,
)
from .scoring import PathScore, evaluate_path, score_path
from .selection import Path, ScoredDirection, select_best_path
from .settings import AvoidanceSettings

__all__ = [
    "DIRECTION_CATALOG",
    "AvoidanceSettings",
    "CandidateDirection",
    "DifficultyProfile",
    "EvasionAI",
    "MoveSuggestion",
    "Path",
    "PathScore",
    "PlanLogger",
    "PlanObserver",
    "PlannerState",
    "PlanningReport",
    "PlanningStats",
    "PredictedHazard",
    "ScoredDirection",
    "chain_observers",
    "difficulty_for",
    "evaluate_path",
    "predict_enemy_positions",
    "predict_meteor_positions",
    "score_path",
    "select_best_path",
]
