"""Module-level convenience wrapper around one shared EvasionAI.

For hosts that drive exactly one AI agent from one thread. Anything else
should construct its own EvasionAI per agent.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from skydodge import config
from skydodge.types import AILevel

from .component import EvasionAI, MoveSuggestion

_default_ai: EvasionAI | None = None


def get_default_ai() -> EvasionAI:
    global _default_ai
    if _default_ai is None:
        _default_ai = EvasionAI()
    return _default_ai


def suggest_move(
    meteors: Iterable[Any],
    position: Any,
    current_score: float = 0,
    ai_level: AILevel = config.DEFAULT_AI_LEVEL,
    enemies: Iterable[Any] | None = None,
    holes: Iterable[Any] | None = None,
) -> MoveSuggestion:
    return get_default_ai().suggest_move(
        meteors, position, current_score, ai_level, enemies, holes
    )


def reset_ai() -> None:
    get_default_ai().reset()


def set_hole_avoidance(enabled: bool) -> None:
    get_default_ai().set_hole_avoidance(enabled)


def set_thinking_time(enabled: bool) -> None:
    get_default_ai().set_thinking_time(enabled)


def set_enemy_avoidance(enabled: bool) -> None:
    get_default_ai().set_enemy_avoidance(enabled)
