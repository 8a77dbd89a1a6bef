#!/usr/bin/env python3
"""Benchmark the cost of one planning decision.

Plans are the only expensive ticks (every other tick replays the committed
direction), so this times EvasionAI.plan() directly across hazard counts and
difficulty levels and prints a table, followed by a few behavior checks.

Usage:
    uv run python scripts/benchmark_planning.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from pathlib import Path

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from skydodge import config
from skydodge.constants.planning import PlannerConstants as Planner
from skydodge.game.ai import EvasionAI, difficulty_for
from skydodge.game.hazards import Enemy, Hole, Meteor
from skydodge.types import Vec3
from skydodge.util import rng

_rng = rng.get("bench.hazards")

# ---------------------------------------------------------------------------
# Hazard generators
# ---------------------------------------------------------------------------


def _random_meteors(count: int) -> list[Meteor]:
    """Meteors scattered over the arena at various heights, half untracked."""
    half = Planner.WORLD_HALF
    meteors: list[Meteor] = []
    for i in range(count):
        position = Vec3(
            _rng.uniform(-half, half),
            _rng.uniform(0.0, 15.0),
            _rng.uniform(-half, half),
        )
        velocity = Vec3(0.0, -_rng.uniform(6.0, 14.0), 0.0) if i % 2 else None
        meteors.append(Meteor(position, velocity))
    return meteors


def _random_enemies(count: int) -> list[Enemy]:
    half = Planner.WORLD_HALF
    return [
        Enemy(Vec3(_rng.uniform(-half, half), 1.0, _rng.uniform(-half, half)))
        for _ in range(count)
    ]


def _bench(fn: object, *args: object) -> float:
    """Time *fn(*args)* and return average ms per call."""
    # Warm up
    fn(*args)  # type: ignore[operator]
    timer = timeit.Timer(lambda: fn(*args))  # type: ignore[operator]
    number, total = timer.autorange()
    return (total / number) * 1000


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    rng.init(config.RANDOM_SEED)
    ai = EvasionAI()
    agent = Vec3(0.0, Planner.PLAYER_HEIGHT, 0.0)
    holes = [Hole(4.0, 4.0, 1.5), Hole(-5.0, 2.0, 1.0)]

    scenarios = [
        ("Empty arena", 0, 0),
        ("10 meteors", 10, 0),
        ("50 meteors", 50, 0),
        ("200 meteors", 200, 0),
        ("50 meteors + 5 enemies", 50, 5),
        ("200 meteors + 20 enemies", 200, 20),
    ]

    print("Planning benchmark: ms per EvasionAI.plan()")
    print("=" * 64)
    print(f"{'Scenario':<28} {'level 1':>10} {'level 5':>10} {'level 10':>10}")
    print("-" * 64)

    for name, meteor_count, enemy_count in scenarios:
        meteors = _random_meteors(meteor_count)
        enemies = _random_enemies(enemy_count)
        timings = [
            _bench(ai.plan, meteors, agent, difficulty_for(level), enemies, holes)
            for level in (1, 5, 10)
        ]
        print(f"{name:<28} " + " ".join(f"{ms:>8.3f}ms" for ms in timings))

    print("-" * 64)
    print("At 60 FPS a frame is 16.7ms; plans run a few times per second.")
    print()

    # ------------------------------------------------------------------
    # Behavior checks
    # ------------------------------------------------------------------
    print("Behavior checks...")
    empty = ai.plan([], agent, difficulty_for(10))
    print(f"  Empty arena, level 10: chose {empty.name!r} (expected movement)")

    overhead = [Meteor(Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 0.0))]
    dodge = ai.plan(overhead, agent, difficulty_for(5))
    status = "OK!" if not dodge.is_still else "FAIL: stayed under the meteor"
    print(f"  Meteor on agent, level 5: chose {dodge.name!r}. {status}")

    chaser = [Enemy(Vec3(0.0, 1.0, 2.0))]
    flee = ai.plan([], agent, difficulty_for(8), chaser)
    status = "OK!" if flee.dz < 0 else "FAIL: did not move away"
    print(f"  Enemy at z=+2, level 8: chose {flee.name!r}. {status}")


if __name__ == "__main__":
    main()
