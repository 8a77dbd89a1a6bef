"""Planning observers: debug logging and rolling statistics.

Observers are plain callables taking a PlanningReport. EvasionAI calls its
observer once per new plan, after the choice is made; nothing here feeds
back into the decision.

    stats = PlanningStats()
    ai = EvasionAI(observer=chain_observers(PlanLogger(), stats))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from skydodge import config
from skydodge.util import rng
from skydodge.util.metrics import RollingWindow

if TYPE_CHECKING:
    from .component import PlanningReport, PlanObserver

logger = logging.getLogger(__name__)

_rng = rng.get("ai.plan_logging")


def format_report(report: PlanningReport) -> str:
    """Multi-line summary of one plan with every direction's score, best first."""
    profile = report.profile
    path = report.path
    lines = [
        f"=== AI LEVEL {profile.ai_level} PLANNING ===",
        f"Position: ({report.position.x:.2f}, {report.position.z:.2f})",
        f"Path duration: {profile.path_duration:.2f}s",
        f"Lookahead: {profile.lookahead_percent * 100:.0f}%",
        f"Prediction time: {profile.prediction_time:.2f}s",
        f"Meteors: {report.meteor_count}, Predicted: {report.predicted_meteor_count}",
        f"Enemies: {report.enemy_count}, Predicted: {report.predicted_enemy_count}",
        "All direction scores:",
    ]
    ranked = sorted(report.scores, key=lambda s: s.score, reverse=True)
    for i, scored in enumerate(ranked):
        marker = "*" if i == 0 else " "
        lines.append(f"{marker} {scored.direction.name:<15}: {scored.score:.1f}")
    lines.append(
        f"-> CHOSE: {path.name} (dx={path.dx:.3f}, dz={path.dz:.3f}), "
        f"wait={profile.wait_time_ms:.0f}ms"
    )
    return "\n".join(lines)


class PlanLogger:
    """Log a random sample of plans at DEBUG level.

    Sampling keeps the log readable when the AI re-plans several times a
    second. Pass sample_rate=1.0 to log every plan.
    """

    def __init__(
        self,
        sample_rate: float = config.PLAN_LOG_SAMPLE_RATE,
        log: logging.Logger = logger,
    ) -> None:
        self.sample_rate = sample_rate
        self.log = log

    def __call__(self, report: PlanningReport) -> None:
        if not self.log.isEnabledFor(logging.DEBUG):
            return
        if _rng.random() >= self.sample_rate:
            return
        self.log.debug("%s", format_report(report))


class PlanningStats:
    """Rolling statistics over recent plans."""

    def __init__(self, num_samples: int = config.PLAN_STATS_SAMPLES) -> None:
        self.plan_count = 0
        self.still_count = 0
        self.chosen_scores = RollingWindow(num_samples)
        self.planning_ms = RollingWindow(num_samples)
        self.choices: dict[str, int] = {}

    def __call__(self, report: PlanningReport) -> None:
        self.plan_count += 1
        if report.path.is_still:
            self.still_count += 1
        self.choices[report.path.name] = self.choices.get(report.path.name, 0) + 1
        self.chosen_scores.record(report.path.score)
        self.planning_ms.record(report.planning_seconds * 1000)

    @property
    def still_fraction(self) -> float:
        if self.plan_count == 0:
            return 0.0
        return self.still_count / self.plan_count

    def summary(self) -> str:
        return (
            f"plans={self.plan_count} still={self.still_fraction:.0%} "
            f"score[{self.chosen_scores.percentiles_string()}] "
            f"ms[{self.planning_ms.percentiles_string()}]"
        )


def chain_observers(*observers: PlanObserver) -> PlanObserver:
    """Fan one report out to several observers, in order."""

    def _notify(report: PlanningReport) -> None:
        for observer in observers:
            observer(report)

    return _notify
