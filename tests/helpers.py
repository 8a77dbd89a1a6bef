from __future__ import annotations

from skydodge.game.ai.component import PlanningReport
from skydodge.game.ai.prediction import PredictedHazard
from skydodge.types import Vec3

ORIGIN = Vec3(0.0, 1.0, 0.0)


def still_meteor(x: float, y: float, z: float, horizon: float = 1.0) -> PredictedHazard:
    """A meteor hanging motionless at (x, y, z)."""
    return PredictedHazard(
        current_x=x,
        current_y=y,
        current_z=z,
        velocity=Vec3(0.0, 0.0, 0.0),
        prediction_time=horizon,
    )


class FakeClock:
    """Manually advanced time source for EvasionAI."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingObserver:
    """Collects every PlanningReport it is handed."""

    def __init__(self) -> None:
        self.reports: list[PlanningReport] = []

    def __call__(self, report: PlanningReport) -> None:
        self.reports.append(report)

    @property
    def last(self) -> PlanningReport:
        return self.reports[-1]
