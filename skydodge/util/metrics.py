"""Rolling sample windows for planner diagnostics."""

from collections.abc import Sequence

import numpy as np

DEFAULT_PERCENTILES = (50, 95, 99)


class RollingWindow:
    """The last ``capacity`` recorded values, kept in a numpy ring buffer.

    Empty windows report 0.0 for every statistic so summaries can be printed
    before the first plan.
    """

    def __init__(self, capacity: int = 256) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._buffer = np.zeros(capacity, dtype=np.float64)
        self._head = 0
        self.total_recorded = 0

    def record(self, value: float) -> None:
        self._buffer[self._head] = value
        self._head = (self._head + 1) % self.capacity
        self.total_recorded += 1

    @property
    def sample_count(self) -> int:
        return min(self.total_recorded, self.capacity)

    def values(self) -> np.ndarray:
        """Samples in the window, oldest first."""
        if self.total_recorded <= self.capacity:
            return self._buffer[: self.total_recorded]
        return np.roll(self._buffer, -self._head)

    @property
    def mean(self) -> float:
        window = self.values()
        return float(window.mean()) if window.size else 0.0

    @property
    def latest(self) -> float:
        if self.total_recorded == 0:
            return 0.0
        return float(self._buffer[self._head - 1])

    def percentiles(
        self, qs: Sequence[float] = DEFAULT_PERCENTILES
    ) -> tuple[float, ...]:
        window = self.values()
        if window.size == 0:
            return tuple(0.0 for _ in qs)
        return tuple(float(v) for v in np.percentile(window, qs))

    def percentiles_string(self, qs: Sequence[float] = DEFAULT_PERCENTILES) -> str:
        """Compact readout, e.g. ``p50=1.20 p95=3.40 p99=3.90``."""
        return " ".join(
            f"p{q:g}={value:.2f}"
            for q, value in zip(qs, self.percentiles(qs), strict=True)
        )

    def clear(self) -> None:
        self._buffer.fill(0.0)
        self._head = 0
        self.total_recorded = 0
