import numpy as np
import pytest

from skydodge.util.metrics import RollingWindow


class TestRollingWindow:
    def test_empty_window_reports_zeros(self) -> None:
        window = RollingWindow(capacity=10)
        assert window.sample_count == 0
        assert window.mean == 0.0
        assert window.latest == 0.0
        assert window.percentiles() == (0.0, 0.0, 0.0)
        assert window.percentiles_string() == "p50=0.00 p95=0.00 p99=0.00"

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            RollingWindow(capacity=0)

    def test_percentiles_before_wrapping(self) -> None:
        window = RollingWindow(capacity=10)
        for i in range(5):
            window.record(i)
        assert window.sample_count == 5
        p50, p95, p99 = window.percentiles()
        assert p50 == pytest.approx(2.0)
        assert p95 == pytest.approx(3.8)
        assert p99 == pytest.approx(3.96)
        assert window.mean == pytest.approx(2.0)
        assert window.latest == 4.0

    def test_wrapping_keeps_most_recent_in_order(self) -> None:
        window = RollingWindow(capacity=10)
        for i in range(15):
            window.record(i)
        assert window.sample_count == 10
        assert window.total_recorded == 15
        np.testing.assert_array_equal(window.values(), np.arange(5, 15))
        p50, p95, p99 = window.percentiles()
        assert p50 == pytest.approx(9.5)
        assert p95 == pytest.approx(13.55)
        assert p99 == pytest.approx(13.91)
        assert window.latest == 14.0

    def test_custom_percentiles(self) -> None:
        window = RollingWindow(capacity=4)
        for value in (-9050.0, -10.0, 22.8):
            window.record(value)
        assert window.percentiles((0, 50, 100)) == pytest.approx(
            (-9050.0, -10.0, 22.8)
        )
        assert window.percentiles_string((50,)) == "p50=-10.00"

    def test_clear(self) -> None:
        window = RollingWindow(capacity=4)
        for i in range(6):
            window.record(i)
        window.clear()
        assert window.sample_count == 0
        assert window.total_recorded == 0
        assert window.percentiles() == (0.0, 0.0, 0.0)
