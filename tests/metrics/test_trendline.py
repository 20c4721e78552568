"""Tests for the least-squares trendline"""

import pytest

from capital_tracker.metrics.trendline import Trendline, fit_trendline


class TestFitTrendline:
    """Test the OLS fit against sequence index"""

    def test_perfectly_linear(self):
        """Test an exact line is recovered"""
        fit = fit_trendline([0, 10, 20, 30])
        assert fit.slope == 10
        assert fit.intercept == 0

    def test_offset_line(self):
        """Test a line with a non-zero intercept"""
        fit = fit_trendline([100, 150, 200])
        assert fit.slope == pytest.approx(50)
        assert fit.intercept == pytest.approx(100)

    def test_flat_series(self):
        """Test constant amounts give a zero slope"""
        fit = fit_trendline([500, 500, 500])
        assert fit.slope == 0
        assert fit.intercept == 500

    def test_noisy_series(self):
        """Test a known least-squares solution"""
        # x = 0..3, y = 1, 3, 2, 5 -> slope 1.1, intercept 1.1
        fit = fit_trendline([1, 3, 2, 5])
        assert fit.slope == pytest.approx(1.1)
        assert fit.intercept == pytest.approx(1.1)

    def test_two_points(self):
        """Test the minimum number of points"""
        fit = fit_trendline([10, -10])
        assert fit.slope == pytest.approx(-20)
        assert fit.intercept == pytest.approx(10)

    @pytest.mark.parametrize("amounts", [[], [42]])
    def test_undefined_below_two_points(self, amounts):
        """Test fewer than two points give None"""
        assert fit_trendline(amounts) is None


class TestTrendline:
    """Test fitted value evaluation"""

    def test_value_at(self):
        """Test value_at evaluates intercept + slope * index"""
        line = Trendline(slope=2.5, intercept=10)
        assert line.value_at(0) == 10
        assert line.value_at(4) == 20
