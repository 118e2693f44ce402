"""
Tests for nice tick steps and drift-free ranges.
"""
import numpy as np
import pytest

from histobins.utils import tick_step, quantity_exponent, rounded_range


class TestQuantityExponent:
    """Test decimal exponent computation."""

    @pytest.mark.parametrize("value, expected", [
        (1000, 3), (999, 2), (1, 0), (0.5, -1), (0.001, -3), (0, 0),
    ])
    def test_exponent(self, value, expected):
        assert quantity_exponent(value) == expected


class TestTickStep:
    """Test nice step selection."""

    @pytest.mark.parametrize("start, stop, count, step, precision", [
        (0, 10, 10, 1, 0),
        (1, 100, 10, 10, 0),
        (0.1, 0.7, 3, 0.2, 1),
        (0, 1, 3, 0.5, 1),
        (0, 1, 7, 0.2, 1),
        (0, 1, 50, 0.02, 2),
        (0, 1000, 4, 200, 0),
    ])
    def test_nice_steps(self, start, stop, count, step, precision):
        """Steps are 1, 2 or 5 times a power of ten."""
        result = tick_step(start, stop, count)
        assert result.step == step
        assert result.precision == precision

    def test_reversed_interval(self):
        """A decreasing interval gives a negative step."""
        assert tick_step(10, 0, 10).step == -1

    @pytest.mark.parametrize("start, stop, count", [
        (5, 5, 3), (0, 1, 0), (0, 1, -2), (0, np.nan, 3), (0, 1, np.inf),
    ])
    def test_degenerate(self, start, stop, count):
        """No step exists for an empty span or a non-positive count."""
        assert np.isnan(tick_step(start, stop, count).step)

    def test_precision_prints_cleanly(self):
        """Multiples of the step rounded to precision have short reprs."""
        step, precision = tick_step(0.1, 0.7, 3)
        values = [round(0.1 + i * step, precision) for i in range(4)]
        assert [repr(v) for v in values] == ['0.1', '0.3', '0.5', '0.7']


class TestRoundedRange:
    """Test rounded_range."""

    def test_end_inclusive(self):
        assert rounded_range(0.2, 0.6, 0.2, 1) == [0.2, 0.4, 0.6]

    def test_integer_steps(self):
        values = rounded_range(10, 100, 10, 0)
        assert len(values) == 10
        assert values[0] == 10 and values[-1] == 100

    def test_no_drift(self):
        """Values do not accumulate float error."""
        values = rounded_range(0, 1, 0.1, 1)
        assert values == [0.0, 0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]

    def test_precision_from_step(self):
        """Precision defaults to the step's decimal digits."""
        assert rounded_range(0, 0.75, 0.25) == [0.0, 0.25, 0.5, 0.75]

    def test_empty_when_reversed(self):
        assert rounded_range(1.0, 0.0, 1.0, 0) == []

    def test_restartable(self):
        """Same inputs, same output."""
        assert rounded_range(0.5, 3, 0.5, 1) == rounded_range(0.5, 3, 0.5, 1)
