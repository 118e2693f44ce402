"""
Tests for the threshold methods choosing the number of bins.
"""
import numpy as np
import pytest
from scipy.stats import norm

from histobins.errors import UnknownThresholdMethodError
from histobins.utils import (
    THRESHOLD_METHODS, canonical_method_name, get_threshold_method,
    square_root, scott, freedman_diaconis, sturges
)


class TestThresholdMethods:
    """Test individual threshold methods."""

    def test_square_root(self):
        assert square_root(list(range(100))) == 10
        assert square_root(list(range(101))) == 11

    @pytest.mark.parametrize("n", [2500, 2501, 10000, 1000000])
    def test_square_root_cap(self, n):
        """Never more than 50 bins."""
        assert square_root(np.zeros(n)) == 50

    def test_sturges(self):
        assert sturges(list(range(100))) == 8
        assert sturges(list(range(128))) == 8

    def test_scott(self):
        """Scott's rule uses the sample deviation."""
        np.random.seed(42)
        data = norm.rvs(loc=5.0, scale=2.0, size=1000)
        lo, hi = data.min(), data.max()
        expected = np.ceil((hi - lo) / (3.5 * np.std(data, ddof=1) * 1000 ** (-1 / 3)))
        assert scott(data, lo, hi) == expected

    def test_freedman_diaconis(self):
        """Freedman-Diaconis uses the interquartile range."""
        np.random.seed(42)
        data = norm.rvs(size=500)
        lo, hi = data.min(), data.max()
        q75, q25 = np.percentile(data, [75, 25])
        expected = np.ceil((hi - lo) / (2 * (q75 - q25) * 500 ** (-1 / 3)))
        assert freedman_diaconis(data, lo, hi) == expected

    def test_freedman_diaconis_keeps_input_order(self):
        """The caller's data is not sorted in place."""
        data = [5.0, 1.0, 4.0, 2.0, 3.0]
        arr = np.array(data)
        freedman_diaconis(data, 1.0, 5.0)
        freedman_diaconis(arr, 1.0, 5.0)
        assert data == [5.0, 1.0, 4.0, 2.0, 3.0]
        np.testing.assert_array_equal(arr, [5.0, 1.0, 4.0, 2.0, 3.0])

    def test_degenerate_results(self):
        """Degenerate data gives non-finite counts instead of raising."""
        assert not np.isfinite(scott([1.0], 1.0, 1.0))
        assert not np.isfinite(freedman_diaconis([1, 1, 1, 1, 5], 1, 5))
        assert not np.isfinite(sturges([]))


class TestMethodRegistry:
    """Test method name resolution."""

    def test_registry(self):
        assert set(THRESHOLD_METHODS) == {'squareRoot', 'scott', 'freedmanDiaconis', 'sturges'}

    def test_default(self):
        assert canonical_method_name(None) == 'squareRoot'

    def test_aliases(self):
        assert canonical_method_name('square_root') == 'squareRoot'
        assert get_threshold_method('freedman_diaconis') is freedman_diaconis

    @pytest.mark.parametrize("method", ['foo', 'SquareRoot', 42])
    def test_unknown(self, method):
        with pytest.raises(UnknownThresholdMethodError):
            canonical_method_name(method)
