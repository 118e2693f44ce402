"""
Descriptive statistics over one-dimensional numeric sequences.

Non-finite entries are ignored by the extrema. Empty input yields NaN
rather than raising, so callers decide how to treat degenerate data.
"""

import numpy as np


def _finite(values):
    values = np.asarray(values, dtype=np.float64).ravel()
    return values[np.isfinite(values)]


def max_value(values):
    """Largest finite value of ``values`` (NaN when there is none)."""
    values = _finite(values)
    if values.size == 0:
        return np.nan
    return float(values.max())


def min_value(values):
    """Smallest finite value of ``values`` (NaN when there is none)."""
    values = _finite(values)
    if values.size == 0:
        return np.nan
    return float(values.min())


def deviation(values):
    """
    Sample standard deviation (``ddof=1``).

    Parameters
    ----------
    values : array-like
        Input samples. Non-finite entries are ignored.

    Returns
    -------
    float
        Standard deviation, or NaN when fewer than two samples remain.
    """
    values = _finite(values)
    if values.size < 2:
        return np.nan
    return float(np.std(values, ddof=1))


def quantile(sorted_values, p):
    """
    Quantile of an ascending sequence by linear interpolation.

    The p-quantile is read at the fractional index ``(n - 1) * p`` and
    interpolated between the two surrounding order statistics, which is
    numpy's default "linear" method.

    Parameters
    ----------
    sorted_values : array-like
        Values, usually already sorted in ascending order.
    p : float
        Probability in [0, 1].

    Returns
    -------
    float
        The interpolated quantile, or NaN for empty input.
    """
    if not 0 <= p <= 1:
        raise ValueError(f"p must be in [0, 1], got {p}")
    values = np.asarray(sorted_values, dtype=np.float64).ravel()
    if values.size == 0:
        return np.nan
    return float(np.quantile(values, p))

