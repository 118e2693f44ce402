"""
Threshold methods choosing how many bins a histogram should have.

Each method takes the samples together with their minimum and maximum
and returns a target bin count. The result can be NaN, infinite or zero
on degenerate data (a single sample, zero spread); the bin builder is
responsible for clamping it.

See https://en.wikipedia.org/wiki/Histogram#Number_of_bins_and_width
"""

import numpy as np

from ..errors import UnknownThresholdMethodError
from ..statistics import deviation, quantile

SQUARE_ROOT_MAX_BINS = 50


def square_root(data, min_value=None, max_value=None):
    """ceil(sqrt(n)) bins, capped at 50."""
    bins = int(np.ceil(np.sqrt(len(data))))
    return min(bins, SQUARE_ROOT_MAX_BINS)


def scott(data, min_value, max_value):
    """
    Scott's normal reference rule.

    Bin width is ``3.5 * sigma * n**(-1/3)``; outliers inflate sigma.
    """
    n = len(data)
    with np.errstate(divide='ignore', invalid='ignore'):
        width = 3.5 * deviation(data) * np.power(float(n), -1 / 3)
        return np.ceil(np.float64(max_value - min_value) / width)


def freedman_diaconis(data, min_value, max_value):
    """
    Freedman-Diaconis rule.

    Bin width is ``2 * IQR * n**(-1/3)``, robust to outliers. The
    quartiles are taken on a sorted copy; ``data`` is left untouched.
    """
    n = len(data)
    if n == 0:
        return np.nan
    sorted_data = np.sort(np.asarray(data, dtype=np.float64))
    iqr = quantile(sorted_data, 0.75) - quantile(sorted_data, 0.25)
    with np.errstate(divide='ignore', invalid='ignore'):
        width = 2 * iqr * np.power(float(n), -1 / 3)
        return np.ceil(np.float64(max_value - min_value) / width)


def sturges(data, min_value=None, max_value=None):
    """ceil(log2(n)) + 1 bins; assumes roughly normal data."""
    with np.errstate(divide='ignore'):
        return np.ceil(np.log2(float(len(data)))) + 1


THRESHOLD_METHODS = {
    'squareRoot': square_root,
    'scott': scott,
    'freedmanDiaconis': freedman_diaconis,
    'sturges': sturges,
}

_ALIASES = {
    'square_root': 'squareRoot',
    'freedman_diaconis': 'freedmanDiaconis',
}

DEFAULT_METHOD = 'squareRoot'


def canonical_method_name(method):
    """
    Map ``method`` onto one of the keys of ``THRESHOLD_METHODS``.

    ``None`` selects the default (``squareRoot``); snake_case aliases are
    accepted.
    """
    if method is None:
        return DEFAULT_METHOD
    if isinstance(method, str):
        name = _ALIASES.get(method, method)
        if name in THRESHOLD_METHODS:
            return name
    raise UnknownThresholdMethodError(method)


def get_threshold_method(method):
    """Threshold function registered under ``method`` (or an alias)."""
    return THRESHOLD_METHODS[canonical_method_name(method)]
