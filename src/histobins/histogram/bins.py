"""
Histogram bin construction.

Bins are aligned on "nice" tick values: the number of bins comes from a
threshold method, the tick step from ``tick_step`` and the interior edges
from ``rounded_range``. The first and last bins stretch from the outer
ticks to the data extrema, or by a whole step when the extremum does not
sit exactly one step away (the bound is then "extended").
"""

import logging
from decimal import Decimal

import numpy as np

from ..errors import BinningError, HistogramError, InsufficientDataError
from ..statistics import max_value, min_value
from ..utils import data_preprocess, get_threshold_method, rounded_range, tick_step
from .options import normalize_options

logger = logging.getLogger(__name__)

# Largest number of tick edges built for a single histogram.
MAX_EDGES = 100000


class Bin(object):
    """Interval ``[x0, x1)`` (closed at the global maximum) and its samples."""

    __slots__ = ('x0', 'x1', 'sample')

    def __init__(self, x0, x1, sample=None):
        self.x0 = x0
        self.x1 = x1
        self.sample = [] if sample is None else sample

    @property
    def count(self):
        return len(self.sample)

    @property
    def midpoint(self):
        return (self.x0 + self.x1) / 2

    @property
    def label(self):
        return f"{format_edge(self.x0)} - {format_edge(self.x1)}"

    def to_record(self):
        """(midpoint, count, x0, x1, label)"""
        return (self.midpoint, self.count, self.x0, self.x1, self.label)

    def to_custom_record(self):
        """(x0, x1, count)"""
        return (self.x0, self.x1, self.count)

    def __eq__(self, other):
        if not isinstance(other, Bin):
            return NotImplemented
        return (self.x0, self.x1, self.sample) == (other.x0, other.x1, other.sample)

    def __repr__(self):
        return f"Bin(x0={self.x0!r}, x1={self.x1!r}, count={self.count})"


def format_edge(value):
    """
    Shortest string for ``value``, written like a JavaScript number.

    Integral values print without ".0". Magnitudes from 1e-6 up to 1e21
    use plain decimal notation; outside that range the exponent form is
    used, without zero padding ("5e+21", "1.5e-7").
    """
    value = float(value)
    if value == 0:
        return "0"
    if not np.isfinite(value):
        return "NaN" if np.isnan(value) else ("Infinity" if value > 0 else "-Infinity")

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip
    _, digits, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digits))
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"
    return sign + text


def _bin_count(threshold, values, min_v, max_v, method):
    count = threshold(values, min_v, max_v)
    if not np.isfinite(count) or count < 1:
        logger.warning("Threshold method %s gave %r bins, using a single bin", method, count)
        return 1
    return int(count)


def _build_bins(edges, min_v, max_v, step, precision):
    """Create empty bins around ``edges``; return them with the extension flags."""
    n_edges = len(edges)
    if n_edges == 0:
        # no tick inside [min, max]: one bin on the enclosing step
        x0 = round(float(np.floor(min_v / step)) * step, precision)
        return [Bin(x0, round(x0 + step, precision))], True, True

    left_extended = edges[0] - min_v != step
    right_extended = max_v - edges[-1] != step

    bins = [Bin(edges[i - 1], edges[i]) for i in range(1, n_edges)]
    first = Bin(round(edges[0] - step, precision) if left_extended else min_v, edges[0])
    last = Bin(edges[-1], round(edges[-1] + step, precision) if right_extended else max_v)
    return [first] + bins + [last], left_extended, right_extended


def _pad_bounds(bins, left_extended, right_extended):
    if len(bins) < 2:
        return
    if left_extended:
        bins[1].sample = bins[1].sample + bins[0].sample
        bins[0].sample = []
    if right_extended:
        bins[-2].sample = bins[-2].sample + bins[-1].sample
        bins[-1].sample = []


def _result(bins):
    return {
        'bins': bins,
        'data': [b.to_record() for b in bins],
        'customData': [b.to_custom_record() for b in bins],
    }


def compute_bins(data, opt_or_method=None):
    """
    Compute histogram bins of ``data``.

    Parameters
    ----------
    data : array-like
        Flat sequence of numbers, or rows from which ``dimensions``
        selects one column. Non-finite entries are dropped.
    opt_or_method : str, dict or BinningOptions, optional
        Threshold method name ('squareRoot', 'scott', 'freedmanDiaconis',
        'sturges') or options with keys ``method``, ``dimensions`` and
        ``padBounds``.

    Returns
    -------
    dict
        ``bins``: list of ``Bin``; ``data``: ``(midpoint, count, x0, x1,
        label)`` per bin; ``customData``: ``(x0, x1, count)`` per bin.

    Raises
    ------
    UnknownThresholdMethodError
        If the method name is not recognised.
    InsufficientDataError
        If no finite value is left after preprocessing.
    BinningError
        If no usable step can be derived from the data, or the step would
        need more than ``MAX_EDGES`` edges.

    Examples
    --------
    >>> result = compute_bins([0.3, 1.2, 1.5, 2.5, 3.7, 4.1])
    >>> [c for _, _, c in result['customData']]
    [1, 2, 1, 1, 1]
    """
    opt = normalize_options(opt_or_method)
    values = data_preprocess(data, opt.dimensions)
    if values.size == 0:
        raise InsufficientDataError("No finite values to compute bins from")

    max_v = max_value(values)
    min_v = min_value(values)

    if min_v == max_v:
        logger.debug("All %d values equal %r, using a single bin", values.size, min_v)
        return _result([Bin(min_v, max_v, values.tolist())])

    threshold = get_threshold_method(opt.method)
    n_bins = _bin_count(threshold, values, min_v, max_v, opt.method)
    step, precision = tick_step(min_v, max_v, n_bins)
    if not np.isfinite(step) or step <= 0:
        raise BinningError(f"Cannot bin data: degenerate step {step!r} for [{min_v}, {max_v}]")

    lo = round(float(np.ceil(min_v / step)) * step, precision)
    hi = round(float(np.floor(max_v / step)) * step, precision)
    if (hi - lo) / step > MAX_EDGES:
        raise BinningError(
            f"Cannot bin data: {opt.method} asked for {n_bins} bins, "
            f"step {step!r} would need more than {MAX_EDGES} edges"
        )
    edges = rounded_range(lo, hi, step, precision)
    bins, left_extended, right_extended = _build_bins(edges, min_v, max_v, step, precision)
    logger.debug(
        "method=%s target=%d step=%r precision=%d edges=%d extended=(%s, %s)",
        opt.method, n_bins, step, precision, len(edges), left_extended, right_extended,
    )

    in_range = values[(min_v <= values) & (values <= max_v)]
    indices = np.searchsorted(np.asarray(edges, dtype=np.float64), in_range, side='right')
    for index, value in zip(indices, in_range.tolist()):
        bins[index].sample.append(value)

    if opt.pad_bounds:
        logger.debug("Padding bounds (left=%s, right=%s)", left_extended, right_extended)
        _pad_bounds(bins, left_extended, right_extended)

    return _result(bins)


class Histogram(object):
    """
    Histogram bin estimator.

    Parameters
    ----------
    method : str, optional
        Threshold method (default: 'squareRoot').
    dimensions : int or list of int, optional
        Column to use for row-oriented data.
    pad_bounds : bool, optional
        Move samples of extended boundary bins into their neighbours.
    """

    def __init__(self, method=None, dimensions=None, pad_bounds=False):
        self.options = normalize_options(
            {'method': method, 'dimensions': dimensions, 'pad_bounds': pad_bounds}
        )
        self.bins = None
        self.data = None
        self.custom_data = None

    def fit(self, data):
        """
        Compute the bins of ``data``.

        Returns
        -------
        self : Histogram
            The fitted estimator
        """
        result = compute_bins(data, self.options)
        self.bins = result['bins']
        self.data = result['data']
        self.custom_data = result['customData']
        return self

    def _check_fitted(self):
        if self.bins is None:
            raise HistogramError("Histogram is not fitted yet; call fit first")

    @property
    def counts(self):
        self._check_fitted()
        return [b.count for b in self.bins]

    @property
    def edges(self):
        """Bin boundaries, ``len(bins) + 1`` values."""
        self._check_fitted()
        return [b.x0 for b in self.bins] + [self.bins[-1].x1]

    @staticmethod
    def compute(data, opt_or_method=None):
        """Static method for quick computation; see ``compute_bins``."""
        return compute_bins(data, opt_or_method)
