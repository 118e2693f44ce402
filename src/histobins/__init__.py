"""
Histogram binning tools.

This package computes histogram bin boundaries aligned on round numbers
and per-bin sample counts, including:

Modules:
- histogram: Bin builder (compute_bins, Histogram estimator, options)
- utils: Data preprocessing, tick steps, ranges and threshold methods
- statistics: Extrema, deviation and quantiles
- errors: Exceptions raised on invalid options or data

Example usage:
    from histobins import compute_bins
    result = compute_bins(values, {'method': 'sturges', 'padBounds': True})
"""

__version__ = "0.1.0"

from .errors import (
    HistogramError, UnknownThresholdMethodError, InvalidOptionsError,
    InsufficientDataError, BinningError
)
from .histogram import Bin, Histogram, BinningOptions, compute_bins, normalize_options
from .utils import THRESHOLD_METHODS, tick_step, rounded_range

__all__ = [
    # Histogram
    'Bin', 'Histogram', 'BinningOptions', 'compute_bins', 'normalize_options',
    # Utils
    'THRESHOLD_METHODS', 'tick_step', 'rounded_range',
    # Errors
    'HistogramError', 'UnknownThresholdMethodError', 'InvalidOptionsError',
    'InsufficientDataError', 'BinningError',
]
