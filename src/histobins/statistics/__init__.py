"""
Array statistics used by the bin builder.

Pure functions over sequences of numbers: extrema, sample standard
deviation and linear-interpolation quantiles.
"""

from .descriptive import max_value, min_value, deviation, quantile

__all__ = ['max_value', 'min_value', 'deviation', 'quantile']
