"""
Histogram module.

Builds bins aligned on nice tick values from a flat or row-oriented
dataset, with a selectable threshold method.
"""

from .bins import Bin, Histogram, compute_bins, format_edge
from .options import BinningOptions, normalize_options

__all__ = ['Bin', 'Histogram', 'compute_bins', 'format_edge', 'BinningOptions', 'normalize_options']
