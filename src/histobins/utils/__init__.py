"""
Utility module for bin construction.

This module provides data preprocessing, nice tick steps, drift-free
ranges and the threshold methods selecting the number of bins.
"""

from .data_process import normalize_dimensions, data_preprocess
from .tick_step import TickStep, tick_step, quantity_exponent
from .ranges import rounded_range
from .binning import (
    THRESHOLD_METHODS,
    DEFAULT_METHOD,
    canonical_method_name,
    get_threshold_method,
    square_root,
    scott,
    freedman_diaconis,
    sturges,
)

__all__ = [
    'normalize_dimensions', 'data_preprocess',
    'TickStep', 'tick_step', 'quantity_exponent',
    'rounded_range',
    'THRESHOLD_METHODS', 'DEFAULT_METHOD', 'canonical_method_name', 'get_threshold_method',
    'square_root', 'scott', 'freedman_diaconis', 'sturges',
]
