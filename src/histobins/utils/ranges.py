"""
Evenly spaced sequences free of accumulated floating-point drift.
"""

import math


def step_precision(step, max_digits=15):
    """Smallest number of decimal digits that represents ``step`` exactly."""
    for digits in range(max_digits + 1):
        if round(step, digits) == step:
            return digits
    return max_digits


def rounded_range(start, end, step, precision=None):
    """
    Values ``start, start + step, ...`` up to and including ``end``.

    Each value is computed as ``start + i * step`` and rounded to
    ``precision`` decimal digits, so the result does not depend on
    repeated addition.

    Parameters
    ----------
    start, end : float
        First value and inclusive upper bound.
    step : float
        Positive spacing.
    precision : int, optional
        Decimal digits kept; derived from ``step`` when omitted.

    Returns
    -------
    list of float
        Empty when ``end < start``.
    """
    start, end, step = float(start), float(end), float(step)
    if precision is None:
        precision = step_precision(step)
    n = math.ceil(round((end - start) / step, precision))
    if n < 0:
        return []
    return [round(start + i * step, precision) for i in range(n + 1)]
