"""
"Nice" step sizes for aligning bin edges on round numbers.
"""

from collections import namedtuple

import numpy as np

TickStep = namedtuple("TickStep", "step precision")

# Thresholds on step0 / 10**e above which the step is bumped to 10, 5 or 2.
_E10 = np.sqrt(50)
_E5 = np.sqrt(10)
_E2 = np.sqrt(2)


def quantity_exponent(value):
    """Decimal exponent of ``value``, i.e. floor(log10(|value|))."""
    value = abs(value)
    if value == 0:
        return 0
    exp = int(np.floor(np.log10(value)))
    # log10 can land just below an integer for exact powers of ten
    if value / 10 ** exp >= 10:
        exp += 1
    return exp


def tick_step(start, stop, count):
    """
    Compute a step of the form 10**e * {1, 2, 5, 10} splitting
    ``[start, stop]`` into roughly ``count`` intervals.

    Parameters
    ----------
    start, stop : float
        Bounds of the interval.
    count : int
        Desired number of intervals.

    Returns
    -------
    TickStep
        ``step`` is the nice step (negative when ``stop < start``, NaN when
        no step exists: zero span, non-positive count or non-finite
        input). ``precision`` is the number of decimal digits needed to
        print multiples of the step without float noise.
    """
    if not (np.isfinite(start) and np.isfinite(stop) and np.isfinite(count)):
        return TickStep(np.nan, 0)
    if count <= 0 or start == stop:
        return TickStep(np.nan, 0)

    step0 = abs(stop - start) / count
    exp = quantity_exponent(step0)
    step1 = 10.0 ** exp
    error = step0 / step1

    if error >= _E10:
        step1 *= 10
    elif error >= _E5:
        step1 *= 5
    elif error >= _E2:
        step1 *= 2

    precision = -exp if exp < 0 else 0
    step = round(step1, precision)
    return TickStep(step if stop >= start else -step, precision)
