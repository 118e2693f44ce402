"""
Extraction of a flat numeric sample from flat or row-oriented data.
"""

import numbers

import numpy as np

from ..errors import InvalidOptionsError


def normalize_dimensions(dimensions):
    """
    Canonical list form of a dimension selector.

    ``None`` gives ``[]``, an integer ``d`` gives ``[d]`` and a sequence of
    integers is copied to a list.
    """
    if dimensions is None:
        return []
    if isinstance(dimensions, numbers.Integral) and not isinstance(dimensions, bool):
        dims = [int(dimensions)]
    else:
        try:
            dims = list(dimensions)
        except TypeError:
            raise InvalidOptionsError(f"Invalid dimensions: {dimensions!r}") from None

    for dim in dims:
        if isinstance(dim, bool) or not isinstance(dim, numbers.Integral) or dim < 0:
            raise InvalidOptionsError(f"Dimensions must be non-negative integers, got {dimensions!r}")
    return [int(d) for d in dims]


def _to_float(value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        return None
    return value if np.isfinite(value) else None


def _is_row(item):
    return isinstance(item, (list, tuple, np.ndarray)) and not isinstance(item, str)


def data_preprocess(data, dimensions=None):
    """
    Flatten ``data`` into a 1D array of finite floats.

    Parameters
    ----------
    data : array-like
        Either a flat sequence of numbers or a sequence of rows
        (2D ndarray, list of lists/tuples).
    dimensions : list of int, optional
        Normalized dimension selector. For row data the first entry is
        the column used (0 when empty). Ignored for flat data.

    Returns
    -------
    values : array, shape (n_values,)
        Finite values in their original order. Rows that are too short or
        whose selected entry is not numeric are dropped.
    """
    dimensions = dimensions or []
    dim = dimensions[0] if dimensions else 0

    if isinstance(data, np.ndarray) and data.dtype.kind in 'iuf':
        if data.ndim == 2:
            if dim >= data.shape[1]:
                return np.empty(0, dtype=np.float64)
            data = data[:, dim]
        data = np.asarray(data, dtype=np.float64).ravel()
        return data[np.isfinite(data)]

    values = []
    for item in data:
        if _is_row(item):
            if dim >= len(item):
                continue
            item = item[dim]
        value = _to_float(item)
        if value is not None:
            values.append(value)
    return np.asarray(values, dtype=np.float64)
