"""
Normalization of the options accepted by the bin builder.
"""

from collections import namedtuple
from collections.abc import Mapping

from ..errors import InvalidOptionsError
from ..utils import canonical_method_name, normalize_dimensions

_BinningOptions = namedtuple("BinningOptions", "method dimensions pad_bounds")

_KEYS = {
    'method': 'method',
    'dimensions': 'dimensions',
    'padBounds': 'pad_bounds',
    'pad_bounds': 'pad_bounds',
}


class BinningOptions(_BinningOptions):
    """
    Validated binning settings.

    Parameters
    ----------
    method : str, optional
        Threshold method name (default: 'squareRoot').
    dimensions : int or list of int, optional
        Column used when the data is row-oriented.
    pad_bounds : bool, optional
        Merge extended boundary bins into their neighbours (default: False).
    """

    __slots__ = ()

    def __new__(cls, method=None, dimensions=None, pad_bounds=False):
        return super().__new__(
            cls,
            canonical_method_name(method),
            normalize_dimensions(dimensions),
            bool(pad_bounds),
        )


def normalize_options(opt_or_method=None):
    """
    Build ``BinningOptions`` from a method name, a mapping or ``None``.

    Mapping keys follow the original camelCase spelling (``padBounds``);
    ``pad_bounds`` is accepted as well.
    """
    if opt_or_method is None:
        return BinningOptions()
    if isinstance(opt_or_method, BinningOptions):
        return opt_or_method
    if isinstance(opt_or_method, str):
        return BinningOptions(method=opt_or_method)
    if not isinstance(opt_or_method, Mapping):
        raise InvalidOptionsError(
            f"Options must be a method name or a mapping, got {type(opt_or_method).__name__}"
        )

    kwargs = {}
    for key, value in opt_or_method.items():
        if key not in _KEYS:
            raise InvalidOptionsError(f"Unknown option: {key!r}")
        kwargs[_KEYS[key]] = value
    return BinningOptions(**kwargs)
