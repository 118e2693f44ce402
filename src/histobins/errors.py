"""
Exceptions raised while computing histogram bins.
"""


class HistogramError(ValueError):
    """Base class for every error raised by histobins."""


class UnknownThresholdMethodError(HistogramError):
    """Raised when a threshold method name is not recognised."""

    def __init__(self, method):
        self.method = method
        super().__init__(f"Unknown threshold method: {method!r}")


class InvalidOptionsError(HistogramError):
    """Raised for unsupported option keys or malformed dimensions."""


class InsufficientDataError(HistogramError):
    """Raised when no finite value is left to bin."""


class BinningError(HistogramError):
    """Raised when the data cannot be binned (degenerate step)."""
