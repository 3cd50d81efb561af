"""Custom exception types used across :mod:`degsep`."""

from __future__ import annotations


class DegsepError(Exception):
    """Base class for all package-specific errors."""


class InputError(DegsepError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class GraphFormatError(InputError):
    """Raised when parsing an edge file fails or a weight is invalid."""


class ConfigError(DegsepError, ValueError):
    """Raised for invalid configuration options."""


class OversizedSampleError(InputError):
    """Raised when a sample larger than the vertex set is requested."""


class EmptyAggregationError(DegsepError, ValueError):
    """Raised when statistics are requested over zero distance records."""


__all__ = [
    "DegsepError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "OversizedSampleError",
    "EmptyAggregationError",
]
