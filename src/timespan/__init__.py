"""timespan - An immutable, millisecond-precision time interval type."""

from __future__ import annotations

try:
    from timespan._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from timespan._constants import (
    MAX_SAFE_INTEGER,
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MILLISECONDS_PER_MINUTE,
    MILLISECONDS_PER_SECOND,
    MIN_SAFE_INTEGER,
)
from timespan._errors import OutOfRangeError, TimeSpanError
from timespan._timespan import TimeSpan

__all__ = [
    "TimeSpan",
    "ZERO",
    "MIN_VALUE",
    "MAX_VALUE",
    "MILLISECONDS_PER_SECOND",
    "MILLISECONDS_PER_MINUTE",
    "MILLISECONDS_PER_HOUR",
    "MILLISECONDS_PER_DAY",
    "MIN_SAFE_INTEGER",
    "MAX_SAFE_INTEGER",
    "TimeSpanError",
    "OutOfRangeError",
]

ZERO = TimeSpan.ZERO
MIN_VALUE = TimeSpan.MIN_VALUE
MAX_VALUE = TimeSpan.MAX_VALUE
