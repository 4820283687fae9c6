"""Unit conversion and range constants for TimeSpan values."""

MILLISECONDS_PER_SECOND = 1000
"""Number of milliseconds in 1 second."""

MILLISECONDS_PER_MINUTE = 60000
"""Number of milliseconds in 1 minute."""

MILLISECONDS_PER_HOUR = 3600000
"""Number of milliseconds in 1 hour."""

MILLISECONDS_PER_DAY = 86400000
"""Number of milliseconds in 1 day."""

MAX_SAFE_INTEGER = 2**53 - 1
"""Largest millisecond total a TimeSpan may hold (exact as an IEEE double)."""

MIN_SAFE_INTEGER = -(2**53 - 1)
"""Smallest millisecond total a TimeSpan may hold."""

# Component moduli for the truncating breakdown
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
