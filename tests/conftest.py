"""Shared test fixtures."""

import math

import pytest

from timespan import (
    MAX_SAFE_INTEGER,
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MILLISECONDS_PER_MINUTE,
    MILLISECONDS_PER_SECOND,
    MIN_SAFE_INTEGER,
    TimeSpan,
)

# Largest whole-unit inputs each unit factory accepts
UNIT_LIMITS = {
    "from_seconds": (
        math.ceil(MIN_SAFE_INTEGER / MILLISECONDS_PER_SECOND),
        math.floor(MAX_SAFE_INTEGER / MILLISECONDS_PER_SECOND),
        MILLISECONDS_PER_SECOND,
    ),
    "from_minutes": (
        math.ceil(MIN_SAFE_INTEGER / MILLISECONDS_PER_MINUTE),
        math.floor(MAX_SAFE_INTEGER / MILLISECONDS_PER_MINUTE),
        MILLISECONDS_PER_MINUTE,
    ),
    "from_hours": (
        math.ceil(MIN_SAFE_INTEGER / MILLISECONDS_PER_HOUR),
        math.floor(MAX_SAFE_INTEGER / MILLISECONDS_PER_HOUR),
        MILLISECONDS_PER_HOUR,
    ),
    "from_days": (
        math.ceil(MIN_SAFE_INTEGER / MILLISECONDS_PER_DAY),
        math.floor(MAX_SAFE_INTEGER / MILLISECONDS_PER_DAY),
        MILLISECONDS_PER_DAY,
    ),
}

SAMPLE_SPANS = [
    TimeSpan.MIN_VALUE,
    TimeSpan.from_days(-3),
    TimeSpan.from_milliseconds(-1),
    TimeSpan.ZERO,
    TimeSpan.from_milliseconds(1),
    TimeSpan.from_components(1, 2, 3, 4, 5),
    TimeSpan.MAX_VALUE,
]


@pytest.fixture
def one_hour():
    return TimeSpan.from_hours(1)


@pytest.fixture
def two_hours():
    return TimeSpan.from_hours(2)
