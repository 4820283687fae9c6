"""The TimeSpan value type: a signed, integer-millisecond time interval."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar

from timespan._constants import (
    HOURS_PER_DAY,
    MAX_SAFE_INTEGER,
    MILLISECONDS_PER_DAY,
    MILLISECONDS_PER_HOUR,
    MILLISECONDS_PER_MINUTE,
    MILLISECONDS_PER_SECOND,
    MIN_SAFE_INTEGER,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from timespan._errors import ERR_MSG_OUT_OF_RANGE, OutOfRangeError
from timespan._utils import pad_component, to_fraction, validate_total

Number = int | float | Fraction | Decimal


def _is_scalar(value: object) -> bool:
    return isinstance(value, (numbers.Real, Decimal))


@dataclass(frozen=True, order=True)
class TimeSpan:
    """An immutable time interval with millisecond precision.

    The millisecond total is the single value of record. It is always an
    int inside [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER]; fractional input is
    rounded to the nearest millisecond and anything outside the range
    raises OutOfRangeError.
    """

    total_milliseconds: int

    MILLISECONDS_PER_SECOND: ClassVar[int] = MILLISECONDS_PER_SECOND
    MILLISECONDS_PER_MINUTE: ClassVar[int] = MILLISECONDS_PER_MINUTE
    MILLISECONDS_PER_HOUR: ClassVar[int] = MILLISECONDS_PER_HOUR
    MILLISECONDS_PER_DAY: ClassVar[int] = MILLISECONDS_PER_DAY

    ZERO: ClassVar[TimeSpan]
    MIN_VALUE: ClassVar[TimeSpan]
    MAX_VALUE: ClassVar[TimeSpan]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "total_milliseconds", validate_total(self.total_milliseconds)
        )

    # -- factories --------------------------------------------------------

    @classmethod
    def from_milliseconds(cls, milliseconds: Number) -> TimeSpan:
        return cls.from_components(milliseconds=milliseconds)

    @classmethod
    def from_seconds(cls, seconds: Number) -> TimeSpan:
        """Create a TimeSpan from seconds, accurate to the nearest millisecond."""
        return cls.from_components(seconds=seconds)

    @classmethod
    def from_minutes(cls, minutes: Number) -> TimeSpan:
        """Create a TimeSpan from minutes, accurate to the nearest millisecond."""
        return cls.from_components(minutes=minutes)

    @classmethod
    def from_hours(cls, hours: Number) -> TimeSpan:
        """Create a TimeSpan from hours, accurate to the nearest millisecond."""
        return cls.from_components(hours=hours)

    @classmethod
    def from_days(cls, days: Number) -> TimeSpan:
        """Create a TimeSpan from days, accurate to the nearest millisecond."""
        return cls.from_components(days=days)

    @classmethod
    def from_components(
        cls,
        days: Number = 0,
        hours: Number = 0,
        minutes: Number = 0,
        seconds: Number = 0,
        milliseconds: Number = 0,
    ) -> TimeSpan:
        """Create a TimeSpan from days, hours, minutes, seconds and milliseconds.

        Each unit is converted to milliseconds on its own, so a fractional
        value in one unit contributes fractional milliseconds. The exact sum
        is rounded to the nearest millisecond, ties away from zero.

        Raises:
            OutOfRangeError: If the total is outside the representable range
                or any input is not finite.
            TypeError: If any input is not a real number.
        """
        total = (
            to_fraction(days, "days") * MILLISECONDS_PER_DAY
            + to_fraction(hours, "hours") * MILLISECONDS_PER_HOUR
            + to_fraction(minutes, "minutes") * MILLISECONDS_PER_MINUTE
            + to_fraction(seconds, "seconds") * MILLISECONDS_PER_SECOND
            + to_fraction(milliseconds, "milliseconds")
        )
        return cls(total)

    from_time = from_components

    @classmethod
    def from_instant_difference(cls, start: Any, end: Any) -> TimeSpan:
        """Create a TimeSpan from the time elapsed between two instants.

        ``start`` is subtracted from ``end``, so the result is negative when
        ``start`` is later. Instants are datetime/date objects or numbers
        taken as epoch milliseconds.
        """
        delta = end - start
        if isinstance(delta, timedelta):
            return cls.from_timedelta(delta)
        return cls.from_milliseconds(delta)

    from_date_diff = from_instant_difference

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> TimeSpan:
        return cls.from_components(
            days=delta.days,
            seconds=delta.seconds,
            milliseconds=Fraction(delta.microseconds, 1000),
        )

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds)

    # -- totals -----------------------------------------------------------

    @property
    def total_seconds(self) -> float:
        """The value expressed in whole and fractional seconds."""
        return self.total_milliseconds / MILLISECONDS_PER_SECOND

    @property
    def total_minutes(self) -> float:
        """The value expressed in whole and fractional minutes."""
        return self.total_milliseconds / MILLISECONDS_PER_MINUTE

    @property
    def total_hours(self) -> float:
        """The value expressed in whole and fractional hours."""
        return self.total_milliseconds / MILLISECONDS_PER_HOUR

    @property
    def total_days(self) -> float:
        """The value expressed in whole and fractional days."""
        return self.total_milliseconds / MILLISECONDS_PER_DAY

    # -- components -------------------------------------------------------

    def _component(self, unit: int, modulus: int | None = None) -> int:
        # Truncates toward zero; ints carry no negative zero.
        magnitude = abs(self.total_milliseconds) // unit
        if modulus is not None:
            magnitude %= modulus
        return -magnitude if self.total_milliseconds < 0 else magnitude

    @property
    def milliseconds(self) -> int:
        return self._component(1, MILLISECONDS_PER_SECOND)

    @property
    def seconds(self) -> int:
        return self._component(MILLISECONDS_PER_SECOND, SECONDS_PER_MINUTE)

    @property
    def minutes(self) -> int:
        return self._component(MILLISECONDS_PER_MINUTE, MINUTES_PER_HOUR)

    @property
    def hours(self) -> int:
        return self._component(MILLISECONDS_PER_HOUR, HOURS_PER_DAY)

    @property
    def days(self) -> int:
        return self._component(MILLISECONDS_PER_DAY)

    # -- comparison -------------------------------------------------------

    @staticmethod
    def compare(t1: TimeSpan, t2: TimeSpan) -> int:
        """Return -1, 0 or 1 as t1 is shorter than, equal to or longer than t2."""
        if t1.total_milliseconds < t2.total_milliseconds:
            return -1
        if t1.total_milliseconds == t2.total_milliseconds:
            return 0
        return 1

    def compare_to(self, other: TimeSpan) -> int:
        return TimeSpan.compare(self, other)

    def __int__(self) -> int:
        return self.total_milliseconds

    def __float__(self) -> float:
        return float(self.total_milliseconds)

    def __bool__(self) -> bool:
        return self.total_milliseconds != 0

    # -- arithmetic -------------------------------------------------------

    def add(self, other: TimeSpan) -> TimeSpan:
        """Return the sum of this instance and ``other``.

        Raises:
            OutOfRangeError: If the sum is outside the representable range.
        """
        _require_timespan(other, "add")
        return TimeSpan(self.total_milliseconds + other.total_milliseconds)

    def subtract(self, other: TimeSpan) -> TimeSpan:
        """Return this instance minus ``other``.

        Raises:
            OutOfRangeError: If the difference is outside the representable range.
        """
        _require_timespan(other, "subtract")
        return TimeSpan(self.total_milliseconds - other.total_milliseconds)

    def multiply(self, factor: Number) -> TimeSpan:
        """Return this instance scaled by a plain number.

        Raises:
            OutOfRangeError: If the product is outside the representable range
                or ``factor`` is not finite.
        """
        return TimeSpan(self.total_milliseconds * to_fraction(factor, "factor"))

    def divide(self, divisor: Number) -> TimeSpan:
        """Return this instance divided by a plain number.

        Division by zero has no bounded result and raises OutOfRangeError
        wrapping the ZeroDivisionError.
        """
        try:
            quotient = Fraction(self.total_milliseconds) / to_fraction(
                divisor, "divisor"
            )
        except ZeroDivisionError as exc:
            raise OutOfRangeError(
                ERR_MSG_OUT_OF_RANGE,
                f"{self!r} divided by zero",
                wrapped=exc,
            ) from exc
        return TimeSpan(quotient)

    def duration(self) -> TimeSpan:
        """Return the absolute value of this instance."""
        return TimeSpan(abs(self.total_milliseconds))

    def negate(self) -> TimeSpan:
        return TimeSpan(-self.total_milliseconds)

    def __add__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> TimeSpan:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> TimeSpan:
        if not _is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> TimeSpan:
        if not _is_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> TimeSpan:
        return self.negate()

    def __pos__(self) -> TimeSpan:
        return self

    def __abs__(self) -> TimeSpan:
        return self.duration()

    # -- rendering --------------------------------------------------------

    def __str__(self) -> str:
        """Render the most compact form that keeps every unit below the
        most significant non-zero one, e.g. ``01:02.003`` or
        ``-01:00:00:00.000``. Zero renders as ``000``.
        """
        days, hours, minutes = self.days, self.hours, self.minutes
        return (
            ("-" if self.total_milliseconds < 0 else "")
            + pad_component(days, 2, False, ":")
            + pad_component(hours, 2, days != 0, ":")
            + pad_component(minutes, 2, days != 0 or hours != 0, ":")
            + pad_component(
                self.seconds, 2, days != 0 or hours != 0 or minutes != 0, "."
            )
            + pad_component(self.milliseconds, 3, True)
        )


def _require_timespan(value: object, operation: str) -> None:
    if not isinstance(value, TimeSpan):
        raise TypeError(
            f"{operation}() requires a TimeSpan, not {type(value).__name__}"
        )


TimeSpan.ZERO = TimeSpan(0)
TimeSpan.MIN_VALUE = TimeSpan(MIN_SAFE_INTEGER)
TimeSpan.MAX_VALUE = TimeSpan(MAX_SAFE_INTEGER)
