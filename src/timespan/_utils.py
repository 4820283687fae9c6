"""Numeric coercion, rounding and padding helpers."""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from fractions import Fraction

from timespan._constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from timespan._errors import ERR_MSG_OUT_OF_RANGE, OutOfRangeError


def to_fraction(value: object, context: str = "value") -> Fraction:
    """Convert a real number to an exact Fraction.

    Raises TypeError for non-numeric input (strings included) and
    OutOfRangeError for infinities and NaN.
    """
    if not isinstance(value, (numbers.Real, Decimal)):
        raise TypeError(
            f"{context} must be a real number, not {type(value).__name__}"
        )
    try:
        if isinstance(value, (numbers.Rational, float, Decimal)):
            return Fraction(value)
        return Fraction(float(value))
    except (OverflowError, ValueError) as exc:
        raise OutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{context} {value!r} is not a finite number",
            wrapped=exc,
        ) from exc


def round_half_away_from_zero(value: Fraction) -> int:
    """Round an exact value to the nearest integer, ties away from zero."""
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return magnitude if value >= 0 else -magnitude


def validate_total(value: object) -> int:
    """Return value as a whole millisecond total inside the safe range."""
    if isinstance(value, int) and not isinstance(value, bool):
        total = value
    else:
        total = round_half_away_from_zero(to_fraction(value, "milliseconds"))
    # int() has no negative zero, so -0.0 lands here as 0
    if total > MAX_SAFE_INTEGER or total < MIN_SAFE_INTEGER:
        raise OutOfRangeError(
            ERR_MSG_OUT_OF_RANGE,
            f"{value!r} ms is outside [{MIN_SAFE_INTEGER}, {MAX_SAFE_INTEGER}]",
        )
    return total


def pad_component(
    value: int, places: int, render_if_zero: bool, ending: str = ""
) -> str:
    """Zero-pad abs(value) to places digits and append ending.

    Returns an empty string for a zero value unless render_if_zero is set.
    """
    if value == 0 and not render_if_zero:
        return ""
    return f"{abs(value):0{places}d}{ending}"
