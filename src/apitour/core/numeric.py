"""Numeric helpers for demonstrations Python's math module has no direct form for.

Python raises ZeroDivisionError for ``1 / 0``; ``ieee_divide`` follows
IEEE-754 instead and returns ``inf``/``-inf``/``nan``. Integers here are
treated as 64-bit two's complement where a bound matters.
"""

from __future__ import annotations

import math

MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -(2**63)
_UINT64_MASK = 2**64 - 1


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide as IEEE-754 floats, producing non-finite results instead of raising."""
    numerator = float(numerator)
    denominator = float(denominator)
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    # The sign of a zero denominator participates in the result's sign.
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def is_anomalous(value: object) -> bool:
    """Return True for non-finite floats: representable but mathematically undefined."""
    return isinstance(value, float) and not math.isfinite(value)


def to_integer(value: object) -> int | None:
    """Return ``value`` as an int when it has an exact 64-bit integer representation."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if MIN_INTEGER <= value <= MAX_INTEGER else None
    if isinstance(value, float) and value.is_integer():
        as_int = int(value)
        return as_int if MIN_INTEGER <= as_int <= MAX_INTEGER else None
    return None


def number_type(value: object) -> str | None:
    """Classify a number as ``"integer"`` or ``"float"``; None for non-numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    return None


def unsigned_less_than(left: int, right: int) -> bool:
    """Compare two integers as unsigned 64-bit values."""
    return (left & _UINT64_MASK) < (right & _UINT64_MASK)


__all__ = [
    "MAX_INTEGER",
    "MIN_INTEGER",
    "ieee_divide",
    "is_anomalous",
    "number_type",
    "to_integer",
    "unsigned_less_than",
]
