"""Integer sanitising helpers for numeric options."""
from __future__ import annotations

import numbers
from typing import Tuple

MAX_SAFE_INTEGER = 2**53 - 1
"""Largest width accepted for numeric options."""


def is_integral(value: object) -> bool:
    """Return ``True`` for integers, including numpy scalars, but not bools."""

    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_positive_safe_int(value: object) -> bool:
    """Return ``True`` when *value* is an integer in ``[1, MAX_SAFE_INTEGER]``."""

    return is_integral(value) and 0 < int(value) <= MAX_SAFE_INTEGER  # type: ignore[call-overload]


def coerce_safe_int(
    value: object,
    *,
    clamp_range: Tuple[int, int],
    fallback: int,
) -> int:
    """Coerce *value* into an integer within *clamp_range*.

    Args:
        value: The raw value, typically straight from user options.
        clamp_range: Inclusive ``(low, high)`` bounds for the result.
        fallback: Returned when *value* is not an integer.

    Returns:
        ``int(value)`` clamped into *clamp_range*, or *fallback*.

    Raises:
        ValueError: If *clamp_range* is empty or *fallback* lies outside it.
    """

    low, high = clamp_range
    if low > high:
        raise ValueError("clamp_range must satisfy low <= high")
    if not low <= fallback <= high:
        raise ValueError("fallback must lie within clamp_range")

    if not is_integral(value):
        return fallback
    return min(max(int(value), low), high)  # type: ignore[call-overload]


__all__ = ["MAX_SAFE_INTEGER", "coerce_safe_int", "is_integral", "is_positive_safe_int"]
