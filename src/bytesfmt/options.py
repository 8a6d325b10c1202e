"""Option resolution for byte formatting.

Callers pass a mapping where every key is optional. :func:`resolve_options`
turns it into a frozen :class:`ResolvedOptions` shared by the encode and
decode paths. Two policies exist:

* strict (default): a bad ``radix`` or ``min_integral_digits`` raises an
  :class:`~bytesfmt.exceptions.InvalidOptionError` naming the field.
* permissive (``strict=False``): bad values fall back to their defaults.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Optional, TypedDict, Union

from .exceptions import OptionRangeError, OptionTypeError
from .utils.integers import MAX_SAFE_INTEGER, coerce_safe_int, is_integral, is_positive_safe_int

logger = logging.getLogger(__name__)

Radix = Literal[2, 8, 10, 16]

DEFAULT_RADIX: Radix = 16

_MIN_DIGITS = {2: 8, 8: 3, 10: 3, 16: 2}

RADIXES = tuple(sorted(_MIN_DIGITS))
"""Supported radixes, ascending."""


class FormatOptions(TypedDict, total=False):
    """Caller supplied formatting options."""

    radix: Radix
    min_integral_digits: int
    lower_case: bool
    prefix: str
    suffix: str
    separator: str


def is_radix(value: object) -> bool:
    """Return ``True`` when *value* is one of the supported radixes."""

    if not is_integral(value):
        return False
    return int(value) in _MIN_DIGITS


def min_digits_for_radix(radix: int) -> int:
    """Return the number of digits needed to write any byte in *radix*.

    Raises:
        OptionTypeError: If *radix* is not supported.
    """

    if not is_radix(radix):
        raise OptionTypeError("radix", f"radix must be one of {RADIXES}, got {radix!r}")
    return _MIN_DIGITS[int(radix)]


@dataclass(frozen=True)
class ResolvedOptions:
    """Fully populated formatting options."""

    radix: int = DEFAULT_RADIX
    min_integral_digits: int = _MIN_DIGITS[DEFAULT_RADIX]
    lower_case: bool = False
    prefix: str = ""
    suffix: str = ""
    separator: str = ""

    def __post_init__(self) -> None:
        floor = min_digits_for_radix(self.radix)
        object.__setattr__(self, "radix", int(self.radix))
        if not is_integral(self.min_integral_digits):
            raise OptionTypeError("min_integral_digits", "min_integral_digits must be an integer")
        object.__setattr__(self, "min_integral_digits", int(self.min_integral_digits))
        if not floor <= self.min_integral_digits <= MAX_SAFE_INTEGER:
            raise OptionRangeError(
                "min_integral_digits",
                f"min_integral_digits must be between {floor} and {MAX_SAFE_INTEGER} for radix {self.radix}",
            )

    @property
    def body_length(self) -> int:
        """Digits that carry the value; the rest of the width is ``"0"`` padding."""

        return _MIN_DIGITS[self.radix]

    @property
    def unit_width(self) -> int:
        """Length of one formatted byte including prefix and suffix."""

        return self.min_integral_digits + len(self.prefix) + len(self.suffix)


OptionsLike = Union[FormatOptions, Mapping[str, object], ResolvedOptions, None]


def _resolve_radix(value: object, *, strict: bool) -> int:
    if value is None:
        return DEFAULT_RADIX
    if is_radix(value):
        return int(value)  # type: ignore[call-overload]
    if strict:
        raise OptionTypeError("radix", f"radix must be one of {RADIXES}, got {value!r}")
    logger.debug("radix %r is not supported; falling back to %d", value, DEFAULT_RADIX)
    return DEFAULT_RADIX


def _resolve_min_digits(value: object, floor: int, *, strict: bool) -> int:
    if value is None:
        return floor
    if strict:
        if not is_integral(value):
            raise OptionTypeError(
                "min_integral_digits",
                f"min_integral_digits must be a positive integer, got {value!r}",
            )
        if not is_positive_safe_int(value) or int(value) < floor:  # type: ignore[call-overload]
            raise OptionRangeError(
                "min_integral_digits",
                f"min_integral_digits must be between {floor} and {MAX_SAFE_INTEGER}, got {value!r}",
            )
        return int(value)

    resolved = coerce_safe_int(value, clamp_range=(floor, MAX_SAFE_INTEGER), fallback=floor)
    if resolved != value:
        logger.debug("min_integral_digits %r adjusted to %d", value, resolved)
    return resolved


def _typed_or_default(raw: Mapping[str, object], key: str, kind: type, default: object) -> object:
    value = raw.get(key)
    if isinstance(value, kind):
        return value
    if value is not None:
        logger.debug("%s %r is not a %s; using default", key, value, kind.__name__)
    return default


def resolve_options(raw: OptionsLike = None, *, strict: bool = True) -> ResolvedOptions:
    """Resolve *raw* into a :class:`ResolvedOptions`.

    Args:
        raw: Mapping of optional fields, ``None``, or an already resolved
            instance (returned unchanged).
        strict: Raise on a bad ``radix`` or ``min_integral_digits`` instead
            of falling back to the defaults.

    Raises:
        OptionTypeError: Strict mode only, for an unsupported radix or a
            non-integer width.
        OptionRangeError: Strict mode only, for a width below the radix
            floor.
    """

    if isinstance(raw, ResolvedOptions):
        return raw
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise OptionTypeError("options", "options must be a mapping")

    radix = _resolve_radix(raw.get("radix"), strict=strict)
    floor = min_digits_for_radix(radix)
    min_integral_digits = _resolve_min_digits(raw.get("min_integral_digits"), floor, strict=strict)

    return ResolvedOptions(
        radix=radix,
        min_integral_digits=min_integral_digits,
        lower_case=bool(_typed_or_default(raw, "lower_case", bool, False)),
        prefix=str(_typed_or_default(raw, "prefix", str, "")),
        suffix=str(_typed_or_default(raw, "suffix", str, "")),
        separator=str(_typed_or_default(raw, "separator", str, "")),
    )


__all__ = [
    "DEFAULT_RADIX",
    "FormatOptions",
    "OptionsLike",
    "RADIXES",
    "Radix",
    "ResolvedOptions",
    "is_radix",
    "min_digits_for_radix",
    "resolve_options",
]
