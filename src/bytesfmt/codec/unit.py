"""Encoding and decoding of a single formatted byte."""
from __future__ import annotations

import re
from typing import Pattern

from ..exceptions import MalformedUnitError, UnprefixedError, UnsuffixedError
from ..options import ResolvedOptions

_DIGIT_CLASSES = {
    2: "[01]",
    8: "[0-7]",
    10: "[0-9]",
    16: "[0-9A-Fa-f]",
}

_FORMAT_SPECS = {2: "b", 8: "o", 10: "d", 16: "x"}


def format_byte(byte: int, options: ResolvedOptions) -> str:
    """Return the unit text for *byte* (``0 <= byte <= 255``)."""

    digits = f"{byte:{_FORMAT_SPECS[options.radix]}}"
    if not options.lower_case:
        digits = digits.upper()
    digits = digits.rjust(options.min_integral_digits, "0")
    return options.prefix + digits + options.suffix


def compile_unit_pattern(options: ResolvedOptions) -> Pattern[str]:
    """Compile the pattern a unit's digits must fully match.

    The body is exactly ``options.body_length`` digits of the radix,
    preceded by ``"0"`` characters up to ``min_integral_digits``.
    """

    padding = options.min_integral_digits - options.body_length
    chars = _DIGIT_CLASSES[options.radix]
    return re.compile(f"0{{{padding}}}{chars}{{{options.body_length}}}")


def parse_unit(
    unit: str,
    options: ResolvedOptions,
    pattern: Pattern[str],
    *,
    index: int = 0,
) -> int:
    """Parse one unit back into its byte value.

    Raises:
        UnprefixedError: The unit does not start with ``options.prefix``.
        UnsuffixedError: The unit does not end with ``options.suffix``.
        MalformedUnitError: The remaining digits do not match *pattern*.
    """

    core = unit
    if options.prefix:
        if not core.startswith(options.prefix):
            raise UnprefixedError(unit=unit, index=index)
        core = core[len(options.prefix) :]

    if options.suffix:
        if not core.endswith(options.suffix):
            raise UnsuffixedError(unit=unit, index=index)
        core = core[: len(core) - len(options.suffix)]

    if pattern.fullmatch(core) is None:
        raise MalformedUnitError(core, unit=unit, index=index)

    # the fixed body length keeps the value within 0..255
    return int(core, options.radix)


__all__ = ["compile_unit_pattern", "format_byte", "parse_unit"]
