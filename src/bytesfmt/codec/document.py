"""Splitting and joining whole formatted documents."""
from __future__ import annotations

from typing import Iterable, List

from ..options import ResolvedOptions
from ..utils.strings import segment
from .unit import compile_unit_pattern, format_byte, parse_unit


def split_units(text: str, options: ResolvedOptions) -> Iterable[str]:
    """Split *text* into unit strings.

    With a separator the text is split on it, and an empty text yields no
    units. Without one the text is cut into ``options.unit_width`` slices;
    a short trailing slice is left for unit validation to reject.
    """

    if options.separator:
        units = text.split(options.separator)
        if units == [""]:
            return []
        return units
    return segment(text, options.unit_width)


def format_document(data: bytes, options: ResolvedOptions) -> str:
    """Format every byte of *data* and join the units with the separator."""

    return options.separator.join(format_byte(byte, options) for byte in data)


def parse_document(text: str, options: ResolvedOptions) -> bytes:
    """Parse *text* produced by :func:`format_document` back into bytes.

    Parsing stops at the first malformed unit.
    """

    pattern = compile_unit_pattern(options)
    values: List[int] = [
        parse_unit(unit, options, pattern, index=index)
        for index, unit in enumerate(split_units(text, options))
    ]
    return bytes(values)


__all__ = ["format_document", "parse_document", "split_units"]
