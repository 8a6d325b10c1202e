"""Byte level codec for formatted byte sequences."""

from .document import format_document, parse_document, split_units
from .unit import compile_unit_pattern, format_byte, parse_unit

__all__ = [
    "compile_unit_pattern",
    "format_byte",
    "format_document",
    "parse_document",
    "parse_unit",
    "split_units",
]
