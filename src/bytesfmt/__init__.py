"""Format byte sequences as radix-encoded text and parse them back."""

from .api import BytesFormatter, format_bytes, parse_bytes
from .exceptions import (
    BytesFormatError,
    ByteValueError,
    FormatParseError,
    InvalidOptionError,
    MalformedUnitError,
    OptionRangeError,
    OptionTypeError,
    UnprefixedError,
    UnsuffixedError,
)
from .options import FormatOptions, ResolvedOptions, min_digits_for_radix, resolve_options

format = format_bytes
parse = parse_bytes

__all__ = [
    "BytesFormatError",
    "BytesFormatter",
    "ByteValueError",
    "FormatOptions",
    "FormatParseError",
    "InvalidOptionError",
    "MalformedUnitError",
    "OptionRangeError",
    "OptionTypeError",
    "ResolvedOptions",
    "UnprefixedError",
    "UnsuffixedError",
    "format",
    "format_bytes",
    "min_digits_for_radix",
    "parse",
    "parse_bytes",
    "resolve_options",
]
