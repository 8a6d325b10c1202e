"""Custom exception hierarchy for the bytes formatting toolkit."""
from __future__ import annotations

from typing import Optional


class BytesFormatError(Exception):
    """Base class for all bytes-format errors."""


class InvalidOptionError(BytesFormatError):
    """Raised when a raw option value cannot be honoured."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or field)
        self.field = field


class OptionTypeError(InvalidOptionError, TypeError):
    """Raised when an option has the wrong type or is not an allowed value."""


class OptionRangeError(InvalidOptionError, ValueError):
    """Raised when a numeric option lies outside its permitted range."""


class ByteValueError(BytesFormatError, ValueError):
    """Raised when the data to format is not a sequence of 8-bit values."""


class FormatParseError(BytesFormatError, ValueError):
    """Raised when formatted text does not match the configured layout."""

    def __init__(self, message: str, *, unit: str, index: int) -> None:
        super().__init__(message)
        self.unit = unit
        self.index = index


class UnprefixedError(FormatParseError):
    """Raised when a unit does not start with the configured prefix."""

    def __init__(self, *, unit: str, index: int) -> None:
        super().__init__("unprefixed", unit=unit, index=index)


class UnsuffixedError(FormatParseError):
    """Raised when a unit does not end with the configured suffix."""

    def __init__(self, *, unit: str, index: int) -> None:
        super().__init__("unsuffixed", unit=unit, index=index)


class MalformedUnitError(FormatParseError):
    """Raised when the digits of a unit do not match the radix and width."""

    def __init__(self, core: str, *, unit: str, index: int) -> None:
        super().__init__(f"parse error: {core}", unit=unit, index=index)
        self.core = core


__all__ = [
    "BytesFormatError",
    "ByteValueError",
    "FormatParseError",
    "InvalidOptionError",
    "MalformedUnitError",
    "OptionRangeError",
    "OptionTypeError",
    "UnprefixedError",
    "UnsuffixedError",
]
