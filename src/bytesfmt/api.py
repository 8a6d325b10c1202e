"""High level API for formatting byte sequences as text and back."""
from __future__ import annotations

import logging
from typing import Iterable, Union

import numpy as np

from .codec import format_document, parse_document
from .exceptions import ByteValueError
from .options import OptionsLike, ResolvedOptions, resolve_options

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview, np.ndarray, Iterable[int]]


def _normalise_data(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, np.ndarray):
        if data.dtype == np.uint8:
            return data.tobytes()
        if not np.issubdtype(data.dtype, np.integer):
            raise ByteValueError(f"array dtype must be an integer type, got {data.dtype}")
        if data.size and (data.min() < 0 or data.max() > 255):
            raise ByteValueError("array values must be in range 0..255")
        return data.astype(np.uint8).tobytes()
    if isinstance(data, (str, int)):
        raise ByteValueError(f"data must be a byte sequence, not {type(data).__name__}")
    try:
        values = list(data)
    except TypeError as exc:
        raise ByteValueError(f"data must be a byte sequence, not {type(data).__name__}") from exc
    if any(isinstance(value, (bool, np.bool_)) for value in values):
        raise ByteValueError("data must contain integers, not bools")
    try:
        return bytes(values)
    except (TypeError, ValueError) as exc:
        raise ByteValueError("data must be a sequence of integers in range 0..255") from exc


def format_bytes(data: BytesLike, options: OptionsLike = None, *, strict: bool = True) -> str:
    """Format *data* as text.

    Args:
        data: The byte sequence. Any iterable of ints in ``0..255`` and
            integer numpy arrays are accepted as well as ``bytes``.
        options: Formatting options, see :class:`~bytesfmt.options.FormatOptions`.
        strict: Reject malformed numeric options instead of falling back.

    Returns:
        The formatted string; empty for empty *data*.
    """

    resolved = resolve_options(options, strict=strict)
    return format_document(_normalise_data(data), resolved)


def parse_bytes(text: str, options: OptionsLike = None, *, strict: bool = True) -> bytes:
    """Parse *text* formatted with *options* back into bytes.

    Raises:
        TypeError: If *text* is not a ``str``.
        FormatParseError: If a unit does not match the configured format.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a str")
    resolved = resolve_options(options, strict=strict)
    return parse_document(text, resolved)


class BytesFormatter:
    """Formatter bound to one set of resolved options."""

    def __init__(self, options: OptionsLike = None, *, strict: bool = True) -> None:
        self.options: ResolvedOptions = resolve_options(options, strict=strict)
        logger.debug("bytes formatter configured with %s", self.options)

    @property
    def unit_width(self) -> int:
        return self.options.unit_width

    def format(self, data: BytesLike) -> str:
        return format_document(_normalise_data(data), self.options)

    def parse(self, text: str) -> bytes:
        return parse_bytes(text, self.options)

    def __repr__(self) -> str:
        return f"BytesFormatter({self.options!r})"


__all__ = ["BytesFormatter", "BytesLike", "format_bytes", "parse_bytes"]
