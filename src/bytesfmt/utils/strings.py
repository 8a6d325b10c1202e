"""String segmentation helpers."""
from __future__ import annotations

from typing import Iterator


def segment(text: str, width: int) -> Iterator[str]:
    """Yield consecutive *width*-sized slices of *text*.

    The final slice is shorter when ``len(text)`` is not a multiple of
    *width*. An empty *text* yields nothing.
    """

    if width <= 0:
        raise ValueError("width must be positive")
    for start in range(0, len(text), width):
        yield text[start : start + width]


__all__ = ["segment"]
