"""Small helpers shared across the bytes formatting toolkit."""

from .integers import MAX_SAFE_INTEGER, coerce_safe_int, is_integral, is_positive_safe_int
from .strings import segment

__all__ = ["MAX_SAFE_INTEGER", "coerce_safe_int", "is_integral", "is_positive_safe_int", "segment"]
