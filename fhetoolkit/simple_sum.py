"""Addition of two 32-bit signed integers."""

from __future__ import annotations

_INT_BITS = 32


def simple_sum(a: int, b: int) -> int:
    """Return ``a + b`` wrapped to the signed 32-bit range."""
    half = 1 << (_INT_BITS - 1)
    return ((a + b + half) & ((1 << _INT_BITS) - 1)) - half