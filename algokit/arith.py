"""Integer arithmetic helpers."""

from __future__ import annotations

import math

_WORD_BITS = 32


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``; values up to 1 are returned as given."""
    if x <= 1:
        return x
    return math.isqrt(x)


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking one or two at a time."""
    if n <= 0:
        return 0
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def reverse_bits(n: int) -> int:
    """Reverse the bits of an unsigned 32-bit integer."""
    if not 0 <= n < 1 << _WORD_BITS:
        raise ValueError("n must fit in an unsigned 32-bit word")
    return int(format(n, f"0{_WORD_BITS}b")[::-1], 2)