"""
calconv.core.arith
------------------
Integer helpers shared by the calendar algorithms.

Python's ``//`` and ``%`` already floor toward negative infinity, which is the
convention every algorithm here relies on.
"""

from __future__ import annotations


def amod(x: int, y: int) -> int:
    """Adjusted mod: like ``x % y`` but returns y instead of 0 (range 1..y)."""
    return ((x - 1) % y) + 1


def interval_mod(x: int, a: int, b: int) -> int:
    """Shift x into the half-open range [a, b); returns x itself when a == b."""
    if a == b:
        return x
    return a + (x - a) % (b - a)


def ceil_div(a: int, b: int) -> int:
    return -((-a) // b)
