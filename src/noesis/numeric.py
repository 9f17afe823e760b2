"""Floored modular arithmetic.

:func:`fmod` differs from :func:`math.fmod`: the remainder takes the sign
of the divisor, not the dividend, so wrapping a negative angle by ``360``
yields a positive value.
"""

from __future__ import annotations

import math

from .exceptions import DivisionByZeroError


def fmod(x: float, y: float) -> float:
    """Floating-point remainder of floored division.

    Computes ``x - floor(x / y) * y``. When rounding would make that equal
    to *y* (e.g. ``fmod(-1e-14, 360)``), ``0.0`` is returned instead, so
    ``abs(result) < abs(y)`` always holds.

    Args:
        x: Dividend.
        y: Divisor, must not be zero.

    Returns:
        The remainder, with the same sign as *y*.

    Raises:
        DivisionByZeroError: If *y* is zero.

    Examples:
        >>> fmod(370, 360)
        10.0
        >>> fmod(-10, 360)
        350.0
        >>> fmod(10, -360)
        -350.0
    """
    if y == 0:
        raise DivisionByZeroError(x)
    r = float(x - floor(x / y) * y)
    # A tiny dividend of the opposite sign rounds up to y itself
    if r == y:
        return 0.0
    return r


def floor(x: float) -> int:
    """Round toward negative infinity.

    Examples:
        >>> floor(1.5), floor(-1.5), floor(-2.0)
        (1, -2, -2)
    """
    return math.floor(x)


def ceiling(x: float) -> int:
    """Round toward positive infinity.

    Examples:
        >>> ceiling(1.5), ceiling(-1.5), ceiling(2.0)
        (2, -1, 2)
    """
    return math.ceil(x)
