"""Custom exceptions for noesis."""

from __future__ import annotations


class NoesisError(Exception):
    """Base exception for all noesis errors."""

    pass


class DivisionByZeroError(NoesisError, ZeroDivisionError):
    """Raised when a modular operation is given a zero divisor.

    Also a :class:`ZeroDivisionError`, so callers catching the builtin
    continue to work.
    """

    def __init__(self, dividend: float) -> None:
        self.dividend = dividend
        super().__init__(f"Cannot compute floored remainder of {dividend!r} with a zero divisor")
