"""
Tuning errors.

Every error raised by the core derives from TuningError, and also from the
builtin exception it refines so callers catching ValueError or
OverflowError keep working.
"""


class TuningError(Exception):
    """Base class for tuning errors."""


class InvalidInterval(TuningError, ValueError):
    """An interval value that has no meaning (zero denominator, log of a non-positive ratio)."""


class InvalidScale(TuningError, ValueError):
    """A scale without the periodic structure lookups need (no intervals)."""


class ArithmeticOverflow(TuningError, OverflowError):
    """A transposition whose exact result does not fit the ratio bounds."""
