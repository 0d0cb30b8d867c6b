"""
Core tuning primitives.

These are the numeric invariants everything else composes on:
- Interval: One interval, stored as cents or as an exact ratio
- Scale: A finite list of intervals repeating by octaves, indexable by any integer
- closest_rational: Bounded-denominator approximation of a real number
- cents_to_ratio / ratio_to_cents: Conversions between the two forms
- TuningError and its kinds: InvalidInterval, InvalidScale, ArithmeticOverflow
"""

from chuk_mcp_tuning.core.errors import (
    ArithmeticOverflow,
    InvalidInterval,
    InvalidScale,
    TuningError,
)
from chuk_mcp_tuning.core.interval import Interval, format_number, format_ratio
from chuk_mcp_tuning.core.rational import (
    almost_equal,
    cents_to_ratio,
    closest_rational,
    farey,
    ratio_to_cents,
)
from chuk_mcp_tuning.core.scale import Scale

__all__ = [
    # Interval
    "Interval",
    "format_number",
    "format_ratio",
    # Scale
    "Scale",
    # Rational
    "almost_equal",
    "cents_to_ratio",
    "closest_rational",
    "farey",
    "ratio_to_cents",
    # Errors
    "TuningError",
    "InvalidInterval",
    "InvalidScale",
    "ArithmeticOverflow",
]
