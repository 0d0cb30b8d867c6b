"""
CHUK Tuning - musical tuning systems as exact arithmetic.

Intervals are stored as cents or exact ratios; scales are finite interval
lists repeated across octaves and addressable by any integer position.
"""

from chuk_mcp_tuning.core import (
    ArithmeticOverflow,
    Interval,
    InvalidInterval,
    InvalidScale,
    Scale,
    TuningError,
)

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "Scale",
    "TuningError",
    "InvalidInterval",
    "InvalidScale",
    "ArithmeticOverflow",
]
