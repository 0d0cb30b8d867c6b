"""
Constants and enums for the tuning system.

No magic numbers - the octave size, the rational search bound and the
display rules all live here.
"""

from enum import Enum
from typing import Literal

# 1200 cents = one octave (frequency ratio 2:1)
CENTS_PER_OCTAVE = 1200

# Largest denominator considered when approximating cents by a ratio
MAX_DENOMINATOR = 200

# Ratio terms must fit a signed 64-bit integer
MAX_RATIO_BITS = 63

# Numbers are displayed with 6 significant digits
DISPLAY_FORMAT = "g"

# Table column widths (index, then str/cents/ratio)
TABLE_INDEX_WIDTH = 6
TABLE_COLUMN_WIDTH = 15

# Schema versions - frozen for v1
SchemaVersion = Literal["tuning/v1"]


class IntervalKind(str, Enum):
    """Storage form of an interval."""

    CENTS = "cents"  # logarithmic, float
    RATIO = "ratio"  # exact, Fraction


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_SCALE = "Scale '{name}' has no intervals. A scale needs at least one interval."
    ZERO_DENOMINATOR = "Invalid ratio {numerator}/0: denominator must not be zero."
    NON_POSITIVE_RATIO = "Cents are undefined for non-positive ratio {ratio}."
    NON_FINITE_VALUE = "Cannot approximate non-finite value {value} by a ratio."
    INVALID_INTERVAL = "Invalid interval: '{text}'. Expected cents like '701.955' or a ratio like '3/2'."
    RATIO_OVERFLOW = "Transposing {ratio} by {octaves} octaves overflows {bits}-bit ratio terms."
    CENTS_OVERFLOW = "Transposing {cents} cents by {octaves} octaves is out of range."
    RATIO_OUT_OF_RANGE = "{cents} cents is out of range for a frequency ratio."
