"""
Rational primitives - conversions between cents and ratios.

Cents are logarithmic (1200 per octave), ratios are exact fractions.
Going from cents to a ratio is lossy: the real value 2^(cents/1200) is
approximated by the closest fraction with a bounded denominator, found
with a Farey (Stern-Brocot) mediant search.
"""

from __future__ import annotations

import math
import sys
from fractions import Fraction

from chuk_mcp_tuning.constants import CENTS_PER_OCTAVE, MAX_DENOMINATOR, ErrorMessages
from chuk_mcp_tuning.core.errors import ArithmeticOverflow, InvalidInterval


def cents_to_ratio(cents: float) -> float:
    """Frequency ratio of a cents value: 2^(cents/1200)."""
    try:
        return float(2.0 ** (cents / CENTS_PER_OCTAVE))
    except OverflowError as e:
        raise ArithmeticOverflow(ErrorMessages.RATIO_OUT_OF_RANGE.format(cents=cents)) from e


def ratio_to_cents(ratio: Fraction | float) -> float:
    """
    Cents of a frequency ratio: log2(ratio) * 1200.

    Raises:
        InvalidInterval: If the ratio is zero or negative
    """
    if ratio <= 0:
        raise InvalidInterval(ErrorMessages.NON_POSITIVE_RATIO.format(ratio=ratio))
    return math.log2(float(ratio)) * CENTS_PER_OCTAVE


def almost_equal(x: float, y: float, ulp: int = 1) -> bool:
    """
    Compare two floats within `ulp` units in the last place.

    Machine epsilon is scaled to the magnitude of the values; differences
    below the smallest normal double always compare equal.
    """
    diff = math.fabs(x - y)
    return diff <= sys.float_info.epsilon * math.fabs(x + y) * ulp or diff < sys.float_info.min


def farey(x: float, max_denominator: int) -> Fraction:
    """
    Find the fraction closest to x in [0, 1) with denominator <= max_denominator.

    Keeps a lower bound a/b and an upper bound c/d around x and narrows them
    with their mediant while the mediant still fits the limit. The two
    bounds are then neighbours in the Farey sequence of that order, so the
    closer of them is the best approximation.

    Args:
        x: Value in [0, 1)
        max_denominator: Largest allowed denominator

    Returns:
        The approximating fraction
    """
    a, b, c, d = 0, 1, 1, 1
    while b + d <= max_denominator:
        mediant = (a + c) / (b + d)
        if almost_equal(x, mediant):
            return Fraction(a + c, b + d)
        elif x > mediant:
            a, b = a + c, b + d
        else:
            c, d = a + c, b + d

    target = Fraction(x)
    lower, upper = Fraction(a, b), Fraction(c, d)
    lower_error, upper_error = abs(target - lower), abs(upper - target)
    if lower_error < upper_error:
        return lower
    if upper_error < lower_error:
        return upper
    # equidistant: keep the more precise bound
    return upper if d > b else lower


def closest_rational(x: float, max_denominator: int = MAX_DENOMINATOR) -> Fraction:
    """
    Approximate a real number by a fraction with a bounded denominator.

    The integral part is kept exactly and only the fractional part is
    searched, so 1.5 becomes 1 + 1/2 = 3/2.

    Args:
        x: Value to approximate
        max_denominator: Largest allowed denominator (default 200)

    Returns:
        The closest fraction found by the mediant search

    Raises:
        InvalidInterval: If x is infinite or NaN
    """
    if not math.isfinite(x):
        raise InvalidInterval(ErrorMessages.NON_FINITE_VALUE.format(value=x))

    # floor keeps the fractional part in [0, 1) for negative x as well
    integral_part = math.floor(x)
    fractional_part = x - integral_part
    return integral_part + farey(fractional_part, max_denominator)
