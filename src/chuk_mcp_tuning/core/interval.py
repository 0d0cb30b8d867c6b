"""
Interval primitive - one musical interval, in cents or as an exact ratio.

An Interval holds exactly one of two storage forms:
- cents: a float, logarithmic (1200 cents = one octave)
- ratio: a reduced Fraction, exact

Both forms answer both questions (cents() and ratio()); the storage form
is never changed by an operation, so exact ratios stay exact.
"""

from __future__ import annotations

from fractions import Fraction
from functools import total_ordering
from typing import Any, ClassVar

from chuk_mcp_tuning.constants import (
    CENTS_PER_OCTAVE,
    DISPLAY_FORMAT,
    MAX_RATIO_BITS,
    ErrorMessages,
    IntervalKind,
)
from chuk_mcp_tuning.core.errors import ArithmeticOverflow, InvalidInterval
from chuk_mcp_tuning.core.rational import closest_rational, cents_to_ratio, ratio_to_cents


def format_number(value: float) -> str:
    """Display a number with 6 significant digits (94.87252 -> '94.8725')."""
    return format(value, DISPLAY_FORMAT)


def format_ratio(ratio: Fraction) -> str:
    """Display a ratio as 'numerator/denominator', keeping '/1'."""
    return f"{ratio.numerator}/{ratio.denominator}"


def _trailing_zero_bits(n: int) -> int:
    return (n & -n).bit_length() - 1


def _multiply_by_power_of_two(ratio: Fraction, octaves: int) -> Fraction:
    """
    Multiply a ratio by 2^octaves exactly.

    Up: the numerator is doubled. Down: the denominator is doubled.
    Factors of two in the other term cancel first, so the bound check
    applies to the reduced result.
    """
    numerator, denominator = ratio.numerator, ratio.denominator
    if numerator == 0:
        return ratio

    if octaves > 0:
        cancel = min(octaves, _trailing_zero_bits(denominator))
        shift = octaves - cancel
        if abs(numerator).bit_length() + shift > MAX_RATIO_BITS:
            raise ArithmeticOverflow(
                ErrorMessages.RATIO_OVERFLOW.format(
                    ratio=format_ratio(ratio), octaves=octaves, bits=MAX_RATIO_BITS
                )
            )
        return Fraction(numerator << shift, denominator >> cancel)

    cancel = min(-octaves, _trailing_zero_bits(numerator))
    shift = -octaves - cancel
    if denominator.bit_length() + shift > MAX_RATIO_BITS:
        raise ArithmeticOverflow(
            ErrorMessages.RATIO_OVERFLOW.format(
                ratio=format_ratio(ratio), octaves=octaves, bits=MAX_RATIO_BITS
            )
        )
    return Fraction(numerator >> cancel, denominator << shift)


@total_ordering
class Interval:
    """
    A musical interval stored as cents or as an exact ratio.

    Immutable and hashable. Two intervals are equal when they have the same
    storage form and the same value. Ordering compares the frequency ratio,
    so intervals of either form sort together; at equal size cents sort
    before ratios.

    Examples:
        Interval(701.955)            -> cents
        Interval(Fraction(3, 2))     -> ratio
        Interval.from_ratio(4, 3)    -> ratio
        Interval.parse("2/1")        -> ratio
    """

    __slots__ = ("_kind", "_value")
    _kind: IntervalKind
    _value: Any  # float for cents, Fraction for ratio

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, value: float | int | Fraction) -> None:
        """Create an interval: floats are cents, ints and Fractions are ratios."""
        if isinstance(value, (int, Fraction)):
            object.__setattr__(self, "_kind", IntervalKind.RATIO)
            object.__setattr__(self, "_value", Fraction(value))
        else:
            object.__setattr__(self, "_kind", IntervalKind.CENTS)
            object.__setattr__(self, "_value", float(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Interval is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Interval is immutable")

    @classmethod
    def from_cents(cls, cents: float) -> Interval:
        """Create an interval stored in cents."""
        return cls(float(cents))

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int = 1) -> Interval:
        """
        Create an interval stored as an exact ratio.

        The ratio is reduced and its sign kept on the numerator.

        Raises:
            InvalidInterval: If the denominator is zero
        """
        if denominator == 0:
            raise InvalidInterval(ErrorMessages.ZERO_DENOMINATOR.format(numerator=numerator))
        return cls(Fraction(numerator, denominator))

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse an interval written the Scala way.

        A value with a period is cents ('701.955', '1200.'), anything else
        is a ratio ('3/2', '2').
        """
        token = text.strip()
        try:
            if "." in token:
                return cls.from_cents(float(token))
            numerator, sep, denominator = token.partition("/")
            return cls.from_ratio(int(numerator), int(denominator) if sep else 1)
        except InvalidInterval:
            raise
        except ValueError as e:
            raise InvalidInterval(ErrorMessages.INVALID_INTERVAL.format(text=text)) from e

    @property
    def kind(self) -> IntervalKind:
        """Storage form of this interval."""
        return self._kind

    @property
    def is_cents(self) -> bool:
        return self._kind is IntervalKind.CENTS

    @property
    def is_ratio(self) -> bool:
        return self._kind is IntervalKind.RATIO

    def cents(self) -> float:
        """
        Size of the interval in cents.

        Stored cents are returned unchanged; ratios are converted.

        Raises:
            InvalidInterval: If the stored ratio is zero or negative
        """
        if self._kind is IntervalKind.CENTS:
            return float(self._value)
        return ratio_to_cents(self._value)

    def ratio(self) -> Fraction:
        """
        Frequency ratio of the interval.

        Stored ratios are returned exactly. Cents are approximated by the
        closest fraction with a denominator of at most 200.
        """
        if self._kind is IntervalKind.RATIO:
            return Fraction(self._value)
        return closest_rational(cents_to_ratio(self._value))

    def ratio_as_double(self) -> float:
        """Frequency ratio as a float, whatever the storage form."""
        if self._kind is IntervalKind.CENTS:
            return cents_to_ratio(self._value)
        return float(self._value)

    def transpose_octaves(self, octaves: int) -> Interval:
        """
        Shift the interval by a number of octaves (positive or negative).

        Cents gain octaves * 1200. Ratios are multiplied by 2^octaves
        exactly and stay ratios.

        Raises:
            ArithmeticOverflow: If the exact result does not fit
        """
        if self._kind is IntervalKind.CENTS:
            try:
                offset = float(octaves * CENTS_PER_OCTAVE)
            except OverflowError as e:
                raise ArithmeticOverflow(
                    ErrorMessages.CENTS_OVERFLOW.format(cents=self._value, octaves=octaves)
                ) from e
            return Interval.from_cents(self._value + offset)

        if octaves == 0:
            return Interval(self._value)
        return Interval(_multiply_by_power_of_two(self._value, octaves))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._kind is other._kind and self._value == other._value)

    def _sort_key(self) -> tuple[float, bool, Any]:
        # cents before ratios of the same size; values only meet within one form
        return (self.ratio_as_double(), self._kind is IntervalKind.RATIO, self._value)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._sort_key() < other._sort_key())

    def __hash__(self) -> int:
        return hash((self._kind, self._value))

    def __repr__(self) -> str:
        for name in ["UNISON", "OCTAVE"]:
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named == self:
                return f"Interval.{name}"
        if self._kind is IntervalKind.CENTS:
            return f"Interval.from_cents({self._value!r})"
        return f"Interval.from_ratio({self._value.numerator}, {self._value.denominator})"

    def __str__(self) -> str:
        """Cents as a 6-digit number, ratios as 'p/q'."""
        if self._kind is IntervalKind.CENTS:
            return format_number(self._value)
        return format_ratio(self._value)


# Initialize class constants after class is defined
Interval.UNISON = Interval.from_ratio(1, 1)
Interval.OCTAVE = Interval.from_ratio(2, 1)
