#!/usr/bin/env python3
"""
Example: Render tunings as Scala files and tuning tables.

This demonstrates the core of the system: intervals stored as cents or
exact ratios, and scales extended across octaves by position.

Usage:
    python examples/tuning_tables.py
"""

from fractions import Fraction

from chuk_mcp_tuning.core import Interval, Scale
from chuk_mcp_tuning.render import to_scala, to_table


def main() -> None:
    """Print a well temperament and a just scale."""
    # Example 1: A mixed cents/ratio well temperament
    ebvt3 = create_bremmer_ebvt3()
    print(to_scala(ebvt3))
    print(to_table(ebvt3))

    # Example 2: A 5-limit just major scale, all exact ratios
    just = Scale.from_strings(
        "just_major.scl",
        "5-limit just intonation major scale",
        ["9/8", "5/4", "4/3", "3/2", "5/3", "15/8", "2/1"],
    )
    print(to_scala(just))

    # Positions outside the first octave stay exact
    for k in (-7, -1, 0, 8, 15):
        interval = just.at(k)
        print(f"  at({k:>3}) = {interval!s:>6}  ({interval.cents():.3f} cents)")

    # Example 3: Cents approximated by ratios
    print("\nClosest ratios (denominator <= 200):")
    for cents in (386.3137, 701.955, 968.826):
        interval = Interval(cents)
        ratio: Fraction = interval.ratio()
        print(f"  {cents:>9} cents ~ {ratio}")


def create_bremmer_ebvt3() -> Scale:
    """Bill Bremmer's EBVT III: mostly cents, with a pure fourth and octave."""
    return Scale(
        "bremmer_ebvt3.scl",
        "Bill Bremmer EBVT III temperament (2011)",
        [
            Interval(94.87252),
            Interval(197.05899),
            Interval(297.8),
            Interval(395.79561),
            Interval.from_ratio(4, 3),
            Interval(595.89736),
            Interval(699.31190),
            Interval(796.82704),
            Interval(896.20299),
            Interval(999.1),
            Interval(1096.17389),
            Interval.from_ratio(2, 1),
        ],
    )


if __name__ == "__main__":
    main()
