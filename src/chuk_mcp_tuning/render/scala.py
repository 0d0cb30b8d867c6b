"""
Scala scale format (.scl).

Layout:
    ! <name>
    !
    <description>
    <degree>
    !
    <one line per stored interval>

Only the generating intervals are written, in their stored order.
"""

from __future__ import annotations

import io
from typing import TextIO

from chuk_mcp_tuning.core.interval import Interval
from chuk_mcp_tuning.core.scale import Scale

# fixed point, trailing zeros stripped after formatting
SCALA_CENTS_FORMAT = ".6f"


def scala_line(interval: Interval) -> str:
    """
    Render one interval as a Scala line.

    Cents must be plain decimals with a period in .scl files. Whole cents
    ('1200') and exponent forms ('1e+06') are written in fixed point
    instead ('1200.', '1000000.').
    """
    text = str(interval)
    if interval.is_cents and ("." not in text or "e" in text):
        return format(interval.cents(), SCALA_CENTS_FORMAT).rstrip("0")
    return text


def write_scala(scale: Scale, out: TextIO) -> None:
    """Write a scale to a text stream in Scala format."""
    out.write(f"! {scale.name}\n!\n")
    out.write(f"{scale.description}\n")
    out.write(f"{scale.degree()}\n!\n")
    for interval in scale.intervals:
        out.write(f"{scala_line(interval)}\n")


def to_scala(scale: Scale) -> str:
    """Render a scale as Scala format text."""
    buffer = io.StringIO()
    write_scala(scale, buffer)
    return buffer.getvalue()
