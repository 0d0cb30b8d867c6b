"""
Tuning table - a synopsis of a scale's periodic extension.

One row per position k in [-N, 3N): the position, the interval as stored,
its cents and its ratio. Shows one period below the stored intervals and
two above them.
"""

from __future__ import annotations

import io
from typing import TextIO

from chuk_mcp_tuning.constants import TABLE_COLUMN_WIDTH, TABLE_INDEX_WIDTH
from chuk_mcp_tuning.core.interval import format_number, format_ratio
from chuk_mcp_tuning.core.scale import Scale

TABLE_HEADERS = ("Index", "Str", "Cents", "Ratio")


def table_range(scale: Scale) -> range:
    """Positions shown in the table: [-degree, 3 * degree)."""
    return range(-scale.degree(), 3 * scale.degree())


def _row(index: object, text: object, cents: object, ratio: object) -> str:
    return (
        f"{index!s:>{TABLE_INDEX_WIDTH}}"
        f"{text!s:>{TABLE_COLUMN_WIDTH}}"
        f"{cents!s:>{TABLE_COLUMN_WIDTH}}"
        f"{ratio!s:>{TABLE_COLUMN_WIDTH}}\n"
    )


def write_table(scale: Scale, out: TextIO) -> None:
    """Write the tuning table of a scale to a text stream."""
    out.write(_row(*TABLE_HEADERS))
    for k in table_range(scale):
        interval = scale.at(k)
        out.write(
            _row(
                k,
                interval,
                format_number(interval.cents()),
                format_ratio(interval.ratio()),
            )
        )


def to_table(scale: Scale) -> str:
    """Render the tuning table of a scale as text."""
    buffer = io.StringIO()
    write_table(scale, buffer)
    return buffer.getvalue()
