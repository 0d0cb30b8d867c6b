"""
Text renderings of a scale.

- Scala: the .scl scale file layout (generating intervals only)
- Table: positions [-N, 3N) of the periodic extension
"""

from chuk_mcp_tuning.render.scala import scala_line, to_scala, write_scala
from chuk_mcp_tuning.render.table import TABLE_HEADERS, table_range, to_table, write_table

__all__ = [
    "scala_line",
    "to_scala",
    "write_scala",
    "TABLE_HEADERS",
    "table_range",
    "to_table",
    "write_table",
]
