"""
MCP tool implementations.

Tools are organized by domain:
- intervals - Describe, transpose and approximate single intervals
- scales - Periodic lookups and renderings of scales
"""

from chuk_mcp_tuning.tools.intervals import register_interval_tools
from chuk_mcp_tuning.tools.scales import register_scale_tools

__all__ = [
    "register_interval_tools",
    "register_scale_tools",
]
