#!/usr/bin/env python3
"""
Async Tuning MCP Server using chuk-mcp-server

This server provides MCP tools for working with musical tuning systems:
intervals stored as cents or exact ratios, and finite scales repeated
across octaves.

The server provides tools for:
- Describing intervals in cents and as ratios
- Transposing intervals by octaves without losing exactness
- Approximating real ratios by bounded-denominator fractions
- Looking up any position of a periodic scale
- Rendering scales as Scala files, tuning tables and YAML
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tuning.constants import MAX_DENOMINATOR
from chuk_mcp_tuning.tools import register_interval_tools, register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tuning")

# Register all tools
interval_tools = register_interval_tools(mcp)
scale_tools = register_scale_tools(mcp)

# Export tool functions for direct access
tuning_describe_interval = interval_tools["tuning_describe_interval"]
tuning_transpose_interval = interval_tools["tuning_transpose_interval"]
tuning_closest_ratio = interval_tools["tuning_closest_ratio"]

tuning_scale_at = scale_tools["tuning_scale_at"]
tuning_scale_span = scale_tools["tuning_scale_span"]
tuning_render_scala = scale_tools["tuning_render_scala"]
tuning_render_table = scale_tools["tuning_render_table"]
tuning_export_yaml = scale_tools["tuning_export_yaml"]

logger.info("CHUK Tuning MCP Server initialized")
logger.info(f"  Tools: {len(interval_tools) + len(scale_tools)}")
logger.info(f"  Max ratio denominator: {MAX_DENOMINATOR}")
