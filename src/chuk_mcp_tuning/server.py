#!/usr/bin/env python3
"""
Launcher for the CHUK Tuning MCP Server.

Parses the transport options, sets the log level and hands control to the
server instance in async_server. The server module is imported only once
the options are known, so `--help` and bad arguments never register tools.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_HTTP_PORT = 8000


def build_parser() -> argparse.ArgumentParser:
    """Command line options of the tuning server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-tuning",
        description="MCP server for tuning systems: cents, exact ratios and periodic scales",
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default="stdio",
        help="How clients connect (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help=f"Port for the http transport (default: {DEFAULT_HTTP_PORT})",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        type=str.upper,
        help="Root log level (default: INFO)",
    )
    return parser


def configure_logging(level: str) -> None:
    """Apply a level name to the root logger."""
    logging.getLogger().setLevel(getattr(logging, level))


def main(argv: Sequence[str] | None = None) -> None:
    """Parse options and run the server on the chosen transport."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    from chuk_mcp_tuning.async_server import mcp

    if args.transport == "http":
        logger.info(f"Serving tuning tools over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving tuning tools over stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
