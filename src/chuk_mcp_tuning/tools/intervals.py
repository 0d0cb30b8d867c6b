"""
Interval tools - MCP tools for single intervals.

Tools for describing an interval in both forms, transposing it by octaves
and approximating a real ratio by a fraction.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.constants import MAX_DENOMINATOR
from chuk_mcp_tuning.core import Interval, TuningError, closest_rational, format_ratio
from chuk_mcp_tuning.models import IntervalInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_describe_interval(interval: str) -> str:
        """
        Describe an interval in cents and as a ratio.

        Cents values are approximated by the closest ratio with a
        denominator of at most 200. Ratios are exact.

        Args:
            interval: Cents with a period ('701.955') or a ratio ('3/2')

        Returns:
            JSON string with the interval's views

        Example:
            tuning_describe_interval(interval="4/3")
        """
        try:
            parsed = Interval.parse(interval)
            return json.dumps(
                {
                    "status": "success",
                    "interval": IntervalInfo.from_interval(parsed).model_dump(mode="json"),
                }
            )
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to describe interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_describe_interval"] = tuning_describe_interval

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_transpose_interval(interval: str, octaves: int) -> str:
        """
        Transpose an interval by whole octaves.

        The storage form is kept: cents gain octaves * 1200, ratios are
        multiplied by 2^octaves exactly.

        Args:
            interval: Cents with a period ('701.955') or a ratio ('3/2')
            octaves: Octaves to shift (negative shifts down)

        Returns:
            JSON string with the original and transposed interval

        Example:
            tuning_transpose_interval(interval="3/2", octaves=-2)
        """
        try:
            parsed = Interval.parse(interval)
            transposed = parsed.transpose_octaves(octaves)
            return json.dumps(
                {
                    "status": "success",
                    "octaves": octaves,
                    "original": IntervalInfo.from_interval(parsed).model_dump(mode="json"),
                    "transposed": IntervalInfo.from_interval(transposed).model_dump(mode="json"),
                }
            )
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_transpose_interval"] = tuning_transpose_interval

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_closest_ratio(value: float, max_denominator: int = MAX_DENOMINATOR) -> str:
        """
        Approximate a real number by a fraction with a bounded denominator.

        Args:
            value: The number to approximate (e.g., 1.4983)
            max_denominator: Largest allowed denominator (default: 200)

        Returns:
            JSON string with the fraction and its error

        Example:
            tuning_closest_ratio(value=1.25992, max_denominator=100)
        """
        try:
            if max_denominator < 1:
                return json.dumps(
                    {"status": "error", "message": "max_denominator must be at least 1"}
                )

            ratio = closest_rational(value, max_denominator)
            return json.dumps(
                {
                    "status": "success",
                    "value": value,
                    "ratio": format_ratio(ratio),
                    "error": float(ratio) - value,
                    "max_denominator": max_denominator,
                }
            )
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to approximate ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_closest_ratio"] = tuning_closest_ratio

    return tools
