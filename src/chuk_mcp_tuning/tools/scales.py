"""
Scale tools - MCP tools for periodic scales.

Tools for looking up positions of an infinitely repeating scale and for
rendering a scale as Scala text, a tuning table or YAML.

Scales are passed by value (name, description, interval tokens); nothing
is stored between calls.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_tuning.core import Scale, TuningError
from chuk_mcp_tuning.models import IntervalInfo, ScaleDocument
from chuk_mcp_tuning.render import table_range, to_scala, to_table

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_scale_at(intervals: list[str], index: int) -> str:
        """
        Get one position of a scale repeated across octaves.

        Position 0 is the unison 1/1, positions 1..N are the given intervals,
        every other position repeats them by octaves (negative positions
        go down).

        Args:
            intervals: Generating intervals (e.g., ['204.0', '5/4', '2/1'])
            index: Any integer position

        Returns:
            JSON string with the interval at that position

        Example:
            tuning_scale_at(intervals=["9/8", "5/4", "3/2", "2/1"], index=-3)
        """
        try:
            scale = Scale.from_strings("", "", intervals)
            return json.dumps(
                {
                    "status": "success",
                    "degree": scale.degree(),
                    "interval": IntervalInfo.from_interval(scale.at(index), index).model_dump(
                        mode="json"
                    ),
                }
            )
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to look up scale position")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_scale_at"] = tuning_scale_at

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_scale_span(
        intervals: list[str],
        start: int | None = None,
        stop: int | None = None,
    ) -> str:
        """
        Get a range of positions of a scale repeated across octaves.

        Defaults to the tuning table range: one period below the tonic
        and two above the generating intervals ([-N, 3N)).

        Args:
            intervals: Generating intervals (e.g., ['204.0', '5/4', '2/1'])
            start: First position (inclusive)
            stop: Last position (exclusive)

        Returns:
            JSON string with one entry per position

        Example:
            tuning_scale_span(intervals=["5/4", "3/2", "2/1"], start=-3, stop=6)
        """
        try:
            scale = Scale.from_strings("", "", intervals)
            default = table_range(scale)
            first = default.start if start is None else start
            last = default.stop if stop is None else stop

            return json.dumps(
                {
                    "status": "success",
                    "degree": scale.degree(),
                    "start": first,
                    "stop": last,
                    "intervals": [
                        IntervalInfo.from_interval(interval, k).model_dump(mode="json")
                        for k, interval in zip(range(first, last), scale.span(first, last))
                    ],
                }
            )
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to span scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_scale_span"] = tuning_scale_span

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_render_scala(name: str, description: str, intervals: list[str]) -> str:
        """
        Render a scale in Scala (.scl) format.

        Args:
            name: Scale name (e.g., 'bremmer_ebvt3.scl')
            description: One-line description
            intervals: Generating intervals in order

        Returns:
            JSON string containing the Scala text

        Example:
            tuning_render_scala(
                name="just.scl",
                description="5-limit major triad",
                intervals=["5/4", "3/2", "2/1"]
            )
        """
        try:
            scale = Scale.from_strings(name, description, intervals)
            return json.dumps({"status": "success", "scala": to_scala(scale)})
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render Scala")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_render_scala"] = tuning_render_scala

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_render_table(name: str, description: str, intervals: list[str]) -> str:
        """
        Render the tuning table of a scale.

        The table lists positions [-N, 3N) with the interval as stored,
        its cents and its ratio.

        Args:
            name: Scale name
            description: One-line description
            intervals: Generating intervals in order

        Returns:
            JSON string containing the table text

        Example:
            tuning_render_table(name="just", description="", intervals=["5/4", "3/2", "2/1"])
        """
        try:
            scale = Scale.from_strings(name, description, intervals)
            return json.dumps({"status": "success", "table": to_table(scale)})
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render table")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_render_table"] = tuning_render_table

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_export_yaml(name: str, description: str, intervals: list[str]) -> str:
        """
        Export a scale as YAML.

        Args:
            name: Scale name
            description: One-line description
            intervals: Generating intervals in order

        Returns:
            JSON string containing the YAML content

        Example:
            tuning_export_yaml(name="just", description="", intervals=["5/4", "3/2", "2/1"])
        """
        try:
            document = ScaleDocument(name=name, description=description, intervals=intervals)
            yaml_content = yaml.safe_dump(
                document.to_yaml_dict(), default_flow_style=False, sort_keys=False
            )
            return json.dumps({"status": "success", "yaml": yaml_content})
        except (TuningError, ValueError) as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_export_yaml"] = tuning_export_yaml

    return tools
