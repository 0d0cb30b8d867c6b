"""
Tests for MCP tools.

Tests the MCP tool implementations for intervals and scales.
"""

import json

import pytest
import yaml

from chuk_mcp_tuning.tools import register_interval_tools, register_scale_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def interval_tools():
    """Interval tools registered on a mock server."""
    return register_interval_tools(MockMCPServer("test"))


@pytest.fixture
def scale_tools():
    """Scale tools registered on a mock server."""
    return register_scale_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_on_server(self):
        mcp = MockMCPServer("test")
        tools = {**register_interval_tools(mcp), **register_scale_tools(mcp)}
        assert set(mcp.tools) == set(tools)
        assert "tuning_render_scala" in mcp.tools
        assert "tuning_describe_interval" in mcp.tools


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_describe_ratio(self, interval_tools):
        result = await interval_tools["tuning_describe_interval"](interval="3/2")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["interval"]["kind"] == "ratio"
        assert data["interval"]["ratio"] == "3/2"
        assert data["interval"]["cents"] == pytest.approx(701.955, abs=1e-3)

    @pytest.mark.asyncio
    async def test_describe_cents(self, interval_tools):
        result = await interval_tools["tuning_describe_interval"](interval="701.955")
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["interval"]["kind"] == "cents"
        assert data["interval"]["ratio"] == "3/2"

    @pytest.mark.asyncio
    async def test_describe_invalid(self, interval_tools):
        result = await interval_tools["tuning_describe_interval"](interval="fifth")
        data = json.loads(result)
        assert data["status"] == "error"
        assert "fifth" in data["message"]

    @pytest.mark.asyncio
    async def test_describe_non_positive(self, interval_tools):
        result = await interval_tools["tuning_describe_interval"](interval="0")
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_transpose(self, interval_tools):
        result = await interval_tools["tuning_transpose_interval"](interval="3/2", octaves=-2)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["original"]["text"] == "3/2"
        assert data["transposed"]["text"] == "3/8"

    @pytest.mark.asyncio
    async def test_transpose_overflow(self, interval_tools):
        result = await interval_tools["tuning_transpose_interval"](interval="3/2", octaves=100)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "overflows" in data["message"]

    @pytest.mark.asyncio
    async def test_closest_ratio(self, interval_tools):
        result = await interval_tools["tuning_closest_ratio"](value=0.123456789)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["ratio"] == "10/81"
        assert data["max_denominator"] == 200

    @pytest.mark.asyncio
    async def test_closest_ratio_custom_bound(self, interval_tools):
        result = await interval_tools["tuning_closest_ratio"](value=3.14159265, max_denominator=10)
        assert json.loads(result)["ratio"] == "22/7"

    @pytest.mark.asyncio
    async def test_closest_ratio_bad_bound(self, interval_tools):
        result = await interval_tools["tuning_closest_ratio"](value=1.5, max_denominator=0)
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_closest_ratio_non_finite(self, interval_tools):
        result = await interval_tools["tuning_closest_ratio"](value=float("inf"))
        assert json.loads(result)["status"] == "error"


class TestScaleTools:
    """Tests for scale tools."""

    @pytest.mark.asyncio
    async def test_scale_at(self, scale_tools):
        result = await scale_tools["tuning_scale_at"](intervals=["5/4", "3/2", "2/1"], index=-1)
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["degree"] == 3
        assert data["interval"]["index"] == -1
        assert data["interval"]["text"] == "3/4"

    @pytest.mark.asyncio
    async def test_scale_at_zero_is_unison(self, scale_tools):
        result = await scale_tools["tuning_scale_at"](intervals=["300.0"], index=0)
        assert json.loads(result)["interval"]["text"] == "1/1"

    @pytest.mark.asyncio
    async def test_scale_at_empty(self, scale_tools):
        result = await scale_tools["tuning_scale_at"](intervals=[], index=1)
        data = json.loads(result)
        assert data["status"] == "error"
        assert "at least one interval" in data["message"]

    @pytest.mark.asyncio
    async def test_scale_span_default_range(self, scale_tools):
        result = await scale_tools["tuning_scale_span"](intervals=["5/4", "3/2", "2/1"])
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["start"] == -3
        assert data["stop"] == 9
        assert len(data["intervals"]) == 12
        assert data["intervals"][3]["text"] == "1/1"

    @pytest.mark.asyncio
    async def test_scale_span_custom_range(self, scale_tools):
        result = await scale_tools["tuning_scale_span"](
            intervals=["5/4", "3/2", "2/1"], start=4, stop=6
        )
        data = json.loads(result)
        assert [i["text"] for i in data["intervals"]] == ["5/2", "3/1"]
        assert [i["index"] for i in data["intervals"]] == [4, 5]

    @pytest.mark.asyncio
    async def test_render_scala(self, scale_tools, bremmer_tokens, bremmer_scala):
        result = await scale_tools["tuning_render_scala"](
            name="bremmer_ebvt3.scl",
            description="Bill Bremmer EBVT III temperament (2011)",
            intervals=bremmer_tokens,
        )
        data = json.loads(result)
        assert data["status"] == "success"
        assert data["scala"] == bremmer_scala

    @pytest.mark.asyncio
    async def test_render_scala_invalid_token(self, scale_tools):
        result = await scale_tools["tuning_render_scala"](
            name="bad", description="", intervals=["5/4", "x"]
        )
        assert json.loads(result)["status"] == "error"

    @pytest.mark.asyncio
    async def test_render_table(self, scale_tools, bremmer_tokens):
        result = await scale_tools["tuning_render_table"](
            name="bremmer_ebvt3.scl", description="", intervals=bremmer_tokens
        )
        data = json.loads(result)
        assert data["status"] == "success"
        lines = data["table"].splitlines()
        assert lines[0].split() == ["Index", "Str", "Cents", "Ratio"]
        assert len(lines) == 49

    @pytest.mark.asyncio
    async def test_export_yaml(self, scale_tools):
        result = await scale_tools["tuning_export_yaml"](
            name="just_triad.scl",
            description="5-limit major triad",
            intervals=["5/4", "3/2", "2/1"],
        )
        data = json.loads(result)
        assert data["status"] == "success"
        exported = yaml.safe_load(data["yaml"])
        assert exported["schema"] == "tuning/v1"
        assert exported["degree"] == 3
        assert exported["intervals"] == ["5/4", "3/2", "2/1"]

    @pytest.mark.asyncio
    async def test_export_yaml_empty(self, scale_tools):
        result = await scale_tools["tuning_export_yaml"](name="empty", description="", intervals=[])
        assert json.loads(result)["status"] == "error"
