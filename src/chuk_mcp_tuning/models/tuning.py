"""
Tuning models - structured views of intervals and scales.

These are the shapes handed to MCP clients (as JSON) and exported as YAML.
The numeric work stays in core; models only describe results.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_tuning.constants import IntervalKind, SchemaVersion
from chuk_mcp_tuning.core.interval import Interval, format_ratio
from chuk_mcp_tuning.core.scale import Scale


class IntervalInfo(BaseModel):
    """
    Every view of one interval: stored text, cents, ratio and float ratio.

    Index is the scale position when the interval comes from a scale lookup.
    """

    index: int | None = Field(None, description="Scale position (any integer)")
    text: str = Field(..., description="Interval as stored ('94.8725' or '4/3')")
    kind: IntervalKind = Field(..., description="Storage form (cents or ratio)")
    cents: float = Field(..., description="Size in cents")
    ratio: str = Field(..., description="Exact or closest ratio as 'p/q'")
    ratio_as_double: float = Field(..., description="Frequency ratio as a float")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval, index: int | None = None) -> IntervalInfo:
        """Describe an interval, optionally tagged with its scale position."""
        return cls(
            index=index,
            text=str(interval),
            kind=interval.kind,
            cents=interval.cents(),
            ratio=format_ratio(interval.ratio()),
            ratio_as_double=interval.ratio_as_double(),
        )


class ScaleDocument(BaseModel):
    """
    Portable description of a scale.

    Intervals are kept as Scala-style tokens so cents stay cents and
    ratios stay exact.
    """

    schema_version: SchemaVersion = Field("tuning/v1", description="Schema version")
    name: str = Field(..., description="Scale name (e.g., 'bremmer_ebvt3.scl')")
    description: str = Field("", description="One-line description")
    intervals: list[str] = Field(
        ..., min_length=1, description="Generating intervals ('94.87252', '4/3', ...)"
    )

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Ensure every token parses as an interval."""
        for text in v:
            Interval.parse(text)
        return v

    @classmethod
    def from_scale(cls, scale: Scale) -> ScaleDocument:
        """Describe a scale. Cents keep their full precision."""
        return cls(
            name=scale.name,
            description=scale.description,
            intervals=[
                repr(interval.cents()) if interval.is_cents else format_ratio(interval.ratio())
                for interval in scale.intervals
            ],
        )

    def to_scale(self) -> Scale:
        """Build the Scale this document describes."""
        return Scale.from_strings(self.name, self.description, self.intervals)

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        This produces the canonical YAML format for scales.
        """
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "degree": len(self.intervals),
            "intervals": list(self.intervals),
        }
