"""
Pydantic models for the tuning system.

This module provides:
- IntervalInfo: Every view of one interval (text, cents, ratio)
- ScaleDocument: Portable scale description with YAML export
"""

from chuk_mcp_tuning.models.tuning import IntervalInfo, ScaleDocument

__all__ = [
    "IntervalInfo",
    "ScaleDocument",
]
