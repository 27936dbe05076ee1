"""
Pydantic models for tool responses.

This module provides:
- ChordInfo: Full serialized view of a chord
- IntervalInfo: An interval above a root
- PitchInfo: A pitch class placed in a register
- QualityInfo: A row of the quality table
"""

from chuk_mcp_chords.models.chord import ChordInfo, IntervalInfo, PitchInfo, QualityInfo

__all__ = [
    "ChordInfo",
    "IntervalInfo",
    "PitchInfo",
    "QualityInfo",
]
