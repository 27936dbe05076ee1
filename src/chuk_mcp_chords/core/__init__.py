"""
Core music primitives - the chord algebra.

These are the invariants everything else composes on:
- PitchClass: The 12 pitch classes, one flat spelling each
- Interval: Ascending distance between pitch classes (m2 .. octave)
- add / subtract: Interval arithmetic, exact inverses mod 12
- ChordQuality: Named interval stacks (the classification table)
- Chord: Root + quality + optional slash bass
"""

from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.pitch import Interval, PitchClass, add, subtract
from chuk_mcp_chords.core.quality import (
    QUALITY_TABLE,
    ChordQuality,
    classify,
    get_quality,
    intervals_for_quality,
    quality_labels,
)

__all__ = [
    # Pitch
    "PitchClass",
    "Interval",
    "add",
    "subtract",
    # Quality
    "ChordQuality",
    "QUALITY_TABLE",
    "classify",
    "get_quality",
    "intervals_for_quality",
    "quality_labels",
    # Chord
    "Chord",
]
