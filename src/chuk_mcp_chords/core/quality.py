"""
Chord qualities - the classification table.

A quality is an interval stack measured from the root (root excluded).
The table below is the only definition of which note combinations are
chords: lookups are exact, in both directions.

    classify((M3, P5, M7))         -> "maj7"
    intervals_for_quality("maj7")  -> (M3, P5, M7)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from chuk_mcp_chords.errors import UnknownChordQualityError, UnknownQualityLabelError

from .pitch import Interval


@dataclass(frozen=True)
class ChordQuality:
    """
    A named interval stack.

    Intervals are measured from the root, not stacked, and are kept in
    ascending order. The label is the suffix written after the root in a
    chord name ("" for a major triad, "m7" for a minor seventh).

    Immutable and hashable.
    """

    label: str
    intervals: tuple[Interval, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if list(self.intervals) != sorted(set(self.intervals)):
            raise ValueError(f"Quality {self.label!r}: intervals must be ascending and unique")
        if len(self.intervals) < 2:
            raise ValueError(f"Quality {self.label!r}: a chord needs at least three notes")
        if Interval.OCTAVE in self.intervals:
            raise ValueError(f"Quality {self.label!r}: the octave is the root, not a chord tone")
        if "/" in self.label or self.label.startswith("b"):
            raise ValueError(f"Quality {self.label!r} would make chord names ambiguous")

    @property
    def size(self) -> int:
        """Number of distinct notes including the root."""
        return len(self.intervals) + 1

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"ChordQuality({self.label!r})"


_I = Interval

QUALITY_TABLE: tuple[ChordQuality, ...] = (
    # Triads
    ChordQuality("", (_I.M3, _I.P5), "major"),
    ChordQuality("m", (_I.m3, _I.P5), "minor"),
    ChordQuality("dim", (_I.m3, _I.TT), "diminished"),
    ChordQuality("aug", (_I.M3, _I.m6), "augmented"),
    ChordQuality("sus2", (_I.M2, _I.P5), "suspended second"),
    ChordQuality("sus4", (_I.P4, _I.P5), "suspended fourth"),
    # Sixths and sevenths
    ChordQuality("6", (_I.M3, _I.P5, _I.M6), "major sixth"),
    ChordQuality("m6", (_I.m3, _I.P5, _I.M6), "minor sixth"),
    ChordQuality("7", (_I.M3, _I.P5, _I.m7), "dominant seventh"),
    ChordQuality("maj7", (_I.M3, _I.P5, _I.M7), "major seventh"),
    ChordQuality("m7", (_I.m3, _I.P5, _I.m7), "minor seventh"),
    ChordQuality("mmaj7", (_I.m3, _I.P5, _I.M7), "minor-major seventh"),
    ChordQuality("dim7", (_I.m3, _I.TT, _I.M6), "diminished seventh"),
    ChordQuality("m7b5", (_I.m3, _I.TT, _I.m7), "half-diminished seventh"),
    ChordQuality("aug7", (_I.M3, _I.m6, _I.m7), "augmented seventh"),
    ChordQuality("augmaj7", (_I.M3, _I.m6, _I.M7), "augmented major seventh"),
    ChordQuality("7b5", (_I.M3, _I.TT, _I.m7), "dominant seventh flat five"),
    ChordQuality("7sus2", (_I.M2, _I.P5, _I.m7), "dominant seventh suspended second"),
    ChordQuality("7sus4", (_I.P4, _I.P5, _I.m7), "dominant seventh suspended fourth"),
    # Added tones
    ChordQuality("add9", (_I.M2, _I.M3, _I.P5), "major added ninth"),
    ChordQuality("madd9", (_I.M2, _I.m3, _I.P5), "minor added ninth"),
    ChordQuality("add11", (_I.M3, _I.P4, _I.P5), "major added eleventh"),
    ChordQuality("69", (_I.M2, _I.M3, _I.P5, _I.M6), "six-nine"),
    ChordQuality("m69", (_I.M2, _I.m3, _I.P5, _I.M6), "minor six-nine"),
    # Extended
    ChordQuality("9", (_I.M2, _I.M3, _I.P5, _I.m7), "dominant ninth"),
    ChordQuality("maj9", (_I.M2, _I.M3, _I.P5, _I.M7), "major ninth"),
    ChordQuality("m9", (_I.M2, _I.m3, _I.P5, _I.m7), "minor ninth"),
    ChordQuality("mmaj9", (_I.M2, _I.m3, _I.P5, _I.M7), "minor-major ninth"),
    ChordQuality("7b9", (_I.m2, _I.M3, _I.P5, _I.m7), "dominant seventh flat nine"),
    ChordQuality("7#9", (_I.m3, _I.M3, _I.P5, _I.m7), "dominant seventh sharp nine"),
    ChordQuality("9sus4", (_I.M2, _I.P4, _I.P5, _I.m7), "dominant ninth suspended fourth"),
    ChordQuality("7#11", (_I.M3, _I.TT, _I.P5, _I.m7), "dominant seventh sharp eleven"),
    ChordQuality("maj7#11", (_I.M3, _I.TT, _I.P5, _I.M7), "major seventh sharp eleven"),
    ChordQuality("11", (_I.M2, _I.M3, _I.P4, _I.P5, _I.m7), "dominant eleventh"),
    ChordQuality("maj11", (_I.M2, _I.M3, _I.P4, _I.P5, _I.M7), "major eleventh"),
    ChordQuality("m11", (_I.M2, _I.m3, _I.P4, _I.P5, _I.m7), "minor eleventh"),
    ChordQuality("13", (_I.M2, _I.M3, _I.P5, _I.M6, _I.m7), "dominant thirteenth"),
    ChordQuality("maj13", (_I.M2, _I.M3, _I.P5, _I.M6, _I.M7), "major thirteenth"),
    ChordQuality("m13", (_I.M2, _I.m3, _I.P5, _I.M6, _I.m7), "minor thirteenth"),
)


def _build_indexes(
    table: Iterable[ChordQuality],
) -> tuple[dict[tuple[Interval, ...], ChordQuality], dict[str, ChordQuality]]:
    """Derive both lookup directions, refusing any collision."""
    by_intervals: dict[tuple[Interval, ...], ChordQuality] = {}
    by_label: dict[str, ChordQuality] = {}
    for quality in table:
        if quality.label in by_label:
            raise ValueError(f"Duplicate chord quality label: {quality.label!r}")
        if quality.intervals in by_intervals:
            other = by_intervals[quality.intervals]
            raise ValueError(f"Qualities {other.label!r} and {quality.label!r} share intervals")
        by_intervals[quality.intervals] = quality
        by_label[quality.label] = quality
    return by_intervals, by_label


_BY_INTERVALS, _BY_LABEL = _build_indexes(QUALITY_TABLE)


def classify(intervals: Sequence[Interval]) -> str:
    """
    Name the quality with exactly these intervals.

    Args:
        intervals: Intervals above the root, ascending

    Returns:
        The quality label

    Raises:
        UnknownChordQualityError: If no quality has this exact interval list
    """
    key = tuple(intervals)
    quality = _BY_INTERVALS.get(key)
    if quality is None:
        raise UnknownChordQualityError(key)
    return quality.label


def get_quality(label: str) -> ChordQuality:
    """Look up a quality by label."""
    try:
        return _BY_LABEL[label]
    except KeyError:
        raise UnknownQualityLabelError(label) from None


def intervals_for_quality(label: str) -> tuple[Interval, ...]:
    """Intervals above the root for a quality label."""
    return get_quality(label).intervals


def quality_labels() -> list[str]:
    """All quality labels, in table order."""
    return [quality.label for quality in QUALITY_TABLE]
