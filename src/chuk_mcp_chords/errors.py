"""
Error types for the chord engine.

Every failure in the core is a construction or parse failure - there are
no partial results. All errors subclass ValueError so callers that already
guard musical input with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_mcp_chords.core.pitch import Interval, PitchClass


class MusicTheoryError(ValueError):
    """Base class for all chord engine errors."""


class UnknownPitchClassError(MusicTheoryError):
    """Text is not a canonical pitch class spelling."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unknown pitch class: {text!r}")


class InvalidSemitoneIndexError(MusicTheoryError):
    """A semitone index outside 1-12."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Semitone index must be 1-12, got {index}")


class InvalidIntervalError(MusicTheoryError):
    """
    A semitone distance with no Interval.

    Arithmetic reduces into range before lookup, so seeing this from
    add/subtract means the interval table itself is broken.
    """

    def __init__(self, value: int | str) -> None:
        self.value = value
        super().__init__(f"No interval matches {value!r} (expected m2-P8 or 1-12 semitones)")


class UnknownChordQualityError(MusicTheoryError):
    """An interval sequence that matches no quality in the table."""

    def __init__(self, intervals: tuple[Interval, ...], root: PitchClass | None = None) -> None:
        self.intervals = intervals
        self.root = root
        shown = ", ".join(i.short_name for i in intervals) or "(none)"
        prefix = f"Notes above {root.spell()}" if root is not None else "Intervals"
        super().__init__(f"{prefix} [{shown}] do not form a known chord quality")


class UnknownQualityLabelError(MusicTheoryError):
    """A quality label that is not in the table."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Unknown chord quality: {label!r}")


class MalformedChordNameError(MusicTheoryError):
    """A chord name that does not fit Root[b]Quality[/Slash]."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Malformed chord name {name!r}: {reason}")


class UnrecognizedSlashNoteError(MalformedChordNameError):
    """The part after '/' is not a pitch class."""

    def __init__(self, name: str, slash: str) -> None:
        self.slash = slash
        super().__init__(name, f"unrecognized slash note {slash!r}")
