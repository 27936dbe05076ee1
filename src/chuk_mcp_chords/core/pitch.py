"""
Pitch primitives - PitchClass, Interval, and the arithmetic between them.

PitchClass represents the 12 chromatic pitches (octave-independent).
Interval represents the ascending distance between two pitch classes.

Intervals use a 1-12 convention: minor second is 1, octave is 12, and a
distance of 0 (mod 12) is read as the octave. The enum value is the only
semitone table - names and reverse lookups are derived from it.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_chords.constants import (
    DEFAULT_OCTAVE,
    REFERENCE_FREQUENCY,
    REFERENCE_MIDI_NOTE,
    SEMITONES_PER_OCTAVE,
)
from chuk_mcp_chords.errors import (
    InvalidIntervalError,
    InvalidSemitoneIndexError,
    UnknownPitchClassError,
)

# Display name mappings (module level to avoid IntEnum member issues)
_SPELLINGS: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Indexed by semitones - 1
_SHORT_NAMES: list[str] = ["m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7", "P8"]
_FULL_NAMES: list[str] = [
    "minor second",
    "major second",
    "minor third",
    "major third",
    "perfect fourth",
    "tritone",
    "perfect fifth",
    "minor sixth",
    "major sixth",
    "minor seventh",
    "major seventh",
    "octave",
]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes.

    Octave-independent - C4 and C5 are both PitchClass.C.
    One spelling per semitone, flats only: Db is a pitch class, C# is not.
    The value is the offset from C (0-11); the public index is 1-12.
    """

    C = 0
    Db = 1
    D = 2
    Eb = 3
    E = 4
    F = 5
    Gb = 6
    G = 7
    Ab = 8
    A = 9
    Bb = 10
    B = 11

    @property
    def semitone_index(self) -> int:
        """Position in the octave, C = 1 through B = 12."""
        return self.value + 1

    @classmethod
    def from_semitone_index(cls, index: int) -> PitchClass:
        """Inverse of semitone_index. Only 1-12 is accepted."""
        if not 1 <= index <= SEMITONES_PER_OCTAVE:
            raise InvalidSemitoneIndexError(index)
        return cls(index - 1)

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class up to another."""
        return subtract(other, self)

    def to_midi(self, octave: int = DEFAULT_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def frequency(
        self, octave: int = DEFAULT_OCTAVE, reference: float = REFERENCE_FREQUENCY
    ) -> float:
        """
        Fundamental frequency in Hz, equal temperament.

        Args:
            octave: Scientific pitch octave (A4 is the reference)
            reference: Frequency of A4

        Returns:
            Frequency in Hz
        """
        offset = self.to_midi(octave) - REFERENCE_MIDI_NOTE
        return float(reference * 2 ** (offset / SEMITONES_PER_OCTAVE))

    def spell(self) -> str:
        """Get the canonical name."""
        return _SPELLINGS[self.value]

    def __str__(self) -> str:
        return self.spell()

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % SEMITONES_PER_OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from its canonical spelling ('C', 'Db', 'Bb').

        Sharp spellings are not accepted - C# is written Db.
        """
        text = name.strip()
        if text in _SPELLINGS:
            return cls(_SPELLINGS.index(text))
        raise UnknownPitchClassError(name)


class Interval(IntEnum):
    """
    Ascending distance between two pitch classes, minor second to octave.

    Ordered by semitone distance, so a sorted list of intervals is the
    canonical form used for chord classification.
    """

    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    TRITONE = 6
    PERFECT_FIFTH = 7
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    OCTAVE = 12

    # Short aliases
    m2 = 1
    M2 = 2
    m3 = 3
    M3 = 4
    P4 = 5
    TT = 6
    P5 = 7
    m6 = 8
    M6 = 9
    m7 = 10
    M7 = 11
    P8 = 12

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self.value

    @property
    def full_name(self) -> str:
        """Spoken name, e.g. 'major third'."""
        return _FULL_NAMES[self.value - 1]

    @property
    def short_name(self) -> str:
        """Short name, e.g. 'M3'."""
        return _SHORT_NAMES[self.value - 1]

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval.reduce(SEMITONES_PER_OCTAVE - self.value)

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """Strict lookup: 1-12 only."""
        if not 1 <= semitones <= SEMITONES_PER_OCTAVE:
            raise InvalidIntervalError(semitones)
        return cls(semitones)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse a short name ('M3', 'TT') or a semitone count ('4')."""
        text = name.strip()
        if text in _SHORT_NAMES:
            return cls(_SHORT_NAMES.index(text) + 1)
        if text.isdecimal():
            return cls.from_semitones(int(text))
        raise InvalidIntervalError(name)

    @classmethod
    def reduce(cls, semitones: int) -> Interval:
        """Fold any semitone count into 1-12; multiples of 12 are the octave."""
        remainder = semitones % SEMITONES_PER_OCTAVE
        return cls.from_semitones(remainder or SEMITONES_PER_OCTAVE)

    def __str__(self) -> str:
        return self.short_name


def subtract(a: PitchClass, b: PitchClass) -> Interval:
    """
    The interval to ascend from b to reach a.

    subtract(E, D) is a major second; subtract(D, E) is a minor seventh.
    Equal pitch classes are an octave apart.
    """
    return Interval.reduce(a.value - b.value)


def add(root: PitchClass, interval: Interval) -> PitchClass:
    """The pitch class reached by ascending an interval from root."""
    return root.transpose(interval.semitones)
