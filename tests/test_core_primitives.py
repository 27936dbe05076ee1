"""
Tests for pitch primitives.

Tests cover:
- PitchClass spelling, indexing, MIDI and frequency
- Interval naming, ordering and lookup
- add / subtract arithmetic
"""

import pytest

from chuk_mcp_chords.core import Interval, PitchClass, add, subtract
from chuk_mcp_chords.errors import (
    InvalidIntervalError,
    InvalidSemitoneIndexError,
    MusicTheoryError,
    UnknownPitchClassError,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.Db == 1
        assert PitchClass.E == 4
        assert PitchClass.Bb == 10
        assert PitchClass.B == 11

    def test_twelve_pitch_classes(self) -> None:
        """There is exactly one pitch class per semitone."""
        assert len(PitchClass) == 12
        assert [p.value for p in PitchClass] == list(range(12))

    def test_semitone_index(self) -> None:
        """Public index runs C=1 to B=12."""
        assert PitchClass.C.semitone_index == 1
        assert PitchClass.Gb.semitone_index == 7
        assert PitchClass.B.semitone_index == 12

    def test_semitone_index_roundtrip(self) -> None:
        """from_semitone_index inverts semitone_index for 1-12."""
        for index in range(1, 13):
            assert PitchClass.from_semitone_index(index).semitone_index == index
        for pitch in PitchClass:
            assert PitchClass.from_semitone_index(pitch.semitone_index) == pitch

    @pytest.mark.parametrize("index", [0, 13, -1, 24])
    def test_semitone_index_out_of_range(self, index: int) -> None:
        """Indices outside 1-12 are rejected, not wrapped."""
        with pytest.raises(InvalidSemitoneIndexError):
            PitchClass.from_semitone_index(index)

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.G.transpose(7) == PitchClass.D
        assert PitchClass.E.transpose(24) == PitchClass.E

    def test_to_midi(self) -> None:
        """Convert to MIDI note numbers."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69
        assert PitchClass.C.to_midi(-1) == 0

    def test_from_midi(self) -> None:
        """Extract pitch class from MIDI note."""
        assert PitchClass.from_midi(61) == PitchClass.Db
        assert PitchClass.from_midi(70) == PitchClass.Bb

    def test_frequency(self) -> None:
        """Equal-tempered frequency with A4 = 440 Hz."""
        assert PitchClass.A.frequency(4) == pytest.approx(440.0)
        assert PitchClass.A.frequency(3) == pytest.approx(220.0)
        assert PitchClass.C.frequency(4) == pytest.approx(261.6256, abs=1e-3)
        assert PitchClass.A.frequency(4, reference=432.0) == pytest.approx(432.0)

    def test_spell(self) -> None:
        """Spell pitch classes with their canonical flat names."""
        assert PitchClass.C.spell() == "C"
        assert PitchClass.Db.spell() == "Db"
        assert PitchClass.Bb.spell() == "Bb"
        assert str(PitchClass.Ab) == "Ab"

    def test_parse(self) -> None:
        """Parse canonical spellings."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("Eb") == PitchClass.Eb
        for pitch in PitchClass:
            assert PitchClass.parse(pitch.spell()) == pitch

    def test_parse_strips_whitespace(self) -> None:
        """Surrounding whitespace is ignored."""
        assert PitchClass.parse(" E") == PitchClass.E
        assert PitchClass.parse("Bb \n") == PitchClass.Bb

    @pytest.mark.parametrize("text", ["C#", "Cb", "H", "c", "", "  ", "Bbb", "B b"])
    def test_parse_rejects_non_canonical(self, text: str) -> None:
        """Sharps, lowercase and unknown letters are not pitch classes."""
        with pytest.raises(UnknownPitchClassError):
            PitchClass.parse(text)

    def test_errors_are_value_errors(self) -> None:
        """Callers can keep catching ValueError."""
        with pytest.raises(ValueError):
            PitchClass.parse("X")
        assert issubclass(UnknownPitchClassError, MusicTheoryError)


class TestInterval:
    """Tests for Interval enum."""

    def test_named_intervals(self) -> None:
        """Named intervals have correct semitone counts."""
        assert Interval.MINOR_SECOND.semitones == 1
        assert Interval.MAJOR_THIRD.semitones == 4
        assert Interval.TRITONE.semitones == 6
        assert Interval.PERFECT_FIFTH.semitones == 7
        assert Interval.OCTAVE.semitones == 12

    def test_short_aliases(self) -> None:
        """Short aliases are the same members."""
        assert Interval.m3 is Interval.MINOR_THIRD
        assert Interval.M3 is Interval.MAJOR_THIRD
        assert Interval.TT is Interval.TRITONE
        assert Interval.P8 is Interval.OCTAVE
        assert len(Interval) == 12

    def test_full_names(self) -> None:
        """Full names are spelled out."""
        assert Interval.M2.full_name == "major second"
        assert Interval.P4.full_name == "perfect fourth"
        assert Interval.TT.full_name == "tritone"
        assert Interval.M7.full_name == "major seventh"
        assert Interval.P8.full_name == "octave"

    def test_short_names(self) -> None:
        """Short names match the aliases."""
        assert [i.short_name for i in Interval] == [
            "m2", "M2", "m3", "M3", "P4", "TT", "P5", "m6", "M6", "m7", "M7", "P8",
        ]
        assert str(Interval.P5) == "P5"

    def test_comparison(self) -> None:
        """Intervals order by semitone distance."""
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert Interval.PERFECT_FIFTH > Interval.PERFECT_FOURTH
        assert sorted([Interval.M7, Interval.M3, Interval.P5]) == [
            Interval.M3,
            Interval.P5,
            Interval.M7,
        ]

    def test_from_semitones(self) -> None:
        """Strict lookup accepts 1-12."""
        assert Interval.from_semitones(1) == Interval.m2
        assert Interval.from_semitones(12) == Interval.OCTAVE

    @pytest.mark.parametrize("semitones", [0, 13, -3])
    def test_from_semitones_out_of_range(self, semitones: int) -> None:
        """Anything outside 1-12 has no interval."""
        with pytest.raises(InvalidIntervalError):
            Interval.from_semitones(semitones)

    def test_reduce(self) -> None:
        """Reduce folds any count into 1-12 with 0 as the octave."""
        assert Interval.reduce(0) == Interval.OCTAVE
        assert Interval.reduce(12) == Interval.OCTAVE
        assert Interval.reduce(14) == Interval.M2
        assert Interval.reduce(-1) == Interval.M7

    def test_invert(self) -> None:
        """Inverting intervals works."""
        assert Interval.MAJOR_THIRD.invert() == Interval.MINOR_SIXTH
        assert Interval.PERFECT_FIFTH.invert() == Interval.PERFECT_FOURTH
        assert Interval.TRITONE.invert() == Interval.TRITONE
        assert Interval.OCTAVE.invert() == Interval.OCTAVE

    def test_parse(self) -> None:
        """Parse short names and semitone counts."""
        assert Interval.parse("M3") == Interval.MAJOR_THIRD
        assert Interval.parse("m3") == Interval.MINOR_THIRD
        assert Interval.parse("7") == Interval.PERFECT_FIFTH
        assert Interval.parse(" TT ") == Interval.TRITONE

    @pytest.mark.parametrize("text", ["M9", "0", "third", "", "²", "-3", "4.0"])
    def test_parse_rejects_unknown(self, text: str) -> None:
        """Unknown interval text is rejected."""
        with pytest.raises(InvalidIntervalError):
            Interval.parse(text)


class TestIntervalArithmetic:
    """Tests for add and subtract."""

    def test_subtract_ascends(self) -> None:
        """subtract(a, b) is the distance up from b to a."""
        assert subtract(PitchClass.E, PitchClass.D) == Interval.M2
        assert subtract(PitchClass.D, PitchClass.E) == Interval.m7
        assert subtract(PitchClass.G, PitchClass.C) == Interval.P5
        assert subtract(PitchClass.C, PitchClass.G) == Interval.P4

    def test_subtract_same_pitch_is_octave(self) -> None:
        """A pitch class is an octave above itself."""
        for pitch in PitchClass:
            assert subtract(pitch, pitch) == Interval.OCTAVE

    def test_add(self) -> None:
        """add ascends from a root."""
        assert add(PitchClass.C, Interval.M3) == PitchClass.E
        assert add(PitchClass.A, Interval.m3) == PitchClass.C
        assert add(PitchClass.Bb, Interval.P5) == PitchClass.F
        assert add(PitchClass.D, Interval.OCTAVE) == PitchClass.D

    def test_interval_to(self) -> None:
        """interval_to is subtract with the arguments flipped."""
        assert PitchClass.D.interval_to(PitchClass.E) == Interval.M2
        assert PitchClass.C.interval_to(PitchClass.E).semitones == 4

    def test_add_subtract_roundtrip(self) -> None:
        """subtract undoes add for every pitch class and interval."""
        for pitch in PitchClass:
            for interval in Interval:
                assert subtract(add(pitch, interval), pitch) == interval

    def test_subtract_add_roundtrip(self) -> None:
        """add undoes subtract for every pair of pitch classes."""
        for a in PitchClass:
            for b in PitchClass:
                assert add(b, subtract(a, b)) == a
