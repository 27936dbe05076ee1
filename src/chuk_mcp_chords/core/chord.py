"""
Chord - a root, a quality and an optional slash bass.

Chords are built either from their notes (the quality is classified from
the intervals above the root) or from their written name:

    Chord.from_notes(PitchClass.C, {C, E, G, B})  -> Cmaj7
    Chord.parse("Cmaj9/G")                        -> Cmaj9 over G

Either way the result is the same immutable value, identified by
(root, quality, slash). Everything else is derived from those three.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from chuk_mcp_chords.constants import DEFAULT_OCTAVE, FLAT_MARKER, ROOT_LETTERS, SLASH_SEPARATOR
from chuk_mcp_chords.errors import (
    MalformedChordNameError,
    UnknownChordQualityError,
    UnknownPitchClassError,
    UnrecognizedSlashNoteError,
)

from .pitch import Interval, PitchClass, add, subtract
from .quality import ChordQuality, classify, get_quality


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord with a root pitch and quality.

    Attributes:
        root: The pitch class all intervals are measured from
        quality: Quality label from the quality table ("" is a major triad)
        slash: Bass note for slash chords; None when absent or equal to root

    Raises:
        UnknownQualityLabelError: If quality is not in the table
    """

    root: PitchClass
    quality: str = ""
    slash: PitchClass | None = None

    def __post_init__(self) -> None:
        get_quality(self.quality)
        if self.slash == self.root:
            object.__setattr__(self, "slash", None)

    # -- construction -----------------------------------------------------

    @classmethod
    def from_notes(
        cls,
        root: PitchClass,
        notes: Iterable[PitchClass],
        slash: PitchClass | None = None,
    ) -> Chord:
        """
        Identify a chord from its notes.

        The root and the slash are taken out of the note set; what remains
        is classified by its intervals above the root. When that fails and
        the slash is also one of the notes, the slash is counted as a chord
        tone and classification is retried - so the notes of Cmaj9/G give
        back Cmaj9/G.

        Args:
            root: Root pitch class
            notes: Pitch classes sounding in the chord (order irrelevant)
            slash: Optional bass note

        Returns:
            The identified chord

        Raises:
            UnknownChordQualityError: If no quality matches the notes
        """
        pitches = frozenset(notes)
        excluded = {root} if slash is None else {root, slash}
        colors = pitches - excluded
        try:
            quality = classify(_intervals_above(root, colors))
        except UnknownChordQualityError:
            if slash is None or slash == root or slash not in pitches:
                raise UnknownChordQualityError(_intervals_above(root, colors), root) from None
            with_slash = colors | {slash}
            try:
                quality = classify(_intervals_above(root, with_slash))
            except UnknownChordQualityError:
                raise UnknownChordQualityError(_intervals_above(root, with_slash), root) from None
        return cls(root, quality, slash)

    @classmethod
    def parse(cls, name: str) -> Chord:
        """
        Parse a chord name like 'C', 'Ebm7', 'Bbmaj9/D'.

        Grammar: Root[b]Quality[/Slash], where Root is A-G and the only
        accidental is a flat.

        Raises:
            MalformedChordNameError: Bad structure or root
            UnknownQualityLabelError: Quality not in the table
            UnrecognizedSlashNoteError: Bad slash note
        """
        segments = name.strip().split(SLASH_SEPARATOR)
        if len(segments) > 2:
            raise MalformedChordNameError(name, "more than one slash")
        if not all(segments):
            raise MalformedChordNameError(name, "empty root or slash")

        head = segments[0]
        if head[0] not in ROOT_LETTERS:
            raise MalformedChordNameError(name, f"root must be one of {ROOT_LETTERS}")
        root_text, quality = head[0], head[1:]
        if quality.startswith(FLAT_MARKER):
            root_text, quality = root_text + FLAT_MARKER, quality[1:]
        try:
            root = PitchClass.parse(root_text)
        except UnknownPitchClassError:
            raise MalformedChordNameError(name, f"{root_text!r} is not a pitch class") from None

        get_quality(quality)

        slash = None
        if len(segments) == 2:
            try:
                slash = PitchClass.parse(segments[1])
            except UnknownPitchClassError:
                raise UnrecognizedSlashNoteError(name, segments[1]) from None

        return cls(root, quality, slash)

    # -- derived ----------------------------------------------------------

    @property
    def chord_quality(self) -> ChordQuality:
        """The full quality table entry."""
        return get_quality(self.quality)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals above the root, ascending."""
        return self.chord_quality.intervals

    @property
    def color_notes(self) -> list[PitchClass]:
        """Chord tones other than the root, in interval order."""
        return [add(self.root, interval) for interval in self.intervals]

    @property
    def notes(self) -> frozenset[PitchClass]:
        """Every sounding pitch class: root, chord tones and slash."""
        pitches = {self.root, *self.color_notes}
        if self.slash is not None:
            pitches.add(self.slash)
        return frozenset(pitches)

    @property
    def is_slash(self) -> bool:
        return self.slash is not None

    @property
    def name(self) -> str:
        """Written name, e.g. 'Cmaj9/G'."""
        result = f"{self.root.spell()}{self.quality}"
        if self.slash is not None:
            result += f"{SLASH_SEPARATOR}{self.slash.spell()}"
        return result

    @property
    def description(self) -> str:
        """One-sentence description of the chord's structure."""
        kind = " slash" if self.slash is not None else ""
        over = f" over {self.slash.spell()}" if self.slash is not None else ""
        notes = ", ".join(note.spell() for note in self.color_notes)
        interval_names = ", ".join(interval.full_name for interval in self.intervals)
        return (
            f"This is a{kind} chord named {self.name}{over}, "
            f"with root note {self.root.spell()}, "
            f"and component notes {notes}, "
            f"which are respectively {interval_names} above the root."
        )

    # -- operations -------------------------------------------------------

    def transpose(self, semitones: int) -> Chord:
        """Move root and slash together; the quality is unchanged."""
        slash = self.slash.transpose(semitones) if self.slash is not None else None
        return Chord(self.root.transpose(semitones), self.quality, slash)

    def is_subset_of(self, pitches: Iterable[PitchClass]) -> bool:
        """True if every note of the chord is in pitches (e.g. a scale)."""
        return self.notes <= frozenset(pitches)

    def get_midi_notes(self, octave: int = DEFAULT_OCTAVE) -> list[int]:
        """
        Get MIDI note numbers for this chord.

        Chord tones are stacked above the root; a slash note goes below it.

        Args:
            octave: Octave for the root (default 4)

        Returns:
            List of MIDI note numbers, ascending
        """
        root_midi = self.root.to_midi(octave)
        midi_notes = [root_midi] + [root_midi + i.semitones for i in self.intervals]
        if self.slash is not None:
            midi_notes.insert(0, root_midi - subtract(self.root, self.slash).semitones)
        return midi_notes

    def __str__(self) -> str:
        return self.name


def _intervals_above(root: PitchClass, notes: Iterable[PitchClass]) -> tuple[Interval, ...]:
    return tuple(sorted(subtract(note, root) for note in notes))
