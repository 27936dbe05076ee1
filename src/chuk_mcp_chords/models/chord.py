"""
Chord response models - what the tools hand back.

The core types are plain enums and frozen dataclasses; these pydantic
models are their serialized view (JSON for tool output, plain dicts for
YAML export).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_chords.constants import DEFAULT_OCTAVE
from chuk_mcp_chords.core.chord import Chord
from chuk_mcp_chords.core.pitch import Interval, PitchClass
from chuk_mcp_chords.core.quality import ChordQuality


class IntervalInfo(BaseModel):
    """An interval above a root."""

    short_name: str = Field(..., description="Short name (e.g., 'M3')")
    full_name: str = Field(..., description="Spoken name (e.g., 'major third')")
    semitones: int = Field(..., ge=1, le=12, description="Semitone distance (1-12)")

    model_config = {"frozen": True}

    @classmethod
    def from_interval(cls, interval: Interval) -> IntervalInfo:
        return cls(
            short_name=interval.short_name,
            full_name=interval.full_name,
            semitones=interval.semitones,
        )


class PitchInfo(BaseModel):
    """A pitch class placed in a register."""

    pitch: str = Field(..., description="Canonical spelling (e.g., 'Bb')")
    semitone_index: int = Field(..., ge=1, le=12, description="Position in octave, C=1..B=12")
    octave: int = Field(DEFAULT_OCTAVE, description="Scientific pitch octave")
    midi: int = Field(..., ge=0, le=127, description="MIDI note number")
    frequency: float = Field(..., gt=0, description="Fundamental frequency in Hz")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: PitchClass, octave: int = DEFAULT_OCTAVE) -> PitchInfo:
        return cls(
            pitch=pitch.spell(),
            semitone_index=pitch.semitone_index,
            octave=octave,
            midi=pitch.to_midi(octave),
            frequency=round(pitch.frequency(octave), 3),
        )


class QualityInfo(BaseModel):
    """A row of the quality table."""

    label: str = Field(..., description="Suffix written after the root ('' = major)")
    description: str = Field("", description="Quality name (e.g., 'minor seventh')")
    intervals: list[str] = Field(default_factory=list, description="Intervals above the root")
    size: int = Field(..., ge=3, description="Number of notes including the root")

    @classmethod
    def from_quality(cls, quality: ChordQuality) -> QualityInfo:
        return cls(
            label=quality.label,
            description=quality.description,
            intervals=[i.short_name for i in quality.intervals],
            size=quality.size,
        )


class ChordInfo(BaseModel):
    """
    Full view of a chord.

    Notes are listed in pitch order from C; color notes and intervals are
    listed in ascending interval order from the root.
    """

    name: str = Field(..., description="Written name (e.g., 'Cmaj9/G')")
    root: str = Field(..., description="Root pitch class")
    quality: str = Field(..., description="Quality label")
    quality_description: str = Field("", description="Quality name")
    slash: str | None = Field(None, description="Slash bass note, if any")
    notes: list[str] = Field(default_factory=list, description="All sounding pitch classes")
    color_notes: list[str] = Field(default_factory=list, description="Chord tones above root")
    intervals: list[IntervalInfo] = Field(default_factory=list, description="Intervals above root")
    midi_notes: list[int] = Field(default_factory=list, description="Voicing as MIDI notes")
    description: str = Field("", description="Human-readable description")

    @classmethod
    def from_chord(cls, chord: Chord, octave: int = DEFAULT_OCTAVE) -> ChordInfo:
        """Build the view from a core Chord."""
        return cls(
            name=chord.name,
            root=chord.root.spell(),
            quality=chord.quality,
            quality_description=chord.chord_quality.description,
            slash=chord.slash.spell() if chord.slash is not None else None,
            notes=[note.spell() for note in sorted(chord.notes)],
            color_notes=[note.spell() for note in chord.color_notes],
            intervals=[IntervalInfo.from_interval(i) for i in chord.intervals],
            midi_notes=chord.get_midi_notes(octave),
            description=chord.description,
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """Compact dict for YAML export (no derived voicing or prose)."""
        data: dict[str, Any] = {
            "chord": self.name,
            "root": self.root,
            "quality": self.quality,
        }
        if self.slash is not None:
            data["slash"] = self.slash
        data["notes"] = list(self.color_notes)
        data["intervals"] = [i.short_name for i in self.intervals]
        return data
