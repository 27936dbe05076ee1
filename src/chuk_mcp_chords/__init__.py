"""
chuk-mcp-chords - chord identification and naming over twelve pitch classes.

>>> from chuk_mcp_chords import Chord, PitchClass
>>> Chord.from_notes(PitchClass.C, {PitchClass.C, PitchClass.E, PitchClass.G}).name
'C'
>>> Chord.parse("Cmaj9/G").slash
<PitchClass.G: 7>
"""

from chuk_mcp_chords.core import (
    Chord,
    ChordQuality,
    Interval,
    PitchClass,
    add,
    classify,
    intervals_for_quality,
    subtract,
)
from chuk_mcp_chords.errors import (
    InvalidIntervalError,
    InvalidSemitoneIndexError,
    MalformedChordNameError,
    MusicTheoryError,
    UnknownChordQualityError,
    UnknownPitchClassError,
    UnknownQualityLabelError,
    UnrecognizedSlashNoteError,
)

__version__ = "0.1.0"

__all__ = [
    "Chord",
    "ChordQuality",
    "Interval",
    "PitchClass",
    "add",
    "classify",
    "intervals_for_quality",
    "subtract",
    # Errors
    "MusicTheoryError",
    "InvalidIntervalError",
    "InvalidSemitoneIndexError",
    "MalformedChordNameError",
    "UnknownChordQualityError",
    "UnknownPitchClassError",
    "UnknownQualityLabelError",
    "UnrecognizedSlashNoteError",
]
