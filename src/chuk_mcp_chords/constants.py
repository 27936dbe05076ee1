"""
Constants for the chord engine.

No magic strings - tuning defaults and user-facing messages live here.
"""

# Register and tuning (12-TET, A4 = 440 Hz)
DEFAULT_OCTAVE = 4
REFERENCE_MIDI_NOTE = 69  # A4
REFERENCE_FREQUENCY = 440.0

SEMITONES_PER_OCTAVE = 12

# Chord name grammar
SLASH_SEPARATOR = "/"
FLAT_MARKER = "b"
ROOT_LETTERS = "ABCDEFG"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH_LIST = "Expected a non-empty list of pitch classes."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Use a short name like 'M3' or 1-12."
    INVALID_OCTAVE = "Invalid octave: {pitch}{octave} is outside the MIDI range 0-127."


class SuccessMessages:
    """Standardized success messages."""

    CHORD_PARSED = "Parsed chord '{name}'."
    CHORD_IDENTIFIED = "Identified chord '{name}'."
    CHORD_TRANSPOSED = "Transposed '{source}' to '{name}'."
    CHORD_FITS = "All notes of '{name}' are in the given pitch set."
    CHORD_DOES_NOT_FIT = "'{name}' has notes outside the given pitch set: {missing}."
