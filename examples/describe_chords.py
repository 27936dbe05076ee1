#!/usr/bin/env python3
"""
Example: Identify, name and describe chords.

This walks both directions of the chord engine - notes to names and
names back to notes - and shows how failures are reported.

Usage:
    python examples/describe_chords.py
"""

from chuk_mcp_chords import Chord, MusicTheoryError, PitchClass

P = PitchClass


def main() -> None:
    """Run the examples."""
    # Example 1: Notes -> name
    print("Identifying chords from notes...")
    for root, notes, slash in [
        (P.C, {P.C, P.E, P.G, P.B}, None),
        (P.F, {P.F, P.G, P.C}, P.Bb),
        (P.A, {P.A, P.C, P.E, P.G}, P.G),
    ]:
        chord = Chord.from_notes(root, notes, slash)
        print(f"  {chord.name}")

    # Example 2: Name -> notes
    print("\nParsing chord names...")
    for name in ["Cmaj9/G", "Ebm7", "Bb13", "Dbdim7"]:
        chord = Chord.parse(name)
        notes = ", ".join(note.spell() for note in chord.color_notes)
        print(f"  {chord.name:<10} root {chord.root.spell():<3} notes {notes}")
        print(f"    {chord.description}")

    # Example 3: Failures
    print("\nRejected input...")
    for name in ["Xyz", "Cfoo", "C/H", "C#m"]:
        try:
            Chord.parse(name)
        except MusicTheoryError as e:
            print(f"  {name:<6} {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
