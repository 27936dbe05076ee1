"""
Chord tools - MCP tools for parsing, identifying and describing chords.

Domain failures (bad names, unknown qualities) come back as error JSON
with the exception type; anything else is logged and reported.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import DEFAULT_OCTAVE, ErrorMessages, SuccessMessages
from chuk_mcp_chords.core import QUALITY_TABLE, Chord, PitchClass
from chuk_mcp_chords.errors import MusicTheoryError
from chuk_mcp_chords.models import ChordInfo, QualityInfo
from chuk_mcp_chords.tools.responses import theory_error

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_parse_chord(name: str, octave: int = DEFAULT_OCTAVE) -> str:
        """
        Parse a chord name into its notes and intervals.

        Names are Root[b]Quality[/Slash]: the root is A-G with an optional
        flat ('Bb', never 'A#'), the quality is a label from
        music_list_chord_qualities, and the slash is a bass note.

        Args:
            name: Chord name (e.g., 'Cmaj7', 'Ebm9', 'Fsus2/Bb')
            octave: Octave for the MIDI voicing (default 4)

        Returns:
            JSON string with the chord's notes, intervals and voicing

        Example:
            music_parse_chord(name="Cmaj9/G")
        """
        try:
            chord = Chord.parse(name)
            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordInfo.from_chord(chord, octave).model_dump(),
                    "message": SuccessMessages.CHORD_PARSED.format(name=chord.name),
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_parse_chord"] = music_parse_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_identify_chord(
        root: str,
        notes: list[str],
        slash: str | None = None,
    ) -> str:
        """
        Name the chord formed by a set of notes over a root.

        The notes are matched exactly against the quality table - extra or
        missing notes mean no match.

        Args:
            root: Root pitch class (e.g., 'C')
            notes: Pitch classes in the chord (e.g., ['C', 'E', 'G', 'B'])
            slash: Optional bass note for a slash chord

        Returns:
            JSON string with the identified chord

        Example:
            music_identify_chord(root="F", notes=["F", "G", "C"], slash="Bb")
        """
        try:
            chord = Chord.from_notes(
                PitchClass.parse(root),
                [PitchClass.parse(note) for note in notes],
                PitchClass.parse(slash) if slash else None,
            )
            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordInfo.from_chord(chord).model_dump(),
                    "message": SuccessMessages.CHORD_IDENTIFIED.format(name=chord.name),
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to identify chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_identify_chord"] = music_identify_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_chord(name: str) -> str:
        """
        Describe a chord in a sentence.

        Args:
            name: Chord name (e.g., 'Cmaj9/G')

        Returns:
            JSON string with the description

        Example:
            music_describe_chord(name="Am7")
        """
        try:
            chord = Chord.parse(name)
            return json.dumps(
                {
                    "status": "success",
                    "name": chord.name,
                    "description": chord.description,
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to describe chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_chord"] = music_describe_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_chord(name: str, semitones: int) -> str:
        """
        Transpose a chord, keeping its quality.

        Args:
            name: Chord name
            semitones: Semitones to move (negative moves down)

        Returns:
            JSON string with the transposed chord

        Example:
            music_transpose_chord(name="Dm7/G", semitones=2)
        """
        try:
            source = Chord.parse(name)
            chord = source.transpose(semitones)
            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordInfo.from_chord(chord).model_dump(),
                    "message": SuccessMessages.CHORD_TRANSPOSED.format(
                        source=source.name, name=chord.name
                    ),
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to transpose chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_chord"] = music_transpose_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_chord_fits(name: str, pitches: list[str]) -> str:
        """
        Check whether every note of a chord is in a pitch set.

        Pass the notes of a scale to test whether the chord is diatonic.

        Args:
            name: Chord name
            pitches: Pitch classes to test against (e.g., a scale)

        Returns:
            JSON string with fits flag and any notes outside the set

        Example:
            music_chord_fits(name="Dm7", pitches=["C", "D", "E", "F", "G", "A", "B"])
        """
        try:
            if not pitches:
                return json.dumps({"status": "error", "message": ErrorMessages.INVALID_PITCH_LIST})
            chord = Chord.parse(name)
            pitch_set = {PitchClass.parse(p) for p in pitches}
            missing = [note.spell() for note in sorted(chord.notes - pitch_set)]
            fits = chord.is_subset_of(pitch_set)
            if fits:
                message = SuccessMessages.CHORD_FITS.format(name=chord.name)
            else:
                message = SuccessMessages.CHORD_DOES_NOT_FIT.format(
                    name=chord.name, missing=", ".join(missing)
                )
            return json.dumps(
                {
                    "status": "success",
                    "fits": fits,
                    "missing": missing,
                    "message": message,
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to check chord against pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_chord_fits"] = music_chord_fits

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_chord_qualities() -> str:
        """
        List every chord quality the engine can name.

        Returns:
            JSON string with each quality's label, name and intervals

        Example:
            music_list_chord_qualities()
        """
        try:
            qualities = [QualityInfo.from_quality(q).model_dump() for q in QUALITY_TABLE]
            return json.dumps(
                {
                    "status": "success",
                    "qualities": qualities,
                    "count": len(qualities),
                }
            )
        except Exception as e:
            logger.exception("Failed to list chord qualities")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_chord_qualities"] = music_list_chord_qualities

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_chord_yaml(name: str) -> str:
        """
        Export a chord as YAML.

        Args:
            name: Chord name

        Returns:
            JSON string containing the YAML content

        Example:
            music_export_chord_yaml(name="Bbmaj7/D")
        """
        try:
            import yaml

            chord = Chord.parse(name)
            yaml_dict = ChordInfo.from_chord(chord).to_yaml_dict()
            yaml_content = yaml.safe_dump(yaml_dict, default_flow_style=False, sort_keys=False)

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_chord_yaml"] = music_export_chord_yaml

    return tools
