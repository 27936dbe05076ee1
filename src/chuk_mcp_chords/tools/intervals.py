"""
Interval tools - MCP tools for pitch class arithmetic.

Intervals ascend and wrap at the octave: from E up to D is a minor
seventh, from a note to itself is an octave.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import DEFAULT_OCTAVE, ErrorMessages
from chuk_mcp_chords.core import Interval, PitchClass, add, subtract
from chuk_mcp_chords.errors import InvalidIntervalError, MusicTheoryError
from chuk_mcp_chords.models import IntervalInfo, PitchInfo
from chuk_mcp_chords.tools.responses import theory_error

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval and pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_interval_between(lower: str, upper: str) -> str:
        """
        Get the ascending interval from one pitch class to another.

        Args:
            lower: Starting pitch class (e.g., 'D')
            upper: Target pitch class (e.g., 'E')

        Returns:
            JSON string with the interval's names and size

        Example:
            music_interval_between(lower="D", upper="E")
        """
        try:
            interval = subtract(PitchClass.parse(upper), PitchClass.parse(lower))
            return json.dumps(
                {
                    "status": "success",
                    "interval": IntervalInfo.from_interval(interval).model_dump(),
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to compute interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_interval_between"] = music_interval_between

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_pitch(pitch: str, interval: str) -> str:
        """
        Ascend from a pitch class by an interval.

        Args:
            pitch: Starting pitch class (e.g., 'A')
            interval: Short name ('m3', 'P5', 'TT') or semitones ('3')

        Returns:
            JSON string with the resulting pitch class

        Example:
            music_transpose_pitch(pitch="A", interval="m3")
        """
        try:
            try:
                step = Interval.parse(interval)
            except InvalidIntervalError as e:
                return theory_error(e, ErrorMessages.INVALID_INTERVAL.format(interval=interval))
            result = add(PitchClass.parse(pitch), step)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": result.spell(),
                    "interval": IntervalInfo.from_interval(step).model_dump(),
                }
            )
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_pitch"] = music_transpose_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_pitch_info(pitch: str, octave: int = DEFAULT_OCTAVE) -> str:
        """
        Get the semitone index, MIDI note and frequency of a pitch class.

        Frequencies are equal-tempered with A4 = 440 Hz.

        Args:
            pitch: Pitch class (e.g., 'A')
            octave: Octave (default 4); the note must fall in MIDI 0-127

        Returns:
            JSON string with pitch details

        Example:
            music_pitch_info(pitch="A", octave=4)
        """
        try:
            parsed = PitchClass.parse(pitch)
            if not 0 <= parsed.to_midi(octave) <= 127:
                message = ErrorMessages.INVALID_OCTAVE.format(pitch=parsed.spell(), octave=octave)
                return json.dumps({"status": "error", "message": message})
            info = PitchInfo.from_pitch(parsed, octave)
            return json.dumps({"status": "success", "pitch": info.model_dump()})
        except MusicTheoryError as e:
            return theory_error(e)
        except Exception as e:
            logger.exception("Failed to get pitch info")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_pitch_info"] = music_pitch_info

    return tools
