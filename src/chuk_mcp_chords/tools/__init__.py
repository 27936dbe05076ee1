"""
MCP tool implementations.

Tools are organized by domain:
- chords - Parse, identify, describe and export chords
- intervals - Pitch class arithmetic and pitch details
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.intervals import register_interval_tools

__all__ = [
    "register_chord_tools",
    "register_interval_tools",
]
