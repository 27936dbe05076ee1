#!/usr/bin/env python3
"""
Async Chord MCP Server using chuk-mcp-server

This server exposes the chord engine as MCP tools:
- Parsing chord names into notes, intervals and voicings
- Identifying chords from a root and a set of notes
- Describing, transposing and exporting chords
- Interval arithmetic between pitch classes
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.core import QUALITY_TABLE
from chuk_mcp_chords.tools import register_chord_tools, register_interval_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Register all tools
chord_tools = register_chord_tools(mcp)
interval_tools = register_interval_tools(mcp)

# Export tool functions for direct access
music_parse_chord = chord_tools["music_parse_chord"]
music_identify_chord = chord_tools["music_identify_chord"]
music_describe_chord = chord_tools["music_describe_chord"]
music_transpose_chord = chord_tools["music_transpose_chord"]
music_chord_fits = chord_tools["music_chord_fits"]
music_list_chord_qualities = chord_tools["music_list_chord_qualities"]
music_export_chord_yaml = chord_tools["music_export_chord_yaml"]

music_interval_between = interval_tools["music_interval_between"]
music_transpose_pitch = interval_tools["music_transpose_pitch"]
music_pitch_info = interval_tools["music_pitch_info"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Chord qualities: {len(QUALITY_TABLE)}")
