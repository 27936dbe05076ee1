"""
Error payload shared by the tool modules.
"""

from __future__ import annotations

import json

from chuk_mcp_chords.errors import MusicTheoryError


def theory_error(e: MusicTheoryError, message: str | None = None) -> str:
    """
    JSON error for a rejected musical input.

    Args:
        e: The domain error
        message: Replaces str(e) when the tool has a friendlier wording

    Returns:
        JSON string with status, error_type and message
    """
    return json.dumps(
        {
            "status": "error",
            "error_type": type(e).__name__,
            "message": str(e) if message is None else message,
        }
    )
