#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def print_quality_table() -> None:
    """Print every chord quality as label, name and intervals."""
    from chuk_mcp_chords.core import QUALITY_TABLE

    for quality in QUALITY_TABLE:
        label = quality.label or "(major)"
        intervals = " ".join(i.short_name for i in quality.intervals)
        print(f"{label:<10} {quality.description:<36} {intervals}")


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Chords MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--list-qualities",
        action="store_true",
        help="Print the chord quality table and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_qualities:
        print_quality_table()
        return

    # Import after argument parsing to avoid issues
    from chuk_mcp_chords.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chords MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chords MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
