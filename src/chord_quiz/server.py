#!/usr/bin/env python3
"""
Command-line entry point for the Chord Quiz MCP Server.

Usage:
    chord-quiz-mcp                          # stdio transport
    chord-quiz-mcp --transport http --port 8000
    chord-quiz-mcp --presets-dir ./my-presets --debug
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PRESETS_DIR_ENV = "CHORD_QUIZ_PRESETS_DIR"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-quiz-mcp",
        description="Chord spelling and engraving MCP server",
    )
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
        help="HTTP port (http transport only)",
    )
    parser.add_argument(
        "--presets-dir",
        default=None,
        help=f"Project preset directory (default: ./presets, or ${PRESETS_DIR_ENV})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log chord construction and layout details",
    )
    return parser


def main() -> None:
    """Parse arguments and run the server on the chosen transport."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.presets_dir:
        os.environ[PRESETS_DIR_ENV] = args.presets_dir

    # The server module reads its configuration at import time
    from chord_quiz.async_server import mcp

    if args.transport == "http":
        logger.info(f"Serving chord quiz over http on port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))
    else:
        logger.info("Serving chord quiz over stdio")
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
