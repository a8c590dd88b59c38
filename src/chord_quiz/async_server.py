#!/usr/bin/env python3
"""
Async Chord Quiz MCP Server using chuk-mcp-server

This server provides MCP tools for spelling chords correctly and engraving
them on a staff. Chord tones are spelled on the line of fifths, so every
note gets its proper letter name and accidental.

The server provides tools for:
- Spelling chords from a root and quality
- Engraving chords as SVG (clef, accidentals, noteheads, leger lines)
- Querying which roots a chord quality can be spelled on
- Drawing random quiz chords from presets
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chord_quiz.presets import PresetLoader
from chord_quiz.tools import register_chord_tools, register_quiz_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

mcp = ChukMCPServer("chord-quiz-mcp")

# Project presets default to ./presets; CHORD_QUIZ_PRESETS_DIR overrides
PRESETS_DIR = Path(os.environ.get("CHORD_QUIZ_PRESETS_DIR", Path.cwd() / "presets"))
LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

preset_loader = PresetLoader(
    library_path=LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
chord_tools = register_chord_tools(mcp)
quiz_tools = register_quiz_tools(mcp, preset_loader)

# Export tool functions for direct access
chord_spell = chord_tools["chord_spell"]
chord_render = chord_tools["chord_render"]
chord_root_range = chord_tools["chord_root_range"]

chord_random = quiz_tools["chord_random"]
chord_list_presets = quiz_tools["chord_list_presets"]
chord_describe_preset = quiz_tools["chord_describe_preset"]
chord_copy_preset_to_project = quiz_tools["chord_copy_preset_to_project"]

logger.info("Chord Quiz MCP Server initialized")
logger.info(f"  Preset library: {LIBRARY_PATH}")
logger.info(f"  Project presets: {PRESETS_DIR}")
