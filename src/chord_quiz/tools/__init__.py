"""
MCP tool implementations.

Tools are organized by domain:
- chords - Spelling, engraving and root ranges
- quiz - Presets and random quiz chords
"""

from chord_quiz.tools.chords import register_chord_tools
from chord_quiz.tools.quiz import register_quiz_tools

__all__ = [
    "register_chord_tools",
    "register_quiz_tools",
]
