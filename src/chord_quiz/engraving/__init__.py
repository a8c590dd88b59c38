"""
Engraving - lays spelled chords out as vector drawings.

The pipeline:
    Chord → staff positions + accidental placements
    → ScoreBuilder (cursor-driven layout)
    → drawing primitives + viewport
    → SVG
"""

from chord_quiz.engraving.builder import (
    ScoreBuilder,
    align_accidentals,
    leger_positions,
    staff_y,
)
from chord_quiz.engraving.primitives import DrawingPrimitive, Glyph, Line, Viewport
from chord_quiz.engraving.svg import render_svg

__all__ = [
    # Builder
    "ScoreBuilder",
    "align_accidentals",
    "leger_positions",
    "staff_y",
    # Primitives
    "DrawingPrimitive",
    "Glyph",
    "Line",
    "Viewport",
    # Output
    "render_svg",
]
