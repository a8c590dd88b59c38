"""
Chord Quiz - spell chords correctly and engrave them on a staff.

Public API:
    build_chord(root, quality) -> Chord | None
    Chord.display_name()
    Chord.drawing_commands(clef_override) -> (primitives, viewport)
    Quality.flattest_root(allow_double_accidental)
    Quality.sharpest_root(allow_double_accidental)
"""

from chord_quiz.core import (
    Accidental,
    AccidentalPlacement,
    Chord,
    Clef,
    Interval,
    PitchOctave,
    Quality,
    Step,
    Tpc,
    build_chord,
)
from chord_quiz.engraving import ScoreBuilder, Viewport, render_svg

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "AccidentalPlacement",
    "Chord",
    "Clef",
    "Interval",
    "PitchOctave",
    "Quality",
    "ScoreBuilder",
    "Step",
    "Tpc",
    "Viewport",
    "build_chord",
    "render_svg",
]
