"""
Core music primitives - spelling and staff mapping.

These are the invariants everything else composes on:
- Step: The 7 diatonic letters
- Accidental: Double-flat through double-sharp
- Tpc: A spelled pitch on the line of fifths
- Interval: A line-of-fifths displacement
- PitchOctave: A spelled pitch in an octave
- Quality: Interval tables defining chord types
- Chord: A spelled chord with root and quality
- Clef: Anchors staff positions to pitches
"""

from chord_quiz.core.chord import AccidentalPlacement, Chord, Quality, build_chord
from chord_quiz.core.clef import Clef, StaffPosition
from chord_quiz.core.pitch import Accidental, Interval, PitchOctave, Step, Tpc

__all__ = [
    # Pitch
    "Step",
    "Accidental",
    "Tpc",
    "Interval",
    "PitchOctave",
    # Clef
    "Clef",
    "StaffPosition",
    # Chord
    "Quality",
    "AccidentalPlacement",
    "Chord",
    "build_chord",
]
