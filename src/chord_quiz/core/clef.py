"""
Clef primitives - Clef and staff positions.

A clef anchors staff position 0 (the bottom line) to a specific letter
and octave. Staff positions count diatonic steps upward from that line:
two positions make one staff space.
"""

from __future__ import annotations

from enum import Enum

from chord_quiz.constants import STAFF_SPACE, SmuflGlyph

from .pitch import PitchOctave, Step

# Diatonic offset from the bottom staff line
StaffPosition = int

# Bottom staff line per clef (module level to avoid Enum member issues)
_BOTTOM_LINES: dict[str, tuple[Step, int]] = {
    "G": (Step.E, 4),
    "C": (Step.F, 3),
    "F": (Step.G, 2),
}

_GLYPHS: dict[str, SmuflGlyph] = {
    "G": SmuflGlyph.G_CLEF,
    "C": SmuflGlyph.C_CLEF,
    "F": SmuflGlyph.F_CLEF,
}

# Glyph baselines sit on the line each clef names: G on line 2, C on 3, F on 4
_GLYPH_Y: dict[str, float] = {
    "G": STAFF_SPACE * 3,
    "C": STAFF_SPACE * 2,
    "F": STAFF_SPACE,
}


class Clef(str, Enum):
    """
    The three clefs.

    G (treble): bottom line E4
    C (alto):   bottom line F3
    F (bass):   bottom line G2
    """

    G = "G"
    C = "C"
    F = "F"

    @property
    def bottom_line(self) -> tuple[Step, int]:
        """Letter and octave of the bottom staff line."""
        return _BOTTOM_LINES[self.value]

    @property
    def glyph(self) -> SmuflGlyph:
        return _GLYPHS[self.value]

    @property
    def glyph_y(self) -> float:
        """Vertical placement of the clef glyph."""
        return _GLYPH_Y[self.value]

    def position(self, pitch: PitchOctave) -> StaffPosition:
        """
        Map a pitch to its staff position under this clef.

        Accidentals do not move a note on the staff: only the letter and
        octave count.
        """
        step, octave = self.bottom_line
        return pitch.diatonic_index() - (octave * 7 + step.value)

    @classmethod
    def for_root(cls, root: PitchOctave) -> Clef:
        """
        Choose the clef for a chord root.

        Roots from F3 upward read in the treble clef, lower roots in the bass.
        """
        if root.octave >= 4 or (root.octave >= 3 and root.step > Step.E):
            return cls.G
        return cls.F

    @classmethod
    def parse(cls, name: str) -> Clef:
        """Parse a clef from 'G', 'treble', 'C', 'alto', 'F' or 'bass'."""
        aliases = {"TREBLE": "G", "ALTO": "C", "BASS": "F"}
        key = name.strip().upper()
        key = aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown clef: {name}") from None
