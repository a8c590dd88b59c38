"""
Chord primitives - Quality, AccidentalPlacement, Chord.

Chords are stacks of spelled intervals above a root. Because spelling
happens on the line of fifths, an F diminished triad comes out as
F, Ab, Cb rather than F, G#, B.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .clef import Clef, StaffPosition
from .pitch import Accidental, Interval, PitchOctave, Tpc

if TYPE_CHECKING:
    from chord_quiz.engraving.builder import ScoreBuilder
    from chord_quiz.engraving.primitives import DrawingPrimitive, Viewport

logger = logging.getLogger(__name__)


class Quality(str, Enum):
    """
    Chord qualities.

    Each quality owns a fixed, ordered interval list starting at the root.
    """

    MAJ = "major"
    MIN = "minor"
    DIM = "diminished"
    AUG = "augmented"
    DOM7 = "dominant7"
    MAJ7 = "major7"
    MIN7 = "minor7"
    MIN7B5 = "half-diminished7"
    DIM7 = "diminished7"

    def intervals(self) -> tuple[Interval, ...]:
        """The intervals above the root, root first."""
        return _INTERVALS[self]

    @property
    def suffix(self) -> str:
        """Chord symbol suffix, e.g. 'm7♭5'."""
        return _SUFFIXES[self]

    @property
    def plain_suffix(self) -> str:
        """Chord symbol suffix without music symbols, e.g. 'm7b5'."""
        return _SUFFIXES[self].replace("♭", "b").replace("°", "dim")

    @property
    def is_triad(self) -> bool:
        return len(_INTERVALS[self]) == 3

    def flattest_root(self, allow_double_accidental: bool) -> Tpc:
        """
        The flattest root whose chord stays representable.

        The quality's flattest interval is placed exactly on the boundary
        spelling (Fbb, or Fb without double accidentals).
        """
        lowest, _ = Tpc.bounds(allow_double_accidental)
        flattest = min(self.intervals())
        return Tpc(max(lowest.fifths - flattest.fifths, lowest.fifths))

    def sharpest_root(self, allow_double_accidental: bool) -> Tpc:
        """
        The sharpest root whose chord stays representable.

        The quality's sharpest interval is placed exactly on the boundary
        spelling (Bx, or B# without double accidentals).
        """
        _, highest = Tpc.bounds(allow_double_accidental)
        sharpest = max(self.intervals())
        return Tpc(min(highest.fifths - sharpest.fifths, highest.fifths))

    def root_range(self, allow_double_accidental: bool) -> list[Tpc]:
        """Every valid root from flattest to sharpest."""
        lo = self.flattest_root(allow_double_accidental).fifths
        hi = self.sharpest_root(allow_double_accidental).fifths
        return [Tpc(fifths) for fifths in range(lo, hi + 1)]

    @classmethod
    def parse(cls, name: str) -> Quality:
        """Parse a quality from its value ('minor7'), name ('MIN7') or suffix ('m7')."""
        key = name.strip()
        for member in cls:
            if key.lower() == member.value or key.upper() == member.name:
                return member
        for member in cls:
            if key in (member.suffix, member.plain_suffix):
                return member
        raise ValueError(f"Unknown chord quality: {name}")


_INTERVALS: dict[Quality, tuple[Interval, ...]] = {
    Quality.MAJ: (Interval.UNISON, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH),
    Quality.MIN: (Interval.UNISON, Interval.MINOR_THIRD, Interval.PERFECT_FIFTH),
    Quality.DIM: (Interval.UNISON, Interval.MINOR_THIRD, Interval.DIMINISHED_FIFTH),
    Quality.AUG: (Interval.UNISON, Interval.MAJOR_THIRD, Interval.AUGMENTED_FIFTH),
    Quality.DOM7: (
        Interval.UNISON,
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
    ),
    Quality.MAJ7: (
        Interval.UNISON,
        Interval.MAJOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MAJOR_SEVENTH,
    ),
    Quality.MIN7: (
        Interval.UNISON,
        Interval.MINOR_THIRD,
        Interval.PERFECT_FIFTH,
        Interval.MINOR_SEVENTH,
    ),
    Quality.MIN7B5: (
        Interval.UNISON,
        Interval.MINOR_THIRD,
        Interval.DIMINISHED_FIFTH,
        Interval.MINOR_SEVENTH,
    ),
    Quality.DIM7: (
        Interval.UNISON,
        Interval.MINOR_THIRD,
        Interval.DIMINISHED_FIFTH,
        Interval.DIMINISHED_SEVENTH,
    ),
}

_SUFFIXES: dict[Quality, str] = {
    Quality.MAJ: "",
    Quality.MIN: "m",
    Quality.DIM: "m♭5",
    Quality.AUG: "+",
    Quality.DOM7: "7",
    Quality.MAJ7: "maj7",
    Quality.MIN7: "m7",
    Quality.MIN7B5: "m7♭5",
    Quality.DIM7: "°7",
}


@dataclass(frozen=True)
class AccidentalPlacement:
    """An accidental to print at a staff position."""

    accidental: Accidental
    position: StaffPosition


@dataclass(frozen=True)
class Chord:
    """
    A concrete, spelled chord.

    The pitch tuple has one entry per quality interval, in the same
    order, root first. Build instances with build_chord(); the
    constructor does not check that the pitches match the quality.
    """

    root: PitchOctave
    quality: Quality
    pitches: tuple[PitchOctave, ...]

    def display_name(self, plain: bool = False) -> str:
        """Chord symbol like 'C', 'Cm7♭5' or 'Fm♭5' ('Fmb5' when plain)."""
        if plain:
            return f"{self.root.tpc.spell(plain=True)}{self.quality.plain_suffix}"
        return f"{self.root.tpc.spell()}{self.quality.suffix}"

    def long_name(self) -> str:
        """Spelled-out name like 'F diminished'."""
        return f"{self.root.tpc.spell()} {self.quality.value.replace('7', ' 7')}"

    def clef(self) -> Clef:
        """The clef this chord is displayed in by default."""
        return Clef.for_root(self.root)

    def staff_positions(self, clef: Clef | None = None) -> list[StaffPosition]:
        """
        Staff positions of each pitch, in pitch order.

        Positions below the root's are folded up by octaves so the
        chord always reads upward from its root.
        """
        clef = clef or self.clef()
        bottom = clef.position(self.root)
        positions = []
        for pitch in self.pitches:
            position = clef.position(pitch)
            while position < bottom:
                position += 7
            positions.append(position)
        return positions

    def accidentals(self, clef: Clef | None = None) -> list[AccidentalPlacement]:
        """Accidentals for every pitch that is not a natural letter."""
        placements = []
        for pitch, position in zip(self.pitches, self.staff_positions(clef), strict=True):
            _, accidental = pitch.tpc.decompose()
            if accidental is None:
                logger.debug(f"No accidental for {pitch}")
                continue
            logger.debug(f"Accidental for {pitch}: {accidental.name}")
            placements.append(AccidentalPlacement(accidental, position))
        return placements

    def drawing_commands(
        self, clef_override: Clef | None = None
    ) -> tuple[list[DrawingPrimitive], Viewport]:
        """
        Lay the chord out on a staff.

        Args:
            clef_override: Clef to use instead of the automatic choice

        Returns:
            Drawing primitives in z-order and the enclosing viewport
        """
        return self._layout(clef_override).finalize()

    def to_svg(self, clef_override: Clef | None = None) -> str:
        """Render the chord as a standalone SVG document."""
        return self._layout(clef_override).into_svg()

    def _layout(self, clef_override: Clef | None) -> ScoreBuilder:
        # Imported here: the engraving package depends on core
        from chord_quiz.engraving.builder import ScoreBuilder

        clef = clef_override or self.clef()
        return ScoreBuilder.for_chord(clef, self.accidentals(clef), self.staff_positions(clef))

    def __str__(self) -> str:
        return self.display_name()


def build_chord(
    root: PitchOctave,
    quality: Quality,
    allow_double_accidentals: bool = True,
) -> Chord | None:
    """
    Spell a chord from a root and quality.

    Args:
        root: Root pitch with octave
        quality: Chord quality
        allow_double_accidentals: If False, any pitch needing a double
            accidental makes the chord unrepresentable

    Returns:
        The chord, or None if any pitch cannot be spelled within the
        accidental limit. No partial chords are returned.
    """
    lowest, highest = Tpc.bounds(allow_double_accidentals)
    pitches = []
    for interval in quality.intervals():
        pitch = root.add(interval)
        if pitch is None or not lowest <= pitch.tpc <= highest:
            logger.debug(f"Cannot spell {interval} above {root}")
            return None
        pitches.append(pitch)
    return Chord(root, quality, tuple(pitches))
