"""
Score layout builder - engraves a single chord on a five-line staff.

The builder walks a horizontal cursor from left to right. Each call
appends primitives at the cursor and some calls advance it:

    ScoreBuilder()
        .space(0.5)
        .clef(Clef.G)
        .space(6)
        .accidentals(placements)
        .space(1.5)
        .chord(positions)
        .space(6)
        .barline()
        .finalize()

A builder is single-use: once finalized it refuses further calls.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chord_quiz.constants import (
    ACCIDENTAL_COLUMN_GAP,
    ACCIDENTAL_GAP,
    BARLINE_SEPARATION,
    CHORD_WIDTH,
    CLEF_MARGIN,
    CLEF_WIDTH,
    HIGHEST_LEGER_POSITION,
    LEGER_LINE_LENGTH,
    LEGER_LINE_OFFSET,
    LEGER_LINE_THICKNESS,
    LOWEST_LEGER_POSITION,
    STAFF_HEIGHT,
    STAFF_LINE_COUNT,
    STAFF_LINE_THICKNESS,
    STAFF_SPACE,
    THIN_BARLINE_THICKNESS,
    SmuflGlyph,
)
from chord_quiz.core.chord import AccidentalPlacement
from chord_quiz.core.clef import Clef, StaffPosition
from chord_quiz.core.pitch import Accidental

from .primitives import DrawingPrimitive, Glyph, Line, Viewport
from .svg import render_svg

logger = logging.getLogger(__name__)

_ACCIDENTAL_GLYPHS: dict[Accidental, SmuflGlyph] = {
    Accidental.DOUBLE_FLAT: SmuflGlyph.ACCIDENTAL_DOUBLE_FLAT,
    Accidental.FLAT: SmuflGlyph.ACCIDENTAL_FLAT,
    Accidental.NATURAL: SmuflGlyph.ACCIDENTAL_NATURAL,
    Accidental.SHARP: SmuflGlyph.ACCIDENTAL_SHARP,
    Accidental.DOUBLE_SHARP: SmuflGlyph.ACCIDENTAL_DOUBLE_SHARP,
}


def staff_y(position: StaffPosition) -> float:
    """Convert a staff position to a y-coordinate (the top line is y = 0)."""
    return (4 - position / 2) * STAFF_SPACE


def align_accidentals(placements: Sequence[AccidentalPlacement]) -> list[float]:
    """
    Horizontal offsets for accidentals sorted from highest to lowest.

    Accidentals stack leftward, one staff space per item, in columns.
    An accidental at least a seventh below the top of the current
    column can share the column's leftmost slot again, so a new column
    starts there.
    """
    if not placements:
        return []
    indents: list[float] = []
    top = placements[0].position
    indent = 0.0
    for placement in placements:
        if top - placement.position >= ACCIDENTAL_COLUMN_GAP:
            top = placement.position
            indent = 0.0
        indents.append(indent)
        indent -= STAFF_SPACE
    return indents


def leger_positions(positions: Sequence[StaffPosition]) -> list[StaffPosition]:
    """
    Staff-line positions outside the staff that need leger lines.

    Below the staff: every even position from the lowest note's line
    (or the line just above it, for a note in a space) up to -2.
    Above the staff: every even position from 10 up to the highest note.
    """
    if not positions:
        return []
    bottom = min(positions)
    top = max(positions)
    lowest = bottom + bottom % 2
    below = range(lowest, LOWEST_LEGER_POSITION + 1, 2)
    above = range(HIGHEST_LEGER_POSITION, top + 1, 2)
    return [*below, *above]


class ScoreBuilder:
    """
    Accumulates drawing primitives for one staff.

    The cursor is in drawing units and never moves left.
    """

    def __init__(self) -> None:
        self.cursor: float = 0.0
        self._primitives: list[DrawingPrimitive] = []
        self._finalized = False

    @classmethod
    def for_chord(
        cls,
        clef: Clef,
        accidentals: Sequence[AccidentalPlacement],
        positions: Sequence[StaffPosition],
    ) -> ScoreBuilder:
        """A builder holding the standard chord layout, ready to finalize."""
        return (
            cls()
            .space(CLEF_MARGIN)
            .clef(clef)
            .space(CLEF_WIDTH)
            .accidentals(accidentals)
            .space(ACCIDENTAL_GAP)
            .chord(positions)
            .space(CHORD_WIDTH)
            .barline()
        )

    @property
    def primitives(self) -> list[DrawingPrimitive]:
        """Primitives added so far (without the staff lines)."""
        return list(self._primitives)

    def space(self, amount: float) -> ScoreBuilder:
        """Advance the cursor by a number of staff spaces."""
        self._check_open()
        if amount < 0:
            raise ValueError(f"Spacing must be >= 0, got {amount}")
        self.cursor += amount * STAFF_SPACE
        return self

    def clef(self, clef: Clef) -> ScoreBuilder:
        """Draw a clef at the cursor."""
        self._check_open()
        self._primitives.append(Glyph(self.cursor, clef.glyph_y, clef.glyph.value, "clef"))
        return self

    def accidentals(self, placements: Sequence[AccidentalPlacement]) -> ScoreBuilder:
        """
        Draw accidentals, highest first, stacked leftward from the cursor.

        See align_accidentals() for the column rule.
        """
        self._check_open()
        logger.debug(f"Adding accidentals {placements}")
        ordered = sorted(placements, key=lambda p: -p.position)
        for placement, indent in zip(ordered, align_accidentals(ordered), strict=True):
            glyph = _ACCIDENTAL_GLYPHS[placement.accidental]
            self._primitives.append(
                Glyph(self.cursor + indent, staff_y(placement.position), glyph.value, "accidental")
            )
        return self

    def chord(self, positions: Sequence[StaffPosition]) -> ScoreBuilder:
        """Draw whole-note heads at the cursor, with any leger lines they need."""
        self._check_open()
        for leger in leger_positions(positions):
            y = staff_y(leger)
            x = self.cursor - LEGER_LINE_OFFSET
            self._primitives.append(
                Line(x, y, x + LEGER_LINE_LENGTH, y, LEGER_LINE_THICKNESS, "leger")
            )
        for position in positions:
            self._primitives.append(
                Glyph(self.cursor, staff_y(position), SmuflGlyph.NOTEHEAD_WHOLE.value, "notehead")
            )
        return self

    def barline(self) -> ScoreBuilder:
        """Draw a double barline and move past it."""
        self._check_open()
        for x in (self.cursor, self.cursor + BARLINE_SEPARATION):
            self._primitives.append(
                Line(x, 0.0, x, STAFF_HEIGHT, THIN_BARLINE_THICKNESS, "barline")
            )
        self.cursor += BARLINE_SEPARATION + 0.5 * THIN_BARLINE_THICKNESS
        return self

    def finalize(self) -> tuple[list[DrawingPrimitive], Viewport]:
        """
        Close the drawing.

        Returns:
            The staff lines followed by every added primitive, in order,
            and the viewport enclosing them with margins for leger lines
        """
        self._check_open()
        self._finalized = True
        viewport = Viewport(
            x=-2 * STAFF_SPACE,
            y=-4 * STAFF_SPACE,
            width=self.cursor + 4 * STAFF_SPACE,
            height=12 * STAFF_SPACE,
        )
        staff: list[DrawingPrimitive] = [
            Line(0.0, i * STAFF_SPACE, self.cursor, i * STAFF_SPACE, STAFF_LINE_THICKNESS, "staff")
            for i in range(STAFF_LINE_COUNT)
        ]
        return staff + self._primitives, viewport

    def into_svg(self) -> str:
        """Finalize and render as an SVG document."""
        primitives, viewport = self.finalize()
        return render_svg(primitives, viewport)

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("ScoreBuilder has already been finalized")
