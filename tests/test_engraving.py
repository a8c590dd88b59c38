"""
Tests for the score layout builder and its output.

Tests cover staff geometry, accidental columns, leger lines, the
builder cursor, finalization and SVG rendering.
"""

from xml.etree import ElementTree

import pytest

from chord_quiz.constants import SmuflGlyph
from chord_quiz.core import Accidental, AccidentalPlacement, Clef
from chord_quiz.engraving import (
    Glyph,
    Line,
    ScoreBuilder,
    Viewport,
    align_accidentals,
    leger_positions,
    render_svg,
    staff_y,
)


SVG_NS = "{http://www.w3.org/2000/svg}"


def flat(position: int) -> AccidentalPlacement:
    return AccidentalPlacement(Accidental.FLAT, position)


class TestStaffGeometry:
    """Tests for staff position to y-coordinate mapping."""

    def test_lines(self) -> None:
        """The top line is y = 0 and the bottom line y = 16."""
        assert staff_y(8) == 0.0
        assert staff_y(0) == 16.0

    def test_spaces_and_legers(self) -> None:
        assert staff_y(1) == 14.0
        assert staff_y(-2) == 20.0
        assert staff_y(10) == -4.0


class TestLegerLines:
    """Tests for leger line positions."""

    def test_none_inside_staff(self) -> None:
        assert leger_positions([0, 4, 8]) == []
        assert leger_positions([-1, 9]) == []

    def test_below_and_above(self) -> None:
        """Notes on both sides of the staff get leger lines on each side."""
        assert leger_positions([-4, 0, 12]) == [-4, -2, 10, 12]

    def test_note_in_space_below(self) -> None:
        """A note in a space rounds toward the staff."""
        assert leger_positions([-3]) == [-2]
        assert leger_positions([-5]) == [-4, -2]

    def test_note_in_space_above(self) -> None:
        assert leger_positions([11]) == [10]
        assert leger_positions([13]) == [10, 12]

    def test_empty(self) -> None:
        assert leger_positions([]) == []


class TestAccidentalColumns:
    """Tests for accidental stacking."""

    def test_close_accidentals_stack_left(self) -> None:
        """Accidentals closer than a seventh move one staff space left each."""
        assert align_accidentals([flat(5), flat(3)]) == [0.0, -4.0]
        assert align_accidentals([flat(7), flat(4), flat(2)]) == [0.0, -4.0, -8.0]

    def test_wide_gap_starts_new_column(self) -> None:
        """An accidental six positions below the column top starts over."""
        assert align_accidentals([flat(6), flat(0)]) == [0.0, 0.0]
        assert align_accidentals([flat(8), flat(6), flat(2)]) == [0.0, -4.0, 0.0]

    def test_gap_of_five_stays_in_column(self) -> None:
        assert align_accidentals([flat(7), flat(2)]) == [0.0, -4.0]

    def test_empty(self) -> None:
        assert align_accidentals([]) == []


class TestScoreBuilder:
    """Tests for ScoreBuilder."""

    def test_space_advances_cursor(self) -> None:
        builder = ScoreBuilder()
        assert builder.space(0.5) is builder
        assert builder.cursor == 2.0
        builder.space(6)
        assert builder.cursor == 26.0

    def test_negative_space(self) -> None:
        with pytest.raises(ValueError):
            ScoreBuilder().space(-1)

    def test_clef(self) -> None:
        """Clef glyphs sit on the line they name."""
        builder = ScoreBuilder().space(0.5)
        builder.clef(Clef.G).clef(Clef.C).clef(Clef.F)
        assert builder.primitives == [
            Glyph(2.0, 12.0, SmuflGlyph.G_CLEF.value, "clef"),
            Glyph(2.0, 8.0, SmuflGlyph.C_CLEF.value, "clef"),
            Glyph(2.0, 4.0, SmuflGlyph.F_CLEF.value, "clef"),
        ]

    def test_clef_does_not_advance(self) -> None:
        builder = ScoreBuilder().clef(Clef.G)
        assert builder.cursor == 0.0

    def test_accidentals_highest_first(self) -> None:
        """Accidentals are drawn from the highest position down."""
        builder = ScoreBuilder().space(1)
        builder.accidentals([flat(3), AccidentalPlacement(Accidental.SHARP, 5)])
        assert builder.primitives == [
            Glyph(4.0, 6.0, SmuflGlyph.ACCIDENTAL_SHARP.value, "accidental"),
            Glyph(0.0, 10.0, SmuflGlyph.ACCIDENTAL_FLAT.value, "accidental"),
        ]

    def test_chord_noteheads(self) -> None:
        builder = ScoreBuilder().space(2)
        builder.chord([0, 2, 4])
        assert builder.primitives == [
            Glyph(8.0, y, SmuflGlyph.NOTEHEAD_WHOLE.value, "notehead") for y in (16.0, 12.0, 8.0)
        ]

    def test_chord_leger_lines(self) -> None:
        """Leger lines start a little left of the notes."""
        builder = ScoreBuilder().space(2)
        builder.chord([-4, -2, 0])
        legers = [p for p in builder.primitives if isinstance(p, Line)]
        assert [line.y1 for line in legers] == [24.0, 20.0]
        for line in legers:
            assert line.is_horizontal
            assert line.role == "leger"
            assert line.x1 == pytest.approx(7.0)
            assert line.x2 - line.x1 == pytest.approx(8.752)

    def test_legers_drawn_before_noteheads(self) -> None:
        builder = ScoreBuilder().chord([12])
        assert [p.role for p in builder.primitives] == ["leger", "leger", "notehead"]

    def test_barline(self) -> None:
        """A double barline spans the staff and moves the cursor past it."""
        builder = ScoreBuilder().space(1).barline()
        lines = builder.primitives
        assert len(lines) == 2
        assert all(isinstance(x, Line) and x.is_vertical for x in lines)
        assert [x.x1 for x in lines] == [pytest.approx(4.0), pytest.approx(5.6)]
        assert all(x.y1 == 0.0 and x.y2 == 16.0 for x in lines)
        assert builder.cursor == pytest.approx(4.0 + 1.6 + 0.32)

    def test_cursor_never_decreases(self) -> None:
        builder = ScoreBuilder()
        seen = [builder.cursor]
        builder.space(0.5)
        seen.append(builder.cursor)
        builder.clef(Clef.F)
        seen.append(builder.cursor)
        builder.accidentals([flat(3), flat(1)])
        seen.append(builder.cursor)
        builder.chord([1, 3])
        seen.append(builder.cursor)
        builder.barline()
        seen.append(builder.cursor)
        assert seen == sorted(seen)

    def test_finalize(self) -> None:
        """Finalizing prepends five staff lines and computes the viewport."""
        builder = ScoreBuilder().space(0.5).clef(Clef.G).space(6).barline()
        cursor = builder.cursor
        primitives, viewport = builder.finalize()

        staff = primitives[:5]
        assert [line.y1 for line in staff] == [0.0, 4.0, 8.0, 12.0, 16.0]
        assert all(line.x1 == 0.0 and line.x2 == cursor for line in staff)
        assert all(line.role == "staff" for line in staff)
        assert primitives[5].role == "clef"
        assert viewport == Viewport(-8.0, -16.0, cursor + 16.0, 48.0)

    def test_finalized_builder_refuses_calls(self) -> None:
        builder = ScoreBuilder()
        builder.finalize()
        with pytest.raises(RuntimeError):
            builder.space(1)
        with pytest.raises(RuntimeError):
            builder.chord([0])
        with pytest.raises(RuntimeError):
            builder.finalize()

    def test_for_chord_layout(self) -> None:
        """The standard chord layout for F diminished in the treble clef."""
        builder = ScoreBuilder.for_chord(Clef.G, [flat(3), flat(5)], [1, 3, 5])
        assert builder.cursor == pytest.approx(57.92)
        roles = [p.role for p in builder.primitives]
        assert roles == [
            "clef",
            "accidental",
            "accidental",
            "notehead",
            "notehead",
            "notehead",
            "barline",
            "barline",
        ]
        accidentals = [p for p in builder.primitives if p.role == "accidental"]
        assert [p.x for p in accidentals] == [26.0, 22.0]
        noteheads = [p for p in builder.primitives if p.role == "notehead"]
        assert all(p.x == 32.0 for p in noteheads)


class TestPrimitives:
    """Tests for drawing primitive serialization."""

    def test_glyph_to_dict(self) -> None:
        glyph = Glyph(2.0, 12.0, SmuflGlyph.G_CLEF.value, "clef")
        assert glyph.to_dict() == {
            "type": "glyph",
            "x": 2.0,
            "y": 12.0,
            "codepoint": "U+E050",
            "role": "clef",
        }

    def test_line_to_dict(self) -> None:
        line = Line(0.0, 4.0, 10.0, 4.0, 0.52)
        assert line.to_dict() == {
            "type": "line",
            "x1": 0.0,
            "y1": 4.0,
            "x2": 10.0,
            "y2": 4.0,
            "thickness": 0.52,
        }

    def test_view_box(self) -> None:
        assert Viewport(-8.0, -16.0, 73.92, 48.0).view_box == "-8 -16 73.92 48"


class TestSvg:
    """Tests for SVG rendering."""

    def test_document(self) -> None:
        primitives, viewport = ScoreBuilder.for_chord(Clef.G, [flat(3)], [1, 3]).finalize()
        svg = render_svg(primitives, viewport)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")

        root = ElementTree.fromstring(svg)
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("viewBox") == viewport.view_box
        assert root.get("class") == "score bravura"
        assert len(root.findall(f"{SVG_NS}line")) == 7  # 5 staff lines and 2 barlines
        assert len(root.findall(f"{SVG_NS}text")) == 4

    def test_paint_order(self) -> None:
        """Elements appear in primitive order."""
        primitives, viewport = ScoreBuilder.for_chord(Clef.G, [], [0]).finalize()
        root = ElementTree.fromstring(render_svg(primitives, viewport))
        tags = [child.tag.removeprefix(SVG_NS) for child in root if child.tag != f"{SVG_NS}defs"]
        assert tags == ["line"] * 5 + ["text", "text"] + ["line"] * 2

    def test_glyph_element(self) -> None:
        svg = render_svg([Glyph(2.0, 12.0, SmuflGlyph.G_CLEF.value)], Viewport(0, 0, 10, 10))
        text = ElementTree.fromstring(svg).find(f"{SVG_NS}text")
        assert text.get("x") == "2"
        assert text.get("y") == "12"
        assert text.text == SmuflGlyph.G_CLEF.value

    def test_line_element(self) -> None:
        svg = render_svg([Line(0.0, 4.0, 10.5, 4.0, 0.52)], Viewport(0, 0, 10, 10))
        line = ElementTree.fromstring(svg).find(f"{SVG_NS}line")
        assert (line.get("x1"), line.get("y1")) == ("0", "4")
        assert (line.get("x2"), line.get("y2")) == ("10.5", "4")
        assert line.get("stroke") == "black"
        assert line.get("stroke-width") == "0.52"

    def test_text_is_escaped(self) -> None:
        """Markup characters in glyph text cannot break the document."""
        svg = render_svg([Glyph(0.0, 0.0, "<&>")], Viewport(0, 0, 10, 10))
        assert "<&>" not in svg
        assert ElementTree.fromstring(svg).find(f"{SVG_NS}text").text == "<&>"

    def test_into_svg(self) -> None:
        svg = ScoreBuilder().space(1).clef(Clef.F).into_svg()
        assert SmuflGlyph.F_CLEF.value in svg

    def test_unknown_primitive(self) -> None:
        with pytest.raises(TypeError):
            render_svg(["not a primitive"], Viewport(0, 0, 1, 1))  # type: ignore[list-item]
