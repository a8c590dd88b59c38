"""SVG output for drawing primitives, built with svgwrite."""

from __future__ import annotations

from collections.abc import Sequence

import svgwrite

from .primitives import DrawingPrimitive, Glyph, Line, Viewport, format_coord


def render_svg(primitives: Sequence[DrawingPrimitive], viewport: Viewport) -> str:
    """
    Render primitives into a standalone SVG document.

    Glyphs become <text> elements and are meant to be shown with the
    Bravura font (class "bravura"); lines become stroked <line> elements.
    Primitives are added in order, so list order is paint order.
    """
    dwg = svgwrite.Drawing(viewBox=viewport.view_box, class_="score bravura")
    for primitive in primitives:
        dwg.add(_element(dwg, primitive))
    return dwg.tostring()


def _element(dwg: svgwrite.Drawing, primitive: DrawingPrimitive):
    if isinstance(primitive, Glyph):
        return dwg.text(
            primitive.char,
            insert=(format_coord(primitive.x), format_coord(primitive.y)),
        )
    if isinstance(primitive, Line):
        return dwg.line(
            start=(format_coord(primitive.x1), format_coord(primitive.y1)),
            end=(format_coord(primitive.x2), format_coord(primitive.y2)),
            stroke="black",
            stroke_width=format_coord(primitive.thickness),
        )
    raise TypeError(f"Unknown drawing primitive: {primitive!r}")
