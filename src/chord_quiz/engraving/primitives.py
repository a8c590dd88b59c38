"""
Drawing primitives - the output of the layout builder.

A drawing is an ordered list of primitives (list order is z-order) plus
the viewport enclosing them. Coordinates are in drawing units, with y
growing downward as on screen.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Glyph:
    """A font glyph with its baseline origin at (x, y)."""

    x: float
    y: float
    char: str
    role: str = ""  # clef, accidental, notehead

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: dict[str, Any] = {
            "type": "glyph",
            "x": self.x,
            "y": self.y,
            "codepoint": f"U+{ord(self.char):04X}",
        }
        if self.role:
            d["role"] = self.role
        return d


@dataclass(frozen=True)
class Line:
    """A straight stroke from (x1, y1) to (x2, y2)."""

    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    role: str = ""  # staff, leger, barline

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: dict[str, Any] = {"type": "line", **asdict(self)}
        if not self.role:
            d.pop("role")
        return d


@dataclass(frozen=True)
class Viewport:
    """The rectangle enclosing a drawing."""

    x: float
    y: float
    width: float
    height: float

    @property
    def view_box(self) -> str:
        """SVG viewBox attribute value."""
        return " ".join(format_coord(v) for v in (self.x, self.y, self.width, self.height))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)


DrawingPrimitive = Glyph | Line


def format_coord(value: float) -> str:
    """Format a coordinate compactly (4.0 -> '4', 0.52 -> '0.52')."""
    return f"{value:.3f}".rstrip("0").rstrip(".")
