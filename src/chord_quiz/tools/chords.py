"""
Chord tools - MCP tools for spelling and engraving chords.

Tools for spelling a chord from a root and quality, rendering it on a
staff, and querying the roots a quality can be built on.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chord_quiz.constants import ErrorMessages, SuccessMessages
from chord_quiz.core import Chord, Clef, PitchOctave, Quality, build_chord
from chord_quiz.engraving import render_svg

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def parse_quality(quality: str) -> Quality:
    """Parse a quality, raising the standard error message on failure."""
    try:
        return Quality.parse(quality)
    except ValueError:
        choices = ", ".join(q.value for q in Quality)
        raise ValueError(
            ErrorMessages.INVALID_QUALITY.format(quality=quality, choices=choices)
        ) from None


def parse_root(root: str) -> PitchOctave:
    """Parse a root pitch, raising the standard error message on failure."""
    try:
        return PitchOctave.parse(root)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=root)) from None


def parse_clef(clef: str | None) -> Clef | None:
    """Parse an optional clef, raising the standard error message on failure."""
    if not clef:
        return None
    try:
        return Clef.parse(clef)
    except ValueError:
        raise ValueError(ErrorMessages.INVALID_CLEF.format(clef=clef)) from None


def chord_payload(chord: Chord, clef: Clef | None = None) -> dict[str, Any]:
    """Summarize a chord for JSON output."""
    clef = clef or chord.clef()
    return {
        "name": chord.display_name(),
        "long_name": chord.long_name(),
        "root": chord.root.spell(),
        "quality": chord.quality.value,
        "pitches": [p.spell() for p in chord.pitches],
        "midi": [p.to_midi() for p in chord.pitches],
        "clef": clef.value,
        "staff_positions": chord.staff_positions(clef),
        "accidentals": [
            {"accidental": a.accidental.name.lower(), "position": a.position}
            for a in chord.accidentals(clef)
        ],
    }


def register_chord_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord spelling and rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_spell(
        root: str,
        quality: str,
        allow_double_accidentals: bool = True,
    ) -> str:
        """
        Spell a chord from a root and quality.

        Every chord tone gets its correct letter name, so F diminished
        is F, Ab, Cb - never F, G#, B.

        Args:
            root: Root pitch with optional octave (e.g., 'F', 'Eb4', 'C#3')
            quality: Chord quality (e.g., 'major', 'minor7', 'm7b5', 'dim7')
            allow_double_accidentals: Allow double sharps and flats in the result

        Returns:
            JSON string with the spelled pitches, staff positions and accidentals

        Example:
            chord_spell(root="F4", quality="diminished")
        """
        try:
            root_pitch = parse_root(root)
            chord_quality = parse_quality(quality)
            chord = build_chord(root_pitch, chord_quality, allow_double_accidentals)
            if chord is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNREPRESENTABLE_CHORD.format(
                            root=root, quality=chord_quality.value
                        ),
                    }
                )

            message = SuccessMessages.CHORD_SPELLED.format(
                name=chord.display_name(), count=len(chord.pitches)
            )
            return json.dumps(
                {"status": "success", "chord": chord_payload(chord), "message": message},
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to spell chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_spell"] = chord_spell

    @mcp.tool  # type: ignore[arg-type]
    async def chord_render(
        root: str,
        quality: str,
        clef: str | None = None,
        include_primitives: bool = False,
    ) -> str:
        """
        Engrave a chord on a five-line staff as SVG.

        The SVG uses SMuFL code points and should be displayed with the
        Bravura font.

        Args:
            root: Root pitch with optional octave (e.g., 'Bb3')
            quality: Chord quality (e.g., 'dominant7')
            clef: Optional clef ('G', 'C', 'F'); chosen from the root if omitted
            include_primitives: Also return the raw drawing primitives

        Returns:
            JSON string with the SVG document and viewport

        Example:
            chord_render(root="Bb3", quality="dominant7", clef="F")
        """
        try:
            root_pitch = parse_root(root)
            chord_quality = parse_quality(quality)
            clef_override = parse_clef(clef)
            chord = build_chord(root_pitch, chord_quality)
            if chord is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNREPRESENTABLE_CHORD.format(
                            root=root, quality=chord_quality.value
                        ),
                    }
                )

            primitives, viewport = chord.drawing_commands(clef_override)
            result: dict[str, Any] = {
                "status": "success",
                "chord": chord_payload(chord, clef_override),
                "svg": render_svg(primitives, viewport),
                "viewport": viewport.to_dict(),
                "message": SuccessMessages.CHORD_RENDERED.format(
                    name=chord.display_name(), clef=(clef_override or chord.clef()).value
                ),
            }
            if include_primitives:
                result["primitives"] = [p.to_dict() for p in primitives]
            return json.dumps(result, ensure_ascii=False)
        except Exception as e:
            logger.exception("Failed to render chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_render"] = chord_render

    @mcp.tool  # type: ignore[arg-type]
    async def chord_root_range(quality: str, allow_double_accidentals: bool = False) -> str:
        """
        Get the roots a chord quality can be spelled on.

        Roots outside this range would push a chord tone past the
        accidental limit (double accidentals, or single ones when
        doubles are not allowed).

        Args:
            quality: Chord quality (e.g., 'augmented')
            allow_double_accidentals: Whether double sharps and flats are allowed

        Returns:
            JSON string with the flattest and sharpest roots and every root between

        Example:
            chord_root_range(quality="augmented")
        """
        try:
            chord_quality = parse_quality(quality)
            roots = chord_quality.root_range(allow_double_accidentals)
            return json.dumps(
                {
                    "status": "success",
                    "quality": chord_quality.value,
                    "flattest": chord_quality.flattest_root(allow_double_accidentals).spell(),
                    "sharpest": chord_quality.sharpest_root(allow_double_accidentals).spell(),
                    "roots": [r.spell() for r in roots],
                    "count": len(roots),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to compute root range")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_root_range"] = chord_root_range

    return tools
