"""
Quiz tools - MCP tools for presets and random quiz chords.

Tools for listing and describing presets, and for drawing a random
chord to identify.
"""

from __future__ import annotations

import json
import logging
import random
from typing import TYPE_CHECKING, Any

from chord_quiz.constants import ErrorMessages, SuccessMessages
from chord_quiz.presets import PresetLoader
from chord_quiz.quiz import ChordSampler
from chord_quiz.tools.chords import chord_payload

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_quiz_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
) -> dict[str, Any]:
    """
    Register quiz and preset tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chord_random(
        preset: str = "triads",
        seed: int | None = None,
        reveal: bool = False,
    ) -> str:
        """
        Draw a random chord to identify.

        The chord is drawn within the preset's qualities, octaves and
        accidental limits and engraved as SVG. Its name is withheld
        unless reveal is set, so it can be used as a quiz question.

        Args:
            preset: Preset name (e.g., 'triads', 'sevenths', 'everything')
            seed: Optional random seed for a reproducible chord
            reveal: Include the chord name and spelling in the response

        Returns:
            JSON string with the SVG (and the answer when revealed)

        Example:
            chord_random(preset="sevenths", seed=42)
        """
        try:
            settings = preset_loader.get_preset(preset)
            if settings is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=preset)}
                )

            sampler = ChordSampler(settings, random.Random(seed))
            chord = sampler.next_chord()
            result: dict[str, Any] = {
                "status": "success",
                "preset": settings.name,
                "svg": chord.to_svg(settings.clef),
            }
            if reveal:
                result["chord"] = chord_payload(chord, settings.clef)
            return json.dumps(result, ensure_ascii=False)
        except Exception as e:
            logger.exception("Failed to draw random chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_random"] = chord_random

    @mcp.tool  # type: ignore[arg-type]
    async def chord_list_presets() -> str:
        """
        List available quiz presets.

        Returns all presets from the library and project with
        basic metadata.

        Returns:
            JSON string with list of preset summaries

        Example:
            chord_list_presets()
        """
        try:
            presets = preset_loader.list_presets()

            return json.dumps(
                {
                    "status": "success",
                    "presets": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "allow_double_accidentals": p.allow_double_accidentals,
                            "qualities": [q.value for q in p.qualities],
                        }
                        for p in presets
                    ],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_list_presets"] = chord_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def chord_describe_preset(name: str) -> str:
        """
        Get detailed information about a preset.

        Args:
            name: Preset name

        Returns:
            JSON string with the preset's full settings

        Example:
            chord_describe_preset(name="triads")
        """
        try:
            settings = preset_loader.get_preset(name)
            if settings is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "preset": settings.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_describe_preset"] = chord_describe_preset

    @mcp.tool  # type: ignore[arg-type]
    async def chord_copy_preset_to_project(name: str) -> str:
        """
        Copy a library preset into the project for customization.

        Args:
            name: Library preset name

        Returns:
            JSON string with the path of the copied file

        Example:
            chord_copy_preset_to_project(name="triads")
        """
        try:
            path = preset_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.PRESET_COPIED.format(name=name, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to copy preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chord_copy_preset_to_project"] = chord_copy_preset_to_project

    return tools
