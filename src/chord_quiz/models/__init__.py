"""
Pydantic models for the chord quiz.

This module provides:
- QuizSettings: A named quiz configuration (loaded from presets)
- PresetMetadata: Listing summary of a preset
"""

from chord_quiz.models.settings import SCHEMA_VERSION, PresetMetadata, QuizSettings

__all__ = [
    "SCHEMA_VERSION",
    "PresetMetadata",
    "QuizSettings",
]
