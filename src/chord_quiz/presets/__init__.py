"""
Preset system - named quiz settings.

Presets narrow which chords a quiz draws, like difficulty levels.
"""

from chord_quiz.presets.loader import PresetLoader

__all__ = ["PresetLoader"]
