"""
Chord sampler - draws random quiz chords within a preset's limits.

Roots are drawn uniformly from the line-of-fifths range a quality allows,
so every spelling from the flattest to the sharpest root is equally likely.
"""

from __future__ import annotations

import logging
import random

from chord_quiz.constants import ErrorMessages
from chord_quiz.core.chord import Chord, Quality, build_chord
from chord_quiz.core.pitch import PitchOctave, Tpc
from chord_quiz.models.settings import QuizSettings

logger = logging.getLogger(__name__)


class SamplingError(ValueError):
    """No representable chord could be drawn."""


class ChordSampler:
    """
    Draws chords according to quiz settings.

    Pass a seeded random.Random for reproducible sequences.
    """

    def __init__(self, settings: QuizSettings, rng: random.Random | None = None):
        self.settings = settings
        self.rng = rng or random.Random()

    def sample_quality(self) -> Quality:
        return self.rng.choice(self.settings.qualities)

    def sample_root(self, quality: Quality) -> PitchOctave:
        """Draw a root spelling and octave for a quality."""
        allow_double = self.settings.allow_double_accidentals
        low = quality.flattest_root(allow_double).fifths
        high = quality.sharpest_root(allow_double).fifths
        tpc = Tpc(self.rng.randint(low, high))
        octave = self.rng.randint(*self.settings.octave_range)
        return PitchOctave(tpc, octave)

    def next_chord(self) -> Chord:
        """
        Draw a chord, redrawing the root until the chord is representable.

        Raises:
            SamplingError: If max_attempts draws all fail
        """
        attempts = self.settings.max_attempts
        for attempt in range(1, attempts + 1):
            quality = self.sample_quality()
            root = self.sample_root(quality)
            chord = build_chord(root, quality, self.settings.allow_double_accidentals)
            if chord is not None:
                logger.debug(f"Drew {chord.display_name()} on attempt {attempt}")
                return chord
            logger.debug(f"Cannot spell {root} {quality.value}, redrawing")
        raise SamplingError(ErrorMessages.SAMPLING_FAILED.format(attempts=attempts))
