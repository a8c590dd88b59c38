"""
Quiz support - random chord selection for identification rounds.
"""

from chord_quiz.quiz.sampler import ChordSampler, SamplingError

__all__ = ["ChordSampler", "SamplingError"]
