"""
Pitch primitives - Step, Accidental, Tpc, Interval, PitchOctave.

These are the foundational types for all spelling operations.
Tpc ("tonal pitch class") is a spelled pitch positioned on the line of
fifths, so C# and Db are different values. Intervals are displacements
along that line, which makes interval arithmetic a single addition.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

# Letters in line-of-fifths order, starting from the natural F
_FIFTHS_ORDER = "FCGDAEB"

# Line-of-fifths bounds (C = 0)
MIN_FIFTHS = -15  # Fbb
MAX_FIFTHS = 19  # Bx
MIN_SINGLE_FIFTHS = -8  # Fb
MAX_SINGLE_FIFTHS = 12  # B#

_STEP_SEMITONES = (0, 2, 4, 5, 7, 9, 11)

# Display symbols (module level to avoid IntEnum member issues)
_ACCIDENTAL_SYMBOLS: dict[int, str] = {
    -2: "\U0001d12b",  # 𝄫
    -1: "♭",
    0: "♮",
    1: "♯",
    2: "\U0001d12a",  # 𝄪
}
_ACCIDENTAL_ASCII: dict[int, str] = {-2: "bb", -1: "b", 0: "", 1: "#", 2: "x"}
_ACCIDENTAL_PARSE: dict[str, int] = {
    "": 0,
    "bb": -2,
    "b": -1,
    "#": 1,
    "##": 2,
    "x": 2,
    **{symbol: value for value, symbol in _ACCIDENTAL_SYMBOLS.items()},
}

_PITCH_PATTERN = re.compile(r"^([A-Ga-g])([^\d-]*)(-?\d+)?$")


class Step(IntEnum):
    """
    The 7 diatonic letters, ordered from C.

    Arithmetic on steps is cyclic modulo 7.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    def shift(self, steps: int) -> Step:
        """Move up (or down, if negative) by a number of letters."""
        return Step((self.value + steps) % 7)

    @property
    def semitones(self) -> int:
        """Semitones above C of the natural letter."""
        return _STEP_SEMITONES[self.value]

    @property
    def natural_fifths(self) -> int:
        """Line-of-fifths position of the natural letter."""
        return _FIFTHS_ORDER.index(self.name) - 1


class Accidental(IntEnum):
    """Accidentals from double-flat to double-sharp, valued by alteration."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @property
    def symbol(self) -> str:
        """Unicode music symbol."""
        return _ACCIDENTAL_SYMBOLS[self.value]

    @property
    def ascii(self) -> str:
        """Plain-text spelling (b, bb, #, x)."""
        return _ACCIDENTAL_ASCII[self.value]


@dataclass(frozen=True, order=True)
class Tpc:
    """
    A spelled pitch class on the line of fifths.

    C = 0, G = 1, D = 2 ... F = -1, Bb = -2 ...
    A sharp moves 7 fifths up, a flat 7 fifths down.

    Only spellings with at most a double accidental are representable:
    Fbb (-15) through Bx (19). Ordering follows the line of fifths, so
    min() is the flattest spelling and max() the sharpest.
    """

    fifths: int

    FLATTEST: ClassVar[Tpc]
    SHARPEST: ClassVar[Tpc]
    FLATTEST_SINGLE: ClassVar[Tpc]
    SHARPEST_SINGLE: ClassVar[Tpc]

    def __post_init__(self) -> None:
        if not MIN_FIFTHS <= self.fifths <= MAX_FIFTHS:
            raise ValueError(
                f"Line-of-fifths position must be {MIN_FIFTHS}..{MAX_FIFTHS}, got {self.fifths}"
            )

    @classmethod
    def from_step(cls, step: Step, alteration: int = 0) -> Tpc:
        """Spell a letter with an alteration (-2..2)."""
        return cls(step.natural_fifths + 7 * alteration)

    @classmethod
    def is_representable(cls, fifths: int) -> bool:
        """Check if a line-of-fifths position needs at most a double accidental."""
        return MIN_FIFTHS <= fifths <= MAX_FIFTHS

    @classmethod
    def bounds(cls, allow_double_accidental: bool) -> tuple[Tpc, Tpc]:
        """The flattest and sharpest spellings allowed under a setting."""
        if allow_double_accidental:
            return cls.FLATTEST, cls.SHARPEST
        return cls.FLATTEST_SINGLE, cls.SHARPEST_SINGLE

    @classmethod
    def parse(cls, name: str) -> Tpc:
        """Parse a spelled pitch like 'C', 'F#', 'Bb', 'Ebb', 'Gx' or 'A♭'."""
        match = _PITCH_PATTERN.match(name.strip())
        if not match or match.group(3) is not None:
            raise ValueError(f"Unknown pitch spelling: {name}")
        letter, accidental, _ = match.groups()
        if accidental not in _ACCIDENTAL_PARSE:
            raise ValueError(f"Unknown accidental in pitch spelling: {name}")
        return cls.from_step(Step[letter.upper()], _ACCIDENTAL_PARSE[accidental])

    @property
    def step(self) -> Step:
        """The letter name."""
        return Step[_FIFTHS_ORDER[(self.fifths + 1) % 7]]

    @property
    def alteration(self) -> int:
        """Semitone deviation from the natural letter (-2..2)."""
        return (self.fifths + 1) // 7

    @property
    def accidental(self) -> Accidental:
        """The accidental, NATURAL for plain letters."""
        return Accidental(self.alteration)

    @property
    def semitone(self) -> int:
        """Chromatic pitch class (0-11) this spelling sounds as."""
        return (self.step.semitones + self.alteration) % 12

    def add(self, interval: Interval) -> Tpc | None:
        """
        Add an interval.

        Returns:
            The resulting spelling, or None if it would need more
            than a double accidental.
        """
        fifths = self.fifths + interval.fifths
        if not self.is_representable(fifths):
            return None
        return Tpc(fifths)

    def decompose(self) -> tuple[Step, Accidental | None]:
        """Split into letter and accidental; the accidental is None for naturals."""
        alteration = self.alteration
        return self.step, Accidental(alteration) if alteration else None

    def spell(self, plain: bool = False) -> str:
        """Get human-readable name."""
        step, accidental = self.decompose()
        if accidental is None:
            return step.name
        return step.name + (accidental.ascii if plain else accidental.symbol)

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Tpc({self.spell(plain=True)})"


Tpc.FLATTEST = Tpc(MIN_FIFTHS)
Tpc.SHARPEST = Tpc(MAX_FIFTHS)
Tpc.FLATTEST_SINGLE = Tpc(MIN_SINGLE_FIFTHS)
Tpc.SHARPEST_SINGLE = Tpc(MAX_SINGLE_FIFTHS)


@dataclass(frozen=True, order=True)
class Interval:
    """
    A named distance between spelled pitches.

    Measured as a displacement on the line of fifths, which fixes both
    the letter distance and the quality. Ordering is by that displacement,
    so min() over a set of intervals is the one that flattens the most.

    Immutable and hashable.
    """

    fifths: int
    name: str = field(default="", compare=False)
    short: str = field(default="", compare=False)

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]

    @property
    def steps(self) -> int:
        """Number of letters spanned above the lower note (0-6)."""
        # Four fifths up is a third plus two octaves, i.e. +2 letters
        return (self.fifths * 4) % 7

    def __str__(self) -> str:
        return self.short or f"Interval({self.fifths})"


# Initialize class constants after class is defined
Interval.UNISON = Interval(0, "unison", "P1")
Interval.MINOR_THIRD = Interval(-3, "minor third", "m3")
Interval.MAJOR_THIRD = Interval(4, "major third", "M3")
Interval.DIMINISHED_FIFTH = Interval(-6, "diminished fifth", "d5")
Interval.PERFECT_FIFTH = Interval(1, "perfect fifth", "P5")
Interval.AUGMENTED_FIFTH = Interval(8, "augmented fifth", "A5")
Interval.DIMINISHED_SEVENTH = Interval(-9, "diminished seventh", "d7")
Interval.MINOR_SEVENTH = Interval(-2, "minor seventh", "m7")
Interval.MAJOR_SEVENTH = Interval(5, "major seventh", "M7")


@dataclass(frozen=True)
class PitchOctave:
    """
    A spelled pitch in a specific octave.

    Octaves follow scientific pitch notation and belong to the letter:
    Cb4 is written in octave 4 even though it sounds like B3.
    """

    tpc: Tpc
    octave: int

    @classmethod
    def parse(cls, name: str, default_octave: int = 4) -> PitchOctave:
        """Parse a pitch like 'Eb4', 'F#3' or 'C' (octave defaults to 4)."""
        match = _PITCH_PATTERN.match(name.strip())
        if not match:
            raise ValueError(f"Unknown pitch: {name}")
        letter, accidental, octave = match.groups()
        tpc = Tpc.parse(letter + accidental)
        return cls(tpc, int(octave) if octave is not None else default_octave)

    @property
    def step(self) -> Step:
        return self.tpc.step

    def add(self, interval: Interval) -> PitchOctave | None:
        """
        Add an ascending interval.

        The octave increments when the resulting letter wraps below
        the starting letter (B + M3 = D#, one octave up).

        Returns:
            The resulting pitch, or None if it would need more than
            a double accidental.
        """
        tpc = self.tpc.add(interval)
        if tpc is None:
            return None
        if tpc.step < self.tpc.step:
            return PitchOctave(tpc, self.octave + 1)
        return PitchOctave(tpc, self.octave)

    def add_octave(self) -> PitchOctave:
        """The same spelling one octave higher."""
        return PitchOctave(self.tpc, self.octave + 1)

    def diatonic_index(self) -> int:
        """Absolute letter index (C0 = 0), ignoring accidentals."""
        return self.octave * 7 + self.step.value

    def to_midi(self) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return (self.octave + 1) * 12 + self.step.semitones + self.tpc.alteration

    def spell(self, plain: bool = False) -> str:
        return f"{self.tpc.spell(plain=plain)}{self.octave}"

    def __str__(self) -> str:
        return self.spell()
