"""
Constants and enums for the chord quiz.

No magic strings - engraving metrics, SMuFL code points and messages live here.
Metrics assume a 16-unit staff height (font-size 16 in the Bravura font).
"""

from enum import Enum

# Staff metrics (drawing units)
STAFF_SPACE: float = 4.0
STAFF_LINE_THICKNESS: float = 0.13 * STAFF_SPACE
LEGER_LINE_THICKNESS: float = 0.16 * STAFF_SPACE
THIN_BARLINE_THICKNESS: float = 0.16 * STAFF_SPACE
BARLINE_SEPARATION: float = 0.4 * STAFF_SPACE

# Leger lines start one unit left of the notehead and overhang it on both sides
LEGER_LINE_OFFSET: float = 1.0
LEGER_LINE_LENGTH: float = 8.752

STAFF_LINE_COUNT = 5
STAFF_HEIGHT: float = (STAFF_LINE_COUNT - 1) * STAFF_SPACE

# Staff positions bounding the printed lines
BOTTOM_LINE_POSITION = 0
TOP_LINE_POSITION = 8
LOWEST_LEGER_POSITION = BOTTOM_LINE_POSITION - 2
HIGHEST_LEGER_POSITION = TOP_LINE_POSITION + 2

# Accidentals at least this many steps below the column top start a new column
ACCIDENTAL_COLUMN_GAP = 6

# Standard chord layout, in staff spaces
CLEF_MARGIN = 0.5
CLEF_WIDTH = 6.0
ACCIDENTAL_GAP = 1.5
CHORD_WIDTH = 6.0


class SmuflGlyph(str, Enum):
    """SMuFL code points used from the Bravura font."""

    G_CLEF = "\ue050"
    C_CLEF = "\ue05c"
    F_CLEF = "\ue062"
    NOTEHEAD_WHOLE = "\ue0a2"
    ACCIDENTAL_FLAT = "\ue260"
    ACCIDENTAL_NATURAL = "\ue261"
    ACCIDENTAL_SHARP = "\ue262"
    ACCIDENTAL_DOUBLE_SHARP = "\ue263"
    ACCIDENTAL_DOUBLE_FLAT = "\ue264"


class ErrorMessages:
    """Standardized error messages."""

    UNREPRESENTABLE_CHORD = (
        "Chord '{root} {quality}' cannot be spelled within the accidental limit."
    )
    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected format like 'Eb', 'F#4' or 'Cx3'."
    INVALID_QUALITY = "Invalid quality: '{quality}'. Expected one of: {choices}."
    INVALID_CLEF = "Invalid clef: '{clef}'. Expected one of: G, C, F."
    PRESET_NOT_FOUND = "Preset '{name}' not found."
    SAMPLING_FAILED = "No representable chord found after {attempts} attempts."


class SuccessMessages:
    """Standardized success messages."""

    CHORD_SPELLED = "Spelled {name} ({count} notes)."
    CHORD_RENDERED = "Rendered {name} on the {clef} clef."
    PRESET_COPIED = "Copied preset '{name}' to {path}."
