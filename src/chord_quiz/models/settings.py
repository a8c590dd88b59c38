"""
Quiz settings - which chords a quiz draws and how they are shown.

Settings are loaded from YAML presets. They narrow the chord space:
which qualities appear, whether double sharps and flats are allowed,
which octaves roots come from and, optionally, a fixed clef.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chord_quiz.core.chord import Quality
from chord_quiz.core.clef import Clef

SCHEMA_VERSION = "preset/v1"


class QuizSettings(BaseModel):
    """
    A named quiz configuration.

    Immutable - derive variants with model_copy(update=...).
    """

    name: str = Field(..., description="Preset name (e.g., 'triads')")
    description: str = Field(default="", description="Human-readable description")
    allow_double_accidentals: bool = Field(
        default=False,
        description="Allow roots and chord tones with double sharps or flats",
    )
    qualities: list[Quality] = Field(
        default_factory=lambda: list(Quality),
        description="Chord qualities to draw from",
    )
    clef: Clef | None = Field(
        default=None,
        description="Fixed clef; None picks G or F from the root",
    )
    octave_range: tuple[int, int] = Field(
        default=(3, 4),
        description="Min/max root octave",
    )
    max_attempts: int = Field(
        default=20,
        ge=1,
        description="Chord construction attempts before giving up",
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure preset name is valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid preset name: {v}")
        return v

    @field_validator("qualities")
    @classmethod
    def validate_qualities(cls, v: list[Quality]) -> list[Quality]:
        """At least one quality must be enabled."""
        if not v:
            raise ValueError("At least one chord quality is required")
        return v

    @field_validator("clef", mode="before")
    @classmethod
    def parse_clef(cls, v: Any) -> Any:
        """Accept clef names like 'treble' or 'bass' as well as G, C and F."""
        if isinstance(v, str):
            return Clef.parse(v)
        return v

    @model_validator(mode="after")
    def validate_octave_range(self) -> QuizSettings:
        """Octave range must not be inverted."""
        low, high = self.octave_range
        if low > high:
            raise ValueError(f"Invalid octave range: {low} > {high}")
        return self

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": SCHEMA_VERSION,
            "name": self.name,
            "description": self.description,
            "allow_double_accidentals": self.allow_double_accidentals,
            "qualities": [q.value for q in self.qualities],
            "clef": self.clef.value if self.clef else None,
            "octave_range": list(self.octave_range),
            "max_attempts": self.max_attempts,
        }


class PresetMetadata(BaseModel):
    """Lightweight metadata for listing presets."""

    name: str
    description: str
    allow_double_accidentals: bool
    qualities: list[Quality]

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: QuizSettings) -> PresetMetadata:
        """Create metadata from settings."""
        return cls(
            name=settings.name,
            description=settings.description,
            allow_double_accidentals=settings.allow_double_accidentals,
            qualities=list(settings.qualities),
        )
