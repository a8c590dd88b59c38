"""
Tests for quiz settings and presets.

Tests cover:
- QuizSettings model and validation
- PresetLoader discovery, precedence and loading
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chord_quiz.core import Clef, Quality
from chord_quiz.models import SCHEMA_VERSION, PresetMetadata, QuizSettings
from chord_quiz.presets import PresetLoader


class TestQuizSettings:
    """Tests for QuizSettings model."""

    def test_defaults(self):
        """Default settings cover every quality without doubles."""
        settings = QuizSettings(name="default")
        assert settings.allow_double_accidentals is False
        assert settings.qualities == list(Quality)
        assert settings.clef is None
        assert settings.octave_range == (3, 4)
        assert settings.max_attempts == 20

    def test_parses_enum_values(self):
        """Qualities and clef accept their string values."""
        settings = QuizSettings(name="custom", qualities=["minor7", "dominant7"], clef="F")
        assert settings.qualities == [Quality.MIN7, Quality.DOM7]
        assert settings.clef == Clef.F

    def test_clef_names(self):
        """Clefs can be named by register as well as by letter."""
        assert QuizSettings(name="high", clef="treble").clef == Clef.G
        assert QuizSettings(name="mid", clef="Alto").clef == Clef.C
        assert QuizSettings(name="low", clef="bass").clef == Clef.F
        assert QuizSettings(name="set", clef=Clef.F).clef == Clef.F

    def test_unknown_clef(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="odd", clef="tenor")

    def test_invalid_name(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="bad name!")

    def test_empty_qualities(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="empty", qualities=[])

    def test_unknown_quality(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="odd", qualities=["sus4"])

    def test_inverted_octave_range(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="inverted", octave_range=(5, 3))

    def test_max_attempts_positive(self):
        with pytest.raises(ValidationError):
            QuizSettings(name="never", max_attempts=0)

    def test_immutable(self):
        settings = QuizSettings(name="fixed")
        with pytest.raises(ValidationError):
            settings.allow_double_accidentals = True

    def test_model_copy(self):
        """Variants are derived with model_copy."""
        settings = QuizSettings(name="base")
        variant = settings.model_copy(update={"allow_double_accidentals": True})
        assert variant.allow_double_accidentals is True
        assert settings.allow_double_accidentals is False

    def test_to_yaml_dict(self):
        settings = QuizSettings(name="triads", qualities=[Quality.MAJ], clef=Clef.G)
        data = settings.to_yaml_dict()
        assert data["schema"] == SCHEMA_VERSION
        assert data["qualities"] == ["major"]
        assert data["clef"] == "G"
        assert data["octave_range"] == [3, 4]

    def test_metadata(self):
        settings = QuizSettings(name="triads", description="Triads", qualities=[Quality.MIN])
        metadata = PresetMetadata.from_settings(settings)
        assert metadata.name == "triads"
        assert metadata.description == "Triads"
        assert metadata.qualities == [Quality.MIN]


class TestPresetLoader:
    """Tests for PresetLoader."""

    def test_list_library_presets(self, library_path: Path):
        """Built-in presets are discovered."""
        loader = PresetLoader(library_path=library_path)
        names = {p.name for p in loader.list_presets()}
        assert names == {"everything", "sevenths", "treble-triads", "triads"}

    def test_default_library_path(self):
        """The packaged library is used when no path is given."""
        loader = PresetLoader()
        assert loader.get_preset("triads") is not None

    def test_get_preset(self, library_path: Path):
        loader = PresetLoader(library_path=library_path)
        triads = loader.get_preset("triads")
        assert triads is not None
        assert triads.allow_double_accidentals is False
        assert triads.qualities == [Quality.MAJ, Quality.MIN, Quality.DIM, Quality.AUG]
        assert triads.octave_range == (3, 4)

    def test_get_preset_with_clef(self, library_path: Path):
        loader = PresetLoader(library_path=library_path)
        preset = loader.get_preset("treble-triads")
        assert preset is not None
        assert preset.clef == Clef.G
        assert preset.octave_range == (4, 4)

    def test_preset_clef_name(self, temp_dir: Path):
        """A project preset may name its clef 'alto'."""
        (temp_dir / "violas.yaml").write_text("name: violas\nclef: alto\n")
        loader = PresetLoader(library_path=temp_dir / "missing", project_path=temp_dir)
        preset = loader.get_preset("violas")
        assert preset is not None
        assert preset.clef == Clef.C
        assert preset.to_yaml_dict()["clef"] == "C"

    def test_everything_preset(self, library_path: Path):
        loader = PresetLoader(library_path=library_path)
        preset = loader.get_preset("everything")
        assert preset is not None
        assert preset.allow_double_accidentals is True
        assert set(preset.qualities) == set(Quality)
        assert preset.max_attempts == 50

    def test_get_nonexistent(self, library_path: Path):
        loader = PresetLoader(library_path=library_path)
        assert loader.get_preset("nonexistent") is None

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path):
        """Project presets take precedence over library presets."""
        (temp_dir / "triads.yaml").write_text(
            "name: triads\n"
            "description: Project triads\n"
            "allow_double_accidentals: true\n"
            "qualities: [major]\n"
        )
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)

        preset = loader.get_preset("triads")
        assert preset is not None
        assert preset.description == "Project triads"
        assert preset.allow_double_accidentals is True

        listed = {p.name: p for p in loader.list_presets()}
        assert listed["triads"].description == "Project triads"
        assert len(listed) == 4

    def test_invalid_preset_skipped(self, temp_dir: Path):
        """Unparseable or invalid presets are skipped, not raised."""
        (temp_dir / "broken.yaml").write_text("name: [unterminated\n")
        (temp_dir / "invalid.yaml").write_text("name: invalid\nqualities: []\n")
        (temp_dir / "scalar.yaml").write_text("just a string\n")
        (temp_dir / "good.yaml").write_text("name: good\n")
        loader = PresetLoader(library_path=temp_dir / "missing", project_path=temp_dir)

        assert [p.name for p in loader.list_presets()] == ["good"]
        assert loader.get_preset("invalid") is None
        assert loader.get_preset("scalar") is None

    def test_copy_to_project(self, library_path: Path, temp_dir: Path):
        project = temp_dir / "presets"
        loader = PresetLoader(library_path=library_path, project_path=project)

        path = loader.copy_to_project("sevenths")
        assert path == project / "sevenths.yaml"
        assert path.read_text() == (library_path / "sevenths.yaml").read_text()

    def test_copy_twice_fails(self, library_path: Path, temp_dir: Path):
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        loader.copy_to_project("triads")
        with pytest.raises(ValueError):
            loader.copy_to_project("triads")

    def test_copy_missing(self, library_path: Path, temp_dir: Path):
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        assert loader.copy_to_project("nonexistent") is None

    def test_copy_without_project(self, library_path: Path):
        loader = PresetLoader(library_path=library_path)
        with pytest.raises(ValueError):
            loader.copy_to_project("triads")

    def test_save_preset(self, library_path: Path, temp_dir: Path):
        """Saved presets load back identically."""
        settings = QuizSettings(
            name="my-quiz",
            description="Minor sevenths in the bass",
            qualities=[Quality.MIN7],
            clef=Clef.F,
            octave_range=(2, 3),
        )
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        path = loader.save_preset(settings)

        with open(path) as f:
            data = yaml.safe_load(f)
        assert data["name"] == "my-quiz"
        assert data["qualities"] == ["minor7"]

        fresh = PresetLoader(library_path=library_path, project_path=temp_dir)
        assert fresh.get_preset("my-quiz") == settings

    def test_cache(self, library_path: Path, temp_dir: Path):
        """Presets are cached until the cache is cleared."""
        (temp_dir / "cached.yaml").write_text("name: cached\ndescription: first\n")
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        assert loader.get_preset("cached").description == "first"

        (temp_dir / "cached.yaml").write_text("name: cached\ndescription: second\n")
        assert loader.get_preset("cached").description == "first"

        loader.clear_cache()
        assert loader.get_preset("cached").description == "second"
