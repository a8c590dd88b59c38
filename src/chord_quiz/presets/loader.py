"""
Preset loader - finds quiz settings in YAML files.

Two directories are searched: the library of presets shipped in
presets/library, and an optional project directory whose files shadow
library presets of the same name. Files that fail to parse or validate
are logged and skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chord_quiz.models.settings import PresetMetadata, QuizSettings

logger = logging.getLogger(__name__)


class PresetLoader:
    """
    Looks up QuizSettings by preset name.

    Loaded presets are cached by name; copy_to_project() and
    save_preset() keep the cache current.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Args:
            library_path: Directory of shipped presets (defaults to the package library)
            project_path: Directory of user presets, created on first write
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, QuizSettings] = {}

    def list_presets(self) -> list[PresetMetadata]:
        """Summaries of every loadable preset, project files winning name clashes."""
        presets: dict[str, PresetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory and directory.exists():
                for path in sorted(directory.glob("*.yaml")):
                    settings = self._load_preset_file(path)
                    if settings:
                        presets[settings.name] = PresetMetadata.from_settings(settings)

        return list(presets.values())

    def get_preset(self, name: str) -> QuizSettings | None:
        """
        Load a preset by name, looking in the project directory first.

        Returns:
            The settings, or None when no valid file has that name
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if not directory:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                settings = self._load_preset_file(path)
                if settings:
                    self._cache[name] = settings
                    return settings

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a shipped preset into the project directory so it can be edited.

        Returns:
            The new file, or None if the library has no such preset

        Raises:
            ValueError: If no project directory is configured or the
                project already has a preset of that name
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Preset already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # The project copy now shadows the library file
        self._cache.pop(name, None)

        return dest_file

    def save_preset(self, settings: QuizSettings) -> Path:
        """
        Write settings to the project directory as a preset.

        Args:
            settings: Settings to save

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{settings.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(settings.to_yaml_dict(), f, sort_keys=False, allow_unicode=True)

        self._cache[settings.name] = settings
        return path

    def _load_preset_file(self, path: Path) -> QuizSettings | None:
        """Load a preset from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_preset(data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Skipping invalid preset {path}: {e}")
            return None

    def _parse_preset(self, data: dict[str, Any]) -> QuizSettings:
        """Parse settings from YAML data."""
        if not isinstance(data, dict):
            raise TypeError(f"Preset must be a mapping, got {type(data).__name__}")
        octave_range = data.get("octave_range") or [3, 4]
        fields: dict[str, Any] = {
            "name": data.get("name", "unknown"),
            "description": data.get("description", ""),
            "allow_double_accidentals": data.get("allow_double_accidentals", False),
            "clef": data.get("clef"),
            "octave_range": (octave_range[0], octave_range[-1]),
        }
        if "qualities" in data:
            fields["qualities"] = data["qualities"]
        if "max_attempts" in data:
            fields["max_attempts"] = data["max_attempts"]
        return QuizSettings.model_validate(fields)

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
