"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import RenderSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load and save :class:`RenderSettings` to disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("SHAPEKIT_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.shapekit"))
        return base / "settings.json"

    @classmethod
    def ensure_home(cls) -> Path:
        """Ensure the settings directory exists and return it."""
        path = cls.settings_path().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls) -> RenderSettings:
        """Load settings from disk, returning defaults when missing or bad."""
        path = cls.settings_path()
        if not path.exists():
            return RenderSettings()
        try:
            data = json.loads(path.read_text())
            return RenderSettings.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("ignoring unreadable settings %s: %s", path, e)
            return RenderSettings()

    @classmethod
    def save(cls, settings: RenderSettings) -> None:
        """Atomically persist *settings* to disk."""
        path = cls.settings_path()
        cls.ensure_home()
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2))
        os.replace(tmp, path)
