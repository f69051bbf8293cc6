"""Application settings manager for persistent storage."""

import json
import logging
import os
import string
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "absolute_marker": "$",
    "log_level": "WARNING",
    "log_to_file": False,
    "default_row_height": None,
}

_MISSING = object()


def get_settings_dir():
    """Return the settings directory, honouring $ROWSHIFT_HOME."""
    override = os.environ.get("ROWSHIFT_HOME")
    if override:
        return Path(override)
    return Path.home() / ".rowshift"


class AppSettings:
    """Manages rowshift settings with persistent JSON storage."""

    def __init__(self, settings_file=None):
        """Initialize settings manager.

        Args:
            settings_file: Path to settings file. If None, uses default location.
        """
        if settings_file is None:
            settings_file = get_settings_dir() / "settings.json"

        self.settings_file = Path(settings_file)
        self.settings = {}
        self._load()

    def _load(self):
        """Load settings from file."""
        if self.settings_file.exists():
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    self.settings = json.load(f)
            except Exception as e:
                logger.error(f"Failed to load settings: {e}")
                self.settings = {}
        else:
            self.settings = {}

    def _save(self):
        """Save settings to file."""
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
        except Exception as e:
            logger.error(f"Failed to save settings: {e}")

    def get(self, key, default=_MISSING):
        """Get a setting value.

        Falls back to the built-in default for known keys when ``default``
        is not given.
        """
        if default is _MISSING:
            default = DEFAULT_SETTINGS.get(key)
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a setting value and persist it."""
        self.settings[key] = value
        self._save()

    def get_absolute_marker(self):
        """Get the character that freezes the next row token in a formula.

        Returns:
            A single non-digit character. Invalid stored values fall back to "$".
        """
        marker = self.get("absolute_marker")
        if not isinstance(marker, str) or len(marker) != 1 or marker in string.digits:
            logger.error(f"Invalid absolute_marker setting {marker!r}, using '$'")
            return DEFAULT_SETTINGS["absolute_marker"]
        return marker

    def set_absolute_marker(self, marker):
        self.set("absolute_marker", marker)

    def get_log_level(self):
        """Get the configured log level name (e.g. "WARNING")."""
        level = str(self.get("log_level")).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            return DEFAULT_SETTINGS["log_level"]
        return level

    def set_log_level(self, level):
        self.set("log_level", str(level).upper())

    def get_log_to_file(self):
        return bool(self.get("log_to_file"))

    def set_log_to_file(self, enabled):
        self.set("log_to_file", bool(enabled))

    def get_default_row_height(self):
        """Get the height applied to rows created without a template height."""
        return self.get("default_row_height")

    def set_default_row_height(self, height):
        self.set("default_row_height", height)
