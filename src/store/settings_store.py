"""Plugin settings persistence.

This module loads and saves the single free-text plugin setting as a
JSON blob, merging saved values over documented defaults.
"""

from __future__ import annotations

from dataclasses import asdict, fields
import json
from pathlib import Path
from typing import Any

from core.constants import SETTINGS_DIR_NAME, SETTINGS_FILE_NAME
from core.errors import SettingsError
from core.types import PluginSettings

DEFAULT_SETTINGS = PluginSettings()


class SettingsStore:
    """JSON file-backed settings store."""

    def __init__(self, settings_path: Path) -> None:
        self._settings_path = settings_path

    @classmethod
    def for_vault(cls, vault_root: Path) -> "SettingsStore":
        """Build a store at the default location inside a vault."""
        return cls(vault_root / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME)

    @property
    def path(self) -> Path:
        return self._settings_path

    def load(self) -> PluginSettings:
        """Load settings, falling back to defaults for missing values.

        Returns:
            Settings with saved values applied over defaults.

        Raises:
            SettingsError: If the settings file exists but is invalid.
        """
        if not self._settings_path.exists():
            return DEFAULT_SETTINGS
        payload = self._read_payload()
        known_fields = {item.name for item in fields(PluginSettings)}
        merged = asdict(DEFAULT_SETTINGS)
        for key, value in payload.items():
            if key not in known_fields:
                continue
            if not isinstance(value, str):
                raise SettingsError(
                    f"Invalid settings at {self._settings_path}: "
                    f"'{key}' must be a string, got {type(value).__name__}."
                )
            merged[key] = value
        return PluginSettings(**merged)

    def save(self, settings: PluginSettings) -> None:
        """Persist settings to disk.

        Args:
            settings: Settings to write.

        Raises:
            SettingsError: If the file cannot be written.
        """
        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)
            self._settings_path.write_text(
                json.dumps(asdict(settings), indent=2) + "\n",
                encoding="utf-8",
            )
        except OSError as error:
            raise SettingsError(
                f"Failed to save settings to {self._settings_path}: {error}."
            ) from error

    def _read_payload(self) -> dict[str, Any]:
        try:
            payload = json.loads(self._settings_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            raise SettingsError(
                f"Failed to read settings at {self._settings_path}: {error}. "
                "Fix or delete the settings file to restore defaults."
            ) from error
        if not isinstance(payload, dict):
            raise SettingsError(
                f"Invalid settings at {self._settings_path}: expected JSON object at top level."
            )
        return payload
