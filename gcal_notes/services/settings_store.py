"""
Settings Store - persists the plugin settings record as JSON.

This is the host's key-value persistence facility. The calendar code never
calls it; the plugin loads the record once and saves it whenever the
settings tab changes something.
"""

import logging
from pathlib import Path
from typing import Union

from gcal_notes.schemas.settings import PluginSettings


logger = logging.getLogger("gcal.services.settings_store")


class SettingsStore:
    """
    JSON file backed store for PluginSettings.

    Missing keys fall back to the defaults (all credentials empty, no extra
    calendars); unknown keys are ignored.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> PluginSettings:
        """Load the record, or the defaults when nothing was saved yet."""
        if not self.path.exists():
            logger.info(f"No settings at {self.path}, using defaults")
            return PluginSettings()

        settings = PluginSettings.model_validate_json(self.path.read_text(encoding="utf-8"))
        logger.info(
            "Loaded settings",
            extra={"path": str(self.path), "calendars": len(settings.calendar_ids)},
        )
        return settings

    def save(self, settings: PluginSettings) -> None:
        """Write the record, creating the parent directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            settings.model_dump_json(by_alias=True, indent=2),
            encoding="utf-8",
        )
        logger.info(f"Saved settings to {self.path}")
