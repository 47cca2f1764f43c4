"""Persisted settings for the results panel."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from config.scan_settings import DEFAULT_EXPAND_DEPTH, DOUBLE_CLICK_COUNT, NavigationSettings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "scroll_to_source": False,
    "navigate_on_selection": True,
    "expand_depth": DEFAULT_EXPAND_DEPTH,
}

SETTINGS_FILE = Path(__file__).parent.parent.parent / "data" / "settings.json"


class SettingsManager(QObject):
    """Settings backed by a JSON file; unknown keys in the file are ignored."""

    settings_changed = pyqtSignal(str, object)  # (setting_name, new_value)

    def __init__(self, settings_file: Optional[Path] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings_file = settings_file or SETTINGS_FILE
        self._settings = DEFAULT_SETTINGS.copy()
        self._load_settings()

    def _load_settings(self):
        try:
            if self.settings_file.exists():
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    saved = json.load(f)
                for key, value in saved.items():
                    if key in DEFAULT_SETTINGS:
                        self._settings[key] = value
                logger.debug("Settings loaded from %s", self.settings_file)
        except (OSError, ValueError, AttributeError) as e:
            logger.warning("Failed to load settings from %s: %s", self.settings_file, e)

    def _save_settings(self):
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
            logger.debug("Settings saved to %s", self.settings_file)
        except OSError as e:
            logger.warning("Failed to save settings to %s: %s", self.settings_file, e)

    def get(self, key: str, default: Any = None) -> Any:
        return self._settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a known setting, persist it and emit settings_changed."""
        if key in self._settings and self._settings[key] != value:
            self._settings[key] = value
            self._save_settings()
            self.settings_changed.emit(key, value)

    @property
    def scroll_to_source(self) -> bool:
        """Whether double-clicking a problem opens it in the editor."""
        return bool(self._settings.get("scroll_to_source", False))

    @scroll_to_source.setter
    def scroll_to_source(self, value: bool):
        self.set("scroll_to_source", bool(value))

    @property
    def navigate_on_selection(self) -> bool:
        return bool(self._settings.get("navigate_on_selection", True))

    @navigate_on_selection.setter
    def navigate_on_selection(self, value: bool):
        self.set("navigate_on_selection", bool(value))

    @property
    def expand_depth(self) -> int:
        try:
            return max(0, int(self._settings.get("expand_depth", DEFAULT_EXPAND_DEPTH)))
        except (TypeError, ValueError):
            return DEFAULT_EXPAND_DEPTH

    @expand_depth.setter
    def expand_depth(self, value: int):
        self.set("expand_depth", max(0, int(value)))

    def navigation_settings(self) -> NavigationSettings:
        return NavigationSettings(
            scroll_to_source=self.scroll_to_source,
            navigate_on_selection=self.navigate_on_selection,
            activation_click_count=DOUBLE_CLICK_COUNT,
        )
