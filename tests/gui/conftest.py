"""Shared fixtures for GUI tests."""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication

from gui.settings_manager import SettingsManager


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()


@pytest.fixture
def settings_manager(qt_app, tmp_path) -> SettingsManager:
    """SettingsManager writing to a temporary file."""
    return SettingsManager(settings_file=tmp_path / "settings.json")
