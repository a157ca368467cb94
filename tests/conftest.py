"""
Shared fixtures.

Widget tests run on the offscreen Qt platform, so no display is needed.
"""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def ini_settings(tmp_path):
    """Isolated INI-backed QSettings."""
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
