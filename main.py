#!/usr/bin/env python3
"""
Acoustics GUI - entry point

Frequency range information, dithering and SPL range settings for
acoustic predictions.

Usage:
    python main.py [locale]

Example:
    python main.py de-DE
"""

import logging
import sys
from pathlib import Path


def _init_logging() -> None:
    log_root = Path.home() / ".acoustics_gui"
    log_root.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_root / "acoustics_gui.log", encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


def _install_excepthook() -> None:
    logger = logging.getLogger("acoustics_gui")

    def _hook(exc_type, exc, tb) -> None:
        logger.error("Unhandled exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _hook


def main():
    """Start the Acoustics GUI application."""
    if sys.version_info < (3, 10):
        print("Error: Python 3.10 or higher is required.")
        print(f"Current version: {sys.version}")
        sys.exit(1)

    _init_logging()
    _install_excepthook()
    logger = logging.getLogger("acoustics_gui")

    from PySide6.QtWidgets import QApplication

    from acoustics_gui import __version__
    from acoustics_gui.core.settings import (
        APPLICATION_NAME,
        ORGANIZATION_NAME,
        ClientProperties,
    )
    from acoustics_gui.errors import ConfigurationError
    from acoustics_gui.gui import MainWindow
    from acoustics_gui.utils.formatting import resolve_locale

    app = QApplication(sys.argv)
    app.setApplicationName(APPLICATION_NAME)
    app.setApplicationVersion(__version__)
    app.setOrganizationName(ORGANIZATION_NAME)

    try:
        if len(sys.argv) > 1:
            resolve_locale(sys.argv[1])
            client_properties = ClientProperties(locale_name=sys.argv[1])
        else:
            client_properties = ClientProperties.load()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    window = MainWindow(client_properties)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
