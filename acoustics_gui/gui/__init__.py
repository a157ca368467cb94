"""
GUI module for Acoustics GUI.

Uses PySide6 and pyqtgraph for presentation.
Strict separation from formatting logic - this module only contains widgets.
"""

from .main_window import MainWindow
from .frequency_range_pane import FrequencyRangeInformationPane
from .frequency_range_table import FrequencyRangeInformationTable
from .dithering_pane import DitheringPane
from .spl_range_pane import SplRangePane
from .tool_windows import DitheringWindow, SplRangeWindow

__all__ = [
    "MainWindow",
    "FrequencyRangeInformationPane",
    "FrequencyRangeInformationTable",
    "DitheringPane",
    "SplRangePane",
    "DitheringWindow",
    "SplRangeWindow",
]
