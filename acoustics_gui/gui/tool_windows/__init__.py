"""
Tool windows for prediction settings.
"""

from .base import ToolWindow
from .dithering_window import DitheringWindow
from .spl_range_window import SplRangeWindow

__all__ = ["ToolWindow", "DitheringWindow", "SplRangeWindow"]
