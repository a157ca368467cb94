"""
Utility module for Acoustics GUI.

Contains helper functions used by both Core and GUI.
"""

from .formatting import (
    NumberFormatOptions,
    FREQUENCY_FORMAT,
    resolve_locale,
    format_number,
    format_frequency,
    format_db,
)
from .colors import foreground_from_background, perceived_brightness

__all__ = [
    "NumberFormatOptions",
    "FREQUENCY_FORMAT",
    "resolve_locale",
    "format_number",
    "format_frequency",
    "format_db",
    "foreground_from_background",
    "perceived_brightness",
]
