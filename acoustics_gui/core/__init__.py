"""
Core module - formatting and configuration, testable without widgets.

This module contains all non-presentation logic:
- Frequency range values and IEC 61260 band edges
- Frequency range display formatting
- Client properties and preferences
"""

from .frequency_range import (
    FrequencyRange,
    OctaveFraction,
    IEC_61260_CENTER_FREQUENCIES,
    nearest_center_frequency,
)
from .frequency_display import FrequencyDisplayFormatter, FormattedLabels
from .settings import ClientProperties, Preferences

__all__ = [
    "FrequencyRange",
    "OctaveFraction",
    "IEC_61260_CENTER_FREQUENCIES",
    "nearest_center_frequency",
    "FrequencyDisplayFormatter",
    "FormattedLabels",
    "ClientProperties",
    "Preferences",
]
