"""
Frequency range display formatting.

Turns a frequency range into the four information lines shown by the
frequency range pane and table, and exported to PDF reports:

    Relative Bandwidth = 1/3 octave
    Center Frequency = 1,000
    Start Frequency = 891.251
    Stop Frequency = 1,122.462

Before any range is supplied (or after reset) every line reads
"<label> Not Available".
"""

import logging
from dataclasses import dataclass
from typing import Union

from PySide6.QtCore import QLocale

from ..errors import FormattingError
from ..utils.formatting import (
    FREQUENCY_FORMAT,
    NumberFormatOptions,
    format_frequency,
    resolve_locale,
)
from .frequency_range import FrequencyRange


logger = logging.getLogger(__name__)


# Static part of each information line
RELATIVE_BANDWIDTH_LABEL = "Relative Bandwidth"
CENTER_FREQUENCY_LABEL = "Center Frequency"
START_FREQUENCY_LABEL = "Start Frequency"
STOP_FREQUENCY_LABEL = "Stop Frequency"

BANDWIDTH_UNITS = " octave"
NOT_AVAILABLE = " Not Available"


@dataclass(frozen=True)
class FormattedLabels:
    """The four information lines, in display order."""
    relative_bandwidth: str
    center_frequency: str
    start_frequency: str
    stop_frequency: str
    
    @classmethod
    def placeholder(cls) -> "FormattedLabels":
        """Lines shown while no frequency range is available."""
        return cls(
            relative_bandwidth=RELATIVE_BANDWIDTH_LABEL + NOT_AVAILABLE,
            center_frequency=CENTER_FREQUENCY_LABEL + NOT_AVAILABLE,
            start_frequency=START_FREQUENCY_LABEL + NOT_AVAILABLE,
            stop_frequency=STOP_FREQUENCY_LABEL + NOT_AVAILABLE,
        )
    
    def as_records(self) -> tuple[str, str, str, str]:
        """Lines in fixed order: bandwidth, center, start, stop."""
        return (
            self.relative_bandwidth,
            self.center_frequency,
            self.start_frequency,
            self.stop_frequency,
        )


class FrequencyDisplayFormatter:
    """
    Formats frequency ranges into information lines for one locale.
    
    The QLocale is resolved once at construction; each update formats
    with an immutable NumberFormatOptions value and replaces the held
    FormattedLabels in a single assignment.
    
    Usage:
        formatter = FrequencyDisplayFormatter("en-US")
        formatter.set_frequency_range(31.5, 16000.0, "1/3", 1000.0)
        rows = formatter.export_records()
    
    Raises:
        ConfigurationError: locale is empty or unknown
    """
    
    def __init__(
        self,
        locale: Union[str, QLocale, None] = None,
        options: NumberFormatOptions = FREQUENCY_FORMAT,
    ):
        self.locale = resolve_locale(locale)
        self.options = options
        self._labels = FormattedLabels.placeholder()
    
    @classmethod
    def initialize(
        cls,
        locale: Union[str, QLocale, None] = None,
    ) -> "FrequencyDisplayFormatter":
        """Create a formatter bound to locale, in the reset state."""
        return cls(locale)
    
    @property
    def labels(self) -> FormattedLabels:
        """Current information lines."""
        return self._labels
    
    def reset(self) -> FormattedLabels:
        """Switch back to the "Not Available" lines."""
        self._labels = FormattedLabels.placeholder()
        logger.debug("Frequency range display reset")
        return self._labels
    
    def set_frequency_range(
        self,
        start_frequency: float,
        stop_frequency: float,
        relative_bandwidth: str,
        center_frequency: float,
    ) -> FormattedLabels:
        """
        Format a new frequency range and make it current.
        
        Args:
            start_frequency: Lower band edge in Hz
            stop_frequency: Upper band edge in Hz
            relative_bandwidth: Pre-formatted octave fraction, e.g. "1/3"
            center_frequency: Center frequency in Hz
            
        Returns:
            The new FormattedLabels
            
        Raises:
            FormattingError: a frequency is not a real number; the
                current lines are left unchanged
        """
        if not isinstance(relative_bandwidth, str):
            raise FormattingError(
                f"Relative bandwidth must be a string, got: {relative_bandwidth!r}"
            )
        
        s_start = format_frequency(start_frequency, self.locale, self.options)
        s_stop = format_frequency(stop_frequency, self.locale, self.options)
        s_center = format_frequency(center_frequency, self.locale, self.options)
        
        self._labels = FormattedLabels(
            relative_bandwidth=(
                f"{RELATIVE_BANDWIDTH_LABEL} = {relative_bandwidth}{BANDWIDTH_UNITS}"
            ),
            center_frequency=f"{CENTER_FREQUENCY_LABEL} = {s_center}",
            start_frequency=f"{START_FREQUENCY_LABEL} = {s_start}",
            stop_frequency=f"{STOP_FREQUENCY_LABEL} = {s_stop}",
        )
        logger.debug(
            "Frequency range updated: %s..%s Hz, center %s Hz, %s octave",
            s_start, s_stop, s_center, relative_bandwidth,
        )
        return self._labels
    
    def set_range(self, frequency_range: FrequencyRange) -> FormattedLabels:
        """Same as set_frequency_range() for a FrequencyRange value."""
        return self.set_frequency_range(*frequency_range.as_arguments())
    
    def export_records(self) -> tuple[str, str, str, str]:
        """Current lines for a report table: bandwidth, center, start, stop."""
        return self._labels.as_records()
