"""
Frequency range of an analyzed band.

A FrequencyRange is the value an acoustic response computation hands to
the information views: start, stop and center frequency in Hz plus the
relative bandwidth as a pre-formatted octave fraction ("1/3").

Band edges for a 1/n-octave band follow IEC 61260:
- Lower limit: fc / 2^(1/(2n))
- Upper limit: fc × 2^(1/(2n))
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np


class OctaveFraction(Enum):
    """Octave fraction of an analysis band."""
    OCTAVE = 1
    THIRD_OCTAVE = 3
    SIXTH_OCTAVE = 6
    TWELFTH_OCTAVE = 12
    
    @property
    def label(self) -> str:
        """Relative bandwidth label, e.g. "1" or "1/3"."""
        if self.value == 1:
            return "1"
        return f"1/{self.value}"


# IEC 61260-1:2014 nominal center frequencies for 1/3-octaves (in Hz)
IEC_61260_CENTER_FREQUENCIES = np.array([
    12.5, 16, 20,
    25, 31.5, 40, 50, 63, 80, 100, 125, 160, 200, 250,
    315, 400, 500, 630, 800, 1000, 1250, 1600, 2000, 2500,
    3150, 4000, 5000, 6300, 8000, 10000, 12500, 16000, 20000,
])


@dataclass(frozen=True)
class FrequencyRange:
    """
    Snapshot of one analyzed frequency band.
    
    Frequencies are in Hz. relative_bandwidth is displayed verbatim.
    """
    start_frequency: float
    stop_frequency: float
    relative_bandwidth: str
    center_frequency: float
    
    @classmethod
    def from_center(
        cls,
        center_frequency: float,
        fraction: Union[OctaveFraction, int] = OctaveFraction.THIRD_OCTAVE,
    ) -> "FrequencyRange":
        """
        Derive band edges for a 1/n-octave band around a center frequency.
        
        Args:
            center_frequency: Center frequency in Hz (> 0)
            fraction: Octave fraction (enum or its denominator)
            
        Returns:
            FrequencyRange with IEC 61260 band edges
        """
        if center_frequency <= 0:
            raise ValueError(
                f"Center frequency must be positive, got: {center_frequency}"
            )
        fraction = OctaveFraction(fraction)
        
        factor = 2 ** (1 / (2 * fraction.value))
        return cls(
            start_frequency=center_frequency / factor,
            stop_frequency=center_frequency * factor,
            relative_bandwidth=fraction.label,
            center_frequency=center_frequency,
        )
    
    @property
    def bandwidth(self) -> float:
        """Absolute bandwidth in Hz."""
        return self.stop_frequency - self.start_frequency
    
    def as_arguments(self) -> tuple[float, float, str, float]:
        """Positional arguments for set_frequency_range()."""
        return (
            self.start_frequency,
            self.stop_frequency,
            self.relative_bandwidth,
            self.center_frequency,
        )


def nearest_center_frequency(frequency: float) -> float:
    """
    Snap a frequency to the nearest IEC 61260 nominal center frequency.
    
    Distance is measured on a logarithmic axis, so 900 Hz snaps to 1000 Hz
    rather than 800 Hz.
    """
    if frequency <= 0:
        raise ValueError(f"Frequency must be positive, got: {frequency}")
    distances = np.abs(np.log2(IEC_61260_CENTER_FREQUENCIES / frequency))
    return float(IEC_61260_CENTER_FREQUENCIES[np.argmin(distances)])
