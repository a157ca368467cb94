"""
Tests for frequency range values and IEC 61260 band edges.
"""

import pytest
import numpy as np

from acoustics_gui.core.frequency_range import (
    FrequencyRange,
    OctaveFraction,
    IEC_61260_CENTER_FREQUENCIES,
    nearest_center_frequency,
)


class TestOctaveFraction:
    """Tests for octave fraction labels."""
    
    def test_labels(self):
        assert OctaveFraction.OCTAVE.label == "1"
        assert OctaveFraction.THIRD_OCTAVE.label == "1/3"
        assert OctaveFraction.TWELFTH_OCTAVE.label == "1/12"


class TestFromCenter:
    """Tests for band edge derivation."""
    
    def test_third_octave_edges(self):
        fr = FrequencyRange.from_center(1000.0, OctaveFraction.THIRD_OCTAVE)
        
        assert fr.start_frequency == pytest.approx(1000 / 2 ** (1/6))
        assert fr.stop_frequency == pytest.approx(1000 * 2 ** (1/6))
        assert fr.center_frequency == 1000.0
        assert fr.relative_bandwidth == "1/3"
    
    def test_octave_edges(self):
        fr = FrequencyRange.from_center(1000.0, 1)
        
        assert fr.start_frequency == pytest.approx(707.107, rel=1e-5)
        assert fr.stop_frequency == pytest.approx(1414.214, rel=1e-5)
        assert fr.relative_bandwidth == "1"
    
    def test_center_is_geometric_mean(self):
        fr = FrequencyRange.from_center(250.0, OctaveFraction.SIXTH_OCTAVE)
        assert np.sqrt(fr.start_frequency * fr.stop_frequency) == pytest.approx(250.0)
    
    def test_bandwidth(self):
        """Third-octave bandwidth ≈ 0.2316 × fc."""
        fr = FrequencyRange.from_center(1000.0, OctaveFraction.THIRD_OCTAVE)
        assert fr.bandwidth == pytest.approx(1000 * (2**(1/6) - 2**(-1/6)))
    
    @pytest.mark.parametrize("center", [0.0, -100.0])
    def test_non_positive_center(self, center):
        with pytest.raises(ValueError):
            FrequencyRange.from_center(center)
    
    def test_invalid_fraction(self):
        with pytest.raises(ValueError):
            FrequencyRange.from_center(1000.0, 5)
    
    def test_as_arguments_order(self):
        fr = FrequencyRange(100.0, 200.0, "1", 141.0)
        assert fr.as_arguments() == (100.0, 200.0, "1", 141.0)
    
    def test_immutable(self):
        fr = FrequencyRange(100.0, 200.0, "1", 141.0)
        with pytest.raises(AttributeError):
            fr.center_frequency = 150.0


class TestNearestCenterFrequency:
    """Tests for snapping to nominal center frequencies."""
    
    def test_exact(self):
        for fc in IEC_61260_CENTER_FREQUENCIES:
            assert nearest_center_frequency(float(fc)) == fc
    
    def test_logarithmic_distance(self):
        assert nearest_center_frequency(900.0) == 1000.0
        assert nearest_center_frequency(30.0) == 31.5
    
    def test_out_of_table(self):
        assert nearest_center_frequency(5.0) == 12.5
        assert nearest_center_frequency(30000.0) == 20000.0
    
    def test_non_positive(self):
        with pytest.raises(ValueError):
            nearest_center_frequency(0.0)
