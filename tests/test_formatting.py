"""
Tests for locale-aware formatting and color helpers.
"""

import pytest
import numpy as np
from PySide6.QtCore import QLocale
from PySide6.QtGui import QColor

from acoustics_gui.errors import ConfigurationError, FormattingError
from acoustics_gui.utils.colors import foreground_from_background, perceived_brightness
from acoustics_gui.utils.formatting import (
    NumberFormatOptions,
    format_db,
    format_frequency,
    format_number,
    resolve_locale,
)


@pytest.fixture
def en_us():
    return resolve_locale("en-US")


class TestResolveLocale:
    """Tests for locale resolution."""
    
    def test_bcp47_and_posix_names(self):
        assert resolve_locale("en-US").name() == "en_US"
        assert resolve_locale("de_DE").name() == "de_DE"
    
    def test_c_locale(self):
        assert resolve_locale("C").language() == QLocale.Language.C
    
    def test_qlocale_is_copied(self):
        original = QLocale("fr_FR")
        resolved = resolve_locale(original)
        
        assert resolved == original
        assert resolved is not original
    
    def test_none_is_default_locale(self):
        assert resolve_locale(None) == QLocale()
    
    @pytest.mark.parametrize("name", ["", "xx-YY", "qq", "no such locale"])
    def test_unknown(self, name):
        with pytest.raises(ConfigurationError):
            resolve_locale(name)
    
    @pytest.mark.parametrize("name, language", [
        ("no", QLocale.Language.NorwegianBokmal),
        ("iw", QLocale.Language.Hebrew),
        ("tl", QLocale.codeToLanguage("tl")),
        ("de_DE.UTF-8", QLocale.Language.German),
    ])
    def test_language_aliases(self, name, language):
        assert resolve_locale(name).language() == language
    
    @pytest.mark.parametrize("name", ["de-ZZ", "en_XX", "en-Qqqq-US"])
    def test_unknown_territory_or_script(self, name):
        with pytest.raises(ConfigurationError):
            resolve_locale(name)
    
    def test_territory_must_match(self):
        assert resolve_locale("de_AT").territory() == QLocale.Country.Austria
        assert resolve_locale("zh-Hant-TW").script() == QLocale.Script.TraditionalChineseScript


class TestFormatNumber:
    """Tests for format_number()."""
    
    def test_grouping(self, en_us):
        assert format_number(1234567.0, en_us) == "1,234,567"
    
    def test_rounding(self, en_us):
        assert format_number(0.0006, en_us) == "0.001"
        assert format_number(2.9999, en_us) == "3"
    
    def test_minimum_fraction_digits(self, en_us):
        options = NumberFormatOptions(minimum_fraction_digits=2, maximum_fraction_digits=3)
        
        assert format_number(5.0, en_us, options) == "5.00"
        assert format_number(5.1234, en_us, options) == "5.123"
    
    def test_zero_fraction_digits(self, en_us):
        options = NumberFormatOptions(minimum_fraction_digits=0, maximum_fraction_digits=0)
        assert format_number(1500.4, en_us, options) == "1,500"
    
    def test_without_grouping(self, en_us):
        options = NumberFormatOptions(grouping=False)
        assert format_number(16000.0, en_us, options) == "16000"
        # The caller's locale is not modified
        assert format_number(16000.0, en_us) == "16,000"
    
    def test_integers_and_numpy(self, en_us):
        assert format_number(1000, en_us) == "1,000"
        assert format_number(np.float64(31.5), en_us) == "31.5"
    
    @pytest.mark.parametrize("value", ["1", None, True, [1.0]])
    def test_non_numeric(self, en_us, value):
        with pytest.raises(FormattingError):
            format_number(value, en_us)
    
    def test_invalid_options(self):
        with pytest.raises(ValueError):
            NumberFormatOptions(minimum_fraction_digits=3, maximum_fraction_digits=1)
        with pytest.raises(ValueError):
            NumberFormatOptions(minimum_fraction_digits=-1)
    
    def test_format_frequency(self, en_us):
        assert format_frequency(1122.462048, en_us) == "1,122.462"


class TestFormatDb:
    """Tests for format_db()."""
    
    def test_integer_db(self, en_us):
        assert format_db(-40, locale=en_us) == "-40 dB"
    
    def test_precision(self, en_us):
        assert format_db(-12.345, precision=1, locale=en_us) == "-12.3 dB"
    
    def test_minus_infinity(self):
        assert format_db(float("-inf")) == "-∞ dB"


class TestColors:
    """Tests for foreground color selection."""
    
    def test_white_background(self):
        assert foreground_from_background(QColor(255, 255, 255)) == QColor(0, 0, 0)
    
    def test_black_background(self):
        assert foreground_from_background(QColor(0, 0, 0)) == QColor(255, 255, 255)
    
    def test_dark_blue_background(self):
        assert foreground_from_background(QColor("#1a1a2e")) == QColor(255, 255, 255)
    
    def test_yellow_background(self):
        assert foreground_from_background(QColor(255, 255, 0)) == QColor(0, 0, 0)
    
    def test_brightness_range(self):
        assert perceived_brightness(QColor(0, 0, 0)) == pytest.approx(0.0)
        assert perceived_brightness(QColor(255, 255, 255)) == pytest.approx(1.0)
