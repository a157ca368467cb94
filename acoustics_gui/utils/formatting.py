"""
Formatting functions for display.

Converts numeric values into locale-aware strings. All number formatting
goes through QLocale so grouping and decimal separators follow the
locale the caller configured.
"""

import math
import numbers
import re
from dataclasses import dataclass
from typing import Optional, Union

from PySide6.QtCore import QLocale

from ..errors import ConfigurationError, FormattingError


# Locale names that legitimately resolve to the "C" locale
_C_LOCALE_NAMES = ("C", "POSIX")

# Separates language, script and territory subtags
_SUBTAG_SEPARATOR = re.compile(r"[-_]")
_ENCODING_SEPARATOR = re.compile(r"[.@]")


@dataclass(frozen=True)
class NumberFormatOptions:
    """
    Precision and grouping policy for one formatting call.
    
    Passed by value to every call instead of being stored on a shared
    formatter, so no call can see another call's settings.
    """
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 3
    grouping: bool = True
    
    def __post_init__(self):
        if self.minimum_fraction_digits < 0:
            raise ValueError("minimum_fraction_digits must not be negative")
        if self.maximum_fraction_digits < self.minimum_fraction_digits:
            raise ValueError(
                "maximum_fraction_digits must be >= minimum_fraction_digits"
            )


# Start, stop and center frequencies: up to three digits for tightly
# spaced low frequencies
FREQUENCY_FORMAT = NumberFormatOptions(
    minimum_fraction_digits=0,
    maximum_fraction_digits=3,
)


def resolve_locale(locale: Union[str, QLocale, None]) -> QLocale:
    """
    Build a QLocale from a locale name or copy an existing one.
    
    Args:
        locale: BCP 47 or POSIX name ("en-US", "de_DE"), a QLocale,
            or None for the host default locale
        
    Returns:
        QLocale instance owned by the caller
        
    Raises:
        ConfigurationError: Name is empty, malformed or unknown to Qt
    """
    if locale is None:
        return QLocale()
    if isinstance(locale, QLocale):
        return QLocale(locale)
    if not isinstance(locale, str) or not locale.strip():
        raise ConfigurationError(f"Invalid locale: {locale!r}")
    
    name = locale.strip()
    if name.upper() in _C_LOCALE_NAMES:
        return QLocale.c()
    
    # Drop POSIX encoding and modifier ("en_US.UTF-8", "de_DE@euro")
    tag = _ENCODING_SEPARATOR.split(name, 1)[0]
    subtags = _SUBTAG_SEPARATOR.split(tag)
    qlocale = QLocale(tag)
    
    # Qt silently substitutes another locale for names it cannot parse,
    # so every subtag must survive the round trip
    language = QLocale.codeToLanguage(subtags[0])
    if language in (QLocale.Language.AnyLanguage, QLocale.Language.C) or (
        language != qlocale.language()
    ):
        raise ConfigurationError(f"Unsupported locale: {name!r}")
    
    for subtag in subtags[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            script = QLocale.codeToScript(subtag)
            if script == QLocale.Script.AnyScript or script != qlocale.script():
                raise ConfigurationError(f"Unsupported script in locale: {name!r}")
        elif (len(subtag) == 2 and subtag.isalpha()) or (len(subtag) == 3 and subtag.isdigit()):
            territory = QLocale.codeToTerritory(subtag)
            if territory == QLocale.Country.AnyTerritory or territory != qlocale.territory():
                raise ConfigurationError(f"Unsupported territory in locale: {name!r}")
    
    return qlocale


def format_number(
    value: float,
    locale: QLocale,
    options: NumberFormatOptions = FREQUENCY_FORMAT,
) -> str:
    """
    Format a number with locale separators and bounded fraction digits.
    
    Trailing zeros beyond options.minimum_fraction_digits are dropped, so
    1000.0 becomes "1,000" and 31.5 becomes "31.5" in en-US.
    
    Non-finite values: NaN -> "NaN", +inf -> "∞", -inf -> "-∞".
    
    Raises:
        FormattingError: value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise FormattingError(f"Cannot format non-numeric value: {value!r}")
    
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    
    digits = options.maximum_fraction_digits
    # Avoid "-0" for values that round to zero
    if round(value, digits) == 0:
        value = 0.0
    
    if not options.grouping:
        locale = QLocale(locale)
        locale.setNumberOptions(QLocale.NumberOption.OmitGroupSeparator)
    
    text = locale.toString(value, "f", digits)
    
    decimal_point = locale.decimalPoint()
    if digits > 0 and decimal_point in text:
        whole, fraction = text.rsplit(decimal_point, 1)
        keep = len(fraction.rstrip(locale.zeroDigit()))
        fraction = fraction[:max(keep, options.minimum_fraction_digits)]
        text = f"{whole}{decimal_point}{fraction}" if fraction else whole
    
    return text


def format_frequency(
    hz: float,
    locale: QLocale,
    options: NumberFormatOptions = FREQUENCY_FORMAT,
) -> str:
    """
    Format a frequency in Hz for an information label.
    
    Args:
        hz: Frequency in Hz
        locale: Locale for separators
        options: Precision policy (default: 0-3 fraction digits)
        
    Returns:
        Formatted number without units (e.g. "1,000" or "31.5")
    """
    return format_number(hz, locale, options)


def format_db(
    db: float,
    precision: int = 0,
    locale: Optional[QLocale] = None,
) -> str:
    """
    Format dB value.
    
    Args:
        db: Level in dB
        precision: Decimal places
        locale: Locale for separators (default: host locale)
        
    Returns:
        Formatted string (e.g. "-40 dB")
    """
    if db == float('-inf'):
        return "-∞ dB"
    if locale is None:
        locale = QLocale()
    options = NumberFormatOptions(
        minimum_fraction_digits=precision,
        maximum_fraction_digits=precision,
    )
    return f"{format_number(db, locale, options)} dB"
