"""
Exceptions raised by the acoustics_gui package.
"""


class AcousticsGuiError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(AcousticsGuiError):
    """Locale or settings could not be turned into a usable configuration."""


class FormattingError(AcousticsGuiError):
    """A value could not be formatted for display."""
