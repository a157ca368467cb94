"""
Client properties and user preferences.

Persisted through QSettings so they follow the platform conventions
(registry, plist or INI file). Tests pass an INI-backed QSettings.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from PySide6.QtCore import QLocale, QSettings, QSysInfo

from ..errors import ConfigurationError
from ..utils.formatting import resolve_locale


logger = logging.getLogger(__name__)


ORGANIZATION_NAME = "AcousticsGui"
APPLICATION_NAME = "AcousticsGui"

# Dithering amount in percent
DITHERING_AMOUNT_MIN = 0.0
DITHERING_AMOUNT_MAX = 100.0
DITHERING_AMOUNT_DEFAULT = 10.0

# SPL range in dB
SPL_RANGE_DB_MIN = 10
SPL_RANGE_DB_MAX = 60
SPL_RANGE_DB_MAX_EXTENDED = 120
SPL_RANGE_DB_STEP = 5
SPL_RANGE_DB_DEFAULT = 40


def default_settings() -> QSettings:
    """Application-wide QSettings store."""
    return QSettings(ORGANIZATION_NAME, APPLICATION_NAME)


@dataclass
class ClientProperties:
    """
    Per-client environment shared by all views.
    
    Attributes:
        locale_name: Locale for number formatting (e.g. "en_US")
        system_type: Operating system identifier from QSysInfo
    """
    locale_name: str = field(default_factory=lambda: QLocale.system().name())
    system_type: str = field(default_factory=QSysInfo.productType)
    
    @property
    def locale(self) -> QLocale:
        """Resolved QLocale; raises ConfigurationError for unknown names."""
        return resolve_locale(self.locale_name)
    
    @classmethod
    def load(cls, settings: Optional[QSettings] = None) -> "ClientProperties":
        """
        Load client properties, validating the stored locale.
        
        Raises:
            ConfigurationError: Stored locale is not usable
        """
        if settings is None:
            settings = default_settings()
        
        locale_name = settings.value("client/locale", QLocale.system().name(), type=str)
        # Fail at load time rather than on first formatting call
        resolve_locale(locale_name)
        properties = cls(locale_name=locale_name)
        logger.debug("Client properties loaded: locale=%s", locale_name)
        return properties
    
    def save(self, settings: Optional[QSettings] = None) -> None:
        """Persist the locale name."""
        if settings is None:
            settings = default_settings()
        settings.setValue("client/locale", self.locale_name)


@dataclass
class Preferences:
    """Dithering and SPL range preferences restored into the tool windows."""
    use_dithering: bool = True
    dithering_amount: float = DITHERING_AMOUNT_DEFAULT
    auto_range_spl: bool = True
    spl_range_db: int = SPL_RANGE_DB_DEFAULT
    
    def __post_init__(self):
        if not DITHERING_AMOUNT_MIN <= self.dithering_amount <= DITHERING_AMOUNT_MAX:
            raise ConfigurationError(
                f"Dithering amount out of range: {self.dithering_amount}"
            )
        if not SPL_RANGE_DB_MIN <= self.spl_range_db <= SPL_RANGE_DB_MAX_EXTENDED:
            raise ConfigurationError(
                f"SPL range out of range: {self.spl_range_db} dB"
            )
    
    @classmethod
    def load(cls, settings: Optional[QSettings] = None) -> "Preferences":
        """
        Load preferences, falling back to defaults for missing keys.
        
        Raises:
            ConfigurationError: A stored value is outside its valid range
        """
        if settings is None:
            settings = default_settings()
        
        return cls(
            use_dithering=settings.value("dithering/enabled", True, type=bool),
            dithering_amount=settings.value(
                "dithering/amount", DITHERING_AMOUNT_DEFAULT, type=float
            ),
            auto_range_spl=settings.value("spl/auto_range", True, type=bool),
            spl_range_db=settings.value("spl/range_db", SPL_RANGE_DB_DEFAULT, type=int),
        )
    
    def save(self, settings: Optional[QSettings] = None) -> None:
        """Write all preferences."""
        if settings is None:
            settings = default_settings()
        
        settings.setValue("dithering/enabled", self.use_dithering)
        settings.setValue("dithering/amount", self.dithering_amount)
        settings.setValue("spl/auto_range", self.auto_range_spl)
        settings.setValue("spl/range_db", self.spl_range_db)
        settings.sync()
        logger.info("Preferences saved to %s", settings.fileName())
