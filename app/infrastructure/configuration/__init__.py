"""Configuration for the portfolio i18n application (pydantic-settings).

Exports:
    settings: Process-wide Settings instance
    Settings: Settings class, for building isolated instances in tests
    I18nSettings: Language defaults, content location, validation thresholds
    PersistenceSettings: Preference store backend

Example:
    ```python
    from infrastructure.configuration import settings

    fallback = settings.i18n.fallback_language
    ```
"""

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    PersistenceSettings,
)
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "settings", "I18nSettings", "PersistenceSettings"]
