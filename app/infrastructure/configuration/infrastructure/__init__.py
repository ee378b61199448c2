"""Settings sections, one module per concern."""

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.infrastructure.persistence import (
    PersistenceSettings,
)

__all__ = ["I18nSettings", "PersistenceSettings"]
