"""Top-level Settings object combining every configuration section."""

from typing import Any, Dict, Type

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.infrastructure import (
    I18nSettings,
    PersistenceSettings,
)

SECTIONS: Dict[str, Type[BaseSettings]] = {
    "i18n": I18nSettings,
    "persistence": PersistenceSettings,
}


class Settings(BaseSettings):
    """Application configuration.

    Environment Variables:
        PREFIX: Deployment prefix; empty means production
        LOG_LEVEL: Root log level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Commit the running build came from, stamped on log entries

    Sections (each reads its own variables, see their classes):
        i18n: I18nSettings
        persistence: PersistenceSettings

    Example:
        ```python
        from infrastructure.configuration import settings

        if settings.persistence.backend == "none":
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    i18n: I18nSettings
    persistence: PersistenceSettings

    @property
    def is_production(self) -> bool:
        """Production deployments run without a PREFIX."""
        return not self.PREFIX

    def __init__(self, **overrides: Any):
        # Sections not passed explicitly are read from the environment
        for name, section_class in SECTIONS.items():
            if name not in overrides:
                overrides[name] = section_class()
        super().__init__(**overrides)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
