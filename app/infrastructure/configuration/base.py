"""Base class for the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """One section of the configuration, read from the environment or .env.

    Fields declare their environment variable as an alias; passing the
    field name instead also works, which keeps test overrides readable.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
