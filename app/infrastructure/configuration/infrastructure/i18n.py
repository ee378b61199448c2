"""Internationalization infrastructure settings."""

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

SUPPORTED_LANGUAGE_CODES = ("en", "es")


class I18nSettings(InfrastructureSettings):
    """Language selection and translation validation configuration.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when no signal resolves one (default: es)
        I18N_FALLBACK_LANGUAGE: Language retried when a key is missing (default: es)
        I18N_TRANSLATIONS_DIR: Directory holding <namespace>.<lang>.yml files
        I18N_PREFERENCE_STORAGE_KEY: Key under which the preferred language is stored
        I18N_LENGTH_RATIO_THRESHOLD: Longest/shortest ratio that triggers a warning
        I18N_LENGTH_MIN_LENGTH: Shortest value must exceed this before the ratio applies

    Example:
        ```python
        from infrastructure.configuration import settings

        default = settings.i18n.default_language
        ratio = settings.i18n.length_ratio_threshold
        ```
    """

    default_language: str = Field(
        default="es",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language used when detection finds no usable signal",
    )
    fallback_language: str = Field(
        default="es",
        alias="I18N_FALLBACK_LANGUAGE",
        description="Baseline language for fallback lookups and validation",
    )
    translations_dir: str | None = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Override for the auto-discovered app/locales directory",
    )
    preference_storage_key: str = Field(
        default="portfolio_preferred_language",
        alias="I18N_PREFERENCE_STORAGE_KEY",
    )
    length_ratio_threshold: float = Field(
        default=3.0,
        alias="I18N_LENGTH_RATIO_THRESHOLD",
        gt=1.0,
    )
    length_min_length: int = Field(
        default=10,
        alias="I18N_LENGTH_MIN_LENGTH",
        ge=0,
    )

    @field_validator("default_language", "fallback_language", mode="before")
    @classmethod
    def validate_language(cls, v: str) -> str:
        """Normalize and check a language code against the supported set."""
        code = str(v).strip().lower()
        if code not in SUPPORTED_LANGUAGE_CODES:
            raise ValueError(
                f"Unsupported language '{v}', expected one of {SUPPORTED_LANGUAGE_CODES}"
            )
        return code
