"""Factory functions for creating i18n components.

Provides convenience functions for building the translator, detector,
validator and service facade from application settings.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import structlog
from infrastructure.events import EventChannel
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import I18nConfig
from infrastructure.i18n.resolvers import LanguageDetector
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.validation import TranslationValidator
from infrastructure.persistence import PreferenceStore, create_preference_store

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


def _get_settings(settings: Optional["Settings"]) -> "Settings":
    if settings is not None:
        return settings
    from infrastructure.configuration import settings as default_settings

    return default_settings


def default_translations_dir() -> Path:
    """Locate the app/locales directory shipped with the application."""
    # This file is at .../app/infrastructure/i18n/factory.py
    app_root = Path(__file__).resolve().parents[2]
    return app_root / "locales"


def create_translator(
    translations_dir: Path | None = None,
    settings: Optional["Settings"] = None,
    use_cache: bool = True,
) -> Translator:
    """Create a Translator over the YAML content of translations_dir.

    Args:
        translations_dir: Path to YAML translation files (default:
            settings.i18n.translations_dir, else auto-discovered app/locales).
        settings: Settings instance (default: module singleton).
        use_cache: Whether the loader caches parsed YAML.

    Raises:
        ValueError: If translations_dir does not exist or holds no files.
    """
    settings = _get_settings(settings)
    config = I18nConfig.from_settings(settings)

    if translations_dir is None:
        configured = settings.i18n.translations_dir
        translations_dir = Path(configured) if configured else default_translations_dir()

    loader = YAMLTranslationLoader(translations_dir=translations_dir, use_cache=use_cache)
    store = loader.load_all(fallback_language=config.fallback_language)
    logger.info(
        "translator_created",
        translations_dir=str(translations_dir),
        language_count=len(store.languages),
    )
    return Translator(store, fallback_language=config.fallback_language)


def create_language_detector(
    settings: Optional["Settings"] = None,
    preference_store: Optional[PreferenceStore] = None,
    channel: Optional[EventChannel] = None,
) -> LanguageDetector:
    """Create a LanguageDetector with the configured preference store.

    Args:
        settings: Settings instance (default: module singleton).
        preference_store: Explicit store; defaults to the one selected by
            settings.persistence.backend.
        channel: Channel for language change events (default: a new one).
    """
    settings = _get_settings(settings)
    if preference_store is None:
        preference_store = create_preference_store(settings)
    return LanguageDetector(
        config=I18nConfig.from_settings(settings),
        preference_store=preference_store,
        channel=channel,
    )


def create_i18n_service(
    settings: Optional["Settings"] = None,
    translations_dir: Path | None = None,
    preference_store: Optional[PreferenceStore] = None,
) -> I18nService:
    """Create the I18nService facade wired from settings."""
    settings = _get_settings(settings)
    return I18nService(
        translator=create_translator(translations_dir=translations_dir, settings=settings),
        detector=create_language_detector(settings=settings, preference_store=preference_store),
        validator=TranslationValidator.from_settings(settings),
    )
