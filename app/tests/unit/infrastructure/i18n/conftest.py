"""Feature-level fixtures for i18n system tests.

Provides specific stores and fixtures for detection and translation scenarios.
"""

from unittest.mock import MagicMock

import pytest
import yaml

from infrastructure.events import EventChannel
from infrastructure.i18n import (
    I18nConfig,
    LanguageDetector,
    Translator,
    YAMLTranslationLoader,
)
from infrastructure.persistence import InMemoryPreferenceStore
from tests.factories.i18n import make_translation_store


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - hero.en.yml
    - hero.es.yml
    - navigation.en.yml
    - navigation.es.yml
    """
    files = {
        "hero.en.yml": {
            "hero": {
                "available": "Available for work",
                "cta": {"contact": "Contact me"},
            }
        },
        "hero.es.yml": {
            "hero": {
                "available": "Disponible para trabajar",
                "cta": {"contact": "Contáctame"},
            }
        },
        "navigation.en.yml": {"nav": {"projects": "Projects", "contact": "Contact"}},
        "navigation.es.yml": {"nav": {"projects": "Proyectos", "contact": "Contacto"}},
    }
    for name, content in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.safe_dump(content, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def i18n_config():
    """Default configuration: Spanish default and fallback, en/es supported."""
    return I18nConfig()


@pytest.fixture
def translation_store():
    return make_translation_store()


@pytest.fixture
def translator(translation_store):
    return Translator(translation_store)


@pytest.fixture
def preference_store():
    return InMemoryPreferenceStore()


@pytest.fixture
def failing_preference_store():
    """Preference store whose reads and writes always raise."""
    store = MagicMock()
    store.get.side_effect = OSError("storage unavailable")
    store.set.side_effect = OSError("storage unavailable")
    return store


@pytest.fixture
def event_channel():
    return EventChannel("test")


@pytest.fixture
def detector(i18n_config, preference_store, event_channel):
    return LanguageDetector(
        config=i18n_config,
        preference_store=preference_store,
        channel=event_channel,
    )


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,es;q=0.8",
        "spanish_first": "es-PE,es;q=0.9,en-US;q=0.8",
        "unsupported_first": "de-DE,de;q=0.9,en;q=0.8",
        "wildcard": "fr-FR,*;q=0.8",
        "invalid_quality": "en;q=invalid,es",
    }
