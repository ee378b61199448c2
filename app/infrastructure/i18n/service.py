"""Translation service for dependency injection.

Provides one object exposing detection, translation and validation so
callers can inject (or mock) the whole i18n layer.
"""

from typing import Any, Dict, Optional

from infrastructure.events import EventHandler
from infrastructure.i18n.models import (
    LANGUAGE_CHANGED,
    DetectionContext,
    Language,
    LanguageDetectionResult,
)
from infrastructure.i18n.resolvers import LanguageDetector
from infrastructure.i18n.translator import TranslationFunction, Translator
from infrastructure.i18n.validation import TranslationValidator, ValidationResult


class I18nService:
    """Class-based i18n facade.

    A thin facade - the actual work is delegated to the Translator,
    LanguageDetector and TranslationValidator it wraps.

    Usage:
        service = create_i18n_service()

        result = service.detect(DetectionContext.from_accept_language("en-US,en;q=0.9"))
        t = service.t(result.language, namespace="hero")
        t("available")
    """

    def __init__(
        self,
        translator: Translator,
        detector: Optional[LanguageDetector] = None,
        validator: Optional[TranslationValidator] = None,
    ):
        self._translator = translator
        self._detector = detector or LanguageDetector()
        self._validator = validator or TranslationValidator(config=self._detector.config)

    def translate(
        self,
        key: str,
        language: Language,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Resolve a translation key; see Translator.translate."""
        return self._translator.translate(key, language, variables)

    def t(self, language: Language, namespace: Optional[str] = None) -> TranslationFunction:
        """Get a t(key) function bound to a language and optional namespace."""
        return self._translator.get_translation_function(language, namespace)

    def detect(self, context: Optional[DetectionContext] = None) -> LanguageDetectionResult:
        """Comprehensive detection; see LanguageDetector.detect."""
        return self._detector.detect(context)

    def detect_from_url(self, path: str) -> LanguageDetectionResult:
        """URL-only detection used for routing."""
        return self._detector.detect_from_url(path)

    def change_language(self, language: Any, current: Optional[Language] = None) -> None:
        """Switch language; unsupported codes are ignored."""
        self._detector.change_language(language, current=current)

    def subscribe(self, handler: EventHandler) -> EventHandler:
        """Register a listener for language change events."""
        return self._detector.channel.register_handler(LANGUAGE_CHANGED, handler)

    def unsubscribe(self, handler: EventHandler) -> bool:
        """Remove a language change listener."""
        return self._detector.channel.unregister_handler(LANGUAGE_CHANGED, handler)

    def validate(self, namespace: Optional[str] = None) -> ValidationResult:
        """Validate the loaded store, or a single top-level namespace of it."""
        if namespace is None:
            return self._validator.validate(self._translator.store)
        return self._validator.validate_namespace(self._translator.store, namespace)

    @property
    def translator(self) -> Translator:
        return self._translator

    @property
    def detector(self) -> LanguageDetector:
        return self._detector

    @property
    def validator(self) -> TranslationValidator:
        return self._validator
