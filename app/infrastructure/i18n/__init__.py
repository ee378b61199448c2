"""i18n system - language detection, translation resolution and validation.

Main components:
- models: Language, LanguageDetectionResult, DetectionContext, translation
  tree nodes, TranslationStore, I18nConfig
- loader: TranslationLoader and YAMLTranslationLoader
- routing: route pattern contract and localized URL helpers
- resolvers: LanguageDetector for ranked language detection
- translator: Translator with three-tier fallback, interpolate()
- validation: TranslationValidator and create_validation_report()
- service / factory: I18nService facade and settings-driven constructors
"""

from infrastructure.i18n.factory import (
    create_i18n_service,
    create_language_detector,
    create_translator,
)
from infrastructure.i18n.loader import (
    TranslationLoader,
    YAMLTranslationLoader,
    load_translation_store,
)
from infrastructure.i18n.models import (
    LANGUAGE_CHANGED,
    DetectionContext,
    I18nConfig,
    Language,
    LanguageChangedEvent,
    LanguageDetectionResult,
    LanguageSource,
    OpaqueValue,
    TranslationLeaf,
    TranslationNamespace,
    TranslationStore,
    build_translation_tree,
    parse_accept_language,
)
from infrastructure.i18n.resolvers import LanguageDetector
from infrastructure.i18n.routing import (
    build_language_url,
    get_localized_path,
    language_from_path,
)
from infrastructure.i18n.service import I18nService
from infrastructure.i18n.translator import (
    Translator,
    format_translation_key,
    interpolate,
    pluralize,
)
from infrastructure.i18n.validation import (
    LengthHeuristic,
    TranslationValidator,
    ValidationErrorType,
    ValidationResult,
    ValidationWarningType,
    create_validation_report,
)

__all__ = [
    "Language",
    "LanguageSource",
    "LanguageDetectionResult",
    "LanguageChangedEvent",
    "LANGUAGE_CHANGED",
    "DetectionContext",
    "I18nConfig",
    "TranslationLeaf",
    "TranslationNamespace",
    "OpaqueValue",
    "TranslationStore",
    "build_translation_tree",
    "parse_accept_language",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "load_translation_store",
    "LanguageDetector",
    "language_from_path",
    "build_language_url",
    "get_localized_path",
    "Translator",
    "interpolate",
    "format_translation_key",
    "pluralize",
    "TranslationValidator",
    "LengthHeuristic",
    "ValidationResult",
    "ValidationErrorType",
    "ValidationWarningType",
    "create_validation_report",
    "I18nService",
    "create_translator",
    "create_language_detector",
    "create_i18n_service",
]
