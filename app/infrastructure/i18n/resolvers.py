"""Language resolution logic for determining the active language.

Each signal source (URL path, stored preference, browser preference list)
produces a LanguageDetectionResult with a confidence score; the detector
combines them with a fixed precedence policy.
"""

from typing import Any, Optional, Sequence

import structlog
from infrastructure.events import EventChannel
from infrastructure.i18n.models import (
    DetectionContext,
    I18nConfig,
    Language,
    LanguageChangedEvent,
    LanguageDetectionResult,
    LanguageSource,
)
from infrastructure.i18n.routing import language_from_path
from infrastructure.logging import bind_request_context
from infrastructure.persistence import PreferenceStore

URL_MATCH_CONFIDENCE = 1.0
STORAGE_CONFIDENCE = 0.9
BROWSER_PRIMARY_CONFIDENCE = 0.8
BROWSER_SECONDARY_CONFIDENCE = 0.6
URL_FALLBACK_CONFIDENCE = 0.5
SEARCH_FALLBACK_CONFIDENCE = 0.3
NO_SIGNAL_CONFIDENCE = 0.0

# Results at or above this stop the comprehensive search
HIGH_CONFIDENCE = 0.9


class LanguageDetector:
    """Resolves the active language from ranked signal sources.

    Comprehensive detection order:
    1. Stored preference (0.9)
    2. Browser preference list (0.8 primary, 0.6 later in the list)
    3. Default language (0.0 with no signal, 0.3 after an unmatched search)

    URL detection is a separate path used for routing.

    Attributes:
        config: Supported/default/fallback languages and the storage key.
        preference_store: Persistent key-value store, or None when the
            environment has no persistent storage.
        channel: Channel receiving LanguageChangedEvent broadcasts.
    """

    def __init__(
        self,
        config: Optional[I18nConfig] = None,
        preference_store: Optional[PreferenceStore] = None,
        channel: Optional[EventChannel] = None,
    ):
        self.config = config or I18nConfig()
        self.preference_store = preference_store
        self.channel = channel or EventChannel("i18n")
        self.log = structlog.get_logger(
            component="i18n.resolver",
            default_language=self.config.default_language.value,
        )

    def _default_result(self, confidence: float) -> LanguageDetectionResult:
        return LanguageDetectionResult(
            language=self.config.default_language,
            source=LanguageSource.DEFAULT,
            confidence=confidence,
        )

    def detect_from_url(self, path: Optional[str]) -> LanguageDetectionResult:
        """Detect the language from a request path.

        Args:
            path: Request path (e.g., "/en/projects", "/").

        Returns:
            The first matching language at confidence 1.0, or the default
            language at 0.5 when no pattern matches.
        """
        language = language_from_path(path, self.config) if path else None
        if language is None:
            self.log.debug("no_language_in_path", path=path)
            return self._default_result(URL_FALLBACK_CONFIDENCE)
        return LanguageDetectionResult(
            language=language,
            source=LanguageSource.URL,
            confidence=URL_MATCH_CONFIDENCE,
        )

    def get_stored_preference(self) -> Optional[Language]:
        """Read the stored language preference.

        Returns:
            The stored Language, or None when there is no store, nothing is
            stored, the value is unsupported, or the read failed.
        """
        if self.preference_store is None:
            return None

        try:
            stored = self.preference_store.get(self.config.storage_key)
        except Exception as e:
            self.log.warning("preference_read_failed", error=str(e))
            return None

        language = self.config.resolve(stored)
        if stored is not None and language is None:
            self.log.warning("invalid_stored_preference", stored=stored)
        return language

    def persist_preference(self, language: Language) -> bool:
        """Store a language preference.

        Returns:
            True if the preference was written, False when there is no store
            or the write failed.
        """
        if self.preference_store is None:
            return False

        try:
            self.preference_store.set(self.config.storage_key, language.value)
        except Exception as e:
            self.log.warning(
                "preference_write_failed", language=language.value, error=str(e)
            )
            return False

        self.log.debug("preference_persisted", language=language.value)
        return True

    def detect_from_storage(self) -> LanguageDetectionResult:
        """Detect the language from the stored preference."""
        stored = self.get_stored_preference()
        if stored is None:
            return self._default_result(NO_SIGNAL_CONFIDENCE)
        return LanguageDetectionResult(
            language=stored,
            source=LanguageSource.STORAGE,
            confidence=STORAGE_CONFIDENCE,
        )

    def detect_from_browser(
        self, browser_languages: Optional[Sequence[str]]
    ) -> LanguageDetectionResult:
        """Detect the language from client-preferred language tags.

        Region suffixes are stripped ("es-PE" -> "es") and the first supported
        language in client order wins.

        Args:
            browser_languages: Tags in preference order, or None when there is
                no browser context.
        """
        if browser_languages is None:
            return self._default_result(NO_SIGNAL_CONFIDENCE)

        for index, tag in enumerate(browser_languages):
            language = self.config.resolve(str(tag).split("-")[0].strip().lower())
            if language is not None:
                return LanguageDetectionResult(
                    language=language,
                    source=LanguageSource.BROWSER,
                    confidence=(
                        BROWSER_PRIMARY_CONFIDENCE
                        if index == 0
                        else BROWSER_SECONDARY_CONFIDENCE
                    ),
                )

        self.log.debug("no_supported_browser_language", browser_languages=list(browser_languages))
        return self._default_result(SEARCH_FALLBACK_CONFIDENCE)

    def detect(self, context: Optional[DetectionContext] = None) -> LanguageDetectionResult:
        """Comprehensive detection across storage, browser and default.

        Keeps the highest-confidence result and stops at the first one at or
        above 0.9. A browser-derived winner is persisted as the stored
        preference, so the next call finds it through storage.

        Args:
            context: Request-scoped inputs. The path is not consulted here;
                use detect_from_url() for routing.

        Returns:
            The selected LanguageDetectionResult.
        """
        context = context or DetectionContext()
        sources = (
            self.detect_from_storage,
            lambda: self.detect_from_browser(context.browser_languages),
        )

        best = self._default_result(NO_SIGNAL_CONFIDENCE)
        for source in sources:
            result = source()
            if result.confidence > best.confidence:
                best = result
            if result.confidence >= HIGH_CONFIDENCE:
                break

        if best.source == LanguageSource.BROWSER:
            self.persist_preference(best.language)

        self.log.info(
            "language_detected",
            language=best.language.value,
            source=best.source.value,
            confidence=best.confidence,
        )
        return best

    def initialize_language(self, context: Optional[DetectionContext] = None) -> LanguageDetectionResult:
        """Run detection for a new page load or session and log the decision."""
        context = context or DetectionContext()
        with bind_request_context(request_path=context.path):
            result = self.detect(context)
            self.log.info(
                "language_initialized",
                language=result.language.value,
                source=result.source.value,
                confidence=result.confidence,
                browser_languages=(
                    list(context.browser_languages)
                    if context.browser_languages is not None
                    else "N/A"
                ),
            )
        return result

    def get_current_language(
        self,
        context: Optional[DetectionContext] = None,
        current: Optional[Language] = None,
    ) -> Language:
        """Return the caller's current language, detecting it when not known."""
        if current is not None:
            return current
        return self.detect(context).language

    def change_language(self, language: Any, current: Optional[Language] = None) -> None:
        """Switch to a language chosen by the user.

        Unsupported codes are logged and ignored: no preference is written and
        no event is broadcast. Otherwise the preference is persisted and a
        LanguageChangedEvent is dispatched on the channel.

        Args:
            language: Target language (Language or code).
            current: Language active before the switch. Defaults to the stored
                preference.
        """
        target = self.config.resolve(language)
        if target is None:
            self.log.warning(
                "unsupported_language",
                requested=getattr(language, "value", language),
            )
            return

        previous = current if current is not None else self.get_stored_preference()
        self.persist_preference(target)

        self.log.info(
            "language_changed",
            language=target.value,
            previous_language=previous.value if previous else None,
        )
        self.channel.dispatch(
            LanguageChangedEvent.create(target, previous_language=previous, source="user")
        )

    def is_language_switching_supported(self) -> bool:
        """Switching needs persistent storage and more than one language."""
        return (
            self.preference_store is not None
            and len(self.config.supported_languages) > 1
        )
