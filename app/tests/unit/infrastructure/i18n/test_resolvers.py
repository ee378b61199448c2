"""Tests for infrastructure.i18n.resolvers module."""

import pytest

from infrastructure.events import EventChannel
from infrastructure.i18n import (
    LANGUAGE_CHANGED,
    DetectionContext,
    I18nConfig,
    Language,
    LanguageDetector,
    LanguageSource,
)
from infrastructure.i18n.resolvers import (
    BROWSER_PRIMARY_CONFIDENCE,
    BROWSER_SECONDARY_CONFIDENCE,
    NO_SIGNAL_CONFIDENCE,
    SEARCH_FALLBACK_CONFIDENCE,
    STORAGE_CONFIDENCE,
    URL_FALLBACK_CONFIDENCE,
    URL_MATCH_CONFIDENCE,
)
from infrastructure.persistence import InMemoryPreferenceStore
from tests.factories.i18n import make_detection_context

pytestmark = pytest.mark.unit

STORAGE_KEY = "portfolio_preferred_language"


class TestDetectFromUrl:
    """Tests for LanguageDetector.detect_from_url()."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/en", Language.EN),
            ("/en/projects", Language.EN),
            ("/es/projects", Language.ES),
            ("/", Language.ES),
        ],
    )
    def test_matching_path(self, detector, path, expected):
        result = detector.detect_from_url(path)
        assert result.language == expected
        assert result.source == LanguageSource.URL
        assert result.confidence == URL_MATCH_CONFIDENCE

    @pytest.mark.parametrize("path", ["/projects", "/fr", "", None])
    def test_no_match_falls_back_to_default(self, detector, path):
        result = detector.detect_from_url(path)
        assert result.language == Language.ES
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == URL_FALLBACK_CONFIDENCE


class TestDetectFromStorage:
    """Tests for stored preference detection."""

    def test_stored_preference(self, detector, preference_store):
        preference_store.set(STORAGE_KEY, "en")
        result = detector.detect_from_storage()
        assert result.language == Language.EN
        assert result.source == LanguageSource.STORAGE
        assert result.confidence == STORAGE_CONFIDENCE

    def test_nothing_stored(self, detector):
        result = detector.detect_from_storage()
        assert result.language == Language.ES
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == NO_SIGNAL_CONFIDENCE

    @pytest.mark.parametrize("stored", ["fr", "EN", "en-US", "", "deu", "spa"])
    def test_invalid_stored_value_is_ignored(self, detector, preference_store, stored):
        """Only exact supported codes count as a stored preference."""
        preference_store.set(STORAGE_KEY, stored)
        assert detector.get_stored_preference() is None
        assert detector.detect_from_storage().source == LanguageSource.DEFAULT

    def test_storage_read_failure(self, i18n_config, failing_preference_store):
        """A failing store reads as absent instead of raising."""
        detector = LanguageDetector(
            config=i18n_config, preference_store=failing_preference_store
        )
        assert detector.get_stored_preference() is None
        result = detector.detect_from_storage()
        assert result.confidence == NO_SIGNAL_CONFIDENCE

    def test_no_preference_store(self, i18n_config):
        detector = LanguageDetector(config=i18n_config)
        assert detector.get_stored_preference() is None
        assert detector.persist_preference(Language.EN) is False

    def test_persist_preference(self, detector, preference_store):
        assert detector.persist_preference(Language.EN) is True
        assert preference_store.get(STORAGE_KEY) == "en"

    def test_persist_preference_failure(self, i18n_config, failing_preference_store):
        detector = LanguageDetector(
            config=i18n_config, preference_store=failing_preference_store
        )
        assert detector.persist_preference(Language.EN) is False


class TestDetectFromBrowser:
    """Tests for browser preference detection."""

    def test_primary_language(self, detector):
        result = detector.detect_from_browser(["en-US", "en", "es"])
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER
        assert result.confidence == BROWSER_PRIMARY_CONFIDENCE

    def test_region_suffix_stripped(self, detector):
        result = detector.detect_from_browser(["es-PE"])
        assert result.language == Language.ES
        assert result.confidence == BROWSER_PRIMARY_CONFIDENCE

    def test_secondary_language(self, detector):
        """A match later in the list scores lower than the first entry."""
        result = detector.detect_from_browser(["de-DE", "de", "en"])
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER
        assert result.confidence == BROWSER_SECONDARY_CONFIDENCE

    def test_no_supported_language(self, detector):
        result = detector.detect_from_browser(["de-DE", "fr"])
        assert result.language == Language.ES
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == SEARCH_FALLBACK_CONFIDENCE

    @pytest.mark.parametrize("tag", ["deu", "spa", "eng"])
    def test_three_letter_codes_are_unsupported(self, detector, tag):
        result = detector.detect_from_browser([tag])
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == SEARCH_FALLBACK_CONFIDENCE

    def test_empty_list_was_searched(self, detector):
        result = detector.detect_from_browser([])
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == SEARCH_FALLBACK_CONFIDENCE

    def test_no_browser_context(self, detector):
        result = detector.detect_from_browser(None)
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == NO_SIGNAL_CONFIDENCE


class TestDetect:
    """Tests for comprehensive detection."""

    def test_no_signals(self, detector):
        """Default language at zero confidence when nothing is known."""
        result = detector.detect()
        assert result.language == Language.ES
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == NO_SIGNAL_CONFIDENCE

    def test_storage_beats_browser(self, detector, preference_store):
        preference_store.set(STORAGE_KEY, "en")
        result = detector.detect(make_detection_context(browser_languages=["es-PE"]))
        assert result.language == Language.EN
        assert result.source == LanguageSource.STORAGE
        assert preference_store.get(STORAGE_KEY) == "en"

    def test_browser_winner_is_persisted(self, detector, preference_store):
        result = detector.detect(make_detection_context(browser_languages=["en-US"]))
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER
        assert preference_store.get(STORAGE_KEY) == "en"

        # The next cycle finds the persisted preference
        again = detector.detect()
        assert again.language == Language.EN
        assert again.source == LanguageSource.STORAGE

    def test_unmatched_browser_list(self, detector, preference_store):
        """Default at 0.3 after an unmatched search; nothing is persisted."""
        result = detector.detect(make_detection_context(browser_languages=["de"]))
        assert result.language == Language.ES
        assert result.source == LanguageSource.DEFAULT
        assert result.confidence == SEARCH_FALLBACK_CONFIDENCE
        assert preference_store.get(STORAGE_KEY) is None

    def test_invalid_stored_value_falls_through_to_browser(
        self, detector, preference_store
    ):
        preference_store.set(STORAGE_KEY, "fr")
        result = detector.detect(make_detection_context(browser_languages=["en"]))
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER
        assert preference_store.get(STORAGE_KEY) == "en"

    def test_storage_failure_falls_through_to_browser(
        self, i18n_config, failing_preference_store
    ):
        detector = LanguageDetector(
            config=i18n_config, preference_store=failing_preference_store
        )
        result = detector.detect(make_detection_context(browser_languages=["en"]))
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER

    def test_path_is_not_consulted(self, detector):
        """Comprehensive detection ignores the URL; routing uses detect_from_url()."""
        result = detector.detect(make_detection_context(path="/en/projects"))
        assert result.source == LanguageSource.DEFAULT
        assert result.language == Language.ES

    def test_url_and_storage_answer_different_questions(self, detector, preference_store):
        """An English URL does not override a stored Spanish preference in detect()."""
        preference_store.set(STORAGE_KEY, "es")
        context = make_detection_context(path="/en/projects", browser_languages=["en"])

        from_url = detector.detect_from_url(context.path)
        assert from_url.language == Language.EN
        assert from_url.source == LanguageSource.URL

        detected = detector.detect(context)
        assert detected.language == Language.ES
        assert detected.source == LanguageSource.STORAGE

    def test_default_follows_config(self, preference_store):
        detector = LanguageDetector(
            config=I18nConfig(default_language=Language.EN),
            preference_store=preference_store,
        )
        assert detector.detect().language == Language.EN

    def test_initialize_language(self, detector):
        context = DetectionContext.from_accept_language("en-US,en;q=0.9", path="/")
        result = detector.initialize_language(context)
        assert result.language == Language.EN
        assert result.source == LanguageSource.BROWSER

    def test_initialize_language_without_context(self, detector):
        assert detector.initialize_language().source == LanguageSource.DEFAULT


class TestGetCurrentLanguage:
    """Tests for get_current_language()."""

    def test_known_current_language(self, detector):
        assert detector.get_current_language(current=Language.EN) == Language.EN

    def test_detects_when_unknown(self, detector, preference_store):
        preference_store.set(STORAGE_KEY, "en")
        assert detector.get_current_language() == Language.EN


class TestChangeLanguage:
    """Tests for change_language()."""

    @pytest.fixture
    def received(self, event_channel):
        events = []
        event_channel.register_handler(LANGUAGE_CHANGED, events.append)
        return events

    def test_persists_and_notifies(self, detector, preference_store, received):
        detector.change_language(Language.EN)
        assert preference_store.get(STORAGE_KEY) == "en"
        assert len(received) == 1
        assert received[0].language == Language.EN
        assert received[0].previous_language is None
        assert received[0].source == "user"

    def test_accepts_codes(self, detector, preference_store, received):
        detector.change_language("en")
        assert preference_store.get(STORAGE_KEY) == "en"
        assert received[0].language == Language.EN

    def test_previous_language_from_storage(self, detector, preference_store, received):
        preference_store.set(STORAGE_KEY, "es")
        detector.change_language(Language.EN)
        assert received[0].previous_language == Language.ES

    def test_previous_language_from_argument(self, detector, received):
        detector.change_language(Language.EN, current=Language.ES)
        assert received[0].previous_language == Language.ES

    @pytest.mark.parametrize("language", ["fr", "EN", "deu", "spa", None, 3])
    def test_unsupported_language_is_ignored(
        self, detector, preference_store, received, language
    ):
        """No write and no event for unsupported input."""
        detector.change_language(language)
        assert preference_store.get(STORAGE_KEY) is None
        assert received == []

    def test_notifies_without_preference_store(self, i18n_config):
        channel = EventChannel("test")
        received = []
        channel.register_handler(LANGUAGE_CHANGED, received.append)
        detector = LanguageDetector(config=i18n_config, channel=channel)

        detector.change_language(Language.EN)

        assert [event.language for event in received] == [Language.EN]

    def test_failing_listener_does_not_propagate(self, detector, event_channel, received):
        def broken(event):
            raise RuntimeError("listener failed")

        event_channel.register_handler(LANGUAGE_CHANGED, broken)
        event_channel.register_handler(LANGUAGE_CHANGED, received.append)

        detector.change_language(Language.EN)

        # "received" is registered before and after the failing listener
        assert len(received) == 2

    def test_failing_storage_still_notifies(
        self, i18n_config, failing_preference_store, event_channel, received
    ):
        detector = LanguageDetector(
            config=i18n_config,
            preference_store=failing_preference_store,
            channel=event_channel,
        )
        detector.change_language(Language.EN)
        assert len(received) == 1


class TestLanguageSwitchingSupport:
    """Tests for is_language_switching_supported()."""

    def test_supported_with_storage(self, detector):
        assert detector.is_language_switching_supported() is True

    def test_unsupported_without_storage(self, i18n_config):
        assert LanguageDetector(config=i18n_config).is_language_switching_supported() is False

    def test_unsupported_with_single_language(self):
        detector = LanguageDetector(
            config=I18nConfig(supported_languages=(Language.ES,)),
            preference_store=InMemoryPreferenceStore(),
        )
        assert detector.is_language_switching_supported() is False

    def test_default_channel(self, i18n_config):
        detector = LanguageDetector(config=i18n_config)
        assert isinstance(detector.channel, EventChannel)
