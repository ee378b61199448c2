"""Translation models for i18n system.

Defines the supported languages, detection results, the recursive translation
tree and the translation store consumed by the resolver and the validator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from infrastructure.events.models import Event

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


class Language(str, Enum):
    """Supported language codes (ISO 639-1).

    The set is closed: adding a language means adding a member here and
    shipping content for it.
    """

    EN = "en"
    ES = "es"

    @classmethod
    def from_string(cls, code: str) -> "Language":
        """Convert an exact language code to a Language.

        Args:
            code: Language code (e.g., "en", "es").

        Returns:
            Matching Language value.

        Raises:
            ValueError: If the code is not supported.
        """
        try:
            return cls(code)
        except ValueError as e:
            raise ValueError(f"Unsupported language: {code}") from e

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Language"]:
        """Leniently map a language tag to a Language.

        Case-insensitive, and any region suffix is stripped ("en-US" -> "en").

        Returns:
            Matching Language, or None if the tag names an unsupported language.
        """
        if not code:
            return None
        primary = str(code).strip().split("-")[0].lower()
        try:
            return cls(primary)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Display name of the language in its own language."""
        return LANGUAGE_LABELS[self]

    @property
    def flag(self) -> str:
        """Flag emoji used by language pickers."""
        return LANGUAGE_FLAGS[self]


LANGUAGE_LABELS: Dict[Language, str] = {
    Language.EN: "English",
    Language.ES: "Español",
}

LANGUAGE_FLAGS: Dict[Language, str] = {
    Language.EN: "🇺🇸",
    Language.ES: "🇪🇸",
}


class LanguageSource(str, Enum):
    """Signal a detected language came from."""

    URL = "url"
    BROWSER = "browser"
    STORAGE = "storage"
    DEFAULT = "default"


@dataclass(frozen=True)
class LanguageDetectionResult:
    """Outcome of one detection source or of a full detection cycle.

    Attributes:
        language: Detected language.
        source: Signal the language came from.
        confidence: How authoritative the signal is, in [0, 1].
    """

    language: Language
    source: LanguageSource
    confidence: float

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1]: {self.confidence}")

    @property
    def is_high_confidence(self) -> bool:
        return self.confidence > HIGH_CONFIDENCE_THRESHOLD

    @property
    def source_description(self) -> str:
        """Human-readable explanation of where the language came from."""
        return SOURCE_DESCRIPTIONS[self.source]

    @property
    def should_show_language_selector(self) -> bool:
        """Whether the user should be offered an explicit language picker.

        True for weak detections and whenever no signal was found at all.
        """
        return (
            self.confidence < SELECTOR_CONFIDENCE_THRESHOLD
            or self.source == LanguageSource.DEFAULT
        )


HIGH_CONFIDENCE_THRESHOLD = 0.8
SELECTOR_CONFIDENCE_THRESHOLD = 0.7

SOURCE_DESCRIPTIONS: Dict[LanguageSource, str] = {
    LanguageSource.URL: "Detected from URL path",
    LanguageSource.BROWSER: "Detected from browser preferences",
    LanguageSource.STORAGE: "Retrieved from stored preference",
    LanguageSource.DEFAULT: "Using default language",
}


@dataclass(frozen=True)
class I18nConfig:
    """Language configuration shared by detector, translator and validator.

    Attributes:
        default_language: Language used when no signal resolves one.
        fallback_language: Language retried for missing keys and used as the
            validation baseline.
        supported_languages: Supported languages in route matching order.
        storage_key: Preference store key for the preferred language.
    """

    default_language: Language = Language.ES
    fallback_language: Language = Language.ES
    supported_languages: Tuple[Language, ...] = (Language.EN, Language.ES)
    storage_key: str = "portfolio_preferred_language"

    def __post_init__(self):
        if self.default_language not in self.supported_languages:
            raise ValueError(
                f"Default language {self.default_language.value} is not supported"
            )
        if self.fallback_language not in self.supported_languages:
            raise ValueError(
                f"Fallback language {self.fallback_language.value} is not supported"
            )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "I18nConfig":
        """Build the config from application settings."""
        return cls(
            default_language=Language.from_string(settings.i18n.default_language),
            fallback_language=Language.from_string(settings.i18n.fallback_language),
            storage_key=settings.i18n.preference_storage_key,
        )

    def resolve(self, code: Any) -> Optional[Language]:
        """Return the supported Language for an exact code, else None."""
        if isinstance(code, Language):
            return code if code in self.supported_languages else None
        if not isinstance(code, str):
            return None
        try:
            language = Language(code)
        except ValueError:
            return None
        return language if language in self.supported_languages else None

    def is_supported(self, code: Any) -> bool:
        """Check membership of an exact code in the supported set."""
        return self.resolve(code) is not None


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    "es-ES,es;q=0.9,en;q=0.8" -> ["es-ES", "es", "en"]. Tags with equal quality
    keep their header order; "*" and q=0 entries are dropped.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue
        quality = 1.0
        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0
        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    # sorted() is stable, equal qualities keep header order
    return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


@dataclass
class DetectionContext:
    """Explicit request-scoped inputs to language detection.

    Attributes:
        path: Request path, if the caller is serving a URL.
        browser_languages: Client-preferred language tags in preference
            order. None means there is no browser context at all.
    """

    path: Optional[str] = None
    browser_languages: Optional[Sequence[str]] = None

    @classmethod
    def from_accept_language(
        cls, header: Optional[str], path: Optional[str] = None
    ) -> "DetectionContext":
        """Build a context from an HTTP Accept-Language header."""
        tags = parse_accept_language(header)
        return cls(path=path, browser_languages=tags if header is not None else None)


@dataclass(frozen=True)
class TranslationLeaf:
    """A translated string."""

    value: str


@dataclass(frozen=True)
class OpaqueValue:
    """An authored value that is neither text nor a namespace (number, list, null).

    Kept in the tree so lookups and validation can report it instead of the
    loader rejecting the whole file.
    """

    raw: Any


@dataclass
class TranslationNamespace:
    """A mapping of names to nested translation nodes."""

    children: Dict[str, "TranslationNode"] = field(default_factory=dict)

    def find(self, key: str) -> Optional["TranslationNode"]:
        """Look up a key, literal first, then as a dot-separated path.

        A literal match covers flat dictionaries whose keys already contain
        dots ("hero.cta.contact"). Otherwise each prefix that names a nested
        namespace is descended into.

        Returns:
            The node found, or None if any segment is absent or not traversable.
        """
        if key in self.children:
            return self.children[key]

        segments = key.split(".")
        for i in range(1, len(segments)):
            child = self.children.get(".".join(segments[:i]))
            if isinstance(child, TranslationNamespace):
                found = child.find(".".join(segments[i:]))
                if found is not None:
                    return found
        return None

    def leaf_keys(self, prefix: str = "") -> List[str]:
        """Return the dot-joined paths of every string leaf, depth first."""
        keys: List[str] = []
        for name, child in self.children.items():
            full_key = f"{prefix}.{name}" if prefix else name
            if isinstance(child, TranslationLeaf):
                keys.append(full_key)
            elif isinstance(child, TranslationNamespace):
                keys.extend(child.leaf_keys(full_key))
        return keys

    def merge(self, other: "TranslationNamespace") -> None:
        """Merge another namespace into this one, later entries win.

        Nested namespaces present on both sides are merged recursively.
        """
        for name, node in other.children.items():
            current = self.children.get(name)
            if isinstance(current, TranslationNamespace) and isinstance(
                node, TranslationNamespace
            ):
                current.merge(node)
            else:
                self.children[name] = node


TranslationNode = Union[TranslationLeaf, TranslationNamespace, OpaqueValue]


def build_translation_tree(data: Mapping[Any, Any]) -> TranslationNamespace:
    """Convert raw nested mappings (e.g., parsed YAML) into translation nodes."""
    children: Dict[str, TranslationNode] = {}
    for name, value in data.items():
        if isinstance(value, str):
            children[str(name)] = TranslationLeaf(value)
        elif isinstance(value, Mapping):
            children[str(name)] = build_translation_tree(value)
        else:
            children[str(name)] = OpaqueValue(value)
    return TranslationNamespace(children)


@dataclass
class TranslationStore:
    """Read-only translation content for every language.

    Attributes:
        entries: Root namespace per language.
        fallback_language: Language retried when a key is missing.
        loaded_at: Timestamp (ISO 8601) when content was loaded, if known.
    """

    entries: Dict[Language, TranslationNamespace] = field(default_factory=dict)
    fallback_language: Language = Language.ES
    loaded_at: Optional[str] = None

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[Any, Mapping[Any, Any]],
        fallback_language: Language = Language.ES,
    ) -> "TranslationStore":
        """Build a store from {language: {key: value | nested}} mappings.

        Languages may be given as Language members or codes; unsupported
        codes are ignored.
        """
        entries: Dict[Language, TranslationNamespace] = {}
        for code, content in data.items():
            language = code if isinstance(code, Language) else Language.from_code(code)
            if language is None or content is None:
                continue
            entries[language] = build_translation_tree(content)
        return cls(entries=entries, fallback_language=fallback_language)

    @property
    def languages(self) -> List[Language]:
        """Languages that have an entry in the store."""
        return list(self.entries.keys())

    def get_entry(self, language: Language) -> Optional[TranslationNamespace]:
        """Root namespace for a language, or None if the language is missing."""
        return self.entries.get(language)

    def find(self, language: Language, key: str) -> Optional[TranslationNode]:
        """Look up a key in one language's entry."""
        entry = self.entries.get(language)
        return entry.find(key) if entry is not None else None


LANGUAGE_CHANGED = "language.changed"


class LanguageChangedEvent(Event):
    """Broadcast after the active language was switched."""

    @classmethod
    def create(
        cls,
        language: Language,
        previous_language: Optional[Language] = None,
        source: str = "user",
    ) -> "LanguageChangedEvent":
        return cls(
            event_type=LANGUAGE_CHANGED,
            metadata={
                "language": language.value,
                "previous_language": previous_language.value if previous_language else None,
                "source": source,
            },
        )

    @property
    def language(self) -> Language:
        return Language(self.metadata["language"])

    @property
    def previous_language(self) -> Optional[Language]:
        previous = self.metadata.get("previous_language")
        return Language(previous) if previous else None

    @property
    def source(self) -> str:
        return self.metadata.get("source", "user")
