"""Translation service for retrieving and interpolating translated messages.

Resolution never fails: a key missing from the requested language is retried
in the fallback language, and as a last resort the key itself is returned.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from infrastructure.i18n.models import (
    Language,
    OpaqueValue,
    TranslationLeaf,
    TranslationNamespace,
    TranslationStore,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

INTERPOLATION_PATTERN = re.compile(r"\{\{(\w+)\}\}")

TranslationFunction = Callable[..., str]


def interpolate(template: str, variables: Mapping[str, Any]) -> str:
    """Replace {{name}} tokens with the string form of their values.

    Tokens without a binding are left verbatim.

    interpolate("Hello {{name}}", {"name": "World"}) -> "Hello World"
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name in variables:
            return str(variables[name])
        return match.group(0)

    return INTERPOLATION_PATTERN.sub(_replace, template)


def format_translation_key(namespace: str, key: str) -> str:
    """Join a namespace and a key into a full translation key."""
    return f"{namespace}.{key}"


def _one_or_many(count: int) -> str:
    return "one" if count == 1 else "many"


# Plural category rule per language; English and Spanish happen to agree
PLURAL_RULES: Dict[Language, Callable[[int], str]] = {
    Language.EN: _one_or_many,
    Language.ES: _one_or_many,
}


def pluralize(count: int, forms: Mapping[str, str], language: Language) -> str:
    """Pick the plural form for a count.

    An optional "zero" form wins for nothing; otherwise the language's rule
    in PLURAL_RULES names the category. A category the forms do not provide
    falls back to "many".

    Args:
        count: Number of items.
        forms: Mapping with "one" and "many" keys, optionally "zero".
        language: Language of the forms, selects the plural rule.
    """
    if count == 0 and forms.get("zero"):
        return forms["zero"]
    category = PLURAL_RULES.get(language, _one_or_many)(count)
    return forms.get(category, forms["many"])


class Translator:
    """Resolves translation keys against a TranslationStore.

    Attributes:
        store: Read-only translation content.
        fallback_language: Language retried when a key is missing; defaults to
            the store's designated fallback.
    """

    def __init__(
        self,
        store: TranslationStore,
        fallback_language: Optional[Language] = None,
    ):
        self.store = store
        self.fallback_language = fallback_language or store.fallback_language
        logger.info(
            "initialized_translator",
            fallback_language=self.fallback_language.value,
            languages=[language.value for language in store.languages],
        )

    def _lookup(self, key: str, language: Language) -> Optional[str]:
        """Return the usable string for key in one language, else None."""
        node = self.store.find(language, key)

        if node is None:
            return None

        if isinstance(node, (TranslationNamespace, OpaqueValue)):
            logger.warning(
                "translation_wrong_type",
                key=key,
                language=language.value,
                found=type(node).__name__,
            )
            return None

        if isinstance(node, TranslationLeaf) and not node.value.strip():
            logger.warning("translation_empty", key=key, language=language.value)
            return None

        return node.value

    def translate(
        self,
        key: str,
        language: Language,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Resolve a key with fallback and optional interpolation.

        Lookup order:
        1. The requested language
        2. The fallback language
        3. The key itself

        Args:
            key: Translation key, dot-separated for nested content.
            language: Language to translate to.
            variables: Optional values for {{name}} tokens.

        Returns:
            The resolved string; never raises for missing content.
        """
        message = self._lookup(key, language)

        if message is None and language != self.fallback_language:
            message = self._lookup(key, self.fallback_language)
            if message is not None:
                logger.info(
                    "used_fallback_translation",
                    key=key,
                    requested_language=language.value,
                    fallback_language=self.fallback_language.value,
                )

        if message is None:
            logger.warning(
                "translation_missing",
                key=key,
                language=language.value,
                fallback_language=self.fallback_language.value,
            )
            return key

        if variables:
            message = interpolate(message, variables)

        return message

    def get_translation_function(
        self, language: Language, namespace: Optional[str] = None
    ) -> TranslationFunction:
        """Bind a language (and optionally a namespace) into a t(key) function.

        Example:
            t = translator.get_translation_function(Language.EN, "hero")
            t("available")  # resolves "hero.available"
        """

        def t(key: str, **variables: Any) -> str:
            full_key = format_translation_key(namespace, key) if namespace else key
            return self.translate(full_key, language, variables or None)

        return t

    def has_message(self, key: str, language: Language) -> bool:
        """Check if a string translation exists for key in exactly this language."""
        return isinstance(self.store.find(language, key), TranslationLeaf)

    def get_available_languages(self) -> List[Language]:
        """Languages present in the store."""
        return self.store.languages
