"""Route pattern contract between URLs and languages.

Every supported language owns one path pattern. The default language's
pattern also matches the site root, since its content is served unprefixed.
"""

import re
from typing import Dict, Optional, Pattern

from infrastructure.i18n.models import I18nConfig, Language


def build_route_patterns(config: I18nConfig) -> Dict[Language, Pattern[str]]:
    """Compile one path pattern per supported language, in matching order."""
    patterns: Dict[Language, Pattern[str]] = {}
    for language in config.supported_languages:
        expression = rf"^/{re.escape(language.value)}(/.*)?$"
        if language == config.default_language:
            expression += r"|^/$"
        patterns[language] = re.compile(expression)
    return patterns


def language_from_path(path: str, config: I18nConfig) -> Optional[Language]:
    """Return the first language whose pattern matches the path, or None."""
    for language, pattern in build_route_patterns(config).items():
        if pattern.match(path):
            return language
    return None


def get_language_base_url(language: Language, config: I18nConfig) -> str:
    """Base URL of a language: "/" for the default language, "/<code>" otherwise."""
    if language == config.default_language:
        return "/"
    return f"/{language.value}"


def build_language_url(language: Language, config: I18nConfig, path: str = "") -> str:
    """Build the URL of a page in the given language.

    build_language_url(Language.EN, config, "projects") -> "/en/projects"
    build_language_url(Language.ES, config, "/") -> "/"
    """
    base_url = get_language_base_url(language, config)

    if language == config.default_language and path == "/":
        return base_url

    clean_path = path if path.startswith("/") else f"/{path}"
    return re.sub(r"/+", "/", f"{base_url}{clean_path}")


def get_localized_path(language: Language, path: str, config: I18nConfig) -> str:
    """Prefix a site path for a language; the default language stays unprefixed.

    get_localized_path(Language.EN, "/#about-me", config) -> "/en/#about-me"
    """
    if language == config.default_language:
        return path
    return f"/{language.value}{path}"
