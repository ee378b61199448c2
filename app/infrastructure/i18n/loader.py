"""Loading translation content from disk.

Content lives in files named ``<namespace>.<language>.yml`` (hero.en.yml,
navigation.es.yml, ...). Every file of a language is merged into one root
namespace, so a namespace may be split across several files.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Set

import structlog
import yaml

from infrastructure.i18n.models import (
    Language,
    TranslationNamespace,
    TranslationStore,
    build_translation_tree,
)

FILE_SUFFIX = ".yml"


class TranslationLoader(ABC):
    """Source of translation content, one root namespace per language."""

    @abstractmethod
    def load(self, language: Language) -> TranslationNamespace:
        """Return the merged content of one language.

        Raises:
            FileNotFoundError: The language has no content at all.
            ValueError: Some content could not be parsed.
        """

    @abstractmethod
    def load_all(self, fallback_language: Language = Language.ES) -> TranslationStore:
        """Build a TranslationStore from every language that has content."""


class YAMLTranslationLoader(TranslationLoader):
    """TranslationLoader over a directory of YAML files.

    Malformed structure inside a file (a list at the top level, a namespace
    that is a plain string) is skipped with a warning; only unparseable
    YAML is an error.

    Attributes:
        translations_dir: Directory holding the YAML files.
        use_cache: Keep each language's parsed content after the first load.
        cache: Parsed content per language.
    """

    def __init__(self, translations_dir: Path, use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[Language, TranslationNamespace] = {}

        if not self.translations_dir.exists():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")

        self.log = structlog.get_logger(
            component="i18n.loader", translations_dir=str(self.translations_dir)
        )
        self.log.debug("yaml_loader_ready", use_cache=use_cache)

    def files_for(self, language: Language) -> List[Path]:
        """Files of one language, in name order so merges are deterministic."""
        return sorted(self.translations_dir.glob(f"*.{language.value}{FILE_SUFFIX}"))

    def languages_on_disk(self) -> Set[Language]:
        """Languages named by file suffixes; unknown or mis-cased codes are skipped."""
        found: Set[Language] = set()
        for path in self.translations_dir.glob(f"*{FILE_SUFFIX}"):
            # "hero.en.yml" -> "hero.en" -> "en"
            name_parts = path.stem.split(".")
            if len(name_parts) < 2:
                continue
            code = name_parts[-1]
            language = Language.from_code(code)
            if language is not None and language.value == code:
                found.add(language)
        return found

    def load(self, language: Language) -> TranslationNamespace:
        if self.use_cache and language in self.cache:
            return self.cache[language]

        files = self.files_for(language)
        if not files:
            raise FileNotFoundError(
                f"No {language.value} translation files in {self.translations_dir}"
            )

        root = TranslationNamespace()
        for path in files:
            self._merge_file(root, path, self._read_file(path))

        self.log.info(
            "translations_loaded",
            language=language.value,
            file_count=len(files),
            namespaces=sorted(root.children),
        )

        if self.use_cache:
            self.cache[language] = root
        return root

    def load_all(self, fallback_language: Language = Language.ES) -> TranslationStore:
        """Load every language found on disk.

        A supported language without files is simply absent from the store;
        the validator reports it as missing.

        Raises:
            ValueError: The directory holds no translation files.
        """
        languages = sorted(self.languages_on_disk(), key=lambda lang: lang.value)
        if not languages:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        return TranslationStore(
            entries={language: self.load(language) for language in languages},
            fallback_language=fallback_language,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def _read_file(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.log.error("yaml_parse_error", file=path.name, error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    def _merge_file(self, root: TranslationNamespace, path: Path, data: Any) -> None:
        """Merge one parsed file into the language root.

        A file maps namespaces to nested content:

            hero:
              available: Available for work
              cta:
                contact: Contact me
        """
        if data is None:
            return

        if not isinstance(data, dict):
            self.log.warning("invalid_yaml_format", file=path.name, found=type(data).__name__)
            return

        for namespace, content in data.items():
            if not isinstance(content, dict):
                self.log.warning(
                    "invalid_namespace_format", file=path.name, namespace=str(namespace)
                )
                continue
            root.merge(TranslationNamespace({str(namespace): build_translation_tree(content)}))

    def clear_cache(self) -> None:
        """Forget parsed content so the next load re-reads the files."""
        self.cache.clear()


def load_translation_store(
    translations_dir: Path,
    fallback_language: Language = Language.ES,
    use_cache: bool = True,
) -> TranslationStore:
    """Load every language under translations_dir into a TranslationStore."""
    loader = YAMLTranslationLoader(translations_dir, use_cache=use_cache)
    return loader.load_all(fallback_language=fallback_language)
