"""Translation integrity checks.

Audits a TranslationStore for keys missing in some language, values of the
wrong type, blank values and suspicious content. Findings are collected into
a ValidationResult; nothing is raised and nothing is mutated.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

import structlog
from infrastructure.i18n.models import (
    I18nConfig,
    Language,
    TranslationLeaf,
    TranslationNamespace,
    TranslationNode,
    TranslationStore,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger(component="i18n.validation")

SPECIAL_CHARS_PATTERN = re.compile(r"[{}\[\]\\]")


class ValidationErrorType(str, Enum):
    MISSING_LANGUAGE = "missing_language"
    MISSING_KEY = "missing_key"
    INVALID_TYPE = "invalid_type"
    EMPTY_VALUE = "empty_value"


class ValidationWarningType(str, Enum):
    HTML_CONTENT = "html_content"
    SPECIAL_CHARS = "special_chars"
    INCONSISTENT_LENGTH = "inconsistent_length"


@dataclass(frozen=True)
class ValidationError:
    type: ValidationErrorType
    key: str
    message: str
    language: Optional[Language] = None


@dataclass(frozen=True)
class ValidationWarning:
    type: ValidationWarningType
    key: str
    message: str
    language: Optional[Language] = None


@dataclass
class ValidationResult:
    """Itemized findings of one validation run.

    Attributes:
        errors: Structural defects; any error makes the result invalid.
        warnings: Advisory findings; never affect validity.
    """

    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def errors_of_type(self, error_type: ValidationErrorType) -> List[ValidationError]:
        return [error for error in self.errors if error.type == error_type]

    def warnings_of_type(
        self, warning_type: ValidationWarningType
    ) -> List[ValidationWarning]:
        return [warning for warning in self.warnings if warning.type == warning_type]


@dataclass(frozen=True)
class LengthHeuristic:
    """Thresholds for the cross-language length warning.

    A key is flagged when its longest value is more than ``ratio`` times its
    shortest value and the shortest value is longer than ``min_length``.
    """

    ratio: float = 3.0
    min_length: int = 10

    def is_inconsistent(self, lengths: Iterable[int]) -> bool:
        lengths = list(lengths)
        if len(lengths) < 2:
            return False
        longest, shortest = max(lengths), min(lengths)
        return longest > shortest * self.ratio and shortest > self.min_length


class TranslationValidator:
    """Checks a TranslationStore for completeness and consistency.

    Attributes:
        config: Supported languages and the fallback (baseline) language.
        length_heuristic: Thresholds for the length inconsistency warning.
    """

    def __init__(
        self,
        config: Optional[I18nConfig] = None,
        length_heuristic: Optional[LengthHeuristic] = None,
    ):
        self.config = config or I18nConfig()
        self.length_heuristic = length_heuristic or LengthHeuristic()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TranslationValidator":
        return cls(
            config=I18nConfig.from_settings(settings),
            length_heuristic=LengthHeuristic(
                ratio=settings.i18n.length_ratio_threshold,
                min_length=settings.i18n.length_min_length,
            ),
        )

    def validate(
        self, store: TranslationStore, namespace: str = "translations"
    ) -> ValidationResult:
        """Validate every key of the store across all supported languages.

        Args:
            store: Translation content to audit.
            namespace: Name used in log entries and missing-language errors.
        """
        entries = {
            language: store.get_entry(language)
            for language in self.config.supported_languages
        }
        return self._validate_entries(entries, namespace)

    def validate_namespace(
        self, store: TranslationStore, namespace: str
    ) -> ValidationResult:
        """Validate one top-level namespace (e.g., "hero") of the store.

        A language whose entry lacks the namespace, or holds something other
        than a namespace under that name, counts as missing.
        """
        entries: Dict[Language, Optional[TranslationNamespace]] = {}
        for language in self.config.supported_languages:
            node = store.find(language, namespace)
            entries[language] = node if isinstance(node, TranslationNamespace) else None
        return self._validate_entries(entries, namespace)

    def _validate_entries(
        self,
        entries: Dict[Language, Optional[TranslationNamespace]],
        namespace: str,
    ) -> ValidationResult:
        result = ValidationResult()

        for language, entry in entries.items():
            if entry is None:
                result.errors.append(
                    ValidationError(
                        type=ValidationErrorType.MISSING_LANGUAGE,
                        language=language,
                        key=namespace,
                        message=f"Missing translations for language: {language.value}",
                    )
                )

        # Without every language there is no baseline to compare against
        if result.errors:
            self._log_result(result, namespace)
            return result

        for key in self._collect_keys(entries):
            self._validate_key(entries, key, result)

        self._log_result(result, namespace)
        return result

    def _collect_keys(
        self, entries: Dict[Language, Optional[TranslationNamespace]]
    ) -> List[str]:
        """Leaf keys of the fallback language, then keys only other languages have."""
        fallback = self.config.fallback_language
        ordered = [fallback] + [lang for lang in entries if lang != fallback]

        keys: Dict[str, None] = {}
        for language in ordered:
            entry = entries.get(language)
            if entry is None:
                continue
            for key in entry.leaf_keys():
                keys.setdefault(key, None)
        return list(keys)

    def _validate_key(
        self,
        entries: Dict[Language, Optional[TranslationNamespace]],
        key: str,
        result: ValidationResult,
    ) -> None:
        lengths: List[int] = []

        for language, entry in entries.items():
            node = entry.find(key) if entry is not None else None
            value = self._check_node(node, key, language, result)
            if value is None:
                continue

            lengths.append(len(value))

            if "<" in value and ">" in value:
                result.warnings.append(
                    ValidationWarning(
                        type=ValidationWarningType.HTML_CONTENT,
                        language=language,
                        key=key,
                        message=f'Translation for key "{key}" in language "{language.value}" contains HTML',
                    )
                )

            if SPECIAL_CHARS_PATTERN.search(value):
                result.warnings.append(
                    ValidationWarning(
                        type=ValidationWarningType.SPECIAL_CHARS,
                        language=language,
                        key=key,
                        message=f'Translation for key "{key}" in language "{language.value}" contains special characters',
                    )
                )

        if self.length_heuristic.is_inconsistent(lengths):
            result.warnings.append(
                ValidationWarning(
                    type=ValidationWarningType.INCONSISTENT_LENGTH,
                    key=key,
                    message=f'Significant length difference for key "{key}" between languages',
                )
            )

    @staticmethod
    def _check_node(
        node: Optional[TranslationNode],
        key: str,
        language: Language,
        result: ValidationResult,
    ) -> Optional[str]:
        """Record errors for a node; return its string value when usable."""
        if node is None:
            result.errors.append(
                ValidationError(
                    type=ValidationErrorType.MISSING_KEY,
                    language=language,
                    key=key,
                    message=f'Missing translation for key "{key}" in language "{language.value}"',
                )
            )
            return None

        if not isinstance(node, TranslationLeaf):
            result.errors.append(
                ValidationError(
                    type=ValidationErrorType.INVALID_TYPE,
                    language=language,
                    key=key,
                    message=f'Translation for key "{key}" in language "{language.value}" is not a string',
                )
            )
            return None

        if not node.value.strip():
            result.errors.append(
                ValidationError(
                    type=ValidationErrorType.EMPTY_VALUE,
                    language=language,
                    key=key,
                    message=f'Translation for key "{key}" in language "{language.value}" is empty',
                )
            )
            return None

        return node.value

    def validate_required_keys(
        self,
        entry: TranslationNamespace,
        required_keys: Iterable[str],
        language: Language,
    ) -> ValidationResult:
        """Check that specific keys exist, are strings and are not blank."""
        result = ValidationResult()
        for key in required_keys:
            node = entry.find(key)
            if node is None:
                result.errors.append(
                    ValidationError(
                        type=ValidationErrorType.MISSING_KEY,
                        language=language,
                        key=key,
                        message=f'Required key "{key}" is missing in language "{language.value}"',
                    )
                )
            elif not isinstance(node, TranslationLeaf):
                result.errors.append(
                    ValidationError(
                        type=ValidationErrorType.INVALID_TYPE,
                        language=language,
                        key=key,
                        message=f'Required key "{key}" is not a string in language "{language.value}"',
                    )
                )
            elif not node.value.strip():
                result.errors.append(
                    ValidationError(
                        type=ValidationErrorType.EMPTY_VALUE,
                        language=language,
                        key=key,
                        message=f'Required key "{key}" is empty in language "{language.value}"',
                    )
                )
        return result

    @staticmethod
    def _log_result(result: ValidationResult, namespace: str) -> None:
        log = logger.bind(namespace=namespace)
        if result.is_valid:
            log.info("translations_valid", warning_count=result.warning_count)
        else:
            log.warning(
                "translations_invalid",
                error_count=result.error_count,
                warning_count=result.warning_count,
            )


def create_validation_report(result: ValidationResult, namespace: str) -> str:
    """Render a validation result as a console report."""
    lines = [f'Validation Report for "{namespace}"', "=" * 50]

    if result.is_valid:
        lines.append("✅ All validations passed!")
    else:
        lines.append(f"❌ {result.error_count} error(s) found")

    if result.warnings:
        lines.append(f"⚠️  {result.warning_count} warning(s) found")

    if result.errors:
        lines.append("\nErrors:")
        lines.extend(f"  - {error.message}" for error in result.errors)

    if result.warnings:
        lines.append("\nWarnings:")
        lines.extend(f"  - {warning.message}" for warning in result.warnings)

    return "\n".join(lines)
