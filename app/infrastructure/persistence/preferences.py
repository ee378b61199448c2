"""Key-value stores for user preferences.

The i18n layer keeps exactly one record here: the preferred language under a
fixed key. Stores raise on failure; callers decide how to degrade.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

import structlog

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger(component="persistence.preferences")


class PreferenceStore(ABC):
    """Abstract key-value preference store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local preference store, used in development and tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JSONFilePreferenceStore(PreferenceStore):
    """Preference store backed by a JSON object on disk.

    Every read loads the file and every write rewrites it, so separate
    processes pointed at the same path observe each other's writes.

    Attributes:
        path: Location of the JSON file. Created on first write.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Preference file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


def create_preference_store(settings: "Settings") -> Optional[PreferenceStore]:
    """Build the preference store selected by settings.persistence.backend.

    Returns:
        A PreferenceStore, or None for the 'none' backend (no persistent
        storage available in this environment).
    """
    backend = settings.persistence.backend
    if backend == "none":
        logger.info("preference_store_disabled")
        return None
    if backend == "file":
        logger.info("preference_store_created", backend=backend, path=settings.persistence.path)
        return JSONFilePreferenceStore(Path(settings.persistence.path))
    logger.info("preference_store_created", backend=backend)
    return InMemoryPreferenceStore()
