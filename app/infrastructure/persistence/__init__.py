"""Persistence layer for small key-value preference records."""

from infrastructure.persistence.preferences import (
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    PreferenceStore,
    create_preference_store,
)

__all__ = [
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JSONFilePreferenceStore",
    "create_preference_store",
]
