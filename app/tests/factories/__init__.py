"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_detection_context,
    make_detection_result,
    make_translation_store,
    sample_translation_data,
)

__all__ = [
    "make_detection_context",
    "make_detection_result",
    "make_translation_store",
    "sample_translation_data",
]
