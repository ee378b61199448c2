"""Structlog processors shared by the CLI and library consumers.

Each factory returns a processor with the structlog signature
``(logger, method_name, event_dict) -> event_dict``; pass them to
``configure_logging(extra_processors=[...])``.
"""

from enum import Enum
from typing import Any, Dict

EventDict = Dict[str, Any]


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Stamp every entry with the application name and version (git sha)."""
    static_fields = {"app_name": app_name, "app_version": app_version}

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.update(static_fields)
        return event_dict

    return processor


def add_environment_info(environment: str):
    """Stamp every entry with the deployment environment name."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["environment"] = environment
        return event_dict

    return processor


def _shorten(value: str, max_length: int) -> str:
    if len(value) <= max_length:
        return value
    return f"{value[:max_length]}...[truncated, {len(value)} chars total]"


def truncate_large_values(max_length: int = 500):
    """Shorten long string values, including strings inside lists.

    Translation values can hold whole HTML paragraphs, and a single warning
    about one of them should stay readable on a console.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str):
                event_dict[key] = _shorten(value, max_length)
            elif isinstance(value, list):
                event_dict[key] = [
                    _shorten(item, max_length) if isinstance(item, str) else item
                    for item in value
                ]
        return event_dict

    return processor


def render_enum_values(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace Enum members (Language, LanguageSource, ...) with their values."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict
