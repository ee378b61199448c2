"""Structured logging for the i18n library.

Setup:
    - configure_logging(): choose renderer, level and extra processors
    - get_module_logger(): logger bound to the calling module

Request context:
    - bind_request_context(): tag entries of one detection cycle
    - get_correlation_id(), clear_request_context()

Processors (for configure_logging(extra_processors=...)):
    - add_app_info(), add_environment_info(), truncate_large_values()
    - render_enum_values: always installed; logs enum members by value
"""

from infrastructure.logging.context import (
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)
from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    render_enum_values,
    truncate_large_values,
)
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_request_context",
    "get_correlation_id",
    "clear_request_context",
    "add_app_info",
    "add_environment_info",
    "truncate_large_values",
    "render_enum_values",
]
