"""Structlog configuration for the i18n library and its CLI.

Library modules only ever ask for a logger; the process that embeds them
(the validation CLI, a web server, the test suite) decides where entries go
by calling configure_logging() once.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()
    logger = get_module_logger()
    logger.info("language_detected", language="es", source="default")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import render_enum_values

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

Processor = Callable[..., Any]

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _silence_for_tests() -> BoundLogger:
    # Bound loggers must still work, but nothing reaches a handler
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def _pipeline(extra_processors: Sequence[Processor], json_output: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        render_enum_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        *extra_processors,
    ]
    processors.append(
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )
    return processors


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    extra_processors: Optional[Sequence[Processor]] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Under pytest every entry is suppressed and the other arguments are
    ignored.

    Args:
        settings: Settings instance. Defaults to the module-level singleton.
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; production renders
            JSON lines, anything else a colored console format.
        extra_processors: Processors run just before the renderer
            (see infrastructure.logging.formatters).

    Returns:
        A logger bound to the new configuration.
    """
    if _is_test_environment():
        return _silence_for_tests()

    if settings is None:
        from infrastructure.configuration import settings as default_settings

        settings = default_settings

    json_output = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=_pipeline(extra_processors or (), json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        force=True,
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Lazy logger carrying the calling module's name.

    Nothing is bound until the first entry is emitted, so a later
    configure_logging() call still applies to loggers created at import.

    Called as ``logger = get_module_logger()`` at module level in
    infrastructure/i18n/translator.py, entries carry
    ``component="translator"`` and ``module_path="infrastructure.i18n.translator"``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None

    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    return structlog.stdlib.get_logger(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
