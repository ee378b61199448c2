"""Request-scoped logging context.

A detection cycle runs for one page load; binding its correlation id and
path to structlog's context vars tags every entry the detector, translator
and preference store emit during that cycle.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(request_path="/en/projects"):
        detector.detect(context)
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog

CORRELATION_ID_KEY = "correlation_id"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    language: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[str]:
    """Bind context for the duration of the block, then unbind exactly those keys.

    Args:
        correlation_id: Request identifier; a UUID4 is generated when omitted.
        request_path: Path being served, if any.
        language: Language code already known for the request, if any.
        **extra_context: Further key-value pairs for every entry.

    Yields:
        The correlation id in effect inside the block.
    """
    bound: Dict[str, Any] = {
        name: value
        for name, value in (("request_path", request_path), ("language", language))
        if value is not None
    }
    bound.update(extra_context)
    bound[CORRELATION_ID_KEY] = correlation_id or str(uuid.uuid4())

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield bound[CORRELATION_ID_KEY]
    finally:
        structlog.contextvars.unbind_contextvars(*bound)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the enclosing bind_request_context block, if any."""
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def clear_request_context() -> None:
    """Drop every context var, including ones bound outside this module."""
    structlog.contextvars.clear_contextvars()
