"""
Structured logging configuration using structlog.

Every module logs snake_case events with keyword context through
``get_logger(__name__)``. Gateway errors can echo RFC logon data, so all
events pass through ``privacy_redactor`` before rendering.
"""

import logging
import re
import sys
from contextlib import contextmanager
from typing import Any, Iterator, List, Tuple

import structlog

from s4migrate.shared.infrastructure.config import settings

_REDACTIONS: List[Tuple["re.Pattern[str]", str]] = [
    (re.compile(pattern, re.IGNORECASE), replacement)
    for pattern, replacement in (
        (r"/Users/[^/\s]+", "[HOME_REDACTED]"),
        (r"/home/[^/\s]+", "[HOME_REDACTED]"),
        (r"(passwd|password|token|secret|api[_-]?key)['\"]?\s*[:=]\s*['\"]?([^'\"\s]+)", r"\1=[REDACTED]"),
        (r"Bearer\s+\S+", "Bearer [TOKEN_REDACTED]"),
    )
]


def _redact(value: Any) -> Any:
    if isinstance(value, str):
        for pattern, replacement in _REDACTIONS:
            value = pattern.sub(replacement, value)
        return value
    if isinstance(value, dict):
        return {k: _redact(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item) for item in value)
    return value


def privacy_redactor(logger: Any, method_name: str, event_dict: dict) -> dict:
    """
    Mask passwords, tokens and home directories in every string value.

    Disabled by ``settings.log_redaction_enabled = False``.
    """
    if not settings.log_redaction_enabled:
        return event_dict
    return _redact(event_dict)


def _renderer(stream: Any) -> List[Any]:
    if settings.is_development:
        colors = stream.isatty() if hasattr(stream, "isatty") else False
        return [structlog.dev.ConsoleRenderer(colors=colors)]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def configure_logging(stream: Any = sys.stderr) -> None:
    """
    Configure structlog and the stdlib root logger.

    Console rendering in development, one JSON object per line in
    production. The level comes from ``settings.log_level``.
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        privacy_redactor,
    ]

    structlog.configure(
        processors=processors + _renderer(stream),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=getattr(logging, settings.log_level.upper()),
        force=True,
    )


@contextmanager
def run_context(**values: Any) -> Iterator[None]:
    """Bind ``values`` to every event logged inside the block, from any module."""
    structlog.contextvars.bind_contextvars(**values)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*values)


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("scan_completed", objects=42, errors=0)
    """
    return structlog.get_logger(name)
