"""Observability – structlog configuration and logger lookup."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from fake_ap.observability.logging.filters import SensitiveFieldsFilter


def configure_logging(
    level: int = logging.INFO,
    sensitive_fields: frozenset[str] | None = None,
) -> None:
    """Route structlog through the stdlib root logger with JSON output.

    Values of sensitive keys (``sharedSecret``, ``token``, ...) are redacted
    before rendering.
    """
    shared_processors: list[Any] = [
        SensitiveFieldsFilter(sensitive_fields),
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for *name*, bound to *initial_values*.

    Records always go to the stdlib logger *name*, so until
    ``configure_logging`` (or the host application) installs handlers, the
    debug-level lifecycle events are dropped by the stdlib level filter
    instead of being printed.
    """
    return structlog.wrap_logger(logging.getLogger(name), **initial_values)


__all__ = ["configure_logging", "get_logger"]
