"""
Structured logging for salvage.

Progress notices from the recovery loop and capture notices from guarded
invocation go through structlog. Nothing in the data contract depends on
these events; they exist for diagnostics only.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="salvage")
            │
            ▼
        structlog processor chain:
          1. TimeStamper (iso)
          2. merge_contextvars      (iteration, operation, ...)
          3. add_log_level / add_logger_name
          4. service metadata
          5. JSONRenderer (ECS field names) or ConsoleRenderer

Examples:
    >>> from salvage.core.logging import LogContext, configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> logger.info("iteration_succeeded", iteration=3)

    Scoped context:

    >>> with LogContext(operation="nightly_batch"):
    ...     logger.warning("iteration_failed", iteration=2, error="boom")

Tags:
    logging, structlog, observability, salvage
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from salvage.core.settings import get_settings

_SERVICE_NAME = "salvage"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _elasticsearch_compatible(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename timestamp/level to ECS field names."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")
    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")
    return event_dict


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "salvage",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs
    """
    global _SERVICE_NAME
    _SERVICE_NAME = service

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    if json_format is None:
        json_format = not sys.stdout.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]

    if add_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        shared_processors.append(_elasticsearch_compatible)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )


def configure_from_settings() -> None:
    """Configure logging from :class:`salvage.core.settings.SalvageSettings`."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs)


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Keys bound on entry are restored to their previous values on exit, so an
    outer binding of the same key survives the block.

    Example:
        with LogContext(iteration=4):
            logger.info("draw_captured")
        # iteration back to its previous value (or unbound) here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs
        self._bound: Any = None

    def __enter__(self) -> LogContext:
        self._bound = structlog.contextvars.bound_contextvars(**self._context)
        self._bound.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._bound.__exit__(*args)
        self._bound = None


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
