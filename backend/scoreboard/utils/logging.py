"""
Structured logging for the scoreboard.

Loggers wrap the stdlib logger of the same name, so until the host opts in
with ``setup_logging`` every event follows the host's own ``logging`` setup
(silent at INFO with no handlers configured).
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from scoreboard.config import Environment, get_settings

LOGGER_NAME = "scoreboard"


def _static_context(context: dict[str, Any]) -> structlog.types.Processor:
    """Processor adding fixed fields without overwriting per-event ones."""

    def add_context(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for key, value in context.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_context


def setup_logging(service_name: str, extra_context: dict[str, Any] | None = None) -> logging.Handler:
    """
    Render scoreboard events as structured lines on stdout.

    Only the ``scoreboard`` logger gets a handler; the host's root logger is
    left alone. Calling again replaces the handler installed previously.

    Args:
        service_name: Identifier of the embedding application.
        extra_context: Additional static context fields added to every entry.

    Returns:
        The handler attached to the ``scoreboard`` logger.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    context: dict[str, Any] = {"service": service_name, "instance_id": settings.instance_id}
    if extra_context:
        context.update(extra_context)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _static_context(context),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.environment == Environment.DEV:
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )
    handler.set_name(LOGGER_NAME)

    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(package_logger.handlers):
        if existing.get_name() == LOGGER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False
    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
