"""Structured logging setup."""

from __future__ import annotations

from typing import Optional, TextIO

import structlog

from worms.config import Settings, get_settings


def configure_logging(
    settings: Optional[Settings] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structlog for the worms model.

    Args:
        settings: Optional Settings instance. If None, uses get_settings().
        stream: Where rendered events are printed. Defaults to stdout.

    Note:
        Events below settings.log_level are dropped by the filtering
        bound logger. Set WORMS_LOG_JSON=true for machine-readable output.
    """
    if settings is None:
        settings = get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level=settings.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(stream),
        cache_logger_on_first_use=False,
    )
