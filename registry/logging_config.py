"""
Structured Logging

structlog setup for the registry. Modules log through
structlog.get_logger(__name__) with key-value context; this module decides
how those events are rendered.
"""

import logging

import structlog

from registry.config import get_settings


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog rendering and filtering.

    Args:
        level: Minimum level name (defaults to DEBUG when settings.debug is
            set, otherwise settings.log_level)
        fmt: "json" or "text" (defaults to settings.log_format)
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    level = level.upper()
    fmt = fmt or settings.log_format

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
        cache_logger_on_first_use=False,
    )
