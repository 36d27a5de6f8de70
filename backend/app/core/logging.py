"""
structlog configuration.

Call ``setup_logging()`` once at startup (the FastAPI lifespan does this);
every module then takes its own logger::

    from app.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Policy created", policy_id=policy.id)
"""

from __future__ import annotations

import logging

import structlog


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """
    Configure structlog to print filtered log lines to stdout.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ...).
        json_output: Render JSON lines; otherwise a coloured console format
            for local development.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)
