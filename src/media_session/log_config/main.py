"""Logging configuration and utilities."""

import logging
from typing import Any

import structlog


def get_context_logger(name: str) -> structlog.BoundLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name

    Returns:
        Structured logger instance
    """
    return structlog.get_logger(name)


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Configure structlog for the media session package.

    Args:
        level: Minimum log level name (DEBUG, INFO, WARNING, ...)
        json: Render JSON lines instead of the console renderer
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=False,
    )


class SessionLogContext:
    """Context manager binding media session identity into log records."""

    def __init__(self, session_id: str, content_id: str, **context: Any):
        """Initialize with session identity and extra context.

        Args:
            session_id: Media session identifier
            content_id: Content identifier
            **context: Additional key-value pairs
        """
        self.context = {
            "media_session_id": session_id,
            "content_id": content_id,
            **context,
        }

    def __enter__(self):
        # Values bound by the caller under the same keys come back on exit.
        self._bound = structlog.contextvars.bound_contextvars(**self.context)
        self._bound.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._bound.__exit__(exc_type, exc_val, exc_tb)


__all__ = [
    "get_context_logger",
    "configure_logging",
    "SessionLogContext",
]
