"""Media session exception hierarchy.

Logging calls never validate their payloads, so these exceptions only cover
wiring a session together: configuration loading and sink resolution.
Errors raised by the sink, the listener or the session id factory are not
wrapped and reach the caller unchanged.

Exception Hierarchy:
    MediaSessionException (base)
    ├── MediaConfigError
    │   └── MediaConfigNotFoundError
    └── MediaSinkError
"""

from typing import Optional


class MediaSessionException(Exception):
    """Base exception for all media session errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize media session exception.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class MediaConfigError(MediaSessionException):
    """Raised when session configuration is invalid."""

    pass


class MediaConfigNotFoundError(MediaConfigError):
    """Raised when an explicitly requested configuration file does not exist.

    Attributes:
        config_path: Path that was looked up
    """

    def __init__(self, message: str, config_path: Optional[str] = None, context: Optional[dict] = None):
        if context is None:
            context = {}
        if config_path:
            context["config_path"] = config_path
        super().__init__(message, context)
        self.config_path = config_path


class MediaSinkError(MediaSessionException):
    """Raised when an object cannot be used as an event sink.

    Attributes:
        sink_type: Type name of the rejected object
    """

    def __init__(self, message: str, sink_type: Optional[str] = None, context: Optional[dict] = None):
        if context is None:
            context = {}
        if sink_type:
            context["sink_type"] = sink_type
        super().__init__(message, context)
        self.sink_type = sink_type


__all__ = [
    "MediaSessionException",
    "MediaConfigError",
    "MediaConfigNotFoundError",
    "MediaSinkError",
]
