"""
Media Session Configuration Module

Construction-time configuration for media sessions.
"""

from dataclasses import dataclass, fields
from typing import Any

from .exceptions import MediaConfigError
from .log_config import configure_logging
from .settings import Settings, get_settings


@dataclass
class MediaSessionConfig:
    """
    Configuration for a media session.

    Attributes:
        log_media_event: Hand every structured media event to the sink
        log_page_event: Also hand flattened page events to the sink for
            session start and session end
        log_level: Minimum level passed to ``configure_logging``
        log_json: Render log lines as JSON instead of console output

    Examples:
        Default configuration (media events only):
        >>> config = MediaSessionConfig()

        Page events only:
        >>> config = MediaSessionConfig(log_media_event=False, log_page_event=True)
    """

    log_media_event: bool = True
    log_page_event: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "MediaSessionConfig":
        """Create configuration from dictionary.

        Raises:
            MediaConfigError: If the dictionary contains unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise MediaConfigError(
                "Unknown media session configuration keys",
                context={"keys": ",".join(unknown)},
            )
        return cls(**config_dict)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "MediaSessionConfig":
        """Create configuration from application settings."""
        settings = settings or get_settings()
        return cls(
            log_media_event=settings.log_media_event,
            log_page_event=settings.log_page_event,
            log_level=settings.log_level,
            log_json=settings.log_json,
        )

    def apply_logging(self) -> None:
        """Configure structlog with this configuration's level and renderer."""
        configure_logging(self.log_level, json=self.log_json)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "log_media_event": self.log_media_event,
            "log_page_event": self.log_page_event,
            "log_level": self.log_level,
            "log_json": self.log_json,
        }


__all__ = ["MediaSessionConfig"]
