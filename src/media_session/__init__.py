"""
Media Session Package

Session-scoped event construction for media playback telemetry. A
``MediaSession`` tracks one playback (content identity, playhead position,
active ad break, ad and segment) and turns playback actions into event
records handed to a sink.

This package provides:
- MediaSession: Session state and one logging method per playback action
- MediaEvent / PageEvent: Structured and flattened event records
- EventSink, ConsoleSink: Sink protocol and a structlog console sink
- Type definitions and configuration classes

Usage:
    from media_session import ConsoleSink, MediaSession, MediaContentType, MediaStreamType

    session = MediaSession(
        ConsoleSink(),
        "023134",
        "Immigrant Song",
        120000,
        MediaContentType.VIDEO,
        MediaStreamType.ON_DEMAND,
    )
    session.log_media_session_start()
    session.log_play()
    session.log_playhead_position(30000)
    session.log_media_session_end()
"""

from .config import MediaSessionConfig
from .dispatch import DispatchConfig, EventDispatcher
from .events import (
    MediaEvent,
    PageEvent,
    SessionSnapshot,
    build_media_event,
    build_page_event,
    content_attributes,
)
from .exceptions import (
    MediaConfigError,
    MediaConfigNotFoundError,
    MediaSessionException,
    MediaSinkError,
)
from .identity import generate_session_id
from .session import MediaSession
from .settings import Settings, get_settings, reload_settings
from .sinks import CallableSink, ConsoleSink, EventSink, resolve_sink
from .types import (
    AdBreak,
    AdContent,
    EventType,
    MediaContent,
    MediaContentType,
    MediaEventListener,
    MediaEventType,
    MediaOptions,
    MediaStreamType,
    MessageType,
    QoS,
    Segment,
)

__version__ = "1.0.0"

__all__ = [
    # Main classes
    "MediaSession",
    "MediaEvent",
    "PageEvent",
    "SessionSnapshot",
    # Event construction
    "build_media_event",
    "build_page_event",
    "content_attributes",
    # Dispatch and sinks
    "DispatchConfig",
    "EventDispatcher",
    "EventSink",
    "CallableSink",
    "ConsoleSink",
    "resolve_sink",
    # Type definitions
    "AdBreak",
    "AdContent",
    "EventType",
    "MediaContent",
    "MediaContentType",
    "MediaEventListener",
    "MediaEventType",
    "MediaOptions",
    "MediaStreamType",
    "MessageType",
    "QoS",
    "Segment",
    # Configuration
    "MediaSessionConfig",
    "Settings",
    "get_settings",
    "reload_settings",
    # Errors
    "MediaSessionException",
    "MediaConfigError",
    "MediaConfigNotFoundError",
    "MediaSinkError",
    # Identity
    "generate_session_id",
    # Convenience
    "create_session",
    # Package metadata
    "__version__",
]


def create_session(
    sink,
    content: MediaContent,
    *,
    settings: Settings | None = None,
    config: MediaSessionConfig | None = None,
    **kwargs,
) -> MediaSession:
    """Create a MediaSession for a content descriptor from application settings.

    Builds the session configuration from ``settings`` (or the cached
    ``get_settings()``) unless ``config`` is given, and configures structlog
    with its log level and renderer.

    Args:
        sink: EventSink or callable receiving records
        content: Content identity
        settings: Settings to derive the configuration from
        config: Explicit configuration, takes precedence over ``settings``
        **kwargs: Additional session parameters (listener, session_id_factory, ...)

    Returns:
        MediaSession: Configured session

    Example:
        session = create_session(ConsoleSink(), MediaContent(content_id="023134"))
    """
    if config is None:
        config = MediaSessionConfig.from_settings(settings)
    config.apply_logging()
    return MediaSession.from_content(sink, content, config=config, **kwargs)
