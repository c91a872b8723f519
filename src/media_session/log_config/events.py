"""Structured log event names."""

from enum import Enum


class MediaLogEvents(str, Enum):
    """Event name constants for structured logging."""

    # Session events
    SESSION_CREATED = "media.session.created"
    SESSION_ID_ASSIGNED = "media.session.id_assigned"

    # Dispatch events
    EVENT_DISPATCHED = "media.event.dispatched"
    EVENT_DISCARDED = "media.event.discarded"

    # Sink events
    EVENT_LOGGED = "media.event.logged"

    # Configuration events
    SETTINGS_LOADED = "media.settings.loaded"


__all__ = ["MediaLogEvents"]
