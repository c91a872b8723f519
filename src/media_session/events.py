"""
Event Record Model

Immutable records built from a frozen snapshot of session state. A playback
action produces a structured ``MediaEvent``; session start/end may also
produce a flat ``PageEvent``. The two shapes are derived by independent pure
functions so that extending one never changes the other.
"""

from dataclasses import dataclass, field
from typing import Any

from .types import (
    AdBreak,
    AdContent,
    EventType,
    MediaContent,
    MediaEventType,
    MediaOptions,
    MessageType,
    QoS,
    Segment,
)


def _display(value: Any) -> Any:
    """Render enum members as their display name, pass anything else through."""
    return getattr(value, "value", value)


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time copy of the state of a media session."""

    content: MediaContent
    session_id: str = ""
    playhead_position: int = 0
    ad_break: AdBreak | None = None
    ad_content: AdContent | None = None
    segment: Segment | None = None


def content_attributes(snapshot: SessionSnapshot) -> dict[str, Any]:
    """Standard content and session attributes shared by every flat record."""
    content = snapshot.content
    return {
        "content_id": content.content_id,
        "content_title": content.title,
        "content_duration": content.duration,
        "content_type": _display(content.content_type),
        "stream_type": _display(content.stream_type),
        "playhead_position": snapshot.playhead_position,
        "media_session_id": snapshot.session_id,
    }


@dataclass(frozen=True)
class MediaEvent:
    """Structured record describing one playback action.

    Attributes:
        event_type: Action that produced the record
        session_id: Identifier of the owning session at build time
        content: Content identity of the owning session
        playhead_position: Session playhead position at build time
        ad_break: Ad break payload (ad break actions)
        ad_content: Ad content payload (ad actions)
        segment: Segment payload (segment actions)
        qos: Quality of service payload (QoS updates)
        buffer_duration: Buffer duration (buffer actions)
        buffer_percent: Buffer fill percentage (buffer actions)
        buffer_position: Buffer position (buffer actions)
        seek_position: Seek target (seek actions)
        options: The options mapping passed by the caller, by reference
        custom_attributes: The caller's custom attributes, by reference
    """

    event_type: MediaEventType
    session_id: str
    content: MediaContent
    playhead_position: int = 0
    ad_break: AdBreak | None = None
    ad_content: AdContent | None = None
    segment: Segment | None = None
    qos: QoS | None = None
    buffer_duration: Any = None
    buffer_percent: Any = None
    buffer_position: Any = None
    seek_position: Any = None
    options: MediaOptions | None = field(default=None, compare=False)
    custom_attributes: dict[str, Any] | None = None
    message_type: MessageType = MessageType.MEDIA

    @property
    def name(self) -> str:
        """Display name of the event."""
        return self.event_type.value

    def to_attributes(self) -> dict[str, Any]:
        """Flatten the record into a single attribute mapping.

        Payloads that are absent contribute no keys. Custom attributes are
        merged last and win on collision.
        """
        attributes = content_attributes(
            SessionSnapshot(
                content=self.content,
                session_id=self.session_id,
                playhead_position=self.playhead_position,
            )
        )

        if self.ad_break is not None:
            attributes.update(
                ad_break_id=self.ad_break.id,
                ad_break_title=self.ad_break.title,
                ad_break_duration=self.ad_break.duration,
            )
        if self.ad_content is not None:
            attributes.update(
                ad_content_id=self.ad_content.id,
                ad_content_advertiser=self.ad_content.advertiser,
                ad_content_title=self.ad_content.title,
                ad_content_campaign=self.ad_content.campaign,
                ad_content_duration=self.ad_content.duration,
                ad_content_creative=self.ad_content.creative,
                ad_content_site_id=self.ad_content.site_id,
                ad_content_placement=self.ad_content.placement,
            )
        if self.segment is not None:
            attributes.update(
                segment_title=self.segment.title,
                segment_index=self.segment.index,
                segment_duration=self.segment.duration,
            )
        if self.qos is not None:
            attributes.update(
                qos_startup_time=self.qos.startup_time,
                qos_fps=self.qos.fps,
                qos_bitrate=self.qos.bit_rate,
                qos_dropped_frames=self.qos.dropped_frames,
            )
        if self.event_type in (MediaEventType.BUFFER_START, MediaEventType.BUFFER_END):
            attributes.update(
                buffer_duration=self.buffer_duration,
                buffer_percent=self.buffer_percent,
                buffer_position=self.buffer_position,
            )
        if self.event_type in (MediaEventType.SEEK_START, MediaEventType.SEEK_END):
            attributes["seek_position"] = self.seek_position

        if self.custom_attributes:
            attributes.update(self.custom_attributes)
        return attributes


@dataclass(frozen=True)
class PageEvent:
    """Generic flattened record used for lightweight reporting."""

    name: str
    data: dict[str, Any] = field(default_factory=dict)
    message_type: MessageType = MessageType.PAGE_EVENT
    event_type: EventType = EventType.MEDIA

    def to_dict(self) -> dict[str, Any]:
        """Convert the page event to a plain dictionary."""
        return {
            "name": self.name,
            "message_type": self.message_type.value,
            "event_type": self.event_type.value,
            "data": dict(self.data),
        }


def build_media_event(
    snapshot: SessionSnapshot,
    event_type: MediaEventType,
    options: MediaOptions | None = None,
    **payload: Any,
) -> MediaEvent:
    """Build the structured record for an action.

    Args:
        snapshot: Session state to embed
        event_type: Action being logged
        options: Caller options; kept by reference on the record
        **payload: Action specific fields (``ad_break``, ``qos``, ``seek_position``, ...)

    Returns:
        MediaEvent: The finished record
    """
    return MediaEvent(
        event_type=event_type,
        session_id=snapshot.session_id,
        content=snapshot.content,
        playhead_position=snapshot.playhead_position,
        options=options,
        custom_attributes=(options or {}).get("custom_attributes"),
        **payload,
    )


def build_page_event(
    snapshot: SessionSnapshot,
    name: str,
    data: dict[str, Any] | None = None,
) -> PageEvent:
    """Build a flattened page event from session state merged with ``data``."""
    attributes = content_attributes(snapshot)
    if data:
        attributes.update(data)
    return PageEvent(name=name, data=attributes)


__all__ = [
    "SessionSnapshot",
    "MediaEvent",
    "PageEvent",
    "content_attributes",
    "build_media_event",
    "build_page_event",
]
