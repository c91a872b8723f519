"""Type definitions for the media session package."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, TypedDict


if TYPE_CHECKING:
    from .events import MediaEvent


class MediaContentType(str, Enum):
    """Kind of content being played."""

    VIDEO = "Video"
    AUDIO = "Audio"


class MediaStreamType(str, Enum):
    """Delivery model of the content stream."""

    ON_DEMAND = "OnDemand"
    LIVE = "Live"
    LINEAR = "Linear"


class MessageType(str, Enum):
    """Classification of a record handed to the sink."""

    MEDIA = "Media"
    PAGE_EVENT = "PageEvent"


class EventType(str, Enum):
    """Category attached to flattened page events."""

    MEDIA = "Media"


class MediaEventType(str, Enum):
    """Playback actions. Values are the display names of the events."""

    SESSION_START = "Media Session Start"
    SESSION_END = "Media Session End"
    PLAY = "Play"
    PAUSE = "Pause"
    MEDIA_CONTENT_END = "Media Content End"
    UPDATE_PLAYHEAD_POSITION = "Update Playhead Position"
    AD_BREAK_START = "Ad Break Start"
    AD_BREAK_END = "Ad Break End"
    AD_START = "Ad Start"
    AD_END = "Ad End"
    AD_SKIP = "Ad Skip"
    AD_CLICK = "Ad Click"
    BUFFER_START = "Buffer Start"
    BUFFER_END = "Buffer End"
    SEEK_START = "Seek Start"
    SEEK_END = "Seek End"
    SEGMENT_START = "Segment Start"
    SEGMENT_END = "Segment End"
    SEGMENT_SKIP = "Segment Skip"
    UPDATE_QOS = "Update QoS"

    @property
    def supports_page_event(self) -> bool:
        """Whether this action also has a flattened page-event variant."""
        return self in _PAGE_EVENT_TYPES


_PAGE_EVENT_TYPES = frozenset({MediaEventType.SESSION_START, MediaEventType.SESSION_END})


@dataclass
class MediaContent:
    """Identity of the content tracked by a session."""

    content_id: str
    title: str = ""
    duration: int | None = None
    content_type: MediaContentType = MediaContentType.VIDEO
    stream_type: MediaStreamType = MediaStreamType.ON_DEMAND


@dataclass
class AdBreak:
    """A group of ads played together (pre-roll, mid-roll, ...)."""

    id: str
    title: str | None = None
    duration: int | None = None


@dataclass
class AdContent:
    """A single ad creative within an ad break."""

    id: str
    advertiser: str | None = None
    title: str | None = None
    campaign: str | None = None
    duration: int | None = None
    creative: str | None = None
    site_id: str | None = None
    placement: int | None = None


@dataclass
class Segment:
    """A chapter or segment of the main content."""

    title: str
    index: int | None = None
    duration: int | None = None


@dataclass
class QoS:
    """Quality of service metrics reported by the player."""

    startup_time: int | None = None
    fps: int | None = None
    bit_rate: int | None = None
    dropped_frames: int | None = None


class MediaOptions(TypedDict, total=False):
    """Optional per-call arguments accepted by every logging method."""

    current_playhead_position: int
    custom_attributes: dict[str, Any]


MediaEventListener = Callable[["MediaEvent"], None]


__all__ = [
    "MediaContentType",
    "MediaStreamType",
    "MessageType",
    "EventType",
    "MediaEventType",
    "MediaContent",
    "AdBreak",
    "AdContent",
    "Segment",
    "QoS",
    "MediaOptions",
    "MediaEventListener",
]
