"""
Media Session

Tracks the state of one media playback and turns playback actions into event
records for the sink. Every logging method follows the same steps: apply the
state transition implied by the action, snapshot the session, build the
record, route it through the dispatcher.
"""

from dataclasses import replace
from types import MappingProxyType
from typing import Any, Callable, Mapping

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
from .identity import generate_session_id
from .log_config import MediaLogEvents, SessionLogContext, get_context_logger
from .sinks import EventSink, resolve_sink
from .types import (
    AdBreak,
    AdContent,
    MediaContent,
    MediaContentType,
    MediaEventListener,
    MediaEventType,
    MediaOptions,
    MediaStreamType,
    QoS,
    Segment,
)


class MediaSession:
    """
    State of a single media playback session.

    Content identity is fixed at construction. The session id stays blank
    until the first ``log_media_session_start`` call. ``ad_break``,
    ``ad_content`` and ``segment`` each hold the single active descriptor or
    ``None``; starting a new one replaces the previous one.

    Every logging method accepts an optional ``options`` mapping:

    - ``current_playhead_position`` overwrites the session playhead before the
      record is built and persists for later calls
    - ``custom_attributes`` is attached to the record by reference

    Examples:
        >>> session = MediaSession(
        ...     ConsoleSink(), "023134", "Immigrant Song", 120000,
        ...     MediaContentType.VIDEO, MediaStreamType.ON_DEMAND,
        ... )
        >>> session.log_media_session_start()
        >>> session.log_play({"current_playhead_position": 0})
    """

    def __init__(
        self,
        sink: EventSink | Callable[[MediaEvent | PageEvent], Any],
        content_id: str,
        title: str,
        duration: int | None,
        content_type: MediaContentType,
        stream_type: MediaStreamType,
        *,
        config: MediaSessionConfig | None = None,
        listener: MediaEventListener | None = None,
        session_id_factory: Callable[[], str] | None = None,
    ):
        """Initialize media session.

        Args:
            sink: Receiver of finished records (``EventSink`` or callable)
            content_id: Content identifier
            title: Content title
            duration: Content duration
            content_type: Video or audio
            stream_type: On demand, live or linear
            config: Session configuration (defaults to media events only)
            listener: Callback invoked with every media event
            session_id_factory: Zero-argument callable supplying the session id
        """
        self._content = MediaContent(
            content_id=content_id,
            title=title,
            duration=duration,
            content_type=content_type,
            stream_type=stream_type,
        )
        self.config = replace(config) if config is not None else MediaSessionConfig()
        self.session_id = ""
        self.current_playhead_position = 0

        self.ad_break: AdBreak | None = None
        self.ad_content: AdContent | None = None
        self.segment: Segment | None = None

        self._session_id_factory = session_id_factory or generate_session_id
        self._dispatcher = EventDispatcher(
            resolve_sink(sink),
            DispatchConfig(
                log_media_event=self.config.log_media_event,
                log_page_event=self.config.log_page_event,
                listener=listener,
            ),
        )

        self.logger = get_context_logger("media_session")
        self.logger.debug(
            MediaLogEvents.SESSION_CREATED.value,
            content_id=content_id,
            content_type=getattr(content_type, "value", content_type),
            stream_type=getattr(stream_type, "value", stream_type),
        )

    @classmethod
    def from_content(
        cls,
        sink: EventSink | Callable[[MediaEvent | PageEvent], Any],
        content: MediaContent,
        **kwargs: Any,
    ) -> "MediaSession":
        """Create a session for an existing ``MediaContent`` descriptor."""
        return cls(
            sink,
            content.content_id,
            content.title,
            content.duration,
            content.content_type,
            content.stream_type,
            **kwargs,
        )

    # ==================== Properties ====================

    @property
    def content(self) -> MediaContent:
        return self._content

    @property
    def content_id(self) -> str:
        return self._content.content_id

    @property
    def title(self) -> str:
        return self._content.title

    @property
    def duration(self) -> int | None:
        return self._content.duration

    @property
    def content_type(self) -> MediaContentType:
        return self._content.content_type

    @property
    def stream_type(self) -> MediaStreamType:
        return self._content.stream_type

    @property
    def log_media_event(self) -> bool:
        return self._dispatcher.config.log_media_event

    @log_media_event.setter
    def log_media_event(self, value: bool) -> None:
        self.config.log_media_event = value
        self._dispatcher.config.log_media_event = value

    @property
    def log_page_event(self) -> bool:
        return self._dispatcher.config.log_page_event

    @log_page_event.setter
    def log_page_event(self, value: bool) -> None:
        self.config.log_page_event = value
        self._dispatcher.config.log_page_event = value

    @property
    def media_event_listener(self) -> MediaEventListener | None:
        return self._dispatcher.config.listener

    @media_event_listener.setter
    def media_event_listener(self, listener: MediaEventListener | None) -> None:
        self._dispatcher.config.listener = listener

    # ==================== State ====================

    def snapshot(self) -> SessionSnapshot:
        """Freeze the current session state."""
        return SessionSnapshot(
            content=self._content,
            session_id=self.session_id,
            playhead_position=self.current_playhead_position,
            ad_break=self.ad_break,
            ad_content=self.ad_content,
            segment=self.segment,
        )

    def get_attributes(self) -> Mapping[str, Any]:
        """Current content and session attributes as a read-only mapping."""
        return MappingProxyType(content_attributes(self.snapshot()))

    def create_page_event(self, name: str, data: dict[str, Any] | None = None) -> PageEvent:
        """Build a custom page event without dispatching it.

        Args:
            name: Event name
            data: Attributes merged over the standard session attributes

        Returns:
            PageEvent: The built record
        """
        return build_page_event(self.snapshot(), name, data)

    def _log(
        self,
        event_type: MediaEventType,
        options: MediaOptions | None = None,
        **payload: Any,
    ) -> MediaEvent:
        if options and "current_playhead_position" in options:
            self.current_playhead_position = options["current_playhead_position"]
        return self._emit(event_type, options, **payload)

    def _emit(
        self,
        event_type: MediaEventType,
        options: MediaOptions | None = None,
        **payload: Any,
    ) -> MediaEvent:
        snapshot = self.snapshot()
        event = build_media_event(snapshot, event_type, options, **payload)

        with SessionLogContext(self.session_id, self.content_id):
            self._dispatcher.dispatch(event, snapshot)
        return event

    # ==================== Session lifecycle ====================

    def log_media_session_start(self, options: MediaOptions | None = None) -> None:
        """Log session start, assigning the session id on first call."""
        if not self.session_id:
            self.session_id = self._session_id_factory()
            self.logger.info(
                MediaLogEvents.SESSION_ID_ASSIGNED.value,
                media_session_id=self.session_id,
                content_id=self.content_id,
            )
        self._log(MediaEventType.SESSION_START, options)

    def log_media_session_end(self, options: MediaOptions | None = None) -> None:
        """Log session end. Session state is kept; logging may continue."""
        self._log(MediaEventType.SESSION_END, options)

    # ==================== Playback ====================

    def log_play(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.PLAY, options)

    def log_pause(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.PAUSE, options)

    def log_media_content_end(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.MEDIA_CONTENT_END, options)

    def log_playhead_position(self, position: int, options: MediaOptions | None = None) -> None:
        """Update the session playhead and log it.

        The explicit ``position`` wins over any playhead given in ``options``.
        """
        self.current_playhead_position = position
        self._emit(MediaEventType.UPDATE_PLAYHEAD_POSITION, options)

    # ==================== Ad breaks ====================

    def log_ad_break_start(self, ad_break: AdBreak, options: MediaOptions | None = None) -> None:
        self.ad_break = ad_break
        self._log(MediaEventType.AD_BREAK_START, options, ad_break=ad_break)

    def log_ad_break_end(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.AD_BREAK_END, options, ad_break=self.ad_break)
        self.ad_break = None

    # ==================== Ads ====================

    def log_ad_start(self, ad_content: AdContent, options: MediaOptions | None = None) -> None:
        self.ad_content = ad_content
        self._log(MediaEventType.AD_START, options, ad_content=ad_content)

    def log_ad_end(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.AD_END, options, ad_content=self.ad_content)
        self.ad_content = None

    def log_ad_skip(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.AD_SKIP, options, ad_content=self.ad_content)
        self.ad_content = None

    def log_ad_click(self, ad_content: AdContent, options: MediaOptions | None = None) -> None:
        """Log a click on ``ad_content`` without changing the active ad."""
        self._log(MediaEventType.AD_CLICK, options, ad_content=ad_content)

    # ==================== Segments ====================

    def log_segment_start(self, segment: Segment, options: MediaOptions | None = None) -> None:
        self.segment = segment
        self._log(MediaEventType.SEGMENT_START, options, segment=segment)

    def log_segment_end(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.SEGMENT_END, options, segment=self.segment)
        self.segment = None

    def log_segment_skip(self, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.SEGMENT_SKIP, options, segment=self.segment)
        self.segment = None

    # ==================== Buffering, seeking, QoS ====================

    def log_buffer_start(
        self,
        buffer_duration: Any,
        buffer_percent: Any,
        buffer_position: Any,
        options: MediaOptions | None = None,
    ) -> None:
        self._log(
            MediaEventType.BUFFER_START,
            options,
            buffer_duration=buffer_duration,
            buffer_percent=buffer_percent,
            buffer_position=buffer_position,
        )

    def log_buffer_end(
        self,
        buffer_duration: Any,
        buffer_percent: Any,
        buffer_position: Any,
        options: MediaOptions | None = None,
    ) -> None:
        self._log(
            MediaEventType.BUFFER_END,
            options,
            buffer_duration=buffer_duration,
            buffer_percent=buffer_percent,
            buffer_position=buffer_position,
        )

    def log_seek_start(self, position: Any, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.SEEK_START, options, seek_position=position)

    def log_seek_end(self, position: Any, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.SEEK_END, options, seek_position=position)

    def log_qos(self, qos: QoS, options: MediaOptions | None = None) -> None:
        self._log(MediaEventType.UPDATE_QOS, options, qos=qos)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(content_id={self.content_id!r}, "
            f"session_id={self.session_id!r}, "
            f"playhead_position={self.current_playhead_position!r})"
        )


__all__ = ["MediaSession"]
