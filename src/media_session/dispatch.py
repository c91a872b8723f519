"""Routing of finished records to the listener and the sink."""

from dataclasses import dataclass

from .events import MediaEvent, PageEvent, SessionSnapshot, build_page_event
from .log_config import MediaLogEvents, get_context_logger
from .sinks import EventSink
from .types import MediaEventListener


@dataclass
class DispatchConfig:
    """Channels a media event is routed to.

    Attributes:
        log_media_event: Send structured media events to the sink
        log_page_event: Send flattened page events to the sink for actions
            that have a page-event variant
        listener: Called with every media event, independent of the flags
    """

    log_media_event: bool = True
    log_page_event: bool = False
    listener: MediaEventListener | None = None


class EventDispatcher:
    """Routes media events to zero or more channels."""

    def __init__(self, sink: EventSink, config: DispatchConfig | None = None):
        self.sink = sink
        self.config = config or DispatchConfig()
        self.logger = get_context_logger("media_dispatch")

    def dispatch(
        self, event: MediaEvent, snapshot: SessionSnapshot
    ) -> list[MediaEvent | PageEvent]:
        """Route ``event`` according to the current configuration.

        Args:
            event: The record built for the action
            snapshot: Session state the record was built from, used for the
                page-event variant

        Returns:
            Records handed to the sink, in order
        """
        if self.config.listener is not None:
            self.config.listener(event)

        delivered: list[MediaEvent | PageEvent] = []

        if self.config.log_media_event:
            self.sink.log_base_event(event)
            delivered.append(event)

        if self.config.log_page_event and event.event_type.supports_page_event:
            page_event = build_page_event(snapshot, event.name, event.custom_attributes)
            self.sink.log_base_event(page_event)
            delivered.append(page_event)

        if delivered or self.config.listener is not None:
            self.logger.debug(
                MediaLogEvents.EVENT_DISPATCHED.value,
                event_name=event.name,
                delivered=[record.message_type.value for record in delivered],
                has_listener=self.config.listener is not None,
            )
        else:
            self.logger.debug(MediaLogEvents.EVENT_DISCARDED.value, event_name=event.name)

        return delivered


__all__ = ["DispatchConfig", "EventDispatcher"]
