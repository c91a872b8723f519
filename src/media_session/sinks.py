"""Event sink protocol and implementations."""

from typing import Any, Callable, Protocol, runtime_checkable

import structlog

from .events import MediaEvent, PageEvent
from .exceptions import MediaSinkError
from .log_config import MediaLogEvents, get_context_logger


@runtime_checkable
class EventSink(Protocol):
    """Protocol for collaborators receiving finished event records."""

    def log_base_event(self, event: MediaEvent | PageEvent) -> None:
        """Receive one media event or page event.

        Exceptions raised here propagate to the caller of the logging method.
        """
        ...


class CallableSink:
    """Adapts a plain callable to the ``EventSink`` protocol."""

    def __init__(self, func: Callable[[MediaEvent | PageEvent], Any]):
        self.func = func

    def log_base_event(self, event: MediaEvent | PageEvent) -> None:
        self.func(event)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.func!r})"


class ConsoleSink:
    """Writes every record to the structured log.

    Media events are logged with their flattened attributes, page events with
    their data mapping.
    """

    def __init__(self, logger: structlog.BoundLogger | None = None):
        self.logger = logger or get_context_logger("media_sink")

    def log_base_event(self, event: MediaEvent | PageEvent) -> None:
        if isinstance(event, MediaEvent):
            attributes = event.to_attributes()
        else:
            attributes = dict(event.data)

        self.logger.info(
            MediaLogEvents.EVENT_LOGGED.value,
            event_name=event.name,
            message_type=event.message_type.value,
            attributes=attributes,
        )


def resolve_sink(sink: Any) -> EventSink:
    """Return ``sink`` as an ``EventSink``.

    Objects implementing the protocol are returned unchanged and plain
    callables are wrapped in ``CallableSink``.

    Raises:
        MediaSinkError: If ``sink`` is neither
    """
    if isinstance(sink, EventSink):
        return sink
    if callable(sink):
        return CallableSink(sink)
    raise MediaSinkError(
        "Sink must implement log_base_event or be callable",
        sink_type=type(sink).__name__,
    )


__all__ = ["EventSink", "CallableSink", "ConsoleSink", "resolve_sink"]
