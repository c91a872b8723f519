#!/usr/bin/env python3
"""Example playing through a video with a mid-roll ad break."""

from media_session import (
    AdBreak,
    AdContent,
    ConsoleSink,
    MediaContentType,
    MediaSession,
    MediaSessionConfig,
    MediaStreamType,
    QoS,
    Segment,
)
from media_session.log_config import configure_logging


configure_logging("INFO", json=True)


def on_media_event(event) -> None:
    """Print every media event, whichever sink channels are enabled."""
    print(f"listener: {event.name} @ {event.playhead_position}")


def main() -> None:
    session = MediaSession(
        ConsoleSink(),
        "023134",
        "Immigrant Song",
        120000,
        MediaContentType.VIDEO,
        MediaStreamType.ON_DEMAND,
        config=MediaSessionConfig(log_page_event=True),
        listener=on_media_event,
    )

    session.log_media_session_start()
    session.log_qos(QoS(startup_time=201, fps=30, bit_rate=4500, dropped_frames=0))
    session.log_play()
    session.log_segment_start(Segment(title="Intro", index=0, duration=30000))
    session.log_playhead_position(30000)
    session.log_segment_end()

    session.log_ad_break_start(AdBreak(id="08123410", title="mid-roll", duration=10000))
    session.log_ad_start(
        AdContent(id="4423210", advertiser="Planet Express", title="Good News Everybody!")
    )
    session.log_ad_end()
    session.log_ad_break_end()

    session.log_buffer_start(320, 20, 30000)
    session.log_buffer_end(320, 100, 30000)
    session.log_seek_start(30000)
    session.log_seek_end(90000, {"current_playhead_position": 90000})
    session.log_media_content_end({"current_playhead_position": 120000})
    session.log_media_session_end({"custom_attributes": {"completed": True}})

    milestone = session.create_page_event("Milestone", {"reached": "100%"})
    print(milestone.to_dict())


if __name__ == "__main__":
    main()
