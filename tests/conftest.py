"""Pytest configuration and shared fixtures for media session tests."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from media_session.config import MediaSessionConfig
from media_session.session import MediaSession
from media_session.types import (
    AdBreak,
    AdContent,
    MediaContentType,
    MediaStreamType,
    QoS,
    Segment,
)


# ==================== Sink Fixtures ====================


@pytest.fixture
def sink() -> MagicMock:
    """Create a mock event sink."""
    mock = MagicMock()
    mock.log_base_event = MagicMock(return_value=None)
    return mock


@pytest.fixture
def listener() -> MagicMock:
    """Create a mock media event listener."""
    return MagicMock(return_value=None)


# ==================== Session Fixtures ====================


@pytest.fixture
def session(sink) -> MediaSession:
    """Create a session for a video on demand with default configuration."""
    return MediaSession(
        sink,
        "023134",
        "Immigrant Song",
        120000,
        MediaContentType.VIDEO,
        MediaStreamType.ON_DEMAND,
        session_id_factory=lambda: "session-0001",
    )


@pytest.fixture
def silent_session(sink) -> MediaSession:
    """Create a session with both sink channels disabled."""
    return MediaSession(
        sink,
        "023134",
        "Immigrant Song",
        120000,
        MediaContentType.VIDEO,
        MediaStreamType.ON_DEMAND,
        config=MediaSessionConfig(log_media_event=False, log_page_event=False),
    )


# ==================== Payload Fixtures ====================


@pytest.fixture
def ad_break() -> AdBreak:
    return AdBreak(id="08123410", title="mid-roll", duration=10000)


@pytest.fixture
def ad_content() -> AdContent:
    return AdContent(
        id="4423210",
        advertiser="Mom's Friendly Robot Company",
        title="What?! Nobody rips off my kids but me!",
        campaign="MomCorp Galactic Domination Plot 3201",
        duration=60000,
        creative="A Fishful of Dollars",
        site_id="moms",
        placement=0,
    )


@pytest.fixture
def segment() -> Segment:
    return Segment(title="The Gang Write Some Code", index=4, duration=36000)


@pytest.fixture
def qos() -> QoS:
    return QoS(startup_time=201, fps=42, bit_rate=2, dropped_frames=3)


@pytest.fixture
def options() -> dict:
    """Options carrying both a playhead override and custom attributes."""
    return {
        "current_playhead_position": 32,
        "custom_attributes": {
            "content_rating": "epic",
            "additional": {"attribute": "foo"},
        },
    }


@pytest.fixture
def sent_events(sink):
    """Return a callable listing the records handed to the mock sink, in order."""

    def _sent() -> list:
        return [call.args[0] for call in sink.log_base_event.call_args_list]

    return _sent
