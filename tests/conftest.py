"""
Shared pytest fixtures.

Qt runs headless, and settings/log directories are redirected into a
temporary directory so tests never touch the real user config.
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from perf_timeline.types import EventTrack, TimelineEvent


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point PERF_TIMELINE_HOME at a per-test directory."""
    monkeypatch.setenv("PERF_TIMELINE_HOME", str(tmp_path / "home"))
    return tmp_path / "home"


@pytest.fixture
def qapp():
    """Ensure QApplication exists for painting, widgets and signals."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def make_event(event_id, start, duration, track_id="render", label=None):
    return TimelineEvent(
        id=event_id,
        label=label or event_id,
        start_time=start,
        duration=duration,
        event_track_id=track_id,
    )


@pytest.fixture
def render_track():
    """Track 'render' with one event at 100ms lasting 20ms."""
    return EventTrack(
        id="render",
        label="Component Renders",
        color="#4299e1",
        events=[make_event("render-1", 100, 20)],
    )


@pytest.fixture
def sample_tracks():
    """Three tracks in display order: network, user-input, render."""
    return [
        EventTrack(
            id="network",
            label="Network",
            color="#38bdf8",
            events=[
                make_event("network-1", 0, 120, "network"),
                make_event("network-2", 130, 340, "network"),
            ],
        ),
        EventTrack(
            id="user-input",
            label="User Input",
            color="#ed64a6",
            events=[make_event("user-input-1", 300, 10, "user-input")],
        ),
        EventTrack(
            id="render",
            label="Component Renders",
            color="#4299e1",
            events=[
                make_event("render-1", 100, 20),
                make_event("render-2", 110, 40),
            ],
        ),
    ]
