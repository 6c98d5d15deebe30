"""
Tests for the TimelineWidget Qt host: surface sizing, session and replay
binding, and teardown.
"""
import pytest
from unittest.mock import MagicMock

from perf_timeline.core.hit_test import track_y
from perf_timeline.core.widget import TimelineWidget
from perf_timeline.playback.replay_sync import ReplaySync
from perf_timeline.session import ProfilingSession
from perf_timeline.types import Viewport


@pytest.fixture
def widget(qapp):
    widget = TimelineWidget()
    widget.resize(400, 240)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()


@pytest.fixture
def session(qapp):
    session = ProfilingSession()
    session.start(baseline=0.0)
    return session


@pytest.fixture
def replay_sync(qapp):
    replay = MagicMock()
    replay.get_current_time = MagicMock(return_value=250.0)
    replay.is_playing = MagicMock(return_value=False)
    return ReplaySync(replay, time_offset=0.0)


class TestSurface:

    def test_surface_follows_widget_size(self, widget):
        assert widget.renderer.width == widget.width()
        assert widget.renderer.height == widget.height()

    def test_reset_view_emits_viewport(self, widget):
        received = []
        widget.viewport_changed.connect(received.append)
        widget.controller.set_viewport(Viewport(offset_x=300, scale=3.0))
        widget.reset_view()
        assert received[-1] == Viewport()


class TestBinding:

    def test_session_updates_tracks(self, widget, session):
        widget.bind_session(session)
        assert [t.id for t in widget.controller.tracks] == ['network', 'user-input', 'render']

        session.record_event('render', '<App>', 100, 20)
        session.flush()
        assert [e.id for e in widget.controller.tracks[2].events] == ['render-1']

    def test_replay_moves_cursor(self, widget, replay_sync):
        widget.bind_replay(replay_sync)
        replay_sync.poll()
        assert widget.controller.cursor.current_time == 250.0
        assert widget.controller.cursor.is_playing is False

    def test_event_click_seeks_replay(self, widget, replay_sync, session):
        widget.bind_session(session)
        widget.bind_replay(replay_sync)
        event = session.record_event('render', '<App>', 100, 20)
        widget.event_clicked.emit(event)
        replay_sync.replay.goto.assert_called_once_with(100.0)
        replay_sync.replay.pause.assert_called_once()

    def test_renderer_click_reaches_signal(self, widget, session):
        widget.bind_session(session)
        event = session.record_event('render', '<App>', 100, 20)
        session.flush()
        received = []
        widget.event_clicked.connect(received.append)
        widget.renderer.handle_click(110, track_y(2) + 20)
        assert received == [event]


class TestDetach:

    def test_detach_drops_surface_and_subscriptions(self, widget, session, replay_sync):
        widget.bind_session(session)
        widget.bind_replay(replay_sync)
        widget.detach()

        assert widget.renderer.surface is None
        session.record_event('render', '<App>', 100, 20)
        session.flush()
        assert widget.controller.tracks[2].events == []

        replay_sync.poll()
        assert not widget.controller.cursor.is_active

    def test_detach_twice(self, widget):
        widget.detach()
        widget.detach()
        widget.renderer.draw_timeline()


class TestCloseAndShow:
    """Closing hides the widget; showing it again keeps it drawable."""

    def test_reshown_widget_keeps_surface(self, widget, qapp):
        widget.close()
        widget.show()
        widget.resize(500, 260)
        qapp.processEvents()

        assert widget.renderer.surface is not None
        assert widget.renderer.width == 500
        assert widget.renderer.height == 260

    def test_reshown_widget_still_follows_session(self, widget, session, qapp):
        widget.bind_session(session)
        widget.close()
        widget.show()
        qapp.processEvents()

        session.record_event('render', '<App>', 100, 20)
        session.flush()
        assert [e.id for e in widget.controller.tracks[2].events] == ['render-1']
