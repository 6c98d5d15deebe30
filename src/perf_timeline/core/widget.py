"""
Timeline Widget

Qt host for the timeline. Owns the QImage surface, the renderer and the
interaction controller, and maps Qt input events onto the controller.

Signals:
    event_clicked(TimelineEvent): An event bar was clicked
    viewport_changed(Viewport): Zoom, pan or reset changed the viewport
"""

from typing import Optional, TYPE_CHECKING

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QWheelEvent, QMouseEvent
from PyQt6.QtWidgets import QWidget, QSizePolicy

from ..constants import BAND_HEIGHT, TRACK_STRIDE
from ..interaction.controller import InteractionController, TrackInput
from ..settings import TimelineSettings
from ..types import PlaybackCursor
from ..utils.message import Log
from .renderer import TimelineRenderer
from .style import TimelineStyle

if TYPE_CHECKING:
    from ..playback.replay_sync import ReplaySync
    from ..session import ProfilingSession


class TimelineWidget(QWidget):
    """
    Zoomable, pannable event timeline.

    Usage:
        widget = TimelineWidget(settings=manager.settings)
        widget.bind_session(session)
        widget.bind_replay(ReplaySync(player))
        widget.event_clicked.connect(on_event_clicked)
    """

    event_clicked = pyqtSignal(object)     # TimelineEvent
    viewport_changed = pyqtSignal(object)  # Viewport

    def __init__(self, parent=None, settings: Optional[TimelineSettings] = None):
        super().__init__(parent)
        self._settings = settings or TimelineSettings()
        self._renderer = TimelineRenderer(settings=self._settings)
        self._controller = InteractionController(self._renderer, settings=self._settings)
        self._controller.set_on_event_click(self.event_clicked.emit)

        self._session: Optional['ProfilingSession'] = None
        self._replay_sync: Optional['ReplaySync'] = None
        self._detached = False

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(BAND_HEIGHT + TRACK_STRIDE)

    @property
    def renderer(self) -> TimelineRenderer:
        return self._renderer

    @property
    def controller(self) -> InteractionController:
        return self._controller

    # =========================================================================
    # Public API
    # =========================================================================

    def replace_tracks(self, tracks: TrackInput) -> None:
        self._controller.replace_tracks(tracks)
        self.update()

    def set_playback(self, current_time: float, is_playing: bool = False) -> None:
        self._controller.set_playback(current_time, is_playing)
        self.update()

    def reset_view(self) -> None:
        self._controller.reset_view()
        self._after_viewport_change()

    def bind_session(self, session: 'ProfilingSession') -> None:
        """Follow a session: every tracks_changed replaces the drawn tracks."""
        if self._session is not None:
            self._session.tracks_changed.disconnect(self.replace_tracks)
        self._session = session
        session.tracks_changed.connect(self.replace_tracks)
        self.replace_tracks(session.snapshot())
        Log.debug("TimelineWidget: Bound to profiling session")

    def bind_replay(self, replay_sync: 'ReplaySync') -> None:
        """Follow a replay: cursor updates move the time cursor, clicks seek."""
        self._unbind_replay()
        self._replay_sync = replay_sync
        replay_sync.cursor_changed.connect(self._on_cursor_changed)
        self.event_clicked.connect(replay_sync.seek_to_event)
        Log.debug("TimelineWidget: Bound to replay")

    def detach(self) -> None:
        """
        Drop every subscription and the surface.

        After detach the renderer has nothing to draw on, so late updates
        are no-ops.
        """
        if self._detached:
            return
        if self._session is not None:
            self._session.tracks_changed.disconnect(self.replace_tracks)
            self._session = None
        self._unbind_replay()
        self._renderer.set_surface(None)
        self._detached = True
        Log.debug("TimelineWidget: Detached")

    def _unbind_replay(self) -> None:
        if self._replay_sync is None:
            return
        self._replay_sync.cursor_changed.disconnect(self._on_cursor_changed)
        self.event_clicked.disconnect(self._replay_sync.seek_to_event)
        self._replay_sync = None

    def _on_cursor_changed(self, current_time: float, is_playing: bool) -> None:
        self._controller.set_cursor(PlaybackCursor(current_time=current_time, is_playing=is_playing))
        self.update()

    def _after_viewport_change(self) -> None:
        self.viewport_changed.emit(self._controller.viewport)
        self.update()

    # =========================================================================
    # Qt Events
    # =========================================================================

    def wheelEvent(self, event: QWheelEvent):
        # Qt reports wheel-up as positive; the controller expects wheel-down positive
        delta_y = -event.angleDelta().y()
        if delta_y == 0:
            delta_y = -event.pixelDelta().y()
        before = self._controller.viewport
        if self._controller.on_wheel(event.position().x(), delta_y):
            event.accept()
        else:
            super().wheelEvent(event)
        if self._controller.viewport != before:
            self._after_viewport_change()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.position()
        self._controller.on_pointer_down(pos.x(), pos.y())
        self.setCursor(Qt.CursorShape.ClosedHandCursor)
        self.update()

    def mouseMoveEvent(self, event: QMouseEvent):
        pos = event.position()
        before = self._controller.viewport
        self._controller.on_pointer_move(pos.x(), pos.y())
        if self._controller.viewport != before:
            self._after_viewport_change()
        else:
            self.update()

    def mouseReleaseEvent(self, event: QMouseEvent):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseReleaseEvent(event)
            return
        pos = event.position()
        self.unsetCursor()
        self._controller.on_pointer_up(pos.x(), pos.y())
        self.update()

    def leaveEvent(self, event):
        self.unsetCursor()
        self._controller.on_pointer_leave()
        self.update()
        super().leaveEvent(event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if not self._detached:
            self._renderer.resize_canvas(self.width(), self.height())

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            surface = self._renderer.surface
            if surface is None:
                painter.fillRect(self.rect(), TimelineStyle.BG_COLOR)
            else:
                painter.drawImage(0, 0, surface)
        finally:
            painter.end()
