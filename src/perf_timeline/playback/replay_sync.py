"""
Replay Sync

Couples the timeline's time cursor to an external session-replay player.

The player and the timeline measure time from different zeros:

    timeline_time = replay_time - time_offset

Polls the player at ~60 FPS while started and publishes the cursor
through cursor_changed. Seeking goes the other way: a clicked event's
start is converted to replay time and the player is paused there.
"""

from typing import Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from ..interfaces import ReplayInterface
from ..settings import TimelineSettings
from ..types import PlaybackCursor, TimelineEvent
from ..utils.message import Log


class ReplaySync(QObject):
    """
    Replay player -> time cursor bridge.

    Signals:
        cursor_changed(current_time, is_playing): Cursor moved or play state
            changed. A negative time means no cursor.
    """

    cursor_changed = pyqtSignal(float, bool)

    def __init__(
        self,
        replay: ReplayInterface,
        time_offset: Optional[float] = None,
        settings: Optional[TimelineSettings] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._settings = settings or TimelineSettings()
        self._replay = replay
        self._time_offset = self._settings.replay_time_offset_ms if time_offset is None else float(time_offset)
        self._cursor = PlaybackCursor.inactive()

        self._timer = QTimer(self)
        self._timer.setInterval(self._settings.replay_poll_interval_ms)
        self._timer.timeout.connect(self.poll)

    @property
    def replay(self) -> ReplayInterface:
        return self._replay

    @property
    def time_offset(self) -> float:
        return self._time_offset

    @property
    def cursor(self) -> PlaybackCursor:
        return self._cursor

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    # =========================================================================
    # Time Domains
    # =========================================================================

    def to_timeline_time(self, replay_time: float) -> float:
        return replay_time - self._time_offset

    def to_replay_time(self, timeline_time: float) -> float:
        return timeline_time + self._time_offset

    # =========================================================================
    # Polling
    # =========================================================================

    def start(self) -> None:
        """Start polling the player."""
        if self._timer.isActive():
            return
        self._timer.start()
        Log.info(f"ReplaySync: Polling every {self._timer.interval()}ms (offset={self._time_offset}ms)")
        self.poll()

    def stop(self) -> None:
        """Stop polling and clear the cursor."""
        self._timer.stop()
        self._cursor = PlaybackCursor.inactive()
        self.cursor_changed.emit(self._cursor.current_time, self._cursor.is_playing)
        Log.info("ReplaySync: Stopped")

    def poll(self) -> PlaybackCursor:
        """
        Read the player once and emit cursor_changed if anything moved.

        Returns:
            The current cursor
        """
        cursor = PlaybackCursor(
            current_time=self.to_timeline_time(self._replay.get_current_time()),
            is_playing=bool(self._replay.is_playing()),
        )
        if cursor != self._cursor:
            self._cursor = cursor
            self.cursor_changed.emit(cursor.current_time, cursor.is_playing)
        return cursor

    # =========================================================================
    # Seeking
    # =========================================================================

    def seek_to_event(self, event: TimelineEvent) -> None:
        """Jump the player to an event's start and pause there."""
        self.seek(event.start_time)

    def seek(self, timeline_time: float) -> None:
        replay_time = self.to_replay_time(timeline_time)
        self._replay.goto(replay_time)
        self._replay.pause()
        Log.debug(f"ReplaySync: Seek to {timeline_time:.1f}ms (replay {replay_time:.1f}ms)")
        self.poll()
