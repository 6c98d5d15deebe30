"""
Profiling Session

Collects timeline events for one recording session and publishes track
snapshots to whoever draws them.

Every event time is stored relative to the session baseline (the moment
start() was called), which is the same zero the replay player uses once
its offset is applied.

Usage:
    session = ProfilingSession()
    session.start()
    session.record_event('render', '<App>', start=t0, duration=3.2)
    widget.bind_session(session)
"""

import time
from typing import Dict, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .types import EventTrack, TimelineEvent
from .utils.message import Log

# Track id -> (label, color). Order is display order.
DEFAULT_TRACKS = {
    'network': ('Network', '#38bdf8'),
    'user-input': ('User Input', '#ed64a6'),
    'render': ('Component Renders', '#4299e1'),
}


def now_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.perf_counter() * 1000.0


class ProfilingSession(QObject):
    """
    Explicit session state for the profiler.

    Events are appended in arrival order, so each track stays roughly
    chronological. Recording is ignored until start() is called.

    Signals:
        tracks_changed(dict): Copied tracks keyed by id. Changes made in one
            event-loop pass are coalesced into a single emission; call
            flush() to publish immediately.
    """

    tracks_changed = pyqtSignal(object)  # Dict[str, EventTrack]

    def __init__(self, tracks: Optional[Dict[str, tuple]] = None, parent=None):
        super().__init__(parent)
        definitions = DEFAULT_TRACKS if tracks is None else tracks
        self._tracks: Dict[str, EventTrack] = {
            track_id: EventTrack(id=track_id, label=label, color=color)
            for track_id, (label, color) in definitions.items()
        }
        self._counters: Dict[str, int] = {track_id: 0 for track_id in self._tracks}
        self._ids: Dict[str, set] = {track_id: set() for track_id in self._tracks}
        self._baseline: Optional[float] = None
        self._is_recording = False

        self._pending = False
        self._emit_timer = QTimer(self)
        self._emit_timer.setSingleShot(True)
        self._emit_timer.setInterval(0)
        self._emit_timer.timeout.connect(self.flush)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_recording(self) -> bool:
        return self._is_recording

    @property
    def baseline(self) -> Optional[float]:
        """Absolute time (ms) of session zero, or None before start()."""
        return self._baseline

    def start(self, baseline: Optional[float] = None) -> None:
        """
        Begin recording.

        Args:
            baseline: Absolute time in ms to use as session zero. Defaults
                to the current perf_counter reading.
        """
        self._baseline = now_ms() if baseline is None else float(baseline)
        self._is_recording = True
        Log.info(f"ProfilingSession: Recording started (baseline={self._baseline:.3f}ms)")

    def stop(self) -> None:
        if not self._is_recording:
            return
        self._is_recording = False
        Log.info(f"ProfilingSession: Recording stopped ({self.event_count()} events)")

    def clear(self) -> None:
        """Drop all events, keep the tracks."""
        for track_id, track in self._tracks.items():
            track.events = []
            self._counters[track_id] = 0
            self._ids[track_id].clear()
        Log.debug("ProfilingSession: Cleared events")
        self._emit()

    # =========================================================================
    # Recording
    # =========================================================================

    def record_event(
        self,
        track_id: str,
        label: str,
        start: float,
        duration: float,
        event_id: Optional[str] = None,
        absolute: bool = True,
    ) -> Optional[TimelineEvent]:
        """
        Append an event to a track.

        Args:
            track_id: Target track
            label: Display text
            start: Start time in ms (absolute clock, or session-relative
                when ``absolute`` is False)
            duration: Duration in ms
            event_id: Explicit id; generated as "{track_id}-{n}" when omitted,
                skipping ids already taken in the track

        Returns:
            The stored event, or None when not recording

        Raises:
            KeyError: If track_id is not a known track
            ValueError: If duration is negative or event_id already exists
                in the track
        """
        if track_id not in self._tracks:
            raise KeyError(f"Unknown track '{track_id}'")
        if duration < 0:
            raise ValueError(f"Event duration must be >= 0, got {duration}")
        if not self._is_recording:
            return None

        taken = self._ids[track_id]
        if event_id is None:
            event_id = self._next_id(track_id)
        elif event_id in taken:
            raise ValueError(f"Event id '{event_id}' already exists in track '{track_id}'")

        start_time = start - self._baseline if absolute else start

        event = TimelineEvent(
            id=event_id,
            label=label,
            start_time=float(start_time),
            duration=float(duration),
            event_track_id=track_id,
        )
        self._tracks[track_id].events.append(event)
        taken.add(event_id)
        self._emit()
        return event

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> Dict[str, EventTrack]:
        """Copies of all tracks keyed by id, in display order."""
        return {track_id: track.copy() for track_id, track in self._tracks.items()}

    def get_tracks(self) -> Dict[str, EventTrack]:
        return self.snapshot()

    def event_count(self) -> int:
        return sum(len(track.events) for track in self._tracks.values())

    def flush(self) -> None:
        """Emit tracks_changed now if a change is waiting."""
        self._emit_timer.stop()
        if not self._pending:
            return
        self._pending = False
        self.tracks_changed.emit(self.snapshot())

    def _next_id(self, track_id: str) -> str:
        taken = self._ids[track_id]
        while True:
            self._counters[track_id] += 1
            event_id = f"{track_id}-{self._counters[track_id]}"
            if event_id not in taken:
                return event_id

    def _emit(self) -> None:
        self._pending = True
        if not self._emit_timer.isActive():
            self._emit_timer.start()
