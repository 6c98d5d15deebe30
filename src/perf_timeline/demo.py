"""
Performance Timeline Demo

Shows the timeline with a synthetic profiling session and a clock-driven
replay player standing in for a real session-replay engine.

Run with:
    perf-timeline
    python -m perf_timeline.demo
"""
import sys
from typing import Optional

from PyQt6.QtCore import QElapsedTimer
from PyQt6.QtWidgets import QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel

from .core.widget import TimelineWidget
from .playback.replay_sync import ReplaySync
from .session import ProfilingSession
from .settings import TimelineSettingsManager
from .timing.time_format import TimeFormat
from .types import TimelineEvent
from .utils.message import Log

DEMO_DURATION_MS = 2000.0


class ClockReplayPlayer:
    """
    Minimal replay player driven by a wall clock.

    Implements ReplayInterface. Replace with a real session-replay engine
    for production use.
    """

    def __init__(self, duration_ms: float = DEMO_DURATION_MS):
        self._duration = duration_ms
        self._position = 0.0
        self._clock = QElapsedTimer()
        self._playing = False

    def get_current_time(self) -> float:
        if self._playing:
            position = self._position + self._clock.elapsed()
            if position >= self._duration:
                self._position = self._duration
                self._playing = False
                return self._duration
            return position
        return self._position

    def is_playing(self) -> bool:
        # Reading the time first lets playback stop at the end
        self.get_current_time()
        return self._playing

    def goto(self, time_ms: float) -> None:
        self._position = max(0.0, min(self._duration, time_ms))
        if self._playing:
            self._clock.restart()

    def play(self) -> None:
        if self._playing:
            return
        if self._position >= self._duration:
            self._position = 0.0
        self._clock.restart()
        self._playing = True

    def pause(self) -> None:
        if not self._playing:
            return
        self._position = self.get_current_time()
        self._playing = False


def build_demo_session() -> ProfilingSession:
    """
    A session with a page load's worth of synthetic events on every track.
    """
    session = ProfilingSession()
    session.start(baseline=0.0)

    network = [
        ("GET /index.html", 0, 120),
        ("GET /app.js", 130, 340),
        ("GET /styles.css", 140, 90),
        ("GET /api/user", 520, 210),
        ("GET /api/feed", 760, 480),
        ("GET /avatar.png", 1300, 150),
    ]
    for label, start, duration in network:
        session.record_event('network', label, start, duration, absolute=False)

    for i, start in enumerate((900, 1150, 1420, 1710)):
        session.record_event('user-input', f"click #{i + 1}", start, 6 + i * 3, absolute=False)

    renders = [
        ("<App>", 480, 24),
        ("<Header>", 506, 8),
        ("<UserCard>", 735, 18),
        ("<FeedList>", 1245, 62),
        ("<FeedItem>", 1310, 5),
        ("<Modal>", 1425, 31),
        ("<Toast>", 1720, 12),
    ]
    for label, start, duration in renders:
        session.record_event('render', label, start, duration, absolute=False)

    session.stop()
    return session


class DemoWindow(QMainWindow):
    """Timeline plus transport buttons."""

    def __init__(self, session: ProfilingSession, replay_sync: ReplaySync, settings=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Performance Timeline")
        self.resize(1000, 320)

        self._replay_sync = replay_sync
        self._player = replay_sync.replay

        self.timeline = TimelineWidget(settings=settings)
        self.timeline.bind_session(session)
        self.timeline.bind_replay(replay_sync)
        self.timeline.event_clicked.connect(self._on_event_clicked)

        self._status = QLabel("Click an event to seek the replay")

        play_button = QPushButton("Play")
        play_button.clicked.connect(self._player.play)
        pause_button = QPushButton("Pause")
        pause_button.clicked.connect(self._player.pause)
        reset_button = QPushButton("Reset View")
        reset_button.clicked.connect(self.timeline.reset_view)

        controls = QHBoxLayout()
        controls.addWidget(play_button)
        controls.addWidget(pause_button)
        controls.addWidget(reset_button)
        controls.addStretch()
        controls.addWidget(self._status)

        layout = QVBoxLayout()
        layout.addLayout(controls)
        layout.addWidget(self.timeline)
        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

        replay_sync.start()

    def _on_event_clicked(self, event: TimelineEvent):
        self._status.setText(f"{event.label} @ {TimeFormat.milliseconds(event.start_time)}")

    def closeEvent(self, event):
        self._replay_sync.stop()
        self.timeline.detach()
        super().closeEvent(event)


def main(argv: Optional[list] = None) -> int:
    app = QApplication(sys.argv if argv is None else argv)
    settings = TimelineSettingsManager().settings
    Log.info("Performance Timeline demo starting")

    session = build_demo_session()
    replay_sync = ReplaySync(ClockReplayPlayer(), settings=settings)
    window = DemoWindow(session, replay_sync, settings=settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
