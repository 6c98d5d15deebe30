"""
Timeline Interfaces

Protocol definitions for timeline integration points.
These allow the timeline to work with any replay player and any event
producer without knowing about either.

Note: Event clicks are reported via Qt signals (TimelineWidget.event_clicked)
rather than a callback interface, following Qt conventions.
"""

from typing import Protocol, Mapping, runtime_checkable

from .types import EventTrack


@runtime_checkable
class ReplayInterface(Protocol):
    """
    Protocol for session-replay players.

    Implement this interface to connect a replay player to the timeline.
    The timeline queries position through it and seeks it on event clicks.
    It never owns playback state.
    """

    def get_current_time(self) -> float:
        """
        Get current replay position in milliseconds (replay time domain).
        """
        ...

    def is_playing(self) -> bool:
        """
        Check if currently playing.

        Returns:
            True if playing, False if paused/stopped
        """
        ...

    def goto(self, time_ms: float) -> None:
        """
        Seek to a specific position.

        Args:
            time_ms: Target position in milliseconds (replay time domain)
        """
        ...

    def play(self) -> None:
        """Start or resume playback."""
        ...

    def pause(self) -> None:
        """Pause playback."""
        ...


@runtime_checkable
class EventSourceInterface(Protocol):
    """
    Protocol for event data providers.

    Implement this to feed tracks to the timeline from an instrumentation
    layer. ProfilingSession implements it.
    """

    def get_tracks(self) -> Mapping[str, EventTrack]:
        """
        Get all tracks keyed by track id, in display order.
        """
        ...
