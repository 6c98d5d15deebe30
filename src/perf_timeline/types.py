"""
Timeline Data Types
====================

Public data contracts for the timeline.

These types define the input/output interface of the rendering core.
Consumers use these types to communicate with the timeline - they don't
need to know about the renderer or the controller.

All times are milliseconds relative to a single session-wide baseline
(time zero = the moment recording started).

Snapshots (Viewport, MouseState, PlaybackCursor) are frozen dataclasses.
The controller replaces them with ``dataclasses.replace`` instead of
mutating, so a snapshot pushed into the renderer never changes under it.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

from .constants import DEFAULT_SCALE, DEFAULT_END_TIME


# =============================================================================
# Events and Tracks
# =============================================================================

@dataclass(frozen=True)
class TimelineEvent:
    """
    A single time-stamped event drawn as a bar on its track.

    The event kind (render, user input, network load) is carried by
    ``event_track_id`` rather than by a subclass.

    Attributes:
        id: Identifier, unique within its track for the session lifetime
        label: Display text
        start_time: Start in ms since the session baseline
        duration: Duration in ms (>= 0, checked by the ingestion side)
        event_track_id: Id of the owning track

    Example:
        event = TimelineEvent(
            id="render-1",
            label="<List>",
            start_time=100.0,
            duration=20.0,
            event_track_id="render",
        )
    """
    id: str
    label: str
    start_time: float
    duration: float
    event_track_id: str

    @property
    def end_time(self) -> float:
        """End time of the event (start + duration)."""
        return self.start_time + self.duration

    def contains(self, time: float) -> bool:
        """Whether ``time`` lies inside ``[start_time, end_time]`` (inclusive)."""
        return self.start_time <= time <= self.end_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'id': self.id,
            'label': self.label,
            'startTime': self.start_time,
            'duration': self.duration,
            'endTime': self.end_time,
            'eventTrackId': self.event_track_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], event_track_id: Optional[str] = None) -> 'TimelineEvent':
        """
        Create from dictionary.

        Accepts both the camelCase keys produced by the instrumentation
        layer and snake_case keys. ``endTime`` is accepted in place of
        ``duration``.

        Raises:
            ValueError: If a required key is missing
        """
        def pick(*keys, default=None):
            for key in keys:
                if key in data:
                    return data[key]
            return default

        event_id = pick('id')
        start_time = pick('startTime', 'start_time')
        if event_id is None or start_time is None:
            raise ValueError(f"Event requires 'id' and 'startTime', got keys {sorted(data)}")

        duration = pick('duration')
        if duration is None:
            end_time = pick('endTime', 'end_time')
            if end_time is None:
                raise ValueError(f"Event '{event_id}' requires 'duration' or 'endTime'")
            duration = float(end_time) - float(start_time)

        track_id = pick('eventTrackId', 'event_track_id', default=event_track_id)
        if track_id is None:
            raise ValueError(f"Event '{event_id}' has no track id")

        return cls(
            id=str(event_id),
            label=str(pick('label', 'name', default=event_id)),
            start_time=float(start_time),
            duration=float(duration),
            event_track_id=str(track_id),
        )


@dataclass
class EventTrack:
    """
    A named, colored lane grouping related events.

    Events keep insertion order, which is roughly chronological. The
    renderer does not require strict ordering.
    """
    id: str
    label: str
    color: str
    events: List[TimelineEvent] = field(default_factory=list)

    def copy(self) -> 'EventTrack':
        """Shallow copy with its own event list (events are immutable)."""
        return EventTrack(id=self.id, label=self.label, color=self.color, events=list(self.events))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'label': self.label,
            'color': self.color,
            'events': [event.to_dict() for event in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventTrack':
        track_id = data['id']
        return cls(
            id=track_id,
            label=data.get('label', track_id),
            color=data.get('color', '#888888'),
            events=[TimelineEvent.from_dict(e, event_track_id=track_id) for e in data.get('events', [])],
        )


# =============================================================================
# View State
# =============================================================================

@dataclass(frozen=True)
class Viewport:
    """
    Mapping between visible pixel columns and the time domain.

    Attributes:
        offset_x: Pixel offset of the visible left edge from ``start_time`` (>= 0)
        scale: Pixels per millisecond (MIN_SCALE..MAX_SCALE)
        start_time: Time at pixel 0 when offset_x is 0
        end_time: End of the natural default window
    """
    offset_x: float = 0.0
    scale: float = DEFAULT_SCALE
    start_time: float = 0.0
    end_time: float = DEFAULT_END_TIME


@dataclass(frozen=True)
class HoverPosition:
    """Pointer position in surface pixels."""
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class MouseState:
    """
    Transient pointer state. Reset on mouse-leave; never persisted.

    ``is_dragging`` and ``is_hovering`` are independent flags. ``press_x``
    remembers where the pointer went down so a release can tell a click
    from a drag.
    """
    is_dragging: bool = False
    last_x: float = 0.0
    is_hovering: bool = False
    hover_event: Optional[TimelineEvent] = None
    hover_position: HoverPosition = field(default_factory=HoverPosition)
    press_x: float = 0.0


@dataclass(frozen=True)
class PlaybackCursor:
    """
    Replay position supplied by the replay collaborator.

    A negative ``current_time`` means no replay is active and no cursor
    is drawn.
    """
    current_time: float = -1.0
    is_playing: bool = False

    @property
    def is_active(self) -> bool:
        return self.current_time >= 0

    @classmethod
    def inactive(cls) -> 'PlaybackCursor':
        return cls(current_time=-1.0, is_playing=False)
