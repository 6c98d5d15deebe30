"""
Interaction Controller

Pan/zoom/hover/click state machine for the timeline.

The controller owns the Viewport, the MouseState, the tracks and the
playback cursor. Every transition replaces a snapshot and ends in
_commit(), which pushes the snapshots into the renderer and repaints.

Pointer coordinates are surface pixels. The host widget translates its
own events into on_wheel / on_pointer_* calls.
"""

from dataclasses import replace
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, Union, TYPE_CHECKING

from ..settings import TimelineSettings
from ..types import EventTrack, TimelineEvent, Viewport, MouseState, HoverPosition, PlaybackCursor
from ..utils.message import Log
from .viewport_ops import clamp_viewport, pan_by, reset_viewport, zoom_at

if TYPE_CHECKING:
    from ..core.renderer import TimelineRenderer

TrackInput = Union[Mapping[str, EventTrack], Sequence[EventTrack]]


class InteractionController:
    """
    Translates pointer input into Viewport and MouseState transitions.

    Usage:
        renderer = TimelineRenderer()
        controller = InteractionController(renderer)
        controller.replace_tracks(session.snapshot())
        controller.on_wheel(x=300, delta_y=100)  # Zoom out about x=300
    """

    def __init__(self, renderer: 'TimelineRenderer', settings: Optional[TimelineSettings] = None):
        self._renderer = renderer
        self._settings = settings or TimelineSettings()
        self._viewport = reset_viewport(self._settings.default_end_time)
        self._mouse_state = MouseState()
        self._tracks: List[EventTrack] = []
        self._cursor = PlaybackCursor.inactive()
        self._pointer_inside = False

    # =========================================================================
    # State
    # =========================================================================

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def mouse_state(self) -> MouseState:
        return self._mouse_state

    @property
    def tracks(self) -> List[EventTrack]:
        return list(self._tracks)

    @property
    def cursor(self) -> PlaybackCursor:
        return self._cursor

    @property
    def state(self) -> Tuple[Viewport, MouseState]:
        return self._viewport, self._mouse_state

    def set_viewport(self, viewport: Viewport) -> None:
        """Replace the viewport (clamped) and repaint."""
        self._viewport = clamp_viewport(viewport, self._settings.min_scale, self._settings.max_scale)
        self._commit()

    # =========================================================================
    # Pointer Input
    # =========================================================================

    def on_wheel(self, x: float, delta_y: float) -> bool:
        """
        Zoom about pixel column ``x``.

        Returns:
            True: the host should consume the wheel event
        """
        if delta_y == 0:
            return True

        settings = self._settings
        self._viewport = zoom_at(
            self._viewport, x, delta_y,
            min_scale=settings.min_scale,
            max_scale=settings.max_scale,
            zoom_in_factor=settings.zoom_in_factor,
            zoom_out_factor=settings.zoom_out_factor,
        )
        Log.debug(
            f"InteractionController: Zoom at x={x:.0f} -> scale={self._viewport.scale:.3f}, "
            f"offset={self._viewport.offset_x:.1f}"
        )
        if self._pointer_inside and not self._mouse_state.is_dragging:
            self._refresh_hover(x, self._mouse_state.hover_position.y)
        self._commit()
        return True

    def on_pointer_down(self, x: float, y: float) -> None:
        self._pointer_inside = True
        self._mouse_state = replace(self._mouse_state, is_dragging=True, last_x=x, press_x=x)
        self._commit()

    def on_pointer_move(self, x: float, y: float) -> None:
        self._pointer_inside = True
        mouse = self._mouse_state
        if mouse.is_dragging:
            self._viewport = pan_by(self._viewport, x - mouse.last_x)
            self._mouse_state = replace(
                mouse, last_x=x, is_hovering=False, hover_event=None,
            )
        else:
            event = self._renderer.find_event_at_position(x, y)
            self._mouse_state = replace(
                mouse,
                is_hovering=event is not None,
                hover_event=event,
                hover_position=HoverPosition(x, y),
            )
        self._commit()

    def on_pointer_up(self, x: float, y: float) -> Optional[TimelineEvent]:
        """
        End a press. Travel under the click threshold counts as a click.

        Returns:
            The clicked event, or None
        """
        was_dragging = self._mouse_state.is_dragging
        press_x = self._mouse_state.press_x
        self._mouse_state = replace(self._mouse_state, is_dragging=False)
        self._refresh_hover(x, y)
        self._commit()

        if was_dragging and abs(x - press_x) < self._settings.click_threshold_px:
            return self._renderer.handle_click(x, y)
        return None

    def on_pointer_leave(self) -> None:
        self._pointer_inside = False
        self._mouse_state = replace(
            self._mouse_state, is_dragging=False, is_hovering=False, hover_event=None,
        )
        self._commit()

    # =========================================================================
    # External Updates
    # =========================================================================

    def reset_view(self) -> None:
        """Return to the default window (offset 0, scale 1)."""
        self._viewport = reset_viewport(self._settings.default_end_time)
        Log.debug("InteractionController: View reset")
        self._commit()

    def replace_tracks(self, tracks: TrackInput) -> None:
        """
        Replace all tracks.

        Args:
            tracks: Mapping of track id -> EventTrack (display order is the
                mapping's order) or a sequence of tracks. Each track is
                copied, so the caller's containers are never touched.
        """
        if isinstance(tracks, Mapping):
            tracks = list(tracks.values())
        self._tracks = [track.copy() for track in tracks]

        # A hovered event may no longer exist
        hover = self._mouse_state.hover_event
        if hover is not None and not any(hover in track.events for track in self._tracks):
            self._mouse_state = replace(self._mouse_state, is_hovering=False, hover_event=None)

        self._commit()

    def set_playback(self, current_time: float, is_playing: bool = False) -> None:
        self.set_cursor(PlaybackCursor(current_time=current_time, is_playing=is_playing))

    def set_cursor(self, cursor: PlaybackCursor) -> None:
        self._cursor = cursor
        self._commit()

    def set_on_event_click(self, callback: Optional[Callable[[TimelineEvent], None]]) -> None:
        self._renderer.set_on_event_click(callback)

    # =========================================================================
    # Internal
    # =========================================================================

    def _refresh_hover(self, x: float, y: float) -> None:
        """Hit-test the pointer again under the current viewport."""
        self._renderer.set_viewport(self._viewport)
        event = self._renderer.find_event_at_position(x, y)
        self._mouse_state = replace(
            self._mouse_state,
            is_hovering=event is not None,
            hover_event=event,
            hover_position=HoverPosition(x, y),
        )

    def _commit(self) -> None:
        renderer = self._renderer
        renderer.set_tracks(self._tracks)
        renderer.set_viewport(self._viewport)
        renderer.set_mouse_state(self._mouse_state)
        renderer.set_cursor(self._cursor)
        renderer.draw_timeline()
