"""
Timeline Renderer

Paints the whole timeline onto a QImage surface in a fixed layer order:

    1. Background
    2. Time grid (tick row, grid lines, tick labels)
    3. Legend
    4. Track dividers
    5. Events
    6. Time cursor
    7. Hover tooltip

Design:
- Every draw is a full repaint from the last-set inputs; there is no
  partial invalidation
- Without a surface every draw call is a silent no-op
- The renderer never mutates its inputs; the controller owns state and
  pushes snapshots in
- Lane placement comes from core.hit_test so drawing and picking agree
"""

from typing import Callable, List, Optional, Sequence

from PyQt6.QtCore import Qt, QLineF, QPointF, QRectF
from PyQt6.QtGui import QImage, QPainter, QPen, QBrush, QFontMetricsF

from ..constants import (
    TIME_MARKERS_HEIGHT, LEGEND_HEIGHT, BAND_HEIGHT, TRACK_HEIGHT,
    EVENT_INSET_Y, EVENT_CORNER_RADIUS, TICK_LABEL_BASELINE_Y, LABEL_PADDING_X,
    LEGEND_ITEM_WIDTH, LEGEND_ITEM_SPACING, LEGEND_SWATCH_SIZE,
    TOOLTIP_WIDTH, TOOLTIP_HEIGHT, TOOLTIP_OFFSET, TOOLTIP_PADDING,
    CURSOR_DOT_RADIUS, CURSOR_LINE_WIDTH,
)
from ..settings import TimelineSettings
from ..timing.tick_calculator import TickCalculator
from ..timing.time_format import TimeFormat
from ..timing.transform import time_to_pixel, pixel_to_time
from ..types import EventTrack, TimelineEvent, Viewport, MouseState, PlaybackCursor
from ..interaction.viewport_ops import clamp_viewport
from ..utils.message import Log
from .hit_test import find_event_at_position, track_y
from .style import TimelineStyle
from .text_fit import TextFitter

EventClickCallback = Callable[[TimelineEvent], None]


class TimelineRenderer:
    """
    Draw pipeline for the timeline.

    Usage:
        renderer = TimelineRenderer()
        renderer.resize_canvas(800, 300)
        renderer.set_tracks(tracks)
        renderer.set_viewport(Viewport(scale=2.0))
        renderer.draw_timeline()
        image = renderer.surface
    """

    def __init__(self, surface: Optional[QImage] = None, settings: Optional[TimelineSettings] = None):
        self._settings = settings or TimelineSettings()
        self._surface: Optional[QImage] = None
        self._tracks: List[EventTrack] = []
        self._viewport = Viewport(end_time=self._settings.default_end_time)
        self._mouse_state = MouseState()
        self._cursor = PlaybackCursor.inactive()
        self._on_event_click: Optional[EventClickCallback] = None

        self._tick_calculator = TickCalculator(
            ideal_count=self._settings.ideal_tick_count,
            max_count=self._settings.max_tick_count,
        )

        # Fonts are built once; the fitter caches metrics for event labels
        self._tick_font = TimelineStyle.tick_font()
        self._event_font = TimelineStyle.event_font()
        self._legend_font = TimelineStyle.legend_font()
        self._tooltip_title_font = TimelineStyle.tooltip_title_font()
        self._tooltip_font = TimelineStyle.tooltip_font()
        self._event_fitter = TextFitter(self._event_font)
        self._tooltip_fitter = TextFitter(self._tooltip_title_font)

        self.set_surface(surface)

    # =========================================================================
    # Surface
    # =========================================================================

    def set_surface(self, surface: Optional[QImage]) -> None:
        """Attach a surface (None or a null image detaches)."""
        if surface is not None and surface.isNull():
            surface = None
        self._surface = surface

    @property
    def surface(self) -> Optional[QImage]:
        return self._surface

    @property
    def width(self) -> int:
        return self._surface.width() if self._surface is not None else 0

    @property
    def height(self) -> int:
        return self._surface.height() if self._surface is not None else 0

    def resize_canvas(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        """
        Reallocate the surface at a new device-pixel size and repaint.

        Omitted dimensions keep their current value. A zero or negative
        size detaches the surface.
        """
        width = self.width if width is None else int(width)
        height = self.height if height is None else int(height)
        if width <= 0 or height <= 0:
            self._surface = None
            return

        self._surface = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        self.draw_timeline()

    # =========================================================================
    # Inputs
    # =========================================================================

    @property
    def tracks(self) -> List[EventTrack]:
        return list(self._tracks)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def mouse_state(self) -> MouseState:
        return self._mouse_state

    @property
    def cursor(self) -> PlaybackCursor:
        return self._cursor

    def set_tracks(self, tracks: Sequence[EventTrack]) -> None:
        self._tracks = list(tracks)

    def set_viewport(self, viewport: Viewport) -> None:
        self._viewport = clamp_viewport(viewport, self._settings.min_scale, self._settings.max_scale)

    def set_mouse_state(self, mouse_state: MouseState) -> None:
        self._mouse_state = mouse_state

    def set_current_time(self, current_time: float, is_playing: bool = False) -> None:
        self._cursor = PlaybackCursor(current_time=current_time, is_playing=is_playing)

    def set_cursor(self, cursor: PlaybackCursor) -> None:
        self._cursor = cursor

    def set_on_event_click(self, callback: Optional[EventClickCallback]) -> None:
        self._on_event_click = callback

    # =========================================================================
    # Coordinates / Picking
    # =========================================================================

    def time_to_pixel(self, time: float) -> float:
        return time_to_pixel(time, self._viewport)

    def pixel_to_time(self, pixel: float) -> float:
        return pixel_to_time(pixel, self._viewport)

    def find_event_at_position(self, x: float, y: float) -> Optional[TimelineEvent]:
        return find_event_at_position(self._tracks, self._viewport, x, y)

    def handle_click(self, x: float, y: float) -> Optional[TimelineEvent]:
        """
        Dispatch a click to the event under (x, y).

        Returns:
            The clicked event, or None when the click hit empty space
        """
        event = self.find_event_at_position(x, y)
        if event is not None:
            Log.debug(f"TimelineRenderer: Clicked event '{event.id}' at {event.start_time}ms")
            if self._on_event_click is not None:
                self._on_event_click(event)
        return event

    # =========================================================================
    # Drawing
    # =========================================================================

    def draw_timeline(self) -> None:
        """Full repaint of the surface from the current inputs."""
        if self._surface is None:
            return

        painter = QPainter(self._surface)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
            self._draw_background(painter)
            self._draw_time_grid(painter)
            self._draw_legend(painter)
            self._draw_tracks(painter)
            self._draw_events(painter)
            self._draw_cursor(painter)
            self._draw_tooltip(painter)
        finally:
            painter.end()

    def _draw_background(self, painter: QPainter) -> None:
        painter.fillRect(QRectF(0, 0, self.width, self.height), TimelineStyle.BG_COLOR)
        painter.fillRect(QRectF(0, 0, self.width, TIME_MARKERS_HEIGHT), TimelineStyle.MARKER_BAR_COLOR)

    def _draw_time_grid(self, painter: QPainter) -> None:
        ticks = self._tick_calculator.generate_ticks(self._viewport, self.width)
        if not ticks:
            return

        pen = QPen(TimelineStyle.GRID_LINE, 1)
        pen.setCosmetic(True)
        painter.setPen(pen)
        # Half-pixel offset keeps 1px lines on a single pixel row/column
        painter.drawLines([QLineF(t.column + 0.5, 0, t.column + 0.5, self.height) for t in ticks])

        painter.setFont(self._tick_font)
        painter.setPen(TimelineStyle.TEXT_TICK)
        for tick in ticks:
            painter.drawText(QPointF(tick.column + 3, TICK_LABEL_BASELINE_Y), tick.label)

    def _draw_legend(self, painter: QPainter) -> None:
        if not self._tracks:
            return

        count = len(self._tracks)
        total_width = count * LEGEND_ITEM_WIDTH + (count - 1) * LEGEND_ITEM_SPACING
        start_x = max(10, (self.width - total_width) / 2)
        legend_y = TIME_MARKERS_HEIGHT + 4

        painter.fillRect(
            QRectF(start_x - 8, legend_y - 4, total_width + 16, LEGEND_HEIGHT - 10),
            TimelineStyle.LEGEND_BG,
        )

        painter.setFont(self._legend_font)
        metrics = QFontMetricsF(self._legend_font)
        for i, track in enumerate(self._tracks):
            item_x = start_x + i * (LEGEND_ITEM_WIDTH + LEGEND_ITEM_SPACING)
            painter.fillRect(
                QRectF(item_x, legend_y + 2, LEGEND_SWATCH_SIZE, LEGEND_SWATCH_SIZE),
                TimelineStyle.track_color(track.color),
            )
            painter.setPen(TimelineStyle.TEXT_PRIMARY)
            text_x = item_x + LEGEND_SWATCH_SIZE + 6
            baseline = legend_y + 2 + (LEGEND_SWATCH_SIZE + metrics.ascent() - metrics.descent()) / 2
            painter.drawText(QPointF(text_x, baseline), track.label)

    def _draw_tracks(self, painter: QPainter) -> None:
        pen = QPen(TimelineStyle.TRACK_DIVIDER, 1)
        pen.setCosmetic(True)
        painter.setPen(pen)
        lines = []
        for i in range(len(self._tracks)):
            y = track_y(i) + TRACK_HEIGHT + 0.5
            lines.append(QLineF(0, y, self.width, y))
        if lines:
            painter.drawLines(lines)

    def _draw_events(self, painter: QPainter) -> None:
        width = self.width
        label_min_width = self._settings.label_min_width
        painter.setFont(self._event_font)
        metrics = QFontMetricsF(self._event_font)

        for i, track in enumerate(self._tracks):
            top = track_y(i)
            color = TimelineStyle.track_color(track.color)
            for event in track.events:
                x = round(self.time_to_pixel(event.start_time))
                end_x = round(self.time_to_pixel(event.start_time + event.duration))
                event_width = max(1, end_x - x)
                if x + event_width < 0 or x > width:
                    continue

                rect = QRectF(x, top + EVENT_INSET_Y, event_width, TRACK_HEIGHT - 2 * EVENT_INSET_Y)
                radius = min(EVENT_CORNER_RADIUS, event_width / 2)
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(QBrush(color))
                painter.drawRoundedRect(rect, radius, radius)

                if event_width > label_min_width:
                    text = self._event_fitter.fit(event.label, event_width - 2 * LABEL_PADDING_X)
                    baseline = top + (TRACK_HEIGHT + metrics.ascent() - metrics.descent()) / 2
                    painter.setPen(TimelineStyle.TEXT_PRIMARY)
                    painter.drawText(QPointF(x + LABEL_PADDING_X, baseline), text)

        painter.setBrush(Qt.BrushStyle.NoBrush)

    def _draw_cursor(self, painter: QPainter) -> None:
        cursor = self._cursor
        if not cursor.is_active:
            return
        x = self.time_to_pixel(cursor.current_time)
        if x < 0 or x > self.width:
            return

        color = TimelineStyle.cursor_color(cursor.is_playing)
        pen = QPen(color, CURSOR_LINE_WIDTH)
        painter.setPen(pen)
        painter.drawLine(QLineF(x, TIME_MARKERS_HEIGHT, x, self.height))

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color))
        painter.drawEllipse(QPointF(x, BAND_HEIGHT), CURSOR_DOT_RADIUS, CURSOR_DOT_RADIUS)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        # Time label in the tick row, kept inside the surface
        label = TimeFormat.milliseconds(cursor.current_time)
        painter.setFont(self._tick_font)
        metrics = QFontMetricsF(self._tick_font)
        box_width = metrics.horizontalAdvance(label) + 8
        box_x = min(max(0.0, x - box_width / 2), max(0.0, self.width - box_width))
        box = QRectF(box_x, 2, box_width, 16)
        painter.fillRect(box, color)
        painter.setPen(TimelineStyle.BG_COLOR)
        painter.drawText(box, Qt.AlignmentFlag.AlignCenter, label)

    def _draw_tooltip(self, painter: QPainter) -> None:
        mouse = self._mouse_state
        event = mouse.hover_event
        if not mouse.is_hovering or event is None:
            return

        left, top = self.tooltip_origin(
            mouse.hover_position.x, mouse.hover_position.y, self.width, self.height
        )
        card = QRectF(left, top, TOOLTIP_WIDTH, TOOLTIP_HEIGHT)
        painter.setPen(QPen(TimelineStyle.TOOLTIP_BORDER, 1))
        painter.setBrush(QBrush(TimelineStyle.TOOLTIP_BG))
        painter.drawRoundedRect(card, 4, 4)
        painter.setBrush(Qt.BrushStyle.NoBrush)

        text_x = left + TOOLTIP_PADDING
        text_width = TOOLTIP_WIDTH - 2 * TOOLTIP_PADDING
        painter.setPen(TimelineStyle.TEXT_PRIMARY)
        painter.setFont(self._tooltip_title_font)
        painter.drawText(QPointF(text_x, top + 20), self._tooltip_fitter.fit(event.label, text_width))

        painter.setFont(self._tooltip_font)
        lines = [
            f"Id: {event.id}",
            f"Start: {TimeFormat.plain_ms(event.start_time)}",
            f"Duration: {TimeFormat.plain_ms(event.duration)}",
        ]
        for i, line in enumerate(lines):
            painter.drawText(QPointF(text_x, top + 38 + i * 15), line)

    @staticmethod
    def tooltip_origin(x: float, y: float, width: float, height: float) -> tuple[float, float]:
        """
        Top-left corner of the tooltip card for a pointer at (x, y).

        The card sits below-right of the pointer and flips to the left or
        above when it would overflow the surface. It never starts at a
        negative coordinate.
        """
        left = x + TOOLTIP_OFFSET
        top = y + TOOLTIP_OFFSET
        if left + TOOLTIP_WIDTH > width:
            left = x - TOOLTIP_WIDTH - TOOLTIP_OFFSET
        if top + TOOLTIP_HEIGHT > height:
            top = y - TOOLTIP_HEIGHT - TOOLTIP_OFFSET
        return max(0.0, left), max(0.0, top)
