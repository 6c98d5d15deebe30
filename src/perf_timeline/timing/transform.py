"""
Coordinate Transform

Bidirectional time <-> pixel mapping parameterized by a Viewport.

Design:
- Pure functions (no side effects)
- The two directions are exact algebraic inverses, which is what lets
  zoom-about-cursor and click-to-time mapping agree with the drawing
"""

from ..types import Viewport


def time_to_pixel(time: float, viewport: Viewport) -> float:
    """
    Convert a time (ms since baseline) to an x coordinate in surface pixels.

    Args:
        time: Time in milliseconds
        viewport: Viewport snapshot

    Returns:
        X coordinate (may be negative or beyond the surface width)
    """
    return (time - viewport.start_time) * viewport.scale - viewport.offset_x


def pixel_to_time(pixel: float, viewport: Viewport) -> float:
    """
    Convert an x coordinate in surface pixels to a time (ms since baseline).

    Args:
        pixel: X coordinate
        viewport: Viewport snapshot (scale must be > 0)

    Returns:
        Time in milliseconds
    """
    return (pixel + viewport.offset_x) / viewport.scale + viewport.start_time


class CoordinateTransform:
    """
    Transform bound to one Viewport snapshot.

    Handy where many conversions run against the same viewport, e.g.
    inside a single repaint.
    """

    __slots__ = ('viewport',)

    def __init__(self, viewport: Viewport):
        self.viewport = viewport

    def time_to_pixel(self, time: float) -> float:
        return time_to_pixel(time, self.viewport)

    def pixel_to_time(self, pixel: float) -> float:
        return pixel_to_time(pixel, self.viewport)

    def visible_range(self, width: float) -> tuple[float, float]:
        """Time range covered by pixel columns [0, width]."""
        return self.pixel_to_time(0), self.pixel_to_time(width)

    def span_to_pixels(self, duration: float) -> float:
        """Width in pixels of a duration in ms."""
        return duration * self.viewport.scale
