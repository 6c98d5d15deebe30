"""
Viewport Operations

Pure functions that produce new Viewport snapshots for zoom, pan and reset.
Every function returns a clamped viewport:
- MIN_SCALE <= scale <= MAX_SCALE
- offset_x >= 0 (no panning before the session's time zero)
"""

import math
from dataclasses import replace

from ..constants import (
    MIN_SCALE, MAX_SCALE, DEFAULT_SCALE, DEFAULT_END_TIME, ZOOM_IN_FACTOR, ZOOM_OUT_FACTOR,
)
from ..timing.transform import pixel_to_time
from ..types import Viewport


def clamp_scale(scale: float, min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE) -> float:
    """Clamp scale into [min_scale, max_scale]; non-finite or non-positive becomes the default."""
    if not math.isfinite(scale) or scale <= 0:
        scale = DEFAULT_SCALE
    return max(min_scale, min(max_scale, scale))


def clamp_offset(offset_x: float) -> float:
    """Clamp offset to >= 0; NaN becomes 0."""
    if math.isnan(offset_x):
        return 0.0
    return max(0.0, offset_x)


def clamp_viewport(
    viewport: Viewport,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
) -> Viewport:
    """Return ``viewport`` with scale and offset forced into their valid ranges."""
    scale = clamp_scale(viewport.scale, min_scale, max_scale)
    offset_x = clamp_offset(viewport.offset_x)
    if scale == viewport.scale and offset_x == viewport.offset_x:
        return viewport
    return replace(viewport, scale=scale, offset_x=offset_x)


def zoom_at(
    viewport: Viewport,
    cursor_x: float,
    delta_y: float,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
    zoom_in_factor: float = ZOOM_IN_FACTOR,
    zoom_out_factor: float = ZOOM_OUT_FACTOR,
) -> Viewport:
    """
    Zoom about a pixel column so the time under it stays under it.

    Positive delta_y (wheel down) zooms out, negative zooms in.

    The anchor is only exact while the new offset stays >= 0; near time
    zero the offset clamp wins and the view pins to the start.

    Args:
        viewport: Current viewport
        cursor_x: Pixel column under the pointer
        delta_y: Wheel delta (sign selects direction)

    Returns:
        New viewport (unchanged if delta_y is 0)
    """
    if delta_y == 0:
        return viewport

    time_at_cursor = pixel_to_time(cursor_x, viewport)
    factor = zoom_out_factor if delta_y > 0 else zoom_in_factor
    new_scale = clamp_scale(viewport.scale * factor, min_scale, max_scale)
    new_offset_x = (time_at_cursor - viewport.start_time) * new_scale - cursor_x

    return replace(viewport, scale=new_scale, offset_x=clamp_offset(new_offset_x))


def pan_by(viewport: Viewport, delta_x: float) -> Viewport:
    """
    Pan by a pointer movement in pixels.

    Dragging right (positive delta) reveals earlier time, so the offset
    decreases.
    """
    return replace(viewport, offset_x=clamp_offset(viewport.offset_x - delta_x))


def reset_viewport(default_end_time: float = DEFAULT_END_TIME) -> Viewport:
    """The session's natural default window."""
    return Viewport(offset_x=0.0, scale=DEFAULT_SCALE, start_time=0.0, end_time=default_end_time)
