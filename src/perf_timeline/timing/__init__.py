"""
Timing System

Milliseconds are the single source of truth. Pixels are derived from a
Viewport snapshot.

Modules:
- transform: time <-> pixel mapping
- tick_calculator: adaptive tick interval and tick generation
- time_format: label formatting
"""

from .transform import time_to_pixel, pixel_to_time, CoordinateTransform
from .tick_calculator import TickCalculator, Tick
from .time_format import TimeFormat, format_milliseconds

__all__ = [
    'time_to_pixel',
    'pixel_to_time',
    'CoordinateTransform',
    'TickCalculator',
    'Tick',
    'TimeFormat',
    'format_milliseconds',
]
