"""
Timeline Core Components

Renderer, hit-testing, style and the Qt host widget.
"""

from .hit_test import find_event_at_position, track_index_at, track_y
from .renderer import TimelineRenderer
from .style import TimelineStyle
from .text_fit import TextFitter, truncate_text
from .widget import TimelineWidget

__all__ = [
    'find_event_at_position',
    'track_index_at',
    'track_y',
    'TimelineRenderer',
    'TimelineStyle',
    'TextFitter',
    'truncate_text',
    'TimelineWidget',
]
