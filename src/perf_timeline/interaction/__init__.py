"""
Timeline Interaction

Pointer-driven state machine and the pure viewport operations behind it.
"""

from .controller import InteractionController
from .viewport_ops import clamp_scale, clamp_offset, clamp_viewport, zoom_at, pan_by, reset_viewport

__all__ = [
    'InteractionController',
    'clamp_scale',
    'clamp_offset',
    'clamp_viewport',
    'zoom_at',
    'pan_by',
    'reset_viewport',
]
