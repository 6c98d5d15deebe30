"""
Timeline Playback Components

Replay player coupling for the time cursor.
"""

from .replay_sync import ReplaySync

__all__ = [
    'ReplaySync',
]
