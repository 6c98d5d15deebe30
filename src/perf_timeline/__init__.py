"""
Performance Timeline
====================

A zoomable, pannable performance timeline for PyQt6 applications.
Draws time-stamped event streams (component renders, user input, network
loads) as bars on horizontal tracks, with a time cursor kept in sync with
a session-replay player.

Directory Structure
-------------------
- core/         - Renderer, hit-testing, style and the Qt host widget
- interaction/  - Pan/zoom/hover/click state machine and viewport operations
- timing/       - Time <-> pixel transform, tick calculation, formatting
- playback/     - Replay player coupling
- utils/        - Logging facade and user directory paths

Import Examples
---------------
    from perf_timeline.core import TimelineWidget, TimelineRenderer
    from perf_timeline.interaction import InteractionController
    from perf_timeline.playback import ReplaySync
    from perf_timeline.session import ProfilingSession
    from perf_timeline.types import TimelineEvent, EventTrack, Viewport
    from perf_timeline.interfaces import ReplayInterface

Features
--------
- Adaptive time grid (roughly 8 labelled ticks at any zoom)
- Wheel zoom anchored at the pointer, drag to pan
- Hover tooltips and click-to-seek on event bars
- Time cursor following a replay player at ~60 FPS
- JSON + environment settings
"""

__version__ = "0.1.0"
