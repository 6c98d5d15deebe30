"""
Timeline Constants

Central location for timeline dimensions, zoom limits and tick ladders.
Drawing and hit-testing both read the vertical layout from here, so the
two can never disagree about where a track lane starts.
Colors are defined in core/style.py.
"""

# =============================================================================
# Vertical Layout
# =============================================================================

TIME_MARKERS_HEIGHT = 30  # Tick row at the top
LEGEND_HEIGHT = 36  # Legend band directly below the tick row
TRACK_HEIGHT = 40
TRACK_PADDING = 10
EVENT_INSET_Y = 4  # Event rects are inset from the lane top/bottom
EVENT_CORNER_RADIUS = 4

# Everything above this y belongs to the grid/legend band
BAND_HEIGHT = TIME_MARKERS_HEIGHT + LEGEND_HEIGHT
TRACK_STRIDE = TRACK_HEIGHT + TRACK_PADDING

# =============================================================================
# Zoom / Pan
# =============================================================================

MIN_SCALE = 0.1  # Pixels per millisecond (very zoomed out)
MAX_SCALE = 10.0  # Pixels per millisecond (very zoomed in)
DEFAULT_SCALE = 1.0
DEFAULT_END_TIME = 800.0  # Natural default window in ms
ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9

# Pointer travel below this many pixels between press and release is a click
CLICK_THRESHOLD_PX = 4

# =============================================================================
# Time Grid
# =============================================================================

IDEAL_TICK_COUNT = 8
MAX_TICK_COUNT = 15

# Standard tick intervals in milliseconds
STANDARD_TICK_INTERVALS = [
    1, 2, 5,
    10, 20, 25, 50,
    100, 200, 250, 500,
    1000, 2000, 5000, 10000,
]

TICK_LABEL_BASELINE_Y = 20

# =============================================================================
# Events / Labels
# =============================================================================

LABEL_MIN_WIDTH = 20  # Events narrower than this get no label
LABEL_PADDING_X = 4
ELLIPSIS = "..."

# =============================================================================
# Legend
# =============================================================================

LEGEND_ITEM_WIDTH = 120
LEGEND_ITEM_SPACING = 10
LEGEND_SWATCH_SIZE = 12

# =============================================================================
# Tooltip
# =============================================================================

TOOLTIP_WIDTH = 180
TOOLTIP_HEIGHT = 80
TOOLTIP_OFFSET = 10
TOOLTIP_PADDING = 8

# =============================================================================
# Time Cursor
# =============================================================================

CURSOR_DOT_RADIUS = 4
CURSOR_LINE_WIDTH = 2

# ~60 FPS polling of the replay collaborator (1000ms / 60 = 16.67ms)
REPLAY_POLL_INTERVAL_MS = 16
