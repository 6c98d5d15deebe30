"""
Timeline Style Configuration

Style constants for the timeline renderer. Track colors come from the
tracks themselves; everything else the renderer paints is defined here
and can be overridden directly on the class.
"""

from PyQt6.QtGui import QColor, QFont


class TimelineStyle:
    """
    Style configuration for the timeline renderer.
    """

    # =========================================================================
    # Background Colors
    # =========================================================================
    BG_COLOR = QColor(36, 36, 36)         # Canvas
    MARKER_BAR_COLOR = QColor(45, 45, 45)  # Tick row
    LEGEND_BG = QColor(30, 30, 30, 178)

    # =========================================================================
    # Text Colors
    # =========================================================================
    TEXT_PRIMARY = QColor(255, 255, 255)
    TEXT_TICK = QColor(136, 136, 136)

    # =========================================================================
    # Lines
    # =========================================================================
    GRID_LINE = QColor(58, 58, 58)
    TRACK_DIVIDER = QColor(51, 51, 51)

    # =========================================================================
    # Tooltip
    # =========================================================================
    TOOLTIP_BG = QColor(30, 30, 30, 230)
    TOOLTIP_BORDER = QColor(85, 85, 85)

    # =========================================================================
    # Time Cursor
    # =========================================================================
    CURSOR_PLAYING = QColor(80, 200, 120)  # Green
    CURSOR_PAUSED = QColor(230, 170, 60)   # Amber

    # =========================================================================
    # Track Colors
    # =========================================================================
    FALLBACK_TRACK_COLOR = QColor(136, 136, 136)  # Unparseable track color

    @classmethod
    def track_color(cls, color: str) -> QColor:
        """Parse a track color string, falling back to grey when invalid."""
        parsed = QColor(color)
        if not parsed.isValid():
            return QColor(cls.FALLBACK_TRACK_COLOR)
        return parsed

    @classmethod
    def cursor_color(cls, is_playing: bool) -> QColor:
        return cls.CURSOR_PLAYING if is_playing else cls.CURSOR_PAUSED

    # =========================================================================
    # Fonts
    # =========================================================================
    FONT_FAMILY = "Arial"

    @classmethod
    def tick_font(cls) -> QFont:
        """Font for grid tick labels"""
        font = QFont(cls.FONT_FAMILY)
        font.setPixelSize(10)
        return font

    @classmethod
    def event_font(cls) -> QFont:
        """Font for labels inside event bars"""
        font = QFont(cls.FONT_FAMILY)
        font.setPixelSize(10)
        return font

    @classmethod
    def legend_font(cls) -> QFont:
        font = QFont(cls.FONT_FAMILY)
        font.setPixelSize(12)
        return font

    @classmethod
    def tooltip_title_font(cls) -> QFont:
        font = QFont(cls.FONT_FAMILY)
        font.setPixelSize(12)
        font.setBold(True)
        return font

    @classmethod
    def tooltip_font(cls) -> QFont:
        font = QFont(cls.FONT_FAMILY)
        font.setPixelSize(11)
        return font
