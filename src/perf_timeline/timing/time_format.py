"""
Time Format

Formats millisecond values for tick labels, the time cursor and tooltips.
All methods are static - pure functions with no state.
"""


def _trim(value: float) -> str:
    """Render integral floats without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class TimeFormat:
    """Formatting helpers for millisecond values."""

    @staticmethod
    def tick_label(time_ms: float) -> str:
        """
        Label for a grid tick.

        Milliseconds below one second, seconds with one decimal above.

        Examples:
            250 -> "250ms"
            1500 -> "1.5s"
        """
        if abs(time_ms) >= 1000:
            return f"{time_ms / 1000:.1f}s"
        return f"{_trim(time_ms)}ms"

    @staticmethod
    def milliseconds(time_ms: float) -> str:
        """
        Duration/position text with two decimals.

        Examples:
            12.345 -> "12.35ms"
            2500 -> "2.50s"
        """
        if time_ms < 1000:
            return f"{time_ms:.2f}ms"
        return f"{time_ms / 1000:.2f}s"

    @staticmethod
    def plain_ms(time_ms: float) -> str:
        """Raw millisecond value as shown in the tooltip ("120ms", "12.5ms")."""
        return f"{_trim(round(time_ms, 3))}ms"


def format_milliseconds(time_ms: float) -> str:
    """Module-level alias of TimeFormat.milliseconds."""
    return TimeFormat.milliseconds(time_ms)
