"""
Text Fitting

Truncates labels so they fit inside an event bar without spilling into
the next one.
"""

from typing import Callable

from PyQt6.QtGui import QFont, QFontMetricsF

from ..constants import ELLIPSIS


def truncate_text(
    text: str,
    max_width: float,
    measure: Callable[[str], float],
    ellipsis: str = ELLIPSIS,
) -> str:
    """
    Shorten ``text`` until it (plus an ellipsis) measures at most ``max_width``.

    Binary search over the kept prefix length, so long labels cost
    O(log n) measurements. When not even the ellipsis fits, returns the
    bare ellipsis and lets the painter clip it.

    Args:
        text: Full label
        max_width: Available width in pixels
        measure: Returns the rendered width of a string

    Returns:
        ``text`` unchanged if it fits, otherwise a prefix + ellipsis
    """
    if measure(text) <= max_width:
        return text

    low, high = 0, len(text) - 1
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if measure(text[:mid] + ellipsis) <= max_width:
            best = mid
            low = mid + 1
        else:
            high = mid - 1

    return text[:best] + ellipsis


class TextFitter:
    """truncate_text bound to a font's metrics."""

    def __init__(self, font: QFont):
        self._metrics = QFontMetricsF(font)

    def width(self, text: str) -> float:
        return self._metrics.horizontalAdvance(text)

    def fit(self, text: str, max_width: float) -> str:
        return truncate_text(text, max_width, self.width)
