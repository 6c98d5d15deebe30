"""
Tick Calculator

Chooses a tick interval for the visible time range and generates the
ticks to draw. Always works in milliseconds.

Design:
- Aims for roughly IDEAL_TICK_COUNT markers at any zoom level
- Fine zoom: any whole-millisecond interval (rounded up)
- Coarser zoom: snapped to the standard ladder, stepping up a rung
  whenever the snapped interval would give more than MAX_TICK_COUNT markers
- Integer tick indices (no floating point accumulation)
- No two emitted ticks share a rounded pixel column
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..constants import IDEAL_TICK_COUNT, MAX_TICK_COUNT, STANDARD_TICK_INTERVALS
from ..types import Viewport
from .time_format import TimeFormat
from .transform import pixel_to_time, time_to_pixel

# Ideal intervals at or below this many ms use the fine (any integer) mode
FINE_INTERVAL_LIMIT_MS = 10

# Upper bound on ticks per repaint, whatever the inputs
MAX_TICKS = 500


@dataclass(frozen=True)
class Tick:
    """One grid tick: its time, its pixel column and its label."""
    time: float
    x: float
    label: str

    @property
    def column(self) -> int:
        return int(round(self.x))


class TickCalculator:
    """
    Calculates tick intervals and tick positions for the time grid.
    """

    def __init__(
        self,
        ideal_count: int = IDEAL_TICK_COUNT,
        max_count: int = MAX_TICK_COUNT,
        ladder: Sequence[int] = STANDARD_TICK_INTERVALS,
    ):
        """
        Initialize tick calculator.

        Args:
            ideal_count: Target number of visible ticks
            max_count: Ticks above this count force a coarser ladder rung
            ladder: Ascending standard intervals in ms
        """
        if ideal_count <= 0:
            raise ValueError(f"ideal_count must be positive, got {ideal_count}")
        if max_count < ideal_count:
            raise ValueError(f"max_count ({max_count}) must be >= ideal_count ({ideal_count})")
        if not ladder:
            raise ValueError("ladder must not be empty")
        self.ideal_count = ideal_count
        self.max_count = max_count
        self.ladder = sorted(ladder)

    def choose_interval(self, visible_range: float) -> float:
        """
        Pick the tick interval in ms for a visible range in ms.

        Args:
            visible_range: Width of the visible window in ms

        Returns:
            Interval in ms (>= 1)
        """
        if not math.isfinite(visible_range) or visible_range <= 0:
            return float(self.ladder[0])

        ideal = visible_range / self.ideal_count

        if ideal <= FINE_INTERVAL_LIMIT_MS:
            # Rounding up keeps the count at or below ideal_count
            return float(max(1, math.ceil(ideal)))

        # Nearest rung; ties go to the larger rung
        index = min(
            range(len(self.ladder)),
            key=lambda i: (abs(self.ladder[i] - ideal), -self.ladder[i]),
        )
        while index < len(self.ladder) and visible_range / self.ladder[index] > self.max_count:
            index += 1

        if index < len(self.ladder):
            return float(self.ladder[index])

        # Past the top rung: whole multiples of it
        top = self.ladder[-1]
        return float(top * math.ceil(ideal / top))

    def generate_ticks(self, viewport: Viewport, width: float) -> List[Tick]:
        """
        Generate ticks visible in pixel columns [0, width].

        Args:
            viewport: Current viewport
            width: Surface width in pixels

        Returns:
            Ticks in ascending time order, one per distinct pixel column
        """
        if width <= 0 or viewport.scale <= 0:
            return []

        visible_start = pixel_to_time(0, viewport)
        visible_end = pixel_to_time(width, viewport)
        interval = self.choose_interval(visible_end - visible_start)

        first_idx = math.floor(visible_start / interval)
        last_idx = math.ceil(visible_end / interval)
        if last_idx - first_idx > MAX_TICKS:
            last_idx = first_idx + MAX_TICKS

        ticks: List[Tick] = []
        seen_columns = set()
        for i in range(first_idx, last_idx + 1):
            time = i * interval
            x = time_to_pixel(time, viewport)
            if x < 0 or x > width:
                continue
            column = int(round(x))
            if column in seen_columns:
                continue
            seen_columns.add(column)
            ticks.append(Tick(time=time, x=x, label=TimeFormat.tick_label(time)))

        return ticks
