"""
Tests for TickCalculator interval selection and tick generation.
"""
import pytest

from perf_timeline.timing.tick_calculator import TickCalculator, MAX_TICKS
from perf_timeline.types import Viewport


@pytest.fixture
def calculator():
    return TickCalculator()


class TestChooseInterval:
    """Tests for the interval ladder."""

    def test_default_window_uses_100ms(self, calculator):
        """800ms visible -> ideal 100ms -> ladder rung 100."""
        assert calculator.choose_interval(800) == 100

    def test_fine_zoom_rounds_up_to_whole_ms(self, calculator):
        assert calculator.choose_interval(80) == 10
        assert calculator.choose_interval(20) == 3
        assert calculator.choose_interval(4) == 1

    def test_snaps_to_nearest_rung(self, calculator):
        assert calculator.choose_interval(296) == 25   # ideal 37
        assert calculator.choose_interval(8000) == 1000

    def test_ties_go_to_larger_rung(self, calculator):
        assert calculator.choose_interval(120) == 20   # ideal 15, between 10 and 20

    def test_steps_up_when_too_many_ticks(self):
        """With a tight max count the snapped rung is pushed to the next one."""
        calculator = TickCalculator(ideal_count=8, max_count=9)
        assert calculator.choose_interval(296) == 50

    def test_beyond_ladder_uses_multiples_of_top_rung(self, calculator):
        assert calculator.choose_interval(1_000_000) == 130_000

    def test_degenerate_range(self, calculator):
        assert calculator.choose_interval(0) == 1
        assert calculator.choose_interval(float("nan")) == 1

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            TickCalculator(ideal_count=0)
        with pytest.raises(ValueError):
            TickCalculator(ideal_count=8, max_count=4)
        with pytest.raises(ValueError):
            TickCalculator(ladder=[])


class TestGenerateTicks:
    """Tests for tick positions and labels."""

    def test_default_viewport(self, calculator):
        ticks = calculator.generate_ticks(Viewport(), 800)
        assert [t.time for t in ticks] == [0, 100, 200, 300, 400, 500, 600, 700, 800]
        assert ticks[1].label == "100ms"
        assert ticks[1].x == 100

    def test_second_labels_when_zoomed_out(self, calculator):
        ticks = calculator.generate_ticks(Viewport(scale=0.1), 800)
        assert ticks[1].time == 1000
        assert ticks[1].label == "1.0s"

    def test_offset_skips_ticks_left_of_surface(self, calculator):
        ticks = calculator.generate_ticks(Viewport(offset_x=150), 800)
        assert ticks[0].time == 200
        assert ticks[0].x == 50
        assert all(0 <= t.x <= 800 for t in ticks)

    def test_no_two_ticks_share_a_column(self, calculator):
        """Sub-pixel tick spacing is collapsed to one tick per column."""
        ticks = calculator.generate_ticks(Viewport(scale=0.1), 5)
        columns = [t.column for t in ticks]
        assert len(columns) == len(set(columns))

    @pytest.mark.parametrize("scale,offset,width", [
        (0.1, 0, 3), (0.1, 17, 9), (0.37, 5, 40), (1.0, 0, 800), (10.0, 333, 1920),
    ])
    def test_columns_unique_across_zooms(self, calculator, scale, offset, width):
        ticks = calculator.generate_ticks(Viewport(offset_x=offset, scale=scale), width)
        columns = [t.column for t in ticks]
        assert len(columns) == len(set(columns))
        assert len(ticks) <= MAX_TICKS + 1

    def test_empty_surface(self, calculator):
        assert calculator.generate_ticks(Viewport(), 0) == []
