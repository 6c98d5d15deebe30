"""
Tests for the pure viewport operations (clamps, zoom, pan, reset).
"""
import math

import pytest

from perf_timeline.constants import MIN_SCALE, MAX_SCALE
from perf_timeline.interaction.viewport_ops import (
    clamp_scale, clamp_offset, clamp_viewport, zoom_at, pan_by, reset_viewport,
)
from perf_timeline.timing.transform import pixel_to_time
from perf_timeline.types import Viewport


class TestClamps:

    def test_clamp_scale_range(self):
        assert clamp_scale(0.01) == MIN_SCALE
        assert clamp_scale(100) == MAX_SCALE
        assert clamp_scale(2.5) == 2.5

    def test_clamp_scale_repairs_bad_values(self):
        assert clamp_scale(0) == 1.0
        assert clamp_scale(-3) == 1.0
        assert clamp_scale(float("nan")) == 1.0
        assert clamp_scale(float("inf")) == 1.0

    def test_clamp_offset(self):
        assert clamp_offset(-5) == 0
        assert clamp_offset(12.5) == 12.5
        assert clamp_offset(float("nan")) == 0

    def test_clamp_viewport_returns_same_object_when_valid(self):
        v = Viewport(offset_x=10, scale=2)
        assert clamp_viewport(v) is v

    def test_clamp_viewport_repairs(self):
        v = clamp_viewport(Viewport(offset_x=-10, scale=0))
        assert v.offset_x == 0
        assert v.scale == 1.0


class TestZoomAt:

    def test_wheel_down_at_300_zooms_out_to_0_9(self):
        v = zoom_at(Viewport(), 300, 100)
        assert v.scale == pytest.approx(0.9)
        # Anchoring would need offset -30; the offset clamp pins the view to time zero
        assert v.offset_x == 0

    def test_zoom_out_keeps_time_under_cursor(self):
        old = Viewport(offset_x=500, scale=1.0)
        new = zoom_at(old, 300, 100)
        assert new.scale == pytest.approx(0.9)
        assert pixel_to_time(300, new) == pytest.approx(pixel_to_time(300, old))

    def test_zoom_in_keeps_time_under_cursor(self):
        old = Viewport()
        new = zoom_at(old, 300, -100)
        assert new.scale == pytest.approx(1.1)
        assert new.offset_x == pytest.approx(30)
        assert pixel_to_time(300, new) == pytest.approx(300)

    def test_zero_delta_is_ignored(self):
        v = Viewport(offset_x=42, scale=3)
        assert zoom_at(v, 100, 0) is v

    def test_scale_never_leaves_bounds(self):
        v = Viewport()
        for _ in range(200):
            v = zoom_at(v, 400, -1)
        assert v.scale == MAX_SCALE
        for _ in range(400):
            v = zoom_at(v, 400, 1)
            assert MIN_SCALE <= v.scale <= MAX_SCALE
            assert v.offset_x >= 0
        assert v.scale == MIN_SCALE


class TestPanAndReset:

    def test_drag_right_reveals_earlier_time(self):
        v = pan_by(Viewport(offset_x=100), 40)
        assert v.offset_x == 60

    def test_pan_never_goes_negative(self):
        v = Viewport(offset_x=30)
        for delta in (10, 50, 200, -5, 1000):
            v = pan_by(v, delta)
            assert v.offset_x >= 0
        assert v.offset_x == 0

    def test_reset(self):
        v = reset_viewport()
        assert (v.offset_x, v.scale, v.start_time, v.end_time) == (0, 1, 0, 800)
        assert math.isclose(reset_viewport(1200).end_time, 1200)
