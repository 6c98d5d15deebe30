"""
Tests for label truncation.
"""
from perf_timeline.core.style import TimelineStyle
from perf_timeline.core.text_fit import truncate_text, TextFitter


class TestTruncateText:
    """One unit of width per character keeps the expected output obvious."""

    def test_fits_unchanged(self):
        assert truncate_text("abc", 5, len) == "abc"
        assert truncate_text("", 0, len) == ""

    def test_longest_prefix_plus_ellipsis(self):
        assert truncate_text("abcdefghij", 6, len) == "abc..."
        assert truncate_text("abcdefghij", 9, len) == "abcdef..."

    def test_only_ellipsis_when_nothing_fits(self):
        assert truncate_text("abcdefghij", 3, len) == "..."
        assert truncate_text("abcdefghij", 1, len) == "..."

    def test_result_never_exceeds_width(self):
        text = "<VeryLongComponentName>"
        for width in range(3, len(text) + 2):
            assert len(truncate_text(text, width, len)) <= width

    def test_custom_ellipsis(self):
        assert truncate_text("abcdef", 4, len, ellipsis="~") == "abc~"


class TestTextFitter:

    def test_fit_respects_pixel_width(self, qapp):
        fitter = TextFitter(TimelineStyle.event_font())
        label = "<ExtremelyLongComponentNameThatWillNotFit>"
        fitted = fitter.fit(label, 60)
        assert fitted.endswith("...")
        assert fitter.width(fitted) <= 60

    def test_short_label_untouched(self, qapp):
        fitter = TextFitter(TimelineStyle.event_font())
        assert fitter.fit("<A>", 500) == "<A>"
