"""Tests for textops.formatter."""

import pytest

from textops.aligner import Alignment
from textops.formatter import Frame, TextFormatter


class TestTextFormatterText:
    """Tests for formatting non-numeric text."""

    def test_no_width_only_cleans(self):
        assert TextFormatter().format("  \n hello  \n") == "hello"

    def test_truncate_frame(self):
        assert TextFormatter(width=8).format("Hello, world") == "Hello..."

    def test_truncate_without_ellipsis(self):
        assert TextFormatter(width=4, no_ellipsis=True).format("abcdefgh") == "abcd"

    def test_custom_marker(self):
        assert TextFormatter(width=4, marker="~").format("abcdefgh") == "abc~"

    def test_wrap_frame_left_aligns_lines(self):
        formatter = TextFormatter(width=8, frame=Frame.WRAP)
        assert formatter.format("a long sentence") == "a long  \nsentence"

    def test_none_frame_leaves_wide_text(self):
        formatter = TextFormatter(width=5, frame="none")
        assert formatter.format("abcdefgh") == "abcdefgh"

    def test_auto_pads_text_on_the_right(self):
        assert TextFormatter(width=6).format("abc") == "abc   "

    def test_explicit_center(self):
        formatter = TextFormatter(width=7, alignment=Alignment.CENTER)
        assert formatter.format("abc") == "  abc  "

    def test_string_options_coerced(self):
        formatter = TextFormatter(frame="wrap", alignment="right")
        assert formatter.frame is Frame.WRAP
        assert formatter.alignment is Alignment.RIGHT

    def test_invalid_frame(self):
        with pytest.raises(ValueError):
            TextFormatter(frame="squash")


class TestTextFormatterNumbers:
    """Tests for formatting numeric text."""

    def test_auto_right_aligns_numbers(self):
        assert TextFormatter(width=10).format("1234.5") == "    1234.5"

    def test_number_without_width(self):
        assert TextFormatter().format("1,234.5") == "1234.5"

    def test_thousands_and_padding(self):
        formatter = TextFormatter(width=12, use_thousand_separator=True, pad_decimal_digits=True)
        assert formatter.format("1234567.891") == "1,234,567.89"

    def test_custom_separators(self):
        formatter = TextFormatter(
            decimal_separator=",",
            thousand_separator=".",
            use_thousand_separator=True,
        )
        assert formatter.format("1.234,5") == "1.234,5"

    def test_explicit_left_alignment_for_numbers(self):
        assert TextFormatter(width=5, alignment="left").format("42") == "42   "

    def test_is_numeric(self):
        formatter = TextFormatter()
        assert formatter.is_numeric(" 12.5 ") is True
        assert formatter.is_numeric("twelve") is False
