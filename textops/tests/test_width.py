"""Tests for textops.width."""

from textops.width import char_width, display_width, pad_to_width, slice_to_width


class TestDisplayWidth:
    """Tests for display width measurement."""

    def test_ascii(self):
        assert display_width("hello") == 5

    def test_empty(self):
        assert display_width("") == 0

    def test_wide_characters(self):
        """CJK characters take two columns each."""
        assert display_width("日本") == 4

    def test_combining_mark_is_zero_width(self):
        """A combining accent adds no width to its base letter."""
        assert display_width("e\u0301") == 1

    def test_control_character_counts_as_zero(self):
        assert char_width("\x07") == 0
        assert display_width("a\x07b") == 2


class TestPadToWidth:
    """Tests for width-aware padding."""

    def test_left(self):
        assert pad_to_width("ab", 5) == "ab   "

    def test_right(self):
        assert pad_to_width("ab", 5, "right") == "   ab"

    def test_center_odd_space_on_right(self):
        assert pad_to_width("ab", 5, "center") == " ab  "

    def test_wide_characters_padded_by_columns(self):
        assert pad_to_width("日本", 6) == "日本  "

    def test_never_truncates(self):
        assert pad_to_width("abcdef", 3) == "abcdef"


class TestSliceToWidth:
    """Tests for prefix slicing by display width."""

    def test_fits(self):
        assert slice_to_width("abc", 5) == "abc"

    def test_cut(self):
        assert slice_to_width("abcdef", 4) == "abcd"

    def test_wide_character_not_split(self):
        """A wide character straddling the limit is dropped."""
        assert slice_to_width("日本語", 5) == "日本"

    def test_zero_and_negative(self):
        assert slice_to_width("abc", 0) == ""
        assert slice_to_width("abc", -2) == ""
