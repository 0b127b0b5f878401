"""Tests for textops.wrapper."""

import pytest

from textops.width import display_width
from textops.wrapper import wrap, wrap_text


class TestWrap:
    """Tests for greedy word wrapping."""

    def test_basic(self):
        assert wrap("the quick brown fox jumps", 10) == ["the quick", "brown fox", "jumps"]

    def test_exact_fit(self):
        """A line may be exactly width wide."""
        assert wrap("aaaa bbbbb", 10) == ["aaaa bbbbb"]

    def test_empty_input(self):
        assert wrap("", 10) == []

    def test_whitespace_only(self):
        assert wrap("  \n\t ", 10) == []

    def test_long_token_kept_whole(self):
        """A token longer than width is placed alone, never split."""
        assert wrap("a supercalifragilistic b", 5) == ["a", "supercalifragilistic", "b"]

    def test_zero_width_one_token_per_line(self):
        assert wrap("one two three", 0) == ["one", "two", "three"]

    def test_negative_width_one_token_per_line(self):
        assert wrap("one two", -3) == ["one", "two"]

    def test_collapses_whitespace_and_newlines(self):
        assert wrap("a\n\nb   c\td", 80) == ["a b c d"]

    def test_wide_characters_measured_by_columns(self):
        assert wrap("日本 語", 4) == ["日本", "語"]
        assert wrap("日本 語", 7) == ["日本 語"]

    def test_wrap_text_joins_lines(self):
        assert wrap_text("aa bb cc", 5) == "aa bb\ncc"
        assert wrap_text("", 5) == ""

    @pytest.mark.parametrize("text", [
        "the quick brown fox jumps over the lazy dog",
        "  leading and   trailing  ",
        "one\ntwo\n\nthree",
    ])
    @pytest.mark.parametrize("extra", [0, 3, 20])
    def test_reconstructs_tokens(self, text, extra):
        """Re-joining the lines gives back the token sequence."""
        width = max(display_width(t) for t in text.split()) + extra
        lines = wrap(text, width)
        assert " ".join(lines).split() == text.split()
        assert all(display_width(line) <= width for line in lines)
