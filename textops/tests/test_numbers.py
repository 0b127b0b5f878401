"""Tests for textops.numbers."""

import pytest

from textops.numbers import format_number, parse_number


class TestParseNumber:
    """Tests for separator-aware number parsing."""

    def test_plain(self):
        assert parse_number("42") == 42.0
        assert parse_number("-3.5") == -3.5

    def test_thousand_separator_removed(self):
        assert parse_number("1,234.5") == 1234.5

    def test_custom_separators(self):
        assert parse_number("1.234,5", decimal_separator=",", thousand_separator=".") == 1234.5

    def test_surrounding_whitespace_ignored(self):
        assert parse_number("  7 ") == 7.0

    @pytest.mark.parametrize("text", ["", "abc", "1.2.3", "1e5", "0x1F", "--1"])
    def test_not_a_number(self, text):
        assert parse_number(text) is None


class TestFormatNumber:
    """Tests for number display formatting."""

    def test_default_strips_trailing_zeros(self):
        assert format_number(1234.5) == "1234.5"
        assert format_number(3.0) == "3"

    def test_rounds_to_max_decimal_digits(self):
        assert format_number(3.14159) == "3.14"
        assert format_number(3.14159, max_decimal_digits=4) == "3.1416"

    def test_zero_decimal_digits(self):
        assert format_number(2.4, max_decimal_digits=0) == "2"

    def test_pad_decimal_digits(self):
        assert format_number(1.5, pad_decimal_digits=True) == "1.50"
        assert format_number(7, max_decimal_digits=3, pad_decimal_digits=True) == "7.000"

    def test_thousand_separator(self):
        assert format_number(1234567.891, use_thousand_separator=True) == "1,234,567.89"

    def test_negative_sign_never_grouped(self):
        assert format_number(-123456, use_thousand_separator=True) == "-123,456"

    def test_custom_separators(self):
        result = format_number(
            1234567.891,
            use_thousand_separator=True,
            decimal_separator=",",
            thousand_separator=".",
        )
        assert result == "1.234.567,89"

    def test_negative_zero(self):
        assert format_number(-0.001) == "0"
