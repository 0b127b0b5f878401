"""Tests for textops.classifier."""

import pytest

from textops.classifier import is_hex, is_numeric


class TestIsNumeric:
    """Tests for the numeric predicate."""

    @pytest.mark.parametrize("text", ["12345", "0", "-7", "+7", "3.14", "-0.5", ".5", "5."])
    def test_numeric(self, text):
        assert is_numeric(text) is True

    @pytest.mark.parametrize("text", [
        "",
        "12.3.4",
        "+",
        "-",
        ".",
        "+-1",
        "1-",
        "1,000",
        " 12",
        "12 ",
        "1e5",
        "abc",
        "１２",  # full-width digits
        "12\n",
    ])
    def test_not_numeric(self, text):
        assert is_numeric(text) is False


class TestIsHex:
    """Tests for the hexadecimal predicate."""

    @pytest.mark.parametrize("text", ["1A3F", "1a3f", "0", "deadBEEF", "0x1F", "0XFF", "0x0"])
    def test_hex(self, text):
        assert is_hex(text) is True

    @pytest.mark.parametrize("text", ["", "1G3F", "0x", "0X", "x1F", "0x-1", "1F ", "#1F", "0xx1"])
    def test_not_hex(self, text):
        assert is_hex(text) is False
