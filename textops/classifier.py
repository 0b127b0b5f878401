"""Predicates for numeric and hexadecimal strings.

Both checks are strict: no surrounding whitespace, no thousands
separators and no exponent notation are accepted. Use
`textops.numbers.parse_number` for separator-aware parsing.
"""

import re

# Optional sign, ASCII digits, at most one decimal point, at least one digit.
NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

HEX_PATTERN = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")


def is_numeric(text: str) -> bool:
    """Check whether text is a plain decimal number.

    Examples:
        >>> is_numeric("12345")
        True
        >>> is_numeric("-3.5")
        True
        >>> is_numeric("12.3.4")
        False
        >>> is_numeric("")
        False
    """
    return NUMERIC_PATTERN.fullmatch(text) is not None


def is_hex(text: str) -> bool:
    """Check whether text is a hexadecimal string, optionally 0x-prefixed.

    Hex digits are matched case-insensitively; the bare prefix "0x" is
    not a valid hex string.

    Examples:
        >>> is_hex("1A3F")
        True
        >>> is_hex("0xff")
        True
        >>> is_hex("1G3F")
        False
    """
    return HEX_PATTERN.fullmatch(text) is not None
