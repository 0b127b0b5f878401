"""Parsing and display formatting of numbers with custom separators."""

from typing import Optional

from .classifier import is_numeric


def parse_number(
    text: str,
    decimal_separator: str = ".",
    thousand_separator: str = ",",
) -> Optional[float]:
    """Parse text as a number, honouring custom separators.

    Thousand separators are removed and the decimal separator is mapped
    to ".". The normalised string must then pass `is_numeric`.

    Args:
        text: Text to parse, e.g. "1,234.5" or "1.234,5".
        decimal_separator: Character used between integer and fraction.
        thousand_separator: Character used to group integer digits.

    Returns:
        The parsed value, or None when text is not a number.
    """
    normalized = text.strip()
    if thousand_separator and thousand_separator != decimal_separator:
        normalized = normalized.replace(thousand_separator, "")
    if decimal_separator != ".":
        normalized = normalized.replace(decimal_separator, ".")

    if not is_numeric(normalized):
        return None
    return float(normalized)


def format_number(
    value: float,
    max_decimal_digits: int = 2,
    pad_decimal_digits: bool = False,
    use_thousand_separator: bool = False,
    decimal_separator: str = ".",
    thousand_separator: str = ",",
) -> str:
    """Format a number for display.

    Args:
        value: The number to format.
        max_decimal_digits: Digits kept after the decimal point (rounded).
        pad_decimal_digits: Keep trailing zeros so every value shows
            exactly ``max_decimal_digits`` decimals.
        use_thousand_separator: Group integer digits in threes.
        decimal_separator: Output decimal separator.
        thousand_separator: Output grouping separator.

    Returns:
        Formatted number, e.g. ``format_number(1234.5, 2, True, True)``
        gives "1,234.50".
    """
    digits = max(0, max_decimal_digits)
    grouping = "," if use_thousand_separator else ""
    formatted = f"{value:{grouping}.{digits}f}"

    if not pad_decimal_digits and "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("-0", "+0"):
        formatted = "0"

    return formatted.translate(
        str.maketrans({",": thousand_separator, ".": decimal_separator})
    )
