"""One-call text formatting: fit to width, then align.

Combines the cleaner, truncator, wrapper, aligner and number formatter
the way a single table cell or report field is usually formatted.

Usage:
    from textops.formatter import TextFormatter, Frame

    TextFormatter(width=10).format("1234.5")           # "    1234.5"
    TextFormatter(width=8, frame=Frame.WRAP).format("a long sentence")
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .aligner import Alignment, align
from .cleaner import clean
from .numbers import format_number, parse_number
from .truncator import DEFAULT_MARKER, truncate
from .wrapper import wrap_text

logger = logging.getLogger(__name__)


class Frame(str, Enum):
    """How text wider than the target width is fitted."""
    TRUNCATE = "truncate"
    WRAP = "wrap"
    NONE = "none"


@dataclass
class TextFormatter:
    """Formatting options for a single field of text.

    Attributes:
        width: Target display width. None leaves the text unframed and
            unaligned.
        frame: Truncate, wrap or leave over-wide text alone.
        alignment: Alignment inside ``width``. AUTO right-aligns numbers
            and leaves text left-aligned.
        marker: Ellipsis appended by truncation.
        no_ellipsis: Truncate without any marker.
        pad_decimal_digits: Always show ``max_decimal_digits`` decimals.
        max_decimal_digits: Decimal digits kept for numbers.
        decimal_separator: Decimal separator, for both input and output.
        use_thousand_separator: Group integer digits of numbers.
        thousand_separator: Grouping separator, for both input and output.
    """
    width: Optional[int] = None
    frame: Frame = Frame.TRUNCATE
    alignment: Alignment = Alignment.AUTO
    marker: str = DEFAULT_MARKER
    no_ellipsis: bool = False
    pad_decimal_digits: bool = False
    max_decimal_digits: int = 2
    decimal_separator: str = "."
    use_thousand_separator: bool = False
    thousand_separator: str = ","

    def __post_init__(self):
        self.frame = Frame(self.frame)
        self.alignment = Alignment(self.alignment)

    def parse(self, text: str) -> Optional[float]:
        """Return the numeric value of text, or None if it is not a number."""
        return parse_number(text, self.decimal_separator, self.thousand_separator)

    def is_numeric(self, text: str) -> bool:
        return self.parse(clean(text)) is not None

    def format_numeric(self, value: float) -> str:
        formatted = format_number(
            value,
            max_decimal_digits=self.max_decimal_digits,
            pad_decimal_digits=self.pad_decimal_digits,
            use_thousand_separator=self.use_thousand_separator,
            decimal_separator=self.decimal_separator,
            thousand_separator=self.thousand_separator,
        )
        if self.width is None:
            return formatted
        alignment = Alignment.RIGHT if self.alignment is Alignment.AUTO else self.alignment
        return align(formatted, self.width, alignment)

    def format_text(self, text: str) -> str:
        if self.width is None:
            return text

        if self.frame is Frame.TRUNCATE:
            framed = truncate(text, self.width, "" if self.no_ellipsis else self.marker)
        elif self.frame is Frame.WRAP:
            framed = wrap_text(text, self.width)
        else:
            framed = text

        alignment = Alignment.LEFT if self.alignment is Alignment.AUTO else self.alignment
        return align(framed, self.width, alignment)

    def format(self, text: str) -> str:
        """Clean text, then format it as a number or as text.

        Returns:
            The formatted field.
        """
        cleaned = clean(text)
        value = self.parse(cleaned)
        if value is not None:
            logger.debug("Formatting %r as a number", cleaned)
            return self.format_numeric(value)
        return self.format_text(cleaned)
