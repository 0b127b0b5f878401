"""Left/right/center alignment of text to a target width."""

from enum import Enum
from typing import Union

from .classifier import is_numeric
from .width import display_width, pad_to_width


class Alignment(str, Enum):
    """How a line is placed inside its target width.

    AUTO right-aligns numeric lines and left-aligns everything else.
    """
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    AUTO = "auto"


def _resolve(mode: Union[Alignment, str]) -> Alignment:
    if isinstance(mode, Alignment):
        return mode
    try:
        return Alignment(mode.lower())
    except ValueError:
        valid = ", ".join(a.value for a in Alignment)
        raise ValueError(f"Unknown alignment '{mode}' (expected one of: {valid})") from None


def align_line(line: str, width: int, mode: Union[Alignment, str] = Alignment.LEFT) -> str:
    """Align a single line; lines already ``width`` wide are returned unchanged."""
    alignment = _resolve(mode)
    if display_width(line) >= width:
        return line
    if alignment is Alignment.AUTO:
        alignment = Alignment.RIGHT if is_numeric(line) else Alignment.LEFT
    return pad_to_width(line, width, alignment.value)


def align(text: str, width: int, mode: Union[Alignment, str] = Alignment.LEFT) -> str:
    """Pad every line of text to ``width`` columns.

    Each line is aligned independently. Nothing is ever truncated: a line
    at least as wide as ``width`` comes back as-is.

    Args:
        text: Text to align; may contain newlines.
        width: Target display width.
        mode: One of left, right, center or auto.

    Returns:
        The aligned text.

    Raises:
        ValueError: If mode is not a known alignment.
    """
    alignment = _resolve(mode)
    return "\n".join(align_line(line, width, alignment) for line in text.split("\n"))


def left(text: str, width: int) -> str:
    return align(text, width, Alignment.LEFT)


def right(text: str, width: int) -> str:
    return align(text, width, Alignment.RIGHT)


def center(text: str, width: int) -> str:
    """Center text, the odd leftover space going on the right."""
    return align(text, width, Alignment.CENTER)
