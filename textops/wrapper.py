"""Greedy word wrapping."""

from typing import List

from .width import display_width


def wrap(text: str, width: int) -> List[str]:
    """Greedily wrap text into lines no wider than ``width``.

    The text is split on any whitespace (newlines included) into tokens.
    Tokens are added to the current line while they fit with a single
    separating space; otherwise a new line is started. A token wider than
    ``width`` is never split and ends up alone on its own line.

    Args:
        text: Text to wrap.
        width: Target display width. Zero or less puts every token on
            its own line.

    Returns:
        The wrapped lines, in order. Empty for empty or blank input.
    """
    lines: List[str] = []
    current: List[str] = []
    current_width = 0

    for token in text.split():
        token_width = display_width(token)
        if current and current_width + 1 + token_width <= width:
            current.append(token)
            current_width += 1 + token_width
            continue
        if current:
            lines.append(" ".join(current))
        current = [token]
        current_width = token_width

    if current:
        lines.append(" ".join(current))
    return lines


def wrap_text(text: str, width: int) -> str:
    """Wrap text and join the resulting lines with newlines."""
    return "\n".join(wrap(text, width))
