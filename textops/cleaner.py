"""Whitespace cleanup for free-form text input."""

from typing import List


def _is_blank(line: str) -> bool:
    return not line.strip()


def clean(text: str, squeeze: bool = False) -> str:
    """Trim blank lines and surrounding whitespace from text.

    Leading and trailing blank (empty or whitespace-only) lines are
    removed, then the whitespace at the very start and very end of the
    remaining text is stripped. Interior blank lines and indentation are
    left alone.

    Args:
        text: Input text, possibly multi-line.
        squeeze: Drop every blank line and strip every line instead of
            only touching the outer boundary.

    Returns:
        The cleaned text with lines joined by ``\\n``. Empty input (or
        input that is only whitespace) gives an empty string.
    """
    lines: List[str] = text.splitlines()

    if squeeze:
        return "\n".join(line.strip() for line in lines if not _is_blank(line))

    start = 0
    end = len(lines)
    while start < end and _is_blank(lines[start]):
        start += 1
    while end > start and _is_blank(lines[end - 1]):
        end -= 1

    kept = lines[start:end]
    if not kept:
        return ""

    kept[0] = kept[0].lstrip()
    kept[-1] = kept[-1].rstrip()
    return "\n".join(kept)
