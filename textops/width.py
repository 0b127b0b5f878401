# textops/width.py
"""Display-width helpers shared by every text operation.

All width computations in textops go through this module so that wide
characters (CJK, emoji) and zero-width characters (combining marks,
control characters) are measured the same way everywhere.

Usage:
    from textops.width import display_width, pad_to_width, slice_to_width

    display_width("日本")           # 4
    pad_to_width("ab", 5, "right")  # "   ab"
    slice_to_width("日本語", 5)      # "日本"
"""

import wcwidth


def char_width(char: str) -> int:
    """Return the terminal column width of a single character.

    wcwidth returns -1 for non-printable characters, those count as 0.
    """
    width = wcwidth.wcwidth(char)
    return width if width > 0 else 0


def display_width(text: str) -> int:
    """Calculate the display width of a string, accounting for wide characters.

    Uses wcwidth to properly handle emojis, CJK characters, and other
    characters that take up more than one terminal column.

    Args:
        text: The string to measure.

    Returns:
        The display width in terminal columns.
    """
    return sum(char_width(char) for char in text)


def pad_to_width(text: str, target_width: int, align: str = "left") -> str:
    """Pad a string to a target display width, accounting for wide characters.

    Text that is already at least ``target_width`` wide is returned as-is.

    Args:
        text: The string to pad.
        target_width: The desired display width.
        align: Alignment - 'left', 'right', or 'center'. Center puts the
            odd space on the right.

    Returns:
        The padded string.
    """
    padding_needed = max(0, target_width - display_width(text))

    if align == "right":
        return " " * padding_needed + text
    elif align == "center":
        left_pad = padding_needed // 2
        right_pad = padding_needed - left_pad
        return " " * left_pad + text + " " * right_pad
    else:  # left
        return text + " " * padding_needed


def slice_to_width(text: str, max_width: int) -> str:
    """Return the longest prefix of ``text`` that fits in ``max_width`` columns.

    A wide character that would straddle the limit is dropped rather
    than split.
    """
    if max_width <= 0:
        return ""

    used = 0
    for index, char in enumerate(text):
        used += char_width(char)
        if used > max_width:
            return text[:index]
    return text
