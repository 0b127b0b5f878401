"""Width-limited truncation with an optional ellipsis marker."""

import logging

from .width import display_width, slice_to_width

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "..."


def truncate_line(line: str, width: int, marker: str = DEFAULT_MARKER) -> str:
    """Truncate a single line to at most ``width`` display columns.

    Args:
        line: Line to truncate.
        width: Maximum display width of the result.
        marker: Appended when text is cut. Pass "" to cut silently.

    Returns:
        The line unchanged if it fits, otherwise a prefix followed by the
        marker. When the marker alone does not fit, the marker itself is
        cut down to ``width``.
    """
    if display_width(line) <= width:
        return line

    marker_width = display_width(marker)
    if width <= marker_width:
        logger.debug("Width %d leaves no room for text next to marker %r", width, marker)
        return slice_to_width(marker, width)

    return slice_to_width(line, width - marker_width) + marker


def truncate(text: str, width: int, marker: str = DEFAULT_MARKER) -> str:
    """Truncate each line of text to ``width`` display columns.

    Every output line is guaranteed to be no wider than ``width``.
    """
    return "\n".join(truncate_line(line, width, marker) for line in text.split("\n"))
