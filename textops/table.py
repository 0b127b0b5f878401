# textops/table.py
"""Delimited text to aligned table rendering.

Parses delimiter-separated rows (comma by default), sizes each column to
its widest cell and renders a grid with a rule under the header rows.

Shape policy: the first header row decides the column count (the first
data row when the table has no header). Shorter rows are padded with
empty cells and surplus cells of longer rows are dropped.

Row numbers used by ``header_index`` and ``width_limits_row`` are
1-based and count non-blank input lines only.

Styles:
    plain  Header1 | Header2        ascii  +---------+---------+
           --------+--------               | Header1 | Header2 |
           A       | B                     +---------+---------+
                                           | A       | B       |
                                           +---------+---------+
    box    like ascii, drawn with Unicode box-drawing characters.

Usage:
    from textops.table import render_table, create_renderer

    print(render_table("Name, Age\\nAlice, 30"), end="")

    renderer = create_renderer({"style": "box", "align_numeric": True})
    print(renderer.render(text), end="")
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .aligner import Alignment, align_line
from .classifier import is_numeric
from .formatter import Frame, TextFormatter
from .truncator import DEFAULT_MARKER, truncate, truncate_line
from .width import display_width, pad_to_width, slice_to_width
from .wrapper import wrap_text

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
DEFAULT_STYLE = "plain"

Rows = List[List[str]]


@dataclass(frozen=True)
class TableStyle:
    """Characters used to draw a table.

    Unframed styles only use ``vertical``, ``horizontal`` and ``cross``.
    """
    vertical: str = "|"
    horizontal: str = "-"
    cross: str = "+"
    top_left: str = "+"
    top_mid: str = "+"
    top_right: str = "+"
    mid_left: str = "+"
    mid_right: str = "+"
    bottom_left: str = "+"
    bottom_mid: str = "+"
    bottom_right: str = "+"
    framed: bool = False


# Box-drawing characters for table rendering
BOX_CHARS = {
    "top_left": "┌",
    "top_right": "┐",
    "bottom_left": "└",
    "bottom_right": "┘",
    "horizontal": "─",
    "vertical": "│",
    "t_down": "┬",
    "t_up": "┴",
    "t_right": "├",
    "t_left": "┤",
    "cross": "┼",
}

STYLES: Dict[str, TableStyle] = {
    "plain": TableStyle(),
    "ascii": TableStyle(framed=True),
    "box": TableStyle(
        vertical=BOX_CHARS["vertical"],
        horizontal=BOX_CHARS["horizontal"],
        cross=BOX_CHARS["cross"],
        top_left=BOX_CHARS["top_left"],
        top_mid=BOX_CHARS["t_down"],
        top_right=BOX_CHARS["top_right"],
        mid_left=BOX_CHARS["t_right"],
        mid_right=BOX_CHARS["t_left"],
        bottom_left=BOX_CHARS["bottom_left"],
        bottom_mid=BOX_CHARS["t_up"],
        bottom_right=BOX_CHARS["bottom_right"],
        framed=True,
    ),
}


def get_style(name: str) -> TableStyle:
    """Look up a built-in style by name.

    Raises:
        ValueError: If the style name is unknown.
    """
    try:
        return STYLES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown table style '{name}' (expected one of: {', '.join(STYLES)})"
        ) from None


def _fill(char: str, width: int) -> str:
    """Repeat ``char`` to exactly ``width`` columns, whatever its own width."""
    return pad_to_width(slice_to_width(char * width, width), width)


def _cell_width(cell: str) -> int:
    return max(display_width(line) for line in cell.split("\n"))


class TableRenderer:
    """Renders delimited text as an aligned table.

    Options:
        delimiter: Cell separator in the input (default ",").
        style: Style name or TableStyle (default "plain").
        divider: Draw the rule under the header rows.
        divider_char: Overrides the character used for that rule.
        max_cell_width: Width limit for every cell (at least 1).
        width_limits_row: Row whose cells hold per-column width limits.
            The row is not rendered; empty, invalid or zero cells fall
            back to ``max_cell_width``. 0 disables it.
        frame: What happens to a cell over its limit: truncate (with
            ``marker``), wrap onto several lines, or none.
        marker: Ellipsis used by truncation.
        header_index: Row number of the first header row; 0 for no header.
        header_count: Number of consecutive header rows.
        output_separator: Text between cells of unframed styles, replacing
            " | ". The rule uses it verbatim as well.
        align_numeric: Right-align columns whose data cells are all numbers.
        number_format: TextFormatter applied to numeric data cells, for
            decimal digits and separators. None leaves cells as typed.
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        style: Any = DEFAULT_STYLE,
        divider: bool = True,
        divider_char: Optional[str] = None,
        max_cell_width: Optional[int] = None,
        width_limits_row: int = 0,
        frame: Any = Frame.TRUNCATE,
        marker: str = DEFAULT_MARKER,
        header_index: int = 1,
        header_count: int = 1,
        output_separator: Optional[str] = None,
        align_numeric: bool = False,
        number_format: Optional[TextFormatter] = None,
    ):
        self._delimiter = delimiter
        self._style = style if isinstance(style, TableStyle) else get_style(style)
        self._divider = divider
        self._divider_char = divider_char
        self._max_cell_width = max_cell_width
        self._width_limits_row = width_limits_row
        self._frame = Frame(frame)
        self._marker = marker
        self._header_index = header_index
        self._header_count = header_count
        self._output_separator = output_separator
        self._align_numeric = align_numeric
        self._number_format = number_format
        self._validate()

    def initialize(self, config: Optional[Dict[str, Any]] = None) -> None:
        """Apply a configuration dict.

        Args:
            config: Dict with any of the constructor options as keys.
                Missing keys keep their current values.

        Raises:
            ValueError: If the resulting options are inconsistent.
        """
        config = config or {}
        self._delimiter = config.get("delimiter", self._delimiter)
        if "style" in config:
            style = config["style"]
            self._style = style if isinstance(style, TableStyle) else get_style(style)
        self._divider = config.get("divider", self._divider)
        self._divider_char = config.get("divider_char", self._divider_char)
        self._max_cell_width = config.get("max_cell_width", self._max_cell_width)
        self._width_limits_row = config.get("width_limits_row", self._width_limits_row)
        self._frame = Frame(config.get("frame", self._frame))
        self._marker = config.get("marker", self._marker)
        self._header_index = config.get("header_index", self._header_index)
        self._header_count = config.get("header_count", self._header_count)
        self._output_separator = config.get("output_separator", self._output_separator)
        self._align_numeric = config.get("align_numeric", self._align_numeric)
        self._number_format = config.get("number_format", self._number_format)
        self._validate()

    def _validate(self) -> None:
        if self._max_cell_width is not None and self._max_cell_width < 1:
            raise ValueError(f"max_cell_width must be at least 1, got {self._max_cell_width}")
        if self._header_index < 0:
            raise ValueError(f"header_index must not be negative, got {self._header_index}")
        if self._header_count < 1:
            raise ValueError(f"header_count must be at least 1, got {self._header_count}")
        if self._width_limits_row < 0:
            raise ValueError(f"width_limits_row must not be negative, got {self._width_limits_row}")
        if self._output_separator is not None and self._style.framed:
            raise ValueError("output_separator only applies to unframed styles")
        if self._number_format is not None:
            # Numbers are formatted bare; fitting happens per column.
            self._number_format = dataclasses.replace(self._number_format, width=None)

    @property
    def style(self) -> TableStyle:
        return self._style

    # ==================== Table Parsing ====================

    def split_rows(self, text: str) -> Tuple[Rows, Rows]:
        """Parse delimited text into header rows and data rows.

        Blank lines are skipped and every cell is stripped. The width
        limits row, if any, is consumed and appears in neither list.
        Every returned row has the same number of cells.
        """
        rows = [
            [cell.strip() for cell in line.split(self._delimiter)]
            for line in text.splitlines()
            if line.strip()
        ]

        limits_pos = self._width_limits_row - 1
        header_start = self._header_index - 1
        header_end = header_start + self._header_count if self._header_index else 0

        headers: Rows = []
        data: Rows = []
        limits_cells: List[str] = []
        for pos, row in enumerate(rows):
            if pos == limits_pos:
                limits_cells = row
            elif header_start <= pos < header_end:
                headers.append(row)
            else:
                data.append(row)

        if not headers and not data:
            return [], []

        num_cols = len((headers or data)[0])
        for index, row in enumerate(headers + data, start=1):
            if len(row) < num_cols:
                logger.debug("Row %d has %d cells, padding to %d", index, len(row), num_cols)
                row.extend([""] * (num_cols - len(row)))
            elif len(row) > num_cols:
                logger.debug("Row %d has %d cells, dropping %d", index, len(row), len(row) - num_cols)
                del row[num_cols:]

        if self._number_format is not None:
            data = [[self._format_number(cell) for cell in row] for row in data]

        limits = self.width_limits(limits_cells, num_cols)
        if any(limit is not None for limit in limits):
            headers = [self._fit_row(row, limits) for row in headers]
            data = [self._fit_row(row, limits) for row in data]
        return headers, data

    def parse(self, text: str) -> Rows:
        """Parse delimited text into rows, header rows first."""
        headers, data = self.split_rows(text)
        return headers + data

    def width_limits(self, limits_cells: List[str], num_cols: int) -> List[Optional[int]]:
        """Width limit per column, None meaning unlimited."""
        limits: List[Optional[int]] = []
        for col_idx in range(num_cols):
            cell = limits_cells[col_idx] if col_idx < len(limits_cells) else ""
            try:
                limit = int(cell)
            except ValueError:
                if cell:
                    logger.debug("Ignoring width limit %r for column %d", cell, col_idx + 1)
                limit = 0
            limits.append(limit if limit > 0 else self._max_cell_width)
        return limits

    def _format_number(self, cell: str) -> str:
        if not cell or not self._number_format.is_numeric(cell):
            return cell
        return self._number_format.format(cell)

    def _fit_row(self, row: List[str], limits: List[Optional[int]]) -> List[str]:
        return [self._fit_cell(cell, limit) for cell, limit in zip(row, limits)]

    def _fit_cell(self, cell: str, limit: Optional[int]) -> str:
        if limit is None or display_width(cell) <= limit:
            return cell
        if self._frame is Frame.TRUNCATE:
            return truncate_line(cell, limit, self._marker)
        if self._frame is Frame.WRAP:
            # Words longer than the limit are still cut.
            return truncate(wrap_text(cell, limit), limit, self._marker)
        return cell

    def _is_number(self, cell: str) -> bool:
        if is_numeric(cell):
            return True
        return self._number_format is not None and self._number_format.is_numeric(cell)

    def column_widths(self, rows: Rows) -> List[int]:
        """Max display width of each column, at least 1 so no line is empty."""
        if not rows:
            return []
        return [
            max(1, max(_cell_width(row[col_idx]) for row in rows))
            for col_idx in range(len(rows[0]))
        ]

    def column_alignments(self, data: Rows) -> List[Alignment]:
        """Left for every column, or right for numeric columns with ``align_numeric``."""
        if not data:
            return []
        alignments = []
        for col_idx in range(len(data[0])):
            values = [row[col_idx] for row in data if row[col_idx]]
            numeric = self._align_numeric and bool(values) and all(self._is_number(v) for v in values)
            alignments.append(Alignment.RIGHT if numeric else Alignment.LEFT)
        return alignments

    # ==================== Table Rendering ====================

    def render(self, text: str) -> str:
        """Render delimited text as a table.

        Returns:
            The table, one line per row plus rules, each line ending with
            a newline. Empty input renders as an empty string.
        """
        headers, data = self.split_rows(text)
        rows = headers + data
        if not rows:
            return ""

        col_widths = self.column_widths(rows)
        alignments = self.column_alignments(data) or [Alignment.LEFT] * len(col_widths)

        lines = []
        if self._style.framed:
            lines.append(self._make_border("top", col_widths))
        for row in headers:
            lines.extend(self._make_row(row, col_widths, alignments))
        if headers and self._divider:
            lines.append(self._make_border("middle", col_widths))
        for row in data:
            lines.extend(self._make_row(row, col_widths, alignments))
        if self._style.framed:
            lines.append(self._make_border("bottom", col_widths))

        return "".join(line + "\n" for line in lines)

    def _make_border(self, position: str, col_widths: List[int]) -> str:
        """Create a horizontal rule line."""
        style = self._style
        horiz = style.horizontal
        if position == "middle" and self._divider_char:
            horiz = self._divider_char

        if not style.framed:
            if self._output_separator is not None:
                junction = self._output_separator
            else:
                junction = _fill(horiz, 1) + style.cross + _fill(horiz, 1)
            return junction.join(_fill(horiz, w) for w in col_widths)

        if position == "top":
            left, mid, right = style.top_left, style.top_mid, style.top_right
        elif position == "middle":
            left, mid, right = style.mid_left, style.cross, style.mid_right
        else:  # bottom
            left, mid, right = style.bottom_left, style.bottom_mid, style.bottom_right

        segments = [_fill(horiz, w + 2) for w in col_widths]
        return left + mid.join(segments) + right

    def _make_row(
        self, cells: List[str], col_widths: List[int], alignments: List[Alignment]
    ) -> List[str]:
        """Create the output lines of one row; wrapped cells span several lines."""
        vert = self._style.vertical
        cell_lines = [cell.split("\n") for cell in cells]
        height = max(len(parts) for parts in cell_lines)

        lines = []
        for line_idx in range(height):
            padded = [
                align_line(parts[line_idx] if line_idx < len(parts) else "", width, alignment)
                for parts, width, alignment in zip(cell_lines, col_widths, alignments)
            ]
            if self._style.framed:
                lines.append(vert + vert.join(f" {cell} " for cell in padded) + vert)
            elif self._output_separator is not None:
                lines.append(self._output_separator.join(padded))
            else:
                lines.append(f" {vert} ".join(padded))
        return lines


def create_renderer(config: Optional[Dict[str, Any]] = None) -> TableRenderer:
    """Factory function to create a configured TableRenderer."""
    renderer = TableRenderer()
    renderer.initialize(config)
    return renderer


def render_table(text: str, delimiter: str = DEFAULT_DELIMITER, **options: Any) -> str:
    """Render delimited text as an aligned table.

    Args:
        text: Rows separated by newlines, cells by ``delimiter``. The first
            row is the header unless ``header_index`` says otherwise.
        delimiter: Cell separator.
        **options: Any other TableRenderer option.

    Returns:
        The rendered table.

    Raises:
        ValueError: If the options are inconsistent.
    """
    return TableRenderer(delimiter=delimiter, **options).render(text)
