"""Environment-based defaults for the textops CLI.

Values come from the process environment, optionally seeded from a
.env file. Configuration is only ever read.

Variables:
    TEXTOPS_ELLIPSIS        Truncation marker (default "...").
    TEXTOPS_DELIMITER       Table cell delimiter (default ",").
    TEXTOPS_TABLE_STYLE     plain | ascii | box (default plain).
    TEXTOPS_MAX_CELL_WIDTH  Truncate table cells wider than this.
    TEXTOPS_LOG_LEVEL       Logging level name (default WARNING).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .table import DEFAULT_DELIMITER, DEFAULT_STYLE, STYLES
from .truncator import DEFAULT_MARKER

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_ellipsis() -> str:
    """Resolve the truncation marker. An empty value disables the marker."""
    return os.environ.get("TEXTOPS_ELLIPSIS", DEFAULT_MARKER)


def resolve_delimiter() -> str:
    """Resolve the table delimiter, ignoring empty values."""
    return os.environ.get("TEXTOPS_DELIMITER") or DEFAULT_DELIMITER


def resolve_table_style() -> str:
    """Resolve the table style name.

    Returns:
        One of the built-in style names; unknown values fall back to plain.
    """
    val = os.environ.get("TEXTOPS_TABLE_STYLE", "").lower()
    if val in STYLES:
        return val
    if val:
        logger.warning("Ignoring unknown TEXTOPS_TABLE_STYLE %r", val)
    return DEFAULT_STYLE


def resolve_max_cell_width() -> Optional[int]:
    """Resolve the table cell width limit.

    Returns:
        A width of at least 1, or None when unset or invalid.
    """
    val = os.environ.get("TEXTOPS_MAX_CELL_WIDTH", "")
    if not val:
        return None
    try:
        width = int(val)
    except ValueError:
        logger.warning("Ignoring non-integer TEXTOPS_MAX_CELL_WIDTH %r", val)
        return None
    if width < 1:
        logger.warning("Ignoring TEXTOPS_MAX_CELL_WIDTH %r below 1", val)
        return None
    return width


def resolve_log_level() -> str:
    val = os.environ.get("TEXTOPS_LOG_LEVEL", "").upper()
    return val if val in _LOG_LEVELS else DEFAULT_LOG_LEVEL


@dataclass
class TextOpsConfig:
    """Defaults applied when a CLI flag is not given."""
    ellipsis: str = DEFAULT_MARKER
    delimiter: str = DEFAULT_DELIMITER
    table_style: str = DEFAULT_STYLE
    max_cell_width: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env_file: Optional[str] = DEFAULT_ENV_FILE) -> "TextOpsConfig":
        """Build the configuration from the environment.

        Args:
            env_file: .env file loaded first (without overriding variables
                already set). A missing file is ignored; None skips it.
        """
        if env_file:
            load_dotenv(env_file)
        return cls(
            ellipsis=resolve_ellipsis(),
            delimiter=resolve_delimiter(),
            table_style=resolve_table_style(),
            max_cell_width=resolve_max_cell_width(),
            log_level=resolve_log_level(),
        )
