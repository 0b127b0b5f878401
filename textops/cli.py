"""Command-line interface for textops.

Usage:
    textops clean --text "  hello  "
    textops right --text "42" --width 8
    textops wrap --text "the quick brown fox" --width 10
    textops truncate --text "a long line of text" --width 10
    textops is hex --text 1A3F
    textops table --text "Name, Age\\nAlice, 30"
    printf "a,b\\n1,2\\n" | textops table --style box

Exit codes:
    0  success
    1  input could not be read
    2  bad arguments (missing flag, invalid width, unknown command)
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .aligner import Alignment, align
from .classifier import is_hex, is_numeric
from .cleaner import clean
from .config import DEFAULT_ENV_FILE, TextOpsConfig
from .console_encoding import configure_utf8_output
from .errors import InvalidWidth, MissingArgument, TextOpsError, UnknownSubcommand, UsageError
from .formatter import Frame, TextFormatter
from .table import STYLES, render_table
from .trace import trace
from .truncator import truncate
from .width import display_width
from .wrapper import wrap_text

logger = logging.getLogger(__name__)

ALIGN_COMMANDS = ("left", "right", "center")
WIDTH_COMMANDS = ALIGN_COMMANDS + ("wrap", "truncate")
COMMANDS = ("clean",) + WIDTH_COMMANDS + ("is", "text", "format", "table")
IS_TARGETS = ("hex", "numeric")

TEXT_HELP = "Input text (default: read from piped stdin)"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message, usage=self.format_usage())


def parse_width(value: str, flag: str = "--width", minimum: int = 0) -> int:
    """Parse an integer argument that must be at least ``minimum``.

    Raises:
        InvalidWidth: If value is not an integer >= minimum.
    """
    try:
        width = int(value)
    except ValueError:
        raise InvalidWidth(value, flag, minimum) from None
    if width < minimum:
        raise InvalidWidth(value, flag, minimum)
    return width


def _non_empty(value: Optional[str], flag: str) -> Optional[str]:
    if value is not None and value == "":
        raise UsageError(f"{flag}: must not be empty")
    return value


def _single_column_char(value: Optional[str], flag: str) -> Optional[str]:
    if value is not None and (len(value) != 1 or display_width(value) != 1):
        raise UsageError(f"{flag}: expected a single one-column character, got '{value}'")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="textops",
        description="Clean, align, wrap, truncate, classify and tabulate text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textops center --text "Hi" --width 6
  textops truncate --text "Hello, world" --width 8
  textops table --text "Header1, Header2\\nA, B" --style box
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help=f"Path to .env file (default: {DEFAULT_ENV_FILE})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    def add_command(
        name: str, help_text: str, width: bool = False, aliases: Sequence[str] = ()
    ) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(
            name, aliases=list(aliases), help=help_text, description=help_text
        )
        sub.add_argument("--text", "-t", help=TEXT_HELP)
        if width:
            sub.add_argument("--width", "-w", help="Target width in columns")
        return sub

    clean_parser = add_command("clean", "Remove leading/trailing blank lines and whitespace")
    clean_parser.add_argument(
        "--squeeze",
        action="store_true",
        help="Also drop interior blank lines and strip every line",
    )

    add_command("left", "Align to the left, padding with spaces up to width", width=True)
    add_command("right", "Align to the right, padding with spaces up to width", width=True)
    add_command("center", "Center within width", width=True)
    add_command("wrap", "Word-wrap to width", width=True)

    truncate_parser = add_command("truncate", "Truncate to width", width=True)
    truncate_parser.add_argument("--marker", help="Ellipsis marker (default: ...)")
    truncate_parser.add_argument(
        "--no-ellipsis",
        action="store_true",
        help="Cut without appending a marker",
    )

    is_parser = subparsers.add_parser("is", help="Check whether text is hex or numeric")
    is_targets = is_parser.add_subparsers(dest="target", metavar="TARGET")
    is_targets.required = True
    for target in IS_TARGETS:
        target_parser = is_targets.add_parser(target, help=f"Check whether text is {target}")
        target_parser.add_argument("--text", "-t", help=TEXT_HELP)

    text_parser = add_command(
        "text", "Fit text or a number to width and align it", width=True, aliases=["format"]
    )
    text_parser.add_argument(
        "--frame",
        choices=[f.value for f in Frame],
        default=Frame.TRUNCATE.value,
        help="How over-wide text is fitted (default: truncate)",
    )
    text_parser.add_argument(
        "--alignment",
        choices=[a.value for a in Alignment],
        default=Alignment.AUTO.value,
        help="Alignment inside width; auto right-aligns numbers (default: auto)",
    )
    text_parser.add_argument("--no-ellipsis", action="store_true", help="Truncate without a marker")
    _add_number_options(text_parser)

    table_parser = add_command("table", "Render delimited rows as an aligned table")
    table_parser.add_argument("--delimiter", "-d", help="Cell delimiter (default: ,)")
    table_parser.add_argument(
        "--ofs", "-o",
        help="Output separator between cells, plain style only (default: ' | ')",
    )
    table_parser.add_argument("--style", choices=sorted(STYLES), help="Border style (default: plain)")
    table_parser.add_argument(
        "--header-row",
        default="1",
        help="Row number of the first header row, 0 for no header (default: 1)",
    )
    table_parser.add_argument("--header-count", default="1", help="Number of header rows (default: 1)")
    table_parser.add_argument("--no-divider", action="store_true", help="Omit the rule under the header")
    table_parser.add_argument("--divider-char", help="Character for the rule under the header")
    table_parser.add_argument("--max-cell-width", help="Width limit for every cell")
    table_parser.add_argument(
        "--max-width-row",
        default="0",
        help="Row holding a width limit per column, not rendered (default: none)",
    )
    table_parser.add_argument(
        "--frame",
        choices=[f.value for f in Frame],
        default=Frame.TRUNCATE.value,
        help="How cells over their width limit are fitted (default: truncate)",
    )
    table_parser.add_argument("--no-ellipsis", action="store_true", help="Truncate cells without a marker")
    table_parser.add_argument(
        "--align-numeric",
        action="store_true",
        help="Right-align columns that only contain numbers",
    )
    _add_number_options(table_parser, defaults=False)

    return parser


def _add_number_options(sub: argparse.ArgumentParser, defaults: bool = True) -> None:
    """Add the number formatting flags.

    Without ``defaults`` every flag is left unset, so callers can tell
    whether number formatting was asked for at all.
    """
    sub.add_argument(
        "--pad-decimal-digits",
        action="store_true",
        help="Always show --max-decimal-digits decimals",
    )
    sub.add_argument(
        "--max-decimal-digits",
        default="2" if defaults else None,
        help="Decimal digits (default: 2)",
    )
    sub.add_argument(
        "--decimal-separator",
        default="." if defaults else None,
        help="Decimal separator (default: .)",
    )
    sub.add_argument(
        "--thousand-separator",
        default="," if defaults else None,
        help="Thousands separator (default: ,)",
    )
    sub.add_argument(
        "--use-thousand-separator",
        action="store_true",
        help="Group integer digits of numbers",
    )


def check_command(argv: Sequence[str], parser: argparse.ArgumentParser) -> None:
    """Reject unknown subcommands before argparse sees them.

    Raises:
        UnknownSubcommand: If the first positional token is not a command,
            or the token after "is" is not a known target.
    """
    tokens = iter(argv)
    for token in tokens:
        if token == "--env-file":
            next(tokens, None)
            continue
        if token.startswith("-"):
            continue
        if token not in COMMANDS:
            raise UnknownSubcommand(token, COMMANDS, parser.format_usage())
        if token == "is":
            target = next(tokens, None)
            if target is not None and not target.startswith("-") and target not in IS_TARGETS:
                raise UnknownSubcommand(f"is {target}", IS_TARGETS, parser.format_usage())
        return


# ==================== Command handlers ====================

def _require_text(args: argparse.Namespace) -> str:
    """Return --text, or piped stdin when the flag is absent.

    Raises:
        MissingArgument: If --text is absent and stdin is a terminal.
        TextOpsError: If stdin cannot be read.
    """
    if args.text is not None:
        return args.text
    if sys.stdin is None or sys.stdin.isatty():
        raise MissingArgument("--text", args.command)
    try:
        text = sys.stdin.read()
    except OSError as e:
        raise TextOpsError(f"failed to read stdin: {e}") from e
    # Piped input carries the newline that ended its last line.
    return text[:-1] if text.endswith("\n") else text


def _require_width(args: argparse.Namespace) -> int:
    if args.width is None:
        raise MissingArgument("--width", args.command)
    return parse_width(args.width)


def _run_clean(args: argparse.Namespace, config: TextOpsConfig) -> str:
    return clean(_require_text(args), squeeze=args.squeeze)


def _run_align(args: argparse.Namespace, config: TextOpsConfig) -> str:
    text = _require_text(args)
    return align(text, _require_width(args), args.command)


def _run_wrap(args: argparse.Namespace, config: TextOpsConfig) -> str:
    text = _require_text(args)
    return wrap_text(text, _require_width(args))


def _run_truncate(args: argparse.Namespace, config: TextOpsConfig) -> str:
    text = _require_text(args)
    width = _require_width(args)
    if args.no_ellipsis:
        marker = ""
    elif args.marker is not None:
        marker = args.marker
    else:
        marker = config.ellipsis
    return truncate(text, width, marker)


def _run_is(args: argparse.Namespace, config: TextOpsConfig) -> str:
    text = _require_text(args)
    result = is_hex(text) if args.target == "hex" else is_numeric(text)
    return "true" if result else "false"


def _run_text(args: argparse.Namespace, config: TextOpsConfig) -> str:
    text = _require_text(args)
    formatter = TextFormatter(
        width=parse_width(args.width) if args.width is not None else None,
        frame=Frame(args.frame),
        alignment=Alignment(args.alignment),
        marker=config.ellipsis,
        no_ellipsis=args.no_ellipsis,
        pad_decimal_digits=args.pad_decimal_digits,
        max_decimal_digits=parse_width(args.max_decimal_digits, "--max-decimal-digits"),
        decimal_separator=_non_empty(args.decimal_separator, "--decimal-separator"),
        use_thousand_separator=args.use_thousand_separator,
        thousand_separator=args.thousand_separator,
    )
    return formatter.format(text)


def _table_number_format(args: argparse.Namespace) -> Optional[TextFormatter]:
    """TextFormatter for numeric cells, or None if no number flag was given."""
    requested = (
        args.pad_decimal_digits
        or args.use_thousand_separator
        or args.max_decimal_digits is not None
        or args.decimal_separator is not None
        or args.thousand_separator is not None
    )
    if not requested:
        return None
    return TextFormatter(
        pad_decimal_digits=args.pad_decimal_digits,
        max_decimal_digits=parse_width(args.max_decimal_digits or "2", "--max-decimal-digits"),
        decimal_separator=_non_empty(args.decimal_separator, "--decimal-separator") or ".",
        use_thousand_separator=args.use_thousand_separator,
        thousand_separator=args.thousand_separator if args.thousand_separator is not None else ",",
    )


def _run_table(args: argparse.Namespace, config: TextOpsConfig) -> str:
    # Rows arrive as a single argument with literal "\n" escapes.
    text = _require_text(args).replace("\\n", "\n")
    if args.max_cell_width is not None:
        max_cell_width = parse_width(args.max_cell_width, "--max-cell-width", minimum=1)
    else:
        max_cell_width = config.max_cell_width
    style = args.style or config.table_style
    if args.ofs is not None and STYLES[style].framed:
        raise UsageError(f"--ofs: only applies to the plain style, not '{style}'")
    return render_table(
        text,
        delimiter=_non_empty(args.delimiter, "--delimiter") or config.delimiter,
        style=style,
        divider=not args.no_divider,
        divider_char=_single_column_char(args.divider_char, "--divider-char"),
        max_cell_width=max_cell_width,
        width_limits_row=parse_width(args.max_width_row, "--max-width-row"),
        frame=Frame(args.frame),
        marker="" if args.no_ellipsis else config.ellipsis,
        header_index=parse_width(args.header_row, "--header-row"),
        header_count=parse_width(args.header_count, "--header-count", minimum=1),
        output_separator=args.ofs,
        align_numeric=args.align_numeric,
        number_format=_table_number_format(args),
    )


_HANDLERS: Dict[str, Callable[[argparse.Namespace, TextOpsConfig], str]] = {
    "clean": _run_clean,
    "left": _run_align,
    "right": _run_align,
    "center": _run_align,
    "wrap": _run_wrap,
    "truncate": _run_truncate,
    "is": _run_is,
    "text": _run_text,
    "format": _run_text,
    "table": _run_table,
}


def run(args: argparse.Namespace, config: TextOpsConfig) -> str:
    """Run the parsed command and return its output.

    Raises:
        TextOpsError: If an argument is missing or invalid.
    """
    logger.debug("Running %s", args.command)
    return _HANDLERS[args.command](args, config)


def _configure_logging(verbose: bool, level_name: str) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _report_error(error: TextOpsError) -> None:
    console = Console(stderr=True, highlight=False, soft_wrap=True)
    console.print(f"[bold red]error:[/bold red] {escape(error.message)}")
    if error.usage and isinstance(error, UnknownSubcommand):
        console.print(escape(error.usage.rstrip()))


def _write(output: str) -> None:
    if output.endswith("\n"):
        sys.stdout.write(output)
    else:
        sys.stdout.write(output + "\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the textops command.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    configure_utf8_output()
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = build_parser()

    try:
        check_command(argv, parser)
        args = parser.parse_args(argv)
        config = TextOpsConfig.from_env(args.env_file)
        _configure_logging(args.verbose, config.log_level)
        trace("cli", f"command={args.command} argv={argv!r}")
        output = run(args, config)
    except TextOpsError as e:
        trace("cli", f"error: {e.message}", include_traceback=True)
        _report_error(e)
        return e.exit_code

    _write(output)
    return 0
