"""Errors raised by the command-line layer.

The text operations themselves never raise for any string content; only
bad command-line arguments do.
"""

from typing import Iterable, Optional

# argparse exits with 2 on usage errors; the CLI keeps that convention.
USAGE_EXIT_CODE = 2


class TextOpsError(Exception):
    """Base class for CLI errors. Carries the process exit code."""

    exit_code = 1

    def __init__(self, message: str, usage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.usage = usage


class UsageError(TextOpsError):
    """Command line could not be parsed."""

    exit_code = USAGE_EXIT_CODE


class MissingArgument(UsageError):
    """A required flag was not given."""

    def __init__(self, flag: str, command: str, usage: Optional[str] = None):
        super().__init__(f"{command}: missing required argument {flag}", usage)
        self.flag = flag
        self.command = command


class InvalidWidth(UsageError):
    """A width argument is not an integer, or is below its minimum."""

    def __init__(self, value: str, flag: str = "--width", minimum: int = 0):
        expected = "a non-negative integer" if minimum == 0 else f"an integer >= {minimum}"
        super().__init__(f"{flag}: expected {expected}, got '{value}'")
        self.value = value
        self.flag = flag
        self.minimum = minimum


class UnknownSubcommand(UsageError):
    """The requested subcommand does not exist."""

    def __init__(self, name: str, choices: Iterable[str], usage: Optional[str] = None):
        self.choices = sorted(choices)
        super().__init__(
            f"unknown command '{name}' (choose from: {', '.join(self.choices)})", usage
        )
        self.name = name
