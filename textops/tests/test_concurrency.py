"""Tests that the text operations are safe to call from many threads."""

from concurrent.futures import ThreadPoolExecutor

from textops.aligner import align
from textops.classifier import is_hex, is_numeric
from textops.cleaner import clean
from textops.table import render_table
from textops.truncator import truncate
from textops.wrapper import wrap

INPUTS = [
    "",
    "  Hello, world  ",
    "\n\nthe quick brown fox\n\njumps over\n\n",
    "日本語のテキスト",
    "Header1, Header2\nA, B\nC",
    "1A3F",
    "12.5",
]


def _apply_all(text):
    return (
        clean(text),
        align(text, 12, "center"),
        tuple(wrap(text, 8)),
        truncate(text, 6),
        is_numeric(text),
        is_hex(text),
        render_table(text, style="box"),
    )


class TestThreadSafety:
    """Concurrent calls give the same results as serial calls."""

    def test_parallel_matches_serial(self):
        work = INPUTS * 50
        serial = [_apply_all(text) for text in work]

        with ThreadPoolExecutor(max_workers=8) as executor:
            parallel = list(executor.map(_apply_all, work))

        assert parallel == serial

    def test_inputs_not_mutated(self):
        """Operations return new values and leave their input alone."""
        original = list(INPUTS)
        for text in INPUTS:
            _apply_all(text)
        assert INPUTS == original

    def test_repeated_calls_are_stable(self):
        for text in INPUTS:
            assert _apply_all(text) == _apply_all(text)
