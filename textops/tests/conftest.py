"""Pytest fixtures for textops tests."""

import pytest

_ENV_VARS = (
    "TEXTOPS_ELLIPSIS",
    "TEXTOPS_DELIMITER",
    "TEXTOPS_TABLE_STYLE",
    "TEXTOPS_MAX_CELL_WIDTH",
    "TEXTOPS_LOG_LEVEL",
    "TEXTOPS_TRACE_LOG",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate every test from TEXTOPS_* variables and any local .env file.

    The CLI loads .env from the working directory, so tests run from an
    empty temporary directory.
    """
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
