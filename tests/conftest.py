"""Shared fixtures for the sql_quoting test suite."""

from __future__ import annotations

import pytest

from sql_quoting import AnsiQuoter, reset_quoters

_ENV_VARS = (
    "SQL_QUOTING_DEBUG",
    "SQL_QUOTING_DEFAULT_DIALECT",
    "SQL_QUOTING_BLOB_HEX_UPPERCASE",
)


@pytest.fixture(autouse=True)
def _isolate_quoting(monkeypatch: pytest.MonkeyPatch):
    """Each test starts with a clean registry and no quoting env overrides."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_quoters()
    yield
    reset_quoters()


@pytest.fixture()
def ansi() -> AnsiQuoter:
    """A default ANSI quoter, independent of the registry."""
    return AnsiQuoter()
