"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from mutable_string import MutableString


@pytest.fixture
def hello_world() -> MutableString:
    return MutableString("hello world")


@pytest.fixture(autouse=True)
def _clear_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MUTABLE_STRING_DEBUG_LOGGING",
        "MUTABLE_STRING_COMMIT_SUMMARY",
        "MUTABLE_STRING_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

