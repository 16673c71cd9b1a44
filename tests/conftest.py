from __future__ import annotations

import pytest

from luach.config import get_settings


@pytest.fixture
def settings_env(monkeypatch):
    """Set LUACH_* variables and drop cached settings around the test."""

    def _apply(**values: str) -> None:
        for name, value in values.items():
            monkeypatch.setenv(name, value)
        get_settings.cache_clear()

    yield _apply
    get_settings.cache_clear()
