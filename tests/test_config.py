from __future__ import annotations

import pytest

from luach.config import Settings, get_settings


def test_defaults_when_environment_is_empty(settings_env, monkeypatch) -> None:
    monkeypatch.delenv("LUACH_MAX_ABS_YEAR", raising=False)
    monkeypatch.delenv("LUACH_MAX_SEARCH_STEPS", raising=False)
    settings_env()
    assert get_settings() == Settings()


def test_environment_overrides(settings_env) -> None:
    settings_env(LUACH_MAX_ABS_YEAR="20000", LUACH_MAX_SEARCH_STEPS="8")
    settings = get_settings()
    assert settings.max_abs_year == 20000
    assert settings.max_search_steps == 8


def test_settings_are_cached(settings_env) -> None:
    settings_env(LUACH_MAX_SEARCH_STEPS="8")
    assert get_settings() is get_settings()


@pytest.mark.parametrize("value", ["lots", "0", "-3", "1.5"])
def test_malformed_values_rejected(settings_env, value: str) -> None:
    settings_env(LUACH_MAX_ABS_YEAR=value)
    with pytest.raises(ValueError, match="LUACH_MAX_ABS_YEAR"):
        get_settings()
