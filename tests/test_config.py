import logging

import pytest

from demo_app.config import DEFAULT_PORT, Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.port == 3000 == DEFAULT_PORT
    assert settings.host == "0.0.0.0"
    assert settings.enable_metrics_endpoint is False
    assert settings.log_level_value == logging.INFO


def test_port_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert get_settings().port == 8080


@pytest.mark.parametrize("raw", ["", "abc", "80.5", "-1", "70000"])
def test_unparseable_port_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)
    assert Settings().port == DEFAULT_PORT


def test_unknown_log_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert Settings().log_level == "INFO"

    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("PORT", "4000")
    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings().port == 4000
