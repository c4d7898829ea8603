# tests/unit/core/test_config.py
import pytest

from trading_bff.core.config import Settings, clear_settings_cache, get_settings, get_settings_no_cache


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_defaults(monkeypatch):
    for name in ("EBAY_SANDBOX_MODE", "EBAY_TRADING_COMPATIBILITY_LEVEL", "EBAY_DEFAULT_MARKETPLACE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.EBAY_SANDBOX_MODE is False
    assert settings.EBAY_TRADING_API_URL == "https://api.ebay.com/ws/api.dll"
    assert settings.EBAY_TRADING_SANDBOX_API_URL == "https://api.sandbox.ebay.com/ws/api.dll"
    assert settings.EBAY_TRADING_COMPATIBILITY_LEVEL == "1157"
    assert settings.EBAY_DEFAULT_MARKETPLACE == "EBAY_US"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EBAY_SANDBOX_MODE", "true")
    monkeypatch.setenv("EBAY_DEFAULT_MARKETPLACE", "EBAY_DE")
    monkeypatch.setenv("EBAY_ACCESS_TOKEN", "env-token")

    settings = get_settings_no_cache()

    assert settings.EBAY_SANDBOX_MODE is True
    assert settings.EBAY_DEFAULT_MARKETPLACE == "EBAY_DE"
    assert settings.EBAY_ACCESS_TOKEN == "env-token"


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("EBAY_DEFAULT_MARKETPLACE", "EBAY_FR")
    first = get_settings()

    monkeypatch.setenv("EBAY_DEFAULT_MARKETPLACE", "EBAY_IT")
    assert get_settings() is first
    assert get_settings().EBAY_DEFAULT_MARKETPLACE == "EBAY_FR"

    clear_settings_cache()
    assert get_settings().EBAY_DEFAULT_MARKETPLACE == "EBAY_IT"
