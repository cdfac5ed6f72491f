import pytest

from smsru.config import Settings, get_settings
from smsru.smsru import SmsRu


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SMSRU_API_ID", "secret-id")
    monkeypatch.setenv("SMSRU_SENDER", "Shop")
    monkeypatch.setenv("SMSRU_TIMEOUT", "5")
    settings = Settings()
    assert settings.API_ID == "secret-id"
    assert settings.SENDER == "Shop"
    assert settings.API_URL == "http://sms.ru"
    assert settings.TIMEOUT == 5.0


def test_timeout_defaults_to_none(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SMSRU_TIMEOUT", raising=False)
    assert Settings().TIMEOUT is None


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch):
    get_settings.cache_clear()
    monkeypatch.setenv("SMSRU_API_ID", "first")
    first = get_settings()
    monkeypatch.setenv("SMSRU_API_ID", "second")
    assert get_settings() is first
    assert get_settings().API_ID == "first"
    get_settings.cache_clear()


def test_client_from_settings():
    settings = Settings(API_ID="abc", SENDER="Shop", API_URL="https://sms.ru/", TIMEOUT=3)
    with SmsRu.from_settings(settings) as client:
        assert client.sender == "Shop"
        assert client.base_url == "https://sms.ru"
        assert client.new_sms("1", "x").sender == "Shop"


def test_from_settings_requires_api_id(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("SMSRU_API_ID", raising=False)
    with pytest.raises(ValueError, match="SMSRU_API_ID"):
        SmsRu.from_settings(Settings(_env_file=None))
