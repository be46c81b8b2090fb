from __future__ import annotations

import pytest

from metra_client_sdk.config import ClientConfig, ConfigError, load_config

_ENV_KEYS = (
    "METRA_ENV",
    "METRA_API_BASE_URL",
    "METRA_API_BASE_URL_DEV",
    "METRA_API_BASE_URL_STAGING",
    "METRA_TIMEOUT_SECONDS",
    "METRA_MAX_CONNECTIONS",
    "METRA_VERIFY_SSL",
    "METRA_IMAGE_BASE_URL",
    "METRA_SETTINGS_PATH",
    "METRA_COUNTRY_CODE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_load_config_requires_base_url() -> None:
    with pytest.raises(ConfigError, match="METRA_API_BASE_URL"):
        load_config()


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METRA_API_BASE_URL", "https://metra.example.com/api/")
    cfg = load_config()
    assert cfg.api_base_url == "https://metra.example.com/api"
    assert cfg.env_name == "dev"
    assert cfg.timeout_seconds == 60.0
    assert cfg.max_connections == 10
    assert cfg.verify_ssl is True
    assert cfg.country_code == "998"
    assert cfg.storage_base_url == "https://metra.example.com/api/public/storage"


def test_load_config_profile(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METRA_ENV", "Staging")
    monkeypatch.setenv("METRA_API_BASE_URL", "https://fallback.example.com")
    monkeypatch.setenv("METRA_API_BASE_URL_STAGING", "https://staging.example.com")
    cfg = load_config()
    assert cfg.api_base_url == "https://staging.example.com"
    assert cfg.normalized_env == "staging"


def test_load_config_optional_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("METRA_API_BASE_URL", "https://metra.example.com/api")
    monkeypatch.setenv("METRA_IMAGE_BASE_URL", "https://cdn.example.com/storage/")
    monkeypatch.setenv("METRA_SETTINGS_PATH", "/tmp/metra/settings.json")
    monkeypatch.setenv("METRA_VERIFY_SSL", "no")
    cfg = load_config()
    assert cfg.storage_base_url == "https://cdn.example.com/storage"
    assert cfg.settings_path == "/tmp/metra/settings.json"
    assert cfg.verify_ssl is False


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("METRA_TIMEOUT_SECONDS", "0"),
        ("METRA_TIMEOUT_SECONDS", "abc"),
        ("METRA_MAX_CONNECTIONS", "0"),
        ("METRA_MAX_CONNECTIONS", "many"),
        ("METRA_COUNTRY_CODE", "+998"),
    ],
)
def test_load_config_rejects_invalid_values(monkeypatch: pytest.MonkeyPatch, key: str, value: str) -> None:
    monkeypatch.setenv("METRA_API_BASE_URL", "https://metra.example.com/api")
    monkeypatch.setenv(key, value)
    with pytest.raises(ConfigError, match=key):
        load_config()


def test_config_is_frozen() -> None:
    cfg = ClientConfig(env_name="dev", api_base_url="https://metra.example.com/api")
    with pytest.raises(AttributeError):
        cfg.api_base_url = "https://other.example.com"  # type: ignore[misc]
