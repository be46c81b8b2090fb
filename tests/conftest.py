from __future__ import annotations

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SDK_SRC = BASE_DIR / "src"

sys.path.insert(0, str(SDK_SRC))

from metra_client_sdk.config import ClientConfig  # noqa: E402
from metra_client_sdk.http_client import HttpClient  # noqa: E402
from metra_client_sdk.settings_store import SettingsStore  # noqa: E402
from metra_client_sdk.token_store import TokenStore  # noqa: E402

API = "https://api.example.com/api"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=API)


@pytest.fixture
def http(config: ClientConfig) -> HttpClient:
    return HttpClient(config)


@pytest.fixture
def settings(tmp_path: Path) -> SettingsStore:
    return SettingsStore(path_override=tmp_path / "settings.json")


@pytest.fixture
def token_store(settings: SettingsStore) -> TokenStore:
    return TokenStore(settings)


@pytest.fixture
def authed_store(token_store: TokenStore) -> TokenStore:
    token_store.set_token("token-123")
    return token_store
