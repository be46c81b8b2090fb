from __future__ import annotations

from pathlib import Path

import responses

from metra_client_sdk.config import ClientConfig
from metra_client_sdk.session import ApiSession
from metra_client_sdk.settings_store import SettingsStore
from metra_client_sdk.token_store import TokenStore

from conftest import API


def _config(tmp_path: Path) -> ClientConfig:
    return ClientConfig(env_name="test", api_base_url=API, settings_path=str(tmp_path / "settings.json"))


def test_clients_share_token_store_and_http(tmp_path: Path) -> None:
    session = ApiSession(_config(tmp_path))

    clients = [
        session.auth_client(),
        session.branches_client(),
        session.clients_client(),
        session.invoices_client(),
    ]

    assert all(client.token_store is session.token_store for client in clients)
    assert all(client.http is session.http for client in clients)
    assert session.clients_client().storage_base_url == f"{API}/public/storage"


def test_settings_path_from_config(tmp_path: Path) -> None:
    session = ApiSession(_config(tmp_path))
    session.token_store.set_token("abc")
    assert (tmp_path / "settings.json").exists()


@responses.activate
def test_login_is_visible_to_other_clients(tmp_path: Path) -> None:
    session = ApiSession(_config(tmp_path))
    branches = session.branches_client()
    responses.add(responses.POST, f"{API}/auth/login", json={"resoult": {"token": "new-token"}})
    responses.add(responses.POST, f"{API}/branches", json={"resoult": []})

    assert session.is_authenticated is False
    assert session.auth_client().login("901234567", "pw").ok
    assert branches.list().value == []

    assert responses.calls[1].request.headers["Authorization"] == "Bearer new-token"
    assert session.is_authenticated is True


def test_logout_affects_every_client(tmp_path: Path) -> None:
    store = TokenStore(SettingsStore(path_override=tmp_path / "other.json"))
    session = ApiSession(_config(tmp_path), token_store=store)
    store.set_token("abc")
    invoices = session.invoices_client()

    session.logout()
    session.logout()

    assert session.is_authenticated is False
    assert invoices.get_by_id(1).error.code == "NOT_AUTHENTICATED"
