from __future__ import annotations

import json
import os
import sys
import threading
from pathlib import Path

import pytest

from metra_client_sdk import settings_store as settings_store_module
from metra_client_sdk.settings_store import SettingsStore
from metra_client_sdk.token_store import TOKEN_KEY, TokenStore


def test_settings_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(path_override=path)
    store.set("theme", "dark")

    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
    assert SettingsStore(path_override=path).get("theme") == "dark"


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions only")
def test_settings_file_is_private(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsStore(path_override=path).set("k", "v")
    assert oct(os.stat(path).st_mode & 0o777) == "0o600"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_unreadable_settings_read_as_empty(tmp_path: Path, content: str) -> None:
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    store = SettingsStore(path_override=path)
    assert store.get("anything") is None
    store.set("k", "v")
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}


def test_token_round_trip_without_reload(token_store: TokenStore) -> None:
    token_store.set_token("abc")
    assert token_store.get_token() == "abc"
    assert token_store.has_token() is True
    assert token_store.authenticated is True


def test_token_survives_restart(settings: SettingsStore, tmp_path: Path) -> None:
    TokenStore(settings).set_token("persisted")

    restarted = TokenStore(SettingsStore(path_override=tmp_path / "settings.json"))
    assert restarted.has_token() is True
    assert restarted.get_token() == "persisted"
    # Known token, not yet confirmed by the server in this process.
    assert restarted.authenticated is False


def test_clear_token_twice_is_noop(token_store: TokenStore, tmp_path: Path) -> None:
    token_store.set_token("abc")
    token_store.clear_token()
    token_store.clear_token()

    assert token_store.has_token() is False
    assert token_store.get_token() is None
    stored = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert TOKEN_KEY not in stored


def test_mark_unauthenticated_keeps_token(token_store: TokenStore) -> None:
    token_store.set_token("abc")
    token_store.mark_unauthenticated()
    assert token_store.authenticated is False
    assert token_store.get_token() == "abc"
    token_store.mark_authenticated()
    assert token_store.authenticated is True


def test_failed_write_keeps_previous_state(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = TokenStore(SettingsStore(path_override=blocker / "settings.json"))

    with pytest.raises(OSError):
        store.set_token("abc")

    assert store.has_token() is False
    assert store.authenticated is False
    assert store.settings.get(TOKEN_KEY) is None


def test_write_replaces_file_without_leftovers(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    store = SettingsStore(path_override=path)
    store.set("a", 1)
    store.set("b", 2)

    assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1, "b": 2}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["settings.json"]


def test_interrupted_write_leaves_old_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "settings.json"
    store = SettingsStore(path_override=path)
    store.set(TOKEN_KEY, "old")

    def fail_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(settings_store_module.os, "replace", fail_replace)
    with pytest.raises(OSError):
        store.set(TOKEN_KEY, "new")

    assert json.loads(path.read_text(encoding="utf-8")) == {TOKEN_KEY: "old"}
    assert store.get(TOKEN_KEY) == "old"
    assert not (tmp_path / "settings.json.tmp").exists()


def test_clear_holds_in_memory_when_file_update_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    store = TokenStore(SettingsStore(path_override=tmp_path / "settings.json"))
    store.set_token("abc")
    def read_only(src: object, dst: object) -> None:
        raise OSError("read-only file system")

    monkeypatch.setattr(settings_store_module.os, "replace", read_only)

    with pytest.raises(OSError):
        store.clear_token()

    assert store.has_token() is False
    assert store.get_token() is None


def test_concurrent_set_clear_get(token_store: TokenStore) -> None:
    tokens = {f"token-{i}" for i in range(4)}
    errors: list[BaseException] = []
    start = threading.Barrier(6)

    def writer(token: str) -> None:
        start.wait()
        for _ in range(40):
            token_store.set_token(token)
            token_store.clear_token()

    def reader() -> None:
        start.wait()
        for _ in range(200):
            value = token_store.get_token()
            if value is not None and value not in tokens:
                errors.append(AssertionError(f"unexpected token {value!r}"))

    def guarded(target, *args) -> None:
        try:
            target(*args)
        except BaseException as exc:  # noqa: BLE001 - surfaced through errors list
            errors.append(exc)

    threads = [threading.Thread(target=guarded, args=(writer, token)) for token in sorted(tokens)]
    threads += [threading.Thread(target=guarded, args=(reader,)) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert errors == []
    assert all(not thread.is_alive() for thread in threads)
    token_store.set_token("final")
    assert token_store.get_token() == "final"
    token_store.clear_token()
    assert token_store.has_token() is False
    assert token_store.settings.get(TOKEN_KEY) is None
