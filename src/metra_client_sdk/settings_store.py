from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

logger = logging.getLogger(__name__)


@dataclass
class SettingsStore:
    """Key/value settings persisted as one JSON object on disk."""

    app_name: str = "Metra"
    filename: str = "settings.json"
    path_override: str | Path | None = None
    _values: dict[str, Any] | None = field(default=None, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def _path(self) -> Path:
        if self.path_override:
            return Path(self.path_override)
        return Path(user_data_dir(self.app_name, self.app_name)) / self.filename

    def _loaded(self) -> dict[str, Any]:
        if self._values is None:
            self._values = self._read()
        return self._values

    def _read(self) -> dict[str, Any]:
        path = self._path()
        if not path.exists():
            return {}
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("settings_unreadable", extra={"path": str(path)})
            return {}
        if not isinstance(data, dict):
            logger.warning("settings_not_an_object", extra={"path": str(path)})
            return {}
        return data

    def _save(self, values: dict[str, Any]) -> None:
        """Write ``values`` to a sibling temp file, then swap it in."""
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            tmp_path.write_text(json.dumps(values, indent=2), encoding="utf-8")
            try:
                tmp_path.chmod(0o600)
            except OSError:
                pass
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._loaded().get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Persist ``key``; the in-memory view changes only once the file is written."""
        with self._lock:
            values = {**self._loaded(), key: value}
            self._save(values)
            self._values = values

    def remove(self, key: str) -> None:
        with self._lock:
            values = dict(self._loaded())
            if key not in values:
                return
            values.pop(key)
            self._save(values)
            self._values = values

    def reload(self) -> None:
        with self._lock:
            self._values = None
