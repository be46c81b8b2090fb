from __future__ import annotations

import threading

from .settings_store import SettingsStore

TOKEN_KEY = "auth_token"


class TokenStore:
    """Single source of truth for the bearer token of this process.

    The token is cached in memory and persisted through ``SettingsStore``.
    The store also tracks whether the last server interaction confirmed the
    session (``authenticated``); a 401 flips it off without dropping the token.
    """

    def __init__(self, settings: SettingsStore | None = None) -> None:
        self.settings = settings or SettingsStore()
        self._lock = threading.RLock()
        self._cached: str | None = None
        self._authenticated = False
        # Set by clear_token; the persisted copy is ignored until the next set_token.
        self._cleared = False

    def get_token(self) -> str | None:
        with self._lock:
            if self._cached:
                return self._cached
            if self._cleared:
                return None
            stored = self.settings.get(TOKEN_KEY)
            if isinstance(stored, str) and stored:
                self._cached = stored
            return self._cached

    def set_token(self, token: str) -> None:
        """Persist then cache; a failed write leaves the previous state untouched."""
        with self._lock:
            self.settings.set(TOKEN_KEY, token)
            self._cached = token
            self._cleared = False
            self._authenticated = True

    def clear_token(self) -> None:
        """Forget the token in memory, then remove the persisted copy.

        The in-memory state is cleared even when removing the file entry fails.
        """
        with self._lock:
            self._cached = None
            self._cleared = True
            self._authenticated = False
            self.settings.remove(TOKEN_KEY)

    def has_token(self) -> bool:
        return self.get_token() is not None

    @property
    def authenticated(self) -> bool:
        with self._lock:
            return self._authenticated and self.has_token()

    def mark_authenticated(self) -> None:
        with self._lock:
            self._authenticated = True

    def mark_unauthenticated(self) -> None:
        with self._lock:
            self._authenticated = False
