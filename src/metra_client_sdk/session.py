from __future__ import annotations

from dataclasses import dataclass

from .clients.auth import AuthClient
from .clients.branches_client import BranchesClient
from .clients.clients_client import ClientsClient
from .clients.invoices_client import InvoicesClient
from .config import ClientConfig
from .http_client import HttpClient
from .settings_store import SettingsStore
from .token_store import TokenStore


@dataclass
class ApiSession:
    """Built once at startup; every client it hands out shares one token store and one HTTP pool."""

    config: ClientConfig
    token_store: TokenStore | None = None
    http: HttpClient | None = None

    def __post_init__(self) -> None:
        if self.token_store is None:
            self.token_store = TokenStore(SettingsStore(path_override=self.config.settings_path))
        if self.http is None:
            self.http = HttpClient(config=self.config)

    def auth_client(self) -> AuthClient:
        return AuthClient(http=self.http, token_store=self.token_store, country_code=self.config.country_code)

    def branches_client(self) -> BranchesClient:
        return BranchesClient(http=self.http, token_store=self.token_store)

    def clients_client(self) -> ClientsClient:
        return ClientsClient(
            http=self.http,
            token_store=self.token_store,
            storage_base_url=self.config.storage_base_url,
        )

    def invoices_client(self) -> InvoicesClient:
        return InvoicesClient(http=self.http, token_store=self.token_store)

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.has_token()

    def logout(self) -> None:
        self.auth_client().logout()
