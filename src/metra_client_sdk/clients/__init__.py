from .auth import AuthClient
from .base import BaseClient, captured
from .branches_client import BranchesClient
from .clients_client import ClientsClient
from .invoices_client import InvoicesClient

__all__ = [
    "AuthClient",
    "BaseClient",
    "BranchesClient",
    "ClientsClient",
    "InvoicesClient",
    "captured",
]
