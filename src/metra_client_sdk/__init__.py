from .clients import AuthClient, BranchesClient, ClientsClient, InvoicesClient
from .config import ClientConfig, ConfigError, load_config
from .envelope import decode_envelope, expect_list, expect_object, expect_page, expect_success
from .exceptions import (
    ApiError,
    ApplicationFailureError,
    ClientValidationError,
    EnvelopeMalformedError,
    ErrorKind,
    ForbiddenError,
    InvalidCredentialsError,
    LocalStorageError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ServerMisconfiguredError,
    TransportError,
    UnauthenticatedError,
    ValidationIssue,
)
from .http_client import HttpClient
from .log import configure_logging
from .models import LoginResult, PaginatedResult, PaginationMeta, UserInfo, lenient_decimal
from .models_branches import Branch, BranchRequest, BranchType
from .models_clients import Client, ClientOption, ClientRequest
from .models_invoices import (
    Invoice,
    InvoiceCreateRequest,
    InvoiceDetail,
    InvoiceDetailRequest,
    InvoiceFine,
    InvoiceFineRequest,
    InvoiceMaterial,
    InvoiceUpdateRequest,
)
from .result import ApiResult
from .search import DebouncedSearch
from .session import ApiSession
from .settings_store import SettingsStore
from .token_store import TokenStore
from .ui_errors import UserFacingError, to_user_facing_error
from .validation import normalize_phone

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiResult",
    "ApiSession",
    "ApplicationFailureError",
    "AuthClient",
    "Branch",
    "BranchRequest",
    "BranchType",
    "BranchesClient",
    "Client",
    "ClientConfig",
    "ClientOption",
    "ClientRequest",
    "ClientValidationError",
    "ClientsClient",
    "ConfigError",
    "DebouncedSearch",
    "EnvelopeMalformedError",
    "ErrorKind",
    "ForbiddenError",
    "HttpClient",
    "InvalidCredentialsError",
    "Invoice",
    "InvoiceCreateRequest",
    "InvoiceDetail",
    "InvoiceDetailRequest",
    "InvoiceFine",
    "InvoiceFineRequest",
    "InvoiceMaterial",
    "InvoiceUpdateRequest",
    "InvoicesClient",
    "LocalStorageError",
    "LoginResult",
    "NotFoundError",
    "PaginatedResult",
    "PaginationMeta",
    "RateLimitedError",
    "ServerError",
    "ServerMisconfiguredError",
    "SettingsStore",
    "TokenStore",
    "TransportError",
    "UnauthenticatedError",
    "UserFacingError",
    "UserInfo",
    "ValidationIssue",
    "configure_logging",
    "decode_envelope",
    "expect_list",
    "expect_object",
    "expect_page",
    "expect_success",
    "lenient_decimal",
    "load_config",
    "normalize_phone",
    "to_user_facing_error",
]
