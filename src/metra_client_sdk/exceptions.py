from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INVALID_CREDENTIALS = "invalid_credentials"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_MISCONFIGURED = "server_misconfigured"
    ENVELOPE_MALFORMED = "envelope_malformed"
    TRANSPORT = "transport"
    APPLICATION_FAILURE = "application_failure"
    SERVER_ERROR = "server_error"
    VALIDATION = "validation"
    LOCAL_STORAGE = "local_storage"


@dataclass
class ApiError(Exception):
    code: str
    message: str
    status_code: int = 0
    details: object | None = None
    reason: str | None = None
    raw_payload: object | None = None

    kind: ClassVar[ErrorKind] = ErrorKind.SERVER_ERROR

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.code}: {self.message}"


class UnauthenticatedError(ApiError):
    """No token is stored, or the server rejected it with 401."""

    kind = ErrorKind.UNAUTHENTICATED


class InvalidCredentialsError(UnauthenticatedError):
    """Login rejected: wrong phone or password."""

    kind = ErrorKind.INVALID_CREDENTIALS


class ForbiddenError(ApiError):
    kind = ErrorKind.FORBIDDEN


@dataclass
class NotFoundError(ApiError):
    entity: str | None = None
    key: object | None = None

    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND


class RateLimitedError(ApiError):
    """429 throttling error."""

    kind = ErrorKind.RATE_LIMITED


class ServerMisconfiguredError(ApiError):
    """Server answered with an HTML/XML page where JSON was expected."""

    kind = ErrorKind.SERVER_MISCONFIGURED


class EnvelopeMalformedError(ApiError):
    """JSON arrived but does not have the expected envelope shape."""

    kind = ErrorKind.ENVELOPE_MALFORMED


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""

    kind = ErrorKind.TRANSPORT


class ApplicationFailureError(ApiError):
    """Envelope reported success=false or the server rejected the payload."""

    kind = ErrorKind.APPLICATION_FAILURE


class ServerError(ApiError):
    """5xx or unrecognized status."""

    kind = ErrorKind.SERVER_ERROR


class LocalStorageError(ApiError):
    """A local file (settings, upload source) could not be read or written."""

    kind = ErrorKind.LOCAL_STORAGE


@dataclass(frozen=True)
class ValidationIssue:
    field: str
    reason: str


@dataclass
class ClientValidationError(ApiError):
    issues: list[ValidationIssue] = field(default_factory=list)

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION

    @classmethod
    def from_issues(cls, issues: list[ValidationIssue]) -> "ClientValidationError":
        if issues:
            message = f"{issues[0].field}: {issues[0].reason}"
        else:
            message = "Validation failed"
        return cls(code="VALIDATION_ERROR", message=message, issues=list(issues))
