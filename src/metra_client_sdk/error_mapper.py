from __future__ import annotations

import json

from .exceptions import (
    ApiError,
    ApplicationFailureError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ServerMisconfiguredError,
    UnauthenticatedError,
)

# Statuses whose meaning does not depend on the body; the body is not read.
_STATUS_ERRORS: dict[int, tuple[type[ApiError], str, str]] = {
    401: (UnauthenticatedError, "UNAUTHENTICATED", "Authentication required"),
    403: (ForbiddenError, "FORBIDDEN", "Access to this resource is forbidden"),
    404: (NotFoundError, "NOT_FOUND", "Resource not found"),
    429: (RateLimitedError, "RATE_LIMITED", "Too many attempts, wait and try again"),
}

_PAYLOAD_REJECTED = {400, 409, 422}


def is_markup(body: str | None) -> bool:
    return bool(body) and body.lstrip().startswith("<")


def map_error(status_code: int, body: str | None = None, reason: str | None = None) -> ApiError:
    if status_code in _STATUS_ERRORS:
        mapped, code, message = _STATUS_ERRORS[status_code]
        return mapped(code=code, message=message, status_code=status_code, reason=reason)
    if status_code >= 500:
        return _server_error(status_code, reason)
    if is_markup(body):
        return ServerMisconfiguredError(
            code="SERVER_MISCONFIGURED",
            message="Server returned a markup page instead of JSON",
            status_code=status_code,
            reason=reason,
        )
    if status_code in _PAYLOAD_REJECTED:
        payload = _json_or_none(body)
        message = None
        details = None
        if isinstance(payload, dict):
            message = payload.get("message")
            details = payload.get("errors")
        return ApplicationFailureError(
            code="REQUEST_REJECTED",
            message=str(message or reason or "Request rejected by server"),
            status_code=status_code,
            details=details,
            reason=reason,
            raw_payload=payload,
        )
    return _server_error(status_code, reason)


def _server_error(status_code: int, reason: str | None) -> ServerError:
    return ServerError(
        code="SERVER_ERROR",
        message=f"Server error: {status_code} {reason or ''}".strip(),
        status_code=status_code,
        reason=reason,
    )


def _json_or_none(body: str | None) -> object | None:
    if not body:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return None
