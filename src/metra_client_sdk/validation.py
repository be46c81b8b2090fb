from __future__ import annotations

import re
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ClientValidationError, ValidationIssue
from .models_branches import BranchRequest
from .models_clients import ClientRequest
from .models_invoices import InvoiceCreateRequest, InvoiceUpdateRequest

_NON_DIGITS_RE = re.compile(r"\D")
LOCAL_PHONE_DIGITS = 9

M = TypeVar("M", bound=BaseModel)


def normalize_phone(raw: str | None, country_code: str = "998") -> str:
    """Strip everything but digits; prefix the country code on a bare local number."""
    if not raw:
        return ""
    digits = _NON_DIGITS_RE.sub("", raw)
    if len(digits) == LOCAL_PHONE_DIGITS:
        digits = country_code + digits
    return digits


def validate_login(phone: str | None, password: str | None, country_code: str = "998") -> str:
    normalized = normalize_phone(phone, country_code)
    if len(normalized) < LOCAL_PHONE_DIGITS:
        _raise_issue("phone", f"phone must contain at least {LOCAL_PHONE_DIGITS} digits")
    if not password:
        _raise_issue("password", "password is required")
    return normalized


def validate_branch_request(request: BranchRequest | Mapping[str, Any]) -> BranchRequest:
    data = coerce_request(request, BranchRequest)
    name = data.name.strip()
    if not name:
        _raise_issue("name", "name must not be empty")
    return data.model_copy(update={"name": name})


def validate_client_request(request: ClientRequest | Mapping[str, Any]) -> ClientRequest:
    data = coerce_request(request, ClientRequest)
    name = data.name.strip()
    phone = data.phone.strip()
    if not name:
        _raise_issue("name", "name must not be empty")
    if not phone:
        _raise_issue("phone", "phone must not be empty")
    return data.model_copy(update={"name": name, "phone": phone})


def validate_invoice_request(
    request: InvoiceCreateRequest | InvoiceUpdateRequest | Mapping[str, Any],
    model_type: type[InvoiceCreateRequest] | type[InvoiceUpdateRequest] = InvoiceCreateRequest,
) -> InvoiceCreateRequest | InvoiceUpdateRequest:
    data = coerce_request(request, model_type)
    for field_name in ("branch_id", "client_id", "rent_id"):
        if getattr(data, field_name) <= 0:
            _raise_issue(field_name, f"{field_name} must be a positive id")
    for index, detail in enumerate(data.details):
        if detail.count < 0:
            _raise_issue(f"details.{index}.count", "count must not be negative")
    return data


def coerce_request(value: M | Mapping[str, Any], model_type: type[M]) -> M:
    if isinstance(value, model_type):
        return value
    try:
        return model_type.model_validate(value)
    except PydanticValidationError as exc:
        errors = exc.errors()
        issue = errors[0] if errors else {"loc": ("payload",), "msg": "Invalid payload"}
        field = ".".join(str(part) for part in issue.get("loc", ("payload",)))
        raise ClientValidationError.from_issues(
            [ValidationIssue(field=field, reason=issue.get("msg", "Invalid payload"))]
        ) from exc


def _raise_issue(field: str, reason: str) -> None:
    raise ClientValidationError.from_issues([ValidationIssue(field=field, reason=reason)])
