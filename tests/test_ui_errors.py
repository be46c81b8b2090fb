from __future__ import annotations

from metra_client_sdk.exceptions import (
    ApplicationFailureError,
    ClientValidationError,
    InvalidCredentialsError,
    NotFoundError,
    TransportError,
    ValidationIssue,
)
from metra_client_sdk.ui_errors import to_user_facing_error


def test_invalid_credentials_message() -> None:
    error = InvalidCredentialsError(code="INVALID_CREDENTIALS", message="bad", status_code=401)
    facing = to_user_facing_error(error)
    assert facing.message == "Telefon raqam yoki parol noto'g'ri"
    assert facing.details == "INVALID_CREDENTIALS (HTTP 401)"


def test_transport_message() -> None:
    facing = to_user_facing_error(TransportError(code="TRANSPORT_ERROR", message="refused"))
    assert facing.message == "Server bilan bog'lanishda xatolik"


def test_not_found_names_entity() -> None:
    error = NotFoundError(code="NOT_FOUND", message="x", status_code=404, entity="invoice", key=11)
    assert to_user_facing_error(error).message == "Faktura topilmadi (ID: 11)"


def test_application_failure_uses_server_message() -> None:
    error = ApplicationFailureError(
        code="REQUEST_REJECTED",
        message="Bunday telefon mavjud",
        status_code=422,
        details={"phone": ["taken"]},
    )
    facing = to_user_facing_error(error)
    assert facing.message == "Bunday telefon mavjud"
    assert facing.technical_details == "REQUEST_REJECTED (HTTP 422): {'phone': ['taken']}"


def test_validation_lists_first_issue() -> None:
    error = ClientValidationError.from_issues([ValidationIssue(field="name", reason="name must not be empty")])
    assert to_user_facing_error(error).message.endswith("name: name must not be empty")
