from __future__ import annotations

import logging
from dataclasses import dataclass

from ..envelope import expect_object, unwrap_object
from ..exceptions import (
    ApiError,
    EnvelopeMalformedError,
    InvalidCredentialsError,
    LocalStorageError,
    ServerMisconfiguredError,
    TransportError,
    UnauthenticatedError,
)
from ..log import mask_phone
from ..models import LoginResult, UserInfo
from ..validation import validate_login
from .base import BaseClient, captured

logger = logging.getLogger(__name__)


@dataclass
class AuthClient(BaseClient):
    country_code: str = "998"

    entity = "user"

    @captured("auth_login")
    def login(self, phone: str, password: str) -> LoginResult:
        normalized = validate_login(phone, password, self.country_code)
        logger.info("auth_login_attempt", extra={"phone": mask_phone(normalized)})
        payload = {"phone": normalized, "password": password}
        try:
            data = self._request(
                "POST", "auth/login", authenticated=False, json_body=payload, operation="auth_login"
            )
        except UnauthenticatedError as exc:
            raise InvalidCredentialsError(
                code="INVALID_CREDENTIALS",
                message="Invalid phone number or password",
                status_code=exc.status_code,
                reason=exc.reason,
            ) from exc
        result = expect_object(data, LoginResult)
        try:
            self.token_store.set_token(result.token)
        except OSError as exc:
            raise LocalStorageError(
                code="TOKEN_NOT_SAVED",
                message=f"Could not save the login token: {exc.strerror or exc}",
                details={"type": type(exc).__name__},
            ) from exc
        return result

    def logout(self) -> None:
        """Forget the token locally. Safe to call when already logged out."""
        try:
            self.token_store.clear_token()
        except OSError:
            logger.warning("auth_logout_persist_failed", exc_info=True)
        logger.info("auth_logout")

    @captured("auth_current_user")
    def get_current_user(self) -> UserInfo | None:
        if not self.token_store.get_token():
            return None
        try:
            data = self._request("GET", "auth/user", operation="auth_current_user")
        except (TransportError, ServerMisconfiguredError, EnvelopeMalformedError):
            raise
        except ApiError as exc:
            # Any rejected status reads as "not logged in".
            logger.info(
                "auth_current_user_rejected",
                extra={"status": exc.status_code, "error_kind": exc.kind.value},
            )
            return None
        return unwrap_object(data, UserInfo)

    def is_authenticated(self) -> bool:
        return self.token_store.has_token()

