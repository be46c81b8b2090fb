from __future__ import annotations

import functools
import logging
import time
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, TypeVar

from ..exceptions import ApiError, NotFoundError, UnauthenticatedError
from ..http_client import HttpClient
from ..result import ApiResult
from ..token_store import TokenStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def captured(operation: str) -> Callable[[Callable[..., T]], Callable[..., ApiResult[T]]]:
    """Run a client operation and return its outcome as an ``ApiResult``."""

    def decorator(func: Callable[..., T]) -> Callable[..., ApiResult[T]]:
        @functools.wraps(func)
        def wrapper(self: BaseClient, *args: Any, **kwargs: Any) -> ApiResult[T]:
            started = time.monotonic()
            try:
                value = func(self, *args, **kwargs)
            except ApiError as exc:
                logger.warning(
                    operation,
                    extra={
                        "operation": operation,
                        "error_kind": exc.kind.value,
                        "code": exc.code,
                        "status": exc.status_code,
                        "duration_ms": _elapsed_ms(started),
                    },
                )
                return ApiResult.failure(exc)
            logger.info(operation, extra={"operation": operation, "duration_ms": _elapsed_ms(started)})
            return ApiResult.success(value)

        return wrapper

    return decorator


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


@dataclass
class BaseClient:
    http: HttpClient
    token_store: TokenStore

    entity: ClassVar[str] = "resource"

    def _auth_headers(self) -> dict[str, str]:
        # Read on every call: a login or logout elsewhere applies to the next request.
        token = self.token_store.get_token()
        if not token:
            raise UnauthenticatedError(code="NOT_AUTHENTICATED", message="Login required")
        return {"Authorization": f"Bearer {token}"}

    def _request(
        self,
        method: str,
        path: str,
        *,
        authenticated: bool = True,
        key: object | None = None,
        operation: str = "unknown",
        **kwargs: Any,
    ) -> Any:
        headers = kwargs.pop("headers", {})
        if authenticated:
            headers = {**self._auth_headers(), **headers}
        try:
            data = self.http.request(method, path, headers=headers, operation=operation, **kwargs)
        except UnauthenticatedError:
            self.token_store.mark_unauthenticated()
            raise
        except NotFoundError as exc:
            if key is None:
                raise
            raise replace(
                exc,
                entity=self.entity,
                key=key,
                message=f"{self.entity.capitalize()} {key} not found",
            ) from exc
        if authenticated:
            self.token_store.mark_authenticated()
        return data
