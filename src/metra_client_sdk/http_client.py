from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import is_markup, map_error
from .exceptions import EnvelopeMalformedError, ServerMisconfiguredError, TransportError

logger = logging.getLogger(__name__)

_PREVIEW_CHARS = 200


@dataclass
class LastOperation:
    operation: str
    method: str
    status_code: int
    duration_ms: int
    result: str


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        operation: str = "unknown",
    ) -> Any:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)

        normalized_method = method.upper()
        url = self._build_url(path)
        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=params,
                files=files,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record(operation, normalized_method, 0, started, "transport_error")
            raise TransportError(
                code="TRANSPORT_ERROR",
                message=str(exc) or "Could not reach the server",
                details={"type": type(exc).__name__},
            ) from exc

        status = response.status_code
        if not response.ok:
            self._record(operation, normalized_method, status, started, "http_error")
            raise map_error(status, response.text, response.reason)

        body = response.text
        if is_markup(body):
            self._record(operation, normalized_method, status, started, "markup")
            logger.error(
                "markup_response",
                extra={"operation": operation, "url": url, "preview": body[:_PREVIEW_CHARS]},
            )
            raise ServerMisconfiguredError(
                code="SERVER_MISCONFIGURED",
                message="Server returned HTML instead of JSON; check the API base URL",
                status_code=status,
                reason=response.reason,
            )
        if not body.strip():
            self._record(operation, normalized_method, status, started, "empty")
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError as exc:
            self._record(operation, normalized_method, status, started, "invalid_json")
            raise EnvelopeMalformedError(
                code="INVALID_JSON",
                message="Server response is not valid JSON",
                status_code=status,
                raw_payload=body[:_PREVIEW_CHARS],
            ) from exc
        self._record(operation, normalized_method, status, started, "success")
        return parsed

    def _record(self, operation: str, method: str, status_code: int, started: float, result: str) -> None:
        self.last_operation = LastOperation(
            operation=operation,
            method=method,
            status_code=status_code,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
        )
        logger.info(
            "http_request",
            extra={
                "operation": operation,
                "method": method,
                "status": status_code,
                "duration_ms": self.last_operation.duration_ms,
                "result": result,
            },
        )
