from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping

from ..envelope import expect_list, expect_object, expect_page, expect_success
from ..exceptions import ClientValidationError, LocalStorageError, ValidationIssue
from ..image_utils import storage_url
from ..models import PaginatedResult
from ..models_clients import Client, ClientOption, ClientRequest, ImageUploadResult
from ..validation import validate_client_request
from .base import BaseClient, captured


@dataclass
class ClientsClient(BaseClient):
    storage_base_url: str = ""

    entity = "client"

    @captured("clients_list")
    def list(
        self,
        page: int = 1,
        search: str | None = None,
        branch_id: int | None = None,
    ) -> PaginatedResult[Client]:
        if page < 1:
            raise ClientValidationError.from_issues([ValidationIssue(field="page", reason="page must be >= 1")])
        payload = {"client_name": search or "", "branch_id": branch_id}
        data = self._request(
            "POST",
            "clients",
            json_body=payload,
            params={"page": page},
            operation="clients_list",
        )
        return expect_page(data, Client)

    @captured("clients_option_list")
    def option_list(self, search: str | None = None) -> List[ClientOption]:
        payload = {"client_name": search or ""}
        data = self._request("POST", "client/option/lists", json_body=payload, operation="clients_option_list")
        return expect_list(data, ClientOption)

    @captured("client_get")
    def get_by_id(self, client_id: int) -> Client:
        data = self._request("GET", f"client/{client_id}", key=client_id, operation="client_get")
        return expect_object(data, Client)

    @captured("client_create")
    def create(self, request: ClientRequest | Mapping[str, Any]) -> bool:
        payload = validate_client_request(request)
        data = self._request("POST", "client", json_body=payload.to_wire(), operation="client_create")
        return expect_success(data)

    @captured("client_update")
    def update(self, client_id: int, request: ClientRequest | Mapping[str, Any]) -> bool:
        payload = validate_client_request(request)
        data = self._request(
            "PUT",
            f"client/{client_id}",
            json_body=payload.to_wire(),
            key=client_id,
            operation="client_update",
        )
        return expect_success(data)

    @captured("client_delete")
    def delete(self, client_id: int) -> bool:
        data = self._request("DELETE", f"client/delete/{client_id}", key=client_id, operation="client_delete")
        return expect_success(data)

    @captured("client_image_upload")
    def upload_image(self, file_path: str | Path) -> str:
        """Upload a photo or passport scan; returns its server-relative path."""
        path = Path(file_path)
        if not path.is_file():
            raise ClientValidationError.from_issues(
                [ValidationIssue(field="file_path", reason=f"file not found: {path.name}")]
            )
        try:
            handle = path.open("rb")
        except OSError as exc:
            raise LocalStorageError(
                code="FILE_NOT_READABLE",
                message=f"Could not read {path.name}: {exc.strerror or exc}",
                details={"type": type(exc).__name__},
            ) from exc
        with handle:
            data = self._request(
                "POST",
                "client/image/store",
                files={"file": (path.name, handle, "application/octet-stream")},
                operation="client_image_upload",
            )
        return expect_object(data, ImageUploadResult).image_path

    @captured("client_image_delete")
    def delete_image(self, image_path: str) -> bool:
        data = self._request(
            "DELETE",
            "client/image/delete",
            params={"file": image_path},
            operation="client_image_delete",
        )
        return expect_success(data)

    def image_url(self, image_path: str | None) -> str | None:
        return storage_url(self.storage_base_url, image_path)
