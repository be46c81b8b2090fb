from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from ..envelope import expect_list, expect_object, expect_success
from ..models_branches import Branch, BranchRequest
from ..validation import validate_branch_request
from .base import BaseClient, captured


@dataclass
class BranchesClient(BaseClient):
    entity = "branch"

    @captured("branches_list")
    def list(self, search: str | None = None) -> List[Branch]:
        payload = {"branch_name": search or ""}
        data = self._request("POST", "branches", json_body=payload, operation="branches_list")
        return expect_list(data, Branch)

    @captured("branch_get")
    def get_by_id(self, branch_id: int) -> Branch:
        data = self._request("GET", f"branches/{branch_id}", key=branch_id, operation="branch_get")
        return expect_object(data, Branch)

    @captured("branch_id_by_name")
    def get_id_by_name(self, name: str) -> int | None:
        """Id of the branch named exactly ``name`` (case-insensitive), or None.

        The server filter matches substrings, so the match is re-checked here.
        """
        wanted = name.casefold()
        for branch in self.list(name).unwrap():
            if branch.name.casefold() == wanted:
                return branch.id
        return None

    @captured("branch_create")
    def create(self, request: BranchRequest | Mapping[str, Any]) -> bool:
        payload = validate_branch_request(request)
        data = self._request("POST", "branch", json_body=payload.model_dump(mode="json"), operation="branch_create")
        return expect_success(data)

    @captured("branch_update")
    def update(self, branch_id: int, request: BranchRequest | Mapping[str, Any]) -> bool:
        payload = validate_branch_request(request)
        data = self._request(
            "PUT",
            f"branch/{branch_id}",
            json_body=payload.model_dump(mode="json"),
            key=branch_id,
            operation="branch_update",
        )
        return expect_success(data)

    @captured("branch_delete")
    def delete(self, branch_id: int) -> bool:
        data = self._request("DELETE", f"branch/delete/{branch_id}", key=branch_id, operation="branch_delete")
        return expect_success(data)
