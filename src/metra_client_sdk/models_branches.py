from __future__ import annotations

from enum import Enum

from pydantic import Field

from .models import RequestModel, WireModel


class BranchType(str, Enum):
    MAIN = "main"
    GENERAL = "general"
    BRANCH = "branch"
    WAREHOUSE = "warehouse"
    STORE = "store"


BRANCH_TYPE_LABELS = {
    BranchType.MAIN.value: "Asosiy",
    BranchType.GENERAL.value: "Asosiy ombor",
    BranchType.BRANCH.value: "Filial",
    BranchType.WAREHOUSE.value: "Ombor",
    BranchType.STORE.value: "Ombor",
}


def branch_type_label(value: str | None) -> str:
    if not value:
        return ""
    return BRANCH_TYPE_LABELS.get(value, value)


class Branch(WireModel):
    id: int
    name: str
    description: str | None = None
    # Kept as the raw server string: unknown types are shown verbatim.
    type: str = ""
    responsible_worker: str | None = None
    created_date: str | None = Field(default=None, alias="date")
    updated_at: str | None = None

    @property
    def type_display(self) -> str:
        return branch_type_label(self.type)


class BranchRequest(RequestModel):
    name: str
    description: str | None = None
    type: str = BranchType.BRANCH.value
