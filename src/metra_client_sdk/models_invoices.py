from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import Field

from .models import LenientDecimal, RequestModel, WireDecimal, WireModel


class InvoiceDetail(WireModel):
    id: int | None = None
    material_id: int
    material_name: str = ""
    unit_name: str = ""
    count: int = Field(default=0, ge=0)
    rent_price: LenientDecimal = Field(default=None, alias="material_rent_price")
    period: str | None = None
    sum: LenientDecimal = Field(default=None, alias="summa")


class InvoiceFine(WireModel):
    id: int | None = None
    sum: Decimal = Field(alias="summa")
    description: str = ""


class InvoiceMaterial(WireModel):
    """Material line of a rent that can be returned on an invoice."""

    id: int
    material_id: int
    material_name: str = ""
    unit_name: str = ""
    count: int = 0
    price: LenientDecimal = None
    period: str | None = None


class Invoice(WireModel):
    id: int
    branch_id: int
    branch_name: str = ""
    client_id: int
    client_name: str = ""
    rent_id: int
    rent_number: str = ""
    faktura_number: str = ""
    payment_status: str = ""
    responsible_worker: str = ""
    description: str | None = None
    discount_amount: LenientDecimal = Field(default=None, alias="skidka_summa")
    discount_description: str | None = Field(default=None, alias="skidka_description")
    date: str = ""
    rent_date: str = ""
    deleted_at: str | None = None
    details: List[InvoiceDetail] = Field(default_factory=list)
    fines: List[InvoiceFine] = Field(default_factory=list)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


class InvoiceDetailRequest(RequestModel):
    id: int | None = None
    material_id: int
    material_name: str = ""
    unit_name: str = ""
    count: int
    period: str | None = None
    sum: WireDecimal | None = Field(default=None, serialization_alias="summa")
    rent_price: WireDecimal | None = Field(default=None, serialization_alias="material_rent_price")


class InvoiceFineRequest(RequestModel):
    id: int | None = None
    sum: WireDecimal = Field(serialization_alias="summa")
    description: str = ""


class InvoiceCreateRequest(RequestModel):
    branch_id: int
    client_id: int
    rent_id: int
    description: str | None = None
    discount_amount: WireDecimal | None = Field(default=None, serialization_alias="skidka_summa")
    discount_description: str | None = Field(default=None, serialization_alias="skidka_description")
    details: List[InvoiceDetailRequest] = Field(default_factory=list)
    fines: List[InvoiceFineRequest] = Field(default_factory=list)

    def to_wire(self) -> dict:
        body = self.model_dump(
            mode="json",
            by_alias=True,
            include={"rent_id", "description", "discount_amount", "discount_description"},
        )
        body["branch_id"] = str(self.branch_id)
        body["client_id"] = str(self.client_id)
        body["details"] = [
            detail.model_dump(
                mode="json",
                by_alias=True,
                include={"material_id", "count", "period", "sum", "rent_price"},
            )
            for detail in self.details
        ]
        body["fines"] = [
            {**fine.model_dump(mode="json", by_alias=True, include={"sum", "description"}), "id": None}
            for fine in self.fines
        ]
        return body


class InvoiceUpdateRequest(RequestModel):
    branch_id: int
    branch_name: str = ""
    client_id: int
    client_name: str = ""
    date: str = ""
    rent_date: str = ""
    rent_id: int
    rent_number: str = ""
    faktura_number: str = ""
    payment_status: str = ""
    responsible_worker: str = ""
    description: str | None = None
    discount_amount: WireDecimal | None = Field(default=None, serialization_alias="skidka_summa")
    discount_description: str | None = Field(default=None, serialization_alias="skidka_description")
    deleted_at: str | None = None
    delete_list: List[int] = Field(default_factory=list)
    details: List[InvoiceDetailRequest] = Field(default_factory=list)
    fines: List[InvoiceFineRequest] = Field(default_factory=list)

    def to_wire(self, invoice_id: int) -> dict:
        return {"id": invoice_id, **self.model_dump(mode="json", by_alias=True)}
