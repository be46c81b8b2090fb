from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from ..envelope import expect_list, expect_object, expect_success
from ..models_invoices import Invoice, InvoiceCreateRequest, InvoiceMaterial, InvoiceUpdateRequest
from ..validation import validate_invoice_request
from .base import BaseClient, captured


@dataclass
class InvoicesClient(BaseClient):
    """Return invoices ("faktura-return") and their soft-delete lifecycle.

    ``delete`` marks an invoice deleted, ``restore`` brings it back and
    ``force_delete`` purges it for good.
    """

    entity = "invoice"

    @captured("invoice_materials")
    def list_materials(self, rent_id: int) -> List[InvoiceMaterial]:
        data = self._request(
            "GET",
            f"faktura-return/show/materials/{rent_id}",
            key=rent_id,
            operation="invoice_materials",
        )
        return expect_list(data, InvoiceMaterial)

    @captured("invoice_get")
    def get_by_id(self, invoice_id: int) -> Invoice:
        data = self._request("GET", f"faktura-return/{invoice_id}", key=invoice_id, operation="invoice_get")
        return expect_object(data, Invoice)

    @captured("invoice_create")
    def create(self, request: InvoiceCreateRequest | Mapping[str, Any]) -> Invoice:
        payload = validate_invoice_request(request, InvoiceCreateRequest)
        data = self._request("POST", "faktura-return", json_body=payload.to_wire(), operation="invoice_create")
        return expect_object(data, Invoice)

    @captured("invoice_update")
    def update(self, invoice_id: int, request: InvoiceUpdateRequest | Mapping[str, Any]) -> Invoice:
        payload = validate_invoice_request(request, InvoiceUpdateRequest)
        data = self._request(
            "PUT",
            f"faktura-return/{invoice_id}",
            json_body=payload.to_wire(invoice_id),
            key=invoice_id,
            operation="invoice_update",
        )
        return expect_object(data, Invoice)

    @captured("invoice_delete")
    def delete(self, invoice_id: int) -> bool:
        return self._lifecycle("DELETE", "delete", invoice_id, "invoice_delete")

    @captured("invoice_force_delete")
    def force_delete(self, invoice_id: int) -> bool:
        return self._lifecycle("DELETE", "force-delete", invoice_id, "invoice_force_delete")

    @captured("invoice_restore")
    def restore(self, invoice_id: int) -> bool:
        return self._lifecycle("GET", "restore", invoice_id, "invoice_restore")

    def _lifecycle(self, method: str, action: str, invoice_id: int, operation: str) -> bool:
        data = self._request(method, f"faktura-return/{action}/{invoice_id}", key=invoice_id, operation=operation)
        return expect_success(data)
