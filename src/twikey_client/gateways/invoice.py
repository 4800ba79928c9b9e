"""
Invoice endpoints.
"""

from __future__ import annotations
from typing import Any, Callable
from urllib.parse import quote

from .base import Gateway
from ..codec.fields import EncodeMode
from ..feed.drainer import INVOICE_FEED, FeedDrainer
from ..models.invoice import (
    BulkInvoiceRequest,
    CreateInvoiceRequest,
    InvoiceActionRequest,
    InvoiceDetailRequest,
    UblUploadRequest,
    UpdateInvoiceRequest,
)
from ..models.responses import BatchStatus, Invoice


def _invoice_path(invoice_id: str) -> str:
    return f"/invoice/{quote(invoice_id, safe='')}"


class InvoiceGateway(Gateway):
    """
    Gateway for invoice endpoints.

    Example:
        ```python
        invoice = gateway.create(CreateInvoiceRequest(
            number="INV-1", amount=100.0, date="2024-01-01", duedate="2024-02-01",
            customer=Customer(customer_number="C-1"),
        ))
        ```
    """

    def create(self, request: CreateInvoiceRequest) -> Invoice:
        response = self._call("POST", "/invoice", payload=request.to_dict(EncodeMode.JSON), mode=EncodeMode.JSON)
        return Invoice.from_json(response.json())

    def update(self, request: UpdateInvoiceRequest) -> Invoice:
        response = self._call(
            "PUT",
            _invoice_path(request.invoice_id),
            payload=request.to_dict(EncodeMode.JSON),
            mode=EncodeMode.JSON,
        )
        return Invoice.from_json(response.json())

    def delete(self, invoice_id: str) -> None:
        self._call("DELETE", _invoice_path(invoice_id), expect=204)

    def details(self, request: InvoiceDetailRequest) -> Invoice:
        """Fetch one invoice with the requested sideloads."""
        response = self._call("GET", _invoice_path(request.invoice_id), query=request.to_query())
        return Invoice.from_json(response.json())

    def action(self, request: InvoiceActionRequest) -> None:
        """Trigger an action (reminder, payment plan, ...) on an invoice."""
        self._call(
            "POST",
            f"{_invoice_path(request.invoice_id)}/action",
            payload=request.to_dict(EncodeMode.FORM),
            expect=204,
        )

    def upload_ubl(self, request: UblUploadRequest) -> Invoice:
        """Create an invoice from a UBL file, streaming the file as the body."""
        headers = {"Content-Type": "application/xml"}
        headers.update(request.to_headers())
        with open(request.xml_path, "rb") as xml:
            response = self._call("POST", "/invoice/ubl", body=xml, headers=headers)
        return Invoice.from_json(response.json())

    def create_batch(self, request: BulkInvoiceRequest) -> BatchStatus:
        """Create several invoices in one asynchronous batch."""
        response = self._call("POST", "/invoice/bulk", payload=request.to_payload(), mode=EncodeMode.JSON)
        return BatchStatus.from_json(response.json())

    def batch_details(self, batch_id: str) -> BatchStatus:
        response = self._call("GET", "/invoice/bulk", query={"batchId": batch_id})
        return BatchStatus.from_json(response.json())

    def feed(self, handler: Callable[[Invoice], Any], *sideloads: str) -> int:
        """
        Drain the invoice feed, handing one decoded Invoice per call.

        Returns:
            Number of invoices delivered
        """
        return FeedDrainer(self.transport, self.base_url).drain(INVOICE_FEED, handler, sideloads)


__all__ = ["InvoiceGateway"]
