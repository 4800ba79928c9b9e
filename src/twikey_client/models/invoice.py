"""
Invoice request records.

Invoice endpoints take JSON bodies, so the customer travels as a nested
object and invoice lines as an array. The action endpoint is the exception
and takes a form body.
"""

from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import Field

from .base import WireRecord
from .document import Customer
from ..codec.encoder import default_encoder
from ..codec.fields import (
    BooleanField,
    DecimalField,
    EncodeMode,
    IntegerField,
    NestedField,
    RecordListField,
    StringField,
)


class InvoiceActionType(str, Enum):
    """Actions that can be triggered on an existing invoice."""

    EMAIL = "email"
    SMS = "sms"
    REMINDER = "reminder"
    LETTER = "letter"
    REOFFER = "reoffer"
    PAYMENT_PLAN = "paymentplan"


class LineItem(WireRecord):
    """One line of an invoice."""
    code: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = None
    uom: Optional[str] = None
    unitprice: Optional[float] = Field(default=None, allow_inf_nan=False)
    vatcode: Optional[str] = None
    vatsum: Optional[float] = Field(default=None, allow_inf_nan=False)

    WIRE_FIELDS = (
        StringField("code"),
        StringField("description"),
        IntegerField("quantity"),
        StringField("uom"),
        DecimalField("unitprice"),
        StringField("vatcode"),
        DecimalField("vatsum"),
    )


class CreateInvoiceRequest(WireRecord):
    """
    Create an invoice.

    Args:
        number: Invoice number, unique per creditor
        amount: Total amount
        date: Invoice date (YYYY-MM-DD)
        duedate: Due date (YYYY-MM-DD)
        customer: Customer the invoice is for
        lines: Invoice lines
    """
    number: str
    amount: float = Field(allow_inf_nan=False)
    date: str
    duedate: str
    customer: Optional[Customer] = None
    id: Optional[str] = None
    title: Optional[str] = None
    remittance: Optional[str] = None
    ref: Optional[str] = None
    ct: Optional[int] = None
    locale: Optional[str] = None
    manual: Optional[bool] = None
    pdf: Optional[str] = None
    pdf_url: Optional[str] = None
    redirect_url: Optional[str] = None
    email: Optional[str] = None
    related_invoice_number: Optional[str] = None
    cc: Optional[str] = None
    lines: Optional[List[LineItem]] = None

    WIRE_FIELDS = (
        StringField("id"),
        StringField("number"),
        StringField("title"),
        StringField("remittance"),
        StringField("ref"),
        IntegerField("ct"),
        DecimalField("amount"),
        StringField("date"),
        StringField("duedate"),
        StringField("locale"),
        BooleanField("manual"),
        StringField("pdf"),
        StringField("pdf_url", "pdfUrl"),
        StringField("redirect_url", "redirectUrl"),
        StringField("email"),
        StringField("related_invoice_number", "relatedInvoiceNumber"),
        StringField("cc"),
        NestedField("customer"),
        RecordListField("lines"),
    )


class UpdateInvoiceRequest(WireRecord):
    """
    Update an existing invoice.

    ``invoice_id`` addresses the invoice in the URL and is not part of the
    body.
    """
    invoice_id: str
    date: Optional[str] = None
    duedate: Optional[str] = None
    title: Optional[str] = None
    ref: Optional[str] = None
    remittance: Optional[str] = None
    status: Optional[str] = None
    pdf: Optional[str] = None
    manual: Optional[bool] = None

    WIRE_FIELDS = (
        StringField("date"),
        StringField("duedate"),
        StringField("title"),
        StringField("ref"),
        StringField("remittance"),
        StringField("status"),
        StringField("pdf"),
        BooleanField("manual"),
    )


class InvoiceDetailRequest(WireRecord):
    """Fetch one invoice, optionally with sideloaded customer, meta and last payment."""
    invoice_id: str
    include_customer: bool = False
    include_meta: bool = False
    include_last_payment: bool = False

    def to_query(self) -> List[Tuple[str, str]]:
        includes = []
        if self.include_customer:
            includes.append(("include", "customer"))
        if self.include_meta:
            includes.append(("include", "meta"))
        if self.include_last_payment:
            includes.append(("include", "lastpayment"))
        return includes


class InvoiceActionRequest(WireRecord):
    """
    Trigger an action on an invoice.

    Payment plans carry the extra plan parameters; build them with
    ``payment_plan``.
    """
    invoice_id: str
    type: InvoiceActionType
    down_payment: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    instalment_amount: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False)
    instalments: Optional[int] = Field(default=None, ge=1)
    mandate_number: Optional[str] = None

    WIRE_FIELDS = (
        StringField("type"),
        DecimalField("down_payment", "downPayment"),
        DecimalField("instalment_amount", "instalmentAmount"),
        IntegerField("instalments"),
        StringField("mandate_number", "mndtId"),
    )

    @classmethod
    def payment_plan(cls, invoice_id: str, down_payment: float, instalment_amount: float,
                     instalments: int, mandate_number: Optional[str] = None) -> InvoiceActionRequest:
        return cls(
            invoice_id=invoice_id,
            type=InvoiceActionType.PAYMENT_PLAN,
            down_payment=down_payment,
            instalment_amount=instalment_amount,
            instalments=instalments,
            mandate_number=mandate_number,
        )


class UblUploadRequest(WireRecord):
    """Upload a UBL document; metadata travels as request headers."""
    xml_path: Union[str, Path]
    invoice_id: Optional[str] = None
    manual: Optional[bool] = None

    WIRE_FIELDS = (
        StringField("invoice_id", "X-INVOICE-ID"),
        BooleanField("manual", "X-MANUAL"),
    )

    def to_headers(self) -> Dict[str, str]:
        return self.to_dict(EncodeMode.FORM)


class BulkInvoiceRequest(WireRecord):
    """Several invoices created in one batch."""
    invoices: List[CreateInvoiceRequest] = Field(min_length=1)

    def to_payload(self) -> List[Dict[str, Any]]:
        return default_encoder.encode_many(self.invoices, EncodeMode.JSON)


__all__ = [
    "InvoiceActionType",
    "LineItem",
    "CreateInvoiceRequest",
    "UpdateInvoiceRequest",
    "InvoiceDetailRequest",
    "InvoiceActionRequest",
    "UblUploadRequest",
    "BulkInvoiceRequest",
]
