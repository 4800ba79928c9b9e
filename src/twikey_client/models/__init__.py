"""
Request records and decoded response objects.
"""

from .base import WireRecord
from .document import (
    ACCEPTED_LANGUAGES,
    SignMethod,
    MandateActionType,
    Account,
    Customer,
    Subscription,
    MandateFields,
    InviteRequest,
    SignRequest,
    MandateActionRequest,
    MandateQuery,
    MandateDetailRequest,
    UpdateMandateRequest,
    UploadPdfRequest,
)
from .invoice import (
    InvoiceActionType,
    LineItem,
    CreateInvoiceRequest,
    UpdateInvoiceRequest,
    InvoiceDetailRequest,
    InvoiceActionRequest,
    UblUploadRequest,
    BulkInvoiceRequest,
)
from .responses import (
    STATE_HEADER,
    Document,
    MandateCreationResponse,
    CustomerAccessResponse,
    PdfResponse,
    Invoice,
    BatchStatus,
)

__all__ = [
    "WireRecord",
    "ACCEPTED_LANGUAGES",
    "SignMethod",
    "MandateActionType",
    "Account",
    "Customer",
    "Subscription",
    "MandateFields",
    "InviteRequest",
    "SignRequest",
    "MandateActionRequest",
    "MandateQuery",
    "MandateDetailRequest",
    "UpdateMandateRequest",
    "UploadPdfRequest",
    "InvoiceActionType",
    "LineItem",
    "CreateInvoiceRequest",
    "UpdateInvoiceRequest",
    "InvoiceDetailRequest",
    "InvoiceActionRequest",
    "UblUploadRequest",
    "BulkInvoiceRequest",
    "STATE_HEADER",
    "Document",
    "MandateCreationResponse",
    "CustomerAccessResponse",
    "PdfResponse",
    "Invoice",
    "BatchStatus",
]
