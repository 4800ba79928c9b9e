"""
Endpoint gateways.
"""

from .base import Gateway, FORM_URLENCODED, APPLICATION_JSON
from .document import DocumentGateway, DocumentFeedHandler
from .invoice import InvoiceGateway

__all__ = [
    "Gateway",
    "FORM_URLENCODED",
    "APPLICATION_JSON",
    "DocumentGateway",
    "DocumentFeedHandler",
    "InvoiceGateway",
]
