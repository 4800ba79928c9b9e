"""
Transport layer for the Twikey client.
"""

from .base import HttpResponse, RequestBody, Transport
from .http import RequestsTransport

__all__ = [
    "HttpResponse",
    "RequestBody",
    "Transport",
    "RequestsTransport",
]
