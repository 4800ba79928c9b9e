"""
Twikey Python client

Mandate and invoice gateways for the Twikey API, with incremental feed
synchronization and a sparse request encoder.
"""

__version__ = "0.1.0"

from .runtime.errors import *
from .codec import EncodeMode, encode, extend_payload, to_form_body, to_json_body, to_query_string
from .config import ClientConfig, PRODUCTION_ENDPOINT, TEST_ENDPOINT
from .transport import HttpResponse, Transport, RequestsTransport
from .models import *
from .feed import *
from .gateways import DocumentGateway, DocumentFeedHandler, InvoiceGateway
from .client import TwikeyClient

from . import runtime, models, feed

__all__ = [
    "__version__",
    "TwikeyClient",
    "ClientConfig",
    "PRODUCTION_ENDPOINT",
    "TEST_ENDPOINT",
    "HttpResponse",
    "Transport",
    "RequestsTransport",
    "DocumentGateway",
    "DocumentFeedHandler",
    "InvoiceGateway",
    "EncodeMode",
    "encode",
    "extend_payload",
    "to_form_body",
    "to_json_body",
    "to_query_string",
] + runtime.__all__ + models.__all__ + feed.__all__
