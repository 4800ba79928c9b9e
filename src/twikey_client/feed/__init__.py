"""
Mandate and invoice feed draining.
"""

from .events import (
    EventKind,
    DocumentCreated,
    DocumentUpdated,
    DocumentCancelled,
    FeedEvent,
)
from .classifier import classify
from .drainer import FeedResource, FeedDrainer, MANDATE_FEED, INVOICE_FEED

__all__ = [
    "EventKind",
    "DocumentCreated",
    "DocumentUpdated",
    "DocumentCancelled",
    "FeedEvent",
    "classify",
    "FeedResource",
    "FeedDrainer",
    "MANDATE_FEED",
    "INVOICE_FEED",
]
