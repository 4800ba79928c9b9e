from .mocks import FakeTransport, RecordedRequest, json_response, feed_page
from .factories import mk_mandate, mk_created, mk_updated, mk_cancelled, mk_invoice

__all__ = [
    "FakeTransport",
    "RecordedRequest",
    "json_response",
    "feed_page",
    "mk_mandate",
    "mk_created",
    "mk_updated",
    "mk_cancelled",
    "mk_invoice",
]
