"""
Incremental feed synchronization.

The server keeps the read position of each feed: every GET on a feed
endpoint returns the next page and advances the position. The drainer holds
no cursor of its own; it re-requests the same URL until a page comes back
empty, handing every entry to the caller's handler in order before moving on.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Tuple

from .classifier import classify
from ..codec.decoder import require
from ..codec.encoder import to_query_string
from ..models.responses import Invoice
from ..runtime.errors import error_from_response
from ..transport.base import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedResource:
    """
    A drainable feed endpoint.

    Attributes:
        path: Endpoint path relative to the API base URL
        array_field: Name of the array holding the page entries
        convert: Turns one raw entry into the value handed to the handler
    """
    path: str
    array_field: str
    convert: Callable[[Any], Any]


MANDATE_FEED = FeedResource("/mandate", "Messages", classify)
INVOICE_FEED = FeedResource("/invoice", "Invoices", Invoice.from_json)


class FeedDrainer:
    """
    Drains feed endpoints page by page.

    Args:
        transport: Transport used for the page requests
        base_url: API base URL the feed paths are relative to
    """

    def __init__(self, transport: Transport, base_url: str):
        self.transport = transport
        self.base_url = base_url.rstrip("/")

    def feed_url(self, feed: FeedResource, sideloads: Iterable[str] = ()) -> str:
        url = f"{self.base_url}{feed.path}"
        includes: List[Tuple[str, str]] = [("include", sideload) for sideload in sideloads]
        if includes:
            url = f"{url}?{to_query_string(includes)}"
        return url

    def drain(self, feed: FeedResource, handler: Callable[[Any], Any], sideloads: Iterable[str] = ()) -> int:
        """
        Deliver every pending event of a feed to ``handler``.

        Args:
            feed: Feed to drain
            handler: Called once per event, in server order
            sideloads: Extra sections to include with every entry

        Returns:
            Number of events delivered

        Raises:
            UpstreamError: If a page request does not return 200; events
                delivered before the failure stay delivered
            DecodeError: If a page or an entry is malformed
            TransportError: If a page request fails to complete
        """
        url = self.feed_url(feed, sideloads)
        delivered = 0
        while True:
            response = self.transport.send("GET", url)
            if response.status != 200:
                raise error_from_response(response)

            entries = require(response.json(), feed.array_field, list)
            logger.debug(f"{feed.path} page: {len(entries)} entries")
            if not entries:
                return delivered

            for entry in entries:
                handler(feed.convert(entry))
                delivered += 1


__all__ = [
    "FeedResource",
    "MANDATE_FEED",
    "INVOICE_FEED",
    "FeedDrainer",
]
