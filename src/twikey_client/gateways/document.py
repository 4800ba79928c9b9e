"""
Mandate (document) endpoints.
"""

from __future__ import annotations
from typing import Any, Callable, List
from urllib.parse import quote

from .base import Gateway
from ..codec.fields import format_bool
from ..feed.drainer import MANDATE_FEED, FeedDrainer
from ..feed.events import (
    DocumentCancelled,
    DocumentCreated,
    DocumentUpdated,
    EventKind,
    FeedEvent,
)
from ..models.document import (
    InviteRequest,
    MandateActionRequest,
    MandateDetailRequest,
    MandateQuery,
    SignRequest,
    UpdateMandateRequest,
    UploadPdfRequest,
)
from ..models.responses import (
    STATE_HEADER,
    CustomerAccessResponse,
    Document,
    MandateCreationResponse,
    PdfResponse,
)


class DocumentFeedHandler:
    """
    Callback object for the mandate feed.

    Pass an instance as the feed handler and override the hooks of interest;
    each classified event is routed to the matching hook.

    Example:
        ```python
        class Printer(DocumentFeedHandler):
            def new_document(self, event):
                print("new", event.document.mandate_number)

        client.document.feed(Printer())
        ```
    """

    def new_document(self, event: DocumentCreated) -> None:
        pass

    def updated_document(self, event: DocumentUpdated) -> None:
        pass

    def cancelled_document(self, event: DocumentCancelled) -> None:
        pass

    def __call__(self, event: FeedEvent) -> None:
        if event.kind is EventKind.CANCELLED:
            self.cancelled_document(event)
        elif event.kind is EventKind.UPDATED:
            self.updated_document(event)
        else:
            self.new_document(event)


class DocumentGateway(Gateway):
    """
    Gateway for mandate endpoints.

    Example:
        ```python
        gateway = DocumentGateway(transport, "https://api.twikey.com/creditor")
        result = gateway.invite(InviteRequest(ct=1988, customer=customer))
        print(result.url)
        ```
    """

    def invite(self, request: InviteRequest) -> MandateCreationResponse:
        """Prepare a mandate and get the invitation url."""
        response = self._call("POST", "/invite", payload=request.to_dict())
        return MandateCreationResponse.from_json(response.json())

    def sign(self, request: SignRequest) -> MandateCreationResponse:
        """Create and sign a mandate in one call."""
        response = self._call("POST", "/sign", payload=request.to_dict())
        return MandateCreationResponse.from_json(response.json())

    def action(self, request: MandateActionRequest) -> None:
        """Trigger an action on a mandate."""
        path = f"/mandate/{quote(request.mandate_number, safe='')}/action"
        self._call("POST", path, payload=request.to_dict(), expect=204)

    def query(self, request: MandateQuery) -> List[Document]:
        """Search mandates."""
        response = self._call("GET", "/mandate/query", query=request.to_dict())
        return Document.from_query(response.json())

    def cancel(self, mandate_number: str, reason: str, notify: bool = False) -> None:
        """
        Cancel a mandate.

        Args:
            mandate_number: Mandate to cancel
            reason: Cancellation reason
            notify: Notify the customer by email
        """
        query = {"mndtId": mandate_number, "rsn": reason, "notify": format_bool(notify)}
        self._call("DELETE", "/mandate", query=query)

    def fetch(self, request: MandateDetailRequest) -> Document:
        """Fetch one mandate; the state comes from the X-STATE header."""
        response = self._call("GET", "/mandate/detail", query=request.to_dict())
        return Document.from_json(response.json(), state=response.header(STATE_HEADER))

    def update(self, request: UpdateMandateRequest) -> None:
        """Update mandate details."""
        self._call("POST", "/mandate/update", payload=request.to_dict(), expect=204)

    def customer_access(self, mandate_number: str) -> CustomerAccessResponse:
        response = self._call("POST", "/customeraccess", payload={"mndtId": mandate_number})
        return CustomerAccessResponse.from_json(response.json())

    def retrieve_pdf(self, mandate_number: str) -> PdfResponse:
        """Download the mandate pdf. The bytes are returned, not saved."""
        response = self._call("GET", "/mandate/pdf", query={"mndtId": mandate_number})
        return PdfResponse.from_response(response)

    def upload_pdf(self, request: UploadPdfRequest) -> None:
        """Upload a signed mandate pdf, streaming the file as the body."""
        with open(request.pdf_path, "rb") as pdf:
            self._call(
                "POST",
                "/mandate/pdf",
                query=request.to_dict(),
                body=pdf,
                headers={"Content-Type": "application/pdf"},
            )

    def feed(self, handler: Callable[[FeedEvent], Any], *sideloads: str) -> int:
        """
        Drain the mandate feed.

        Args:
            handler: Called with each classified event, e.g. a
                DocumentFeedHandler
            sideloads: Extra sections to include with every entry

        Returns:
            Number of events delivered
        """
        return FeedDrainer(self.transport, self.base_url).drain(MANDATE_FEED, handler, sideloads)


__all__ = ["DocumentFeedHandler", "DocumentGateway"]
