"""
Unit tests for the mandate gateway.

Each test scripts the server reply and asserts on the recorded request.
"""

import pytest

from twikey_client.gateways import DocumentFeedHandler, DocumentGateway
from twikey_client.models import (
    Account,
    Customer,
    InviteRequest,
    MandateActionRequest,
    MandateActionType,
    MandateDetailRequest,
    MandateFields,
    MandateQuery,
    SignMethod,
    SignRequest,
    UpdateMandateRequest,
    UploadPdfRequest,
)
from twikey_client.runtime.errors import UpstreamError
from twikey_client.transport.base import HttpResponse

from helpers.factories import mk_cancelled, mk_created, mk_mandate, mk_updated
from helpers.mocks import feed_page, json_response


@pytest.fixture
def gateway(fake_transport, base_url):
    return DocumentGateway(fake_transport, base_url)


class TestMandateCreation:
    """Tests for invite and sign."""

    def test_invite(self, gateway, fake_transport, base_url):
        fake_transport.queue(json_response({"mndtId": "COREREC01", "url": "http://twikey.to/x/ToYG", "key": "ToYG"}))
        invite = InviteRequest(
            ct=1988,
            customer=Customer(customer_number="C-1", email="jane@example.com"),
            fields=MandateFields(check=True),
        )

        result = gateway.invite(invite)

        request = fake_transport.last
        assert request.method == "POST"
        assert request.url == f"{base_url}/invite"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert request.form == {
            "ct": ["1988"],
            "check": ["true"],
            "customerNumber": ["C-1"],
            "email": ["jane@example.com"],
        }
        assert result.mandate_number == "COREREC01"
        assert result.url == "http://twikey.to/x/ToYG"

    def test_sign(self, gateway, fake_transport):
        fake_transport.queue(json_response({"mndtId": "M9", "url": "u", "key": "k"}))
        sign = SignRequest(
            ct=1988,
            method=SignMethod.IMPORT,
            account=Account(iban="BE68539007547034", bic="GKCCBEBB"),
            sign_date="2024-01-01T10:00:00",
        )

        gateway.sign(sign)

        request = fake_transport.last
        assert request.path.endswith("/sign")
        assert request.form["method"] == ["import"]
        assert request.form["bankSignature"] == ["true"]
        assert request.form["iban"] == ["BE68539007547034"]
        assert request.form["signDate"] == ["2024-01-01T10:00:00"]

    def test_invite_rejected(self, gateway, fake_transport):
        fake_transport.queue(HttpResponse(400, {"ApiError": "err_no_contract"}))
        with pytest.raises(UpstreamError) as exc_info:
            gateway.invite(InviteRequest(ct=1))
        assert exc_info.value.api_error == "err_no_contract"


class TestMandateMaintenance:
    """Tests for action, update, cancel and customer access."""

    def test_action(self, gateway, fake_transport, base_url):
        fake_transport.queue(HttpResponse(204))
        gateway.action(MandateActionRequest(type=MandateActionType.REMINDER, mandate_number="M1", reminder=2))
        request = fake_transport.last
        assert request.url == f"{base_url}/mandate/M1/action"
        assert request.form == {"type": ["reminder"], "mndtId": ["M1"], "reminder": ["2"]}

    def test_action_expects_no_content(self, gateway, fake_transport):
        fake_transport.queue(json_response({}))
        with pytest.raises(UpstreamError) as exc_info:
            gateway.action(MandateActionRequest(type=MandateActionType.INVITE, mandate_number="M1"))
        assert exc_info.value.status == 200

    def test_update(self, gateway, fake_transport):
        fake_transport.queue(HttpResponse(204))
        gateway.update(UpdateMandateRequest(mandate_number="M1", customer=Customer(email="new@example.com")))
        request = fake_transport.last
        assert request.path.endswith("/mandate/update")
        assert request.form == {"mndtId": ["M1"], "email": ["new@example.com"]}

    def test_cancel(self, gateway, fake_transport):
        fake_transport.queue(HttpResponse(200))
        gateway.cancel("M1", "no longer customer", notify=True)
        request = fake_transport.last
        assert request.method == "DELETE"
        assert request.path.endswith("/mandate")
        assert request.query == {"mndtId": ["M1"], "rsn": ["no longer customer"], "notify": ["true"]}
        assert request.body is None

    def test_customer_access(self, gateway, fake_transport):
        fake_transport.queue(json_response({"token": "t0k", "url": "https://x/t0k"}))
        result = gateway.customer_access("M1")
        assert fake_transport.last.body == "mndtId=M1"
        assert result.url == "https://x/t0k"


class TestMandateLookup:
    """Tests for query and fetch."""

    def test_query(self, gateway, fake_transport):
        fake_transport.queue(json_response({"Contracts": [{"mandateNumber": "M1", "state": "SIGNED"}]}))
        docs = gateway.query(MandateQuery.from_email("jane@example.com", state="SIGNED"))
        request = fake_transport.last
        assert request.method == "GET"
        assert request.path.endswith("/mandate/query")
        assert request.query == {"email": ["jane@example.com"], "state": ["SIGNED"]}
        assert [doc.mandate_number for doc in docs] == ["M1"]

    def test_fetch_reads_state_header(self, gateway, fake_transport):
        fake_transport.queue(json_response(mk_mandate("M1"), headers={"x-state": "SIGNED"}))
        doc = gateway.fetch(MandateDetailRequest(mandate_number="M1", force=True))
        assert fake_transport.last.query == {"mndtId": ["M1"], "force": ["true"]}
        assert doc.mandate_number == "M1"
        assert doc.state == "SIGNED"

    def test_fetch_without_state_header(self, gateway, fake_transport):
        fake_transport.queue(json_response(mk_mandate("M1")))
        assert gateway.fetch(MandateDetailRequest(mandate_number="M1")).state is None


class TestMandatePdf:
    """Tests for pdf download and upload."""

    def test_retrieve_pdf(self, gateway, fake_transport):
        fake_transport.queue(HttpResponse(200, {"Content-Disposition": "attachment; filename=M1.pdf"}, b"%PDF-1.4"))
        pdf = gateway.retrieve_pdf("M1")
        assert fake_transport.last.query == {"mndtId": ["M1"]}
        assert pdf.content == b"%PDF-1.4"
        assert pdf.filename == "M1.pdf"

    def test_upload_pdf(self, gateway, fake_transport, tmp_path):
        path = tmp_path / "signed.pdf"
        path.write_bytes(b"%PDF-signed")
        fake_transport.queue(HttpResponse(200))

        gateway.upload_pdf(UploadPdfRequest(mandate_number="M1", pdf_path=path, bank_signature=False))

        request = fake_transport.last
        assert request.query == {"mndtId": ["M1"], "bankSignature": ["false"]}
        assert request.headers["Content-Type"] == "application/pdf"
        assert request.body == b"%PDF-signed"


class RecordingHandler(DocumentFeedHandler):
    def __init__(self):
        self.calls = []

    def new_document(self, event):
        self.calls.append(("new", event.document.mandate_number))

    def updated_document(self, event):
        self.calls.append(("updated", event.original_id))

    def cancelled_document(self, event):
        self.calls.append(("cancelled", event.original_id))


class TestMandateFeed:
    """Tests for the mandate feed through the gateway."""

    def test_handler_dispatch(self, gateway, fake_transport):
        fake_transport.queue(
            feed_page("Messages", [mk_created("M1"), mk_updated("M2", original_id="M2"), mk_cancelled("M3")]),
            feed_page("Messages", []),
        )
        handler = RecordingHandler()

        assert gateway.feed(handler) == 3
        assert handler.calls == [("new", "M1"), ("updated", "M2"), ("cancelled", "M3")]

    def test_default_hooks_ignore_events(self, gateway, fake_transport):
        fake_transport.queue(feed_page("Messages", [mk_created("M1")]), feed_page("Messages", []))
        assert gateway.feed(DocumentFeedHandler()) == 1
