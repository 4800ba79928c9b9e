"""
Unit tests for mandate feed entry classification.
"""

import pytest

from twikey_client.feed import (
    DocumentCancelled,
    DocumentCreated,
    DocumentUpdated,
    EventKind,
    classify,
)
from twikey_client.runtime.errors import DecodeError

from helpers.factories import mk_cancelled, mk_created, mk_updated


class TestClassification:
    """Tests for the priority-ordered predicate chain."""

    def test_amendment_scenario(self):
        entry = {
            "Mndt": {"MndtId": "M1"},
            "AmdmntRsn": {"Rsn": "bic-change", "Orgtr": {"CtctDtls": {"EmailAdr": "a@b.com"}}},
            "OrgnlMndtId": "M1",
            "EvtTime": "2024-01-01T00:00:00Z",
        }
        event = classify(entry)
        assert isinstance(event, DocumentUpdated)
        assert event.original_id == "M1"
        assert event.reason == "bic-change"
        assert event.originator_email == "a@b.com"
        assert event.event_time == "2024-01-01T00:00:00Z"
        assert event.document.mandate_number == "M1"
        assert event.document.state is None

    def test_created(self):
        event = classify(mk_created("M7", "2024-03-01T10:00:00Z"))
        assert isinstance(event, DocumentCreated)
        assert event.kind is EventKind.CREATED
        assert event.document.mandate_number == "M7"
        assert event.document.debtor_name == "Jane Doe"
        assert event.event_time == "2024-03-01T10:00:00Z"

    def test_cancelled(self):
        event = classify(mk_cancelled("M2", "AC04", "ops@example.com"))
        assert isinstance(event, DocumentCancelled)
        assert event.kind is EventKind.CANCELLED
        assert event.original_id == "M2"
        assert event.reason == "AC04"
        assert event.originator_email == "ops@example.com"
        assert event.event_time == "2024-01-02T00:00:00Z"

    def test_cancellation_takes_priority(self):
        entry = mk_updated()
        entry["CxlRsn"] = {"Rsn": "MD01"}
        event = classify(entry)
        assert isinstance(event, DocumentCancelled)
        assert event.reason == "MD01"
        assert event.originator_email is None

    def test_updated_kind(self):
        assert classify(mk_updated()).kind is EventKind.UPDATED

    def test_missing_originator_email(self):
        event = classify(mk_updated(email=None))
        assert event.originator_email is None

    def test_null_cancel_marker_counts_as_present(self):
        entry = mk_created("M1")
        entry["CxlRsn"] = None
        entry["OrgnlMndtId"] = "M1"
        event = classify(entry)
        assert isinstance(event, DocumentCancelled)
        assert event.original_id == "M1"
        assert event.reason is None

    def test_null_amendment_marker_counts_as_present(self):
        entry = mk_created("M1")
        entry["AmdmntRsn"] = None
        event = classify(entry)
        assert isinstance(event, DocumentUpdated)
        assert event.reason is None


class TestClassificationErrors:
    """Tests for malformed entries."""

    def test_created_without_mandate(self):
        with pytest.raises(DecodeError):
            classify({"EvtTime": "2024-01-01T00:00:00Z"})

    def test_updated_without_mandate(self):
        with pytest.raises(DecodeError):
            classify({"AmdmntRsn": {"Rsn": "x"}, "OrgnlMndtId": "M1"})

    def test_cancelled_without_original_id(self):
        with pytest.raises(DecodeError):
            classify({"CxlRsn": {"Rsn": "AC04"}})

    def test_entry_not_an_object(self):
        with pytest.raises(DecodeError):
            classify(["M1"])
