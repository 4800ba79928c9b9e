"""
Unit tests for the error hierarchy.
"""

from twikey_client.runtime.errors import (
    DecodeError,
    EncodeError,
    ErrorCode,
    TransportError,
    TwikeyError,
    UpstreamError,
    error_from_response,
)
from twikey_client.transport.base import HttpResponse


class TestErrorHierarchy:
    """Tests for the error classes."""

    def test_all_derive_from_base(self):
        for error in (EncodeError("x"), DecodeError("x"), UpstreamError(500), TransportError("x")):
            assert isinstance(error, TwikeyError)

    def test_codes(self):
        assert EncodeError("x").code == ErrorCode.ENCODING_ERROR
        assert DecodeError("x").code == ErrorCode.DECODING_ERROR
        assert UpstreamError(400).code == ErrorCode.UPSTREAM_ERROR
        assert TransportError("x").code == ErrorCode.TRANSPORT_ERROR

    def test_code_members(self):
        assert {code.name for code in ErrorCode} == {
            "UNKNOWN",
            "ENCODING_ERROR",
            "DECODING_ERROR",
            "INVALID_JSON",
            "TRANSPORT_ERROR",
            "UPSTREAM_ERROR",
        }

    def test_str_includes_code_details_and_cause(self):
        error = TransportError("HTTP request failed", details={"url": "https://x"}, cause=OSError("reset"))
        text = str(error)
        assert "[TRANSPORT_ERROR] HTTP request failed" in text
        assert "https://x" in text
        assert "reset" in text

    def test_to_dict(self):
        error = DecodeError("Missing required element 'Mndt'")
        assert error.to_dict() == {
            "code": ErrorCode.DECODING_ERROR.value,
            "message": "Missing required element 'Mndt'",
        }


class TestUpstreamError:
    """Tests for non-success responses."""

    def test_token_in_message(self):
        error = UpstreamError(400, "err_no_contract")
        assert error.status == 400
        assert error.api_error == "err_no_contract"
        assert error.message == "HTTP 400: err_no_contract"

    def test_absent_token_is_empty(self):
        error = UpstreamError(503)
        assert error.api_error == ""
        assert error.message == "HTTP 503"

    def test_from_response(self):
        response = HttpResponse(409, {"apierror": "err_duplicate"}, url="https://x/invoice")
        error = error_from_response(response)
        assert error.status == 409
        assert error.api_error == "err_duplicate"
        assert error.details == {"url": "https://x/invoice"}

    def test_from_response_without_header(self):
        error = error_from_response(HttpResponse(500, {}))
        assert error.api_error == ""
        assert error.details == {}
