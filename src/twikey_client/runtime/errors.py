"""
Twikey Error Model

This module provides the error handling framework for the Twikey Python client.
Every error raised by the library derives from TwikeyError and carries a
machine-readable ErrorCode.
"""

from __future__ import annotations
from typing import Optional, Dict, Any, Mapping
from enum import IntEnum


API_ERROR_HEADER = "ApiError"


class ErrorCode(IntEnum):
    """Error codes for errors raised by the client."""

    # General errors (1-99)
    UNKNOWN = 1

    # Encoding errors (100-199)
    ENCODING_ERROR = 100
    DECODING_ERROR = 101
    INVALID_JSON = 102

    # Transport errors (200-299)
    TRANSPORT_ERROR = 200

    # Upstream errors (400-499)
    UPSTREAM_ERROR = 400


class TwikeyError(Exception):
    """
    Base class for all Twikey errors.

    Provides structured error information: a message, an error code,
    optional details and the underlying cause.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a Twikey error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [f"[{self.code.name}] {self.message}"]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.cause:
            parts.append(f"Caused by: {self.cause}")
        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.cause:
            result["cause"] = str(self.cause)
        return result


class EncodeError(TwikeyError):
    """A request record holds a value that has no wire representation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.ENCODING_ERROR, details, cause)


class DecodeError(TwikeyError):
    """A required structural element is missing from a response or feed entry."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.DECODING_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class UpstreamError(TwikeyError):
    """
    The remote service answered with a non-success status.

    Attributes:
        status: HTTP status code of the response
        api_error: Error token from the ApiError response header,
            empty when the header was absent
    """

    def __init__(self, status: int, api_error: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.status = status
        self.api_error = api_error or ""
        message = f"HTTP {status}: {self.api_error}" if self.api_error else f"HTTP {status}"
        super().__init__(message, ErrorCode.UPSTREAM_ERROR, details)


class TransportError(TwikeyError):
    """Connectivity failure or timeout reported by the transport."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, details, cause)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    for key, value in headers.items():
        if key.lower() == name.lower():
            return value
    return None


def error_from_response(response: Any) -> UpstreamError:
    """
    Create an UpstreamError from a non-success response.

    Args:
        response: Transport response exposing ``status`` and ``headers``

    Returns:
        UpstreamError carrying the server-supplied error token
    """
    api_error = _header(response.headers, API_ERROR_HEADER)
    details = {"url": response.url} if getattr(response, "url", None) else None
    return UpstreamError(response.status, api_error, details)


__all__ = [
    "API_ERROR_HEADER",
    "ErrorCode",
    "TwikeyError",
    "EncodeError",
    "DecodeError",
    "UpstreamError",
    "TransportError",
    "error_from_response",
]
