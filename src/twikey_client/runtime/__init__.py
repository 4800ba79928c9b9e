"""Runtime helpers for the Twikey Python client"""

from .errors import (
    ErrorCode,
    TwikeyError,
    EncodeError,
    DecodeError,
    UpstreamError,
    TransportError,
    error_from_response,
)

__all__ = [
    "ErrorCode",
    "TwikeyError",
    "EncodeError",
    "DecodeError",
    "UpstreamError",
    "TransportError",
    "error_from_response",
]
