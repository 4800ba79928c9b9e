"""
Transport boundary for the Twikey client.

The core only needs one primitive: send a request and get back a status
code, headers and a body. Anything that implements Transport.send can be
plugged into the gateways and the feed drainer.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union, BinaryIO

from requests.structures import CaseInsensitiveDict

from ..codec.decoder import parse_body


RequestBody = Union[str, bytes, BinaryIO, None]


@dataclass
class HttpResponse:
    """Response returned by a transport."""
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    content: bytes = b""
    url: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.content.decode("utf-8")

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        return self.headers.get(name)

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            DecodeError: If the body is not valid JSON
        """
        return parse_body(self.content)


class Transport(ABC):
    """Abstract request/response transport."""

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: RequestBody = None,
    ) -> HttpResponse:
        """
        Execute one HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Absolute request URL including the query string
            headers: Request headers
            body: String, bytes or an open binary file to stream

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: On connectivity failures and timeouts
        """

    def close(self) -> None:
        """Release transport resources."""
