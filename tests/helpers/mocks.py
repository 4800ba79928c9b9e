"""
Scripted transport for gateway and feed tests.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlsplit

from twikey_client.transport.base import HttpResponse, RequestBody, Transport


@dataclass
class RecordedRequest:
    """One request seen by the FakeTransport."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Union[str, bytes, None] = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def query(self) -> Dict[str, List[str]]:
        return parse_qs(urlsplit(self.url).query, keep_blank_values=True)

    @property
    def form(self) -> Dict[str, List[str]]:
        return parse_qs(self.body, keep_blank_values=True)

    @property
    def json(self) -> Any:
        return json.loads(self.body)


def json_response(body: Any = None, status: int = 200, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
    content = b"" if body is None else json.dumps(body).encode("utf-8")
    return HttpResponse(status=status, headers=headers or {}, content=content)


def feed_page(array_field: str, entries: List[Any]) -> HttpResponse:
    return json_response({array_field: entries})


class FakeTransport(Transport):
    """
    Transport answering from a queue of canned responses.

    Queue HttpResponse objects (or exceptions to raise) with ``queue``; every
    call to ``send`` is recorded in ``requests``. File bodies are read so the
    uploaded bytes can be asserted on.
    """

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses: List[Any] = list(responses or [])
        self.requests: List[RecordedRequest] = []
        self.closed = False

    def queue(self, *responses: Any) -> FakeTransport:
        self.responses.extend(responses)
        return self

    def send(self, method: str, url: str, headers: Optional[Dict[str, str]] = None,
             body: RequestBody = None) -> HttpResponse:
        if hasattr(body, "read"):
            body = body.read()
        self.requests.append(RecordedRequest(method, url, dict(headers or {}), body))
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]
