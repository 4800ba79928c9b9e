"""
Shared request plumbing for the endpoint gateways.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from ..codec.encoder import to_form_body, to_json_body, to_query_string
from ..codec.fields import EncodeMode
from ..runtime.errors import error_from_response
from ..transport.base import HttpResponse, RequestBody, Transport

logger = logging.getLogger(__name__)


FORM_URLENCODED = "application/x-www-form-urlencoded"
APPLICATION_JSON = "application/json"

CONTENT_TYPES = {
    EncodeMode.FORM: FORM_URLENCODED,
    EncodeMode.JSON: APPLICATION_JSON,
}

Query = Union[Mapping[str, Any], Sequence[Tuple[str, str]]]


class Gateway:
    """
    Base class for endpoint gateways.

    Args:
        transport: Transport executing the requests
        base_url: API base URL, e.g. ``https://api.twikey.com/creditor``
    """

    def __init__(self, transport: Transport, base_url: str):
        self.transport = transport
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str, query: Optional[Query] = None) -> str:
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{to_query_string(query)}"
        return url

    def _call(
        self,
        method: str,
        path: str,
        query: Optional[Query] = None,
        payload: Any = None,
        mode: EncodeMode = EncodeMode.FORM,
        body: RequestBody = None,
        headers: Optional[Dict[str, str]] = None,
        expect: int = 200,
    ) -> HttpResponse:
        """
        Execute one request against the API.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            query: Query parameters
            payload: Encoded payload, sent as a form or JSON body per ``mode``
            mode: Payload flavour, which also selects the Content-Type
            body: Raw body (e.g. an open file) when there is no payload
            headers: Extra request headers
            expect: Status code that counts as success

        Returns:
            The response

        Raises:
            UpstreamError: If the status code differs from ``expect``
            TransportError: If the request fails to complete
        """
        request_headers: Dict[str, str] = {}
        if payload is not None:
            body = to_json_body(payload) if mode is EncodeMode.JSON else to_form_body(payload)
            request_headers["Content-Type"] = CONTENT_TYPES[mode]
        if headers:
            request_headers.update(headers)

        url = self._url(path, query)
        response = self.transport.send(method, url, headers=request_headers, body=body)
        logger.debug(f"{method} {path} -> {response.status}")
        if response.status != expect:
            raise error_from_response(response)
        return response
