"""
HTTP transport built on requests.

Attaches the user agent and authorization headers to every request and maps
requests failures onto TransportError. Status codes are never interpreted
here; that is left to the gateways.
"""

from __future__ import annotations
import logging
from typing import Dict, Optional

import requests

from .base import HttpResponse, RequestBody, Transport
from ..runtime.errors import TransportError

logger = logging.getLogger(__name__)


class RequestsTransport(Transport):
    """
    Transport backed by a requests.Session.

    Example:
        ```python
        transport = RequestsTransport(authorization=token, user_agent="my-app/1.0")
        response = transport.send("GET", "https://api.twikey.com/creditor/mandate")
        ```
    """

    def __init__(
        self,
        authorization: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the transport.

        Args:
            authorization: Session token sent in the Authorization header
            user_agent: Value of the User-Agent header
            timeout: Request timeout in seconds (default: 30)
            verify_ssl: Verify TLS certificates
            session: Optional requests.Session to reuse
        """
        self._authorization = authorization
        self._user_agent = user_agent
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._session = session or requests.Session()
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        return self._session

    def _default_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        if self._authorization:
            headers["Authorization"] = self._authorization
        return headers

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: RequestBody = None,
    ) -> HttpResponse:
        request_headers = self._default_headers()
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {url}")
        try:
            response = self._session.request(
                method,
                url,
                headers=request_headers,
                data=body,
                timeout=self._timeout,
                verify=self._verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", details={"url": url}, cause=e)

        logger.debug(f"{method} {url} -> {response.status_code}")
        return HttpResponse(
            status=response.status_code,
            headers=response.headers,
            content=response.content,
            url=url,
        )

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()
