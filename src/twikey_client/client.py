"""
Twikey client facade.

The TwikeyClient is the primary entry point: it builds the transport from a
ClientConfig and exposes one gateway per API area.

Example:
    ```python
    from twikey_client import TwikeyClient, DocumentFeedHandler

    with TwikeyClient.test(authorization=token) as twikey:
        invite = twikey.document.invite(InviteRequest(ct=1988))
        twikey.document.feed(MyHandler())
        twikey.invoice.feed(print, "meta")
    ```
"""

from __future__ import annotations
from typing import Optional

from .config import ClientConfig, PRODUCTION_ENDPOINT, TEST_ENDPOINT
from .gateways.document import DocumentGateway
from .gateways.invoice import InvoiceGateway
from .transport.base import Transport
from .transport.http import RequestsTransport


class TwikeyClient:
    """
    Entry point bundling the document and invoice gateways.

    Args:
        config: Client configuration (defaults to production, no token)
        transport: Optional transport; when omitted a RequestsTransport is
            built from ``config`` and closed with the client

    Attributes:
        document: DocumentGateway for mandate endpoints
        invoice: InvoiceGateway for invoice endpoints
    """

    PRODUCTION_ENDPOINT = PRODUCTION_ENDPOINT
    TEST_ENDPOINT = TEST_ENDPOINT

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[Transport] = None):
        self.config = config or ClientConfig()
        self.config.apply_logging()
        self._owns_transport = transport is None
        self.transport = transport or RequestsTransport(
            authorization=self.config.authorization,
            user_agent=self.config.user_agent,
            timeout=self.config.timeout,
            verify_ssl=self.config.verify_ssl,
        )
        self.document = DocumentGateway(self.transport, self.config.base_url)
        self.invoice = InvoiceGateway(self.transport, self.config.base_url)

    @property
    def endpoint(self) -> str:
        return self.config.base_url

    def close(self) -> None:
        """
        Close the transport.

        Only closes if the transport was created by this client.
        """
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> TwikeyClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @classmethod
    def production(cls, authorization: Optional[str] = None, **kwargs) -> TwikeyClient:
        """
        Connect to the production environment.

        Args:
            authorization: Session token
            **kwargs: Further ClientConfig fields
        """
        return cls(ClientConfig(endpoint=cls.PRODUCTION_ENDPOINT, authorization=authorization, **kwargs))

    @classmethod
    def test(cls, authorization: Optional[str] = None, **kwargs) -> TwikeyClient:
        """Connect to the beta (test) environment."""
        return cls(ClientConfig(endpoint=cls.TEST_ENDPOINT, authorization=authorization, **kwargs))

    @classmethod
    def from_env(cls, **overrides) -> TwikeyClient:
        """Build a client from TWIKEY_* environment variables."""
        return cls(ClientConfig.from_env(**overrides))


__all__ = ["TwikeyClient"]
