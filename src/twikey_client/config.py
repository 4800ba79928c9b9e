"""
Client configuration.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import __version__


PRODUCTION_ENDPOINT = "https://api.twikey.com/creditor"
TEST_ENDPOINT = "https://api.beta.twikey.com/creditor"

ENDPOINT_ALIASES = {
    "production": PRODUCTION_ENDPOINT,
    "test": TEST_ENDPOINT,
}

DEFAULT_USER_AGENT = f"twikey-python/{__version__}"


@dataclass
class ClientConfig:
    """Configuration for the Twikey client."""

    endpoint: str = PRODUCTION_ENDPOINT
    authorization: Optional[str] = None
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    debug: bool = False

    @property
    def base_url(self) -> str:
        """Endpoint with aliases resolved and trailing slashes removed."""
        return ENDPOINT_ALIASES.get(self.endpoint, self.endpoint).rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> ClientConfig:
        """
        Build a configuration from environment variables.

        Reads TWIKEY_ENDPOINT, TWIKEY_AUTHORIZATION, TWIKEY_TIMEOUT and
        TWIKEY_USER_AGENT. Keyword arguments take precedence.

        Raises:
            ValueError: If TWIKEY_TIMEOUT is not a number
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get("TWIKEY_ENDPOINT"):
            values["endpoint"] = env["TWIKEY_ENDPOINT"]
        if env.get("TWIKEY_AUTHORIZATION"):
            values["authorization"] = env["TWIKEY_AUTHORIZATION"]
        if env.get("TWIKEY_TIMEOUT"):
            values["timeout"] = float(env["TWIKEY_TIMEOUT"])
        if env.get("TWIKEY_USER_AGENT"):
            values["user_agent"] = env["TWIKEY_USER_AGENT"]
        values.update(overrides)
        return cls(**values)

    def apply_logging(self) -> None:
        """Switch the package logger to DEBUG when ``debug`` is set."""
        if self.debug:
            logging.getLogger("twikey_client").setLevel(logging.DEBUG)
