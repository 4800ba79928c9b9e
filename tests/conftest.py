"""
Test bootstrap:
- Make tests/helpers importable
- Shared fixtures for the scripted transport and sample payloads
"""
import sys
import pathlib

import pytest

TESTS_DIR = pathlib.Path(__file__).parent

if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))


BASE_URL = "https://api.example.test/creditor"


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def fake_transport():
    """Scripted transport recording every request."""
    from helpers.mocks import FakeTransport
    return FakeTransport()


@pytest.fixture
def mandate_entry():
    """A fully populated mandate object as sent by the server."""
    from helpers.factories import mk_mandate
    return mk_mandate()
