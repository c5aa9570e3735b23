"""Shared fixtures for the test suite."""

import json
from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from grana_sheets.config import Settings
from grana_sheets.functions import GranaFunctions
from grana_sheets.sources.identity import IdentityError, StaticIdentity


@pytest.fixture
def settings(monkeypatch):
    """Settings pinned to the production endpoints, whatever .env says."""
    monkeypatch.delenv("GRANA_API_URL", raising=False)
    monkeypatch.delenv("STOCKS_API_URL", raising=False)
    return Settings()


@pytest.fixture
def make_transport():
    """Factory for a mock transport whose fetch() returns a JSON body."""
    def _make(payload=None, body=None):
        transport = MagicMock()
        transport.fetch.return_value = body if body is not None else json.dumps(payload)
        return transport
    return _make


@pytest.fixture
def transport(make_transport):
    """Mock transport answering {"data": 123.45}."""
    return make_transport({"data": 123.45})


@pytest.fixture
def identity():
    return StaticIdentity("owner@example.com")


@pytest.fixture
def failing_identity():
    """Resolver that raises like a host with no document owner."""
    resolver = MagicMock()
    resolver.resolve.side_effect = IdentityError("no owner")
    return resolver


@pytest.fixture
def fns(transport, identity, settings):
    return GranaFunctions(transport, identity, settings)


@pytest.fixture
def fetched_url():
    """Split the URL given to a mock transport into (base, ordered params)."""
    def _get(transport):
        url = transport.fetch.call_args[0][0]
        parts = urlsplit(url)
        base = f"{parts.scheme}://{parts.netloc}{parts.path}"
        return base, parse_qsl(parts.query, keep_blank_values=True)
    return _get
