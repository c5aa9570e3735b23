"""Tests for the RequestSession transport with mocked requests."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from grana_sheets.sources.base import ProviderError, TransportError
from grana_sheets.utils.session import RequestSession


def _make_response(status_code=200, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = text
    resp.content = text.encode()
    return resp


def _make_session():
    session = RequestSession(user_agent="test-agent")
    session.session = MagicMock()
    return session


class TestInit:
    def test_explicit_user_agent(self):
        session = RequestSession(user_agent="test-agent")
        assert session.session.headers["User-Agent"] == "test-agent"
        assert session.session.headers["Accept"] == "application/json"

    def test_default_user_agent_from_fake_useragent(self):
        with patch("grana_sheets.utils.session.UserAgent") as ua_cls:
            ua_cls.return_value.chrome = "Mozilla/5.0 Chrome"
            session = RequestSession()
        assert session.session.headers["User-Agent"] == "Mozilla/5.0 Chrome"


class TestFetch:
    def test_returns_body_text(self):
        session = _make_session()
        session.session.get.return_value = _make_response(text='{"data": 1}')
        assert session.fetch("https://api.test/x?a=1") == '{"data": 1}'
        session.session.get.assert_called_once_with("https://api.test/x?a=1")

    def test_error_status_still_returns_body(self):
        session = _make_session()
        session.session.get.return_value = _make_response(status_code=500, text="Internal Server Error")
        assert session.fetch("https://api.test/x") == "Internal Server Error"

    def test_connection_error_raises(self):
        session = _make_session()
        session.session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError, match="refused") as exc_info:
            session.fetch("https://api.test/x")
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    def test_timeout_is_provider_error(self):
        session = _make_session()
        session.session.get.side_effect = requests.exceptions.Timeout("slow")
        with pytest.raises(ProviderError):
            session.fetch("https://api.test/x")

    def test_no_retry(self):
        session = _make_session()
        session.session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError):
            session.fetch("https://api.test/x")
        assert session.session.get.call_count == 1

    def test_close(self):
        session = _make_session()
        session.close()
        session.session.close.assert_called_once()
