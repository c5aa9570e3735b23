"""
HTTP transport shared by all providers.

Wraps a requests.Session and exposes the single primitive the providers
need: fetch a URL and hand back the body text.
"""

import logging
from typing import Optional

import requests
from fake_useragent import UserAgent

from grana_sheets.sources.base import Transport, TransportError

logger = logging.getLogger(__name__)


class RequestSession(Transport):
    """
    Blocking GET transport.

    The status code is not checked: error pages surface to the caller as a
    body that fails to parse as JSON. Only connection-level failures raise.
    """

    def __init__(self, user_agent: Optional[str] = None):
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent or UserAgent().chrome,
            "Accept": "application/json",
        })

    def fetch(self, url: str) -> str:
        """
        GET a fully formed URL.

        Raises:
            TransportError: On network failure (DNS, refused, reset, ...)
        """
        try:
            response = self.session.get(url)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        logger.debug(f"HTTP {response.status_code} ({len(response.content)} bytes)")
        return response.text

    def close(self):
        """Close the underlying connection pool."""
        self.session.close()
