"""
Shared request building for the grana-sheets data providers.

Every provider does the same three things: assemble an ordered, percent-
encoded query string, GET it through the transport, and pull the data field
out of the JSON envelope. Subclasses only fix the path and parameter names.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple
from urllib.parse import quote

from grana_sheets.models import ResponseEnvelope
from grana_sheets.sources.identity import IdentityResolver, resolve_caller_identity
from grana_sheets.utils.values import render_value

logger = logging.getLogger(__name__)

Params = List[Tuple[str, Any]]

# Characters encodeURIComponent leaves alone besides alphanumerics and -_.~
_URI_COMPONENT_SAFE = "!*'()"


class Transport(ABC):
    """Anything that can GET a URL and return the body text."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        pass


class ProviderError(Exception):
    """Base exception for provider-specific errors."""
    pass


class TransportError(ProviderError):
    """Raised when the HTTP request itself fails."""
    pass


class InvalidResponseError(ProviderError):
    """Raised when the response body is not JSON."""
    pass


# ---------------------------------------------------------------------------
# Query string assembly
# ---------------------------------------------------------------------------

def encode_component(value: Any) -> str:
    """Percent-encode a single query value or path segment."""
    return quote(render_value(value), safe=_URI_COMPONENT_SAFE)


def build_query(params: Params) -> str:
    """Join name=value pairs in order, encoding each value individually."""
    return "&".join(f"{name}={encode_component(value)}" for name, value in params)


def unwrap_envelope(body: str) -> Any:
    """
    Parse a response body and return its data field.

    A JSON document without a data key (or that isn't an object at all)
    gives None rather than an error.

    Raises:
        InvalidResponseError: If the body is not valid JSON
    """
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as e:
        snippet = (body or "")[:80]
        raise InvalidResponseError(f"Response is not JSON: {snippet!r}") from e

    if not isinstance(payload, dict):
        logger.debug(f"Response is a {type(payload).__name__}, not an envelope")
        return None

    return ResponseEnvelope.model_validate(payload).data


def _mask_email(query: str) -> str:
    head, sep, rest = query.partition("&")
    if head.startswith("email="):
        return "email=***" + sep + rest
    return query


# ---------------------------------------------------------------------------
# Provider base
# ---------------------------------------------------------------------------

class DataProvider(ABC):
    """
    Abstract base class for the API providers.

    Args:
        transport: Object with a fetch(url) -> str method
        base_url: Endpoint root
        identity: Resolver for the caller's email, or None for endpoints
                  that don't take one
    """

    def __init__(
        self,
        transport: Transport,
        base_url: str,
        identity: Optional[IdentityResolver] = None,
    ):
        self.transport = transport
        self.identity = identity
        self.base_url = base_url.rstrip("/")
        self.name = self.__class__.__name__

    @property
    @abstractmethod
    def path(self) -> str:
        """Endpoint path appended to base_url."""
        pass

    def _request(self, params: Params, path: Optional[str] = None) -> Any:
        """
        Run one GET against the endpoint and unwrap the result.

        When the provider has an identity resolver, the caller's email is
        sent as the first parameter.
        """
        if self.identity is not None:
            params = [("email", resolve_caller_identity(self.identity))] + list(params)

        query = build_query(params)
        url = f"{self.base_url}{path or self.path}"
        if query:
            url = f"{url}?{query}"

        logger.debug(f"{self.name}: GET {self.base_url}{path or self.path}?{_mask_email(query)}")
        body = self.transport.fetch(url)
        return unwrap_envelope(body)
