"""
Caller identity resolution.

The grana.io endpoints tag every request with the email of the document
owner. Resolution is injected into the providers rather than looked up
from ambient state, and a failure never stops the request from going out.
"""

import logging
import os
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class IdentityError(Exception):
    """Raised when the caller's email can't be determined."""
    pass


class IdentityResolver(ABC):
    """Abstract base class for caller identity lookups."""

    @abstractmethod
    def resolve(self) -> str:
        """
        Return the current document owner's email address.

        Raises:
            Exception: Any failure; see resolve_caller_identity
        """
        pass


class StaticIdentity(IdentityResolver):
    """Always resolves to the email it was built with."""

    def __init__(self, email: str):
        self.email = email

    def resolve(self) -> str:
        return self.email


class EnvironmentIdentity(IdentityResolver):
    """Reads the owner's email from an environment variable on every call."""

    def __init__(self, var: str = "GRANA_OWNER_EMAIL"):
        self.var = var

    def resolve(self) -> str:
        email = os.getenv(self.var, "").strip()
        if not email:
            raise IdentityError(f"no owner: set {self.var}")
        return email


def resolve_caller_identity(resolver: IdentityResolver) -> str:
    """
    Resolve the caller's email, degrading instead of failing.

    If the resolver raises, the exception's message is used in place of the
    email so the request still goes out, tagged with the diagnostic text.
    """
    try:
        return resolver.resolve()
    except Exception as e:
        logger.warning(f"Could not resolve caller identity: {e}")
        return str(e)
