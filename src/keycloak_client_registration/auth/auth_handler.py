"""
Auth handler utilities for keycloak_client_registration.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..console import mask_sensitive
from ..types import RequestDescriptor

logger = logging.getLogger(__name__)


class AuthHandler(ABC):
    """Auth handler interface."""

    @abstractmethod
    def get_header(self, descriptor: RequestDescriptor) -> Optional[Dict[str, str]]:
        """Get auth header for request."""
        ...


class BearerAuthHandler(AuthHandler):
    """Bearer token auth handler.

    Reads the token from the descriptor's ``auth["bearer"]`` entry. The token
    is sent verbatim; an empty token still produces a header.
    """

    def get_header(self, descriptor: RequestDescriptor) -> Optional[Dict[str, str]]:
        """Get bearer auth header."""
        if "bearer" not in descriptor.auth:
            return None
        token = descriptor.auth["bearer"]
        header = {"Authorization": f"Bearer {token}"}
        logger.debug(
            f"BearerAuthHandler.get_header: token={mask_sensitive(token)}"
        )
        return header


bearer_auth_handler = BearerAuthHandler()
