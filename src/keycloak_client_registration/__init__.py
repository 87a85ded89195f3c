"""
Client for the Keycloak client registration REST API.

Provides create, get, remove and update against a registration endpoint,
authenticated with an initial access token sent as a bearer credential.
"""
from .types import (
    HttpMethod,
    Outcome,
    Provider,
    RegistrationResult,
    RequestDescriptor,
    StatusFailure,
    Success,
    TransportFailure,
)
from .config import (
    ClientConfig,
    RegistrationOptions,
    TimeoutConfig,
)
from .exceptions import RegistrationError, RegistrationStatusError
from .core.base_client import AsyncRegistrationClient, SyncRegistrationClient
from .auth.auth_handler import AuthHandler, BearerAuthHandler
from .operations import create, get, remove, update
from .factory import create_async_client, create_sync_client

__all__ = [
    # Types
    "HttpMethod",
    "Outcome",
    "Provider",
    "RegistrationResult",
    "RequestDescriptor",
    "StatusFailure",
    "Success",
    "TransportFailure",
    # Config
    "ClientConfig",
    "RegistrationOptions",
    "TimeoutConfig",
    # Errors
    "RegistrationError",
    "RegistrationStatusError",
    # Clients
    "AsyncRegistrationClient",
    "SyncRegistrationClient",
    # Auth
    "AuthHandler",
    "BearerAuthHandler",
    # Operations
    "create",
    "get",
    "remove",
    "update",
    # Factory
    "create_async_client",
    "create_sync_client",
]

__version__ = "0.1.0"
