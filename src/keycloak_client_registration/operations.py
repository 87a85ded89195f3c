"""
Module-level client registration operations.

    from keycloak_client_registration import create, get, remove, update

    options = {
        "endpoint": "http://localhost:8080/auth/realms/master/clients-registrations",
        "accessToken": initial_access_token,
    }
    client = await create(options, {"clientId": "my-app"})
    client = await get(options, "my-app")
    client = await update(options, {**client, "description": "updated"})
    await remove(options, "my-app")

Each call sends one request with its own credentials. Pass ``httpx_client``
to reuse a caller-owned connection pool.
"""
from typing import Any, Mapping, Optional

import httpx

from .config import ClientConfig
from .core.base_client import AsyncRegistrationClient, Options
from .types import RegistrationResult


async def create(
    options: Options,
    client_representation: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> RegistrationResult:
    """Create a new client.

    Args:
        options: endpoint, access token and optional provider.
        client_representation: The client to create. Defaults to an empty
            representation.

    Returns:
        The created client merged with headers, statusCode and statusMessage.
    """
    async with AsyncRegistrationClient(config, httpx_client) as client:
        return await client.create(options, client_representation)


async def get(
    options: Options,
    client_id: str,
    *,
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> RegistrationResult:
    """Get an existing client by id."""
    async with AsyncRegistrationClient(config, httpx_client) as client:
        return await client.get(options, client_id)


async def remove(
    options: Options,
    client_id: str,
    *,
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> RegistrationResult:
    """Remove an existing client by id."""
    async with AsyncRegistrationClient(config, httpx_client) as client:
        return await client.remove(options, client_id)


async def update(
    options: Options,
    client: Mapping[str, Any],
    *,
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> RegistrationResult:
    """Update an existing client.

    The representation must contain ``clientId`` (``client_id`` is also
    accepted with the openid-connect provider). All other attributes are
    applied as the update.
    """
    async with AsyncRegistrationClient(config, httpx_client) as registration:
        return await registration.update(options, client)
