"""
Factory functions for creating registration clients.
"""
from typing import Optional, Union

import httpx

from .config import ClientConfig, TimeoutConfig
from .core.base_client import AsyncRegistrationClient, SyncRegistrationClient


def create_async_client(
    httpx_client: Optional[httpx.AsyncClient] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[dict[str, str]] = None,
    verify: Optional[bool] = None,
    trace: bool = False,
) -> AsyncRegistrationClient:
    """
    Create an async registration client.

    Args:
        httpx_client: Pre-configured httpx.AsyncClient, left open by the library.
        timeout: Request timeout (seconds or TimeoutConfig).
        default_headers: Extra headers for all requests.
        verify: TLS verification; None defers to the environment.
        trace: Print request/response panels.

    Returns:
        AsyncRegistrationClient instance.
    """
    config = ClientConfig(
        timeout=timeout,
        headers=default_headers or {},
        verify=verify,
        trace=trace,
    )
    return AsyncRegistrationClient(config, httpx_client)


def create_sync_client(
    httpx_client: Optional[httpx.Client] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    default_headers: Optional[dict[str, str]] = None,
    verify: Optional[bool] = None,
    trace: bool = False,
) -> SyncRegistrationClient:
    """
    Create a sync registration client.

    Args:
        httpx_client: Pre-configured httpx.Client, left open by the library.
        timeout: Request timeout (seconds or TimeoutConfig).
        default_headers: Extra headers for all requests.
        verify: TLS verification; None defers to the environment.
        trace: Print request/response panels.

    Returns:
        SyncRegistrationClient instance.
    """
    config = ClientConfig(
        timeout=timeout,
        headers=default_headers or {},
        verify=verify,
        trace=trace,
    )
    return SyncRegistrationClient(config, httpx_client)
