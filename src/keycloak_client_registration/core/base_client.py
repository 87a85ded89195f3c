"""
Registration clients using httpx.

Each operation sends exactly one request and settles exactly once. When no
httpx client is injected, a short-lived one is opened per call; an injected
client is never closed by this library.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..config import (
    ClientConfig,
    RegistrationOptions,
    ResolvedConfig,
    coerce_options,
    resolve_config,
)
from ..console import mask_headers, print_request, print_response
from ..types import (
    HttpMethod,
    Outcome,
    Provider,
    RegistrationResult,
    RequestDescriptor,
    StatusFailure,
    Success,
    TransportFailure,
)
from .request_builder import build_body, build_headers, build_registration_request
from .response_interpreter import aread_outcome, read_outcome, settle

logger = logging.getLogger("keycloak_client_registration.base_client")

Options = Union[RegistrationOptions, Mapping[str, Any]]


def _httpx_timeout(config: ResolvedConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout.connect,
        read=config.timeout.read,
        write=config.timeout.write,
        pool=config.timeout.connect,
    )


def _update_client_id(options: RegistrationOptions, client: Mapping[str, Any]) -> Optional[str]:
    """Read the id of the client being updated from its representation.

    Not validated: a missing id is sent as-is and left to the server to reject.
    """
    client_id = client.get("clientId")
    if client_id is None and options.provider == Provider.OPENID_CONNECT:
        client_id = client.get("client_id")
    return client_id


def _trace_outcome(uri: str, outcome: Outcome) -> None:
    if isinstance(outcome, Success):
        result = outcome.result
        print_response(uri, result["statusCode"], result["statusMessage"], result["headers"], result)
    elif isinstance(outcome, StatusFailure):
        print_response(uri, outcome.status_code, outcome.status_message, outcome.headers)


class AsyncRegistrationClient:
    """Asynchronous client registration API client."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self._config = resolve_config(config)
        self._client = httpx_client
        self._closed = False

    def _new_httpx_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=_httpx_timeout(self._config), verify=self._config.verify)

    async def request(
        self,
        method: HttpMethod,
        descriptor: RequestDescriptor,
    ) -> RegistrationResult:
        """Send one request and settle its response."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        headers = build_headers(descriptor, self._config.headers)
        content = build_body(descriptor)

        logger.debug(
            f"AsyncRegistrationClient.request: method={method}, uri={descriptor.uri}, "
            f"headers={mask_headers(headers)}"
        )
        if self._config.trace:
            print_request(method, descriptor.uri, headers, descriptor.body)

        if self._client is not None:
            outcome = await self._send(self._client, method, descriptor.uri, headers, content)
        else:
            async with self._new_httpx_client() as client:
                outcome = await self._send(client, method, descriptor.uri, headers, content)

        if self._config.trace:
            _trace_outcome(descriptor.uri, outcome)
        return settle(outcome)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: HttpMethod,
        uri: str,
        headers: Dict[str, str],
        content: Optional[bytes],
    ) -> Outcome:
        try:
            async with client.stream(method, uri, headers=headers, content=content) as response:
                return await aread_outcome(response)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            return TransportFailure(e)

    async def create(
        self,
        options: Options,
        client_representation: Optional[Mapping[str, Any]] = None,
    ) -> RegistrationResult:
        """Create a new client (POST <endpoint>/<provider>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, body=client_representation or {})
        return await self.request("POST", descriptor)

    async def get(self, options: Options, client_id: str) -> RegistrationResult:
        """Get an existing client (GET <endpoint>/<provider>/<client_id>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, client_id)
        return await self.request("GET", descriptor)

    async def remove(self, options: Options, client_id: str) -> RegistrationResult:
        """Remove an existing client (DELETE <endpoint>/<provider>/<client_id>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, client_id)
        return await self.request("DELETE", descriptor)

    async def update(self, options: Options, client: Mapping[str, Any]) -> RegistrationResult:
        """Update an existing client (PUT <endpoint>/<provider>/<clientId>).

        The whole representation is sent as the request body.
        """
        options = coerce_options(options)
        descriptor = build_registration_request(
            options, _update_client_id(options, client), body=client
        )
        return await self.request("PUT", descriptor)

    async def close(self) -> None:
        """Mark the client closed. An injected httpx client is left open."""
        self._closed = True

    async def __aenter__(self) -> "AsyncRegistrationClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncRegistrationClient:
    """Synchronous client registration API client."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        self._config = resolve_config(config)
        self._client = httpx_client
        self._closed = False

    def _new_httpx_client(self) -> httpx.Client:
        return httpx.Client(timeout=_httpx_timeout(self._config), verify=self._config.verify)

    def request(
        self,
        method: HttpMethod,
        descriptor: RequestDescriptor,
    ) -> RegistrationResult:
        """Send one request and settle its response."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        headers = build_headers(descriptor, self._config.headers)
        content = build_body(descriptor)

        logger.debug(
            f"SyncRegistrationClient.request: method={method}, uri={descriptor.uri}, "
            f"headers={mask_headers(headers)}"
        )
        if self._config.trace:
            print_request(method, descriptor.uri, headers, descriptor.body)

        if self._client is not None:
            outcome = self._send(self._client, method, descriptor.uri, headers, content)
        else:
            with self._new_httpx_client() as client:
                outcome = self._send(client, method, descriptor.uri, headers, content)

        if self._config.trace:
            _trace_outcome(descriptor.uri, outcome)
        return settle(outcome)

    def _send(
        self,
        client: httpx.Client,
        method: HttpMethod,
        uri: str,
        headers: Dict[str, str],
        content: Optional[bytes],
    ) -> Outcome:
        try:
            with client.stream(method, uri, headers=headers, content=content) as response:
                return read_outcome(response)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            return TransportFailure(e)

    def create(
        self,
        options: Options,
        client_representation: Optional[Mapping[str, Any]] = None,
    ) -> RegistrationResult:
        """Create a new client (POST <endpoint>/<provider>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, body=client_representation or {})
        return self.request("POST", descriptor)

    def get(self, options: Options, client_id: str) -> RegistrationResult:
        """Get an existing client (GET <endpoint>/<provider>/<client_id>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, client_id)
        return self.request("GET", descriptor)

    def remove(self, options: Options, client_id: str) -> RegistrationResult:
        """Remove an existing client (DELETE <endpoint>/<provider>/<client_id>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(options, client_id)
        return self.request("DELETE", descriptor)

    def update(self, options: Options, client: Mapping[str, Any]) -> RegistrationResult:
        """Update an existing client (PUT <endpoint>/<provider>/<clientId>)."""
        options = coerce_options(options)
        descriptor = build_registration_request(
            options, _update_client_id(options, client), body=client
        )
        return self.request("PUT", descriptor)

    def close(self) -> None:
        """Mark the client closed. An injected httpx client is left open."""
        self._closed = True

    def __enter__(self) -> "SyncRegistrationClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
