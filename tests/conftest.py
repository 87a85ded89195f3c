"""Pytest configuration and fixtures for keycloak_client_registration tests."""
import json
from typing import Iterator, AsyncIterator

import httpx
import pytest

from keycloak_client_registration import RegistrationOptions

ENDPOINT = "http://h/clients"
TOKEN = "tok"


class MockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport for testing."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"success": true}',
        response_headers: dict | None = None,
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.response_headers = response_headers or {"content-type": "application/json"}
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Handle the async request and return a mock response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers=self.response_headers,
            content=self.response_content,
        )

    async def aclose(self) -> None:
        """Close the transport."""
        pass


class MockSyncTransport(httpx.BaseTransport):
    """Mock sync transport for testing."""

    def __init__(
        self,
        response_status: int = 200,
        response_content: bytes = b'{"success": true}',
        response_headers: dict | None = None,
    ) -> None:
        self.response_status = response_status
        self.response_content = response_content
        self.response_headers = response_headers or {"content-type": "application/json"}
        self.requests: list[httpx.Request] = []

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Handle the sync request and return a mock response."""
        self.requests.append(request)
        return httpx.Response(
            status_code=self.response_status,
            headers=self.response_headers,
            content=self.response_content,
        )

    def close(self) -> None:
        """Close the transport."""
        pass


class ErrorMockAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport that raises errors."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Raise the configured error."""
        raise self.error

    async def aclose(self) -> None:
        """Close the transport."""
        pass


class ErrorMockSyncTransport(httpx.BaseTransport):
    """Mock sync transport that raises errors."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Raise the configured error."""
        raise self.error

    def close(self) -> None:
        """Close the transport."""
        pass


class FailingAsyncStream(httpx.AsyncByteStream):
    """Response body that fails after the first chunk."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield b'{"clientId": '
        raise self.error


class FailingSyncStream(httpx.SyncByteStream):
    """Response body that fails after the first chunk."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def __iter__(self) -> Iterator[bytes]:
        yield b'{"clientId": '
        raise self.error


class StreamErrorAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport whose response body fails mid-stream."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, stream=FailingAsyncStream(self.error))


class StreamErrorSyncTransport(httpx.BaseTransport):
    """Mock sync transport whose response body fails mid-stream."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, stream=FailingSyncStream(self.error))


GZIP_HEADERS = {"content-type": "application/json", "content-encoding": "gzip"}


class RawAsyncStream(httpx.AsyncByteStream):
    """Response body yielding fixed raw bytes, undecoded."""

    def __init__(self, raw: bytes) -> None:
        self.raw = raw

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield self.raw


class RawSyncStream(httpx.SyncByteStream):
    """Response body yielding fixed raw bytes, undecoded."""

    def __init__(self, raw: bytes) -> None:
        self.raw = raw

    def __iter__(self) -> Iterator[bytes]:
        yield self.raw


class BadGzipAsyncTransport(httpx.AsyncBaseTransport):
    """Mock async transport answering with a gzip-labelled body that is not gzip."""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers=GZIP_HEADERS, stream=RawAsyncStream(b"not gzip at all"))


class BadGzipSyncTransport(httpx.BaseTransport):
    """Mock sync transport answering with a gzip-labelled body that is not gzip."""

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers=GZIP_HEADERS, stream=RawSyncStream(b"not gzip at all"))


def json_body(data: dict) -> bytes:
    return json.dumps(data).encode("utf-8")


@pytest.fixture
def options() -> RegistrationOptions:
    """Options with the default provider."""
    return RegistrationOptions(endpoint=ENDPOINT, access_token=TOKEN)


@pytest.fixture
def options_mapping() -> dict:
    """Loose options mapping as accepted by the module-level operations."""
    return {"endpoint": ENDPOINT, "accessToken": TOKEN}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment toggles from leaking into tests."""
    for name in (
        "KEYCLOAK_REGISTRATION_TRACE",
        "KEYCLOAK_REGISTRATION_ENDPOINT",
        "KEYCLOAK_REGISTRATION_ACCESS_TOKEN",
        "KEYCLOAK_REGISTRATION_PROVIDER",
        "NODE_TLS_REJECT_UNAUTHORIZED",
        "SSL_CERT_VERIFY",
    ):
        monkeypatch.delenv(name, raising=False)
