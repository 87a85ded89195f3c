"""
Core modules for keycloak_client_registration.
"""
from .base_client import AsyncRegistrationClient, SyncRegistrationClient
from .request_builder import (
    build_body,
    build_headers,
    build_registration_request,
    build_request,
)
from .response_interpreter import aread_outcome, interpret, read_outcome, settle

__all__ = [
    "AsyncRegistrationClient",
    "SyncRegistrationClient",
    "build_body",
    "build_headers",
    "build_registration_request",
    "build_request",
    "aread_outcome",
    "interpret",
    "read_outcome",
    "settle",
]
