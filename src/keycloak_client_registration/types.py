"""
Type definitions for keycloak_client_registration.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Literal, Optional, Union


class Provider(str, Enum):
    """Client registration provider exposed by the identity server.

    - DEFAULT: Keycloak client representations
    - OPENID_CONNECT: OpenID Connect dynamic client registration
    - SAML2_ENTITY_DESCRIPTOR: SAML2 entity descriptors as the client representation
    """

    DEFAULT = "default"
    OPENID_CONNECT = "openid-connect"
    SAML2_ENTITY_DESCRIPTOR = "saml2-entity-descriptor"

    def __str__(self) -> str:
        return self.value


# HTTP methods used by the registration API
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Parsed body merged with response metadata (headers, statusCode, statusMessage)
RegistrationResult = Dict[str, Any]


@dataclass
class RequestDescriptor:
    """Request built for a single registration call."""

    uri: str
    auth: Dict[str, str]
    json: bool = True
    body: Optional[Any] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


@dataclass
class Success:
    """Response completed with a status below 400."""

    result: RegistrationResult


@dataclass
class StatusFailure:
    """Response completed with a status of 400 or above."""

    status_code: int
    status_message: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass
class TransportFailure:
    """The request or the response stream failed before completion."""

    error: Exception


Outcome = Union[Success, StatusFailure, TransportFailure]
