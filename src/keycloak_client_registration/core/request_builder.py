"""
Request builder utilities for keycloak_client_registration.
"""
import json
import logging
from typing import Any, Dict, Optional

from ..auth.auth_handler import AuthHandler, bearer_auth_handler
from ..config import RegistrationOptions
from ..types import RequestDescriptor

logger = logging.getLogger("keycloak_client_registration.request_builder")

JSON_CONTENT_TYPE = "application/json"


def build_request(access_token: str, *segments: Any) -> RequestDescriptor:
    """Build a request descriptor from an access token and URI segments.

    Segments are joined with "/" exactly as given: no encoding, no
    normalisation, no trailing-slash handling.
    """
    uri = "/".join(str(segment) for segment in segments)
    logger.debug(f"build_request: uri={uri}")
    return RequestDescriptor(uri=uri, auth={"bearer": access_token})


def build_registration_request(
    options: RegistrationOptions,
    *resource: Any,
    body: Optional[Any] = None,
) -> RequestDescriptor:
    """Build the descriptor for a registration call.

    The URI is <endpoint>/<provider> for collection calls and
    <endpoint>/<provider>/<client_id> for calls on a single client. A
    resource segment is used as given, even when it is None.
    """
    descriptor = build_request(
        options.access_token, options.endpoint, options.provider.value, *resource
    )
    descriptor.body = body
    return descriptor


def build_headers(
    descriptor: RequestDescriptor,
    headers: Optional[Dict[str, str]] = None,
    auth_handler: AuthHandler = bearer_auth_handler,
) -> Dict[str, str]:
    """Build request headers."""
    result = dict(headers or {})
    lowered = {k.lower() for k in result}

    if descriptor.json:
        if "accept" not in lowered:
            result["accept"] = JSON_CONTENT_TYPE
        if descriptor.has_body and "content-type" not in lowered:
            result["content-type"] = JSON_CONTENT_TYPE

    # The descriptor credential replaces any same-named default header
    auth_header = auth_handler.get_header(descriptor)
    if auth_header:
        replaced = {k.lower() for k in auth_header}
        result = {k: v for k, v in result.items() if k.lower() not in replaced}
        result.update(auth_header)

    return result


def build_body(descriptor: RequestDescriptor) -> Optional[bytes]:
    """Serialize the descriptor body as JSON."""
    if not descriptor.has_body:
        return None
    return json.dumps(descriptor.body).encode("utf-8")
