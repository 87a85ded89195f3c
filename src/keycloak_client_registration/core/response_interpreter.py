"""
Response interpretation for keycloak_client_registration.

A response is read to completion and classified into exactly one outcome:

- Success: status < 400. The body is parsed as JSON (an empty mapping for
  204 No Content) and the mapping is extended with ``headers``,
  ``statusCode`` and ``statusMessage``. These keys overwrite same-named
  keys of the parsed body.
- StatusFailure: status >= 400. Only the status message is surfaced.
- TransportFailure: the body stream raised before completion.

JSON decoding errors on a success status are not caught here; they
propagate to the caller as json.JSONDecodeError.
"""
import json
import logging
from typing import Dict, List

import httpx

from ..exceptions import RegistrationStatusError
from ..types import (
    Outcome,
    RegistrationResult,
    StatusFailure,
    Success,
    TransportFailure,
)

logger = logging.getLogger("keycloak_client_registration.response_interpreter")

NO_CONTENT = 204


def interpret(
    status_code: int,
    status_message: str,
    headers: Dict[str, str],
    body: bytes,
) -> Outcome:
    """Classify a completed response."""
    if status_code >= 400:
        return StatusFailure(
            status_code=status_code,
            status_message=status_message,
            headers=headers,
        )

    if status_code == NO_CONTENT:
        result: RegistrationResult = {}
    else:
        result = json.loads(body.decode("utf-8"))
        if not isinstance(result, dict):
            raise ValueError(
                f"Expected a JSON object in the response body, got {type(result).__name__}"
            )

    result["headers"] = headers
    result["statusCode"] = status_code
    result["statusMessage"] = status_message
    return Success(result)


def _metadata(response: httpx.Response):
    return response.status_code, response.reason_phrase or "", dict(response.headers)


async def aread_outcome(response: httpx.Response) -> Outcome:
    """Read a streamed response to completion and classify it."""
    chunks: List[bytes] = []
    try:
        async for chunk in response.aiter_bytes():
            chunks.append(chunk)
    except httpx.RequestError as e:
        return TransportFailure(e)

    status_code, status_message, headers = _metadata(response)
    return interpret(status_code, status_message, headers, b"".join(chunks))


def read_outcome(response: httpx.Response) -> Outcome:
    """Read a streamed response to completion and classify it."""
    chunks: List[bytes] = []
    try:
        for chunk in response.iter_bytes():
            chunks.append(chunk)
    except httpx.RequestError as e:
        return TransportFailure(e)

    status_code, status_message, headers = _metadata(response)
    return interpret(status_code, status_message, headers, b"".join(chunks))


def settle(outcome: Outcome) -> RegistrationResult:
    """Return the result of a successful outcome, raise for a failed one.

    Transport failures re-raise the original error after logging it with
    its stack trace.
    """
    if isinstance(outcome, Success):
        return outcome.result

    if isinstance(outcome, StatusFailure):
        raise RegistrationStatusError(
            outcome.status_message,
            status_code=outcome.status_code,
            headers=outcome.headers,
        )

    if isinstance(outcome, TransportFailure):
        logger.error(
            f"Registration request failed: {outcome.error!r}",
            exc_info=(type(outcome.error), outcome.error, outcome.error.__traceback__),
        )
        raise outcome.error

    raise TypeError(f"Unknown outcome: {outcome!r}")
