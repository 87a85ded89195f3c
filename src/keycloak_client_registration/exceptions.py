"""
Exceptions raised by keycloak_client_registration.

Transport failures are not wrapped: the underlying httpx error is re-raised
as-is. JSON decoding failures on successful responses surface as the
unwrapped json.JSONDecodeError.
"""
from typing import Dict, Optional


class RegistrationError(Exception):
    """Base class for registration errors."""

    code = "REGISTRATION_ERROR"


class RegistrationStatusError(RegistrationError):
    """Raised when the registration endpoint answers with HTTP >= 400.

    The message is exactly the response status message. The response body
    is never attached.
    """

    code = "REGISTRATION_STATUS"

    def __init__(
        self,
        status_message: str,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_message)
        self.status_message = status_message
        self.status_code = status_code
        self.headers = headers or {}

    def __str__(self) -> str:
        return self.status_message

    def __repr__(self) -> str:
        return (
            f"RegistrationStatusError(status_message={self.status_message!r}, "
            f"status_code={self.status_code!r})"
        )
