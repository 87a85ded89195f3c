"""
Configuration for keycloak_client_registration.
"""
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .console import mask_sensitive
from .types import Provider

logger = logging.getLogger("keycloak_client_registration.config")

ENV_PREFIX = "KEYCLOAK_REGISTRATION_"
DEFAULT_PROVIDER = Provider.DEFAULT


def coerce_provider(provider: Union[Provider, str, None]) -> Provider:
    """Resolve a provider value, falling back to the default provider."""
    if not provider:
        return DEFAULT_PROVIDER
    if isinstance(provider, Provider):
        return provider
    try:
        return Provider(provider)
    except ValueError:
        valid = sorted(p.value for p in Provider)
        raise ValueError(f"Invalid provider: {provider}. Must be one of: {valid}") from None


@dataclass(frozen=True)
class RegistrationOptions:
    """Per-call options for the client registration API.

    - endpoint: The API endpoint, e.g.
      http://localhost:8080/auth/realms/master/clients-registrations
    - access_token: The initial access token sent as a bearer credential
    - provider: The registration provider (default, openid-connect,
      saml2-entity-descriptor)

    Neither endpoint nor access_token is validated here; a bad endpoint
    surfaces as a transport error when the request is sent.
    """

    endpoint: str
    access_token: str
    provider: Provider = DEFAULT_PROVIDER

    def __post_init__(self):
        object.__setattr__(self, "provider", coerce_provider(self.provider))

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RegistrationOptions":
        """Build options from a loose mapping.

        Accepts ``endpoint``, ``accessToken`` / ``access_token`` and an
        optional ``provider``.
        """
        access_token = options.get("accessToken", options.get("access_token"))
        return cls(
            endpoint=options.get("endpoint"),
            access_token=access_token,
            provider=options.get("provider"),
        )

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "RegistrationOptions":
        """Build options from <prefix>ENDPOINT, <prefix>ACCESS_TOKEN and <prefix>PROVIDER."""
        endpoint = os.environ.get(f"{prefix}ENDPOINT")
        access_token = os.environ.get(f"{prefix}ACCESS_TOKEN")
        if not endpoint:
            logger.warning(f"from_env: {prefix}ENDPOINT is not set")
        if not access_token:
            logger.warning(f"from_env: {prefix}ACCESS_TOKEN is not set")
        return cls(
            endpoint=endpoint,
            access_token=access_token,
            provider=os.environ.get(f"{prefix}PROVIDER"),
        )

    def __repr__(self) -> str:
        """Safe repr that masks the access token."""
        return (
            f"RegistrationOptions(endpoint={self.endpoint!r}, "
            f"access_token={mask_sensitive(self.access_token)!r}, "
            f"provider={self.provider.value!r})"
        )


def coerce_options(
    options: Union[RegistrationOptions, Mapping[str, Any]],
) -> RegistrationOptions:
    """Accept RegistrationOptions or a loose options mapping."""
    if isinstance(options, RegistrationOptions):
        return options
    return RegistrationOptions.from_mapping(options)


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


@dataclass
class ClientConfig:
    """Client configuration.

    verify=None defers to the environment: TLS verification stays on unless
    NODE_TLS_REJECT_UNAUTHORIZED=0 or SSL_CERT_VERIFY=0 is set.
    """

    timeout: Union[TimeoutConfig, float, None] = None
    headers: Dict[str, str] = field(default_factory=dict)
    verify: Optional[bool] = None
    trace: bool = False


# Default values
DEFAULT_TIMEOUT = TimeoutConfig()


@dataclass
class ResolvedConfig:
    """Resolved client configuration with defaults applied."""

    timeout: TimeoutConfig
    headers: Dict[str, str]
    verify: bool
    trace: bool


def _is_ssl_verify_disabled_by_env() -> bool:
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


def _is_trace_enabled_by_env() -> bool:
    return os.environ.get(f"{ENV_PREFIX}TRACE", "").lower() in ("1", "true", "yes")


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def resolve_config(config: Optional[ClientConfig] = None) -> ResolvedConfig:
    """Resolve client configuration with defaults."""
    config = config or ClientConfig()
    verify = config.verify
    if verify is None:
        verify = not _is_ssl_verify_disabled_by_env()
        if not verify:
            logger.warning("TLS verification disabled by environment")

    return ResolvedConfig(
        timeout=normalize_timeout(config.timeout),
        headers=dict(config.headers),
        verify=verify,
        trace=config.trace or _is_trace_enabled_by_env(),
    )
