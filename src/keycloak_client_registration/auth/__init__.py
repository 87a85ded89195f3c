"""
Auth handlers for keycloak_client_registration.
"""
from .auth_handler import AuthHandler, BearerAuthHandler, bearer_auth_handler

__all__ = [
    "AuthHandler",
    "BearerAuthHandler",
    "bearer_auth_handler",
]
