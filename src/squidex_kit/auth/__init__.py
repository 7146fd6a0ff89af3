"""Authenticators producing bearer tokens for Squidex requests."""

from .client_credentials import ClientCredentialsAuth
from .static_token import StaticTokenAuth

__all__ = [
    "ClientCredentialsAuth",
    "StaticTokenAuth",
]
