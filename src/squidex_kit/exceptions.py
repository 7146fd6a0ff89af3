"""Exception hierarchy for squidex-kit.

All errors raised by the library derive from ``SquidexError``. Errors
returned by the Squidex API derive from ``RemoteApiError`` and carry the
HTTP status code of the failed response.
"""

from typing import Any


class SquidexError(Exception):
    """Base class for all squidex-kit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(SquidexError, ValueError):
    """Raised when a required argument is missing, empty or malformed.

    Raised before any request is sent.
    """

    def __init__(self, message: str, argument_name: str | None = None) -> None:
        super().__init__(message)
        self.argument_name = argument_name


class ConfigurationError(SquidexError):
    """Raised when configuration cannot be loaded or validated."""


class RemoteApiError(SquidexError):
    """Raised when the Squidex API answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code


class ValidationError(RemoteApiError):
    """HTTP 400: the request payload was rejected."""


class AuthenticationError(RemoteApiError):
    """HTTP 401, or a bearer token could not be acquired."""


class AuthorizationError(RemoteApiError):
    """HTTP 403: the client lacks permission for the operation."""


class NotFoundError(RemoteApiError):
    """HTTP 404: the content item or schema does not exist."""


class ConflictError(RemoteApiError):
    """HTTP 409: the content item already exists or changed concurrently."""


class ServerError(RemoteApiError):
    """HTTP 5xx."""
