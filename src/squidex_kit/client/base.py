"""Request construction and response validation for the content API.

This module holds the synchronous plumbing shared by content clients:
argument checks on construction, resource URL building, header
assembly, payload serialization and mapping of error responses to
exceptions.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import BaseModel

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    RemoteApiError,
    ServerError,
    ValidationError,
)
from ..protocols import Authenticator
from ..utils.guard import not_none, not_null_or_empty

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Squidex API failed with internal error."
ERROR_MESSAGE_PREFIX = "Squidex Request failed: "

_STATUS_ERRORS: dict[int, type[RemoteApiError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    409: ConflictError,
}


class BaseContentClient:
    """Shared plumbing for clients bound to one app and one schema.

    Not intended to be used directly - use ContentClient instead.
    """

    def __init__(
        self,
        service_url: str | httpx.URL,
        app_name: str,
        schema_name: str,
        authenticator: Authenticator,
    ) -> None:
        """Validate and store the client configuration.

        Args:
            service_url: Absolute base URL of the Squidex service
            app_name: Name of the Squidex application
            schema_name: Name of the schema whose content is managed
            authenticator: Source of bearer tokens

        Raises:
            InvalidArgumentError: If any argument is missing or empty
        """
        not_none(service_url, "service_url")
        not_none(authenticator, "authenticator")
        not_null_or_empty(schema_name, "schema_name")
        not_null_or_empty(app_name, "app_name")

        url = httpx.URL(str(service_url))
        if not url.is_absolute_url:
            raise InvalidArgumentError(
                f"service_url must be an absolute URL, got '{service_url}'",
                argument_name="service_url",
            )

        # Keep the service path when resolving relative resource paths.
        self._service_url = url.copy_with(path=url.path.rstrip("/") + "/")
        self._app_name = app_name
        self._schema_name = schema_name
        self._authenticator = authenticator

    @property
    def service_url(self) -> httpx.URL:
        """Base URL of the Squidex service."""
        return self._service_url

    @property
    def app_name(self) -> str:
        """Name of the Squidex application."""
        return self._app_name

    @property
    def schema_name(self) -> str:
        """Name of the schema this client manages."""
        return self._schema_name

    @property
    def authenticator(self) -> Authenticator:
        """Source of bearer tokens."""
        return self._authenticator

    def _build_url(self, path: str = "") -> httpx.URL:
        """Resolve ``api/content/{app}/{schema}/{path}`` against the service URL.

        Args:
            path: Suffix such as ``""``, ``"?$top=10"``, ``"{id}/"`` or
                ``"{id}/publish/"``

        Returns:
            Absolute request URL
        """
        return self._service_url.join(f"api/content/{self._app_name}/{self._schema_name}/{path}")

    def _build_headers(self, token: str) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    @staticmethod
    def _serialize_data(data: Any) -> Any:
        """Convert a data payload to a JSON-compatible value."""
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", by_alias=True)
        if isinstance(data, Mapping):
            return dict(data)
        return data

    @staticmethod
    def _ensure_response_is_valid(response: httpx.Response) -> None:
        """Raise if the response has a non-success status.

        The raw response body becomes the error message; a blank body is
        replaced by a fixed fallback message.

        Args:
            response: Response with its body already read

        Raises:
            RemoteApiError: Or the status-specific subclass
        """
        if response.is_success:
            return

        body = response.text
        if not body or not body.strip():
            message = FALLBACK_ERROR_MESSAGE
        else:
            message = f"{ERROR_MESSAGE_PREFIX}{body}"

        status_code = response.status_code
        if status_code in _STATUS_ERRORS:
            error_type = _STATUS_ERRORS[status_code]
        elif 500 <= status_code < 600:
            error_type = ServerError
        else:
            error_type = RemoteApiError

        raise error_type(message, status_code=status_code)
