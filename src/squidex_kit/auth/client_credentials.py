"""OAuth2 client-credentials authentication against the Squidex identity server.

Squidex issues access tokens for app clients at
``{service_url}/identity-server/connect/token``. Tokens are cached until
shortly before they expire; concurrent callers share one token request.
"""

import asyncio
import logging
import time

import httpx
from pydantic import SecretStr

from ..exceptions import AuthenticationError
from ..protocols import AsyncHTTPClient
from ..utils.guard import not_none, not_null_or_empty

logger = logging.getLogger(__name__)

TOKEN_PATH = "identity-server/connect/token"
DEFAULT_SCOPE = "squidex-api"
DEFAULT_TOKEN_LIFETIME = 3600.0


class ClientCredentialsAuth:
    """Authenticator using the OAuth2 client-credentials grant.

    Args:
        service_url: Base URL of the Squidex service
        client_id: App client id (``"{app}:{client}"``)
        client_secret: App client secret
        scope: Requested scope
        http_client: Transport for token requests; a short-lived
            ``httpx.AsyncClient`` is used when omitted
        expiry_margin: Seconds before expiry at which a token is renewed
    """

    def __init__(
        self,
        service_url: str | httpx.URL,
        client_id: str,
        client_secret: str | SecretStr,
        *,
        scope: str = DEFAULT_SCOPE,
        http_client: AsyncHTTPClient | None = None,
        expiry_margin: float = 60.0,
    ) -> None:
        not_none(service_url, "service_url")
        not_null_or_empty(client_id, "client_id")
        not_none(client_secret, "client_secret")

        base = httpx.URL(str(service_url))
        self._token_url = base.copy_with(path=base.path.rstrip("/") + "/").join(TOKEN_PATH)
        self._client_id = client_id
        self._client_secret = (
            client_secret if isinstance(client_secret, SecretStr) else SecretStr(client_secret)
        )
        self._scope = scope
        self._http_client = http_client
        self._expiry_margin = expiry_margin

        self._token: str | None = None
        self._expires_at = 0.0
        self._lock = asyncio.Lock()

    @property
    def token_url(self) -> httpx.URL:
        """URL of the token endpoint."""
        return self._token_url

    async def get_bearer_token(self) -> str:
        """Return a valid access token, requesting a new one if needed."""
        async with self._lock:
            if self._token is not None and time.monotonic() < self._expires_at:
                return self._token

            token, lifetime = await self._acquire_token()
            self._token = token
            self._expires_at = time.monotonic() + max(lifetime - self._expiry_margin, 0.0)
            return token

    def invalidate(self) -> None:
        """Drop the cached token so the next call requests a new one."""
        self._token = None
        self._expires_at = 0.0

    async def _acquire_token(self) -> tuple[str, float]:
        form = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret.get_secret_value(),
            "scope": self._scope,
        }

        logger.debug(f"Requesting access token for client '{self._client_id}'")

        if self._http_client is not None:
            response = await self._http_client.request("POST", self._token_url, data=form)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.request("POST", self._token_url, data=form)

        if not response.is_success:
            raise AuthenticationError(
                f"Token request failed (HTTP {response.status_code}): {response.text}",
                status_code=response.status_code,
            )

        payload = response.json()
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            raise AuthenticationError(
                "Token response did not contain an access_token",
                status_code=response.status_code,
            )

        lifetime = float(payload.get("expires_in") or DEFAULT_TOKEN_LIFETIME)
        logger.info(f"Acquired access token for client '{self._client_id}' ({lifetime:.0f}s)")
        return token, lifetime

    def __repr__(self) -> str:
        return f"ClientCredentialsAuth(client_id={self._client_id!r}, url='{self._token_url}')"
