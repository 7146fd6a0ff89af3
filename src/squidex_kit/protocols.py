"""Protocols for the collaborators injected into the content client.

Any object with the right shape can be passed in; no inheritance is
required. This keeps the transport and token source replaceable in tests.
"""

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class Authenticator(Protocol):
    """Source of bearer tokens.

    Called once per request; any caching or refresh is the
    implementation's concern.
    """

    async def get_bearer_token(self) -> str:
        """Return the current bearer token."""
        ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Asynchronous HTTP transport, typically ``httpx.AsyncClient``."""

    async def request(self, method: str, url: Any, **kwargs: Any) -> httpx.Response:
        """Send a request and return the response."""
        ...

    async def aclose(self) -> None:
        """Release transport resources."""
        ...
