"""Test doubles and models shared by the test suite."""

from typing import Any

import httpx
from pydantic import BaseModel

from squidex_kit import SquidexEntityBase

SERVICE_URL = "http://localhost:5000"
APP_NAME = "my-app"
SCHEMA_NAME = "articles"
TOKEN = "test-token-12345678"
CONTENT_URL = f"{SERVICE_URL}/api/content/{APP_NAME}/{SCHEMA_NAME}/"


class ArticleData(BaseModel):
    """Payload of the test schema."""

    title: dict[str, str]
    views: dict[str, int] | None = None


class Article(SquidexEntityBase[ArticleData]):
    """Entity of the test schema."""


class RecordingHTTPClient:
    """Fake transport that records requests and replays canned responses."""

    def __init__(self, responses: list[httpx.Response] | None = None):
        self.requests: list[tuple[str, httpx.URL, dict[str, Any]]] = []
        self.responses = list(responses or [])
        self.closed = False

    async def request(self, method, url, **kwargs):
        """Record the request and return the next canned response."""
        self.requests.append((method, httpx.URL(str(url)), kwargs))
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(204)

    async def aclose(self):
        """Mark as closed."""
        self.closed = True


class CountingAuth:
    """Authenticator that hands out numbered tokens."""

    def __init__(self):
        self.calls = 0

    async def get_bearer_token(self) -> str:
        """Return a new token on every call."""
        self.calls += 1
        return f"token-{self.calls}"


class FailingAuth:
    """Authenticator whose token lookup always fails."""

    def __init__(self, error: Exception):
        self.error = error

    async def get_bearer_token(self) -> str:
        """Raise the configured error."""
        raise self.error
