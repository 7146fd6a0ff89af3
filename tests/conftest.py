"""Pytest configuration and shared fixtures."""

import os
from collections.abc import AsyncGenerator

import pytest

from squidex_kit import ContentClient, StaticTokenAuth
from tests.fakes import APP_NAME, SCHEMA_NAME, SERVICE_URL, TOKEN, Article, ArticleData


@pytest.fixture
def content_item() -> dict:
    """Create a mock content item response.

    Returns:
        Content item as returned by the Squidex API
    """
    return {
        "id": "abc",
        "created": "2024-01-01T00:00:00Z",
        "createdBy": "subject:1",
        "lastModified": "2024-01-02T00:00:00Z",
        "lastModifiedBy": "client:my-app:default",
        "version": 3,
        "status": "Draft",
        "data": {"title": {"iv": "Hello"}, "views": {"iv": 7}},
    }


@pytest.fixture
def content_list(content_item: dict) -> dict:
    """Create a mock content listing response.

    Returns:
        Listing with two items and a total count
    """
    second = {**content_item, "id": "def", "data": {"title": {"iv": "World"}}}
    return {"total": 12, "items": [content_item, second]}


@pytest.fixture
def article(content_item: dict) -> Article:
    """Create an entity decoded from the mock content item."""
    return Article.model_validate(content_item)


@pytest.fixture
async def content_client() -> AsyncGenerator[ContentClient[Article, ArticleData], None]:
    """Create a client using the default transport (mock it with respx)."""
    client = ContentClient(SERVICE_URL, APP_NAME, SCHEMA_NAME, StaticTokenAuth(TOKEN), Article)
    yield client
    await client.close()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add the --e2e command line option."""
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests against a Squidex instance",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip e2e tests unless explicitly enabled."""
    run_e2e = config.getoption("--e2e") or os.environ.get("RUN_E2E_TESTS", "").lower() == "true"

    if not run_e2e:
        skip_e2e = pytest.mark.skip(
            reason="E2E tests disabled. Use --e2e flag or RUN_E2E_TESTS=true"
        )
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)
