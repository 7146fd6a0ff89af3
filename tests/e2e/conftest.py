"""E2E test configuration and fixtures.

End-to-end tests run against an existing Squidex instance and are
skipped unless enabled with ``--e2e`` or ``RUN_E2E_TESTS=true``.

Required environment variables:
    SQUIDEX_E2E_URL: Base URL of the Squidex service
    SQUIDEX_E2E_APP: Application name
    SQUIDEX_E2E_CLIENT_ID / SQUIDEX_E2E_CLIENT_SECRET: App client credentials
    SQUIDEX_E2E_SCHEMA: Schema with an invariant string field ``title``
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

import pytest

from squidex_kit import ContentClient, DynamicContent, SquidexConfig


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        pytest.skip(f"{name} is not set")
    return value


@pytest.fixture
def e2e_config() -> SquidexConfig:
    """Build configuration from SQUIDEX_E2E_* variables."""
    return SquidexConfig(
        url=_require_env("SQUIDEX_E2E_URL"),
        app_name=_require_env("SQUIDEX_E2E_APP"),
        client_id=_require_env("SQUIDEX_E2E_CLIENT_ID"),
        client_secret=_require_env("SQUIDEX_E2E_CLIENT_SECRET"),
        _env_file=None,
    )


@pytest.fixture
async def e2e_client(
    e2e_config: SquidexConfig,
) -> AsyncGenerator[ContentClient[DynamicContent, dict], None]:
    """Create a client for the configured test schema."""
    schema_name = _require_env("SQUIDEX_E2E_SCHEMA")
    async with ContentClient.from_config(e2e_config, schema_name, DynamicContent) as client:
        yield client
