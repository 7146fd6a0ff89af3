"""Configuration for squidex-kit.

Settings are read from keyword arguments, environment variables prefixed
with ``SQUIDEX_`` and an optional ``.env`` file, in that order of
precedence.

Example ``.env``::

    SQUIDEX_URL=https://cloud.squidex.io
    SQUIDEX_APP_NAME=my-app
    SQUIDEX_CLIENT_ID=my-app:default
    SQUIDEX_CLIENT_SECRET=...
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SquidexConfig(BaseSettings):
    """Connection settings for a Squidex application."""

    url: str = Field(..., description="Base URL of the Squidex service")
    app_name: str = Field(..., min_length=1, description="Squidex application name")
    client_id: str = Field(..., min_length=1, description="OAuth client id")
    client_secret: SecretStr = Field(..., description="OAuth client secret")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(10, gt=0, description="Connection pool size")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")

    model_config = SettingsConfigDict(
        env_prefix="SQUIDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return value

    @field_validator("app_name", "client_id")
    @classmethod
    def _validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value cannot be blank")
        return value

    def get_service_url(self) -> str:
        """Return the service URL with exactly one trailing slash."""
        return self.url.rstrip("/") + "/"

    def get_client_secret(self) -> str:
        """Return the plain client secret."""
        return self.client_secret.get_secret_value()


def load_config(env_file: str | Path | None = None, **overrides: Any) -> SquidexConfig:
    """Load configuration from the environment, a ``.env`` file and overrides.

    Args:
        env_file: Path to a ``.env`` file; ``None`` uses ``./.env`` if present
        **overrides: Values that take precedence over the environment

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file does not exist or validation fails
    """
    if env_file is not None and not Path(env_file).is_file():
        raise ConfigurationError(f"Environment file not found: {env_file}")

    try:
        if env_file is not None:
            config = SquidexConfig(_env_file=env_file, **overrides)  # type: ignore[call-arg]
        else:
            config = SquidexConfig(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug(f"Loaded configuration for app '{config.app_name}' at {config.url}")
    return config
