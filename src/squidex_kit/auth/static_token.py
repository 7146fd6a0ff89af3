"""Fixed bearer-token authentication."""

from pydantic import SecretStr

from ..exceptions import InvalidArgumentError


class StaticTokenAuth:
    """Authenticator that always returns the same token.

    Useful for tokens issued out of band and for tests.

    Example:
        >>> auth = StaticTokenAuth("eyJhbGciOi...")
        >>> token = await auth.get_bearer_token()
    """

    def __init__(self, token: str | SecretStr) -> None:
        value = token.get_secret_value() if isinstance(token, SecretStr) else token
        if not value or not value.strip():
            raise InvalidArgumentError("token cannot be empty", argument_name="token")
        self._token = value

    async def get_bearer_token(self) -> str:
        """Return the configured token."""
        return self._token

    def __repr__(self) -> str:
        return "StaticTokenAuth(token='***')"
