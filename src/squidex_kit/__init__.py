"""squidex-kit: a typed asynchronous client for Squidex content.

This package provides:
- An async content client per app and schema with CRUD operations
- Lifecycle operations (publish, unpublish, archive, restore)
- OData-style listing queries ($skip, $top, $orderby, $search, $filter)
- Typed entities with Pydantic
- Static-token and client-credentials authenticators
"""

from .__version__ import __version__
from .auth import ClientCredentialsAuth, StaticTokenAuth
from .client import ContentClient
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    InvalidArgumentError,
    NotFoundError,
    RemoteApiError,
    ServerError,
    SquidexError,
    ValidationError,
)
from .models import (
    ContentQuery,
    DynamicContent,
    LifecycleVerb,
    SquidexConfig,
    SquidexEntities,
    SquidexEntityBase,
    load_config,
)
from .protocols import AsyncHTTPClient, Authenticator

__all__ = [
    "__version__",
    # Client
    "ContentClient",
    # Authentication
    "StaticTokenAuth",
    "ClientCredentialsAuth",
    # Configuration
    "SquidexConfig",
    "load_config",
    # Models
    "SquidexEntityBase",
    "SquidexEntities",
    "DynamicContent",
    "ContentQuery",
    "LifecycleVerb",
    # Protocols (for dependency injection)
    "Authenticator",
    "AsyncHTTPClient",
    # Exceptions
    "SquidexError",
    "InvalidArgumentError",
    "ConfigurationError",
    "RemoteApiError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
