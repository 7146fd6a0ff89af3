"""Content clients for the Squidex API."""

from .base import BaseContentClient
from .content_client import ContentClient

__all__ = [
    "BaseContentClient",
    "ContentClient",
]
