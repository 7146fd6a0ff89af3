"""Content entity models.

A content item returned by Squidex looks like::

    {
        "id": "4f3c...",
        "created": "2024-01-01T00:00:00Z",
        "createdBy": "subject:123",
        "lastModified": "2024-01-02T00:00:00Z",
        "lastModifiedBy": "client:my-app:default",
        "version": 3,
        "status": "Published",
        "data": {"title": {"iv": "Hello"}}
    }

``SquidexEntityBase`` is generic over the ``data`` payload so each schema
can declare its own typed payload model.
"""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

TData = TypeVar("TData")


class SquidexEntityBase(BaseModel, Generic[TData]):
    """A content item: identifier, payload and server-owned metadata.

    Examples:
        >>> class ArticleData(BaseModel):
        ...     title: dict[str, str]
        >>> class Article(SquidexEntityBase[ArticleData]):
        ...     pass
    """

    id: str
    data: TData
    created: datetime | None = None
    created_by: str | None = Field(None, alias="createdBy")
    last_modified: datetime | None = Field(None, alias="lastModified")
    last_modified_by: str | None = Field(None, alias="lastModifiedBy")
    version: int | None = None
    status: str | None = None
    is_pending: bool = Field(False, exclude=True)

    model_config = {"populate_by_name": True}

    def mark_as_updated(self) -> None:
        """Flag the entity as changed on the server.

        The local metadata (version, timestamps) is stale until the entity
        is fetched again.
        """
        self.is_pending = True


TEntity = TypeVar("TEntity", bound=SquidexEntityBase)  # type: ignore[type-arg]


class SquidexEntities(BaseModel, Generic[TEntity]):
    """A page of content items plus the total number of matches."""

    total: int = 0
    items: list[TEntity] = Field(default_factory=list)


class DynamicContent(SquidexEntityBase[dict[str, Any]]):
    """Content item with an untyped payload, for schemas without a model."""
