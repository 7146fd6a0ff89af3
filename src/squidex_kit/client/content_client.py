"""Asynchronous content client for the Squidex API.

One ``ContentClient`` manages the content items of a single schema in a
single application. Every operation issues exactly one HTTP request with
a fresh bearer token and either decodes the response or raises.
"""

import logging
from typing import Any, Generic

import httpx

from ..auth.client_credentials import ClientCredentialsAuth
from ..models.config import SquidexConfig
from ..models.entity import SquidexEntities, TData, TEntity
from ..models.enums import LifecycleVerb
from ..models.query import ContentQuery
from ..protocols import AsyncHTTPClient, Authenticator
from ..utils.guard import not_none, not_null_or_empty
from .base import BaseContentClient

logger = logging.getLogger(__name__)


class ContentClient(BaseContentClient, Generic[TEntity, TData]):
    """Typed client for the content items of one schema.

    Operations come in two flavours: ``*_by_id`` methods take a content id,
    the plain methods take an entity, delegate to the id-based call and
    then mark the entity as updated.

    Example:
        ```python
        import asyncio
        from pydantic import BaseModel
        from squidex_kit import ContentClient, SquidexEntityBase, StaticTokenAuth

        class ArticleData(BaseModel):
            title: dict[str, str]

        class Article(SquidexEntityBase[ArticleData]):
            pass

        async def main():
            async with ContentClient(
                "https://cloud.squidex.io",
                "my-app",
                "articles",
                StaticTokenAuth("token"),
                Article,
            ) as client:
                page = await client.get_many(top=10, order_by="created desc")
                for article in page.items:
                    await client.publish(article)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        service_url: str | httpx.URL,
        app_name: str,
        schema_name: str,
        authenticator: Authenticator,
        entity_type: type[TEntity],
        *,
        http_client: AsyncHTTPClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            service_url: Absolute base URL of the Squidex service
            app_name: Name of the Squidex application
            schema_name: Name of the schema
            authenticator: Source of bearer tokens
            entity_type: Entity model responses are decoded into
            http_client: Shared transport; when omitted the client creates
                and owns an ``httpx.AsyncClient``
            timeout: Timeout for the default transport, in seconds

        Raises:
            InvalidArgumentError: If any required argument is missing or empty
        """
        super().__init__(service_url, app_name, schema_name, authenticator)
        self._entity_type = not_none(entity_type, "entity_type")

        self._client: AsyncHTTPClient = http_client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = http_client is None

        logger.info(
            f"Initialized content client for {self.service_url} "
            f"(app: {self.app_name}, schema: {self.schema_name})"
        )

    @classmethod
    def from_config(
        cls,
        config: SquidexConfig,
        schema_name: str,
        entity_type: type[TEntity],
        *,
        http_client: AsyncHTTPClient | None = None,
    ) -> "ContentClient[TEntity, Any]":
        """Create a client authenticating with the configured app client.

        The token requests and content requests share one transport.

        Args:
            config: Connection settings
            schema_name: Name of the schema
            entity_type: Entity model responses are decoded into
            http_client: Shared transport; created from the config when omitted

        Returns:
            Configured client

        Raises:
            InvalidArgumentError: If schema_name or entity_type is missing,
                checked before a transport is created
        """
        not_null_or_empty(schema_name, "schema_name")
        not_none(entity_type, "entity_type")

        owns_client = http_client is None
        transport: AsyncHTTPClient = http_client or httpx.AsyncClient(
            timeout=config.timeout,
            verify=config.verify_ssl,
            limits=httpx.Limits(
                max_connections=config.max_connections,
                max_keepalive_connections=config.max_connections,
            ),
        )
        authenticator = ClientCredentialsAuth(
            config.get_service_url(),
            config.client_id,
            config.client_secret,
            http_client=transport,
        )

        client = cls(
            config.get_service_url(),
            config.app_name,
            schema_name,
            authenticator,
            entity_type,
            http_client=transport,
        )
        client._owns_client = owns_client
        return client

    @property
    def entity_type(self) -> type[TEntity]:
        """Entity model responses are decoded into."""
        return self._entity_type

    async def __aenter__(self) -> "ContentClient[TEntity, TData]":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it.

        An injected transport is left open for its owner.
        """
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed content client")

    async def _request(self, method: str, path: str = "", json: Any = None) -> httpx.Response:
        url = self._build_url(path)
        headers = self._build_headers(await self.authenticator.get_bearer_token())

        logger.debug(f"{method} {url}")

        if json is None:
            response = await self._client.request(method, url, headers=headers)
        else:
            response = await self._client.request(method, url, json=json, headers=headers)

        logger.debug(f"Response: {response.status_code}")

        self._ensure_response_is_valid(response)
        return response

    # Queries

    async def get_many(
        self,
        skip: int | None = None,
        top: int | None = None,
        filter: str | None = None,
        order_by: str | None = None,
        search: str | None = None,
    ) -> SquidexEntities[TEntity]:
        """List content items.

        ``search`` and ``filter`` are exclusive: when ``search`` is not
        blank the filter is ignored.

        Args:
            skip: Number of items to skip
            top: Maximum number of items to return
            filter: OData filter expression
            order_by: OData order-by expression
            search: Full-text search term

        Returns:
            Matching items and the total count

        Examples:
            >>> page = await client.get_many(skip=20, top=10, filter="data/city/iv eq 'Berlin'")
            >>> page.total
            42
        """
        query = ContentQuery.build(
            skip=skip, top=top, filter=filter, order_by=order_by, search=search
        )
        response = await self._request("GET", query.to_query_string())
        collection_type = SquidexEntities[self._entity_type]  # type: ignore[name-defined]
        return collection_type.model_validate(response.json())

    async def get_one(self, id: str) -> TEntity:
        """Get a content item by id."""
        not_null_or_empty(id, "id")

        response = await self._request("GET", f"{id}/")
        return self._entity_type.model_validate(response.json())

    # Mutations by id

    async def create(self, id: str, data: TData) -> TEntity:
        """Create a content item.

        Args:
            id: Id of the new item
            data: Payload of the new item

        Returns:
            The created entity as returned by the server
        """
        not_none(data, "data")
        not_null_or_empty(id, "id")

        response = await self._request("POST", f"{id}/", json=self._serialize_data(data))
        return self._entity_type.model_validate(response.json())

    async def update_by_id(self, id: str, data: TData) -> None:
        """Replace the payload of a content item."""
        not_none(data, "data")
        not_null_or_empty(id, "id")

        await self._request("PUT", f"{id}/", json=self._serialize_data(data))

    async def publish_by_id(self, id: str) -> None:
        """Publish a content item."""
        await self._change_status(id, LifecycleVerb.PUBLISH)

    async def unpublish_by_id(self, id: str) -> None:
        """Unpublish a content item."""
        await self._change_status(id, LifecycleVerb.UNPUBLISH)

    async def archive_by_id(self, id: str) -> None:
        """Archive a content item."""
        await self._change_status(id, LifecycleVerb.ARCHIVE)

    async def restore_by_id(self, id: str) -> None:
        """Restore an archived content item."""
        await self._change_status(id, LifecycleVerb.RESTORE)

    async def delete_by_id(self, id: str) -> None:
        """Delete a content item."""
        not_null_or_empty(id, "id")

        await self._request("DELETE", f"{id}/")

    async def _change_status(self, id: str, verb: LifecycleVerb) -> None:
        not_null_or_empty(id, "id")

        await self._request("PUT", f"{id}/{verb.value}/")

    # Mutations by entity

    async def update(self, entity: TEntity) -> None:
        """Send the entity's payload and mark the entity as updated."""
        not_none(entity, "entity")

        await self.update_by_id(entity.id, entity.data)

        entity.mark_as_updated()

    async def publish(self, entity: TEntity) -> None:
        """Publish the entity and mark it as updated."""
        not_none(entity, "entity")

        await self.publish_by_id(entity.id)

        entity.mark_as_updated()

    async def unpublish(self, entity: TEntity) -> None:
        """Unpublish the entity and mark it as updated."""
        not_none(entity, "entity")

        await self.unpublish_by_id(entity.id)

        entity.mark_as_updated()

    async def archive(self, entity: TEntity) -> None:
        """Archive the entity and mark it as updated."""
        not_none(entity, "entity")

        await self.archive_by_id(entity.id)

        entity.mark_as_updated()

    async def restore(self, entity: TEntity) -> None:
        """Restore the entity and mark it as updated."""
        not_none(entity, "entity")

        await self.restore_by_id(entity.id)

        entity.mark_as_updated()

    async def delete(self, entity: TEntity) -> None:
        """Delete the entity and mark it as updated."""
        not_none(entity, "entity")

        await self.delete_by_id(entity.id)

        entity.mark_as_updated()
