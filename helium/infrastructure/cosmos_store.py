"""Cosmos Document Store — async wrapper over azure.cosmos.aio with error mapping.

Invariants:
    - One attempt per call: no retry, no backoff
    - CosmosResourceNotFoundError → DocumentNotFoundError; any other Cosmos or
      transport failure → DocumentStoreError (core/errors.py)
    - Queries without a pinned partition key fan out across partitions
    - get_by_id returns None for absent documents instead of raising
    - delete without a partition key resolves it with a cross-partition id query

Design Decisions:
    - Client injected through the constructor: one long-lived CosmosClient per process,
      created in the app lifespan, fakes substituted in tests
"""

import logging
from typing import Any

from azure.core.exceptions import AzureError
from azure.cosmos import exceptions
from azure.cosmos.aio import CosmosClient

from helium.config import StoreConfig
from helium.core.domain_types import DocumentId, PartitionKey
from helium.core.errors import DocumentNotFoundError, DocumentStoreError
from helium.core.query_builder import (
    CROSS_PARTITION, QueryOptions, QuerySpec, build_any_type_by_id,
)

logger = logging.getLogger(__name__)

PARTITION_KEY_FIELD = "partitionKey"


def _map_error(e: Exception, operation: str) -> DocumentStoreError:
    """Translate an SDK failure into the store error family."""
    if isinstance(e, exceptions.CosmosResourceNotFoundError):
        return DocumentNotFoundError(f"NotFound: {e.message}", operation)
    if isinstance(e, exceptions.CosmosHttpResponseError):
        return DocumentStoreError(e.message, operation, status_code=e.status_code)
    return DocumentStoreError(str(e), operation)


class CosmosDocumentStore:
    """Implements the DocumentStore protocol against Azure Cosmos DB (SQL API)."""

    def __init__(self, client: CosmosClient, partition_key_field: str = PARTITION_KEY_FIELD):
        self.client = client
        self.partition_key_field = partition_key_field

    def _container(self, database: str, collection: str):
        return self.client.get_database_client(database).get_container_client(collection)

    async def query(
        self,
        database: str,
        collection: str,
        query_spec: QuerySpec,
        options: QueryOptions = CROSS_PARTITION,
    ) -> list[Any]:
        """Run a parameterized query and materialize every page."""
        kwargs: dict[str, Any] = {}
        if not options.enable_cross_partition_query:
            if options.partition_key is None:
                raise ValueError("partition_key is required for single-partition queries")
            kwargs["partition_key"] = options.partition_key
        container = self._container(database, collection)
        try:
            items = container.query_items(
                query=query_spec.query,
                parameters=query_spec.parameter_list(),
                **kwargs,
            )
            return [item async for item in items]
        except AzureError as e:
            logger.error(f"Cosmos query failed: {e}", extra={"collection": collection})
            raise _map_error(e, "query") from e

    async def get_by_id(
        self, database: str, collection: str,
        partition_key: PartitionKey, document_id: DocumentId,
    ) -> dict | None:
        """Point read; absent documents return None."""
        container = self._container(database, collection)
        try:
            return await container.read_item(item=document_id, partition_key=partition_key)
        except exceptions.CosmosResourceNotFoundError:
            return None
        except AzureError as e:
            logger.error(f"Cosmos read failed: {e}", extra={"document_id": document_id})
            raise _map_error(e, "read") from e

    async def upsert(self, database: str, collection: str, document: dict) -> dict:
        container = self._container(database, collection)
        try:
            return await container.upsert_item(body=document)
        except AzureError as e:
            logger.error(
                f"Cosmos upsert failed: {e}", extra={"document_id": document.get("id")},
            )
            raise _map_error(e, "upsert") from e

    async def delete(
        self,
        database: str,
        collection: str,
        document_id: DocumentId,
        partition_key: PartitionKey | None = None,
    ) -> None:
        """Delete by id. Raises DocumentNotFoundError when the id is absent."""
        if partition_key is None:
            partition_key = await self._resolve_partition_key(database, collection, document_id)
        container = self._container(database, collection)
        try:
            await container.delete_item(item=document_id, partition_key=partition_key)
        except AzureError as e:
            logger.error(f"Cosmos delete failed: {e}", extra={"document_id": document_id})
            raise _map_error(e, "delete") from e

    async def _resolve_partition_key(
        self, database: str, collection: str, document_id: DocumentId,
    ) -> PartitionKey:
        matches = await self.query(
            database, collection, build_any_type_by_id(document_id), CROSS_PARTITION,
        )
        if not matches:
            raise DocumentNotFoundError(f"NotFound: no document with id {document_id}", "delete")
        partition_key = matches[0].get(self.partition_key_field)
        if partition_key is None:
            raise DocumentStoreError(
                f"document {document_id} has no {self.partition_key_field}", "delete",
            )
        return partition_key

    async def query_collections(self, database: str, query_spec: QuerySpec) -> list[dict]:
        """Query the containers of a database (connectivity probe)."""
        try:
            containers = self.client.get_database_client(database).query_containers(
                query=query_spec.query,
                parameters=query_spec.parameter_list(),
            )
            return [c async for c in containers]
        except AzureError as e:
            logger.error(f"Cosmos container query failed: {e}")
            raise _map_error(e, "query_collections") from e

    async def close(self) -> None:
        await self.client.close()


def create_cosmos_store(config: StoreConfig) -> CosmosDocumentStore:
    """Build the process-wide store from resolved startup configuration."""
    client = CosmosClient(config.url, credential=config.key)
    return CosmosDocumentStore(client)
