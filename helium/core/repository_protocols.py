"""Boundary Protocols — contracts between core/services and the infrastructure shell.

Invariants:
    - Services depend on these Protocols, never on azure.* types
    - Store implementations raise DocumentStoreError / DocumentNotFoundError only
    - Telemetry implementations never raise into the request path

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Any, Protocol

from helium.core.domain_types import DocumentId, PartitionKey
from helium.core.query_builder import QueryOptions, QuerySpec


class DocumentStore(Protocol):
    """Contract for the document database — implemented by infrastructure."""

    async def query(
        self,
        database: str,
        collection: str,
        query_spec: QuerySpec,
        options: QueryOptions,
    ) -> list[Any]: ...

    async def get_by_id(
        self, database: str, collection: str,
        partition_key: PartitionKey, document_id: DocumentId,
    ) -> dict | None: ...

    async def upsert(
        self, database: str, collection: str, document: dict,
    ) -> dict: ...

    async def delete(
        self,
        database: str,
        collection: str,
        document_id: DocumentId,
        partition_key: PartitionKey | None = None,
    ) -> None: ...

    async def query_collections(
        self, database: str, query_spec: QuerySpec,
    ) -> list[dict]: ...


class Telemetry(Protocol):
    """Contract for named events and duration metrics."""

    def track_event(self, name: str, properties: dict | None = None) -> None: ...

    def track_metric(
        self, name: str, value: float, properties: dict | None = None,
    ) -> None: ...
