"""Document Service — CRUD and search orchestration for one resource type.

Invariants:
    - Stateless across requests: received → validated → executed → mapped
    - Every list / id query is issued cross-partition
    - Validation completes before any store call on a write; all violations reported
    - On update the path id is authoritative over any id in the body
    - partitionKey is never taken from the body: an existing document keeps its
      stored key, a new one gets partition_key_for(id), so one id is one document
    - An id owned by another resource type is never overwritten or deleted through
      this type's routes (409 on write, 404 on delete)
    - Store not-found → ResourceNotFoundError (404); any other store fault →
      UpstreamFaultError (500). No retries.
    - Empty list results are not errors

Design Decisions:
    - One generic service parameterized by ResourceType + schema: Actor and
      Movie share the same shape, routes stay one file per resource
"""

import logging
from typing import Any
from uuid import uuid4

from pydantic import BaseModel

from helium.config import StoreConfig
from helium.core.domain_types import DocumentId, ResourceType, partition_key_for
from helium.core.errors import (
    DocumentNotFoundError, DocumentStoreError, ResourceConflictError,
    ResourceNotFoundError, UpstreamFaultError,
)
from helium.core.query_builder import (
    CROSS_PARTITION, QuerySpec, build_any_type_by_id, build_by_id, build_list_query,
)
from helium.core.repository_protocols import DocumentStore, Telemetry
from helium.core.validation import validate_document

logger = logging.getLogger(__name__)


def _with_article(noun: str) -> str:
    return f"{'An' if noun[:1] in 'AEIOU' else 'A'} {noun}"


class DocumentService:
    """Orchestrates one resource type against the shared collection."""

    def __init__(
        self,
        resource_type: ResourceType,
        schema: type[BaseModel],
        store: DocumentStore,
        telemetry: Telemetry,
        config: StoreConfig,
    ):
        self.resource_type = resource_type
        self.schema = schema
        self.store = store
        self.telemetry = telemetry
        self.config = config

    @property
    def _name(self) -> str:
        return self.resource_type.value.lower()

    async def _query(self, query_spec: QuerySpec, failure_message: str) -> list[Any]:
        try:
            return await self.store.query(
                self.config.database, self.config.collection,
                query_spec, CROSS_PARTITION,
            )
        except DocumentStoreError as e:
            logger.error(
                f"{failure_message}: {e}",
                extra={"resource": self.resource_type.value, "collection": self.config.collection},
            )
            raise UpstreamFaultError(failure_message) from e

    async def _upsert(self, document: dict, failure_message: str) -> dict:
        try:
            return await self.store.upsert(
                self.config.database, self.config.collection, document,
            )
        except DocumentStoreError as e:
            logger.error(
                f"{failure_message}: {e}",
                extra={"resource": self.resource_type.value, "document_id": document.get("id")},
            )
            raise UpstreamFaultError(failure_message) from e

    def _stamp(self, payload: dict) -> dict:
        """Fill the write-side fields every stored document carries."""
        payload[self.resource_type.id_field] = payload["id"]
        payload.setdefault("type", self.resource_type.value)
        payload["partitionKey"] = partition_key_for(str(payload["id"]))
        return payload

    def _validated(self, payload: Any) -> dict:
        document = validate_document(self.schema, payload)
        return document.model_dump(mode="json")

    async def _place(self, document: dict, failure_message: str) -> dict:
        """Pin document to the partition of the stored document with the same id."""
        existing = await self._query(build_any_type_by_id(document["id"]), failure_message)
        for stored in existing:
            stored_type = stored.get("type")
            if stored_type != self.resource_type.value:
                logger.warning(
                    f"Refusing to overwrite {stored_type} {document['id']}",
                    extra={"resource": self.resource_type.value, "document_id": document["id"]},
                )
                raise ResourceConflictError(
                    f"{_with_article(stored_type or 'document')} with that ID already exists",
                )
        if existing and existing[0].get("partitionKey"):
            document["partitionKey"] = existing[0]["partitionKey"]
        return document

    async def _write(self, payload: Any, failure_message: str) -> dict:
        document = self._validated(payload)
        document = await self._place(document, failure_message)
        return await self._upsert(document, failure_message)

    # ─── Operations ─────────────────────────────────────────────

    async def list_all(self, term: str | None = None) -> list[dict]:
        """Scan-all, or filtered scan when a search term is given."""
        self.telemetry.track_event(
            f"get all {self.resource_type.plural}", {"filtered": bool(term)},
        )
        return await self._query(
            build_list_query(self.resource_type, term),
            f"Failed to get all {self.resource_type.value}s",
        )

    async def get(self, document_id: DocumentId) -> dict:
        self.telemetry.track_event(f"get {self._name} by id", {"id": document_id})
        results = await self._query(
            build_by_id(self.resource_type, document_id), "Internal Server Error",
        )
        if not results:
            raise ResourceNotFoundError("Not Found")
        return results[0]

    async def create(self, body: Any) -> dict:
        """Validate and upsert a new document, assigning an id when absent."""
        self.telemetry.track_event(f"create {self._name}")
        payload = dict(body) if isinstance(body, dict) else body
        if isinstance(payload, dict):
            if not payload.get("id"):
                payload["id"] = uuid4().hex
            self._stamp(payload)
        return await self._write(payload, "Failed to create object")

    async def update(self, document_id: DocumentId, body: Any) -> dict:
        """Full replace of the document at document_id."""
        self.telemetry.track_event(f"update {self._name}", {"id": document_id})
        payload = dict(body) if isinstance(body, dict) else body
        if isinstance(payload, dict):
            payload["id"] = document_id
            self._stamp(payload)
        return await self._write(payload, "Failed to update resource")

    async def delete(self, document_id: DocumentId) -> None:
        self.telemetry.track_event(f"delete {self._name}", {"id": document_id})
        missing = f"{_with_article(self.resource_type.value)} with that ID does not exist"
        try:
            matches = await self.store.query(
                self.config.database, self.config.collection,
                build_by_id(self.resource_type, document_id), CROSS_PARTITION,
            )
            if not matches:
                raise ResourceNotFoundError(missing)
            await self.store.delete(
                self.config.database, self.config.collection, document_id,
                partition_key=matches[0].get("partitionKey"),
            )
        except DocumentNotFoundError as e:
            logger.info(
                f"Delete of missing {self._name}: {e}",
                extra={"resource": self.resource_type.value, "document_id": document_id},
            )
            raise ResourceNotFoundError(missing) from e
        except DocumentStoreError as e:
            logger.error(
                f"Delete failed: {e}",
                extra={"resource": self.resource_type.value, "document_id": document_id},
            )
            raise UpstreamFaultError(str(e)) from e
