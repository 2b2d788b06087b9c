"""In-memory Document Store — evaluates the canonical query shapes for route tests.

Invariants:
    - Implements the DocumentStore protocol (core/repository_protocols.py)
    - Understands exactly the shapes built by core/query_builder.py:
      type predicate, CONTAINS(root.textSearch, @title), root.id = @id, SELECT VALUE root.id
    - Returns deep copies so callers never mutate stored documents
    - Uniqueness is per (id, partitionKey), as in Cosmos: an upsert carrying another
      partition key for a known id stores a second document
    - fail_on[operation] = exception makes that operation raise it
    - calls records (operation, args) for every invocation

Design Decisions:
    - Regex over the query text instead of a SQL parser: the builder's output is closed
"""

import copy
import re

from helium.core.errors import DocumentNotFoundError

_TYPE_PREDICATE = re.compile(r"root\.type = '(\w+)'")


class InMemoryDocumentStore:

    def __init__(self, documents: list[dict] | None = None):
        self.documents: list[dict] = []
        self.calls: list[tuple] = []
        self.fail_on: dict[str, Exception] = {}
        for doc in documents or []:
            self.documents.append(copy.deepcopy(doc))

    def _enter(self, operation: str, *args):
        self.calls.append((operation, *args))
        if operation in self.fail_on:
            raise self.fail_on[operation]

    def _find(self, document_id: str, partition_key: str | None = None) -> dict | None:
        return next(
            (
                d for d in self.documents
                if d.get("id") == document_id
                and (partition_key is None or d.get("partitionKey") == partition_key)
            ),
            None,
        )

    def with_id(self, document_id: str) -> list[dict]:
        return [d for d in self.documents if d.get("id") == document_id]

    async def query(self, database, collection, query_spec, options):
        self._enter("query", database, collection, query_spec, options)
        params = {p.name: p.value for p in query_spec.parameters}
        docs = self.documents
        type_match = _TYPE_PREDICATE.search(query_spec.query)
        if type_match:
            docs = [d for d in docs if d.get("type") == type_match.group(1)]
        if "@id" in params:
            docs = [d for d in docs if d.get("id") == params["@id"]]
        if "@title" in params:
            docs = [d for d in docs if params["@title"] in (d.get("textSearch") or "")]
        if query_spec.query.startswith("SELECT VALUE root.id"):
            return [d["id"] for d in docs]
        return copy.deepcopy(docs)

    async def get_by_id(self, database, collection, partition_key, document_id):
        self._enter("get_by_id", database, collection, partition_key, document_id)
        doc = self._find(document_id, partition_key)
        if doc is None:
            return None
        return copy.deepcopy(doc)

    async def upsert(self, database, collection, document):
        self._enter("upsert", database, collection, document)
        stored = copy.deepcopy(document)
        existing = self._find(stored["id"], stored.get("partitionKey"))
        if existing is not None:
            self.documents.remove(existing)
        self.documents.append(stored)
        return copy.deepcopy(stored)

    async def delete(self, database, collection, document_id, partition_key=None):
        self._enter("delete", database, collection, document_id, partition_key)
        doc = self._find(document_id, partition_key)
        if doc is None:
            raise DocumentNotFoundError(
                "NotFound: Entity with the specified id does not exist in the system.",
                "delete",
            )
        self.documents.remove(doc)

    async def query_collections(self, database, query_spec):
        self._enter("query_collections", database, query_spec)
        return [{"id": "movies"}]


class RecordingTelemetry:
    """Telemetry fake that keeps every event and metric."""

    def __init__(self):
        self.events: list[tuple[str, dict | None]] = []
        self.metrics: list[tuple[str, float, dict | None]] = []

    def track_event(self, name, properties=None):
        self.events.append((name, properties))

    def track_metric(self, name, value, properties=None):
        self.metrics.append((name, value, properties))

    @property
    def event_names(self) -> list[str]:
        return [name for name, _ in self.events]
