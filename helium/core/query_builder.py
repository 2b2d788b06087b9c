"""Query Builder — canonical Cosmos SQL query shapes per resource type.

Invariants:
    - Pure functions: no IO, no shared state, a fresh QuerySpec per call
    - QuerySpec is frozen; parameters are an ordered tuple fixed at construction
    - The "type" literal is only ever interpolated from ResourceType, never from input
    - Empty, whitespace-only, or absent filter terms resolve to scan-all
    - Filter terms are lower-cased before binding (stored textSearch is lower-case)
"""

from dataclasses import dataclass
from typing import Any

from helium.core.domain_types import ResourceType


@dataclass(frozen=True)
class QueryParameter:
    """Named query parameter, e.g. @id."""
    name: str
    value: Any


@dataclass(frozen=True)
class QuerySpec:
    """Immutable query template plus its bound parameters."""
    query: str
    parameters: tuple[QueryParameter, ...] = ()

    def parameter_list(self) -> list[dict[str, Any]]:
        """Parameters in the SDK wire shape: [{"name": ..., "value": ...}]."""
        return [{"name": p.name, "value": p.value} for p in self.parameters]


@dataclass(frozen=True)
class QueryOptions:
    """Per-call query routing options.

    enable_cross_partition_query must be True whenever the predicate does not
    pin the partition key; otherwise partition_key routes to one partition.
    """
    enable_cross_partition_query: bool = True
    partition_key: str | None = None


CROSS_PARTITION = QueryOptions(enable_cross_partition_query=True)


def _type_predicate(resource_type: ResourceType) -> str:
    return f"root.type = '{ResourceType(resource_type).value}'"


def normalize_filter_term(term: str | None) -> str | None:
    """Strip and lower-case a filter term; None when nothing is left."""
    if term is None:
        return None
    term = term.strip().lower()
    return term or None


def build_scan_all(resource_type: ResourceType) -> QuerySpec:
    """SELECT every document of one type."""
    return QuerySpec(
        query=f"SELECT * FROM root WHERE {_type_predicate(resource_type)}",
    )


def build_filtered_scan(resource_type: ResourceType, term: str) -> QuerySpec:
    """Case-insensitive substring match on textSearch within one type."""
    return QuerySpec(
        query=(
            f"SELECT * FROM root WHERE {_type_predicate(resource_type)}"
            " AND CONTAINS(root.textSearch, @title)"
        ),
        parameters=(QueryParameter("@title", term.lower()),),
    )


def build_list_query(resource_type: ResourceType, term: str | None = None) -> QuerySpec:
    """Scan-all when no usable term, filtered scan otherwise."""
    normalized = normalize_filter_term(term)
    if normalized is None:
        return build_scan_all(resource_type)
    return build_filtered_scan(resource_type, normalized)


def build_by_id(resource_type: ResourceType, document_id: str) -> QuerySpec:
    return QuerySpec(
        query=(
            "SELECT * FROM root WHERE root.id = @id"
            f" AND {_type_predicate(resource_type)}"
        ),
        parameters=(QueryParameter("@id", document_id),),
    )


def build_any_type_by_id(document_id: str) -> QuerySpec:
    """Id lookup without a type predicate (partition key resolution)."""
    return QuerySpec(
        query="SELECT * FROM root WHERE root.id = @id",
        parameters=(QueryParameter("@id", document_id),),
    )


def build_genre_names() -> QuerySpec:
    """Projection of genre ids as bare strings."""
    return QuerySpec(
        query=f"SELECT VALUE root.id FROM root WHERE {_type_predicate(ResourceType.GENRE)}",
    )


def build_health_probe() -> QuerySpec:
    return QuerySpec(query="SELECT * FROM root")
