"""Domain Types — resource discriminators and id helpers shared across layers.

Invariants:
    - ResourceType values are the exact strings stored in the document "type" field
    - Every document id maps to exactly one partition key string in "0".."9"
    - All valid resource types encoded as an Enum — no raw string matching
"""

import re
from enum import Enum
from typing import NewType


DocumentId = NewType("DocumentId", str)
PartitionKey = NewType("PartitionKey", str)

PARTITION_COUNT = 10
_TRAILING_DIGITS = re.compile(r"(\d+)$")


class ResourceType(str, Enum):
    """Document kinds sharing the single physical collection."""
    ACTOR = "Actor"
    MOVIE = "Movie"
    GENRE = "Genre"

    @property
    def plural(self) -> str:
        """URL segment, e.g. "movies"."""
        return f"{self.value.lower()}s"

    @property
    def id_field(self) -> str:
        """Resource-specific id attribute mirrored from "id", e.g. "movieId"."""
        return f"{self.value.lower()}Id"


def partition_key_for(document_id: str) -> PartitionKey:
    """Derive the partition key stamped on newly written documents.

    "tt0076759" -> "9", "nm0000158" -> "8"; ids without trailing digits
    (including generated uuid hex strings ending in a letter) land in "0".
    """
    match = _TRAILING_DIGITS.search(document_id or "")
    if not match:
        return PartitionKey("0")
    return PartitionKey(str(int(match.group(1)) % PARTITION_COUNT))
