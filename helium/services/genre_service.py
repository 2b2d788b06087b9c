"""Genre Service — flat list of genre names.

Invariants:
    - Returns bare strings (SELECT VALUE root.id), never documents
    - Store fault → UpstreamFaultError (500)
"""

import logging

from helium.config import StoreConfig
from helium.core.errors import DocumentStoreError, UpstreamFaultError
from helium.core.query_builder import CROSS_PARTITION, build_genre_names
from helium.core.repository_protocols import DocumentStore, Telemetry

logger = logging.getLogger(__name__)


class GenreService:
    def __init__(self, store: DocumentStore, telemetry: Telemetry, config: StoreConfig):
        self.store = store
        self.telemetry = telemetry
        self.config = config

    async def list_names(self) -> list[str]:
        self.telemetry.track_event("get all genres")
        try:
            return await self.store.query(
                self.config.database, self.config.collection,
                build_genre_names(), CROSS_PARTITION,
            )
        except DocumentStoreError as e:
            logger.error(f"Failed to get all Genres: {e}", extra={"resource": "Genre"})
            raise UpstreamFaultError("Failed to get all Genres") from e
