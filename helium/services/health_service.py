"""Health Service — liveness probe of document store connectivity.

Invariants:
    - Issues one trivial container query against the configured database
    - Duration recorded as the "healthcheck duration" metric, success or failure
    - Failure message names the underlying fault
"""

import logging

from helium.config import StoreConfig
from helium.core.errors import DocumentStoreError, UpstreamFaultError
from helium.core.query_builder import build_health_probe
from helium.core.repository_protocols import DocumentStore, Telemetry
from helium.infrastructure.telemetry import track_duration

logger = logging.getLogger(__name__)

HEALTHY_MESSAGE = "Successfully reached healthcheck endpoint"


class HealthService:
    def __init__(self, store: DocumentStore, telemetry: Telemetry, config: StoreConfig):
        self.store = store
        self.telemetry = telemetry
        self.config = config

    async def check(self) -> str:
        """Return the healthy message or raise UpstreamFaultError."""
        self.telemetry.track_event("healthcheck called")
        with track_duration(self.telemetry, "healthcheck duration"):
            try:
                await self.store.query_collections(self.config.database, build_health_probe())
            except DocumentStoreError as e:
                logger.error(f"Healthcheck failed: {e}")
                raise UpstreamFaultError(
                    f"Application failed to reach database: {e}",
                ) from e
        return HEALTHY_MESSAGE
