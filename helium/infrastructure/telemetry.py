"""Telemetry — named events and duration metrics recorded in the Prometheus registry.

Invariants:
    - Implements the Telemetry protocol (core/repository_protocols.py)
    - Events increment helium_events_total{event}; metrics are observed on
      helium_operation_duration_milliseconds{metric}
    - Every emission is also logged on helium.telemetry with event/metric extras
    - Never raises into the request path; emission failures are logged and dropped
    - Scraping is served by the /metrics mount (main.py)
"""

import logging
import time
from contextlib import contextmanager

from helium.core.repository_protocols import Telemetry
from helium.infrastructure.metrics import events_counter, operation_duration_histogram


class PrometheusTelemetry:
    """Records telemetry as Prometheus samples plus a structured log line."""

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("helium.telemetry")

    def track_event(self, name: str, properties: dict | None = None) -> None:
        try:
            events_counter.labels(event=name).inc()
            self.logger.info(
                f"event: {name}", extra={"event": name, "properties": properties},
            )
        except Exception:
            logging.getLogger(__name__).warning("Failed to emit telemetry event", exc_info=True)

    def track_metric(
        self, name: str, value: float, properties: dict | None = None,
    ) -> None:
        try:
            operation_duration_histogram.labels(metric=name).observe(value)
            self.logger.info(
                f"metric: {name}={value}",
                extra={"metric": name, "value": value, "properties": properties},
            )
        except Exception:
            logging.getLogger(__name__).warning("Failed to emit telemetry metric", exc_info=True)


@contextmanager
def track_duration(telemetry: Telemetry, metric: str, properties: dict | None = None):
    """Record the wall-clock duration (ms) of the wrapped block, even on failure."""
    start = time.perf_counter()
    try:
        yield
    finally:
        telemetry.track_metric(
            metric, round((time.perf_counter() - start) * 1000, 3), properties,
        )
