"""Prometheus metrics for observability."""

from prometheus_client import Counter, Histogram, Info

# Application info
app_info = Info("helium_app", "Helium API application info")
app_info.info({"version": "1.0.0", "component": "helium-api"})

# Telemetry events and operation durations
events_counter = Counter(
    "helium_events_total",
    "Total number of telemetry events by name",
    ["event"],
)

operation_duration_histogram = Histogram(
    "helium_operation_duration_milliseconds",
    "Duration of tracked operations in milliseconds",
    ["metric"],
    buckets=[5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000],
)

# API metrics
api_request_duration_histogram = Histogram(
    "helium_api_request_duration_seconds",
    "API request duration in seconds",
    ["method", "endpoint", "status_code"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

api_requests_total = Counter(
    "helium_api_requests_total",
    "Total API requests",
    ["method", "endpoint", "status_code"],
)
