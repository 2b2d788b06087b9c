"""Request Logging — one structured log line and one metrics sample per request.

Invariants:
    - Every response is logged with method, path, status_code and duration_ms
    - Every response is counted on helium_api_requests_total and observed on
      helium_api_request_duration_seconds, labelled by route template
      (never the raw path, so ids do not become label values)
    - Unhandled exceptions are logged, counted as 500 and re-raised to the error handlers
"""

import logging
import time

from fastapi import FastAPI, Request
from starlette.routing import Match

from helium.infrastructure.metrics import api_request_duration_histogram, api_requests_total

logger = logging.getLogger("helium.requests")

UNMATCHED_ENDPOINT = "<unmatched>"


def _route_template(request: Request) -> str:
    for route in request.app.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return getattr(route, "path", UNMATCHED_ENDPOINT)
    return UNMATCHED_ENDPOINT


def _observe(request: Request, status_code: int, seconds: float) -> None:
    labels = {
        "method": request.method,
        "endpoint": _route_template(request),
        "status_code": str(status_code),
    }
    api_requests_total.labels(**labels).inc()
    api_request_duration_histogram.labels(**labels).observe(seconds)


def register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        extra = {"method": request.method, "path": request.url.path}
        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - start
            extra["duration_ms"] = round(elapsed * 1000, 3)
            _observe(request, 500, elapsed)
            logger.exception(f"{request.method} {request.url.path} failed", extra=extra)
            raise
        elapsed = time.perf_counter() - start
        _observe(request, response.status_code, elapsed)
        extra["status_code"] = response.status_code
        extra["duration_ms"] = round(elapsed * 1000, 3)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}", extra=extra,
        )
        return response
