"""Helium API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map HeliumError → structured JSON responses
    - Store configuration resolved in the lifespan before serving; a missing
      mandatory value aborts startup (StartupConfigMissingError propagates)
    - One CosmosClient per process, closed on shutdown
    - Prometheus samples (telemetry + request metrics) served under /metrics
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from helium.api.error_handlers import register_error_handlers
from helium.api.request_logging import register_request_logging
from helium.api.routes import actors, genres, health, movies
from helium.config import get_settings
from helium.infrastructure.cosmos_store import create_cosmos_store
from helium.infrastructure.observability import setup_logging
from helium.infrastructure.secrets import resolve_store_config
from helium.infrastructure.telemetry import PrometheusTelemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    # python -m helium resolves the config up front and stores it here
    store_config = getattr(app.state, "store_config", None)
    if store_config is None:
        store_config = await resolve_store_config(settings)
    store = create_cosmos_store(store_config)
    app.state.store_config = store_config
    app.state.store = store
    app.state.telemetry = PrometheusTelemetry()
    app.state.telemetry.track_event(f"API Server: Server started on port {settings.port}")
    logger.info("Helium API started")
    try:
        yield
    finally:
        await store.close()
        logger.info("Helium API shutting down")


app = FastAPI(title="Helium", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_request_logging(app)

app.include_router(health.router)
app.include_router(actors.router)
app.include_router(movies.router)
app.include_router(genres.router)

# Mount Prometheus metrics
app.mount("/metrics", make_asgi_app())

register_error_handlers(app)
