"""Dependency Providers — build services from the collaborators held on app.state.

Invariants:
    - app.state.store, app.state.store_config and app.state.telemetry are set by
      the lifespan before the first request
    - A fresh service object per request; collaborators are shared and long-lived

Design Decisions:
    - app.state over module-level singletons: tests swap collaborators through
      app.dependency_overrides
"""

from fastapi import Depends, Request

from helium.config import StoreConfig
from helium.core.domain_types import ResourceType
from helium.core.repository_protocols import DocumentStore, Telemetry
from helium.schemas.actor import ActorDocument
from helium.schemas.movie import MovieDocument
from helium.services.document_service import DocumentService
from helium.services.genre_service import GenreService
from helium.services.health_service import HealthService


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized")
    return value


def get_document_store(request: Request) -> DocumentStore:
    return _state(request, "store")


def get_store_config(request: Request) -> StoreConfig:
    return _state(request, "store_config")


def get_telemetry(request: Request) -> Telemetry:
    return _state(request, "telemetry")


def get_actor_service(
    store: DocumentStore = Depends(get_document_store),
    telemetry: Telemetry = Depends(get_telemetry),
    config: StoreConfig = Depends(get_store_config),
) -> DocumentService:
    return DocumentService(ResourceType.ACTOR, ActorDocument, store, telemetry, config)


def get_movie_service(
    store: DocumentStore = Depends(get_document_store),
    telemetry: Telemetry = Depends(get_telemetry),
    config: StoreConfig = Depends(get_store_config),
) -> DocumentService:
    return DocumentService(ResourceType.MOVIE, MovieDocument, store, telemetry, config)


def get_genre_service(
    store: DocumentStore = Depends(get_document_store),
    telemetry: Telemetry = Depends(get_telemetry),
    config: StoreConfig = Depends(get_store_config),
) -> GenreService:
    return GenreService(store, telemetry, config)


def get_health_service(
    store: DocumentStore = Depends(get_document_store),
    telemetry: Telemetry = Depends(get_telemetry),
    config: StoreConfig = Depends(get_store_config),
) -> HealthService:
    return HealthService(store, telemetry, config)
