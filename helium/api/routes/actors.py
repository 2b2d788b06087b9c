"""Actor Routes — CRUD and substring search for Actor documents.

Invariants:
    - GET /api/actors[?q=term] → 200 array (empty array is not an error)
    - GET /api/actors/{id} → 200 document | 404
    - POST → 201 stored document | 400 list of violations
    - PUT /{id} → 202 stored document; the path id wins over the body id
    - DELETE /{id} → 204 no body | 404
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from helium.api.dependencies import get_actor_service
from helium.services.document_service import DocumentService

router = APIRouter(prefix="/api/actors", tags=["actors"])


@router.get("")
async def list_actors(
    q: str | None = Query(None, max_length=500),
    service: DocumentService = Depends(get_actor_service),
) -> list[dict]:
    """Retrieve all actors, optionally filtered by a search term."""
    return await service.list_all(q)


@router.get("/{actor_id}")
async def get_actor(
    actor_id: str, service: DocumentService = Depends(get_actor_service),
) -> dict:
    """Retrieve a single actor by actor id."""
    return await service.get(actor_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_actor(
    body: Any = Body(...),
    service: DocumentService = Depends(get_actor_service),
) -> dict:
    return await service.create(body)


@router.put("/{actor_id}", status_code=status.HTTP_202_ACCEPTED)
async def update_actor(
    actor_id: str,
    body: Any = Body(...),
    service: DocumentService = Depends(get_actor_service),
) -> dict:
    return await service.update(actor_id, body)


@router.delete("/{actor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_actor(
    actor_id: str, service: DocumentService = Depends(get_actor_service),
) -> Response:
    await service.delete(actor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
