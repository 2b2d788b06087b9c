"""Movie Routes — CRUD and substring search for Movie documents.

Invariants:
    - GET /api/movies[?q=term] → 200 array (empty array is not an error)
    - GET /api/movies/{id} → 200 document | 404
    - POST → 201 stored document | 400 list of violations
    - PUT /{id} → 202 stored document; the path id wins over the body id
    - DELETE /{id} → 204 no body | 404
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from helium.api.dependencies import get_movie_service
from helium.services.document_service import DocumentService

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("")
async def list_movies(
    q: str | None = Query(None, max_length=500),
    service: DocumentService = Depends(get_movie_service),
) -> list[dict]:
    """Retrieve all movies, optionally filtered by a search term."""
    return await service.list_all(q)


@router.get("/{movie_id}")
async def get_movie(
    movie_id: str, service: DocumentService = Depends(get_movie_service),
) -> dict:
    """Retrieve a single movie by movie id."""
    return await service.get(movie_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_movie(
    body: Any = Body(...),
    service: DocumentService = Depends(get_movie_service),
) -> dict:
    return await service.create(body)


@router.put("/{movie_id}", status_code=status.HTTP_202_ACCEPTED)
async def update_movie(
    movie_id: str,
    body: Any = Body(...),
    service: DocumentService = Depends(get_movie_service),
) -> dict:
    return await service.update(movie_id, body)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: str, service: DocumentService = Depends(get_movie_service),
) -> Response:
    await service.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
