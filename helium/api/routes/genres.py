"""Genre Routes — list of genre names.

Invariants:
    - GET /api/genres → 200 array of strings (no filter, no id lookup, no writes)
"""

from fastapi import APIRouter, Depends

from helium.api.dependencies import get_genre_service
from helium.services.genre_service import GenreService

router = APIRouter(prefix="/api/genres", tags=["genres"])


@router.get("")
async def list_genres(service: GenreService = Depends(get_genre_service)) -> list[str]:
    return await service.list_names()
