"""
Game endpoints for API v1.

Static paths (``/count``, ``/retro``, ``/favorite/clear`` ...) are
declared before the ``/{game_id}`` routes so they are not captured by
the id parameter.  ``GET /{game_id}`` and ``GET /{game_id}/title``
require a numeric id and answer 400 otherwise; the other id routes
treat a non-numeric id as an unknown game.
"""

from typing import Any, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from catalog_api.app.api.deps import get_game_service
from catalog_api.app.schemas.common import BatchCreateResult, Count, DeletedResponse, Message, Page
from catalog_api.app.schemas.game import GameCheck, GameCreate, GameRead, GameReplace, GameStats, GameUpdate
from catalog_api.app.services.game_service import GameService


router = APIRouter()


@router.get("", response_model=Union[List[GameRead], Page[GameRead]])
async def list_games(
    title: Optional[str] = Query(None, description="Case-insensitive part of the title"),
    platform: Optional[str] = Query(None, description="Exact platform, case-insensitive"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: str = Query("asc"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: GameService = Depends(get_game_service),
):
    """List games.

    - **title**, **platform** filter the collection.
    - **sortBy** / **order** sort on any game field (`asc`/`desc`).
    - **page** / **limit** switch the response to a paginated envelope.
    """
    return service.list_games(
        title=title, platform=platform, sort_by=sort_by, order=order, page=page, limit=limit
    )


@router.get("/first", response_model=GameRead)
async def first_game(service: GameService = Depends(get_game_service)) -> GameRead:
    return service.first()


@router.get("/count", response_model=Count)
async def count_games(service: GameService = Depends(get_game_service)) -> Count:
    return Count(total=service.count())


@router.get("/retro", response_model=List[GameRead])
async def retro_games(service: GameService = Depends(get_game_service)) -> List[GameRead]:
    """Games released in 2000 or earlier."""
    return service.retro()


@router.get("/platforms", response_model=List[str])
async def list_platforms(service: GameService = Depends(get_game_service)) -> List[str]:
    """Distinct platforms in order of first appearance."""
    return service.platforms()


@router.get("/search", response_model=List[GameRead])
async def search_games(
    title: Optional[str] = Query(None),
    service: GameService = Depends(get_game_service),
) -> List[GameRead]:
    return service.search(title)


@router.get("/stats", response_model=GameStats)
async def game_stats(service: GameService = Depends(get_game_service)) -> GameStats:
    return service.stats()


@router.get("/platform/{name}", response_model=List[GameRead])
async def games_by_platform(name: str, service: GameService = Depends(get_game_service)) -> List[GameRead]:
    return service.by_platform(name)


@router.get("/year/{year}", response_model=List[GameRead])
async def games_by_year(year: int, service: GameService = Depends(get_game_service)) -> List[GameRead]:
    return service.by_year(year)


@router.get("/check/{title}", response_model=GameCheck, responses={404: {"model": GameCheck}})
async def check_game(title: str, service: GameService = Depends(get_game_service)):
    """Tell whether a game with exactly this title (any case) exists."""
    if not service.exists(title):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"check": False})
    return GameCheck(check=True)


@router.get("/{game_id}", response_model=GameRead)
async def get_game(game_id: int, service: GameService = Depends(get_game_service)) -> GameRead:
    return service.get(game_id)


@router.get("/{game_id}/title", response_model=str)
async def get_game_title(game_id: int, service: GameService = Depends(get_game_service)) -> str:
    return service.get(game_id).title


@router.post("", response_model=GameRead, status_code=status.HTTP_201_CREATED)
async def create_game(game: GameCreate, service: GameService = Depends(get_game_service)) -> GameRead:
    return service.create(game)


@router.post("/batch", response_model=BatchCreateResult, status_code=status.HTTP_201_CREATED)
async def create_games(
    games: List[Any] = Body(..., description="Games to add; invalid entries are skipped"),
    service: GameService = Depends(get_game_service),
) -> BatchCreateResult:
    added = service.create_many(games)
    return BatchCreateResult(message=f"{added} game(s) added", added_count=added)


@router.post("/{game_id}/duplicate", response_model=GameRead, status_code=status.HTTP_201_CREATED)
async def duplicate_game(game_id: str, service: GameService = Depends(get_game_service)) -> GameRead:
    return service.duplicate(game_id)


@router.put("/{game_id}", response_model=GameRead)
async def replace_game(
    game_id: str,
    game: GameReplace,
    service: GameService = Depends(get_game_service),
) -> GameRead:
    """Replace every field of a game; title, platform and year are required."""
    return service.replace(game_id, game)


@router.patch("/favorite/clear", response_model=Message)
async def clear_favorites(service: GameService = Depends(get_game_service)) -> Message:
    service.clear_favorites()
    return Message(message="All games removed from favorites")


@router.patch("/{game_id}/favorite", response_model=GameRead)
async def toggle_favorite(game_id: str, service: GameService = Depends(get_game_service)) -> GameRead:
    return service.toggle_favorite(game_id)


@router.patch("/{game_id}", response_model=GameRead)
async def update_game(
    game_id: str,
    updates: GameUpdate,
    service: GameService = Depends(get_game_service),
) -> GameRead:
    """Partially update a game; unspecified fields remain unchanged."""
    return service.update(game_id, updates)


@router.delete("/{game_id}", response_model=DeletedResponse[GameRead])
async def delete_game(game_id: str, service: GameService = Depends(get_game_service)):
    deleted = service.delete(game_id)
    return DeletedResponse[GameRead](message="Game deleted", deleted=deleted)
