"""
Note endpoints for API v1.

Notes are persisted in SQLite through ``NoteService``.  Deletions
answer ``204 No Content``.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Query, status

from catalog_api.app.schemas.common import Page
from catalog_api.app.schemas.note import NoteCreate, NoteRead, NoteUpdate
from catalog_api.app.services.note_service import NoteService


router = APIRouter()


@router.get("", response_model=Union[List[NoteRead], Page[NoteRead]])
async def list_notes(
    is_favorite: Optional[bool] = Query(None, alias="isFavorite"),
    category_id: Optional[int] = Query(None),
    title: Optional[str] = Query(None, description="Case-insensitive part of the title"),
    sort_by: str = Query("id", alias="sortBy"),
    order: str = Query("asc"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
):
    """Return notes with optional filters and sorting.

    - **sortBy**: `id`, `title`, `date`, `color` or `isFavorite`.
    - **order**: `asc` or `desc`.
    - **page**, **limit**: paginated envelope with the total count; every
      note is returned as a plain array without them.
    """
    return await NoteService.list_notes(
        is_favorite=is_favorite,
        category_id=category_id,
        title=title,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )


@router.get("/{note_id}", response_model=NoteRead)
async def get_note(note_id: int) -> NoteRead:
    """Retrieve a single note; 404 if it does not exist."""
    return await NoteService.get_note(note_id)


@router.post("", response_model=NoteRead, status_code=status.HTTP_201_CREATED)
async def create_note(note: NoteCreate) -> NoteRead:
    """Create a note; title and content are required."""
    return await NoteService.create_note(note)


@router.put("/{note_id}", response_model=NoteRead)
async def replace_note(note_id: int, note: NoteCreate) -> NoteRead:
    return await NoteService.replace_note(note_id, note)


@router.patch("/{note_id}/favorite", response_model=NoteRead)
async def toggle_favorite(note_id: int) -> NoteRead:
    return await NoteService.toggle_favorite(note_id)


@router.patch("/{note_id}", response_model=NoteRead)
async def update_note(note_id: int, updates: NoteUpdate) -> NoteRead:
    """Update the supplied fields only; an empty body is rejected with 400."""
    return await NoteService.update_note(note_id, updates)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: int) -> None:
    await NoteService.delete_note(note_id)
    return None
