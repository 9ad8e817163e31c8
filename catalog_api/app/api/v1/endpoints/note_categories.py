"""
Note category endpoints for API v1.

Deleting a category keeps its notes and clears their ``category_id``.
"""

from typing import List

from fastapi import APIRouter, status

from catalog_api.app.schemas.note import NoteCategoryCreate, NoteCategoryRead, NoteCategoryUpdate, NoteRead
from catalog_api.app.services.note_category_service import NoteCategoryService


router = APIRouter()


@router.get("", response_model=List[NoteCategoryRead])
async def list_categories() -> List[NoteCategoryRead]:
    return await NoteCategoryService.list_categories()


@router.get("/{category_id}", response_model=NoteCategoryRead)
async def get_category(category_id: int) -> NoteCategoryRead:
    return await NoteCategoryService.get_category(category_id)


@router.get("/{category_id}/notes", response_model=List[NoteRead])
async def list_category_notes(category_id: int) -> List[NoteRead]:
    return await NoteCategoryService.list_category_notes(category_id)


@router.post("", response_model=NoteCategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(category: NoteCategoryCreate) -> NoteCategoryRead:
    return await NoteCategoryService.create_category(category)


@router.put("/{category_id}", response_model=NoteCategoryRead)
async def replace_category(category_id: int, category: NoteCategoryCreate) -> NoteCategoryRead:
    return await NoteCategoryService.replace_category(category_id, category)


@router.patch("/{category_id}", response_model=NoteCategoryRead)
async def update_category(category_id: int, updates: NoteCategoryUpdate) -> NoteCategoryRead:
    """Update the supplied fields only; an empty body is rejected with 400."""
    return await NoteCategoryService.update_category(category_id, updates)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int) -> None:
    await NoteCategoryService.delete_category(category_id)
    return None
