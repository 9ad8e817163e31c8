"""
Library category endpoints for API v1.

These categories belong to the book catalogue and live in memory.
Note categories are a separate, persisted resource (see
``note_categories``).
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.deps import get_category_service
from catalog_api.app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from catalog_api.app.schemas.common import DeletedResponse, Page
from catalog_api.app.services.category_service import CategoryService


router = APIRouter()


@router.get("", response_model=Union[List[CategoryRead], Page[CategoryRead]])
async def list_categories(
    name: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: str = Query("asc"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: CategoryService = Depends(get_category_service),
):
    return service.list_categories(name=name, sort_by=sort_by, order=order, page=page, limit=limit)


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: str, service: CategoryService = Depends(get_category_service)) -> CategoryRead:
    return service.get(category_id)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryRead:
    return service.create(category)


@router.put("/{category_id}", response_model=CategoryRead)
async def replace_category(
    category_id: str,
    category: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryRead:
    return service.replace(category_id, category)


@router.patch("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: str,
    updates: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryRead:
    return service.update(category_id, updates)


@router.delete("/{category_id}", response_model=DeletedResponse[CategoryRead])
async def delete_category(category_id: str, service: CategoryService = Depends(get_category_service)):
    deleted = service.delete(category_id)
    return DeletedResponse[CategoryRead](message="Category deleted", deleted=deleted)
