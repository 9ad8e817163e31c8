"""
Author endpoints for API v1.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.deps import get_author_service
from catalog_api.app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from catalog_api.app.schemas.common import DeletedResponse, Page
from catalog_api.app.services.author_service import AuthorService


router = APIRouter()


@router.get("", response_model=Union[List[AuthorRead], Page[AuthorRead]])
async def list_authors(
    name: Optional[str] = Query(None, description="Part of the first or last name"),
    nationality: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: str = Query("asc"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: AuthorService = Depends(get_author_service),
):
    return service.list_authors(
        name=name, nationality=nationality, sort_by=sort_by, order=order, page=page, limit=limit
    )


@router.get("/alive", response_model=List[AuthorRead])
async def alive_authors(service: AuthorService = Depends(get_author_service)) -> List[AuthorRead]:
    return service.alive()


@router.get("/nationalities", response_model=List[str])
async def list_nationalities(service: AuthorService = Depends(get_author_service)) -> List[str]:
    """Distinct nationalities in order of first appearance."""
    return service.nationalities()


@router.get("/nationality/{nationality}", response_model=List[AuthorRead])
async def authors_by_nationality(
    nationality: str,
    service: AuthorService = Depends(get_author_service),
) -> List[AuthorRead]:
    return service.by_nationality(nationality)


@router.get("/{author_id}", response_model=AuthorRead)
async def get_author(author_id: str, service: AuthorService = Depends(get_author_service)) -> AuthorRead:
    return service.get(author_id)


@router.post("", response_model=AuthorRead, status_code=status.HTTP_201_CREATED)
async def create_author(author: AuthorCreate, service: AuthorService = Depends(get_author_service)) -> AuthorRead:
    """Create an author; firstName and lastName are required."""
    return service.create(author)


@router.put("/{author_id}", response_model=AuthorRead)
async def replace_author(
    author_id: str,
    author: AuthorCreate,
    service: AuthorService = Depends(get_author_service),
) -> AuthorRead:
    return service.replace(author_id, author)


@router.patch("/{author_id}", response_model=AuthorRead)
async def update_author(
    author_id: str,
    updates: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> AuthorRead:
    return service.update(author_id, updates)


@router.delete("/{author_id}", response_model=DeletedResponse[AuthorRead])
async def delete_author(author_id: str, service: AuthorService = Depends(get_author_service)):
    deleted = service.delete(author_id)
    return DeletedResponse[AuthorRead](message="Author deleted", deleted=deleted)
