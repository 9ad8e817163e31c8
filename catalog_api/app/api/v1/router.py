"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under their prefixes.
When a resource is added, include its router here.
"""

from fastapi import APIRouter

from catalog_api.app.schemas.common import ErrorResponse, NotFoundResponse

from .endpoints import (
    authors,
    books,
    categories,
    games,
    info,
    note_categories,
    notes,
)

# Error bodies every resource may answer with, for the OpenAPI schema.
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": NotFoundResponse},
}

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(games.router, prefix="/games", tags=["games"], responses=ERROR_RESPONSES)
router.include_router(books.router, prefix="/books", tags=["books"], responses=ERROR_RESPONSES)
router.include_router(authors.router, prefix="/authors", tags=["authors"], responses=ERROR_RESPONSES)
router.include_router(categories.router, prefix="/categories", tags=["categories"], responses=ERROR_RESPONSES)
router.include_router(notes.router, prefix="/notes", tags=["notes"], responses=ERROR_RESPONSES)
# Note categories are distinct from the in-memory library categories
# mounted under ``/categories``.
router.include_router(
    note_categories.router,
    prefix="/note-categories",
    tags=["note-categories"],
    responses=ERROR_RESPONSES,
)
