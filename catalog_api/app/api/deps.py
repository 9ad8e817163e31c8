"""
FastAPI dependencies giving route handlers their collection services.

The services are created by ``create_app`` and stored on
``app.state``; handlers never reach for module-level state.
"""

from fastapi import Request

from ..services.author_service import AuthorService
from ..services.book_service import BookService
from ..services.category_service import CategoryService
from ..services.game_service import GameService


def get_game_service(request: Request) -> GameService:
    return request.app.state.games


def get_book_service(request: Request) -> BookService:
    return request.app.state.books


def get_author_service(request: Request) -> AuthorService:
    return request.app.state.authors


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.categories
