"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the in-memory collections and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn catalog_api.app.main:app --reload

Every call to ``create_app`` owns fresh collections, so two apps (or
two tests) never share records.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import add_exception_handlers
from .core.logging_config import setup_logging
from .data import seed
from .schemas.common import Message
from .services.author_service import AuthorService
from .services.book_service import BookService
from .services.category_service import CategoryService
from .services.game_service import GameService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Apply migrations at startup.  This creates the database file if it
    # does not exist and brings the notes tables up to date.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application whose ``state`` holds one service per
        in-memory resource.
    """
    # Initialise logging before anything else so that the services can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    seeded = settings.seed_collections
    app.state.games = GameService(seed.games() if seeded else ())
    app.state.books = BookService(seed.books() if seeded else ())
    app.state.authors = AuthorService(seed.authors() if seeded else ())
    app.state.categories = CategoryService(seed.categories() if seeded else ())

    add_exception_handlers(app)

    @app.get("/", response_model=Message, tags=["info"])
    async def root() -> Message:
        return Message(message=f"Welcome to the {settings.project_name}")

    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
