"""
Business logic for the video game collection.

Besides the generic CRUD operations inherited from
``CollectionService`` the game service offers lookups by platform and
year, a "retro" view, distinct platforms, favourites handling and a
small statistics summary.
"""

import logging
from typing import List, Optional, Union

from ..core.listing import contains, list_view
from ..schemas.common import Page
from ..schemas.game import GameCreate, GameRead, GameStats
from .base import CollectionService


logger = logging.getLogger(__name__)

RETRO_UNTIL_YEAR = 2000


class GameService(CollectionService[GameRead]):
    """Service managing the in-memory game collection."""

    record_type = GameRead
    create_type = GameCreate
    label = "Game"

    def list_games(
        self,
        title: Optional[str] = None,
        platform: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Union[List[GameRead], Page]:
        """Return games filtered by title (containment) and platform (equality)."""
        games = self.collection.all()
        if title:
            games = [g for g in games if contains(g.title, title)]
        if platform:
            games = [g for g in games if g.platform.lower() == platform.lower()]
        return list_view(games, sort_by=sort_by, order=order, page=page, limit=limit)

    def retro(self, until_year: int = RETRO_UNTIL_YEAR) -> List[GameRead]:
        """Games released in or before ``until_year``, in collection order."""
        return self.collection.filter(lambda g: g.year is not None and g.year <= until_year)

    def platforms(self) -> List[str]:
        return self.collection.distinct(lambda g: g.platform)

    def search(self, title: Optional[str]) -> List[GameRead]:
        if not title:
            return self.collection.all()
        return self.collection.filter(lambda g: contains(g.title, title))

    def by_platform(self, name: str) -> List[GameRead]:
        wanted = name.lower()
        return self.collection.filter(lambda g: g.platform.lower() == wanted)

    def by_year(self, year: int) -> List[GameRead]:
        return self.collection.filter(lambda g: g.year == year)

    def exists(self, title: str) -> bool:
        return self.find_by_title(title) is not None

    def stats(self) -> GameStats:
        oldest = self.collection.min_by(lambda g: g.year)
        return GameStats(
            total=len(self.collection),
            favorites=len(self.collection.filter(lambda g: g.is_favorite)),
            oldest_game=oldest.title if oldest else None,
        )

    def toggle_favorite(self, game_id) -> GameRead:
        game = self._require(game_id)
        game.is_favorite = not game.is_favorite
        logger.info("Game %s favourite set to %s", game.id, game.is_favorite)
        return game

    def clear_favorites(self) -> int:
        """Unmark every game; returns how many games were favourites."""
        cleared = 0
        for game in self.collection:
            if game.is_favorite:
                game.is_favorite = False
                cleared += 1
        logger.info("Cleared %s favourite games", cleared)
        return cleared
