"""
Business logic for authors.
"""

from typing import List, Optional, Union

from ..core.listing import contains, list_view
from ..schemas.author import AuthorCreate, AuthorRead
from ..schemas.common import Page
from .base import CollectionService


class AuthorService(CollectionService[AuthorRead]):
    """Service managing the in-memory author collection."""

    record_type = AuthorRead
    create_type = AuthorCreate
    label = "Author"

    def list_authors(
        self,
        name: Optional[str] = None,
        nationality: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Union[List[AuthorRead], Page]:
        """Filter on first or last name (containment) and nationality (equality)."""
        authors = self.collection.all()
        if name:
            authors = [a for a in authors if contains(a.first_name, name) or contains(a.last_name, name)]
        if nationality:
            authors = [a for a in authors if a.nationality.lower() == nationality.lower()]
        return list_view(authors, sort_by=sort_by, order=order, page=page, limit=limit)

    def alive(self) -> List[AuthorRead]:
        return self.collection.filter(lambda a: a.is_alive)

    def nationalities(self) -> List[str]:
        return self.collection.distinct(lambda a: a.nationality)

    def by_nationality(self, nationality: str) -> List[AuthorRead]:
        wanted = nationality.lower()
        return self.collection.filter(lambda a: a.nationality.lower() == wanted)
