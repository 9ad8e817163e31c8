"""
Business logic for library categories.
"""

from typing import List, Optional, Union

from ..core.listing import contains, list_view
from ..schemas.category import CategoryCreate, CategoryRead
from ..schemas.common import Page
from .base import CollectionService


class CategoryService(CollectionService[CategoryRead]):
    """Service managing the in-memory category collection."""

    record_type = CategoryRead
    create_type = CategoryCreate
    label = "Category"

    def list_categories(
        self,
        name: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Union[List[CategoryRead], Page]:
        categories = self.collection.all()
        if name:
            categories = [c for c in categories if contains(c.name, name)]
        return list_view(categories, sort_by=sort_by, order=order, page=page, limit=limit)
