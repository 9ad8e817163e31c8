"""
Business logic for the book collection.

The book service carries most of the field-scoped operations: stock
toggling, discounts, ratings, collection-wide price changes and the
bulk deletions (out of stock, published before a year, by id list).
Prices are always rounded to two decimals after a change.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..core.exceptions import InvalidRecordError
from ..core.listing import contains, list_view
from ..schemas.book import BookCreate, BookRead, BookStats
from ..schemas.common import Page
from .base import CollectionService


logger = logging.getLogger(__name__)

CLASSIC_BEFORE_YEAR = 2000
TOP_RATED_FROM = 4


def _round_price(value: float) -> float:
    return round(value, 2)


class BookService(CollectionService[BookRead]):
    """Service managing the in-memory book collection."""

    record_type = BookRead
    create_type = BookCreate
    label = "Book"

    def list_books(
        self,
        in_stock: Optional[str] = None,
        title: Optional[str] = None,
        author: Optional[str] = None,
        genre: Optional[str] = None,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Union[List[BookRead], Page]:
        """Return books after filtering, sorting and pagination.

        ``in_stock`` is compared against the literal string ``"true"``:
        any other supplied value selects the books that are out of
        stock.
        """
        books = self.search(title=title, author=author, genre=genre)
        if in_stock is not None:
            wanted = in_stock == "true"
            books = [b for b in books if b.in_stock == wanted]
        return list_view(books, sort_by=sort_by, order=order, page=page, limit=limit)

    def search(
        self,
        title: Optional[str] = None,
        author: Optional[str] = None,
        genre: Optional[str] = None,
    ) -> List[BookRead]:
        """Combine case-insensitive containment filters; empty ones are ignored."""
        books = self.collection.all()
        if title:
            books = [b for b in books if contains(b.title, title)]
        if author:
            books = [b for b in books if contains(b.author, author)]
        if genre:
            books = [b for b in books if contains(b.genre, genre)]
        return books

    def available(self) -> List[BookRead]:
        return self.collection.filter(lambda b: b.in_stock)

    def classics(self, before_year: int = CLASSIC_BEFORE_YEAR) -> List[BookRead]:
        return self.collection.filter(lambda b: b.year < before_year)

    def top_rated(self, minimum: float = TOP_RATED_FROM) -> List[BookRead]:
        return self.collection.filter(lambda b: b.rating >= minimum)

    def genres(self) -> List[str]:
        return self.collection.distinct(lambda b: b.genre)

    def by_genre(self, genre: str) -> List[BookRead]:
        wanted = genre.lower()
        return self.collection.filter(lambda b: b.genre.lower() == wanted)

    def by_year(self, year: int) -> List[BookRead]:
        return self.collection.filter(lambda b: b.year == year)

    def by_price(self, minimum: float, maximum: float) -> List[BookRead]:
        return self.collection.filter(lambda b: minimum <= b.price <= maximum)

    def exists(self, title: str) -> bool:
        return self.find_by_title(title) is not None

    def stats(self) -> BookStats:
        """Counts, mean price and rating, oldest and newest titles."""
        books = self.collection.all()
        total = len(books)
        available = sum(1 for b in books if b.in_stock)
        oldest = self.collection.min_by(lambda b: b.year)
        newest = self.collection.max_by(lambda b: b.year)
        return BookStats(
            total=total,
            available=available,
            unavailable=total - available,
            average_price=round(sum(b.price for b in books) / total, 2) if total else 0,
            average_rating=round(sum(b.rating for b in books) / total, 2) if total else 0,
            oldest_book=oldest.title if oldest else None,
            newest_book=newest.title if newest else None,
        )

    def toggle_stock(self, book_id) -> BookRead:
        book = self._require(book_id)
        book.in_stock = not book.in_stock
        logger.info("Book %s in stock: %s", book.id, book.in_stock)
        return book

    def apply_discount(self, book_id, percentage: float) -> BookRead:
        """Reduce one book's price by ``percentage`` percent."""
        book = self._require(book_id)
        book.price = _round_price(book.price * (1 - percentage / 100))
        logger.info("Book %s discounted by %s%%, new price %s", book.id, percentage, book.price)
        return book

    def set_rating(self, book_id, rating: float) -> BookRead:
        book = self._require(book_id)
        if not 0 <= rating <= 5:
            raise InvalidRecordError("Rating must be between 0 and 5")
        book.rating = rating
        logger.info("Book %s rated %s", book.id, rating)
        return book

    def clear_stock(self) -> int:
        """Mark every book as out of stock; returns the collection size."""
        for book in self.collection:
            book.in_stock = False
        logger.info("Cleared stock of %s books", len(self.collection))
        return len(self.collection)

    def increase_prices(self, percentage: float) -> int:
        """Scale every price by ``1 + percentage / 100``; returns the number of books."""
        for book in self.collection:
            book.price = _round_price(book.price * (1 + percentage / 100))
        logger.info("Changed every price by %s%%", percentage)
        return len(self.collection)

    def delete_out_of_stock(self) -> int:
        removed = self.collection.remove_where(lambda b: not b.in_stock)
        logger.info("Deleted %s out of stock books", len(removed))
        return len(removed)

    def delete_before(self, year: int) -> int:
        removed = self.collection.remove_where(lambda b: b.year < year)
        logger.info("Deleted %s books published before %s", len(removed), year)
        return len(removed)

    def delete_many(self, ids: Iterable[int]) -> Tuple[List[int], List[int]]:
        """Delete the books whose id is in ``ids``.

        Returns ``(deleted_ids, not_found_ids)``.  Ids are classified
        against the collection as it was before the deletion, in the
        order they were requested.
        """
        requested = list(dict.fromkeys(ids))
        present = {b.id for b in self.collection}
        deleted_ids = [i for i in requested if i in present]
        not_found_ids = [i for i in requested if i not in present]
        wanted = set(deleted_ids)
        self.collection.remove_where(lambda b: b.id in wanted)
        logger.info("Deleted books %s, not found %s", deleted_ids, not_found_ids)
        return deleted_ids, not_found_ids
