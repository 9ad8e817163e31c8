"""
Book endpoints for API v1.

Besides CRUD, books expose read-only views (stock, classics, genres,
statistics), field-scoped updates (stock, discount, rating) and bulk
operations over the whole collection.  Every static path is declared
before the matching ``/{book_id}`` route.
"""

from typing import Any, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, status

from catalog_api.app.api.deps import get_book_service
from catalog_api.app.schemas.book import (
    BookCreate,
    BookRead,
    BookStats,
    BookUpdate,
    DiscountRequest,
    DiscountResult,
    PriceResponse,
    RatingRequest,
    RatingResult,
    StockResult,
)
from catalog_api.app.schemas.common import (
    BatchCreateResult,
    BulkDeleteResult,
    BulkUpdateResult,
    Count,
    DeletedResponse,
    ExistsResponse,
    IdsDeleteRequest,
    IdsDeleteResult,
    Page,
    PercentageRequest,
    TitleResponse,
)
from catalog_api.app.services.book_service import BookService


router = APIRouter()


@router.get("", response_model=Union[List[BookRead], Page[BookRead]])
async def list_books(
    in_stock: Optional[str] = Query(None, alias="inStock", description='"true" keeps books in stock, anything else the others'),
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    genre: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: str = Query("asc"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    service: BookService = Depends(get_book_service),
):
    """List books.

    Filters are applied first, then sorting, then pagination.  The
    response is a paginated envelope only when **page** or **limit**
    is given.
    """
    return service.list_books(
        in_stock=in_stock,
        title=title,
        author=author,
        genre=genre,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )


@router.get("/count", response_model=Count)
async def count_books(service: BookService = Depends(get_book_service)) -> Count:
    return Count(total=service.count())


@router.get("/first", response_model=BookRead)
async def first_book(service: BookService = Depends(get_book_service)) -> BookRead:
    return service.first()


@router.get("/last", response_model=BookRead)
async def last_book(service: BookService = Depends(get_book_service)) -> BookRead:
    return service.last()


@router.get("/available", response_model=List[BookRead])
async def available_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    return service.available()


@router.get("/classics", response_model=List[BookRead])
async def classic_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Books published before 2000."""
    return service.classics()


@router.get("/top-rated", response_model=List[BookRead])
async def top_rated_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Books rated 4 or more."""
    return service.top_rated()


@router.get("/genres", response_model=List[str])
async def list_genres(service: BookService = Depends(get_book_service)) -> List[str]:
    return service.genres()


@router.get("/stats", response_model=BookStats)
async def book_stats(service: BookService = Depends(get_book_service)) -> BookStats:
    return service.stats()


@router.get("/search", response_model=List[BookRead])
async def search_books(
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    genre: Optional[str] = Query(None),
    service: BookService = Depends(get_book_service),
) -> List[BookRead]:
    """Combined case-insensitive search on title, author and genre."""
    return service.search(title=title, author=author, genre=genre)


@router.get("/genre/{genre}", response_model=List[BookRead])
async def books_by_genre(genre: str, service: BookService = Depends(get_book_service)) -> List[BookRead]:
    return service.by_genre(genre)


@router.get("/year/{year}", response_model=List[BookRead])
async def books_by_year(year: int, service: BookService = Depends(get_book_service)) -> List[BookRead]:
    return service.by_year(year)


@router.get("/check/{title}", response_model=ExistsResponse)
async def check_book(title: str, service: BookService = Depends(get_book_service)) -> ExistsResponse:
    return ExistsResponse(exists=service.exists(title))


@router.get("/price/{minimum}/{maximum}", response_model=List[BookRead])
async def books_by_price(
    minimum: float,
    maximum: float,
    service: BookService = Depends(get_book_service),
) -> List[BookRead]:
    """Books whose price lies in the inclusive range."""
    return service.by_price(minimum, maximum)


@router.get("/{book_id}/title", response_model=TitleResponse)
async def get_book_title(book_id: str, service: BookService = Depends(get_book_service)) -> TitleResponse:
    return TitleResponse(title=service.get(book_id).title)


@router.get("/{book_id}/price", response_model=PriceResponse)
async def get_book_price(book_id: str, service: BookService = Depends(get_book_service)) -> PriceResponse:
    return PriceResponse(price=service.get(book_id).price)


@router.get("/{book_id}", response_model=BookRead)
async def get_book(book_id: str, service: BookService = Depends(get_book_service)) -> BookRead:
    return service.get(book_id)


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(book: BookCreate, service: BookService = Depends(get_book_service)) -> BookRead:
    """Create a book; title, author and price are required."""
    return service.create(book)


@router.post("/batch", response_model=BatchCreateResult, status_code=status.HTTP_201_CREATED)
async def create_books(
    books: List[Any] = Body(..., description="Books to add; invalid entries are skipped"),
    service: BookService = Depends(get_book_service),
) -> BatchCreateResult:
    added = service.create_many(books)
    return BatchCreateResult(message=f"{added} book(s) added", added_count=added)


@router.post("/{book_id}/duplicate", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def duplicate_book(book_id: str, service: BookService = Depends(get_book_service)) -> BookRead:
    return service.duplicate(book_id)


@router.put("/{book_id}", response_model=BookRead)
async def replace_book(
    book_id: str,
    book: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    return service.replace(book_id, book)


@router.patch("/clear-stock", response_model=BulkUpdateResult)
async def clear_stock(service: BookService = Depends(get_book_service)) -> BulkUpdateResult:
    count = service.clear_stock()
    return BulkUpdateResult(message="All books removed from stock", count=count)


@router.patch("/increase-prices", response_model=BulkUpdateResult)
async def increase_prices(
    body: PercentageRequest,
    service: BookService = Depends(get_book_service),
) -> BulkUpdateResult:
    count = service.increase_prices(body.percentage)
    return BulkUpdateResult(message=f"All prices changed by {body.percentage:g}%", count=count)


@router.patch("/{book_id}/toggle-stock", response_model=StockResult)
async def toggle_stock(book_id: str, service: BookService = Depends(get_book_service)) -> StockResult:
    book = service.toggle_stock(book_id)
    return StockResult(message="Stock updated", in_stock=book.in_stock)


@router.patch("/{book_id}/discount", response_model=DiscountResult)
async def apply_discount(
    book_id: str,
    body: DiscountRequest,
    service: BookService = Depends(get_book_service),
) -> DiscountResult:
    book = service.apply_discount(book_id, body.percentage)
    return DiscountResult(message=f"{body.percentage:g}% discount applied", new_price=book.price)


@router.patch("/{book_id}/rating", response_model=RatingResult)
async def set_rating(
    book_id: str,
    body: RatingRequest,
    service: BookService = Depends(get_book_service),
) -> RatingResult:
    book = service.set_rating(book_id, body.rating)
    return RatingResult(message="Rating updated", rating=book.rating)


@router.patch("/{book_id}", response_model=BookRead)
async def update_book(
    book_id: str,
    updates: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    """Partially update a book; unspecified fields remain unchanged."""
    return service.update(book_id, updates)


@router.delete("/out-of-stock", response_model=BulkDeleteResult)
async def delete_out_of_stock(service: BookService = Depends(get_book_service)) -> BulkDeleteResult:
    deleted = service.delete_out_of_stock()
    return BulkDeleteResult(message=f"{deleted} book(s) deleted", deleted_count=deleted, remaining=service.count())


@router.delete("/batch", response_model=IdsDeleteResult)
async def delete_books(
    body: IdsDeleteRequest,
    service: BookService = Depends(get_book_service),
) -> IdsDeleteResult:
    """Delete several books at once.

    ``notFoundIds`` lists the requested ids that matched no book.
    """
    deleted_ids, not_found_ids = service.delete_many(body.ids)
    return IdsDeleteResult(
        message=f"{len(deleted_ids)} book(s) deleted",
        deleted_count=len(deleted_ids),
        deleted_ids=deleted_ids,
        not_found_ids=not_found_ids,
    )


@router.delete("/before/{year}", response_model=BulkDeleteResult)
async def delete_before(year: int, service: BookService = Depends(get_book_service)) -> BulkDeleteResult:
    deleted = service.delete_before(year)
    return BulkDeleteResult(
        message=f"{deleted} book(s) published before {year} deleted",
        deleted_count=deleted,
        remaining=service.count(),
    )


@router.delete("/{book_id}", response_model=DeletedResponse[BookRead])
async def delete_book(book_id: str, service: BookService = Depends(get_book_service)):
    deleted = service.delete(book_id)
    return DeletedResponse[BookRead](message="Book deleted", deleted=deleted)
