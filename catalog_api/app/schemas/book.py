"""
Pydantic models for book records.

The ``BookBase`` class contains the shared fields; ``BookCreate`` is
used both for creation and for full replacement, and ``BookRead``
extends it with an ``id`` for responses.  Ratings are bounded to the
0-5 range everywhere they can be written.
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["Dune"])
    author: str = Field(..., min_length=1, examples=["Frank Herbert"])
    year: int = Field(0, examples=[1965])
    genre: str = Field("", examples=["Science-Fiction"])
    price: float = Field(..., ge=0, examples=[12.9])
    in_stock: bool = Field(True, alias="inStock")
    rating: float = Field(0, ge=0, le=5, examples=[4.5])

    model_config = {"populate_by_name": True}


class BookCreate(BookBase):
    """Schema for creating or replacing a book."""
    pass


class BookRead(BookBase):
    """Schema for reading a book from the API."""

    id: int


class BookUpdate(BaseModel):
    """Schema for partially updating a book.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = None
    genre: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    in_stock: Optional[bool] = Field(None, alias="inStock")
    rating: Optional[float] = Field(None, ge=0, le=5)

    model_config = {"populate_by_name": True}


class BookStats(BaseModel):
    total: int
    available: int
    unavailable: int
    average_price: float = Field(..., alias="averagePrice")
    average_rating: float = Field(..., alias="averageRating")
    oldest_book: Optional[str] = Field(None, alias="oldestBook")
    newest_book: Optional[str] = Field(None, alias="newestBook")

    model_config = {"populate_by_name": True}


class DiscountRequest(BaseModel):
    percentage: float = Field(..., ge=0, le=100, description="Reduction applied to the price, in percent")


class DiscountResult(BaseModel):
    message: str
    new_price: float = Field(..., alias="newPrice")

    model_config = {"populate_by_name": True}


class RatingRequest(BaseModel):
    rating: float = Field(..., ge=0, le=5)


class RatingResult(BaseModel):
    message: str
    rating: float


class StockResult(BaseModel):
    message: str
    in_stock: bool = Field(..., alias="inStock")

    model_config = {"populate_by_name": True}


class PriceResponse(BaseModel):
    price: float
