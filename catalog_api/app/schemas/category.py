"""
Pydantic models for library categories.

``book_count`` is informational only; it is not derived from the book
collection.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Fantasy"])
    description: str = Field("", examples=["Mondes imaginaires et magie"])
    book_count: int = Field(0, ge=0, alias="bookCount")

    model_config = {"populate_by_name": True}


class CategoryCreate(CategoryBase):
    pass


class CategoryRead(CategoryBase):
    id: int


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    book_count: Optional[int] = Field(None, ge=0, alias="bookCount")

    model_config = {"populate_by_name": True}
