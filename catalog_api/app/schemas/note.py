"""
Pydantic schemas for notes and note categories.

Both resources are persisted in SQLite.  A note may reference a note
category through ``category_id``; deleting the category sets the
reference back to ``null`` instead of deleting the note.  The JSON name
``category_id`` mirrors the database column.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteCategoryCreate(BaseModel):
    """Schema for creating or replacing a note category."""

    name: str = Field(..., min_length=1, examples=["Work"])
    description: Optional[str] = Field(None, examples=["Everything related to the job"])


class NoteCategoryUpdate(BaseModel):
    """Schema for partially updating a note category.

    At least one field must be supplied.  ``description`` may be set
    to ``null`` explicitly; ``name`` may not.
    """

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class NoteCategoryRead(BaseModel):
    id: int
    name: str
    description: Optional[str]


class NoteCreate(BaseModel):
    """Schema for creating or replacing a note."""

    title: str = Field(..., min_length=1, examples=["Apprendre JavaScript"])
    content: str = Field(..., min_length=1, examples=["Chapitre 3: les promesses"])
    color: Optional[str] = Field("red", examples=["blue"])
    date: Optional[datetime] = Field(None, examples=["2026-01-19T00:00:00"])
    is_favorite: bool = Field(False, alias="isFavorite")
    category_id: Optional[int] = None

    model_config = {"populate_by_name": True}


class NoteUpdate(BaseModel):
    """Schema for partially updating a note.

    At least one field must be supplied.  ``color``, ``date`` and
    ``category_id`` may be cleared with an explicit ``null``; ``title``,
    ``content`` and ``isFavorite`` may not.
    """

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = None
    date: Optional[datetime] = None
    is_favorite: Optional[bool] = Field(None, alias="isFavorite")
    category_id: Optional[int] = None

    model_config = {"populate_by_name": True}


class NoteRead(BaseModel):
    id: int
    title: Optional[str]
    content: Optional[str]
    color: Optional[str]
    date: Optional[datetime]
    is_favorite: bool = Field(..., alias="isFavorite")
    category_id: Optional[int]

    model_config = {"populate_by_name": True}
