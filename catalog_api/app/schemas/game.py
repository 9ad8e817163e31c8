"""
Pydantic models for video game records.

``GameCreate`` is the body of ``POST /games`` and of every element of a
batch insert; ``GameReplace`` is the body of ``PUT`` and additionally
requires the release year.  ``GameUpdate`` carries one optional value per
field for partial updates.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GameBase(BaseModel):
    title: str = Field(..., min_length=1, examples=["minecraft"])
    platform: str = Field(..., min_length=1, examples=["PC"])
    year: Optional[int] = Field(None, examples=[2011])
    is_favorite: bool = Field(False, alias="isFavorite")

    model_config = {"populate_by_name": True}


class GameCreate(GameBase):
    """Schema for creating a game."""
    pass


class GameReplace(GameBase):
    """Schema for replacing a game; the year is mandatory here."""

    year: int = Field(..., examples=[2011])


class GameRead(GameBase):
    """Schema for reading a game from the API."""

    id: int


class GameUpdate(BaseModel):
    """Schema for partially updating a game.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=1)
    platform: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = None
    is_favorite: Optional[bool] = Field(None, alias="isFavorite")

    model_config = {"populate_by_name": True}


class GameStats(BaseModel):
    total: int
    favorites: int
    oldest_game: Optional[str] = Field(None, alias="oldestGame")

    model_config = {"populate_by_name": True}


class GameCheck(BaseModel):
    check: bool
