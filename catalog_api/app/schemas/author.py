"""
Pydantic models for authors.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AuthorBase(BaseModel):
    first_name: str = Field(..., min_length=1, alias="firstName", examples=["Victor"])
    last_name: str = Field(..., min_length=1, alias="lastName", examples=["Hugo"])
    nationality: str = Field("", examples=["Francaise"])
    birth_year: int = Field(0, alias="birthYear", examples=[1802])
    is_alive: bool = Field(True, alias="isAlive")

    model_config = {"populate_by_name": True}


class AuthorCreate(AuthorBase):
    pass


class AuthorRead(AuthorBase):
    id: int


class AuthorUpdate(BaseModel):
    """All fields optional; only provided values are applied."""

    first_name: Optional[str] = Field(None, min_length=1, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, alias="lastName")
    nationality: Optional[str] = None
    birth_year: Optional[int] = Field(None, alias="birthYear")
    is_alive: Optional[bool] = Field(None, alias="isAlive")

    model_config = {"populate_by_name": True}
