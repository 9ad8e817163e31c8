"""
Response shapes shared by several resources.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class Pagination(BaseModel):
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_items: int = Field(..., alias="totalItems")
    items_per_page: int = Field(..., alias="itemsPerPage")

    model_config = {"populate_by_name": True}


class Page(BaseModel, Generic[T]):
    """One page of a list endpoint plus the pagination summary."""

    data: List[T]
    pagination: Pagination


class Message(BaseModel):
    message: str


class Count(BaseModel):
    total: int


class BatchCreateResult(BaseModel):
    """Outcome of a batch insert; invalid elements are skipped, not reported."""

    message: str
    added_count: int = Field(..., alias="addedCount")

    model_config = {"populate_by_name": True}


class BulkUpdateResult(BaseModel):
    message: str
    count: int


class BulkDeleteResult(BaseModel):
    message: str
    deleted_count: int = Field(..., alias="deletedCount")
    remaining: int

    model_config = {"populate_by_name": True}


class IdsDeleteRequest(BaseModel):
    ids: List[int] = Field(..., description="Identifiers of the records to remove")


class IdsDeleteResult(BaseModel):
    message: str
    deleted_count: int = Field(..., alias="deletedCount")
    deleted_ids: List[int] = Field(..., alias="deletedIds")
    not_found_ids: List[int] = Field(..., alias="notFoundIds")

    model_config = {"populate_by_name": True}


class PercentageRequest(BaseModel):
    percentage: float = Field(..., ge=-100, description="Change applied to every price, in percent")


class TitleResponse(BaseModel):
    title: str


class ExistsResponse(BaseModel):
    exists: bool


class StatusResponse(BaseModel):
    name: str
    version: str
    status: str
    timestamp: str


class DeletedResponse(BaseModel, Generic[T]):
    message: str
    deleted: T


class ErrorResponse(BaseModel):
    """Body of 400 responses."""

    error: str


class NotFoundResponse(BaseModel):
    """Body of 404 responses."""

    message: str
    error: Optional[str] = None
