"""
Sorting and pagination helpers for in-memory list endpoints.

List endpoints filter first, then sort, then paginate.  Field names in
``sortBy`` are the JSON names clients see (``isFavorite``, ``inStock``),
so they are resolved through each model's field aliases.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel

from ..schemas.common import Page, Pagination


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def resolve_field(model: type[BaseModel], name: Optional[str]) -> Optional[str]:
    """Map a public (aliased) or attribute field name to the attribute name."""
    if not name:
        return None
    for attribute, info in model.model_fields.items():
        if name in (attribute, info.alias):
            return attribute
    return None


def sort_records(records: Sequence[BaseModel], sort_by: Optional[str], order: Optional[str] = "asc") -> List[BaseModel]:
    """Return ``records`` sorted on ``sort_by``.

    Unknown fields leave the order untouched.  ``order`` is descending
    only for the literal ``"desc"``.  Records whose value is ``None``
    always come last.
    """
    records = list(records)
    if not records:
        return records
    attribute = resolve_field(type(records[0]), sort_by)
    if attribute is None:
        return records
    present = [r for r in records if getattr(r, attribute) is not None]
    missing = [r for r in records if getattr(r, attribute) is None]
    present.sort(key=lambda r: getattr(r, attribute), reverse=(order or "").lower() == "desc")
    return present + missing


def paginate(records: Sequence[Any], page: Optional[int], limit: Optional[int]) -> Page:
    """Slice ``records`` to one page and describe the whole result."""
    page = page or DEFAULT_PAGE
    limit = limit or DEFAULT_LIMIT
    start = (page - 1) * limit
    return Page(
        data=list(records[start:start + limit]),
        pagination=Pagination(
            current_page=page,
            total_pages=math.ceil(len(records) / limit),
            total_items=len(records),
            items_per_page=limit,
        ),
    )


def list_view(
    records: Sequence[BaseModel],
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> Union[List[BaseModel], Page]:
    """Sort then paginate.

    The paginated envelope is returned only when ``page`` or ``limit``
    was supplied; otherwise the plain (possibly sorted) list.
    """
    result = sort_records(records, sort_by, order) if sort_by else list(records)
    if page is None and limit is None:
        return result
    return paginate(result, page, limit)


def contains(value: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive containment; a missing value never matches."""
    if value is None or needle is None:
        return False
    return needle.lower() in value.lower()
