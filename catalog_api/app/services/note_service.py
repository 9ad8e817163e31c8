"""
Service layer for notes.

Notes are persisted in the ``notes`` table.  Creation and full
replacement apply the same defaults (``color`` is ``"red"``,
``isFavorite`` is false, no category, no date).  Partial updates build
their ``UPDATE`` statement from the supplied fields only.

Every method opens its own connection; a sequence such as "update then
re-select" runs as two statements without an enclosing transaction.
"""

from __future__ import annotations

import logging
import math
import sqlite3
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..core.db import get_connection
from ..core.exceptions import InvalidRecordError, RecordNotFoundError
from ..core.listing import DEFAULT_LIMIT, DEFAULT_PAGE
from ..schemas.common import Page, Pagination
from ..schemas.note import NoteCreate, NoteRead, NoteUpdate


# Public sort keys mapped to columns.
SORTABLE_COLUMNS = {
    "id": "id",
    "title": "title",
    "date": "date",
    "color": "color",
    "isFavorite": "is_favorite",
}

# Attributes of NoteUpdate that may not be cleared with an explicit null.
NON_NULLABLE = {"title", "content", "is_favorite"}


def _to_column_value(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class NoteService:
    """Service class for managing notes."""

    NOT_FOUND = "Note not found"

    @classmethod
    async def create_note(cls, data: NoteCreate) -> NoteRead:
        """Insert a new note and return it with its generated id."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO notes (title, color, content, date, is_favorite, category_id)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                cls._values(data),
            )
            note_id = cursor.lastrowid
            conn.commit()
            logger.info("Created note %s", note_id)
            row = cursor.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
            return cls._row_to_note_read(row)
        finally:
            conn.close()

    @classmethod
    async def list_notes(
        cls,
        is_favorite: Optional[bool] = None,
        category_id: Optional[int] = None,
        title: Optional[str] = None,
        sort_by: str = "id",
        order: str = "asc",
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Union[List[NoteRead], Page]:
        """Return notes with optional filters, sorting and pagination.

        - ``is_favorite`` and ``category_id`` filter on equality.
        - ``title`` is a case-insensitive containment filter; the text is
          matched literally, ``%`` and ``_`` included.
        - ``sort_by`` is one of ``SORTABLE_COLUMNS``; anything else sorts by id.
        - ``page``/``limit`` translate to ``LIMIT``/``OFFSET`` and switch
          the result to a ``Page`` envelope carrying the total count.
          Without them every note is returned as a plain list.
        """
        params: list = []
        where_clauses: list[str] = []
        if is_favorite is not None:
            where_clauses.append("is_favorite = ?")
            params.append(1 if is_favorite else 0)
        if category_id is not None:
            where_clauses.append("category_id = ?")
            params.append(category_id)
        if title:
            # py_lower is registered on every connection by get_connection.
            where_clauses.append("INSTR(py_lower(title), ?) > 0")
            params.append(title.lower())
        where = " WHERE " + " AND ".join(where_clauses) if where_clauses else ""
        column = SORTABLE_COLUMNS.get(sort_by, "id")
        direction = "DESC" if (order or "").lower() == "desc" else "ASC"
        query = f"SELECT * FROM notes{where} ORDER BY {column} {direction}, id ASC"
        paginated = page is not None or limit is not None
        conn = get_connection()
        try:
            if not paginated:
                rows = conn.execute(query, tuple(params)).fetchall()
                return [cls._row_to_note_read(row) for row in rows]
            page = page or DEFAULT_PAGE
            limit = limit or DEFAULT_LIMIT
            total = conn.execute(f"SELECT COUNT(*) FROM notes{where}", tuple(params)).fetchone()[0]
            rows = conn.execute(
                query + " LIMIT ? OFFSET ?", (*params, limit, (page - 1) * limit)
            ).fetchall()
            return Page(
                data=[cls._row_to_note_read(row) for row in rows],
                pagination=Pagination(
                    current_page=page,
                    total_pages=math.ceil(total / limit),
                    total_items=total,
                    items_per_page=limit,
                ),
            )
        finally:
            conn.close()

    @classmethod
    async def get_note(cls, note_id: int) -> NoteRead:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
            if not row:
                raise RecordNotFoundError(cls.NOT_FOUND)
            return cls._row_to_note_read(row)
        finally:
            conn.close()

    @classmethod
    async def replace_note(cls, note_id: int, data: NoteCreate) -> NoteRead:
        """Overwrite every column of a note; omitted optional fields get their defaults."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                UPDATE notes
                SET title = ?, color = ?, content = ?, date = ?, is_favorite = ?, category_id = ?
                WHERE id = ?
                """,
                (*cls._values(data), note_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Replaced note %s", note_id)
            row = cursor.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
            return cls._row_to_note_read(row)
        finally:
            conn.close()

    @classmethod
    async def update_note(cls, note_id: int, data: NoteUpdate) -> NoteRead:
        """Update only the supplied fields; an empty payload is a client error."""
        logger = logging.getLogger(__name__)
        changes: Dict[str, Any] = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if not (value is None and key in NON_NULLABLE)
        }
        if not changes:
            raise InvalidRecordError("No field to update")
        assignments = ", ".join(f"{column} = ?" for column in changes)
        values = [_to_column_value(value) for value in changes.values()]
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"UPDATE notes SET {assignments} WHERE id = ?", (*values, note_id))
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Updated note %s: %s", note_id, sorted(changes))
            row = cursor.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
            return cls._row_to_note_read(row)
        finally:
            conn.close()

    @classmethod
    async def toggle_favorite(cls, note_id: int) -> NoteRead:
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE notes SET is_favorite = 1 - is_favorite WHERE id = ?", (note_id,)
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            row = cursor.execute("SELECT * FROM notes WHERE id = ?", (note_id,)).fetchone()
            logger.info("Note %s favourite set to %s", note_id, bool(row["is_favorite"]))
            return cls._row_to_note_read(row)
        finally:
            conn.close()

    @classmethod
    async def delete_note(cls, note_id: int) -> None:
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM notes WHERE id = ?", (note_id,))
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Deleted note %s", note_id)
        finally:
            conn.close()

    @staticmethod
    def _values(data: NoteCreate) -> tuple:
        """Column values for INSERT/UPDATE in declaration order."""
        return (
            data.title,
            data.color,
            data.content,
            _to_column_value(data.date),
            int(data.is_favorite),
            data.category_id,
        )

    @staticmethod
    def _row_to_note_read(row: sqlite3.Row) -> NoteRead:
        """Convert a database row to a NoteRead schema instance."""
        return NoteRead(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            color=row["color"],
            date=row["date"],
            is_favorite=bool(row["is_favorite"]),
            category_id=row["category_id"],
        )
