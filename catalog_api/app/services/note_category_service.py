"""
Service layer for note categories.

Note categories are stored in the ``note_categories`` table.  Deleting
a category does not delete its notes: the foreign key on
``notes.category_id`` is declared ``ON DELETE SET NULL`` so SQLite
detaches them.

All queries use parameterized statements.  "Not found" is decided by
an empty result set or by an affected-row count of zero.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import get_connection
from ..core.exceptions import InvalidRecordError, RecordNotFoundError
from ..schemas.note import NoteCategoryCreate, NoteCategoryRead, NoteCategoryUpdate, NoteRead
from .note_service import NoteService


class NoteCategoryService:
    """Service class for managing note categories."""

    NOT_FOUND = "Category not found"

    @classmethod
    async def create_category(cls, data: NoteCategoryCreate) -> NoteCategoryRead:
        """Insert a new category and return it with its generated id."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO note_categories (name, description) VALUES (?, ?)",
                (data.name, data.description),
            )
            category_id = cursor.lastrowid
            conn.commit()
            logger.info("Created note category %s", category_id)
            row = cursor.execute(
                "SELECT * FROM note_categories WHERE id = ?", (category_id,)
            ).fetchone()
            return cls._row_to_category_read(row)
        finally:
            conn.close()

    @classmethod
    async def list_categories(cls) -> List[NoteCategoryRead]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM note_categories ORDER BY id ASC").fetchall()
            return [cls._row_to_category_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_category(cls, category_id: int) -> NoteCategoryRead:
        """Retrieve a single category or raise ``RecordNotFoundError``."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM note_categories WHERE id = ?", (category_id,)
            ).fetchone()
            if not row:
                raise RecordNotFoundError(cls.NOT_FOUND)
            return cls._row_to_category_read(row)
        finally:
            conn.close()

    @classmethod
    async def list_category_notes(cls, category_id: int) -> List[NoteRead]:
        """Return the notes attached to a category, oldest id first."""
        conn = get_connection()
        try:
            exists = conn.execute(
                "SELECT id FROM note_categories WHERE id = ?", (category_id,)
            ).fetchone()
            if not exists:
                raise RecordNotFoundError(cls.NOT_FOUND)
            rows = conn.execute(
                "SELECT * FROM notes WHERE category_id = ? ORDER BY id ASC", (category_id,)
            ).fetchall()
            return [NoteService._row_to_note_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def replace_category(cls, category_id: int, data: NoteCategoryCreate) -> NoteCategoryRead:
        """Overwrite every column of a category."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE note_categories SET name = ?, description = ? WHERE id = ?",
                (data.name, data.description, category_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Replaced note category %s", category_id)
            row = cursor.execute(
                "SELECT * FROM note_categories WHERE id = ?", (category_id,)
            ).fetchone()
            return cls._row_to_category_read(row)
        finally:
            conn.close()

    @classmethod
    async def update_category(cls, category_id: int, data: NoteCategoryUpdate) -> NoteCategoryRead:
        """Update only the supplied fields.

        An empty payload is rejected before touching the database.
        """
        logger = logging.getLogger(__name__)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("name", "") is None:
            del changes["name"]
        if not changes:
            raise InvalidRecordError("No field to update")
        assignments = ", ".join(f"{column} = ?" for column in changes)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"UPDATE note_categories SET {assignments} WHERE id = ?",
                (*changes.values(), category_id),
            )
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Updated note category %s: %s", category_id, sorted(changes))
            row = cursor.execute(
                "SELECT * FROM note_categories WHERE id = ?", (category_id,)
            ).fetchone()
            return cls._row_to_category_read(row)
        finally:
            conn.close()

    @classmethod
    async def delete_category(cls, category_id: int) -> None:
        """Delete a category; its notes keep existing with ``category_id = NULL``."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM note_categories WHERE id = ?", (category_id,))
            if cursor.rowcount == 0:
                raise RecordNotFoundError(cls.NOT_FOUND)
            conn.commit()
            logger.info("Deleted note category %s", category_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_category_read(row: sqlite3.Row) -> NoteCategoryRead:
        return NoteCategoryRead(id=row["id"], name=row["name"], description=row["description"])
