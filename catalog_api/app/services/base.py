"""
Generic CRUD over an in-memory ``Collection``.

``CollectionService`` implements the operations every in-memory
resource shares: lookup, create, batch create, duplicate, full
replace, partial update and delete.  Resource services subclass it,
name their models through class attributes and add their own
filters, statistics and field-scoped updates.

Services are plain synchronous objects: nothing here waits on I/O, so
each call runs to completion before the next request is handled.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.collection import Collection
from ..core.exceptions import RecordNotFoundError


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CollectionService(Generic[RecordT]):
    """Base class for services backed by a ``Collection``."""

    #: Model stored in the collection (must have an ``id`` field).
    record_type: ClassVar[Type[BaseModel]]
    #: Model every element of a batch insert is validated against.
    create_type: ClassVar[Type[BaseModel]]
    #: Human readable singular name used in messages ("Game").
    label: ClassVar[str] = "Record"

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        self.collection: Collection[RecordT] = Collection(records)

    def _require(self, record_id: Any) -> RecordT:
        record = self.collection.get(record_id)
        if record is None:
            raise RecordNotFoundError(f"{self.label} not found")
        return record

    def count(self) -> int:
        return len(self.collection)

    def get(self, record_id: Any) -> RecordT:
        """Return the record with ``record_id`` or raise ``RecordNotFoundError``."""
        return self._require(record_id)

    def first(self) -> RecordT:
        record = self.collection.first()
        if record is None:
            raise RecordNotFoundError(f"No {self.label.lower()} available")
        return record

    def last(self) -> RecordT:
        record = self.collection.last()
        if record is None:
            raise RecordNotFoundError(f"No {self.label.lower()} available")
        return record

    def create(self, data: BaseModel) -> RecordT:
        """Assign a fresh id to ``data`` and append it."""
        record = self.record_type(id=self.collection.next_id(), **data.model_dump())
        self.collection.append(record)
        logger.info("Created %s %s", self.label.lower(), record.id)
        return record

    def create_many(self, items: Iterable[Any]) -> int:
        """Insert every valid element of ``items`` and return how many were added.

        Elements that fail validation are skipped without aborting the
        batch.
        """
        added = 0
        for position, item in enumerate(items):
            try:
                data = self.create_type.model_validate(item)
            except ValidationError:
                logger.debug("Skipping invalid %s at position %s", self.label.lower(), position)
                continue
            self.create(data)
            added += 1
        logger.info("Batch insert added %s of %s", added, self.label.lower())
        return added

    def replace(self, record_id: Any, data: BaseModel) -> RecordT:
        """Rebuild the record from ``data``; only the id is kept."""
        current = self._require(record_id)
        record = self.record_type(id=current.id, **data.model_dump())
        self.collection.replace(current.id, record)
        logger.info("Replaced %s %s", self.label.lower(), current.id)
        return record

    def update(self, record_id: Any, data: BaseModel) -> RecordT:
        """Merge the supplied, non-null fields of ``data`` onto the record."""
        current = self._require(record_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes.pop("id", None)
        record = current.model_copy(update=changes)
        self.collection.replace(current.id, record)
        if changes:
            logger.info("Updated %s %s: %s", self.label.lower(), current.id, sorted(changes))
        return record

    def duplicate(self, record_id: Any) -> RecordT:
        """Append a copy of the record with a new id and a "Copy of" title."""
        original = self._require(record_id)
        record = original.model_copy(
            update={"id": self.collection.next_id(), "title": f"Copy of {original.title}"}
        )
        self.collection.append(record)
        logger.info("Duplicated %s %s as %s", self.label.lower(), original.id, record.id)
        return record

    def delete(self, record_id: Any) -> RecordT:
        """Remove the record and return it."""
        record = self.collection.remove(record_id)
        if record is None:
            raise RecordNotFoundError(f"{self.label} not found")
        logger.info("Deleted %s %s", self.label.lower(), record.id)
        return record

    def find_by_title(self, title: str) -> Optional[RecordT]:
        """Exact, case-insensitive title lookup."""
        wanted = title.lower()
        return self.collection.find(lambda r: r.title.lower() == wanted)
