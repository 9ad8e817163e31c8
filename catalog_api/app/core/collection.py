"""
Ordered in-memory record container.

A ``Collection`` owns the list of records of one resource type together
with the counter used to assign identifiers.  Identifiers come from a
monotonic counter that starts after the highest seeded id and never
goes backwards, so an id released by a deletion is never handed out
again, even if the collection is emptied and refilled.

Records are pydantic models with an integer ``id`` attribute.  The
container never copies records on read; services mutate them in place
through ``replace`` or by assigning attributes on the returned object.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from pydantic import BaseModel


RecordT = TypeVar("RecordT", bound=BaseModel)


def parse_id(raw: Any) -> Optional[int]:
    """Leniently convert a path segment to an integer id.

    Returns ``None`` for anything that is not a whole number, which
    callers treat as "no such record" rather than as an error.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


class Collection(Generic[RecordT]):
    """Ordered, mutable sequence of records with id assignment."""

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        self._records: List[RecordT] = list(records)
        self._next_id = max((r.id for r in self._records), default=0) + 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RecordT]:
        return iter(self._records)

    def all(self) -> List[RecordT]:
        """Return a snapshot of the records in collection order."""
        return list(self._records)

    def next_id(self) -> int:
        """Reserve and return the next identifier."""
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def index_of(self, record_id: Any) -> int:
        """Position of the first record whose id matches, or -1."""
        wanted = parse_id(record_id)
        if wanted is None:
            return -1
        for position, record in enumerate(self._records):
            if record.id == wanted:
                return position
        return -1

    def get(self, record_id: Any) -> Optional[RecordT]:
        position = self.index_of(record_id)
        return self._records[position] if position != -1 else None

    def first(self) -> Optional[RecordT]:
        return self._records[0] if self._records else None

    def last(self) -> Optional[RecordT]:
        return self._records[-1] if self._records else None

    def append(self, record: RecordT) -> RecordT:
        self._records.append(record)
        return record

    def replace(self, record_id: Any, record: RecordT) -> Optional[RecordT]:
        """Overwrite the slot holding ``record_id``; ``None`` if absent."""
        position = self.index_of(record_id)
        if position == -1:
            return None
        self._records[position] = record
        return record

    def remove(self, record_id: Any) -> Optional[RecordT]:
        """Remove and return the record, keeping the others in order."""
        position = self.index_of(record_id)
        if position == -1:
            return None
        return self._records.pop(position)

    def remove_where(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        """Remove every record matching ``predicate`` and return them.

        Survivors keep their relative order.
        """
        removed = [r for r in self._records if predicate(r)]
        self._records = [r for r in self._records if not predicate(r)]
        return removed

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [r for r in self._records if predicate(r)]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        for record in self._records:
            if predicate(record):
                return record
        return None

    def distinct(self, key: Callable[[RecordT], Any]) -> List[Any]:
        """Distinct projected values in first-occurrence order."""
        seen: dict = {}
        for record in self._records:
            seen.setdefault(key(record), None)
        return list(seen)

    def min_by(self, key: Callable[[RecordT], Any]) -> Optional[RecordT]:
        """Record with the smallest key; the earliest one wins ties.

        Records whose key is ``None`` are skipped.
        """
        best: Optional[RecordT] = None
        for record in self._records:
            if key(record) is None:
                continue
            if best is None or key(record) < key(best):
                best = record
        return best

    def max_by(self, key: Callable[[RecordT], Any]) -> Optional[RecordT]:
        """Record with the largest key; the earliest one wins ties."""
        best: Optional[RecordT] = None
        for record in self._records:
            if key(record) is None:
                continue
            if best is None or key(record) > key(best):
                best = record
        return best
