"""In-memory record store."""

from typing import FrozenSet, Iterable, Optional, Tuple

from .errors import DuplicateId
from .models import ProductRecord


class RecordStore:
    """Ordered product records plus the set of ids in use.

    Records are kept in insertion order until a caller reorders them.
    ``insert`` and ``delete`` are the only ways to change the contents.
    """

    def __init__(self) -> None:
        self._records: list[ProductRecord] = []
        self._ids: set[int] = set()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self._ids)

    def all(self) -> Tuple[ProductRecord, ...]:
        return tuple(self._records)

    def get(self, record_id: int) -> Optional[ProductRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def insert(self, record: ProductRecord) -> None:
        # the validator checked the same set; the store still refuses duplicates
        if record.id in self._ids:
            raise DuplicateId(f"This ID ({record.id}) already exists in the table")
        self._records.append(record)
        self._ids.add(record.id)

    def delete(self, record_id: int) -> bool:
        if record_id not in self._ids:
            return False
        self._ids.discard(record_id)
        self._records = [record for record in self._records if record.id != record_id]
        return True

    def reorder(self, records: Iterable[ProductRecord]) -> None:
        ordered = list(records)
        current = {record.id: record for record in self._records}
        if len(ordered) != len(current) or any(current.get(r.id) != r for r in ordered):
            raise ValueError("reorder expects a permutation of the stored records")
        if len({record.id for record in ordered}) != len(ordered):
            raise ValueError("reorder expects a permutation of the stored records")
        self._records = ordered
