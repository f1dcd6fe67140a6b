"""Column sorting for the product table."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Iterable, List

from pyuca import Collator

from ..errors import UnknownField
from ..models import FIELDS, NUMERIC_FIELDS, ProductRecord, display_value, numeric_value


@lru_cache
def get_collator() -> Collator:
    # loads the Unicode collation table once
    return Collator()


def _text_key(record: ProductRecord, field: str):
    text = display_value(record, field)
    return get_collator().sort_key(text), text


def sort_records(records: Iterable[ProductRecord], field: str, descending: bool = False) -> List[ProductRecord]:
    """Return the records ordered by ``field``; ``descending=True`` puts the largest first."""
    if field not in FIELDS:
        raise UnknownField(field)
    if field in NUMERIC_FIELDS:
        return sorted(records, key=lambda record: numeric_value(record, field), reverse=descending)
    return sorted(records, key=lambda record: _text_key(record, field), reverse=descending)


class SortToggle:
    """Remembers the last direction used for each column header.

    The first activation of a column sorts ascending; activating the same
    column again flips its direction.
    """

    def __init__(self) -> None:
        self._last: Dict[str, bool] = {}

    def next_direction(self, field: str) -> bool:
        if field not in FIELDS:
            raise UnknownField(field)
        return not self._last[field] if field in self._last else False

    def record(self, field: str, descending: bool) -> None:
        self._last[field] = descending
