"""ProductTable ties the store, validator, filters and sorting together."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from ..errors import RecordValidationError
from ..models import ProductRecord
from ..schemas import FilterSpec, ProductDraft, TableView
from ..store import RecordStore
from .filtering import apply_filter
from .sorting import SortToggle, sort_records
from .validator import RecordValidator

logger = logging.getLogger(__name__)


class ProductTable:
    def __init__(self, store: Optional[RecordStore] = None, validator: Optional[RecordValidator] = None):
        self.store = store if store is not None else RecordStore()
        self.validator = validator if validator is not None else RecordValidator()
        self.toggle = SortToggle()
        self.sort_field: Optional[str] = None
        self.descending: Optional[bool] = None

    def add_row(self, draft: Union[ProductDraft, Mapping[str, Any]]) -> ProductRecord:
        try:
            record = self.validator.validate(draft, self.store.ids)
        except RecordValidationError as exc:
            logger.warning("Rejected product draft (%s): %s", exc.code, exc.message)
            raise
        self.store.insert(record)
        logger.info("Added product %s (%s)", record.id, record.product)
        return record

    def delete_row(self, record_id: int) -> bool:
        removed = self.store.delete(record_id)
        if removed:
            logger.info("Deleted product %s", record_id)
        return removed

    def sort(self, field: str, descending: Optional[bool] = None) -> TableView:
        if descending is None:
            descending = self.toggle.next_direction(field)
        ordered = sort_records(self.store.all(), field, descending)
        self.toggle.record(field, descending)
        self.store.reorder(ordered)
        self.sort_field, self.descending = field, descending
        logger.info("Sorted %d products by %s (%s)", len(ordered), field, "desc" if descending else "asc")
        return self.view()

    def view(self, filters: Optional[FilterSpec] = None) -> TableView:
        rows = apply_filter(self.store.all(), filters or FilterSpec())
        return TableView(
            total=len(rows),
            visible=sum(1 for row in rows if row.visible),
            sort_field=self.sort_field,
            descending=self.descending,
            items=rows,
        )
