"""Demo products and CSV loading for a fresh table."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

from ..errors import DuplicateId, RecordValidationError
from .table import ProductTable

logger = logging.getLogger(__name__)

DEMO_PRODUCTS = (
    {"id": 1, "product": "iPhone X", "brand": "Apple", "category": "Phones", "price": 749.99, "inStock": True, "rating": 4},
    {"id": 2, "product": "Inspiron 15", "brand": "Dell", "category": "Computers", "price": 1400, "inStock": False, "rating": 3},
    {"id": 3, "product": "Pixel 2 XL", "brand": "Google", "category": "Phones", "price": 600, "inStock": False, "rating": 4},
    {"id": 4, "product": "EOS Rebel", "brand": "Canon", "category": "Cameras", "price": 345.49, "inStock": True, "rating": 5},
)


@dataclass
class ImportStats:
    created: int = 0
    skipped: int = 0
    rejected: int = 0


def load_rows(table: ProductTable, rows: Iterable[Mapping[str, object]]) -> ImportStats:
    stats = ImportStats()
    for row in rows:
        try:
            table.add_row(row)
        except DuplicateId:
            stats.skipped += 1
        except RecordValidationError:
            stats.rejected += 1
        else:
            stats.created += 1
    return stats


def seed_demo(table: ProductTable) -> ImportStats:
    return load_rows(table, DEMO_PRODUCTS)


def import_csv(csv_path: Path, table: ProductTable) -> ImportStats:
    with csv_path.open(newline="", encoding="utf-8") as fh:
        stats = load_rows(table, csv.DictReader(fh))
    logger.info(
        "Imported %s: created %d, skipped %d duplicates, rejected %d",
        csv_path, stats.created, stats.skipped, stats.rejected,
    )
    return stats
