"""Per-field filters that decide which rows are visible.

Numeric columns accept ``>value``, ``<value`` or a plain value for equality.
Text columns match case-insensitive substrings of the displayed value.
"""

from __future__ import annotations

import operator
from typing import Iterable, List

from ..models import NUMERIC_FIELDS, ProductRecord, display_value, numeric_value
from ..schemas import FilterSpec, RowOut
from .validator import parse_number

COMPARATORS = {">": operator.gt, "<": operator.lt}


def _matches_numeric(record: ProductRecord, field: str, expression: str) -> bool:
    compare = COMPARATORS.get(expression[0], operator.eq)
    operand_text = expression[1:] if compare is not operator.eq else expression
    operand_text = operand_text.strip()
    if not operand_text:
        # a bare ">" or "<" while the user is still typing
        return True
    operand = parse_number(operand_text)
    if operand is None:
        return False
    return compare(numeric_value(record, field), operand)


def _matches_text(record: ProductRecord, field: str, expression: str) -> bool:
    return expression.lower() in display_value(record, field).lower()


def matches(record: ProductRecord, spec: FilterSpec) -> bool:
    for field, expression in spec.active():
        if field in NUMERIC_FIELDS:
            passed = _matches_numeric(record, field, expression)
        else:
            passed = _matches_text(record, field, expression)
        if not passed:
            return False
    return True


def apply_filter(records: Iterable[ProductRecord], spec: FilterSpec) -> List[RowOut]:
    return [RowOut(**record.model_dump(), visible=matches(record, spec)) for record in records]
