"""Turns raw add-row input into a normalized ProductRecord.

Checks run in a fixed order and the first failing rule raises; a draft
never collects more than one error.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import AbstractSet, Any, Mapping, Optional, Union

from ..errors import (
    DuplicateId,
    InvalidCategory,
    InvalidId,
    InvalidInStock,
    InvalidPrice,
    InvalidRating,
    RatingOutOfRange,
)
from ..models import CATEGORIES, CURRENCY_SYMBOL, MAX_TEXT_LENGTH, ProductRecord
from ..schemas import ProductDraft

TRUE_VALUES = {"yes", "true"}
FALSE_VALUES = {"no", "false"}
MIN_RATING = Decimal(1)
MAX_RATING = Decimal(5)
MAX_ID = Decimal(2**63 - 1)
TWO_PLACES = Decimal("0.01")
ONE_PLACE = Decimal("0.1")


def parse_number(value: Any) -> Optional[Decimal]:
    """Return ``value`` as a finite Decimal, or None if it is not a number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float, Decimal)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        return None
    if not text:
        return None
    try:
        number = Decimal(text)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def truncate(value: Any, limit: int = MAX_TEXT_LENGTH) -> str:
    text = "" if value is None else str(value)
    return text[:limit]


def format_price(amount: Decimal) -> str:
    amount = amount.copy_abs() if amount.is_zero() else amount
    return f"{CURRENCY_SYMBOL}{amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)}"


def format_rating(rating: Decimal) -> str:
    return str(rating.quantize(ONE_PLACE, rounding=ROUND_HALF_UP))


def canonical_in_stock(value: Any) -> Optional[str]:
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return "Yes"
    if text in FALSE_VALUES:
        return "No"
    return None


class RecordValidator:
    def validate(
        self,
        draft: Union[ProductDraft, Mapping[str, Any]],
        existing_ids: AbstractSet[int],
    ) -> ProductRecord:
        if not isinstance(draft, ProductDraft):
            draft = ProductDraft.model_validate(dict(draft))

        number = parse_number(draft.id)
        if number is None or abs(number) > MAX_ID or number != number.to_integral_value():
            raise InvalidId(f"ID must be a number. {draft.id} is not.")
        record_id = int(number)
        if record_id in existing_ids:
            raise DuplicateId(f"This ID ({draft.id}) already exists in the table")

        product = truncate(draft.product)
        brand = truncate(draft.brand)

        if draft.category not in CATEGORIES:
            raise InvalidCategory(f"{draft.category} is not a supported category")

        price = parse_number(draft.price)
        if price is None:
            raise InvalidPrice(f"Price must be a number. {draft.price} is not.")
        if price < 0:
            raise InvalidPrice(f"Price must not be negative. {draft.price} is below zero.")
        try:
            formatted_price = format_price(price)
        except InvalidOperation:
            raise InvalidPrice(f"Price {draft.price} is too large.") from None

        in_stock = canonical_in_stock(draft.in_stock)
        if in_stock is None:
            raise InvalidInStock(f"inStock must be a boolean. {draft.in_stock} is not.")

        rating = parse_number(draft.rating)
        if rating is None:
            raise InvalidRating(f"Rating must be a number. {draft.rating} is not.")
        if rating < MIN_RATING or rating > MAX_RATING:
            raise RatingOutOfRange(f"Rating must be between 1 and 5. {draft.rating} is not.")

        return ProductRecord(
            id=record_id,
            product=product,
            brand=brand,
            category=draft.category,
            price=formatted_price,
            in_stock=in_stock,
            rating=format_rating(rating),
        )
