"""Product record model and field metadata."""

from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

CURRENCY_SYMBOL = "$"
MAX_TEXT_LENGTH = 50
CATEGORIES = ("Computers", "TVs", "Phones", "Cameras", "Smart Home Devices", "Video Games")

# public field names, in column order
FIELDS = ("id", "product", "brand", "category", "price", "inStock", "rating")
NUMERIC_FIELDS = frozenset({"id", "price", "rating"})
FIELD_LABELS = {
    "id": "ID",
    "product": "Product",
    "brand": "Brand",
    "category": "Category",
    "price": "Price",
    "inStock": "In Stock",
    "rating": "Rating",
}
_ATTRIBUTES = {"inStock": "in_stock"}


class ProductRecord(BaseModel):
    """A validated, normalized product row. Immutable once created."""

    id: int
    product: str = Field(..., max_length=MAX_TEXT_LENGTH)
    brand: str = Field(..., max_length=MAX_TEXT_LENGTH)
    category: str
    price: str = Field(..., description="currency prefix + 2 decimals, e.g. $10.00")
    in_stock: str = Field(..., alias="inStock", description="Yes / No")
    rating: str = Field(..., description="1.0 - 5.0, one decimal")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def price_value(self) -> Decimal:
        return Decimal(self.price[len(CURRENCY_SYMBOL):])

    @property
    def rating_value(self) -> Decimal:
        return Decimal(self.rating)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<ProductRecord id={self.id} product={self.product!r} price={self.price}>"


def attribute_name(field: str) -> str:
    return _ATTRIBUTES.get(field, field)


def display_value(record: ProductRecord, field: str) -> str:
    return str(getattr(record, attribute_name(field)))


def numeric_value(record: ProductRecord, field: str) -> Union[int, Decimal]:
    if field == "id":
        return record.id
    if field == "price":
        return record.price_value
    if field == "rating":
        return record.rating_value
    raise KeyError(field)
