"""Pydantic schemas for request/response bodies."""

from typing import Any, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import FIELDS, ProductRecord


class ProductDraft(BaseModel):
    """Raw field values of one add-row interaction, before validation."""

    id: Any = ""
    product: Any = ""
    brand: Any = ""
    category: Any = ""
    price: Any = ""
    in_stock: Any = Field("", alias="inStock")
    rating: Any = ""

    model_config = ConfigDict(populate_by_name=True)


class FilterSpec(BaseModel):
    id: Optional[str] = None
    product: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None
    price: Optional[str] = None
    in_stock: Optional[str] = Field(None, alias="inStock")
    rating: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def active(self) -> Iterator[Tuple[str, str]]:
        """Yield (field, expression) for every non-empty filter, in column order."""
        values = self.model_dump(by_alias=True)
        for field in FIELDS:
            value = values.get(field)
            if value:
                yield field, value


class SortRequest(BaseModel):
    field: str = Field(..., description="public field name, e.g. price or inStock")
    descending: Optional[bool] = Field(None, description="omit to toggle the field's last direction")


class RowOut(ProductRecord):
    visible: bool = True


class TableView(BaseModel):
    total: int
    visible: int
    sort_field: Optional[str] = None
    descending: Optional[bool] = None
    items: List[RowOut]


class ErrorOut(BaseModel):
    code: str
    message: str
