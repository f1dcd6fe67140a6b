"""Product table JSON API."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from .. import schemas
from ..errors import RecordValidationError, UnknownField
from ..models import ProductRecord
from ..services.table import ProductTable

router = APIRouter(prefix="/products", tags=["Products"])


def get_table(request: Request) -> ProductTable:
    return request.app.state.table


def validation_error(exc: RecordValidationError) -> HTTPException:
    detail = schemas.ErrorOut(code=exc.code, message=exc.message).model_dump()
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("/", response_model=schemas.TableView)
def list_products(
    id_filter: Optional[str] = Query(None, alias="id"),
    product: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    price: Optional[str] = Query(None),
    in_stock: Optional[str] = Query(None, alias="inStock"),
    rating: Optional[str] = Query(None),
    table: ProductTable = Depends(get_table),
):
    filters = schemas.FilterSpec(
        id=id_filter,
        product=product,
        brand=brand,
        category=category,
        price=price,
        in_stock=in_stock,
        rating=rating,
    )
    return table.view(filters)


@router.post("/", response_model=ProductRecord, status_code=status.HTTP_201_CREATED)
def create_product(payload: schemas.ProductDraft, table: ProductTable = Depends(get_table)):
    try:
        return table.add_row(payload)
    except RecordValidationError as exc:
        raise validation_error(exc) from exc


@router.post("/sort", response_model=schemas.TableView)
def sort_products(payload: schemas.SortRequest, table: ProductTable = Depends(get_table)):
    try:
        return table.sort(payload.field, payload.descending)
    except UnknownField as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/{record_id}", response_model=ProductRecord)
def get_product(record_id: int, table: ProductTable = Depends(get_table)):
    record = table.store.get(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(record_id: int, table: ProductTable = Depends(get_table)):
    if not table.delete_row(record_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
