"""FastAPI entrypoint with API + the product table page."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Form, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from .config import Settings, get_settings
from .errors import RecordValidationError, UnknownField
from .models import CATEGORIES, FIELD_LABELS, FIELDS
from .routers import products
from .routers.products import get_table
from .schemas import FilterSpec, ProductDraft
from .services.seed import import_csv, seed_demo
from .services.table import ProductTable

TEMPLATE_DIR = Path(__file__).parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def filters_from_query(request: Request) -> FilterSpec:
    params = request.query_params
    return FilterSpec.model_validate({field: params.get(field) for field in FIELDS})


def back_to_table(request: Request) -> RedirectResponse:
    query = request.url.query
    return RedirectResponse(url=f"/?{query}" if query else "/", status_code=status.HTTP_303_SEE_OTHER)


def render_table(
    request: Request,
    table: ProductTable,
    error: Optional[str] = None,
    draft: Optional[ProductDraft] = None,
    status_code: int = status.HTTP_200_OK,
):
    filters = filters_from_query(request)
    context = {
        "view": table.view(filters),
        "filters": filters.model_dump(by_alias=True),
        "fields": FIELDS,
        "labels": FIELD_LABELS,
        "categories": CATEGORIES,
        "query": request.url.query,
        "error": error,
        "draft": draft.model_dump(by_alias=True) if draft else {},
    }
    return templates.TemplateResponse(request, "table.html", context, status_code=status_code)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="1.0.0")
    app.state.table = ProductTable()

    if settings.seed_demo_data:
        seed_demo(app.state.table)
    if settings.seed_csv_path:
        import_csv(settings.seed_csv_path, app.state.table)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["System"])
    def health_check():
        return {"status": "ok", "environment": settings.environment}

    @app.get("/", response_class=HTMLResponse, tags=["Dashboard"])
    def dashboard(request: Request, table: ProductTable = Depends(get_table)):
        return render_table(request, table)

    @app.post("/admin/products", response_class=HTMLResponse, tags=["Dashboard"])
    def create_product_form(
        request: Request,
        record_id: str = Form("", alias="id"),
        product: str = Form(""),
        brand: str = Form(""),
        category: str = Form(""),
        price: str = Form(""),
        in_stock: str = Form("", alias="inStock"),
        rating: str = Form(""),
        table: ProductTable = Depends(get_table),
    ):
        draft = ProductDraft(
            id=record_id,
            product=product,
            brand=brand,
            category=category,
            price=price,
            in_stock=in_stock,
            rating=rating,
        )
        try:
            table.add_row(draft)
        except RecordValidationError as exc:
            return render_table(request, table, error=exc.message, draft=draft, status_code=status.HTTP_400_BAD_REQUEST)
        return back_to_table(request)

    @app.post("/admin/products/{record_id}/delete", tags=["Dashboard"])
    def remove_product(request: Request, record_id: int, table: ProductTable = Depends(get_table)):
        table.delete_row(record_id)
        return back_to_table(request)

    @app.post("/admin/sort/{field}", tags=["Dashboard"])
    def sort_column(request: Request, field: str, table: ProductTable = Depends(get_table)):
        try:
            table.sort(field)
        except UnknownField as exc:
            logger.warning("Ignored sort request: %s", exc)
        return back_to_table(request)

    app.include_router(products.router)

    logger.info("%s started with %d products", settings.app_name, len(app.state.table.store))
    return app


app = create_app()
