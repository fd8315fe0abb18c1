# app/main.py
import logging
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response

from . import handlers
from .config import Settings, settings as default_settings
from .database import CatalogStore
from .errors import CatalogError
from .logging_config import setup_logging
from .models import PaginatedProducts, PriceResponse, Product

logger = logging.getLogger(__name__)


# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> CatalogStore:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# ---------------------------
# Error translation
# ---------------------------
async def catalog_error_handler(request: Request, exc: CatalogError) -> PlainTextResponse:
    logger.info("%s %s rejected (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return PlainTextResponse("internal server error", status_code=500)


def create_app(settings: Optional[Settings] = None, store: Optional[CatalogStore] = None) -> FastAPI:
    """Build the catalog application.

    Each call gets its own store unless one is passed in, so tests can
    spin up isolated instances.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else CatalogStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/products", response_model=PaginatedProducts)
    async def list_products(
        limit: Optional[str] = Query(None),
        offset: Optional[str] = Query(None),
        min_price: Optional[str] = Query(None),
        max_price: Optional[str] = Query(None),
        name: Optional[str] = Query(None),
        sort_by: Optional[str] = Query(None),
        category: Optional[str] = Query(None),
        store: CatalogStore = Depends(get_store),
    ):
        return handlers.list_products_logic(
            store, limit, offset,
            min_price=min_price,
            max_price=max_price,
            name=name,
            sort_by=sort_by,
            category=category,
        )

    @app.post("/products/calculatePrice", response_model=PriceResponse)
    async def calculate_price(request: Request, store: CatalogStore = Depends(get_store)):
        return handlers.calculate_price_logic(store, await request.body())

    @app.get("/products/{product_id}", response_model=Product)
    async def get_product(product_id: str, store: CatalogStore = Depends(get_store)):
        return handlers.get_product_logic(store, product_id)

    @app.post("/products", response_model=Product)
    async def add_product(
        request: Request,
        store: CatalogStore = Depends(get_store),
        cfg: Settings = Depends(get_settings),
    ):
        return handlers.add_product_logic(store, await request.body(), strict=cfg.strict_bodies)

    @app.put("/products/{product_id}", response_model=Product)
    async def update_product(
        product_id: str,
        request: Request,
        store: CatalogStore = Depends(get_store),
        cfg: Settings = Depends(get_settings),
    ):
        return handlers.update_product_logic(store, product_id, await request.body(), strict=cfg.strict_bodies)

    @app.delete("/products/{product_id}")
    async def delete_product(product_id: str, store: CatalogStore = Depends(get_store)):
        handlers.delete_product_logic(store, product_id)
        return Response(status_code=200, media_type="application/json")

    # ---------------------------
    # Utility: reset (for tests/demo)
    # ---------------------------
    @app.post("/reset")
    async def reset_all(store: CatalogStore = Depends(get_store)):
        store.reset()
        return {"status": "reset"}

    return app


app = create_app()


def serve() -> None:
    import uvicorn

    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
