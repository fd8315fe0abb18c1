# app/handlers.py
import logging
import math
import re
from typing import Optional

from pydantic import ValidationError

from .core import SORT_OPTIONS, filter_products, paginate
from .database import CatalogStore
from .errors import InvalidInput, ProductNotFound
from .models import PaginatedProducts, PriceRequest, PriceResponse, Product, ProductIn

# This file contains the logic behind every endpoint. Routes in app.main
# only pull raw values out of the request and hand them over.

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None or not _INT_RE.fullmatch(raw):
        return None
    return int(raw)


def _parse_price(raw: Optional[str], message: str) -> float:
    """Decode an optional non-negative decimal; absent or empty means 0."""
    if not raw:
        return 0.0
    if not _DECIMAL_RE.fullmatch(raw):
        raise InvalidInput(message)
    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(message)
    return value


def parse_product_id(raw: str) -> int:
    product_id = _parse_int(raw)
    if product_id is None:
        raise InvalidInput("invalid product id")
    return product_id


def decode_product(body: bytes, strict: bool = False) -> ProductIn:
    payload, problems = ProductIn.from_body(body)
    if problems:
        if strict:
            raise InvalidInput("invalid request body: " + "; ".join(problems))
        logger.info("Tolerating malformed product body: %s", "; ".join(problems))
    return payload


# Product endpoints
def list_products_logic(
    store: CatalogStore,
    limit: Optional[str],
    offset: Optional[str],
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    name: Optional[str] = None,
    sort_by: Optional[str] = None,
    category: Optional[str] = None,
) -> PaginatedProducts:
    limit_value = _parse_int(limit)
    if limit_value is None or limit_value < 1:
        raise InvalidInput("invalid limit value")
    offset_value = _parse_int(offset)
    if offset_value is None or offset_value < 0:
        raise InvalidInput("invalid offset value")

    min_value = _parse_price(min_price, "invalid minimum price value")
    max_value = _parse_price(max_price, "invalid maximum price value")
    # a zero maximum means "no upper bound", so it never conflicts with the minimum
    if min_value > 0 and 0 < max_value < min_value:
        raise InvalidInput("maximum price cannot be less than minimum price")

    sort_by = sort_by or ""
    if sort_by and sort_by not in SORT_OPTIONS:
        raise InvalidInput("invalid sort_by value")

    category = category or ""
    if category and not store.has_category(category):
        raise InvalidInput("invalid category value")

    filtered = filter_products(
        store.snapshot(),
        max_price=max_value,
        min_price=min_value,
        name=name or "",
        sort_by=sort_by,
        category=category,
    )
    page, pagination = paginate(filtered, limit_value, offset_value)
    return PaginatedProducts(data=page, pagination=pagination)


def get_product_logic(store: CatalogStore, raw_id: str) -> Product:
    product = store.get(parse_product_id(raw_id))
    if product is None:
        raise ProductNotFound()
    return product


def add_product_logic(store: CatalogStore, body: bytes, strict: bool = False) -> Product:
    return store.add(decode_product(body, strict))


def update_product_logic(store: CatalogStore, raw_id: str, body: bytes, strict: bool = False) -> Product:
    product_id = parse_product_id(raw_id)
    if store.get(product_id) is None:
        raise ProductNotFound()
    return store.replace(product_id, decode_product(body, strict))


def delete_product_logic(store: CatalogStore, raw_id: str) -> None:
    store.remove(parse_product_id(raw_id))


def calculate_price_logic(store: CatalogStore, body: bytes) -> PriceResponse:
    try:
        req = PriceRequest.model_validate_json(body)
    except ValidationError:
        raise InvalidInput("invalid request body")

    product = store.find_by_name(req.name)
    if product is None:
        raise ProductNotFound()

    return PriceResponse(
        name=product.name,
        quantity=req.quantity,
        total_price=product.price * req.quantity,
    )
