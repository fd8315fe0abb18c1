# app/core.py
from typing import List, Sequence, Tuple

from .models import Pagination, Product

SORT_LOW_TO_HIGH = "LnH"
SORT_HIGH_TO_LOW = "HnL"
SORT_OPTIONS = (SORT_LOW_TO_HIGH, SORT_HIGH_TO_LOW)

# This file holds the query engine: pure functions over a snapshot of the store.


def _matches(p: Product, max_price: float, min_price: float, name: str, category: str) -> bool:
    if min_price > 0 and p.price < min_price:
        return False
    if max_price > 0 and p.price > max_price:
        return False
    if name and name.lower() not in p.name.lower():
        return False
    if category and p.category.lower() != category.lower():
        return False
    return True


def filter_products(
    products: Sequence[Product],
    max_price: float = 0.0,
    min_price: float = 0.0,
    name: str = "",
    sort_by: str = "",
    category: str = "",
) -> List[Product]:
    """Apply the AND-ed price/name/category predicate, then sort by price.

    A price bound of zero or less means "no bound". ``sort_by`` values other
    than ``LnH``/``HnL`` keep collection order. ``list.sort`` is stable, so
    equal prices keep their relative order in both directions.
    """
    out = [p for p in products if _matches(p, max_price, min_price, name, category)]
    if sort_by == SORT_LOW_TO_HIGH:
        out.sort(key=lambda p: p.price)
    elif sort_by == SORT_HIGH_TO_LOW:
        out.sort(key=lambda p: p.price, reverse=True)
    return out


def paginate(items: Sequence[Product], limit: int, offset: int) -> Tuple[List[Product], Pagination]:
    """Slice ``[offset, offset + limit)`` out of ``items``, clamped to its length."""
    total = len(items)
    start = min(offset, total)
    end = min(offset + limit, total)
    pagination = Pagination(
        current_page=offset // limit + 1,
        total_pages=(total + limit - 1) // limit,
        total_items=total,
        limit=limit,
        offset=offset,
    )
    return list(items[start:end]), pagination
