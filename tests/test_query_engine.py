# tests/test_query_engine.py
from app.core import filter_products, paginate
from app.models import Product

PRODUCTS = [
    Product(id=1, price=50, name="kaas", description="", category="zuivel"),
    Product(id=2, price=10, name="t-shirt", description="", category="shirts"),
    Product(id=3, price=35, name="nike air max", description="", category="schoenen"),
    Product(id=4, price=10, name="Polo Shirt", description="", category="Shirts"),
]

def ids(products):
    return [p.id for p in products]

def test_no_filters_keeps_collection_order():
    assert ids(filter_products(PRODUCTS)) == [1, 2, 3, 4]

def test_price_bounds_are_inclusive_and_zero_means_unbounded():
    assert ids(filter_products(PRODUCTS, min_price=35)) == [1, 3]
    assert ids(filter_products(PRODUCTS, max_price=35)) == [2, 3, 4]
    assert ids(filter_products(PRODUCTS, min_price=10, max_price=35)) == [2, 3, 4]
    assert ids(filter_products(PRODUCTS, min_price=0, max_price=0)) == [1, 2, 3, 4]

def test_stricter_price_bound_never_grows_result():
    previous = len(PRODUCTS)
    for bound in (5, 10, 20, 35, 50, 60):
        count = len(filter_products(PRODUCTS, min_price=bound))
        assert count <= previous
        previous = count

def test_stricter_max_price_never_grows_result():
    previous = len(PRODUCTS)
    for bound in (60, 50, 35, 20, 10, 5):
        count = len(filter_products(PRODUCTS, max_price=bound))
        assert count <= previous
        previous = count
    assert previous == 0

def test_name_is_case_insensitive_substring():
    assert ids(filter_products(PRODUCTS, name="SHIRT")) == [2, 4]
    assert ids(filter_products(PRODUCTS, name="air")) == [3]

def test_category_is_case_insensitive_exact_match():
    assert ids(filter_products(PRODUCTS, category="shirts")) == [2, 4]
    assert ids(filter_products(PRODUCTS, category="shirt")) == []

def test_sort_low_to_high_is_stable():
    assert ids(filter_products(PRODUCTS, sort_by="LnH")) == [2, 4, 3, 1]

def test_sort_high_to_low_is_stable():
    assert ids(filter_products(PRODUCTS, sort_by="HnL")) == [1, 3, 2, 4]

def test_unknown_sort_keeps_order():
    assert ids(filter_products(PRODUCTS, sort_by="price")) == [1, 2, 3, 4]

def test_paginate_first_page():
    page, meta = paginate(PRODUCTS[:3], limit=2, offset=0)
    assert ids(page) == [1, 2]
    assert meta.model_dump() == {"current_page": 1, "total_pages": 2, "total_items": 3, "limit": 2, "offset": 0}

def test_paginate_clamps_partial_and_out_of_range_windows():
    page, meta = paginate(PRODUCTS, limit=3, offset=3)
    assert ids(page) == [4]
    assert meta.current_page == 2
    page, meta = paginate(PRODUCTS, limit=2, offset=10)
    assert page == []
    assert meta.total_items == 4
    assert meta.current_page == 6

def test_paginate_length_matches_window():
    for limit in range(1, 6):
        for offset in range(0, 7):
            page, meta = paginate(PRODUCTS, limit, offset)
            expected = min(limit, meta.total_items - offset) if offset < meta.total_items else 0
            assert len(page) == expected

def test_paginate_empty():
    page, meta = paginate([], limit=5, offset=0)
    assert page == []
    assert meta.total_pages == 0
    assert meta.current_page == 1
